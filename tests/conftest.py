"""Shared fixtures for the pdf_ua_generator tests."""

import os

import pytest

from pdf_ua_generator.generator import PdfUaGenerator


@pytest.fixture
def generator():
    return PdfUaGenerator({"title": "Test PDF", "author": "Test Author"})


@pytest.fixture
def sample_blocks():
    return [
        {"type": "h1", "content": "Test Heading"},
        {"type": "p", "content": "Test paragraph"},
        {"type": "ul", "items": ["Item 1", "Item 2", "Item 3"]},
        {
            "type": "table",
            "headers": ["Column 1", "Column 2"],
            "rows": [["Data 1", "Data 2"], ["Data 3", "Data 4"]],
        },
    ]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PDF_UA_* variables that would leak into config resolution."""
    for name in list(os.environ):
        if name.startswith("PDF_UA_"):
            monkeypatch.delenv(name)
    return monkeypatch
