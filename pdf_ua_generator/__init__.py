# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
PDF/UA Generator Package.

This package renders structured content (headings, paragraphs, lists, tables)
to semantic HTML and turns it into PDF documents tagged for accessibility.

Main Components:
- Structured content to HTML rendering
- PDF generation with document metadata and language settings
- PDF/UA-1 catalog and XMP markers
"""

__version__ = "1.0.0"

from .generator import PdfUaGenerator
from .logging_helper import (
    PdfUaError,
    DocumentGenerationError,
    ConfigurationError,
    RenderError,
    WriteError,
    InspectionError,
)
from .models import BlockType, ContentBlock, DocumentConfig, Margins, DEFAULT_CONFIG
from .renderer import StructuredHtmlRenderer, render

__all__ = [
    "PdfUaGenerator",
    "StructuredHtmlRenderer",
    "render",
    "BlockType",
    "ContentBlock",
    "DocumentConfig",
    "Margins",
    "DEFAULT_CONFIG",
    "PdfUaError",
    "DocumentGenerationError",
    "ConfigurationError",
    "RenderError",
    "WriteError",
    "InspectionError",
]
