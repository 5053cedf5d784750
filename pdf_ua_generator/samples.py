# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""Demonstration document used by the ``pdf-ua generate`` command."""

SAMPLE_CONFIG = {
    "title": "Sample PDF/UA Document",
    "author": "PDF/UA Generator",
    "subject": "Demonstration of PDF/UA Accessibility Features",
    "keywords": "PDF, Universal Accessibility, Structured Content, Python",
    "language": "en-US",
}

SAMPLE_CONTENT = [
    {"type": "h1", "content": "PDF/UA Proof of Concept"},
    {
        "type": "p",
        "content": "This is a demonstration of PDF/UA (Universal Accessibility) "
        "document generation using Python and the fpdf2 library.",
    },
    {"type": "h2", "content": "What is PDF/UA?"},
    {
        "type": "p",
        "content": "PDF/UA (ISO 14289-1) is an ISO standard for creating accessible "
        "PDF documents that can be read by assistive technologies.",
    },
    {"type": "h2", "content": "Key Features"},
    {
        "type": "ul",
        "items": [
            "Proper document structure with semantic tags",
            "Alternative text for images",
            "Logical reading order",
            "Language specification",
            "Document metadata",
        ],
    },
    {"type": "h2", "content": "Structured Content Example"},
    {"type": "p", "content": "Tables are properly tagged for screen readers:"},
    {
        "type": "table",
        "headers": ["Feature", "Status", "Description"],
        "rows": [
            ["Tagged Structure", "Implemented", "Document uses semantic HTML tags"],
            ["Metadata", "Implemented", "Document includes title, author, and language"],
            ["Reading Order", "Implemented", "Content follows logical sequence"],
        ],
    },
    {"type": "h2", "content": "Conclusion"},
    {
        "type": "p",
        "content": "This proof of concept demonstrates how to create accessible PDF "
        "documents with Python, with proper structure and tagging.",
    },
]
