# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
PDF/UA markers for freshly generated documents.

Completes the catalog of an engine-produced PDF for PDF/UA-1 by:
- Marking the document as tagged
- Setting the document language and reading direction
- Asking viewers to show the title instead of the file name
- Writing XMP metadata with the PDF/UA identification schema
"""

import io
import logging

import pikepdf
from pikepdf import Name, String, Dictionary

from pdf_ua_generator.models import DocumentConfig

logger = logging.getLogger(__name__)

DIRECTIONS = {"ltr": Name.L2R, "rtl": Name.R2L}


def apply_pdfua_markers(pdf_bytes: bytes, config: DocumentConfig) -> bytes:
    """
    Apply PDF/UA-1 markers to a PDF held in memory.

    Args:
        pdf_bytes: PDF produced by the rendering engine
        config: Settings the document was generated with

    Returns:
        bytes: The updated PDF, declaring ``config.pdf_version`` in its header
    """
    buffer = io.BytesIO()

    with pikepdf.open(io.BytesIO(pdf_bytes)) as document:
        _mark_tagged(document)
        _set_language(document, config)
        _set_viewer_preferences(document, config)
        _update_metadata(document, config)

        document.save(buffer, force_version=config.pdf_version)

    logger.debug(f"Applied PDF/UA markers (version {config.pdf_version})")
    return buffer.getvalue()


def _mark_tagged(document: pikepdf.Pdf) -> None:
    """Flag the document as tagged content."""
    if Name.MarkInfo not in document.Root:
        document.Root.MarkInfo = Dictionary()

    document.Root.MarkInfo[Name.Marked] = True


def _set_language(document: pikepdf.Pdf, config: DocumentConfig) -> None:
    document.Root[Name.Lang] = String(config.language)


def _set_viewer_preferences(document: pikepdf.Pdf, config: DocumentConfig) -> None:
    if Name.ViewerPreferences not in document.Root:
        document.Root.ViewerPreferences = Dictionary()

    preferences = document.Root.ViewerPreferences
    preferences[Name.DisplayDocTitle] = config.display_doc_title
    preferences[Name.Direction] = DIRECTIONS[config.text_direction]


def _update_metadata(document: pikepdf.Pdf, config: DocumentConfig) -> None:
    """Mirror the document info into XMP and add the PDF/UA identifier."""
    with document.open_metadata(set_pikepdf_as_editor=False) as meta:
        meta.load_from_docinfo(document.docinfo)
        meta["dc:title"] = config.title
        meta["dc:language"] = {config.language}

    try:
        with document.open_metadata(set_pikepdf_as_editor=False) as meta:
            meta["pdfuaid:part"] = "1"
    except Exception as e:
        logger.warning(f"Error adding PDF/UA identification to XMP metadata: {e}")
