# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0


"""
PDF inspection utilities.
"""

import io
from pathlib import Path
from typing import Optional, Union

from pypdf import PdfReader

from pdf_ua_generator.logging_helper import setup_logger, InspectionError
from pdf_ua_generator.models import PdfSummary

# Set up module-level logger
logger = setup_logger(__name__)


def _resolve(value):
    # dict.get on pypdf objects does not follow indirect references
    return value.get_object() if hasattr(value, "get_object") else value


def _text(value) -> Optional[str]:
    value = _resolve(value)
    return None if value is None else str(value)


def _flag(value) -> bool:
    # pypdf BooleanObject keeps the Python bool in .value
    value = _resolve(value)
    return bool(getattr(value, "value", value))


def describe_pdf(source: Union[str, Path, bytes]) -> PdfSummary:
    """
    Read back the document properties relevant to PDF/UA.

    Args:
        source: Path to a PDF file, or the PDF bytes

    Returns:
        PdfSummary with header version, page count, info fields, language and
        tagging flags

    Raises:
        InspectionError: If the PDF cannot be read
    """
    try:
        if isinstance(source, (bytes, bytearray)):
            reader = PdfReader(io.BytesIO(source))
        else:
            logger.debug(f"Inspecting PDF: {source}")
            reader = PdfReader(str(source))

        header = reader.pdf_header
        info = reader.metadata or {}
        root = reader.trailer["/Root"]
        mark_info = _resolve(root.get("/MarkInfo")) or {}
        preferences = _resolve(root.get("/ViewerPreferences")) or {}

        return PdfSummary(
            version=header[len("%PDF-"):] if header.startswith("%PDF-") else None,
            page_count=len(reader.pages),
            title=_text(info.get("/Title")),
            author=_text(info.get("/Author")),
            subject=_text(info.get("/Subject")),
            keywords=_text(info.get("/Keywords")),
            creator=_text(info.get("/Creator")),
            language=_text(root.get("/Lang")),
            marked=_flag(mark_info.get("/Marked", False)),
            display_doc_title=_flag(preferences.get("/DisplayDocTitle", False)),
        )
    except Exception as e:
        raise InspectionError(f"Could not read PDF: {e}") from e
