# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Pydantic models for structured content, document settings and PDF summaries.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from typing import Dict, List, Optional, Any, Iterable, Mapping, Union, Literal
from enum import Enum

from pdf_ua_generator.logging_helper import ConfigurationError


class BlockType(str, Enum):
    """Enum for the kinds of content block the renderer understands."""

    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    PARAGRAPH = "p"
    UNORDERED_LIST = "ul"
    ORDERED_LIST = "ol"
    TABLE = "table"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return cls.OTHER


HEADING_LEVELS = {BlockType.H1: 1, BlockType.H2: 2, BlockType.H3: 3}

PDF_VERSION_PATTERN = re.compile(r"^(1\.[0-7]|2\.0)$")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class ContentBlock(BaseModel):
    """Model for one semantic unit of document content."""

    type: BlockType = BlockType.PARAGRAPH
    content: str = ""
    items: List[str] = Field(default_factory=list)
    headers: Optional[List[str]] = None
    rows: Optional[List[List[str]]] = None
    attributes: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator("type", mode="before")
    @classmethod
    def _resolve_type(cls, value):
        if value is None:
            return BlockType.PARAGRAPH
        if isinstance(value, BlockType):
            return value
        return BlockType(_as_text(value))

    @field_validator("content", mode="before")
    @classmethod
    def _stringify_content(cls, value):
        return _as_text(value)

    @field_validator("items", mode="before")
    @classmethod
    def _stringify_items(cls, value):
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            return value
        return [_as_text(item) for item in value]

    @field_validator("headers", mode="before")
    @classmethod
    def _stringify_headers(cls, value):
        if value is None or not isinstance(value, (list, tuple)):
            return value
        return [_as_text(item) for item in value]

    @field_validator("rows", mode="before")
    @classmethod
    def _stringify_rows(cls, value):
        if value is None or not isinstance(value, (list, tuple)):
            return value
        return [
            [_as_text(cell) for cell in row] if isinstance(row, (list, tuple)) else row
            for row in value
        ]

    @field_validator("attributes", mode="before")
    @classmethod
    def _stringify_attributes(cls, value):
        if value is None:
            return {}
        if isinstance(value, Mapping):
            return {str(key): _as_text(val) for key, val in value.items()}
        return value

    @property
    def heading_level(self) -> Optional[int]:
        """Heading level 1-3, or None for non-heading blocks."""
        return HEADING_LEVELS.get(self.type)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContentBlock":
        """Build a block from a plain mapping such as a decoded JSON object."""
        return cls(**dict(data))


def coerce_blocks(
    blocks: Iterable[Union[ContentBlock, Mapping[str, Any]]]
) -> List[ContentBlock]:
    """
    Normalize a sequence of blocks or plain mappings into ContentBlock objects.

    Args:
        blocks: ContentBlock instances and/or mappings, in document order

    Returns:
        List of ContentBlock objects in the same order
    """
    return [
        block if isinstance(block, ContentBlock) else ContentBlock.from_dict(block)
        for block in blocks
    ]


class Margins(BaseModel):
    """Model for page margins, in millimetres."""

    left: float = 15.0
    top: float = 15.0
    right: float = 15.0
    bottom: float = 15.0

    model_config = ConfigDict(frozen=True, extra="forbid")


class DocumentConfig(BaseModel):
    """Model for the settings applied to every generated document."""

    title: str = "PDF/UA Document"
    author: str = "PDF/UA Generator"
    subject: str = "Accessible PDF Document"
    keywords: str = "PDF, UA, Accessibility"
    creator: str = "pdf-ua-generator"
    language: str = "en-US"
    pdf_version: str = "1.7"
    orientation: str = "P"  # P=Portrait, L=Landscape
    unit: str = "mm"
    format: str = "A4"
    margins: Margins = Field(default_factory=Margins)
    text_direction: Literal["ltr", "rtl"] = "ltr"
    font_family: str = "helvetica"
    font_size: float = 12.0
    font_path: Optional[str] = None
    display_doc_title: bool = True
    pdfua_markers: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("pdf_version", mode="before")
    @classmethod
    def _check_pdf_version(cls, value):
        value = _as_text(value).strip()
        if not PDF_VERSION_PATTERN.match(value):
            raise ValueError(f"Unsupported PDF version '{value}' (expected 1.0-1.7 or 2.0)")
        return value

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> "DocumentConfig":
        """
        Return a new config with the given values merged over this one.

        The merge is shallow: each key present in ``overrides`` replaces the
        current value, every other key is kept.

        Raises:
            ConfigurationError: If a key is unknown or a value has the wrong type
        """
        data = self.model_dump()
        data.update(overrides or {})
        try:
            return DocumentConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid document configuration: {e}") from e


DEFAULT_CONFIG = DocumentConfig()


class PdfSummary(BaseModel):
    """Model for the properties read back from a generated PDF."""

    version: Optional[str] = None
    page_count: int = 0
    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    keywords: Optional[str] = None
    creator: Optional[str] = None
    language: Optional[str] = None
    marked: bool = False
    display_doc_title: bool = False
