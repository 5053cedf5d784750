# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML rendering of structured content.

Converts an ordered sequence of content blocks (headings, paragraphs, lists,
tables) into the semantic markup consumed by the PDF rendering engine. Every
piece of user text is escaped before it is inserted.
"""

import html
from typing import Any, Callable, Dict, Iterable, List, Mapping, Union

from pdf_ua_generator.logging_helper import setup_logger
from pdf_ua_generator.models import BlockType, ContentBlock, coerce_blocks

# Set up module-level logger
logger = setup_logger(__name__)

# Presentation attributes fixed on every table
TABLE_ATTRIBUTES = {"border": "1", "cellpadding": "4"}


def escape(text: str) -> str:
    """Escape the five HTML-special characters: & < > " '."""
    return html.escape(text, quote=True)


def render_attributes(attributes: Mapping[str, str]) -> str:
    """Serialize attributes as ` key="value"` pairs, in mapping order."""
    return "".join(
        f' {escape(key)}="{escape(value)}"' for key, value in attributes.items()
    )


class StructuredHtmlRenderer:
    """
    Renders content blocks to a single HTML document string.

    Dispatch is keyed on BlockType; any kind without a handler (including
    BlockType.OTHER) falls back to paragraph rendering.
    """

    def __init__(self):
        self._handlers: Dict[BlockType, Callable[[ContentBlock], str]] = {
            BlockType.H1: self._render_heading,
            BlockType.H2: self._render_heading,
            BlockType.H3: self._render_heading,
            BlockType.PARAGRAPH: self._render_paragraph,
            BlockType.UNORDERED_LIST: self._render_list,
            BlockType.ORDERED_LIST: self._render_list,
            BlockType.TABLE: self._render_table,
        }

    def render(
        self, blocks: Iterable[Union[ContentBlock, Mapping[str, Any]]]
    ) -> str:
        """
        Render blocks, in input order, inside an html/body wrapper.

        Args:
            blocks: ContentBlock objects or plain mappings with the same keys

        Returns:
            The complete markup string
        """
        parts: List[str] = ["<html><body>"]
        for block in coerce_blocks(blocks):
            parts.append(self.render_block(block))
        parts.append("</body></html>")
        return "".join(parts)

    def render_block(self, block: ContentBlock) -> str:
        """Render a single block."""
        handler = self._handlers.get(block.type)
        if handler is None:
            logger.debug(f"Rendering block of type '{block.type.value}' as a paragraph")
            handler = self._render_paragraph
        return handler(block)

    def _render_heading(self, block: ContentBlock) -> str:
        tag = f"h{block.heading_level}"
        return (
            f"<{tag}{render_attributes(block.attributes)}>"
            f"{escape(block.content)}</{tag}>"
        )

    def _render_paragraph(self, block: ContentBlock) -> str:
        return f"<p{render_attributes(block.attributes)}>{escape(block.content)}</p>"

    def _render_list(self, block: ContentBlock) -> str:
        tag = "ol" if block.type == BlockType.ORDERED_LIST else "ul"
        items = "".join(f"<li>{escape(item)}</li>" for item in block.items)
        return f"<{tag}{render_attributes(block.attributes)}>{items}</{tag}>"

    def _render_table(self, block: ContentBlock) -> str:
        attributes = dict(TABLE_ATTRIBUTES)
        for key, value in block.attributes.items():
            # border and cellpadding are fixed presentation
            if key.lower() not in TABLE_ATTRIBUTES:
                attributes[key] = value

        parts = [f"<table{render_attributes(attributes)}>"]

        if block.headers is not None:
            parts.append("<thead><tr>")
            parts.extend(f"<th>{escape(header)}</th>" for header in block.headers)
            parts.append("</tr></thead>")

        if block.rows is not None:
            parts.append("<tbody>")
            for row in block.rows:
                parts.append("<tr>")
                parts.extend(f"<td>{escape(cell)}</td>" for cell in row)
                parts.append("</tr>")
            parts.append("</tbody>")

        parts.append("</table>")
        return "".join(parts)


def render(blocks: Iterable[Union[ContentBlock, Mapping[str, Any]]]) -> str:
    """
    Render structured content to HTML.

    Args:
        blocks: ContentBlock objects or plain mappings, in document order

    Returns:
        The complete markup string
    """
    return StructuredHtmlRenderer().render(blocks)
