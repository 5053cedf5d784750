# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
PDF/UA document generation.

Drives an fpdf2 session with the configured document settings, feeds it the
structured markup and returns the resulting PDF as bytes or writes it to disk.
"""

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from fpdf import FPDF, ViewerPreferences

from pdf_ua_generator.compliance import apply_pdfua_markers
from pdf_ua_generator.logging_helper import (
    setup_logger,
    handle_exception,
    ConfigurationError,
    RenderError,
    WriteError,
)
from pdf_ua_generator.models import DEFAULT_CONFIG, ContentBlock, DocumentConfig
from pdf_ua_generator.renderer import StructuredHtmlRenderer

# Set up module-level logger
logger = setup_logger(__name__)

MM_TO_PT = 72 / 25.4
FONT_STYLES = ("", "B", "I", "BI")


class AccessiblePDF(FPDF):
    """FPDF document without a running header or footer."""

    def header(self):
        pass

    def footer(self):
        pass


class PdfUaGenerator:
    """
    Generator for PDF/UA tagged documents.

    Holds a DocumentConfig; every call to generate() opens a fresh rendering
    session that only reads the config.
    """

    def __init__(self, config: Union[DocumentConfig, Mapping[str, Any], None] = None):
        """
        Initialize the generator.

        Args:
            config: A DocumentConfig, or a mapping merged over the defaults
        """
        if isinstance(config, DocumentConfig):
            self._config = config
        else:
            self._config = DEFAULT_CONFIG.merged(config)

        self.renderer = StructuredHtmlRenderer()

    def set_config(self, config: Mapping[str, Any]) -> "PdfUaGenerator":
        """
        Merge new settings over the current ones.

        Args:
            config: Partial settings; keys not given keep their current value

        Returns:
            The generator, for chaining
        """
        self._config = self._config.merged(config)
        return self

    def get_config(self) -> DocumentConfig:
        """Return the current settings (an immutable snapshot)."""
        return self._config

    def generate_structured_html(
        self, content: Iterable[Union[ContentBlock, Mapping[str, Any]]]
    ) -> str:
        """Render structured content to the markup accepted by generate()."""
        return self.renderer.render(content)

    def generate(
        self, html: str, output_path: Optional[Union[str, Path]] = None
    ) -> Union[bytes, bool]:
        """
        Render markup into a PDF/UA tagged document.

        Args:
            html: Markup to render, typically from generate_structured_html()
            output_path: Where to write the PDF (default: return the bytes)

        Returns:
            bytes: The PDF, when no output path is given
            bool: True once the PDF has been written to output_path

        Raises:
            ConfigurationError: If the engine rejects the page or font settings
            RenderError: If the engine rejects the markup
            WriteError: If the output path cannot be written
        """
        config = self._config

        pdf = self._open_session(config)
        data = self._render(pdf, html, config)

        if config.pdfua_markers:
            try:
                data = apply_pdfua_markers(data, config)
            except Exception as e:
                handle_exception(
                    e, logger, "Error applying PDF/UA markers", custom_exception=RenderError
                )

        if output_path is None:
            logger.info(f"Generated PDF/UA document '{config.title}' ({len(data)} bytes)")
            return data

        return self._write(data, Path(output_path))

    def generate_from_content(
        self,
        content: Iterable[Union[ContentBlock, Mapping[str, Any]]],
        output_path: Optional[Union[str, Path]] = None,
    ) -> Union[bytes, bool]:
        """Render structured content and generate the PDF in one step."""
        return self.generate(self.generate_structured_html(content), output_path)

    def _open_session(self, config: DocumentConfig) -> FPDF:
        """Create an engine session with page, metadata and font settings applied."""
        logger.debug(
            f"Opening PDF session: orientation={config.orientation}, "
            f"unit={config.unit}, format={config.format}"
        )

        try:
            pdf = AccessiblePDF(
                orientation=config.orientation,
                unit=config.unit,
                format=config.format,
            )
        except Exception as e:
            handle_exception(
                e, logger, "Invalid page settings", custom_exception=ConfigurationError
            )

        pdf.set_creator(config.creator)
        pdf.set_author(config.author)
        pdf.set_title(config.title)
        pdf.set_subject(config.subject)
        pdf.set_keywords(config.keywords)

        pdf.pdf_version = config.pdf_version

        # Language and title display are read by assistive technology
        pdf.set_lang(config.language)
        pdf.viewer_preferences = ViewerPreferences(
            display_doc_title=config.display_doc_title
        )

        # Margins are configured in millimetres whatever the document unit
        scale = MM_TO_PT / pdf.k
        margins = config.margins
        pdf.set_margins(margins.left * scale, margins.top * scale, margins.right * scale)
        pdf.set_auto_page_break(auto=True, margin=margins.bottom * scale)

        pdf.add_page()

        try:
            if config.font_path:
                # write_html switches to bold/italic for headings and table headers
                for style in FONT_STYLES:
                    pdf.add_font(config.font_family, style, config.font_path)
            pdf.set_font(config.font_family, "", config.font_size)
        except Exception as e:
            handle_exception(
                e,
                logger,
                f"Could not select font '{config.font_family}'",
                custom_exception=ConfigurationError,
            )

        return pdf

    def _render(self, pdf: FPDF, html: str, config: DocumentConfig) -> bytes:
        """Write the markup into the session and serialize the document."""
        try:
            pdf.write_html(html, font_family=config.font_family)
            return bytes(pdf.output())
        except Exception as e:
            handle_exception(
                e, logger, "Error rendering markup", custom_exception=RenderError
            )

    def _write(self, data: bytes, output_path: Path) -> bool:
        """Write the PDF bytes to output_path, creating parent directories."""
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "wb") as f:
                f.write(data)
        except OSError as e:
            handle_exception(
                e,
                logger,
                f"Could not write PDF to {output_path}",
                custom_exception=WriteError,
            )

        logger.info(f"PDF/UA document written: {output_path}")
        return True
