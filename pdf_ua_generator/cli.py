#!/usr/bin/env python3
# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
CLI for PDF/UA document generation.

Provides command-line interface for:
- Generating the demonstration document
- Building a document from a JSON/YAML content file
- Inspecting a generated PDF
- Showing or saving the resolved configuration
"""

import json
import logging
from pathlib import Path
from typing import Optional, List

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from pdf_ua_generator import __version__
from pdf_ua_generator.config import resolve_config, save_config
from pdf_ua_generator.generator import PdfUaGenerator
from pdf_ua_generator.inspector import describe_pdf
from pdf_ua_generator.logging_helper import PdfUaError
from pdf_ua_generator.models import DEFAULT_CONFIG, ContentBlock, coerce_blocks
from pdf_ua_generator.samples import SAMPLE_CONFIG, SAMPLE_CONTENT

app = typer.Typer(
    name="pdf-ua",
    help="Accessible (PDF/UA) document generator",
    add_completion=False
)
console = Console()

DEFAULT_OUTPUT = Path("storage") / "sample-pdf-ua.pdf"


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
        force=True
    )

    # Route package loggers through the rich handler only
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("pdf_ua_generator"):
            logger_obj = logging.getLogger(name)
            for handler in list(logger_obj.handlers):
                logger_obj.removeHandler(handler)


def _load_content(content_path: Path) -> List[ContentBlock]:
    """Load a list of content blocks from a JSON or YAML file."""
    with open(content_path, "r", encoding="utf-8") as f:
        if content_path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f) or []

    if isinstance(data, dict):
        data = data.get("content", [])
    if not isinstance(data, list):
        raise ValueError("Content file must contain a list of blocks")

    return coerce_blocks(data)


@app.command()
def generate(
    output_path: Optional[Path] = typer.Argument(None, help="Output file path"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/JSON settings file"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Document title"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Document author"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Document language"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Generate a sample PDF/UA compliant document."""
    setup_logging(verbose)

    output_path = output_path or DEFAULT_OUTPUT
    console.print("Generating PDF/UA document...")

    try:
        config = resolve_config(
            config_file,
            overrides={"title": title, "author": author, "language": language},
            defaults=DEFAULT_CONFIG.merged(SAMPLE_CONFIG),
        )
        generator = PdfUaGenerator(config)
        html = generator.generate_structured_html(SAMPLE_CONTENT)
        generator.generate(html, output_path)
    except PdfUaError as e:
        console.print(f"[red]✗ Failed to generate PDF:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    console.print(f"[green]✓ PDF/UA document generated successfully:[/green] {escape(str(output_path))}")


@app.command()
def build(
    content_path: Path = typer.Argument(..., help="JSON/YAML file with a list of content blocks"),
    output_path: Optional[Path] = typer.Argument(None, help="Output file path"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/JSON settings file"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Document title"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Document author"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Document language"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Build a PDF/UA document from a content file."""
    setup_logging(verbose)

    if not content_path.exists():
        console.print(f"[red]Error: Content file not found: {content_path}[/red]")
        raise typer.Exit(code=1)

    output_path = output_path or content_path.with_suffix(".pdf")

    try:
        blocks = _load_content(content_path)
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]✗ Invalid content file:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    try:
        config = resolve_config(
            config_file,
            overrides={"title": title, "author": author, "language": language},
        )
        PdfUaGenerator(config).generate_from_content(blocks, output_path)
    except PdfUaError as e:
        console.print(f"[red]✗ Failed to generate PDF:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    console.print(f"[green]✓ Built {len(blocks)} blocks:[/green] {escape(str(output_path))}")


@app.command()
def inspect(
    pdf_path: Path = typer.Argument(..., help="PDF file to inspect"),
):
    """Show the accessibility-related properties of a PDF."""
    if not pdf_path.exists():
        console.print(f"[red]Error: PDF not found: {pdf_path}[/red]")
        raise typer.Exit(code=1)

    try:
        summary = describe_pdf(pdf_path)
    except PdfUaError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    table = Table(title=str(pdf_path))
    table.add_column("Property")
    table.add_column("Value")
    for key, value in summary.model_dump().items():
        table.add_row(key, escape("" if value is None else str(value)))
    console.print(table)


@app.command()
def config(
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/JSON settings file"),
    save: Optional[Path] = typer.Option(None, "--save", help="Save the resolved settings to this file"),
):
    """Show or save the resolved document settings."""
    try:
        resolved = resolve_config(config_file)
        if save:
            file_format = "json" if save.suffix.lower() == ".json" else "yaml"
            save_config(resolved, save, file_format=file_format)
            console.print(f"[green]✓ Configuration saved:[/green] {save}")
            return
    except PdfUaError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    console.print(escape(yaml.safe_dump(resolved.model_dump(), sort_keys=False)))


@app.command()
def version():
    """Display version information."""
    console.print("\n[bold]PDF/UA Generator[/bold]")
    console.print(f"Version: {__version__}")
    console.print("\nFeatures:")
    console.print("  - Structured content to semantic HTML")
    console.print("  - Tagged PDF output with document metadata")
    console.print("  - PDF/UA-1 catalog and XMP markers\n")


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
