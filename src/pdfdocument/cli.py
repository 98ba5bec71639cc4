"""
pdfdocument CLI - Render HTML fragments to PDF files with metadata.

Usage:
    pdfdocument render page.html --output report.pdf --title "Report"
    cat page.html | pdfdocument render - -o out/report.pdf --utf8
    pdfdocument serve  # Start web interface
"""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from . import __version__
from .config import DocumentOptions, Orientation, PageSize
from .document import Document
from .errors import DocumentError

app = typer.Typer(
    name="pdfdocument",
    help="Render HTML fragments to PDF documents with metadata.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"pdfdocument v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Render HTML fragments to PDF documents with metadata."""


def read_source(source: str) -> str:
    """Read the HTML fragment from a file, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def build_document(
    body: str,
    output: Path,
    title: Optional[str] = None,
    author: Optional[str] = None,
    subject: Optional[str] = None,
    creator: Optional[str] = None,
    keywords: Optional[List[str]] = None,
    utf8: bool = False,
    orientation: Orientation = Orientation.PORTRAIT,
    size: PageSize = PageSize.A4,
    fonts_dir: Optional[Path] = None,
) -> Document:
    """Build the document snapshot for one render."""
    options = DocumentOptions(orientation=orientation, size=size, fonts_dir=fonts_dir)
    document = (
        Document(options=options)
        .with_utf8(utf8)
        .with_page(body)
        .with_name(output.name)
        .with_path(str(output.parent))
    )

    if title:
        document = document.with_title(title)
    if author:
        document = document.with_author(author)
    if subject:
        document = document.with_subject(subject)
    if creator:
        document = document.with_creator(creator)
    if keywords:
        document = document.with_keywords(*keywords)

    return document


@app.command()
def render(
    source: str = typer.Argument(..., help="HTML fragment file, or '-' for stdin"),
    output: Path = typer.Option(
        ...,
        "--output", "-o",
        help="Output PDF file",
    ),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Document title"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Document author"),
    subject: Optional[str] = typer.Option(None, "--subject", help="Document subject"),
    creator: Optional[str] = typer.Option(None, "--creator", help="Creating application"),
    keywords: Optional[List[str]] = typer.Option(
        None,
        "--keyword", "-k",
        help="Keyword (repeat for several)",
    ),
    utf8: bool = typer.Option(
        False,
        "--utf8/--no-utf8",
        help="Encode metadata and content as UTF-8",
    ),
    orientation: Orientation = typer.Option(
        Orientation.PORTRAIT,
        "--orientation",
        help="Page orientation: P (portrait) or L (landscape)",
    ),
    size: PageSize = typer.Option(PageSize.A4, "--size", "-s", help="Page size"),
    fonts_dir: Optional[Path] = typer.Option(
        None,
        "--fonts-dir",
        help="Directory for fonts referenced by the content",
    ),
):
    """
    Render an HTML fragment to a PDF file.

    Example:
        pdfdocument render invoice.html -o out/invoice.pdf --title "Invoice 42"
    """
    try:
        body = read_source(source)
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    document = build_document(
        body,
        output,
        title=title,
        author=author,
        subject=subject,
        creator=creator,
        keywords=keywords,
        utf8=utf8,
        orientation=orientation,
        size=size,
        fonts_dir=fonts_dir,
    )

    try:
        document.output("F")
    except (DocumentError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]Success![/green] PDF saved to: [bold]{output}[/bold]")
    if title:
        console.print(f"  Title: {title}")
    if author:
        console.print(f"  Author: {author}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
):
    """Start the web interface for rendering documents."""
    import uvicorn

    console.print(f"\n[bold]pdfdocument[/bold] Web Interface")
    console.print(f"Starting server at [cyan]http://{host}:{port}[/cyan]\n")

    uvicorn.run(
        "pdfdocument.web:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
