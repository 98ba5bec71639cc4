"""
PDF Renderer - Turn document content and metadata into PDF bytes.

Uses WeasyPrint for CSS-based PDF rendering with proper font embedding
and page size handling. Metadata is written as HTML ``<title>`` and
``<meta>`` tags, which WeasyPrint maps onto the PDF info dictionary.
"""

import io
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import DocumentOptions, Orientation, PageSize
from .metadata import MetadataStore


# Suppress WeasyPrint warnings for cleaner output
logging.getLogger('weasyprint').setLevel(logging.ERROR)
logging.getLogger('fontTools').setLevel(logging.ERROR)


FONT_STYLES = {
    "": ("normal", "normal"),
    "B": ("bold", "normal"),
    "I": ("normal", "italic"),
    "BI": ("bold", "italic"),
}

STYLE_ELEMENT = re.compile(r"(<style\b[^>]*>)(.*?)(</style\s*>)", re.IGNORECASE | re.DOTALL)


def _css_escape(text: str, charset: str) -> str:
    return "".join(
        c if c.encode(charset, errors="ignore") else f"\\{ord(c):x} "
        for c in text
    )


def encode_html(html_content: str, charset: str) -> bytes:
    """
    Encode an HTML document in the given charset.

    Characters the charset cannot hold become CSS escapes inside
    <style> elements, whose text is not entity-decoded, and numeric
    character references everywhere else.
    """
    html_content = STYLE_ELEMENT.sub(
        lambda m: m.group(1) + _css_escape(m.group(2), charset) + m.group(3),
        html_content,
    )
    return html_content.encode(charset, errors="xmlcharrefreplace")


@dataclass(frozen=True)
class Page:
    """One page of content: an HTML fragment plus optional page setup."""

    body: str = ""
    orientation: Optional[Orientation] = None
    size: Optional[Union[PageSize, Tuple[float, float]]] = None


@dataclass(frozen=True)
class FontFace:
    """A font file registered for embedding."""

    family: str
    path: Path
    style: str = ""

    def __post_init__(self):
        style = "".join(sorted(self.style.upper()))
        if style not in FONT_STYLES:
            raise ValueError(f"Invalid font style: {self.style!r}")
        object.__setattr__(self, "style", style)
        object.__setattr__(self, "path", Path(self.path))


@runtime_checkable
class Renderer(Protocol):
    """Engine that produces the final document bytes."""

    name: str

    def render(
        self,
        pages: Sequence[Page],
        fonts: Sequence[FontFace],
        metadata: MetadataStore,
        is_utf8: bool = False,
    ) -> bytes:
        ...


class WeasyPrintRenderer:
    """Render document pages to PDF with WeasyPrint."""

    name = f"{__name__}.WeasyPrintRenderer"

    def __init__(
        self,
        options: Optional[DocumentOptions] = None,
        templates_dir: Optional[Path] = None,
    ):
        """
        Initialize the PDF renderer.

        Args:
            options: Page setup and font lookup. Defaults to A4 portrait.
            templates_dir: Directory holding document.html. Defaults to bundled templates.
        """
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.options = options or DocumentOptions()
        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def compose(
        self,
        pages: Sequence[Page],
        fonts: Sequence[FontFace],
        metadata: MetadataStore,
        charset: str = "utf-8",
    ) -> str:
        """
        Compose the HTML document handed to WeasyPrint.

        Returns:
            Complete HTML document ready for PDF rendering
        """
        template = self.env.get_template("document.html")

        page_sizes = [
            self.options.page_size_css(page.size, page.orientation) for page in pages
        ]

        return template.render(
            charset=charset,
            title=metadata.text("title"),
            author=metadata.text("author"),
            subject=metadata.text("subject"),
            keywords=metadata.text("keywords"),
            creator=metadata.text("creator"),
            custom_properties=dict(metadata.custom_properties),
            font_faces=[self._font_face_css(font) for font in fonts],
            default_size=self.options.page_size_css(),
            pages=list(zip(pages, page_sizes)),
        )

    def render(
        self,
        pages: Sequence[Page],
        fonts: Sequence[FontFace],
        metadata: MetadataStore,
        is_utf8: bool = False,
    ) -> bytes:
        """
        Render pages to PDF bytes.

        Args:
            pages: Page content in order
            fonts: Fonts to embed
            metadata: Info dictionary values
            is_utf8: Hand the content to WeasyPrint as UTF-8; otherwise
                ISO-8859-1 with character references for anything outside it

        Returns:
            PDF file as bytes
        """
        from weasyprint import HTML
        from weasyprint.text.fonts import FontConfiguration

        charset = "utf-8" if is_utf8 else "iso-8859-1"
        html_content = self.compose(pages, fonts, metadata, charset=charset)
        data = encode_html(html_content, charset)

        base_url = str(self.options.fonts_dir or Path.cwd())
        html_doc = HTML(file_obj=io.BytesIO(data), encoding=charset, base_url=base_url)

        pdf_buffer = io.BytesIO()
        html_doc.write_pdf(
            pdf_buffer,
            font_config=FontConfiguration(),
            custom_metadata=True,
        )
        return pdf_buffer.getvalue()

    def _font_path(self, font: FontFace) -> Path:
        path = font.path
        if not path.is_absolute() and self.options.fonts_dir is not None:
            path = Path(self.options.fonts_dir) / path
        return path.resolve()

    def _font_face_css(self, font: FontFace) -> str:
        weight, style = FONT_STYLES[font.style]
        family = font.family.replace("\\", "\\\\").replace('"', '\\"')
        return (
            f'@font-face {{ font-family: "{family}"; '
            f'src: url("{self._font_path(font).as_uri()}"); '
            f"font-weight: {weight}; font-style: {style}; }}"
        )
