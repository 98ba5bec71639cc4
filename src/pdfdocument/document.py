"""
Document - Immutable PDF document builder.

Every ``with_*`` call returns a new document; the receiver is never
changed, so a base document can be shared and specialised freely.

Example:
    document = (
        Document()
        .with_title("Quarterly report")
        .with_author("Finance")
        .with_page("<h1>Q3</h1>")
        .with_name("report.pdf")
        .with_path("out")
    )
    document.output("F")
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

from markupsafe import Markup

from .config import DocumentOptions, Orientation, PageSize
from .destination import Destination, parse_destination
from .errors import DirectoryCreationError, NameNotSetError
from .metadata import MetadataStore
from .renderer import FontFace, Page, Renderer, WeasyPrintRenderer
from .sink import Disposition, ResponseSink, Sink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """A snapshot of document configuration, content and metadata."""

    renderer: Optional[Renderer] = None
    options: DocumentOptions = field(default_factory=DocumentOptions)
    name: str = ""
    path: str = ""
    metadata: Optional[MetadataStore] = None
    utf8: bool = False
    pages: Tuple[Page, ...] = ()
    fonts: Tuple[FontFace, ...] = ()

    def __post_init__(self):
        if self.renderer is None:
            object.__setattr__(self, "renderer", WeasyPrintRenderer(self.options))
        if self.metadata is None:
            object.__setattr__(
                self, "metadata", MetadataStore(creator=self.renderer.name)
            )

    def __bytes__(self) -> bytes:
        return self.serialize()

    # Metadata

    def get_author(self) -> str:
        """Name of the person or organisation that created the document."""
        return self.metadata.author

    def get_creator(self) -> str:
        """Name of the package used to create the document."""
        return self.metadata.creator

    def get_subject(self) -> str:
        return self.metadata.subject

    def get_title(self) -> str:
        return self.metadata.title

    def get_keywords(self) -> str:
        return self.metadata.keywords

    def get_custom_properties(self) -> dict:
        return dict(self.metadata.custom_properties)

    def get_metadata(self, name: str = "") -> Union[str, dict]:
        """The value of one metadata field, or all of them."""
        return self.metadata.get(name)

    def get_name(self) -> str:
        """Name of the document when displayed in the browser, downloaded, or saved."""
        return self.name

    def get_path(self) -> str:
        """Directory where the document is saved."""
        return self.path

    def is_utf8(self) -> bool:
        return self.utf8

    def with_author(self, author: str) -> "Document":
        return self._with_metadata("author", author)

    def with_creator(self, creator: str) -> "Document":
        return self._with_metadata("creator", creator)

    def with_subject(self, subject: str) -> "Document":
        return self._with_metadata("subject", subject)

    def with_title(self, title: str) -> "Document":
        return self._with_metadata("title", title)

    def with_keywords(self, *keywords: str) -> "Document":
        return replace(
            self, metadata=self.metadata.with_keywords(*keywords, is_utf8=self.utf8)
        )

    def with_custom_properties(self, properties: Mapping[str, str]) -> "Document":
        return replace(self, metadata=self.metadata.with_custom_properties(properties))

    def with_name(self, name: str) -> "Document":
        return replace(self, name=name)

    def with_path(self, path: Union[str, Path]) -> "Document":
        return replace(self, path=str(path))

    def with_utf8(self, utf8: bool) -> "Document":
        # Metadata already stored keeps its encoding
        return replace(self, utf8=utf8)

    def _with_metadata(self, name: str, value: str) -> "Document":
        return replace(self, metadata=self.metadata.set(name, value, self.utf8))

    # Content

    def with_font(self, family: str, path: Union[str, Path], style: str = "") -> "Document":
        """
        Register a font for embedding.

        Args:
            family: CSS font family name used by page content
            path: Font file; relative paths resolve against options.fonts_dir
            style: "", "B", "I" or "BI"
        """
        return replace(self, fonts=self.fonts + (FontFace(family, Path(path), style),))

    def with_page(
        self,
        body: str = "",
        orientation: Optional[Orientation] = None,
        size: Optional[Union[PageSize, Tuple[float, float]]] = None,
    ) -> "Document":
        """Append a page holding an HTML fragment."""
        if orientation is not None:
            orientation = Orientation(orientation)
        if isinstance(size, str):
            size = PageSize(size)
        return replace(self, pages=self.pages + (Page(body, orientation, size),))

    def with_text(
        self,
        text: str,
        font_family: Optional[str] = None,
        font_size: Optional[float] = None,
    ) -> "Document":
        """Append an escaped paragraph of text to the last page."""
        styles = []
        if font_family:
            styles.append(f"font-family: '{font_family}'")
        if font_size:
            styles.append(f"font-size: {font_size:g}pt")

        if styles:
            paragraph = Markup('<p style="{}">{}</p>').format("; ".join(styles), text)
        else:
            paragraph = Markup("<p>{}</p>").format(text)

        if not self.pages:
            return replace(self, pages=(Page(str(paragraph)),))

        last = self.pages[-1]
        pages = self.pages[:-1] + (replace(last, body=last.body + str(paragraph)),)
        return replace(self, pages=pages)

    # Output

    def serialize(self) -> bytes:
        """Render the document to PDF bytes."""
        logger.debug("Serializing %d page(s) with %s", len(self.pages), self.renderer.name)
        return self.renderer.render(self.pages, self.fonts, self.metadata, self.utf8)

    def output(
        self,
        destination: Union[str, Destination] = Destination.STRING,
        sink: Optional[Sink] = None,
    ) -> Union[bool, bytes, Any]:
        """
        Output the document.

        Args:
            destination: D (download), F (file), I (inline), S (bytes), or
                F combined with one of D, I, S
            sink: Builds the response for D and I. Defaults to ResponseSink.

        Returns:
            The sink's response for D and I, the PDF bytes for S, otherwise
            whether the file was written

        Raises:
            NameNotSetError: If the destination needs a filename and none is set
            DirectoryCreationError: If the output directory cannot be created
            InvalidDestinationError: If the destination is not recognised
        """
        parsed = parse_destination(destination)

        if parsed.needs_name and self.name == "":
            raise NameNotSetError()

        content = self.serialize()
        written = False

        if parsed.write_file:
            written = self._write_file(content)

        if parsed.dispatch is None:
            return written

        if parsed.dispatch == Destination.STRING:
            return content

        disposition = (
            Disposition.ATTACHMENT
            if parsed.dispatch == Destination.DOWNLOAD
            else Disposition.INLINE
        )
        logger.debug("Sending %s as %s", self.name, disposition.value)
        if sink is None:
            sink = ResponseSink()
        return sink.send_content_as_file(
            content, self.name, disposition, self.options.mime_type
        )

    def _write_file(self, content: bytes) -> bool:
        directory = Path(self.path) if self.path else Path.cwd()

        if not directory.is_dir():
            try:
                directory.mkdir(mode=self.options.directory_mode, parents=True)
            except OSError as e:
                if not directory.is_dir():
                    raise DirectoryCreationError(str(directory)) from e

        target = directory / self.name
        target.write_bytes(content)
        logger.info("Wrote %s (%d bytes)", target, len(content))
        return True
