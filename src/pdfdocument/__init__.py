"""
pdfdocument - Immutable PDF documents with metadata and output routing

Build a document through chained ``with_*`` calls, each returning a new
snapshot, then send it to a file, a download or inline response, or
straight back as bytes.
"""

__version__ = "0.1.0"

from .config import DocumentOptions, Orientation, PageSize, Unit
from .destination import Destination, parse_destination
from .document import Document
from .errors import (
    DirectoryCreationError,
    DocumentError,
    InvalidDestinationError,
    NameNotSetError,
)
from .metadata import MetadataStore
from .renderer import FontFace, Page, Renderer, WeasyPrintRenderer
from .sink import Disposition, ResponseSink, Sink

__all__ = [
    "__version__",
    "Destination",
    "DirectoryCreationError",
    "Disposition",
    "Document",
    "DocumentError",
    "DocumentOptions",
    "FontFace",
    "InvalidDestinationError",
    "MetadataStore",
    "NameNotSetError",
    "Orientation",
    "Page",
    "PageSize",
    "Renderer",
    "ResponseSink",
    "Sink",
    "Unit",
    "WeasyPrintRenderer",
    "parse_destination",
]
