"""
Response Sink - Deliver document bytes as an HTTP response.
"""

from enum import Enum
from typing import Any, Protocol
from urllib.parse import quote

from fastapi import Response


class Disposition(str, Enum):
    ATTACHMENT = "attachment"
    INLINE = "inline"


class Sink(Protocol):
    """Turns document bytes into something the transport can deliver."""

    def send_content_as_file(
        self,
        content: bytes,
        filename: str,
        disposition: Disposition,
        mime_type: str,
    ) -> Any:
        ...


def content_disposition(disposition: Disposition, filename: str) -> str:
    """Build a Content-Disposition header value."""
    ascii_name = "".join(
        c if c.isascii() and c.isprintable() and c not in '"\\' else "_"
        for c in filename
    )
    value = f'{Disposition(disposition).value}; filename="{ascii_name}"'
    if ascii_name != filename:
        value += f"; filename*=UTF-8''{quote(filename, safe='')}"
    return value


class ResponseSink:
    """Sink producing FastAPI responses."""

    def send_content_as_file(
        self,
        content: bytes,
        filename: str,
        disposition: Disposition,
        mime_type: str,
    ) -> Response:
        return Response(
            content=content,
            media_type=mime_type,
            headers={
                "Content-Disposition": content_disposition(disposition, filename),
                "Content-Length": str(len(content)),
            },
        )
