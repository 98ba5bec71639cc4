"""
pdfdocument Web Interface - Render HTML fragments over HTTP.

A small FastAPI application that renders a posted HTML fragment and
returns the PDF as a download or for inline display.
"""

from typing import Optional

from fastapi import FastAPI, Form, HTTPException

from . import __version__
from .document import Document
from .errors import NameNotSetError
from .sink import ResponseSink


app = FastAPI(
    title="pdfdocument",
    description="Render HTML fragments to PDF documents",
    version=__version__,
)

sink = ResponseSink()


# Shared by every request; each request derives its own snapshot
BASE_DOCUMENT = Document().with_utf8(True)


@app.post("/render")
def render_document(
    body: str = Form(...),
    name: str = Form(""),
    title: Optional[str] = Form(None),
    author: Optional[str] = Form(None),
    subject: Optional[str] = Form(None),
    keywords: Optional[str] = Form(None),
    inline: bool = Form(False),
):
    """
    Render an HTML fragment and return the PDF.

    Keywords are comma separated. The PDF is sent inline when ``inline``
    is set, otherwise as an attachment.
    """
    document = BASE_DOCUMENT.with_page(body).with_name(name)

    if title:
        document = document.with_title(title)
    if author:
        document = document.with_author(author)
    if subject:
        document = document.with_subject(subject)
    if keywords:
        document = document.with_keywords(
            *(k.strip() for k in keywords.split(",") if k.strip())
        )

    try:
        return document.output("I" if inline else "D", sink)
    except NameNotSetError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
