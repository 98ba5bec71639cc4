"""
Shared fixtures for pdfdocument tests.
"""
import hashlib
import json

import pytest

from pdfdocument import Document


class FakeRenderer:
    """Deterministic renderer recording what it was asked to render."""

    name = "tests.FakeRenderer"

    def __init__(self):
        self.calls = []

    def render(self, pages, fonts, metadata, is_utf8=False):
        self.calls.append((pages, fonts, metadata, is_utf8))
        payload = json.dumps(
            {
                "pages": [page.body for page in pages],
                "fonts": [font.family for font in fonts],
                "metadata": metadata.get(),
                "utf8": is_utf8,
            },
            sort_keys=True,
        ).encode("utf-8")
        return b"%PDF-fake\n" + hashlib.sha256(payload).hexdigest().encode("ascii")


class RecordingSink:
    """Sink returning the arguments it was called with."""

    def __init__(self):
        self.calls = []

    def send_content_as_file(self, content, filename, disposition, mime_type):
        call = {
            "content": content,
            "filename": filename,
            "disposition": disposition,
            "mime_type": mime_type,
        }
        self.calls.append(call)
        return call


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def document(renderer):
    return Document(renderer=renderer)


@pytest.fixture
def weasyprint():
    """Skip when WeasyPrint or its native libraries are unavailable."""
    try:
        import weasyprint
    except (ImportError, OSError) as e:
        pytest.skip(f"WeasyPrint unavailable: {e}")
    return weasyprint
