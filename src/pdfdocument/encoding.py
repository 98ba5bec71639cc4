"""
Encoding - Transcode text to and from PDF text strings.

PDF text strings are either PDFDocEncoding or UTF-16BE prefixed with a
byte order mark. Transcoded values are kept as ``str`` holding one
character per byte, the form renderers write into the info dictionary.
"""

import codecs

BOM = codecs.BOM_UTF16_BE.decode("latin-1")


def encode_pdf_text(text: str) -> str:
    """Encode text as a UTF-16BE PDF text string with a leading BOM."""
    return BOM + text.encode("utf-16-be").decode("latin-1")


def decode_pdf_text(value: str) -> str:
    """
    Decode a PDF text string back to text.

    Values without the BOM were stored verbatim and are returned as is.
    """
    if not value.startswith(BOM):
        return value
    return value[len(BOM):].encode("latin-1").decode("utf-16-be")
