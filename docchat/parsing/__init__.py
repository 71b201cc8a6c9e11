"""Document decoding for uploaded contexts.

Responsibilities:
    - Extension filter (.txt and .pdf only)
    - UTF-8 decoding for plain text
    - PDF text extraction with pypdf
    - Size and emptiness validation

Output is the text a Context is built from.
"""

from docchat.parsing.documents import (
    ACCEPTED_EXTENSIONS,
    MAX_FILE_SIZE,
    DocumentContent,
    DocumentParseError,
    DocumentTooLargeError,
    is_accepted,
    load_document,
)
from docchat.parsing.pdf_parser import PDFContent, PDFParseError, parse_pdf

__all__ = [
    "ACCEPTED_EXTENSIONS",
    "DocumentContent",
    "DocumentParseError",
    "DocumentTooLargeError",
    "MAX_FILE_SIZE",
    "PDFContent",
    "PDFParseError",
    "is_accepted",
    "load_document",
    "parse_pdf",
]
