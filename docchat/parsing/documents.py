"""Decode uploaded files into context text.

Only plain text and PDF files are accepted, selected by extension.
"""

import logging
from pathlib import PurePath

from pydantic import BaseModel, Field

from docchat.parsing.pdf_parser import PDFParseError, parse_pdf

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB

ACCEPTED_EXTENSIONS = {
    ".txt": "text/plain",
    ".pdf": "application/pdf",
}


class DocumentContent(BaseModel):
    """Text decoded from an uploaded document.

    Attributes:
        name: Original filename, used as the context label.
        text: Decoded text.
        pages: Page count for PDFs, None for plain text.
    """

    name: str
    text: str
    pages: int | None = Field(default=None, ge=1)


class DocumentParseError(Exception):
    """Raised when an upload cannot be turned into context text."""

    pass


class DocumentTooLargeError(DocumentParseError):
    """Raised when an upload exceeds MAX_FILE_SIZE.

    Attributes:
        size: Upload size in bytes.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(
            f"File size ({size / (1024 * 1024):.1f}MB) exceeds maximum allowed (10MB)"
        )


def is_accepted(filename: str | None) -> bool:
    """Whether the filename has a .txt or .pdf extension (any case)."""
    if not filename:
        return False
    return PurePath(filename).suffix.lower() in ACCEPTED_EXTENSIONS


def decode_text(data: bytes) -> str:
    """Decode a plain text upload as UTF-8, replacing invalid bytes."""
    return data.decode("utf-8-sig", errors="replace")


def load_document(filename: str, data: bytes) -> DocumentContent:
    """Decode an uploaded file.

    Args:
        filename: Name of the uploaded file.
        data: Raw file bytes.

    Returns:
        DocumentContent with the decoded text.

    Raises:
        DocumentTooLargeError: If the file exceeds MAX_FILE_SIZE.
        DocumentParseError: If the type is not accepted, the file is empty,
            the PDF is invalid, or no text could be extracted.
    """
    if not is_accepted(filename):
        raise DocumentParseError(f"Unsupported file type: {filename} (only .txt and .pdf)")

    if not data:
        raise DocumentParseError("Empty file provided")

    if len(data) > MAX_FILE_SIZE:
        raise DocumentTooLargeError(len(data))

    pages: int | None = None
    if PurePath(filename).suffix.lower() == ".pdf":
        try:
            pdf_content = parse_pdf(data)
        except PDFParseError as e:
            raise DocumentParseError(str(e)) from e
        text, pages = pdf_content.text, pdf_content.pages
    else:
        text = decode_text(data)

    if not text.strip():
        raise DocumentParseError(f"No extractable text in {filename}")

    logger.info(f"Loaded document {filename} ({len(text)} chars)")
    return DocumentContent(name=filename, text=text, pages=pages)
