"""Document upload endpoint.

Handles file upload and decoding into context text.
Nothing is stored: the decoded text is returned to the caller.
"""

import logging

from fastapi import APIRouter, HTTPException, UploadFile, status

from docchat.models.schemas import DocumentUploadResponse
from docchat.parsing.documents import (
    DocumentParseError,
    DocumentTooLargeError,
    is_accepted,
    load_document,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


def _validate_filename(filename: str | None) -> str:
    """Validate that the file has a .txt or .pdf extension.

    Raises:
        HTTPException: 400 if the name is missing or the extension is invalid.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    if not is_accepted(filename):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only .txt and .pdf files are accepted",
        )

    return filename


@router.post("", response_model=DocumentUploadResponse)
async def upload_document(file: UploadFile) -> DocumentUploadResponse:
    """Upload a text or PDF document and return its text.

    Raises:
        400: Invalid file (wrong type, empty, corrupt, no text).
        413: File exceeds 10MB limit.
    """
    filename = _validate_filename(file.filename)
    content = await file.read()

    try:
        document = load_document(filename, content)
    except DocumentTooLargeError as e:
        logger.warning(f"Rejected oversized upload {filename} ({e.size} bytes)")
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=str(e),
        ) from e
    except DocumentParseError as e:
        logger.warning(f"Document parse error for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return DocumentUploadResponse(
        name=document.name,
        content=document.text,
        pages=document.pages,
    )
