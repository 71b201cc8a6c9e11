"""Pydantic models for transcript state and API payloads.

Models:
    - Message: Individual message in the transcript
    - Context: Uploaded document usable as grounding
    - RetryNotice: Transient notice shown during rate-limit backoff
    - ChatRequest / ChatResponse: Chat endpoint payloads
    - DocumentUploadResponse: Decoded upload result
"""

from docchat.models.schemas import (
    ChatRequest,
    ChatResponse,
    Context,
    DocumentUploadResponse,
    ErrorResponse,
    Message,
    RetryNotice,
    Role,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "Context",
    "DocumentUploadResponse",
    "ErrorResponse",
    "Message",
    "RetryNotice",
    "Role",
]
