from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Speaker of a transcript message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message in the transcript. Immutable once created.

    Attributes:
        role: The speaker (user or assistant).
        content: The message text.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class Context(BaseModel):
    """An uploaded document available as grounding material.

    Attributes:
        id: Unique identifier used by the context selector.
        name: Display label, usually the filename.
        content: Full document text.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    content: str


class RetryNotice(BaseModel):
    """Informational notice emitted while waiting out a rate limit.

    Attributes:
        attempt: Attempt number that was rate limited (1-based).
        max_attempts: Total attempts permitted.
        wait_seconds: Delay before the next attempt.
    """

    model_config = ConfigDict(frozen=True)

    attempt: int = Field(ge=1)
    max_attempts: int = Field(ge=1)
    wait_seconds: float = Field(ge=0)

    @property
    def message(self) -> str:
        return (
            f"Rate limit reached. Retrying in {self.wait_seconds:g} seconds "
            f"(attempt {self.attempt}/{self.max_attempts})"
        )


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        message: User's question or prompt.
        context: Optional document text to ground the answer in.
        api_key: Google AI API key used for this request.
    """

    message: str = Field(..., min_length=1)
    context: str | None = None
    api_key: str = ""

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatResponse(BaseModel):
    """Reply from the model.

    Attributes:
        response: The assistant's generated answer.
    """

    response: str


class ErrorResponse(BaseModel):
    """Body returned when a dispatch fails.

    Attributes:
        detail: Human-readable description.
        error: Machine-readable error kind.
    """

    detail: str
    error: str


class DocumentUploadResponse(BaseModel):
    """Response after document upload processing.

    Attributes:
        name: Name of the uploaded file.
        content: Decoded document text.
        pages: Number of pages for PDFs, None for plain text.
    """

    name: str
    content: str
    pages: int | None = None
