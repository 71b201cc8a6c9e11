"""Dispatcher configuration with environment variable loading.

Pydantic-based configuration for the Generative Language API client.
The API key is normally typed into the UI; GOOGLE_API_KEY only pre-fills it.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_MODEL = "gemini-1.5-flash"


class ChatConfig(BaseModel):
    """Configuration for the request dispatcher.

    Attributes:
        api_key: Optional default API key (the UI may override it).
        base_url: Generative Language API host.
        model_name: Model identifier used in the generateContent path.
        request_timeout: Per-attempt timeout in seconds.
    """

    # Defaults come from the environment and must pass the same validators
    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("GOOGLE_API_KEY", ""),
        description="Default Google AI API key",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        description="Generative Language API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        min_length=1,
        description="Model to use",
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("GEMINI_TIMEOUT", "60")),
        ge=1.0,
        le=600.0,
        description="Timeout for a single request attempt, in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace; an empty key is allowed here."""
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self.base_url}/v1beta/models/{self.model_name}:generateContent"


def get_chat_config() -> ChatConfig:
    """Create dispatcher configuration from environment.

    Returns:
        Configured ChatConfig instance.
    """
    return ChatConfig()
