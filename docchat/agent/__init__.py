"""Request dispatch to the Generative Language API.

Responsibilities:
    - Prompt construction with optional grounding context
    - A single generateContent call per attempt
    - Response classification and retry on rate limiting
    - Configuration from environment

Maintains clean separation from the HTTP and UI layers.
"""

from docchat.agent.config import ChatConfig, get_chat_config
from docchat.agent.dispatcher import RequestDispatcher, get_dispatcher
from docchat.agent.errors import (
    ConnectionFailedError,
    DispatchError,
    MalformedResponseError,
    MissingCredentialError,
    RateLimitedError,
    RequestFailedError,
    RetriesExhaustedError,
)
from docchat.agent.prompts import CONTEXT_INSTRUCTION, build_prompt

__all__ = [
    "CONTEXT_INSTRUCTION",
    "ChatConfig",
    "ConnectionFailedError",
    "DispatchError",
    "MalformedResponseError",
    "MissingCredentialError",
    "RateLimitedError",
    "RequestDispatcher",
    "RequestFailedError",
    "RetriesExhaustedError",
    "build_prompt",
    "get_chat_config",
    "get_dispatcher",
]
