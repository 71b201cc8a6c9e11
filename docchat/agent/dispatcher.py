"""Request dispatcher for the Generative Language API.

Turns one user message (plus optional context) into exactly one reply or
a DispatchError, retrying only when the provider signals rate limiting.

Retry policy is fixed: at most MAX_ATTEMPTS calls, waiting 2**n seconds
before retry n (2s, then 4s). Cancelling the awaiting task stops the
dispatch at the current suspension point (HTTP call or backoff sleep).
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from docchat.agent.config import ChatConfig, get_chat_config
from docchat.agent.errors import (
    ConnectionFailedError,
    MalformedResponseError,
    MissingCredentialError,
    RateLimitedError,
    RequestFailedError,
    RetriesExhaustedError,
)
from docchat.agent.prompts import build_prompt
from docchat.models.schemas import RetryNotice

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3

SleepFn = Callable[[float], Awaitable[None]]
NoticeFn = Callable[[RetryNotice], None]


def backoff_seconds(retry: int) -> float:
    """Wait before retry number ``retry`` (1-based)."""
    return float(2**retry)


def _error_message(response: httpx.Response) -> str:
    """Provider error message if the body has one, else the status text."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return response.reason_phrase or f"HTTP {response.status_code}"


def _extract_reply(response: httpx.Response) -> str:
    """Pull candidates[0].content.parts[0].text out of a success body."""
    try:
        data = response.json()
    except ValueError as e:
        raise MalformedResponseError("Response body is not valid JSON") from e

    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedResponseError() from e

    if not isinstance(text, str):
        raise MalformedResponseError()
    return text


class RequestDispatcher:
    """Sends prompts to generateContent with retry on HTTP 429.

    Holds no per-conversation state: two calls with the same inputs and the
    same endpoint behaviour produce the same result.
    """

    def __init__(
        self,
        config: ChatConfig | None = None,
        client: httpx.AsyncClient | None = None,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            config: Optional configuration. Loads from environment if not provided.
            client: Optional shared HTTP client. A fresh client is opened per
                    dispatch when omitted.
            sleep: Coroutine used for backoff waits.
        """
        self._config = config or get_chat_config()
        self._client = client
        self._sleep = sleep

    @property
    def config(self) -> ChatConfig:
        return self._config

    async def dispatch(
        self,
        message: str,
        context: str | None = None,
        api_key: str = "",
        on_notice: NoticeFn | None = None,
    ) -> str:
        """Get one reply for a message.

        Args:
            message: The user's message. Must be non-empty after stripping.
            context: Text of the selected document, or None.
            api_key: Google AI API key.
            on_notice: Called with a RetryNotice before each backoff wait.

        Returns:
            The reply text, ready to append as an assistant message.

        Raises:
            ValueError: If the message is blank.
            MissingCredentialError: If no API key is given. No request is made.
            RequestFailedError: On a non-429 HTTP error or network failure.
            MalformedResponseError: If a success body lacks the reply text.
            RetriesExhaustedError: If every permitted attempt was rate limited.
        """
        text = message.strip()
        if not text:
            raise ValueError("Message must not be empty")

        key = (api_key or "").strip()
        if not key:
            raise MissingCredentialError()

        payload = {"contents": [{"parts": [{"text": build_prompt(text, context)}]}]}

        try:
            if self._client is not None:
                return await self._dispatch_with_retry(self._client, payload, key, on_notice)
            async with httpx.AsyncClient(timeout=self._config.request_timeout) as client:
                return await self._dispatch_with_retry(client, payload, key, on_notice)
        except asyncio.CancelledError:
            logger.info("Dispatch cancelled")
            raise

    async def _dispatch_with_retry(
        self,
        client: httpx.AsyncClient,
        payload: dict[str, Any],
        api_key: str,
        on_notice: NoticeFn | None,
    ) -> str:
        for attempt in range(1, MAX_ATTEMPTS + 1):
            try:
                reply = await self._send(client, payload, api_key)
            except RateLimitedError:
                if attempt == MAX_ATTEMPTS:
                    break
                wait = backoff_seconds(attempt)
                notice = RetryNotice(
                    attempt=attempt,
                    max_attempts=MAX_ATTEMPTS,
                    wait_seconds=wait,
                )
                logger.warning(
                    f"Rate limited on attempt {attempt}/{MAX_ATTEMPTS}, retrying in {wait:g}s"
                )
                if on_notice is not None:
                    try:
                        on_notice(notice)
                    except Exception:
                        logger.exception("Retry notice handler failed")
                await self._sleep(wait)
                continue

            logger.info(f"Received reply on attempt {attempt} ({len(reply)} chars)")
            return reply

        logger.error(f"Rate limited on all {MAX_ATTEMPTS} attempts, giving up")
        raise RetriesExhaustedError(MAX_ATTEMPTS)

    async def _send(
        self,
        client: httpx.AsyncClient,
        payload: dict[str, Any],
        api_key: str,
    ) -> str:
        """Issue a single generateContent call and classify the result."""
        timeout = self._config.request_timeout
        try:
            response = await client.post(
                self._config.endpoint,
                params={"key": api_key},
                json=payload,
                timeout=timeout,
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Request timed out after {timeout:g}s")
            raise ConnectionFailedError(f"Request timed out after {timeout:g}s") from e
        except httpx.RequestError as e:
            logger.warning(f"Connection failed: {e}")
            raise ConnectionFailedError(f"Connection failed: {e}") from e

        if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
            raise RateLimitedError()

        if not response.is_success:
            message = _error_message(response)
            logger.warning(f"API request failed with status {response.status_code}: {message}")
            raise RequestFailedError(message, status_code=response.status_code)

        return _extract_reply(response)


# Module-level singleton instance
_dispatcher: RequestDispatcher | None = None


def get_dispatcher() -> RequestDispatcher:
    """Get or create the global request dispatcher.

    Returns:
        The RequestDispatcher instance.
    """
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = RequestDispatcher()
    return _dispatcher
