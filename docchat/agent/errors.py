"""Error taxonomy for request dispatch.

Every error carries a human-readable ``message`` for the notification
channel and a short ``kind`` used by the API layer.
"""


class DispatchError(Exception):
    """Base class for failures while getting a reply from the model."""

    kind = "dispatch_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingCredentialError(DispatchError):
    """Raised before any network call when no API key was supplied."""

    kind = "missing_credential"

    def __init__(self, message: str = "Please enter your Google AI API key to continue") -> None:
        super().__init__(message)


class RateLimitedError(DispatchError):
    """The provider answered HTTP 429. Transient, retried by the dispatcher."""

    kind = "rate_limited"

    def __init__(self, message: str = "Rate limit reached") -> None:
        super().__init__(message)


class RequestFailedError(DispatchError):
    """Non-transient HTTP failure. Not retried.

    Attributes:
        status_code: HTTP status returned by the provider, or None when
            the request never produced a response.
    """

    kind = "request_failed"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ConnectionFailedError(RequestFailedError):
    """Network-level failure (DNS, refused connection, timeout)."""

    kind = "connection_failed"

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=None)


class MalformedResponseError(DispatchError):
    """Successful status, but the body lacks candidates[0].content.parts[0].text."""

    kind = "malformed_response"

    def __init__(self, message: str = "Unexpected response format from the model") -> None:
        super().__init__(message)


class RetriesExhaustedError(DispatchError):
    """Still rate limited after the final permitted attempt."""

    kind = "retries_exhausted"

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(
            f"Rate limit still in effect after {attempts} attempts. "
            "Please wait a moment and try again."
        )
