"""Domain exceptions."""

from typing import Any


class ScrobbleKitError(Exception):
    """Base exception for all scrobblekit exceptions."""

    # Hey future me, we store message as an attribute so code can inspect it without parsing
    # str(exception). Don't raise this directly, use a subclass so callers can catch precisely.
    def __init__(self, message: str, *args: Any) -> None:
        super().__init__(message, *args)
        self.message = message


class ValidationError(ScrobbleKitError, ValueError):
    """Raised when a caller passes invalid arguments.

    This is the ONE error category that escapes the public API as an exception.
    Zero/negative page or limit, empty parameter values, oversized tag or scrobble
    batches all land here, before any network call is made.
    """

    pass


class DecodeError(ScrobbleKitError):
    """Raised when a JSON node can't be turned into a domain entity.

    Yo, facades catch this and turn it into an UNKNOWN_ERROR result. It should never
    reach library users directly.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ConfigurationError(ScrobbleKitError):
    """Raised when configuration is invalid or missing."""

    pass


class AuthenticationError(ScrobbleKitError):
    """Raised when the token → session exchange fails.

    Args:
        message: What went wrong
        error_code: Upstream Last.fm error number, if there was one
    """

    def __init__(self, message: str, error_code: int | None = None) -> None:
        super().__init__(message)
        self.error_code = error_code


__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "DecodeError",
    "ScrobbleKitError",
    "ValidationError",
]
