"""Status codes - the one taxonomy every API call reports through.

Hey future me - this module decides HOW a call outcome is classified!

Two families live in the same enum:

REMOTE (numbers Last.fm itself sends back in {"error": n, "message": "..."}):
- Values are the upstream numbers verbatim, so StatusCode(6) is INVALID_PARAMETERS.
- Never raised as exceptions, always surfaced through ApiResult.status.

LOCAL (things that went wrong on our side of the wire):
- HTTP_ERROR: non-2xx response without a Last.fm error body
- NETWORK_ERROR: connection refused, DNS, timeouts
- UNKNOWN_ERROR: body was not JSON, or a decoder choked on it
- AUTHENTICATION_REQUIRED: auth call without a session key, no request was sent
- CANCELLED: caller fired the cancel event while the request was in flight

Local values start at 1000 so they can never collide with a future upstream number.

USAGE:
    from scrobblekit.domain.entities.status_codes import StatusCode, is_retryable

    result = await client.artist.get_info("Korn")
    if not result.is_success and is_retryable(result.status):
        ...
"""

from enum import IntEnum


class StatusCode(IntEnum):
    """Outcome of a single API call."""

    SUCCESS = 0

    # Remote errors (Last.fm error numbers)
    INVALID_SERVICE = 2
    INVALID_METHOD = 3
    AUTHENTICATION_FAILED = 4
    INVALID_FORMAT = 5
    INVALID_PARAMETERS = 6
    INVALID_RESOURCE = 7
    OPERATION_FAILED = 8
    INVALID_SESSION_KEY = 9
    INVALID_API_KEY = 10
    SERVICE_OFFLINE = 11
    INVALID_METHOD_SIGNATURE = 13
    TEMPORARY_ERROR = 16
    SUSPENDED_API_KEY = 26
    RATE_LIMIT_EXCEEDED = 29

    # Local errors
    HTTP_ERROR = 1000
    NETWORK_ERROR = 1001
    UNKNOWN_ERROR = 1002
    AUTHENTICATION_REQUIRED = 1003
    CANCELLED = 1004


LOCAL_STATUS_CODES: frozenset[StatusCode] = frozenset(
    {
        StatusCode.HTTP_ERROR,
        StatusCode.NETWORK_ERROR,
        StatusCode.UNKNOWN_ERROR,
        StatusCode.AUTHENTICATION_REQUIRED,
        StatusCode.CANCELLED,
    }
)

# Transient by nature, a later identical call may well succeed
RETRYABLE_STATUS_CODES: frozenset[StatusCode] = frozenset(
    {
        StatusCode.OPERATION_FAILED,
        StatusCode.SERVICE_OFFLINE,
        StatusCode.TEMPORARY_ERROR,
        StatusCode.RATE_LIMIT_EXCEEDED,
        StatusCode.NETWORK_ERROR,
    }
)

STATUS_DESCRIPTIONS: dict[StatusCode, str] = {
    StatusCode.SUCCESS: "Success",
    StatusCode.INVALID_SERVICE: "This service does not exist",
    StatusCode.INVALID_METHOD: "No method with that name in this package",
    StatusCode.AUTHENTICATION_FAILED: "You do not have permissions to access the service",
    StatusCode.INVALID_FORMAT: "This service doesn't exist in that format",
    StatusCode.INVALID_PARAMETERS: "Your request is missing a required parameter",
    StatusCode.INVALID_RESOURCE: "Invalid resource specified",
    StatusCode.OPERATION_FAILED: "Something else went wrong",
    StatusCode.INVALID_SESSION_KEY: "Please re-authenticate",
    StatusCode.INVALID_API_KEY: "You must be granted a valid key by last.fm",
    StatusCode.SERVICE_OFFLINE: "This service is temporarily offline",
    StatusCode.INVALID_METHOD_SIGNATURE: "Invalid method signature supplied",
    StatusCode.TEMPORARY_ERROR: "There was a temporary error processing your request",
    StatusCode.SUSPENDED_API_KEY: "Access for your account has been suspended",
    StatusCode.RATE_LIMIT_EXCEEDED: "Your IP has made too many requests in a short period",
    StatusCode.HTTP_ERROR: "HTTP request returned a non-success status",
    StatusCode.NETWORK_ERROR: "Network error while talking to Last.fm",
    StatusCode.UNKNOWN_ERROR: "Unknown error",
    StatusCode.AUTHENTICATION_REQUIRED: "This call requires an authenticated session",
    StatusCode.CANCELLED: "The call was cancelled",
}


def from_error_number(error_number: int | None) -> StatusCode:
    """Map an upstream Last.fm error number to a status code.

    Numbers we don't know (Last.fm adds some from time to time) and local-range
    numbers sent by a misbehaving server both collapse to UNKNOWN_ERROR.

    Args:
        error_number: Value of the "error" member of a Last.fm error body

    Returns:
        Matching remote StatusCode, or UNKNOWN_ERROR
    """
    if error_number is None or error_number == StatusCode.SUCCESS:
        return StatusCode.UNKNOWN_ERROR
    try:
        code = StatusCode(error_number)
    except ValueError:
        return StatusCode.UNKNOWN_ERROR
    if code in LOCAL_STATUS_CODES:
        return StatusCode.UNKNOWN_ERROR
    return code


def is_remote_error(status: StatusCode) -> bool:
    """Check whether a status was reported by Last.fm itself."""
    return status != StatusCode.SUCCESS and status not in LOCAL_STATUS_CODES


def is_retryable(status: StatusCode) -> bool:
    """Check if retrying the same call later could succeed.

    Args:
        status: Status of a failed call

    Returns:
        True for transient failures (offline, rate limited, network hiccups)
    """
    return status in RETRYABLE_STATUS_CODES


def describe(status: StatusCode) -> str:
    """Get a human-readable description for a status code."""
    return STATUS_DESCRIPTIONS.get(status, f"Unknown status: {int(status)}")
