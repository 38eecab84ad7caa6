"""Result envelope wrapping every public API call."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from scrobblekit.domain.entities.status_codes import StatusCode

T = TypeVar("T")
U = TypeVar("U")


# Hey future me, ApiResult is THE return type of every facade method. Remote errors, transport
# errors and decode errors all end up here instead of being raised. Only ValidationError
# (programmer mistakes like page=0) is raised. The __post_init__ check keeps the contract honest:
# a failure NEVER carries data, and SUCCESS can't sneak in through failure().
@dataclass(frozen=True, slots=True)
class ApiResult(Generic[T]):
    """Success/failure wrapper for a single Last.fm call.

    Attributes:
        data: Decoded payload, always None on failure
        http_status: HTTP status of the response, 0 when no response was received
        error_message: Upstream or local error text, None on success
        status: Classification of the outcome
    """

    data: T | None
    http_status: int
    error_message: str | None
    status: StatusCode

    def __post_init__(self) -> None:
        if self.status != StatusCode.SUCCESS and self.data is not None:
            raise ValueError("Failed ApiResult must not carry data")

    @property
    def is_success(self) -> bool:
        return self.status == StatusCode.SUCCESS

    @classmethod
    def success(cls, data: T | None, http_status: int = 200) -> "ApiResult[T]":
        """Build a successful result."""
        return cls(data=data, http_status=http_status, error_message=None, status=StatusCode.SUCCESS)

    @classmethod
    def failure(
        cls,
        status: StatusCode,
        http_status: int = 0,
        error_message: str | None = None,
    ) -> "ApiResult[T]":
        """Build a failed result.

        Args:
            status: Any status except SUCCESS
            http_status: HTTP status if a response was received
            error_message: Human-readable reason

        Raises:
            ValueError: If status is SUCCESS
        """
        if status == StatusCode.SUCCESS:
            raise ValueError("Use ApiResult.success() for successful results")
        return cls(data=None, http_status=http_status, error_message=error_message, status=status)

    def map(self, fn: Callable[[T], U]) -> "ApiResult[U]":
        """Transform the payload of a successful result, failures pass through unchanged."""
        if not self.is_success:
            return ApiResult(
                data=None,
                http_status=self.http_status,
                error_message=self.error_message,
                status=self.status,
            )
        return ApiResult(
            data=fn(self.data) if self.data is not None else None,
            http_status=self.http_status,
            error_message=None,
            status=StatusCode.SUCCESS,
        )
