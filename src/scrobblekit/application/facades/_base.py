"""Shared plumbing for the per-resource facades."""

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from scrobblekit.application.facades.corrections import apply_corrections, corrections_for
from scrobblekit.domain.entities.status_codes import StatusCode
from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.domain.ports import IRequestInvoker, JsonObject
from scrobblekit.domain.result import ApiResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Anything a decoder can blow up with on a weird-but-valid JSON document
_DECODE_FAILURES = (DecodeError, KeyError, TypeError, ValueError, AttributeError)


class BaseApi:
    """Base class for facades: send, decode, correct, wrap."""

    def __init__(self, invoker: IRequestInvoker) -> None:
        self._invoker = invoker

    # Hey future me, every facade method funnels through here:
    # 1. invoker.send() -> failure results pass straight through (status, http status, message)
    # 2. decode the JSON -> any decode blow-up becomes UNKNOWN_ERROR "Failed to parse <label>: ..."
    # 3. apply the corrections row for this method (see corrections.py)
    # The decode step runs synchronously on the already-buffered document, cancel only matters
    # while the request is on the wire.
    async def _call(
        self,
        method: str,
        params: Mapping[str, str],
        decode: Callable[[JsonObject], T],
        label: str,
        *,
        require_auth: bool = False,
        username_given: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[T]:
        result = await self._invoker.send(method, params, require_auth=require_auth, cancel=cancel)
        if not result.is_success or result.data is None:
            return ApiResult.failure(
                result.status if not result.is_success else StatusCode.UNKNOWN_ERROR,
                http_status=result.http_status,
                error_message=result.error_message or f"Empty response for {method}",
            )

        try:
            decoded = decode(result.data)
        except _DECODE_FAILURES as e:
            logger.warning("Failed to parse %s from %s: %s", label, method, e)
            return ApiResult.failure(
                StatusCode.UNKNOWN_ERROR,
                http_status=result.http_status,
                error_message=f"Failed to parse {label}: {e}",
            )

        decoded = apply_corrections(decoded, corrections_for(method, username_given=username_given))
        return ApiResult.success(decoded, http_status=result.http_status)

    async def _call_void(
        self,
        method: str,
        params: Mapping[str, str],
        *,
        require_auth: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[None]:
        """Send a write call (love, addTags, ...) whose body carries nothing useful."""
        result = await self._invoker.send(method, params, require_auth=require_auth, cancel=cancel)
        if not result.is_success:
            return ApiResult.failure(
                result.status, http_status=result.http_status, error_message=result.error_message
            )
        return ApiResult.success(None, http_status=result.http_status)


def optional_params(**values: Any) -> dict[str, str]:
    """Drop None values and stringify the rest."""
    return {key: str(value) for key, value in values.items() if value is not None}
