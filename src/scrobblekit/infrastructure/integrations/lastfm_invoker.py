"""Last.fm HTTP request invoker implementation."""

import asyncio
import contextlib
import logging
import time
from collections.abc import Awaitable, Mapping
from typing import Any

import httpx

from scrobblekit.domain.entities.status_codes import StatusCode, from_error_number
from scrobblekit.domain.exceptions import ValidationError
from scrobblekit.domain.ports import IRequestInvoker, JsonObject
from scrobblekit.domain.result import ApiResult
from scrobblekit.infrastructure.integrations.signing import sign_params
from scrobblekit.infrastructure.observability.logging import call_correlation_id
from scrobblekit.infrastructure.parsing.values import get_str, try_parse_int

logger = logging.getLogger(__name__)

API_BASE_URL = "https://ws.audioscrobbler.com/2.0/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "scrobblekit/0.1.0 (+https://github.com/scrobblekit/scrobblekit)"


class LastfmApiInvoker(IRequestInvoker):
    """httpx-based invoker for the Last.fm 2.0 REST API."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        session_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """
        Initialize the invoker.

        Args:
            api_key: Last.fm API key
            api_secret: Last.fm shared secret (only used for signing)
            session_key: Session key for authenticated calls
            http_client: Shared client; when given, the caller owns (and closes) it
            base_url: API endpoint
            timeout: Request timeout in seconds for the client we create ourselves
            user_agent: User-Agent header, sent with every request (shared clients included)
        """
        self.api_key = api_key
        self._api_secret = api_secret
        self._session_key = session_key
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent
        self._headers = {"User-Agent": user_agent}
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def session_key(self) -> str | None:
        return self._session_key

    @session_key.setter
    def session_key(self, value: str | None) -> None:
        self._session_key = value

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close HTTP client (only if we created it)."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _build_params(self, method: str, params: Mapping[str, str]) -> dict[str, str]:
        request_params = {
            **params,
            "method": method,
            "api_key": self.api_key,
            "format": "json",
        }
        for index, (key, value) in enumerate(request_params.items()):
            if not key:
                raise ValidationError(f"Parameter key is empty at index {index}")
            if not value:
                raise ValidationError(f"Parameter value is empty: {key}")
        return request_params

    # Hey future me, the order of checks in send() matters:
    # 1. bad params -> ValidationError raised (programmer error, the only thing we raise)
    # 2. auth needed but no session key -> AUTHENTICATION_REQUIRED, no request at all
    # 3. cancel already set -> CANCELLED, no request at all
    # 4. request; transport trouble -> NETWORK_ERROR, cancel fired mid-flight -> CANCELLED
    # 5. response -> _interpret_response() (Last.fm error body beats the HTTP status!)
    async def send(
        self,
        method: str,
        params: Mapping[str, str],
        *,
        require_auth: bool = False,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[JsonObject]:
        """
        Send a Last.fm API call.

        Unauthenticated calls go out as GET with query parameters; authenticated calls get
        sk + api_sig and go out as a form-encoded POST.

        Args:
            method: Last.fm method name
            params: Method parameters
            require_auth: Sign the call and attach the session key
            cancel: Event aborting the in-flight request when set

        Returns:
            Parsed JSON object or a classified failure

        Raises:
            ValidationError: If a parameter key or value is empty
        """
        request_params = self._build_params(method, params)

        if require_auth:
            if not self._session_key or not self._session_key.strip():
                logger.warning("Last.fm call %s needs a session key but none is set", method)
                return ApiResult.failure(
                    StatusCode.AUTHENTICATION_REQUIRED,
                    error_message=(
                        "Client is not authenticated. Authentication is required for this api call."
                    ),
                )
            request_params["sk"] = self._session_key
            request_params["api_sig"] = sign_params(request_params, self._api_secret)

        if cancel is not None and cancel.is_set():
            return ApiResult.failure(StatusCode.CANCELLED, error_message="Cancelled before sending")

        with call_correlation_id():
            client = await self._get_client()
            verb = "POST" if require_auth else "GET"
            started = time.perf_counter()

            try:
                if require_auth:
                    request = client.post(self.base_url, data=request_params, headers=self._headers)
                else:
                    request = client.get(self.base_url, params=request_params, headers=self._headers)
                response = await self._await_or_cancel(request, cancel)
            except httpx.TimeoutException as e:
                logger.warning("Last.fm call %s timed out: %s", method, e)
                return ApiResult.failure(StatusCode.NETWORK_ERROR, error_message=f"Request timed out: {e}")
            except httpx.RequestError as e:
                logger.warning("Last.fm call %s failed: %s", method, e)
                return ApiResult.failure(StatusCode.NETWORK_ERROR, error_message=str(e))

            if response is None:
                logger.debug("Last.fm call %s cancelled by caller", method)
                return ApiResult.failure(StatusCode.CANCELLED, error_message="Cancelled by caller")

            elapsed_ms = (time.perf_counter() - started) * 1000
            result = self._interpret_response(response)
            if result.is_success:
                logger.debug(
                    "Last.fm %s %s -> %d in %.0fms", verb, method, response.status_code, elapsed_ms
                )
            else:
                logger.warning(
                    "Last.fm %s %s failed with %s (HTTP %d): %s",
                    verb,
                    method,
                    result.status.name,
                    response.status_code,
                    result.error_message,
                )
            return result

    @staticmethod
    async def _await_or_cancel(
        request: Awaitable[httpx.Response], cancel: asyncio.Event | None
    ) -> httpx.Response | None:
        """Await the request, or abort it and return None once cancel is set."""
        if cancel is None:
            return await request

        request_task = asyncio.ensure_future(request)
        cancel_task = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait({request_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancel_task.cancel()
            if not request_task.done():
                request_task.cancel()

        if request_task.done() and not request_task.cancelled():
            return request_task.result()

        # aborted above because cancel fired, let the request task unwind
        with contextlib.suppress(asyncio.CancelledError):
            await request_task
        return None

    @staticmethod
    def _interpret_response(response: httpx.Response) -> ApiResult[JsonObject]:
        """Classify a received response.

        Last.fm reports its own errors as {"error": 6, "message": "..."}, often together
        with a 4xx status. That body wins over the status, so callers see INVALID_PARAMETERS
        rather than a bare HTTP_ERROR.
        """
        http_status = response.status_code
        body: Any
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and "error" in body:
            error_number = try_parse_int(body.get("error"))
            if error_number is not None:
                return ApiResult.failure(
                    from_error_number(error_number),
                    http_status=http_status,
                    error_message=get_str(body, "message"),
                )

        if not response.is_success:
            return ApiResult.failure(
                StatusCode.HTTP_ERROR,
                http_status=http_status,
                error_message=f"HTTP {http_status} {response.reason_phrase}".strip(),
            )

        if not isinstance(body, dict):
            return ApiResult.failure(
                StatusCode.UNKNOWN_ERROR,
                http_status=http_status,
                error_message="Response body is not a JSON object",
            )

        return ApiResult.success(body, http_status=http_status)

    async def __aenter__(self) -> "LastfmApiInvoker":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
