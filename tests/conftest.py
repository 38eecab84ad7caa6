"""Shared fixtures for scrobblekit tests."""

import asyncio
from collections.abc import Mapping
from typing import Any

import pytest

from scrobblekit.domain.entities.status_codes import StatusCode
from scrobblekit.domain.ports import IRequestInvoker, JsonObject
from scrobblekit.domain.result import ApiResult


class FakeInvoker(IRequestInvoker):
    """In-memory invoker returning canned responses per Last.fm method.

    Hey future me - responses can be a JSON dict (wrapped as success) or a ready-made
    ApiResult (for failures). Every send() is recorded in .calls so tests can check the
    params a facade built without any HTTP involved.
    """

    def __init__(self, responses: Mapping[str, Any] | None = None, session_key: str | None = None) -> None:
        self.responses: dict[str, Any] = dict(responses or {})
        self.calls: list[dict[str, Any]] = []
        self._session_key = session_key
        self.closed = False

    @property
    def session_key(self) -> str | None:
        return self._session_key

    @session_key.setter
    def session_key(self, value: str | None) -> None:
        self._session_key = value

    async def send(
        self,
        method: str,
        params: Mapping[str, str],
        *,
        require_auth: bool = False,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[JsonObject]:
        self.calls.append({"method": method, "params": dict(params), "require_auth": require_auth})
        if require_auth and not self._session_key:
            return ApiResult.failure(StatusCode.AUTHENTICATION_REQUIRED, error_message="not authenticated")
        response = self.responses.get(method)
        if response is None:
            return ApiResult.failure(StatusCode.INVALID_METHOD, http_status=400, error_message=f"no fixture for {method}")
        if isinstance(response, ApiResult):
            return response
        return ApiResult.success(response)

    async def close(self) -> None:
        self.closed = True

    @property
    def last_call(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def fake_invoker() -> FakeInvoker:
    """Invoker without fixtures or session; tests fill .responses as needed."""
    return FakeInvoker()


@pytest.fixture
def authed_invoker() -> FakeInvoker:
    """Invoker with a session key set."""
    return FakeInvoker(session_key="session-key-123")
