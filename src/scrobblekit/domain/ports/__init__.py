"""Domain ports (interfaces) for dependency inversion."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from scrobblekit.domain.result import ApiResult

# Hey future me, this is THE seam between the facades and the network. Facades never see
# httpx, they hand a method name + params to send() and get back an ApiResult carrying the
# parsed JSON object (or a classified failure). Tests swap in a fake implementing this port.
JsonObject = dict[str, Any]


class IRequestInvoker(ABC):
    """Port for sending one Last.fm API call."""

    @property
    @abstractmethod
    def session_key(self) -> str | None:
        """Session key used for authenticated calls, None when not logged in."""
        pass

    @session_key.setter
    @abstractmethod
    def session_key(self, value: str | None) -> None:
        pass

    @abstractmethod
    async def send(
        self,
        method: str,
        params: Mapping[str, str],
        *,
        require_auth: bool = False,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[JsonObject]:
        """
        Send a single API call.

        Args:
            method: Last.fm method name, e.g. "artist.getInfo"
            params: Method parameters (method/api_key/format are added by the invoker)
            require_auth: Sign the call and attach the session key
            cancel: Event that aborts the in-flight request when set

        Returns:
            Parsed JSON document on success, classified failure otherwise

        Raises:
            ValidationError: If a parameter key or value is empty
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""
        pass


__all__ = ["IRequestInvoker", "JsonObject"]
