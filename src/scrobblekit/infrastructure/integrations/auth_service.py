"""Last.fm web authentication (token → session key exchange)."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from scrobblekit.domain.entities import AuthSession
from scrobblekit.domain.exceptions import AuthenticationError, ValidationError
from scrobblekit.infrastructure.integrations.lastfm_invoker import (
    API_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from scrobblekit.infrastructure.integrations.signing import sign_params
from scrobblekit.infrastructure.parsing.values import get_object, get_str, try_parse_int

logger = logging.getLogger(__name__)

AUTH_URL_TEMPLATE = "https://www.last.fm/api/auth/?api_key={api_key}&cb={callback}"


# Hey future me, the Last.fm web auth dance goes:
#   1. send the user to get_authorization_url(callback) in a browser
#   2. Last.fm redirects to callback?token=XYZ after the user clicks "allow"
#   3. get_session("XYZ") trades the token for a session key that never expires
# Step 2 (opening a browser, running a local callback listener) is the APP's job, not ours.
# Unlike the facades this raises AuthenticationError, there is no sensible "partial" session.
class LastfmAuthService:
    """Handles the token → session part of Last.fm web authentication."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.api_key = api_key
        self._api_secret = api_secret
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent
        self._headers = {"User-Agent": user_agent}
        self._client = http_client
        self._owns_client = http_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=self._headers,
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close HTTP client (only if we created it)."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def get_authorization_url(self, callback_url: str) -> str:
        """
        Build the URL the user has to open to grant access.

        Args:
            callback_url: Where Last.fm redirects with ?token=... afterwards

        Returns:
            Authorization URL
        """
        if not callback_url:
            raise ValidationError("callback_url must not be empty")
        return AUTH_URL_TEMPLATE.format(api_key=self.api_key, callback=quote(callback_url, safe=""))

    async def get_token(self) -> str:
        """
        Fetch an unauthorized request token (auth.getToken).

        Returns:
            Token valid for 60 minutes

        Raises:
            AuthenticationError: If Last.fm refuses or the response is unusable
        """
        data = await self._signed_call("auth.getToken", {}, post=False)
        token = get_str(data, "token")
        if token is None:
            raise AuthenticationError("auth.getToken response has no token")
        return token

    async def get_session(self, token: str) -> AuthSession:
        """
        Exchange an authorized token for a session (auth.getSession).

        Args:
            token: Token the user authorized in the browser

        Returns:
            Username + session key

        Raises:
            ValidationError: If token is empty
            AuthenticationError: If Last.fm refuses or the response is unusable
        """
        if not token:
            raise ValidationError("token must not be empty")

        data = await self._signed_call("auth.getSession", {"token": token}, post=True)
        session = get_object(data, "session")
        username = get_str(session, "name")
        session_key = get_str(session, "key")
        if username is None or session_key is None:
            raise AuthenticationError("auth.getSession response has no session name/key")

        logger.info("Obtained Last.fm session for user %s", username)
        return AuthSession(username=username, session_key=session_key)

    async def _signed_call(self, method: str, params: dict[str, str], post: bool) -> dict[str, Any]:
        request_params = {**params, "method": method, "api_key": self.api_key}
        request_params["api_sig"] = sign_params(request_params, self._api_secret)
        request_params["format"] = "json"

        client = await self._get_client()
        try:
            if post:
                response = await client.post(self.base_url, data=request_params, headers=self._headers)
            else:
                response = await client.get(self.base_url, params=request_params, headers=self._headers)
        except httpx.RequestError as e:
            raise AuthenticationError(f"{method} request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise AuthenticationError(
                f"{method} returned a non-JSON body (HTTP {response.status_code})"
            ) from e

        if isinstance(data, dict) and "error" in data:
            raise AuthenticationError(
                get_str(data, "message") or f"{method} failed",
                error_code=try_parse_int(data.get("error")),
            )
        if not response.is_success or not isinstance(data, dict):
            raise AuthenticationError(f"{method} failed with HTTP {response.status_code}")
        return data
