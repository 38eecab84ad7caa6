"""Last.fm client: one object giving access to every facade."""

import logging
from typing import Any

import httpx

from scrobblekit.application.facades import (
    AlbumApi,
    ArtistApi,
    ChartApi,
    GeoApi,
    LibraryApi,
    TagApi,
    TrackApi,
    UserApi,
)
from scrobblekit.config import LastfmSettings, get_settings
from scrobblekit.domain.exceptions import ConfigurationError, ValidationError
from scrobblekit.domain.ports import IRequestInvoker
from scrobblekit.infrastructure.integrations import LastfmApiInvoker, LastfmAuthService

logger = logging.getLogger(__name__)


# Hey future me, the client owns exactly ONE piece of mutable state: the session key on the
# invoker. Set it once after auth and every facade's authenticated calls pick it up. It's not
# locked, don't flip it from several tasks at once while calls are in flight.
class LastfmClient:
    """Entry point to the Last.fm API.

    Example:
        async with LastfmClient(api_key, api_secret) as client:
            result = await client.artist.get_info("Korn")
            if result.is_success:
                print(result.data.listeners)
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        session_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        invoker: IRequestInvoker | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: Last.fm API key
            api_secret: Last.fm shared secret
            session_key: Session key from an earlier auth, enables authenticated calls
            http_client: Shared httpx client (the caller closes it)
            invoker: Custom invoker, mostly for tests; http_client/base_url/timeout/user_agent are ignored then
            base_url: Override the API endpoint
            timeout: Request timeout in seconds
            user_agent: User-Agent header sent with every request

        Raises:
            ConfigurationError: If api_key or api_secret is empty
        """
        if not api_key or not api_key.strip():
            raise ConfigurationError("Last.fm api_key is required")
        if not api_secret or not api_secret.strip():
            raise ConfigurationError("Last.fm api_secret is required")

        options: dict[str, Any] = {}
        if base_url is not None:
            options["base_url"] = base_url
        if timeout is not None:
            options["timeout"] = timeout
        if user_agent is not None:
            options["user_agent"] = user_agent

        self._invoker = invoker or LastfmApiInvoker(
            api_key, api_secret, session_key=session_key, http_client=http_client, **options
        )
        if invoker is not None and session_key is not None:
            self._invoker.session_key = session_key

        self.auth = LastfmAuthService(api_key, api_secret, http_client=http_client, **options)
        self.artist = ArtistApi(self._invoker)
        self.album = AlbumApi(self._invoker)
        self.track = TrackApi(self._invoker)
        self.tag = TagApi(self._invoker)
        self.user = UserApi(self._invoker)
        self.chart = ChartApi(self._invoker)
        self.geo = GeoApi(self._invoker)
        self.library = LibraryApi(self._invoker)

    @classmethod
    def from_settings(
        cls,
        settings: LastfmSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> "LastfmClient":
        """
        Build a client from LASTFM_* settings.

        Args:
            settings: Last.fm settings, defaults to get_settings().lastfm
            http_client: Shared httpx client

        Raises:
            ConfigurationError: If key or secret are not configured
        """
        settings = settings or get_settings().lastfm
        if not settings.is_configured():
            raise ConfigurationError(
                "Last.fm is not configured, set LASTFM_API_KEY and LASTFM_API_SECRET"
            )
        return cls(
            settings.api_key,
            settings.api_secret,
            session_key=settings.session_key,
            http_client=http_client,
            base_url=settings.base_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )

    @property
    def session_key(self) -> str | None:
        return self._invoker.session_key

    @property
    def is_authenticated(self) -> bool:
        return bool(self._invoker.session_key)

    def set_session_key(self, session_key: str) -> None:
        """
        Use a session key for all subsequent authenticated calls.

        Raises:
            ValidationError: If session_key is empty
        """
        if not session_key or not session_key.strip():
            raise ValidationError("session_key must not be empty")
        self._invoker.session_key = session_key
        logger.debug("Session key set, authenticated calls enabled")

    def clear_session_key(self) -> None:
        """Forget the session key; authenticated calls fail with AUTHENTICATION_REQUIRED again."""
        self._invoker.session_key = None

    async def close(self) -> None:
        """Close network resources we own."""
        await self._invoker.close()
        await self.auth.close()

    async def __aenter__(self) -> "LastfmClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
