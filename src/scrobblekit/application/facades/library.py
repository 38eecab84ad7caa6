"""Library API facade (library.* methods)."""

import asyncio

from scrobblekit.application.facades._base import BaseApi
from scrobblekit.application.parameters import limit_and_page_params, require_text
from scrobblekit.domain.entities import ArtistInfo, PagedResult
from scrobblekit.domain.result import ApiResult
from scrobblekit.infrastructure.parsing import decode_artist, decode_paged


class LibraryApi(BaseApi):
    """A user's library."""

    async def get_artists(
        self,
        username: str,
        *,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[ArtistInfo]]:
        """
        Get all artists in a user's library with the user's play counts (library.getArtists).

        Ranked items carry the user's own count in user_play_count. play_count is always None,
        there is no global count on this endpoint.
        """
        params = {"user": require_text("username", username)}
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "library.getArtists",
            params,
            lambda root: decode_paged(root, "artists", "artist", decode_artist),
            "library artists",
            cancel=cancel,
        )
