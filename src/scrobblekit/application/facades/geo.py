"""Geo API facade (geo.* methods)."""

import asyncio

from scrobblekit.application.facades._base import BaseApi, optional_params
from scrobblekit.application.parameters import limit_and_page_params, require_text
from scrobblekit.domain.entities import ArtistInfo, PagedResult, TrackInfo
from scrobblekit.domain.result import ApiResult
from scrobblekit.infrastructure.parsing import decode_artist, decode_paged, decode_track


class GeoApi(BaseApi):
    """Per-country charts. country is an ISO 3166-1 country name, e.g. "Germany"."""

    async def get_top_artists(
        self,
        country: str,
        *,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[ArtistInfo]]:
        """Get the most popular artists in a country (geo.getTopArtists)."""
        params = {"country": require_text("country", country)}
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "geo.getTopArtists",
            params,
            lambda root: decode_paged(root, "topartists", "artist", decode_artist),
            "geo top artists",
            cancel=cancel,
        )

    async def get_top_tracks(
        self,
        country: str,
        *,
        location: str | None = None,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[TrackInfo]]:
        """Get the most popular tracks in a country, optionally a metro within it (geo.getTopTracks)."""
        params = {"country": require_text("country", country)}
        params |= optional_params(location=location)
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "geo.getTopTracks",
            params,
            lambda root: decode_paged(root, "tracks", "track", decode_track),
            "geo top tracks",
            cancel=cancel,
        )
