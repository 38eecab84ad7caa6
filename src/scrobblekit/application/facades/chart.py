"""Chart API facade (chart.* methods): global, not per-user, listings."""

import asyncio

from scrobblekit.application.facades._base import BaseApi
from scrobblekit.application.parameters import limit_and_page_params
from scrobblekit.domain.entities import ArtistInfo, PagedResult, TagInfo, TrackInfo
from scrobblekit.domain.result import ApiResult
from scrobblekit.infrastructure.parsing import decode_artist, decode_paged, decode_tag, decode_track


class ChartApi(BaseApi):
    """Global top artists, tags and tracks."""

    async def get_top_artists(
        self,
        *,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[ArtistInfo]]:
        """Get the global top artists (chart.getTopArtists)."""
        return await self._call(
            "chart.getTopArtists",
            limit_and_page_params(limit, page),
            lambda root: decode_paged(root, "artists", "artist", decode_artist),
            "chart top artists",
            cancel=cancel,
        )

    async def get_top_tags(
        self,
        *,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[TagInfo]]:
        """Get the global top tags (chart.getTopTags), with reach and taggings."""
        return await self._call(
            "chart.getTopTags",
            limit_and_page_params(limit, page),
            lambda root: decode_paged(root, "tags", "tag", decode_tag),
            "chart top tags",
            cancel=cancel,
        )

    async def get_top_tracks(
        self,
        *,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[TrackInfo]]:
        """Get the global top tracks (chart.getTopTracks)."""
        return await self._call(
            "chart.getTopTracks",
            limit_and_page_params(limit, page),
            lambda root: decode_paged(root, "tracks", "track", decode_track),
            "chart top tracks",
            cancel=cancel,
        )
