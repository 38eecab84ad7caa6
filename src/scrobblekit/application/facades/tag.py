"""Tag API facade (tag.* methods)."""

import asyncio

from scrobblekit.application.facades._base import BaseApi, optional_params
from scrobblekit.application.parameters import limit_and_page_params, require_text
from scrobblekit.domain.entities import (
    AlbumInfo,
    ArtistInfo,
    PagedResult,
    TagInfo,
    TrackInfo,
    WeeklyChartInfo,
)
from scrobblekit.domain.exceptions import ValidationError
from scrobblekit.domain.result import ApiResult
from scrobblekit.infrastructure.parsing import (
    decode_album,
    decode_artist,
    decode_list,
    decode_paged,
    decode_tag,
    decode_track,
    decode_weekly_chart,
)


class TagApi(BaseApi):
    """Tag info, similar tags and per-tag charts."""

    async def get_info(
        self, tag: str, *, lang: str | None = None, cancel: asyncio.Event | None = None
    ) -> ApiResult[TagInfo]:
        """Get reach, taggings and wiki for a tag (tag.getInfo)."""
        params = {"tag": require_text("tag", tag)}
        params |= optional_params(lang=lang)
        return await self._call("tag.getInfo", params, decode_tag, "tag info", cancel=cancel)

    async def get_similar(
        self, tag: str, *, cancel: asyncio.Event | None = None
    ) -> ApiResult[tuple[TagInfo, ...]]:
        """
        Get tags similar to this one (tag.getSimilar).

        Last.fm has been returning an empty list for every tag for years. Expect ().
        """
        params = {"tag": require_text("tag", tag)}
        return await self._call(
            "tag.getSimilar",
            params,
            lambda root: decode_list(root, "similartags", "tag", decode_tag),
            "similar tags",
            cancel=cancel,
        )

    async def get_top_albums(
        self,
        tag: str,
        *,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[AlbumInfo]]:
        """Get the top albums for a tag (tag.getTopAlbums)."""
        params = {"tag": require_text("tag", tag)}
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "tag.getTopAlbums",
            params,
            lambda root: decode_paged(root, "albums", "album", decode_album),
            "tag top albums",
            cancel=cancel,
        )

    async def get_top_artists(
        self,
        tag: str,
        *,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[ArtistInfo]]:
        """Get the top artists for a tag (tag.getTopArtists)."""
        params = {"tag": require_text("tag", tag)}
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "tag.getTopArtists",
            params,
            lambda root: decode_paged(root, "topartists", "artist", decode_artist),
            "tag top artists",
            cancel=cancel,
        )

    async def get_top_tracks(
        self,
        tag: str,
        *,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[TrackInfo]]:
        """Get the top tracks for a tag (tag.getTopTracks)."""
        params = {"tag": require_text("tag", tag)}
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "tag.getTopTracks",
            params,
            lambda root: decode_paged(root, "tracks", "track", decode_track),
            "tag top tracks",
            cancel=cancel,
        )

    # Yo, tag.getTopTags is the odd one: it pages with offset/num_res instead of page/limit,
    # and its "@attr" has no page/perPage. The envelope decoder falls back to page 1 and
    # per_page = number of items, which is what you want here anyway.
    async def get_top_tags(
        self,
        *,
        offset: int | None = None,
        num_res: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[TagInfo]]:
        """
        Get the globally most used tags (tag.getTopTags).

        Args:
            offset: Number of tags to skip, >= 0
            num_res: Number of tags to return, > 0
            cancel: Aborts the request when set

        Raises:
            ValidationError: If offset is negative or num_res is not positive
        """
        if offset is not None and offset < 0:
            raise ValidationError(f"offset must not be negative, got {offset}")
        if num_res is not None and num_res <= 0:
            raise ValidationError(f"num_res must be greater than 0, got {num_res}")
        params = optional_params(offset=offset, num_res=num_res)
        return await self._call(
            "tag.getTopTags",
            params,
            lambda root: decode_paged(root, "toptags", "tag", decode_tag),
            "top tags",
            cancel=cancel,
        )

    async def get_weekly_chart_list(
        self, tag: str, *, cancel: asyncio.Event | None = None
    ) -> ApiResult[tuple[WeeklyChartInfo, ...]]:
        """Get the weekly chart windows available for a tag (tag.getWeeklyChartList)."""
        params = {"tag": require_text("tag", tag)}
        return await self._call(
            "tag.getWeeklyChartList",
            params,
            lambda root: decode_list(root, "weeklychartlist", "chart", decode_weekly_chart),
            "weekly chart list",
            cancel=cancel,
        )
