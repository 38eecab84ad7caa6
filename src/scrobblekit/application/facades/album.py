"""Album API facade (album.* methods)."""

import asyncio
from collections.abc import Sequence

from scrobblekit.application.facades._base import BaseApi, optional_params
from scrobblekit.application.parameters import (
    autocorrect_param,
    identity_params,
    limit_and_page_params,
    require_text,
    tag_list_param,
)
from scrobblekit.domain.entities import AlbumInfo, PagedResult, TagInfo
from scrobblekit.domain.result import ApiResult
from scrobblekit.infrastructure.parsing import (
    decode_album,
    decode_list,
    decode_search,
    decode_tag,
)


class AlbumApi(BaseApi):
    """Album lookups, search and tagging."""

    async def get_info(
        self,
        artist: str | None = None,
        album: str | None = None,
        *,
        mbid: str | None = None,
        username: str | None = None,
        autocorrect: bool = True,
        lang: str | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[AlbumInfo]:
        """
        Get album metadata, tracklist, tags and wiki (album.getInfo).

        Args:
            artist: Artist name (ignored when mbid is given)
            album: Album title (ignored when mbid is given)
            mbid: MusicBrainz release ID
            username: Include this user's play count
            autocorrect: Let Last.fm fix misspelled names
            lang: ISO 639 language for the wiki
            cancel: Aborts the request when set

        Returns:
            Album info; user_play_count is always None without a username
        """
        params = identity_params(mbid, artist=artist, album=album)
        params |= autocorrect_param(autocorrect)
        params |= optional_params(username=username, lang=lang)
        return await self._call(
            "album.getInfo",
            params,
            decode_album,
            "album info",
            username_given=username is not None,
            cancel=cancel,
        )

    async def get_tags(
        self,
        artist: str | None = None,
        album: str | None = None,
        *,
        mbid: str | None = None,
        username: str | None = None,
        autocorrect: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[tuple[TagInfo, ...]]:
        """Get the tags a user applied to an album; without username a session is required."""
        params = identity_params(mbid, artist=artist, album=album)
        params |= autocorrect_param(autocorrect)
        params |= optional_params(user=username)
        return await self._call(
            "album.getTags",
            params,
            lambda root: decode_list(root, "tags", "tag", decode_tag),
            "album tags",
            require_auth=username is None,
            cancel=cancel,
        )

    # Yo, album.getTopTags by mbid is flaky upstream: Last.fm regularly answers "Album not found"
    # (INVALID_PARAMETERS) for MBIDs that album.getInfo resolves just fine. We pass the mbid
    # through as-is and report whatever comes back, no fallback to name lookup.
    async def get_top_tags(
        self,
        artist: str | None = None,
        album: str | None = None,
        *,
        mbid: str | None = None,
        autocorrect: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[tuple[TagInfo, ...]]:
        """Get an album's top tags (album.getTopTags); count means weight on the album."""
        params = identity_params(mbid, artist=artist, album=album)
        params |= autocorrect_param(autocorrect)
        return await self._call(
            "album.getTopTags",
            params,
            lambda root: decode_list(root, "toptags", "tag", decode_tag),
            "album top tags",
            cancel=cancel,
        )

    async def search(
        self,
        album: str,
        *,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[AlbumInfo]]:
        """Search albums by title (album.search)."""
        params = {"album": require_text("album", album)}
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "album.search",
            params,
            lambda root: decode_search(root, "albummatches", "album", decode_album),
            "album search results",
            cancel=cancel,
        )

    async def add_tags(
        self,
        artist: str,
        album: str,
        tags: Sequence[str],
        *,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[None]:
        """Tag an album for the authenticated user (album.addTags), 1 to 10 tags."""
        params = {
            "artist": require_text("artist", artist),
            "album": require_text("album", album),
            "tags": tag_list_param(tags),
        }
        return await self._call_void("album.addTags", params, cancel=cancel)

    async def remove_tag(
        self,
        artist: str,
        album: str,
        tag: str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[None]:
        """Remove one of the authenticated user's tags from an album (album.removeTag)."""
        params = {
            "artist": require_text("artist", artist),
            "album": require_text("album", album),
            "tag": require_text("tag", tag),
        }
        return await self._call_void("album.removeTag", params, cancel=cancel)
