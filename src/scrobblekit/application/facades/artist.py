"""Artist API facade (artist.* methods)."""

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
from scrobblekit.domain.entities import AlbumInfo, ArtistInfo, PagedResult, TagInfo, TrackInfo
from scrobblekit.domain.result import ApiResult
from scrobblekit.infrastructure.parsing import (
    decode_album,
    decode_artist,
    decode_correction,
    decode_list,
    decode_paged,
    decode_search,
    decode_tag,
    decode_track,
)


class ArtistApi(BaseApi):
    """Artist lookups, charts, search and tagging."""

    async def get_info(
        self,
        artist: str | None = None,
        *,
        mbid: str | None = None,
        username: str | None = None,
        autocorrect: bool = True,
        lang: str | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[ArtistInfo]:
        """
        Get artist metadata, bio, similar artists and tags (artist.getInfo).

        Args:
            artist: Artist name (ignored when mbid is given)
            mbid: MusicBrainz artist ID
            username: Include this user's play count
            autocorrect: Let Last.fm fix misspelled names
            lang: ISO 639 language for the bio
            cancel: Aborts the request when set

        Returns:
            Artist info; user_play_count is always None without a username

        Raises:
            ValidationError: If neither artist nor mbid is given
        """
        params = identity_params(mbid, artist=artist)
        params |= autocorrect_param(autocorrect)
        params |= optional_params(username=username, lang=lang)
        return await self._call(
            "artist.getInfo",
            params,
            decode_artist,
            "artist info",
            username_given=username is not None,
            cancel=cancel,
        )

    async def get_similar(
        self,
        artist: str | None = None,
        *,
        mbid: str | None = None,
        limit: int | None = None,
        autocorrect: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[tuple[ArtistInfo, ...]]:
        """Get similar artists (artist.getSimilar), each with a match score."""
        params = identity_params(mbid, artist=artist)
        params |= limit_and_page_params(limit=limit)
        params |= autocorrect_param(autocorrect)
        return await self._call(
            "artist.getSimilar",
            params,
            lambda root: decode_list(root, "similarartists", "artist", decode_artist),
            "similar artists",
            cancel=cancel,
        )

    async def get_correction(
        self, artist: str, *, cancel: asyncio.Event | None = None
    ) -> ApiResult[ArtistInfo | None]:
        """Get the canonical spelling of an artist name; data is None when there's none."""
        params = {"artist": require_text("artist", artist)}
        return await self._call(
            "artist.getCorrection",
            params,
            lambda root: decode_correction(root, "artist", decode_artist),
            "artist correction",
            cancel=cancel,
        )

    async def get_tags(
        self,
        artist: str | None = None,
        *,
        mbid: str | None = None,
        username: str | None = None,
        autocorrect: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[tuple[TagInfo, ...]]:
        """
        Get the tags a user applied to an artist (artist.getTags).

        Without a username the authenticated user is used, so a session key is required.
        """
        params = identity_params(mbid, artist=artist)
        params |= autocorrect_param(autocorrect)
        params |= optional_params(user=username)
        return await self._call(
            "artist.getTags",
            params,
            lambda root: decode_list(root, "tags", "tag", decode_tag),
            "artist tags",
            require_auth=username is None,
            cancel=cancel,
        )

    async def get_top_albums(
        self,
        artist: str | None = None,
        *,
        mbid: str | None = None,
        limit: int | None = None,
        page: int | None = None,
        autocorrect: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[AlbumInfo]]:
        """Get an artist's top albums (artist.getTopAlbums)."""
        params = identity_params(mbid, artist=artist)
        params |= limit_and_page_params(limit, page)
        params |= autocorrect_param(autocorrect)
        return await self._call(
            "artist.getTopAlbums",
            params,
            lambda root: decode_paged(root, "topalbums", "album", decode_album),
            "top albums",
            cancel=cancel,
        )

    async def get_top_tags(
        self,
        artist: str | None = None,
        *,
        mbid: str | None = None,
        autocorrect: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[tuple[TagInfo, ...]]:
        """Get an artist's top tags (artist.getTopTags), count is the tag weight."""
        params = identity_params(mbid, artist=artist)
        params |= autocorrect_param(autocorrect)
        return await self._call(
            "artist.getTopTags",
            params,
            lambda root: decode_list(root, "toptags", "tag", decode_tag),
            "top tags",
            cancel=cancel,
        )

    async def get_top_tracks(
        self,
        artist: str | None = None,
        *,
        mbid: str | None = None,
        limit: int | None = None,
        page: int | None = None,
        autocorrect: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[TrackInfo]]:
        """Get an artist's top tracks (artist.getTopTracks)."""
        params = identity_params(mbid, artist=artist)
        params |= limit_and_page_params(limit, page)
        params |= autocorrect_param(autocorrect)
        return await self._call(
            "artist.getTopTracks",
            params,
            lambda root: decode_paged(root, "toptracks", "track", decode_track),
            "top tracks",
            cancel=cancel,
        )

    async def search(
        self,
        artist: str,
        *,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[ArtistInfo]]:
        """Search artists by name (artist.search)."""
        params = {"artist": require_text("artist", artist)}
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "artist.search",
            params,
            lambda root: decode_search(root, "artistmatches", "artist", decode_artist),
            "artist search results",
            cancel=cancel,
        )

    async def add_tags(
        self, artist: str, tags: Sequence[str], *, cancel: asyncio.Event | None = None
    ) -> ApiResult[None]:
        """
        Tag an artist for the authenticated user (artist.addTags).

        Raises:
            ValidationError: If tags is empty or holds more than 10 entries
        """
        params = {"artist": require_text("artist", artist), "tags": tag_list_param(tags)}
        return await self._call_void("artist.addTags", params, cancel=cancel)

    async def remove_tag(
        self, artist: str, tag: str, *, cancel: asyncio.Event | None = None
    ) -> ApiResult[None]:
        """Remove one of the authenticated user's tags from an artist (artist.removeTag)."""
        params = {"artist": require_text("artist", artist), "tag": require_text("tag", tag)}
        return await self._call_void("artist.removeTag", params, cancel=cancel)
