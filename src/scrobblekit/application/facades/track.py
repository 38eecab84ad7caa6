"""Track API facade (track.* methods), including scrobbling."""

import asyncio
import logging
from collections.abc import Sequence

from scrobblekit.application.facades._base import BaseApi, optional_params
from scrobblekit.application.parameters import (
    MAX_SCROBBLES_PER_BATCH,
    autocorrect_param,
    flag_param,
    identity_params,
    limit_and_page_params,
    require_text,
    tag_list_param,
    unix_timestamp,
)
from scrobblekit.domain.entities import PagedResult, ScrobbleData, ScrobbleInfo, TagInfo, TrackInfo
from scrobblekit.domain.exceptions import ValidationError
from scrobblekit.domain.result import ApiResult
from scrobblekit.infrastructure.parsing import (
    decode_correction,
    decode_list,
    decode_scrobble,
    decode_scrobbles,
    decode_search,
    decode_tag,
    decode_track,
)
from scrobblekit.infrastructure.parsing.values import get_object

logger = logging.getLogger(__name__)


def _scrobble_params(scrobble: ScrobbleData, index: int | None, with_timestamp: bool) -> dict[str, str]:
    """Flatten one ScrobbleData into artist[i]=..., track[i]=... style params."""
    suffix = f"[{index}]" if index is not None else ""
    values = {
        "artist": require_text("artist", scrobble.artist),
        "track": require_text("track", scrobble.track),
    }
    if with_timestamp:
        values["timestamp"] = unix_timestamp(scrobble.timestamp)
    values |= optional_params(
        album=scrobble.album,
        albumArtist=scrobble.album_artist,
        trackNumber=scrobble.track_number,
        mbid=scrobble.mbid,
        context=scrobble.context,
    )
    if scrobble.duration is not None:
        values["duration"] = str(int(scrobble.duration.total_seconds()))
    values |= flag_param("chosenByUser", scrobble.chosen_by_user)
    return {f"{key}{suffix}": value for key, value in values.items()}


class TrackApi(BaseApi):
    """Track lookups, search, tagging, love/unlove and scrobbling."""

    async def get_info(
        self,
        artist: str | None = None,
        track: str | None = None,
        *,
        mbid: str | None = None,
        username: str | None = None,
        autocorrect: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[TrackInfo]:
        """
        Get track metadata (track.getInfo).

        With a username the response carries userplaycount and userloved for that user.
        Without one, user_play_count is forced to None: the decoder falls back to the
        global playcount for it, which is wrong in this context.

        Args:
            artist: Artist name (ignored when mbid is given)
            track: Track name (ignored when mbid is given)
            mbid: MusicBrainz recording ID
            username: Include this user's play count and loved flag
            autocorrect: Let Last.fm fix misspelled names
            cancel: Aborts the request when set

        Returns:
            Track info
        """
        params = identity_params(mbid, artist=artist, track=track)
        params |= autocorrect_param(autocorrect)
        params |= optional_params(username=username)
        return await self._call(
            "track.getInfo",
            params,
            decode_track,
            "track info",
            username_given=username is not None,
            cancel=cancel,
        )

    async def get_correction(
        self, artist: str, track: str, *, cancel: asyncio.Event | None = None
    ) -> ApiResult[TrackInfo | None]:
        """Get the canonical artist/track spelling; data is None when there's none."""
        params = {"artist": require_text("artist", artist), "track": require_text("track", track)}
        return await self._call(
            "track.getCorrection",
            params,
            lambda root: decode_correction(root, "track", decode_track),
            "track correction",
            cancel=cancel,
        )

    async def get_similar(
        self,
        artist: str | None = None,
        track: str | None = None,
        *,
        mbid: str | None = None,
        limit: int | None = None,
        autocorrect: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[tuple[TrackInfo, ...]]:
        """Get similar tracks (track.getSimilar), each with a match score."""
        params = identity_params(mbid, artist=artist, track=track)
        params |= limit_and_page_params(limit=limit)
        params |= autocorrect_param(autocorrect)
        return await self._call(
            "track.getSimilar",
            params,
            lambda root: decode_list(root, "similartracks", "track", decode_track),
            "similar tracks",
            cancel=cancel,
        )

    async def get_tags(
        self,
        artist: str | None = None,
        track: str | None = None,
        *,
        mbid: str | None = None,
        username: str | None = None,
        autocorrect: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[tuple[TagInfo, ...]]:
        """Get the tags a user applied to a track; without username a session is required."""
        params = identity_params(mbid, artist=artist, track=track)
        params |= autocorrect_param(autocorrect)
        params |= optional_params(user=username)
        return await self._call(
            "track.getTags",
            params,
            lambda root: decode_list(root, "tags", "tag", decode_tag),
            "track tags",
            require_auth=username is None,
            cancel=cancel,
        )

    async def get_top_tags(
        self,
        artist: str | None = None,
        track: str | None = None,
        *,
        mbid: str | None = None,
        autocorrect: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[tuple[TagInfo, ...]]:
        """Get a track's top tags (track.getTopTags); count means weight on the track."""
        params = identity_params(mbid, artist=artist, track=track)
        params |= autocorrect_param(autocorrect)
        return await self._call(
            "track.getTopTags",
            params,
            lambda root: decode_list(root, "toptags", "tag", decode_tag),
            "track top tags",
            cancel=cancel,
        )

    async def search(
        self,
        track: str,
        *,
        artist: str | None = None,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[TrackInfo]]:
        """Search tracks by name, optionally narrowed to an artist (track.search)."""
        params = {"track": require_text("track", track)}
        params |= optional_params(artist=artist)
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "track.search",
            params,
            lambda root: decode_search(root, "trackmatches", "track", decode_track),
            "track search results",
            cancel=cancel,
        )

    async def add_tags(
        self,
        artist: str,
        track: str,
        tags: Sequence[str],
        *,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[None]:
        """Tag a track for the authenticated user (track.addTags), 1 to 10 tags."""
        params = {
            "artist": require_text("artist", artist),
            "track": require_text("track", track),
            "tags": tag_list_param(tags),
        }
        return await self._call_void("track.addTags", params, cancel=cancel)

    async def remove_tag(
        self,
        artist: str,
        track: str,
        tag: str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[None]:
        """Remove one of the authenticated user's tags from a track (track.removeTag)."""
        params = {
            "artist": require_text("artist", artist),
            "track": require_text("track", track),
            "tag": require_text("tag", tag),
        }
        return await self._call_void("track.removeTag", params, cancel=cancel)

    async def love(
        self, artist: str, track: str, *, cancel: asyncio.Event | None = None
    ) -> ApiResult[None]:
        """Love a track for the authenticated user (track.love)."""
        params = {"artist": require_text("artist", artist), "track": require_text("track", track)}
        return await self._call_void("track.love", params, cancel=cancel)

    async def unlove(
        self, artist: str, track: str, *, cancel: asyncio.Event | None = None
    ) -> ApiResult[None]:
        """Un-love a track for the authenticated user (track.unlove)."""
        params = {"artist": require_text("artist", artist), "track": require_text("track", track)}
        return await self._call_void("track.unlove", params, cancel=cancel)

    async def update_now_playing(
        self, scrobble: ScrobbleData, *, cancel: asyncio.Event | None = None
    ) -> ApiResult[ScrobbleInfo]:
        """
        Tell Last.fm what the authenticated user is listening to right now.

        The timestamp of scrobble is not sent, now-playing has none.
        """
        params = _scrobble_params(scrobble, index=None, with_timestamp=False)
        return await self._call(
            "track.updateNowPlaying",
            params,
            lambda root: decode_scrobble(get_object(root, "nowplaying")),
            "now playing",
            require_auth=True,
            cancel=cancel,
        )

    # Hey future me, a scrobble batch is ONE request with indexed params (artist[0], track[0],
    # timestamp[0], artist[1], ...). Last.fm caps it at 50. Callers that need ordering across
    # batches have to await one batch before sending the next, we don't queue anything.
    async def scrobble(
        self, scrobbles: Sequence[ScrobbleData], *, cancel: asyncio.Event | None = None
    ) -> ApiResult[tuple[ScrobbleInfo, ...]]:
        """
        Submit plays for the authenticated user (track.scrobble).

        Args:
            scrobbles: 1 to 50 plays
            cancel: Aborts the request when set

        Returns:
            One verdict per submitted play; check ignored_reason for filtered ones

        Raises:
            ValidationError: If the batch is empty or larger than 50
        """
        if isinstance(scrobbles, ScrobbleData):
            scrobbles = [scrobbles]
        if not scrobbles:
            raise ValidationError("At least one scrobble is required")
        if len(scrobbles) > MAX_SCROBBLES_PER_BATCH:
            raise ValidationError(
                f"At most {MAX_SCROBBLES_PER_BATCH} scrobbles can be sent at once, got {len(scrobbles)}"
            )

        params: dict[str, str] = {}
        for index, item in enumerate(scrobbles):
            params |= _scrobble_params(item, index=index, with_timestamp=True)

        logger.debug("Scrobbling %d track(s)", len(scrobbles))
        return await self._call(
            "track.scrobble",
            params,
            decode_scrobbles,
            "scrobble response",
            require_auth=True,
            cancel=cancel,
        )
