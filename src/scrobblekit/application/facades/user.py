"""User API facade (user.* methods)."""

import asyncio
from datetime import datetime

from scrobblekit.application.facades._base import BaseApi, optional_params
from scrobblekit.application.parameters import (
    flag_param,
    limit_and_page_params,
    require_text,
    unix_timestamp,
)
from scrobblekit.domain.entities import (
    AlbumInfo,
    ArtistInfo,
    PagedResult,
    TagInfo,
    TrackInfo,
    UserInfo,
    WeeklyChartInfo,
)
from scrobblekit.domain.exceptions import ValidationError
from scrobblekit.domain.result import ApiResult
from scrobblekit.domain.value_objects import TimePeriod
from scrobblekit.infrastructure.parsing import (
    decode_album,
    decode_artist,
    decode_list,
    decode_paged,
    decode_tag,
    decode_track,
    decode_user,
    decode_weekly_chart,
)


def _window_params(from_: datetime | None, to: datetime | None) -> dict[str, str]:
    params: dict[str, str] = {}
    if from_ is not None:
        params["from"] = unix_timestamp(from_)
    if to is not None:
        params["to"] = unix_timestamp(to)
    # Compared as epoch seconds so a naive (UTC) bound can be mixed with an aware one
    if "from" in params and "to" in params and int(params["from"]) >= int(params["to"]):
        raise ValidationError("from_ must be before to")
    return params


class UserApi(BaseApi):
    """User profiles, listening history, charts and friends."""

    async def get_info(
        self, username: str | None = None, *, cancel: asyncio.Event | None = None
    ) -> ApiResult[UserInfo]:
        """
        Get a user's profile (user.getInfo).

        Args:
            username: User to look up; None means the authenticated user (session required)
            cancel: Aborts the request when set
        """
        params = optional_params(user=username)
        return await self._call(
            "user.getInfo",
            params,
            decode_user,
            "user info",
            require_auth=username is None,
            cancel=cancel,
        )

    async def get_friends(
        self,
        username: str,
        *,
        recent_tracks: bool = False,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[UserInfo]]:
        """Get a user's friends (user.getFriends)."""
        params = {"user": require_text("username", username)}
        params |= flag_param("recenttracks", recent_tracks)
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "user.getFriends",
            params,
            lambda root: decode_paged(root, "friends", "user", decode_user),
            "friends",
            cancel=cancel,
        )

    async def get_loved_tracks(
        self,
        username: str,
        *,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[TrackInfo]]:
        """
        Get the tracks a user loved (user.getLovedTracks).

        Every item has user_loved=True and user_loved_date set, played_at stays None.
        """
        params = {"user": require_text("username", username)}
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "user.getLovedTracks",
            params,
            lambda root: decode_paged(root, "lovedtracks", "track", decode_track),
            "loved tracks",
            cancel=cancel,
        )

    async def get_recent_tracks(
        self,
        username: str,
        *,
        extended: bool = False,
        from_: datetime | None = None,
        to: datetime | None = None,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[TrackInfo]]:
        """
        Get a user's scrobble history, newest first (user.getRecentTracks).

        The first item may be the track playing right now (is_now_playing=True, no played_at).

        Args:
            username: User to look up
            extended: Include full artist objects and the loved flag
            from_: Only plays after this instant
            to: Only plays before this instant
            limit: Items per page (max 200 upstream)
            page: Page number
            cancel: Aborts the request when set

        Raises:
            ValidationError: If limit/page are not positive or from_ is not before to
        """
        params = {"user": require_text("username", username)}
        params |= flag_param("extended", extended)
        params |= _window_params(from_, to)
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "user.getRecentTracks",
            params,
            lambda root: decode_paged(root, "recenttracks", "track", decode_track),
            "recent tracks",
            cancel=cancel,
        )

    async def get_top_albums(
        self,
        username: str,
        *,
        period: TimePeriod = TimePeriod.OVERALL,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[AlbumInfo]]:
        """Get a user's most played albums over a period (user.getTopAlbums)."""
        params = {"user": require_text("username", username), "period": TimePeriod(period).value}
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "user.getTopAlbums",
            params,
            lambda root: decode_paged(root, "topalbums", "album", decode_album),
            "user top albums",
            cancel=cancel,
        )

    async def get_top_artists(
        self,
        username: str,
        *,
        period: TimePeriod = TimePeriod.OVERALL,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[ArtistInfo]]:
        """Get a user's most played artists over a period (user.getTopArtists)."""
        params = {"user": require_text("username", username), "period": TimePeriod(period).value}
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "user.getTopArtists",
            params,
            lambda root: decode_paged(root, "topartists", "artist", decode_artist),
            "user top artists",
            cancel=cancel,
        )

    async def get_top_tags(
        self,
        username: str,
        *,
        limit: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[tuple[TagInfo, ...]]:
        """Get the tags a user applied most (user.getTopTags); count is in user_used_count."""
        params = {"user": require_text("username", username)}
        params |= limit_and_page_params(limit=limit)
        return await self._call(
            "user.getTopTags",
            params,
            lambda root: decode_list(root, "toptags", "tag", decode_tag),
            "user top tags",
            cancel=cancel,
        )

    async def get_top_tracks(
        self,
        username: str,
        *,
        period: TimePeriod = TimePeriod.OVERALL,
        limit: int | None = None,
        page: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[PagedResult[TrackInfo]]:
        """Get a user's most played tracks over a period (user.getTopTracks)."""
        params = {"user": require_text("username", username), "period": TimePeriod(period).value}
        params |= limit_and_page_params(limit, page)
        return await self._call(
            "user.getTopTracks",
            params,
            lambda root: decode_paged(root, "toptracks", "track", decode_track),
            "user top tracks",
            cancel=cancel,
        )

    async def get_weekly_chart_list(
        self, username: str, *, cancel: asyncio.Event | None = None
    ) -> ApiResult[tuple[WeeklyChartInfo, ...]]:
        """Get the weekly chart windows available for a user (user.getWeeklyChartList)."""
        params = {"user": require_text("username", username)}
        return await self._call(
            "user.getWeeklyChartList",
            params,
            lambda root: decode_list(root, "weeklychartlist", "chart", decode_weekly_chart),
            "weekly chart list",
            cancel=cancel,
        )

    async def get_weekly_artist_chart(
        self,
        username: str,
        *,
        from_: datetime | None = None,
        to: datetime | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[tuple[ArtistInfo, ...]]:
        """Get a user's artist chart for one week window, latest week by default."""
        params = {"user": require_text("username", username)}
        params |= _window_params(from_, to)
        return await self._call(
            "user.getWeeklyArtistChart",
            params,
            lambda root: decode_list(root, "weeklyartistchart", "artist", decode_artist),
            "weekly artist chart",
            cancel=cancel,
        )

    async def get_weekly_album_chart(
        self,
        username: str,
        *,
        from_: datetime | None = None,
        to: datetime | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[tuple[AlbumInfo, ...]]:
        """Get a user's album chart for one week window, latest week by default."""
        params = {"user": require_text("username", username)}
        params |= _window_params(from_, to)
        return await self._call(
            "user.getWeeklyAlbumChart",
            params,
            lambda root: decode_list(root, "weeklyalbumchart", "album", decode_album),
            "weekly album chart",
            cancel=cancel,
        )

    async def get_weekly_track_chart(
        self,
        username: str,
        *,
        from_: datetime | None = None,
        to: datetime | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ApiResult[tuple[TrackInfo, ...]]:
        """Get a user's track chart for one week window, latest week by default."""
        params = {"user": require_text("username", username)}
        params |= _window_params(from_, to)
        return await self._call(
            "user.getWeeklyTrackChart",
            params,
            lambda root: decode_list(root, "weeklytrackchart", "track", decode_track),
            "weekly track chart",
            cancel=cancel,
        )
