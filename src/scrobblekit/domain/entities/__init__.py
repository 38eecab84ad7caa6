"""Domain entities."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import IntEnum
from typing import Generic, TypeVar

from scrobblekit.domain.entities.status_codes import (
    RETRYABLE_STATUS_CODES,
    StatusCode,
    describe,
    from_error_number,
    is_remote_error,
    is_retryable,
)
from scrobblekit.domain.value_objects import ImageSize, largest_image

T = TypeVar("T")

# Hey future me, EVERY entity here is a frozen dataclass! Decoders build them in one go and
# nobody mutates them afterwards. The facade corrections (nulling user_play_count & friends)
# go through dataclasses.replace(), which hands back a NEW instance. Sequences are tuples for
# the same reason. Images are a dict keyed by ImageSize, see infrastructure/parsing/images.py.
ImageMap = dict[ImageSize, str]


@dataclass(frozen=True)
class WikiInfo:
    """Biography / description block attached to artists, albums, tracks and tags.

    published is None when Last.fm sends no (or an unreadable) publish date, e.g. for
    the wiki stub of an unknown tag. summary and content are never None.
    """

    summary: str = ""
    content: str = ""
    published: datetime | None = None


@dataclass(frozen=True)
class TagInfo:
    """A tag (genre-ish label) as Last.fm reports it.

    count, weight_on_album and user_used_count are all filled from the same JSON "count"
    member. Which one actually means something depends on the endpoint, the facades clear
    the others (see application/facades/corrections.py).
    """

    name: str
    url: str
    count: int | None = None
    weight_on_album: int | None = None
    user_used_count: int | None = None
    reach: int | None = None
    taggings: int | None = None
    is_streamable: bool | None = None
    wiki: WikiInfo | None = None


# Yo, play_count vs user_play_count is THE tricky bit of this whole library. Last.fm reuses
# "playcount" for the global count on artist.getInfo and for the user's count on user.getTopArtists.
# The artist decoder splits them on @attr.rank, read infrastructure/parsing/artist.py before
# touching these two fields!
@dataclass(frozen=True)
class ArtistInfo:
    """Artist as decoded from any artist-shaped JSON node."""

    name: str
    url: str
    mbid: str | None = None
    images: ImageMap = field(default_factory=dict)
    is_streamable: bool | None = None
    on_tour: bool | None = None
    listeners: int | None = None
    play_count: int | None = None
    user_play_count: int | None = None
    rank: int | None = None
    match: float | None = None
    similar_artists: tuple["ArtistInfo", ...] = ()
    tags: tuple[TagInfo, ...] = ()
    biography: WikiInfo | None = None

    @property
    def image_url(self) -> str | None:
        return largest_image(self.images)


@dataclass(frozen=True)
class AlbumInfo:
    """Album as decoded from album.getInfo, top-album lists, search and nested track albums."""

    title: str
    artist: ArtistInfo | None = None
    url: str | None = None
    mbid: str | None = None
    images: ImageMap = field(default_factory=dict)
    listeners: int | None = None
    play_count: int | None = None
    user_play_count: int | None = None
    is_streamable: bool | None = None
    rank: int | None = None
    tracks: tuple["TrackInfo", ...] = ()
    tags: tuple[TagInfo, ...] = ()
    wiki: WikiInfo | None = None

    @property
    def image_url(self) -> str | None:
        return largest_image(self.images)


# Listen future me - played_at and user_loved_date are mutually exclusive! Recent tracks always
# carry an album and the date means "scrobbled at", loved tracks never carry an album and the date
# means "loved at". The track decoder keys on the album member, never both get set.
@dataclass(frozen=True)
class TrackInfo:
    """Track as decoded from track.getInfo and every track list endpoint."""

    name: str
    url: str
    mbid: str | None = None
    duration: timedelta | None = None
    is_streamable: bool | None = None
    listeners: int | None = None
    play_count: int | None = None
    user_play_count: int | None = None
    user_loved: bool | None = None
    user_loved_date: datetime | None = None
    played_at: datetime | None = None
    is_now_playing: bool | None = None
    match: float | None = None
    rank: int | None = None
    artist: ArtistInfo | None = None
    album: AlbumInfo | None = None
    top_tags: tuple[TagInfo, ...] = ()
    wiki: WikiInfo | None = None
    images: ImageMap = field(default_factory=dict)

    @property
    def image_url(self) -> str | None:
        return largest_image(self.images)


@dataclass(frozen=True)
class UserInfo:
    """Last.fm user profile."""

    username: str
    url: str
    playcount: int
    playlists: int
    registered: datetime
    is_subscriber: bool
    country: str | None = None
    real_name: str | None = None
    age: int | None = None
    gender: str | None = None
    artist_count: int | None = None
    track_count: int | None = None
    album_count: int | None = None
    id: str | None = None
    type: str | None = None
    images: ImageMap = field(default_factory=dict)


@dataclass(frozen=True)
class WeeklyChartInfo:
    """One [from, to) window of the weekly chart list. from_ is always before to."""

    from_: datetime
    to: datetime


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of a list endpoint plus its "@attr" pagination metadata."""

    items: tuple[T, ...]
    page: int
    total_pages: int
    total_items: int
    per_page: int

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):  # type: ignore[no-untyped-def]
        return iter(self.items)


@dataclass(frozen=True)
class AuthSession:
    """Result of the token → session exchange. session_key never expires upstream."""

    username: str
    session_key: str


# Hey future me - ScrobbleData is INPUT (what we send), ScrobbleInfo is OUTPUT (what Last.fm
# says it accepted/corrected). Don't mix them up! timestamp must be timezone-aware, we send it
# as unix seconds.
@dataclass(frozen=True)
class ScrobbleData:
    """A single play to submit via track.scrobble or track.updateNowPlaying."""

    artist: str
    track: str
    timestamp: datetime
    album: str | None = None
    album_artist: str | None = None
    chosen_by_user: bool | None = None
    track_number: int | None = None
    mbid: str | None = None
    duration: timedelta | None = None
    context: str | None = None


class IgnoredReason(IntEnum):
    """Why Last.fm filtered a scrobble (ignoredMessage.code)."""

    NONE = 0
    ARTIST_IGNORED = 1
    TRACK_IGNORED = 2
    TIMESTAMP_TOO_OLD = 3
    TIMESTAMP_TOO_NEW = 4
    DAILY_SCROBBLE_LIMIT_EXCEEDED = 5


@dataclass(frozen=True)
class ScrobbleInfo:
    """Per-scrobble verdict returned by track.scrobble."""

    track: str
    artist: str
    timestamp: datetime | None = None
    album: str | None = None
    album_artist: str | None = None
    track_corrected: bool = False
    artist_corrected: bool = False
    album_corrected: bool = False
    album_artist_corrected: bool = False
    ignored_reason: IgnoredReason = IgnoredReason.NONE
    ignored_message: str | None = None

    @property
    def is_ignored(self) -> bool:
        return self.ignored_reason != IgnoredReason.NONE


__all__ = [
    "RETRYABLE_STATUS_CODES",
    "AlbumInfo",
    "ArtistInfo",
    "AuthSession",
    "IgnoredReason",
    "ImageMap",
    "PagedResult",
    "ScrobbleData",
    "ScrobbleInfo",
    "StatusCode",
    "TagInfo",
    "TrackInfo",
    "UserInfo",
    "WeeklyChartInfo",
    "WikiInfo",
    "describe",
    "from_error_number",
    "is_remote_error",
    "is_retryable",
]
