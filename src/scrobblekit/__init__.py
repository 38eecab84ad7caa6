"""scrobblekit - typed async client for the Last.fm API."""

from scrobblekit.client import LastfmClient
from scrobblekit.domain.entities import (
    AlbumInfo,
    ArtistInfo,
    AuthSession,
    IgnoredReason,
    PagedResult,
    ScrobbleData,
    ScrobbleInfo,
    StatusCode,
    TagInfo,
    TrackInfo,
    UserInfo,
    WeeklyChartInfo,
    WikiInfo,
)
from scrobblekit.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    ScrobbleKitError,
    ValidationError,
)
from scrobblekit.domain.result import ApiResult
from scrobblekit.domain.value_objects import ImageSize, TimePeriod

__version__ = "0.1.0"

__all__ = [
    "AlbumInfo",
    "ApiResult",
    "ArtistInfo",
    "AuthSession",
    "AuthenticationError",
    "ConfigurationError",
    "DecodeError",
    "IgnoredReason",
    "ImageSize",
    "LastfmClient",
    "PagedResult",
    "ScrobbleData",
    "ScrobbleInfo",
    "ScrobbleKitError",
    "StatusCode",
    "TagInfo",
    "TimePeriod",
    "TrackInfo",
    "UserInfo",
    "ValidationError",
    "WeeklyChartInfo",
    "WikiInfo",
    "__version__",
]
