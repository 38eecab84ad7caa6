"""Per-resource facades over the Last.fm API."""

from scrobblekit.application.facades.album import AlbumApi
from scrobblekit.application.facades.artist import ArtistApi
from scrobblekit.application.facades.chart import ChartApi
from scrobblekit.application.facades.geo import GeoApi
from scrobblekit.application.facades.library import LibraryApi
from scrobblekit.application.facades.tag import TagApi
from scrobblekit.application.facades.track import TrackApi
from scrobblekit.application.facades.user import UserApi

__all__ = [
    "AlbumApi",
    "ArtistApi",
    "ChartApi",
    "GeoApi",
    "LibraryApi",
    "TagApi",
    "TrackApi",
    "UserApi",
]
