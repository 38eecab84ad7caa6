"""Post-decode corrections per Last.fm method.

Hey future me - this table is a PATCH LAYER over an ambiguous wire format! The decoders fill
every field they can ("count" lands in count, weight_on_album AND user_used_count; "playcount"
lands in play_count and, as fallback, user_play_count). Only the endpoint knows which of those
actually mean something, so each facade applies the row for the method it just called.

Rows are keyed by Last.fm method name. Each row lists field overrides that are applied with
dataclasses.replace() to every entity of the listed type in the response. Add a row here
rather than teaching a decoder about endpoints.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass, replace
from types import MappingProxyType
from typing import Any, TypeVar

from scrobblekit.domain.entities import AlbumInfo, ArtistInfo, PagedResult, TagInfo, TrackInfo

T = TypeVar("T")


@dataclass(frozen=True)
class Correction:
    """Field overrides for one entity type."""

    entity: type
    overrides: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        known = {f.name for f in fields(self.entity)}
        unknown = set(self.overrides) - known
        if unknown:
            raise ValueError(f"{self.entity.__name__} has no field(s) {sorted(unknown)}")


def _nulls(entity: type, *names: str) -> Correction:
    return Correction(entity, {name: None for name in names})


# Methods whose "info" corrections only apply when no username was passed
NO_USER_CORRECTIONS: Mapping[str, tuple[Correction, ...]] = MappingProxyType(
    {
        "artist.getInfo": (_nulls(ArtistInfo, "user_play_count"),),
        "album.getInfo": (_nulls(AlbumInfo, "user_play_count"),),
        "track.getInfo": (_nulls(TrackInfo, "user_play_count"),),
    }
)

CORRECTIONS: Mapping[str, tuple[Correction, ...]] = MappingProxyType(
    {
        "artist.getTopAlbums": (_nulls(AlbumInfo, "user_play_count"),),
        "artist.getTopTracks": (_nulls(TrackInfo, "user_play_count"),),
        "artist.getTopTags": (_nulls(TagInfo, "user_used_count", "weight_on_album", "taggings"),),
        "chart.getTopArtists": (_nulls(ArtistInfo, "user_play_count"),),
        "chart.getTopTracks": (_nulls(TrackInfo, "user_play_count"),),
        "chart.getTopTags": (_nulls(TagInfo, "count", "user_used_count", "weight_on_album"),),
        "geo.getTopArtists": (_nulls(ArtistInfo, "user_play_count"),),
        "geo.getTopTracks": (_nulls(TrackInfo, "user_play_count"),),
        "library.getArtists": (_nulls(ArtistInfo, "play_count"),),
        "album.getTopTags": (_nulls(TagInfo, "user_used_count", "count", "taggings"),),
        "track.getTopTags": (_nulls(TagInfo, "user_used_count", "weight_on_album", "taggings"),),
        "tag.getTopTags": (_nulls(TagInfo, "user_used_count", "count", "weight_on_album"),),
        "user.getTopTags": (_nulls(TagInfo, "count", "weight_on_album", "taggings"),),
        "user.getTopTracks": (_nulls(TrackInfo, "play_count"),),
        "user.getWeeklyTrackChart": (_nulls(TrackInfo, "play_count"),),
        "user.getTopAlbums": (_nulls(AlbumInfo, "play_count"),),
        "user.getWeeklyAlbumChart": (_nulls(AlbumInfo, "play_count"),),
        # loved tracks carry no "loved" member, being in the list IS the flag
        "user.getLovedTracks": (Correction(TrackInfo, {"user_loved": True}),),
    }
)


def corrections_for(method: str, *, username_given: bool = True) -> tuple[Correction, ...]:
    """Get the corrections to apply after calling method."""
    rows = CORRECTIONS.get(method, ())
    if not username_given:
        rows = rows + NO_USER_CORRECTIONS.get(method, ())
    return rows


def apply_corrections(value: T, corrections: tuple[Correction, ...]) -> T:
    """
    Apply corrections to a decoded entity, a PagedResult or a tuple of entities.

    Only top-level entities are touched. Nested ones (an artist inside a track, a similar
    artist inside an artist) keep what the decoder produced.

    Args:
        value: Decoded response payload
        corrections: Rows from corrections_for()

    Returns:
        New payload with overrides applied, the input is never mutated
    """
    if not corrections:
        return value
    if isinstance(value, PagedResult):
        return replace(value, items=tuple(_apply_one(item, corrections) for item in value.items))  # type: ignore[return-value]
    if isinstance(value, tuple):
        return tuple(_apply_one(item, corrections) for item in value)  # type: ignore[return-value]
    return _apply_one(value, corrections)


def _apply_one(item: T, corrections: tuple[Correction, ...]) -> T:
    if not is_dataclass(item):
        return item
    for correction in corrections:
        if isinstance(item, correction.entity):
            item = replace(item, **correction.overrides)  # type: ignore[type-var]
    return item
