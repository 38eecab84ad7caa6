"""Album decoder."""

from collections.abc import Callable
from functools import lru_cache
from typing import Any

from scrobblekit.domain.entities import AlbumInfo, TrackInfo
from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.infrastructure.parsing.artist import decode_artist
from scrobblekit.infrastructure.parsing.images import parse_images
from scrobblekit.infrastructure.parsing.tag import decode_tag_list
from scrobblekit.infrastructure.parsing.values import (
    album_url,
    get_int,
    get_object,
    get_str,
    has_name,
    parse_streamable,
    require_str,
    wrapped_list,
)
from scrobblekit.infrastructure.parsing.wiki import decode_wiki

_TITLE_KEYS = ("title", "name", "#text")


# Hey future me, album titles hide under three different keys: "title" on album nodes nested in
# track.getInfo, "name" on album.getInfo and top-album lists, "#text" on recent tracks. Same story
# for the artist, which is a bare string on album.getInfo and an object on top-album lists.
def decode_album(node: Any) -> AlbumInfo:
    """Decode an album node.

    user_play_count falls back to playcount; facades clear it where that's the global count.

    Raises:
        DecodeError: If the node has no title
    """
    if isinstance(node, dict) and isinstance(node.get("album"), dict) and not _has_title(node):
        node = node["album"]
    if not isinstance(node, dict):
        raise DecodeError("Album node is not an object", field="album")

    title = require_str(node, *_TITLE_KEYS)

    artist_node = node.get("artist")
    artist = decode_artist(artist_node) if has_name(artist_node, "name", "#text") else None

    play_count = get_int(node, "playcount")
    user_play_count = get_int(node, "userplaycount")
    if user_play_count is None:
        user_play_count = play_count

    wiki = get_object(node, "wiki")

    return AlbumInfo(
        title=title,
        artist=artist,
        url=get_str(node, "url") or album_url(artist.name if artist else None, title),
        mbid=get_str(node, "mbid"),
        images=parse_images(node),
        listeners=get_int(node, "listeners"),
        play_count=play_count,
        user_play_count=user_play_count,
        is_streamable=parse_streamable(node.get("streamable")),
        rank=get_int(get_object(node, "@attr"), "rank"),
        tracks=tuple(_track_decoder()(item) for item in wrapped_list(node, "tracks", "track")),
        tags=decode_tag_list(node, "tags", "tag"),
        wiki=decode_wiki(wiki) if wiki is not None else None,
    )


@lru_cache(maxsize=1)
def _track_decoder() -> Callable[[Any], TrackInfo]:
    # track.py imports this module at load time, so the reverse edge is resolved on first use
    from scrobblekit.infrastructure.parsing.track import decode_track

    return decode_track


def _has_title(node: dict[str, Any]) -> bool:
    return any(get_str(node, key) is not None for key in _TITLE_KEYS)
