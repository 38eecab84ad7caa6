"""Artist decoder."""

from typing import Any

from scrobblekit.domain.entities import ArtistInfo
from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.infrastructure.parsing.images import parse_images
from scrobblekit.infrastructure.parsing.tag import decode_tag_list
from scrobblekit.infrastructure.parsing.values import (
    artist_url,
    get_flag,
    get_float,
    get_int,
    get_object,
    get_str,
    parse_streamable,
    require_str,
    wrapped_list,
)
from scrobblekit.infrastructure.parsing.wiki import decode_wiki


def decode_artist(node: Any) -> ArtistInfo:
    """Decode any artist-shaped JSON node.

    Accepted shapes, in priority order:
    - bare string "Korn" (album.artist on some endpoints) → name + synthesized url
    - {"name": "Korn", ...} (artist.getInfo, every artist list)
    - {"#text": "Korn", "mbid": "..."} (artist nested inside recent tracks)

    Play count rule (get this wrong and user counts silently turn into global ones):
    the count is read from stats.playcount, falling back to a flat playcount. If the node
    carries @attr.rank it comes from a per-user chart, so the value goes to user_play_count
    and play_count stays None. Without a rank it's the global play_count.

    Args:
        node: JSON node, optionally wrapped as {"artist": {...}}

    Returns:
        Decoded artist

    Raises:
        DecodeError: If no name can be found
    """
    if isinstance(node, dict) and "artist" in node and not _has_own_name(node):
        node = node["artist"]

    if isinstance(node, str):
        name = node.strip()
        url = artist_url(name)
        if url is None:
            raise DecodeError("Artist name is empty", field="name")
        return ArtistInfo(name=name, url=url)

    if not isinstance(node, dict):
        raise DecodeError("Artist node is neither a string nor an object", field="artist")

    name = require_str(node, "name", "#text")
    url = get_str(node, "url") or artist_url(name)
    if url is None:
        raise DecodeError("Artist has no url", field="url")

    stats = get_object(node, "stats")
    listeners = get_int(stats, "listeners")
    if listeners is None:
        listeners = get_int(node, "listeners")
    plays = get_int(stats, "playcount")
    if plays is None:
        plays = get_int(node, "playcount")

    rank = get_int(get_object(node, "@attr"), "rank")
    if rank is not None:
        play_count = None
        user_play_count = plays
    else:
        play_count = plays
        user_play_count = get_int(stats, "userplaycount")
        if user_play_count is None:
            user_play_count = get_int(node, "userplaycount")

    bio = get_object(node, "bio")

    return ArtistInfo(
        name=name,
        url=url,
        mbid=get_str(node, "mbid"),
        images=parse_images(node),
        is_streamable=parse_streamable(node.get("streamable")),
        on_tour=get_flag(node, "ontour"),
        listeners=listeners,
        play_count=play_count,
        user_play_count=user_play_count,
        rank=rank,
        match=get_float(node, "match"),
        similar_artists=tuple(decode_artist(item) for item in wrapped_list(node, "similar", "artist")),
        tags=decode_tag_list(node, "tags", "tag"),
        biography=decode_wiki(bio) if bio is not None else None,
    )


def _has_own_name(node: dict[str, Any]) -> bool:
    return get_str(node, "name") is not None or get_str(node, "#text") is not None
