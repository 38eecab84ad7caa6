"""Track decoder."""

from datetime import timedelta
from typing import Any

from scrobblekit.domain.entities import TrackInfo
from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.infrastructure.parsing.album import decode_album
from scrobblekit.infrastructure.parsing.artist import decode_artist
from scrobblekit.infrastructure.parsing.images import parse_images
from scrobblekit.infrastructure.parsing.tag import decode_tag_list
from scrobblekit.infrastructure.parsing.values import (
    from_unix_seconds,
    get_float,
    get_int,
    get_object,
    get_str,
    has_name,
    parse_flag,
    parse_streamable,
    require_str,
    track_url,
)
from scrobblekit.infrastructure.parsing.wiki import decode_wiki


def decode_track(node: Any) -> TrackInfo:
    """Decode a track node from track.getInfo or any track list.

    Rules worth knowing before you change anything:
    - user_play_count reads "userplaycount" and falls back to "playcount". Some endpoints
      reuse playcount for the requesting user's count, the facades null it where it isn't.
    - user_loved reads "userloved" (track.getInfo) or "loved" (extended recent tracks).
    - date.uts means played_at when the node has an "album" member (recent tracks) and
      user_loved_date when it doesn't (loved tracks). Never both.
    - an album member with an empty "#text" (recent track without album) decodes to None,
      but still marks the date as played_at.

    Raises:
        DecodeError: If name is missing, or no url is present and none can be built
    """
    if isinstance(node, dict) and isinstance(node.get("track"), dict) and get_str(node, "name") is None:
        node = node["track"]
    if not isinstance(node, dict):
        raise DecodeError("Track node is not an object", field="track")

    name = require_str(node, "name")

    artist_node = node.get("artist")
    artist = decode_artist(artist_node) if has_name(artist_node, "name", "#text") else None

    url = get_str(node, "url") or track_url(artist.name if artist else None, name)
    if url is None:
        raise DecodeError("Track has no url", field="url")

    has_album = "album" in node
    album_node = node.get("album")
    album = (
        decode_album(album_node)
        if isinstance(album_node, dict) and has_name(album_node, "title", "name", "#text")
        else None
    )

    date_node = get_object(node, "date")
    date = from_unix_seconds(date_node.get("uts")) if date_node else None

    play_count = get_int(node, "playcount")
    user_play_count = get_int(node, "userplaycount")
    if user_play_count is None:
        user_play_count = play_count

    if "userloved" in node:
        user_loved = parse_flag(node.get("userloved"))
    elif "loved" in node:
        user_loved = parse_flag(node.get("loved"))
    else:
        user_loved = None

    duration_ms = get_int(node, "duration")
    attr = get_object(node, "@attr")
    now_playing = get_str(attr, "nowplaying")
    wiki = get_object(node, "wiki")

    return TrackInfo(
        name=name,
        url=url,
        mbid=get_str(node, "mbid"),
        duration=timedelta(milliseconds=duration_ms) if duration_ms is not None else None,
        is_streamable=parse_streamable(node.get("streamable")),
        listeners=get_int(node, "listeners"),
        play_count=play_count,
        user_play_count=user_play_count,
        user_loved=user_loved,
        user_loved_date=None if has_album else date,
        played_at=date if has_album else None,
        is_now_playing=now_playing is not None and now_playing.lower() in ("true", "1"),
        match=get_float(node, "match"),
        rank=get_int(attr, "rank"),
        artist=artist,
        album=album,
        top_tags=decode_tag_list(node, "toptags", "tag"),
        wiki=decode_wiki(wiki) if wiki is not None else None,
        images=parse_images(node),
    )
