"""Scrobble response decoder."""

from typing import Any

from scrobblekit.domain.entities import IgnoredReason, ScrobbleInfo
from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.infrastructure.parsing.values import (
    as_list,
    from_unix_seconds,
    get_int,
    get_object,
    get_str,
    get_text,
    parse_flag,
)


def _corrected_text(node: Any, key: str) -> tuple[str | None, bool]:
    # {"corrected": "0", "#text": "Blind"}
    child = node.get(key) if isinstance(node, dict) else None
    corrected = bool(parse_flag(child.get("corrected"))) if isinstance(child, dict) else False
    return get_text(child), corrected


def _ignored_reason(node: dict[str, Any]) -> tuple[IgnoredReason, str | None]:
    message = get_object(node, "ignoredMessage")
    code = get_int(message, "code") or 0
    try:
        reason = IgnoredReason(code)
    except ValueError:
        reason = IgnoredReason.NONE
    return reason, get_str(message, "#text")


def decode_scrobble(node: Any) -> ScrobbleInfo:
    """Decode one element of scrobbles.scrobble.

    Raises:
        DecodeError: If track or artist text is missing
    """
    if not isinstance(node, dict):
        raise DecodeError("Scrobble node is not an object", field="scrobble")

    track, track_corrected = _corrected_text(node, "track")
    artist, artist_corrected = _corrected_text(node, "artist")
    if track is None:
        raise DecodeError("Missing required field 'track'", field="track")
    if artist is None:
        raise DecodeError("Missing required field 'artist'", field="artist")
    album, album_corrected = _corrected_text(node, "album")
    album_artist, album_artist_corrected = _corrected_text(node, "albumArtist")
    reason, message = _ignored_reason(node)

    return ScrobbleInfo(
        track=track,
        artist=artist,
        timestamp=from_unix_seconds(node.get("timestamp")),
        album=album,
        album_artist=album_artist,
        track_corrected=track_corrected,
        artist_corrected=artist_corrected,
        album_corrected=album_corrected,
        album_artist_corrected=album_artist_corrected,
        ignored_reason=reason,
        ignored_message=message,
    )


def decode_scrobbles(root: Any) -> tuple[ScrobbleInfo, ...]:
    """Decode a track.scrobble response, single-object and array shapes alike.

    Raises:
        DecodeError: If the "scrobbles" envelope is missing
    """
    body = get_object(root, "scrobbles")
    if body is None:
        raise DecodeError("Missing 'scrobbles' envelope", field="scrobbles")
    return tuple(decode_scrobble(item) for item in as_list(body.get("scrobble")))
