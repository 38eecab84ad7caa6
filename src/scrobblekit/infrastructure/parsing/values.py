"""Primitive value parsing for Last.fm JSON.

Hey future me - Last.fm is WILDLY inconsistent about value types! The same "playcount" shows
up as "42" on one endpoint and 42 on another, arrays collapse into a single object when there
is exactly one element, and booleans are "1"/"0" strings. Every helper here takes whatever
json.loads() produced (dict/list/str/int/float/bool/None) and never assumes a key exists.

Rule of thumb: a malformed optional value becomes None. Only required fields (name, url)
raise DecodeError, and that's the caller's call via require_str().
"""

from datetime import UTC, datetime
from typing import Any
from urllib.parse import quote, quote_plus

from scrobblekit.domain.exceptions import DecodeError

ARTIST_BASE_URL = "https://www.last.fm/music/"
USER_BASE_URL = "https://www.last.fm/user/"
TAG_BASE_URL = "https://www.last.fm/tag/"

# Last.fm keeps these readable in its own music URLs
_MUSIC_URL_SAFE = "+,'()!&"


def get_object(node: Any, key: str) -> dict[str, Any] | None:
    """Get a child object, None when node isn't an object or the child isn't one."""
    if not isinstance(node, dict):
        return None
    child = node.get(key)
    return child if isinstance(child, dict) else None


def as_list(node: Any) -> list[Any]:
    """Normalize the array-or-single-object shape into a list.

    Last.fm returns {"tag": {...}} instead of {"tag": [{...}]} when there is only one
    element, and drops or empties the member entirely when there are none.
    """
    if node is None:
        return []
    if isinstance(node, list):
        return node
    if isinstance(node, dict):
        return [node]
    if isinstance(node, str) and node.strip():
        return [node]
    return []


def wrapped_list(node: Any, wrapper: str, key: str) -> list[Any]:
    """Get node[wrapper][key] as a list, e.g. wrapped_list(artist, "similar", "artist")."""
    parent = get_object(node, wrapper)
    if parent is None:
        return []
    return as_list(parent.get(key))


def get_str(node: Any, key: str) -> str | None:
    """Get a string member, numbers are stringified, blank strings count as absent."""
    if not isinstance(node, dict):
        return None
    value = node.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value
    return None


def get_text(node: Any) -> str | None:
    """Read the text of a node that is either a bare string or {"#text": ...}."""
    if isinstance(node, str):
        return node if node.strip() else None
    return get_str(node, "#text")


def require_str(node: Any, *keys: str) -> str:
    """Get the first non-blank string among keys or fail the whole decode.

    Raises:
        DecodeError: If none of the keys holds a usable string
    """
    for key in keys:
        value = get_str(node, key)
        if value is not None:
            return value
    raise DecodeError(f"Missing required field '{'/'.join(keys)}'", field=keys[0])


def try_parse_int(value: Any) -> int | None:
    """Parse an integer from a JSON number or a numeric string, None on failure."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def try_parse_float(value: Any) -> float | None:
    """Parse a float from a JSON number or a numeric string, None on failure."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def get_int(node: Any, key: str) -> int | None:
    """Get an optional integer member (string or number)."""
    if not isinstance(node, dict):
        return None
    return try_parse_int(node.get(key))


def get_float(node: Any, key: str) -> float | None:
    """Get an optional float member (string or number)."""
    if not isinstance(node, dict):
        return None
    return try_parse_float(node.get(key))


def require_int(node: Any, key: str) -> int:
    """Get a required integer member.

    Raises:
        DecodeError: If the member is absent or not numeric
    """
    value = get_int(node, key)
    if value is None:
        raise DecodeError(f"Missing or non-numeric required field '{key}'", field=key)
    return value


def parse_flag(value: Any) -> bool | None:
    """Last.fm "1"/"0" flag. None when absent, True only for "1" (or 1 / True)."""
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    if isinstance(value, str):
        return value.strip() == "1"
    return False


def get_flag(node: Any, key: str) -> bool | None:
    """Get an optional "1"/"0" flag member."""
    if not isinstance(node, dict):
        return None
    return parse_flag(node.get(key))


def from_unix_seconds(value: Any) -> datetime | None:
    """Convert unix epoch seconds (string or number) into an aware UTC datetime."""
    seconds = try_parse_int(value)
    if seconds is None:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None


def artist_url(name: str | None) -> str | None:
    """Build https://www.last.fm/music/<artist>, None for an empty name."""
    if not name or not name.strip():
        return None
    return ARTIST_BASE_URL + quote_plus(name, safe=_MUSIC_URL_SAFE)


def album_url(artist: str | None, album: str | None) -> str | None:
    """Build https://www.last.fm/music/<artist>/<album>, None if either part is empty."""
    if not artist or not artist.strip() or not album or not album.strip():
        return None
    return (
        ARTIST_BASE_URL
        + quote_plus(artist, safe=_MUSIC_URL_SAFE)
        + "/"
        + quote_plus(album, safe=_MUSIC_URL_SAFE)
    )


def track_url(artist: str | None, track: str | None) -> str | None:
    """Build https://www.last.fm/music/<artist>/_/<track>, None if either part is empty."""
    if not artist or not artist.strip() or not track or not track.strip():
        return None
    return (
        ARTIST_BASE_URL
        + quote_plus(artist, safe=_MUSIC_URL_SAFE)
        + "/_/"
        + quote_plus(track, safe=_MUSIC_URL_SAFE)
    )


def tag_url(name: str | None) -> str | None:
    """Build https://www.last.fm/tag/<tag> with spaces as '+', None for an empty name."""
    if not name or not name.strip():
        return None
    return TAG_BASE_URL + quote_plus(name)


def user_url(name: str | None) -> str | None:
    """Build https://www.last.fm/user/<user>, None for an empty name."""
    if not name or not name.strip():
        return None
    return USER_BASE_URL + quote(name, safe="")


def parse_streamable(value: Any) -> bool | None:
    """Streamable comes as "1"/"0" or as {"#text": "0", "fulltrack": "0"}."""
    if isinstance(value, dict):
        value = value.get("#text")
    return parse_flag(value)


def has_name(node: Any, *keys: str) -> bool:
    """Check whether a bare-string-or-object node carries a usable name."""
    if isinstance(node, str):
        return bool(node.strip())
    return any(get_str(node, key) is not None for key in keys)
