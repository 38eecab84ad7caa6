"""User decoder."""

from typing import Any

from scrobblekit.domain.entities import UserInfo
from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.infrastructure.parsing.images import parse_images
from scrobblekit.infrastructure.parsing.values import (
    from_unix_seconds,
    get_int,
    get_object,
    get_str,
    parse_flag,
    require_int,
    require_str,
    user_url,
)

_REQUIRED_KEYS = ("name", "country", "subscriber", "playcount", "playlists", "registered")


def decode_user(node: Any) -> UserInfo:
    """Decode a user node (user.getInfo body or an element of user.getFriends).

    name, country, subscriber, playcount, playlists and registered.unixtime must all be
    present. country may be present but blank or the literal "None", that's just None.

    Raises:
        DecodeError: If a mandatory member is missing
    """
    if isinstance(node, dict) and isinstance(node.get("user"), dict):
        node = node["user"]
    if not isinstance(node, dict):
        raise DecodeError("User node is not an object", field="user")

    for key in _REQUIRED_KEYS:
        if key not in node:
            raise DecodeError(f"Missing required field '{key}'", field=key)

    name = require_str(node, "name")
    registered_node = get_object(node, "registered")
    registered = from_unix_seconds(registered_node.get("unixtime")) if registered_node else None
    if registered is None:
        raise DecodeError("Missing required field 'registered.unixtime'", field="registered")

    country = get_str(node, "country")
    if country is not None and country.lower() == "none":
        country = None

    age = get_int(node, "age")
    gender = get_str(node, "gender")

    return UserInfo(
        username=name,
        url=get_str(node, "url") or user_url(name) or "",
        playcount=require_int(node, "playcount"),
        playlists=require_int(node, "playlists"),
        registered=registered,
        is_subscriber=bool(parse_flag(node.get("subscriber"))),
        country=country,
        real_name=get_str(node, "realname"),
        age=age if age else None,
        gender=gender if gender and gender != "n" else None,
        artist_count=get_int(node, "artist_count"),
        track_count=get_int(node, "track_count"),
        album_count=get_int(node, "album_count"),
        id=get_str(node, "id"),
        type=get_str(node, "type"),
        images=parse_images(node),
    )
