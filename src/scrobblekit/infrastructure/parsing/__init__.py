"""JSON → entity decoders.

Every decoder is a pure function over the output of json.loads(). They raise DecodeError
for structurally required fields and leave everything else None when it's missing or junk.
"""

from scrobblekit.infrastructure.parsing.album import decode_album
from scrobblekit.infrastructure.parsing.artist import decode_artist
from scrobblekit.infrastructure.parsing.chart import decode_weekly_chart
from scrobblekit.infrastructure.parsing.envelopes import (
    decode_correction,
    decode_list,
    decode_paged,
    decode_search,
)
from scrobblekit.infrastructure.parsing.images import parse_images
from scrobblekit.infrastructure.parsing.scrobble import decode_scrobble, decode_scrobbles
from scrobblekit.infrastructure.parsing.tag import decode_tag, decode_tag_list
from scrobblekit.infrastructure.parsing.track import decode_track
from scrobblekit.infrastructure.parsing.user import decode_user
from scrobblekit.infrastructure.parsing.wiki import decode_wiki, parse_published

__all__ = [
    "decode_album",
    "decode_artist",
    "decode_correction",
    "decode_list",
    "decode_paged",
    "decode_scrobble",
    "decode_scrobbles",
    "decode_search",
    "decode_tag",
    "decode_tag_list",
    "decode_track",
    "decode_user",
    "decode_weekly_chart",
    "decode_wiki",
    "parse_images",
    "parse_published",
]
