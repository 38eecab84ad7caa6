"""Tag decoder."""

from typing import Any

from scrobblekit.domain.entities import TagInfo
from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.infrastructure.parsing.values import (
    get_flag,
    get_int,
    get_object,
    get_str,
    require_str,
    tag_url,
    wrapped_list,
)
from scrobblekit.infrastructure.parsing.wiki import decode_wiki


# Yo, the decoder is deliberately GREEDY: "count" goes into count, weight_on_album AND
# user_used_count. It can't know which meaning the endpoint intended, so the facades null
# out the wrong ones afterwards via the corrections table.
def decode_tag(node: Any) -> TagInfo:
    """Decode a tag node (tag.getInfo body, or an element of any tag list).

    Raises:
        DecodeError: If the node is not an object or has no name
    """
    if isinstance(node, dict) and isinstance(node.get("tag"), dict):
        node = node["tag"]
    if not isinstance(node, dict):
        raise DecodeError("Tag node is not an object", field="tag")

    name = require_str(node, "name")
    url = get_str(node, "url") or tag_url(name)
    if url is None:
        raise DecodeError("Tag has no url", field="url")

    count = get_int(node, "count")
    taggings = get_int(node, "taggings")
    if taggings is None:
        taggings = get_int(node, "total")
    if taggings is None:
        taggings = count

    wiki_node = get_object(node, "wiki")

    return TagInfo(
        name=name,
        url=url,
        count=count,
        weight_on_album=count,
        user_used_count=count,
        reach=get_int(node, "reach"),
        taggings=taggings,
        is_streamable=get_flag(node, "streamable"),
        wiki=decode_wiki(wiki_node) if wiki_node else None,
    )


def decode_tag_list(node: Any, wrapper: str = "tags", key: str = "tag") -> tuple[TagInfo, ...]:
    """Decode node[wrapper][key] into tags, an absent wrapper gives ()."""
    return tuple(decode_tag(item) for item in wrapped_list(node, wrapper, key))
