"""Image collection parsing."""

from typing import Any

from scrobblekit.domain.entities import ImageMap
from scrobblekit.domain.value_objects import ImageSize
from scrobblekit.infrastructure.parsing.values import as_list


# Hey future me, the "image" member comes in every shape imaginable:
#   absent                              -> {}
#   {"size": "large", "#text": "..."}   -> one entry
#   [{"size": ..., "#text": ...}, ...]  -> one entry per element
#   "https://..."                       -> one UNKNOWN entry
# The URL lives in "#text" (NOT "url"), entries without a usable URL are skipped silently,
# and the FIRST url seen for a size wins. Last.fm sometimes repeats a size with a worse URL.
def parse_images(node: dict[str, Any] | None, key: str = "image") -> ImageMap:
    """Parse the image member of an entity node into an ImageSize → URL map.

    Args:
        node: Entity JSON object (artist, album, track, user, ...)
        key: Member holding the images

    Returns:
        Image map, possibly empty
    """
    images: ImageMap = {}
    if not isinstance(node, dict):
        return images

    for entry in as_list(node.get(key)):
        if isinstance(entry, str):
            size, url = ImageSize.UNKNOWN, entry
        elif isinstance(entry, dict):
            raw_url = entry.get("#text")
            if not isinstance(raw_url, str):
                continue
            raw_size = entry.get("size")
            size = ImageSize.from_api(raw_size if isinstance(raw_size, str) else None)
            url = raw_url
        else:
            continue

        url = url.strip()
        if not url or size in images:
            continue
        images[size] = url

    return images
