"""Image size value object and helpers for image maps."""

from collections.abc import Mapping
from enum import StrEnum


class ImageSize(StrEnum):
    """Named image sizes Last.fm hands out.

    Hey future me - StrEnum means ImageSize.LARGE == "large" (True), which is exactly
    the lower-cased string Last.fm sends in the "size" member.
    """

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extralarge"
    MEGA = "mega"
    UNKNOWN = "unknown"

    @classmethod
    def from_api(cls, raw: str | None) -> "ImageSize":
        """Match a size string case-insensitively, anything unrecognized is UNKNOWN."""
        if not raw:
            return cls.UNKNOWN
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.UNKNOWN


# Biggest first
_SIZE_PREFERENCE: tuple[ImageSize, ...] = (
    ImageSize.MEGA,
    ImageSize.EXTRA_LARGE,
    ImageSize.LARGE,
    ImageSize.MEDIUM,
    ImageSize.SMALL,
    ImageSize.UNKNOWN,
)


def largest_image(images: Mapping[ImageSize, str]) -> str | None:
    """Get the URL of the biggest image available.

    Args:
        images: Image map as produced by the image parser

    Returns:
        URL of the largest known size, None for an empty map
    """
    for size in _SIZE_PREFERENCE:
        url = images.get(size)
        if url:
            return url
    return None
