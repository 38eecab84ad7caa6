"""Wiki decoder."""

from datetime import UTC, datetime
from typing import Any

from scrobblekit.domain.entities import WikiInfo
from scrobblekit.infrastructure.parsing.values import get_str

# Last.fm mostly sends "08 Dec 2022, 17:14", older payloads use RFC 2822-ish strings
_PUBLISHED_FORMATS = (
    "%d %b %Y, %H:%M",
    "%d %B %Y, %H:%M",
    "%a, %d %b %Y %H:%M:%S %z",
    "%a, %d %b %Y %H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
)


def parse_published(value: str | None) -> datetime | None:
    """Parse a wiki publish date permissively.

    Tries the known Last.fm formats first, then ISO 8601. Naive results are taken as UTC.

    Args:
        value: Raw "published" string

    Returns:
        Aware datetime, or None when absent or unparseable (never raises)
    """
    if not value:
        return None
    text = value.strip()

    parsed: datetime | None = None
    for fmt in _PUBLISHED_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
            break
        except ValueError:
            continue

    if parsed is None:
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def decode_wiki(node: dict[str, Any]) -> WikiInfo:
    """Decode a wiki/bio object. Missing summary/content become ""."""
    return WikiInfo(
        summary=get_str(node, "summary") or "",
        content=get_str(node, "content") or "",
        published=parse_published(get_str(node, "published")),
    )
