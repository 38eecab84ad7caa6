"""Parameter helpers for Last.fm calls.

Everything in here raises ValidationError synchronously, BEFORE a request is built. That's the
one failure category callers see as an exception instead of an ApiResult.
"""

from collections.abc import Sequence
from datetime import UTC, datetime

from scrobblekit.domain.exceptions import ValidationError

MAX_TAGS_PER_CALL = 10
MAX_SCROBBLES_PER_BATCH = 50


def limit_and_page_params(limit: int | None = None, page: int | None = None) -> dict[str, str]:
    """
    Build the limit/page parameters, leaving out whatever is None.

    Args:
        limit: Items per page, must be > 0
        page: 1-based page number, must be > 0

    Returns:
        Parameter dict with string values

    Raises:
        ValidationError: If limit or page is zero or negative
    """
    params: dict[str, str] = {}
    if limit is not None:
        if limit <= 0:
            raise ValidationError(f"limit must be greater than 0, got {limit}")
        params["limit"] = str(limit)
    if page is not None:
        if page <= 0:
            raise ValidationError(f"page must be greater than 0, got {page}")
        params["page"] = str(page)
    return params


def autocorrect_param(autocorrect: bool) -> dict[str, str]:
    """Last.fm wants autocorrect as "1"/"0"."""
    return {"autocorrect": "1" if autocorrect else "0"}


def flag_param(name: str, value: bool | None) -> dict[str, str]:
    """Optional "1"/"0" flag, {} when value is None."""
    if value is None:
        return {}
    return {name: "1" if value else "0"}


def tag_list_param(tags: Sequence[str]) -> str:
    """
    Join tags for *.addTags.

    Raises:
        ValidationError: If there are no tags, more than 10, or a blank one
    """
    if isinstance(tags, str):
        tags = [tags]
    if not tags:
        raise ValidationError("At least one tag is required")
    if len(tags) > MAX_TAGS_PER_CALL:
        raise ValidationError(f"At most {MAX_TAGS_PER_CALL} tags can be added at once, got {len(tags)}")
    if any(not tag or not tag.strip() for tag in tags):
        raise ValidationError("Tags must not be blank")
    return ",".join(tag.strip() for tag in tags)


def require_text(name: str, value: str | None) -> str:
    """
    Require a non-blank string argument.

    Raises:
        ValidationError: If value is None or blank
    """
    if value is None or not value.strip():
        raise ValidationError(f"{name} must not be empty")
    return value


def unix_timestamp(value: datetime) -> str:
    """Convert a datetime to unix seconds as string. Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return str(int(value.timestamp()))


def identity_params(
    mbid: str | None,
    **names: str | None,
) -> dict[str, str]:
    """
    Build the "look up by name or by mbid" parameters.

    An mbid wins when given. Otherwise every name part (artist, album, track) is required.

    Example:
        identity_params(None, artist="Korn", track="Blind")
        -> {"artist": "Korn", "track": "Blind"}

    Raises:
        ValidationError: If neither a usable mbid nor all name parts are given
    """
    if mbid is not None and mbid.strip():
        return {"mbid": mbid}
    missing = [key for key, value in names.items() if value is None or not value.strip()]
    if missing:
        raise ValidationError(f"Either mbid or {' and '.join(names)} must be given (missing: {', '.join(missing)})")
    return {key: value for key, value in names.items() if value is not None}
