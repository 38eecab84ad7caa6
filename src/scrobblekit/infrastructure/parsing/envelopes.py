"""Envelope decoders: paged lists, plain lists, search results and corrections.

List endpoints wrap their items like this:

    {"topartists": {"artist": [...], "@attr": {"page": "1", "perPage": "50", "totalPages": "3", "total": "123"}}}

Search endpoints use OpenSearch members instead:

    {"results": {"opensearch:totalResults": "42", "opensearch:itemsPerPage": "30",
                 "opensearch:Query": {"startPage": "1"}, "artistmatches": {"artist": [...]}, "@attr": {...}}}
"""

import math
from collections.abc import Callable
from typing import Any, TypeVar

from scrobblekit.domain.entities import PagedResult
from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.infrastructure.parsing.values import as_list, get_int, get_object

T = TypeVar("T")


def _require_envelope(root: Any, envelope: str) -> dict[str, Any]:
    body = get_object(root, envelope)
    if body is None:
        raise DecodeError(f"Missing '{envelope}' envelope", field=envelope)
    return body


def decode_paged(
    root: Any,
    envelope: str,
    item_key: str,
    decode_item: Callable[[Any], T],
) -> PagedResult[T]:
    """Decode a list envelope carrying "@attr" pagination.

    Pagination degrades gracefully: a missing page/totalPages is 1, a missing total/perPage
    is the number of items on this page. A missing "@attr" object fails the decode.

    Args:
        root: Parsed response document
        envelope: Top-level member, e.g. "topartists"
        item_key: Item member inside the envelope, e.g. "artist"
        decode_item: Decoder applied to every element

    Returns:
        One page of decoded items

    Raises:
        DecodeError: If the envelope or its "@attr" is missing, or an item fails to decode
    """
    body = _require_envelope(root, envelope)
    attr = get_object(body, "@attr")
    if attr is None:
        raise DecodeError(f"Missing '@attr' in '{envelope}'", field="@attr")

    items = tuple(decode_item(item) for item in as_list(body.get(item_key)))
    return _build_page(
        items,
        page=get_int(attr, "page"),
        total_pages=get_int(attr, "totalPages"),
        total=get_int(attr, "total"),
        per_page=get_int(attr, "perPage"),
    )


def decode_search(
    root: Any,
    matches_key: str,
    item_key: str,
    decode_item: Callable[[Any], T],
) -> PagedResult[T]:
    """Decode a *.search response into a page of matches.

    Raises:
        DecodeError: If "results" or its "@attr" is missing, or a match fails to decode
    """
    body = _require_envelope(root, "results")
    if get_object(body, "@attr") is None:
        raise DecodeError("Missing '@attr' in 'results'", field="@attr")

    matches = get_object(body, matches_key)
    items = tuple(decode_item(item) for item in as_list(matches.get(item_key) if matches else None))

    total = get_int(body, "opensearch:totalResults")
    per_page = get_int(body, "opensearch:itemsPerPage")
    total_pages = None
    if total is not None and per_page:
        total_pages = max(1, math.ceil(total / per_page))

    return _build_page(
        items,
        page=get_int(get_object(body, "opensearch:Query"), "startPage"),
        total_pages=total_pages,
        total=total,
        per_page=per_page,
    )


def _build_page(
    items: tuple[T, ...],
    page: int | None,
    total_pages: int | None,
    total: int | None,
    per_page: int | None,
) -> PagedResult[T]:
    return PagedResult(
        items=items,
        page=page if page is not None and page >= 1 else 1,
        total_pages=total_pages if total_pages is not None and total_pages >= 1 else 1,
        total_items=total if total is not None and total >= len(items) else len(items),
        per_page=per_page if per_page is not None else len(items),
    )


def decode_list(
    root: Any,
    envelope: str,
    item_key: str,
    decode_item: Callable[[Any], T],
) -> tuple[T, ...]:
    """Decode an unpaged list envelope, e.g. {"similarartists": {"artist": [...]}}.

    Raises:
        DecodeError: If the envelope is missing, or an item fails to decode
    """
    body = _require_envelope(root, envelope)
    return tuple(decode_item(item) for item in as_list(body.get(item_key)))


def decode_correction(root: Any, item_key: str, decode_item: Callable[[Any], T]) -> T | None:
    """Decode a *.getCorrection response.

    Last.fm answers {"corrections": {"correction": {"artist": {...}, "@attr": {...}}}} when it
    knows a correction and {"corrections": "\\n"} when it doesn't. The latter gives None.

    Raises:
        DecodeError: If "corrections" is missing entirely
    """
    if not isinstance(root, dict) or "corrections" not in root:
        raise DecodeError("Missing 'corrections' envelope", field="corrections")
    body = get_object(root, "corrections")
    candidates = as_list(body.get("correction")) if body else []
    for candidate in candidates:
        if isinstance(candidate, dict) and candidate.get(item_key):
            return decode_item(candidate[item_key])
    return None
