"""Weekly chart list decoder."""

from typing import Any

from scrobblekit.domain.entities import WeeklyChartInfo
from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.infrastructure.parsing.values import from_unix_seconds


def decode_weekly_chart(node: Any) -> WeeklyChartInfo:
    """Decode one {"from": "...", "to": "..."} element of a weekly chart list.

    Raises:
        DecodeError: If either bound is missing, or from is not before to
    """
    if not isinstance(node, dict):
        raise DecodeError("Weekly chart node is not an object", field="chart")

    start = from_unix_seconds(node.get("from"))
    end = from_unix_seconds(node.get("to"))
    if start is None:
        raise DecodeError("Missing required field 'from'", field="from")
    if end is None:
        raise DecodeError("Missing required field 'to'", field="to")
    if start >= end:
        raise DecodeError(f"Weekly chart window is empty: {start} >= {end}", field="to")

    return WeeklyChartInfo(from_=start, to=end)
