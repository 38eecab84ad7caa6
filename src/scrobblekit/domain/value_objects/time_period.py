"""Time period value object used by the user top-X calls."""

from enum import StrEnum


class TimePeriod(StrEnum):
    """Range a user chart is computed over; values are the API's wire strings."""

    OVERALL = "overall"
    WEEK = "7day"
    MONTH = "1month"
    QUARTER = "3month"
    HALF_YEAR = "6month"
    YEAR = "12month"
