"""Domain value objects."""

from .images import ImageSize, largest_image
from .time_period import TimePeriod

__all__ = ["ImageSize", "TimePeriod", "largest_image"]
