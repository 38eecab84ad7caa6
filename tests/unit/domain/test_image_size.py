"""Tests for the ImageSize value object."""

from scrobblekit.domain.value_objects import ImageSize, TimePeriod, largest_image


class TestImageSizeFromApi:
    """Test size string matching."""

    def test_case_insensitive(self) -> None:
        """Test sizes match regardless of case."""
        assert ImageSize.from_api("LARGE") == ImageSize.LARGE
        assert ImageSize.from_api("ExtraLarge") == ImageSize.EXTRA_LARGE
        assert ImageSize.from_api("mega") == ImageSize.MEGA

    def test_unrecognized_is_unknown(self) -> None:
        """Test unknown, empty and None sizes map to UNKNOWN."""
        assert ImageSize.from_api("huge") == ImageSize.UNKNOWN
        assert ImageSize.from_api("") == ImageSize.UNKNOWN
        assert ImageSize.from_api(None) == ImageSize.UNKNOWN


class TestLargestImage:
    """Test picking the biggest image."""

    def test_prefers_biggest(self) -> None:
        """Test mega beats extralarge beats smaller sizes."""
        images = {
            ImageSize.SMALL: "s.png",
            ImageSize.EXTRA_LARGE: "xl.png",
            ImageSize.MEGA: "mega.png",
        }
        assert largest_image(images) == "mega.png"

    def test_unknown_is_last_resort(self) -> None:
        """Test UNKNOWN is only used when nothing else exists."""
        assert largest_image({ImageSize.UNKNOWN: "u.png", ImageSize.SMALL: "s.png"}) == "s.png"
        assert largest_image({ImageSize.UNKNOWN: "u.png"}) == "u.png"

    def test_empty(self) -> None:
        """Test empty map gives None."""
        assert largest_image({}) is None


class TestTimePeriod:
    """Test period wire values."""

    def test_wire_values(self) -> None:
        """Test periods serialize to the API strings."""
        assert [p.value for p in TimePeriod] == ["overall", "7day", "1month", "3month", "6month", "12month"]
