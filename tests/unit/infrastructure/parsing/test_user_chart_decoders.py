"""Tests for the user and weekly chart decoders."""

from datetime import UTC, datetime
from typing import Any

import pytest

from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.infrastructure.parsing.chart import decode_weekly_chart
from scrobblekit.infrastructure.parsing.user import decode_user


def _user(**overrides: Any) -> dict[str, Any]:
    node: dict[str, Any] = {
        "name": "RJ",
        "realname": "Richard Jones",
        "url": "https://www.last.fm/user/RJ",
        "country": "United Kingdom",
        "age": "0",
        "gender": "n",
        "subscriber": "1",
        "playcount": "150316",
        "playlists": "0",
        "registered": {"unixtime": "1037793040", "#text": 1037793040},
        "type": "alum",
        "artist_count": "9000",
        "image": [{"#text": "https://x/rj.png", "size": "extralarge"}],
    }
    node.update(overrides)
    return node


class TestDecodeUser:
    """Test decode_user."""

    def test_user_get_info(self) -> None:
        """Test a full user.getInfo body."""
        user = decode_user({"user": _user()})

        assert user.username == "RJ"
        assert user.real_name == "Richard Jones"
        assert user.country == "United Kingdom"
        assert user.is_subscriber is True
        assert user.playcount == 150316
        assert user.playlists == 0
        assert user.registered == datetime(2002, 11, 20, 11, 50, 40, tzinfo=UTC)
        assert user.type == "alum"
        assert user.artist_count == 9000

    def test_placeholder_values_become_none(self) -> None:
        """Test age 0, gender "n" and country "None" are treated as unknown."""
        user = decode_user(_user(country="None"))
        assert user.age is None
        assert user.gender is None
        assert user.country is None

    def test_blank_country_is_none(self) -> None:
        """Test a present but blank country is fine."""
        assert decode_user(_user(country="")).country is None

    def test_url_synthesized(self) -> None:
        """Test a missing url is built from the name."""
        node = _user()
        del node["url"]
        assert decode_user(node).url == "https://www.last.fm/user/RJ"

    @pytest.mark.parametrize("key", ["name", "country", "subscriber", "playcount", "playlists", "registered"])
    def test_missing_required_member(self, key: str) -> None:
        """Test every mandatory member is enforced."""
        node = _user()
        del node[key]
        with pytest.raises(DecodeError) as exc_info:
            decode_user(node)
        assert exc_info.value.field == key

    def test_registered_without_unixtime(self) -> None:
        """Test registered must carry unixtime."""
        with pytest.raises(DecodeError):
            decode_user(_user(registered={"#text": "2002-11-20 11:50"}))


class TestDecodeWeeklyChart:
    """Test decode_weekly_chart."""

    def test_valid_window(self) -> None:
        """Test from/to are decoded as UTC instants."""
        chart = decode_weekly_chart({"#text": "", "from": "1108296000", "to": "1108900800"})
        assert chart.from_ == datetime(2005, 2, 13, 12, 0, tzinfo=UTC)
        assert chart.to == datetime(2005, 2, 20, 12, 0, tzinfo=UTC)
        assert chart.from_ < chart.to

    @pytest.mark.parametrize(
        "node",
        [
            {"to": "1108900800"},
            {"from": "1108296000"},
            {"from": "1108900800", "to": "1108296000"},
            {"from": "1108296000", "to": "1108296000"},
            "1108296000",
        ],
    )
    def test_invalid_windows(self, node: Any) -> None:
        """Test missing bounds and empty or inverted windows fail."""
        with pytest.raises(DecodeError):
            decode_weekly_chart(node)
