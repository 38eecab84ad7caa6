"""Tests for the chart, geo and library facades."""

from typing import Any

import pytest

from scrobblekit.application.facades import ChartApi, GeoApi, LibraryApi
from scrobblekit.domain.exceptions import ValidationError

ATTR = {"page": "1", "perPage": "50", "totalPages": "100", "total": "5000"}


class TestChartApi:
    """Test global charts."""

    async def test_top_artists(self, fake_invoker: Any) -> None:
        """Test chart.getTopArtists has only global counts."""
        fake_invoker.responses["chart.getTopArtists"] = {
            "artists": {"artist": [{"name": "Taylor Swift", "playcount": "100", "listeners": "5"}], "@attr": ATTR}
        }

        result = await ChartApi(fake_invoker).get_top_artists(limit=50)

        assert result.data is not None
        artist = result.data.items[0]
        assert artist.play_count == 100
        assert artist.user_play_count is None
        assert result.data.total_pages == 100

    async def test_top_tracks(self, fake_invoker: Any) -> None:
        """Test chart.getTopTracks nulls the user count fallback."""
        fake_invoker.responses["chart.getTopTracks"] = {
            "tracks": {"track": [{"name": "Cruel Summer", "playcount": "9", "artist": {"name": "Taylor Swift"}}], "@attr": ATTR}
        }
        result = await ChartApi(fake_invoker).get_top_tracks()
        assert result.data is not None
        assert result.data.items[0].play_count == 9
        assert result.data.items[0].user_play_count is None

    async def test_top_tags(self, fake_invoker: Any) -> None:
        """Test chart.getTopTags keeps taggings and reach."""
        fake_invoker.responses["chart.getTopTags"] = {
            "tags": {"tag": [{"name": "rock", "reach": "400000", "taggings": "4000000"}], "@attr": ATTR}
        }
        result = await ChartApi(fake_invoker).get_top_tags(page=2)
        assert result.data is not None
        tag = result.data.items[0]
        assert tag.taggings == 4000000
        assert tag.reach == 400000
        assert tag.count is None
        assert fake_invoker.last_call["params"] == {"page": "2"}

    async def test_invalid_page(self, fake_invoker: Any) -> None:
        """Test page 0 raises."""
        with pytest.raises(ValidationError):
            await ChartApi(fake_invoker).get_top_tags(page=0)


class TestGeoApi:
    """Test per-country charts."""

    async def test_top_artists(self, fake_invoker: Any) -> None:
        """Test geo.getTopArtists by country."""
        fake_invoker.responses["geo.getTopArtists"] = {
            "topartists": {"artist": [{"name": "Rammstein", "listeners": "10"}], "@attr": {"country": "Germany", **ATTR}}
        }
        result = await GeoApi(fake_invoker).get_top_artists("Germany")
        assert result.data is not None and result.data.items[0].listeners == 10
        assert fake_invoker.last_call["params"] == {"country": "Germany"}

    async def test_top_tracks_with_location(self, fake_invoker: Any) -> None:
        """Test geo.getTopTracks with a metro."""
        fake_invoker.responses["geo.getTopTracks"] = {
            "tracks": {"track": [{"name": "Du hast", "artist": {"name": "Rammstein"}, "playcount": "4"}], "@attr": ATTR}
        }
        result = await GeoApi(fake_invoker).get_top_tracks("Germany", location="Berlin", limit=10)
        assert result.data is not None and result.data.items[0].user_play_count is None
        assert fake_invoker.last_call["params"] == {"country": "Germany", "location": "Berlin", "limit": "10"}

    async def test_blank_country(self, fake_invoker: Any) -> None:
        """Test a blank country raises."""
        with pytest.raises(ValidationError):
            await GeoApi(fake_invoker).get_top_artists("")


class TestLibraryApi:
    """Test library.getArtists."""

    async def test_get_artists(self, fake_invoker: Any) -> None:
        """Test ranked library artists expose only the user's count."""
        fake_invoker.responses["library.getArtists"] = {
            "artists": {
                "artist": [{"name": "Korn", "playcount": "321", "tagcount": "0", "@attr": {"rank": "1"}}],
                "@attr": {"user": "RJ", **ATTR},
            }
        }

        result = await LibraryApi(fake_invoker).get_artists("RJ", limit=50, page=1)

        assert result.data is not None
        artist = result.data.items[0]
        assert artist.user_play_count == 321
        assert artist.play_count is None
        assert fake_invoker.last_call["params"] == {"user": "RJ", "limit": "50", "page": "1"}
