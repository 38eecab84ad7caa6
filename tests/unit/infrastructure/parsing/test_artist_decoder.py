"""Tests for the artist decoder.

Hey future me - the play count split (play_count vs user_play_count gated on @attr.rank)
is the riskiest mapping in the library. Keep TestPlayCountDisambiguation exhaustive!
"""

from typing import Any

import pytest

from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.domain.value_objects import ImageSize
from scrobblekit.infrastructure.parsing.artist import decode_artist

ARTIST_GET_INFO: dict[str, Any] = {
    "artist": {
        "name": "Korn",
        "mbid": "ac865b2e-bba8-4f5a-8756-dd40d5e39f46",
        "url": "https://www.last.fm/music/Korn",
        "image": [
            {"#text": "https://x/small.png", "size": "small"},
            {"#text": "https://x/mega.png", "size": "mega"},
        ],
        "streamable": "0",
        "ontour": "1",
        "stats": {"listeners": "2531447", "playcount": "116412030", "userplaycount": "321"},
        "similar": {
            "artist": [
                {"name": "Limp Bizkit", "url": "https://www.last.fm/music/Limp+Bizkit", "image": []},
                {"name": "Deftones", "url": "https://www.last.fm/music/Deftones", "image": []},
            ]
        },
        "tags": {"tag": [{"name": "Nu Metal", "url": "https://www.last.fm/tag/Nu+Metal"}]},
        "bio": {
            "published": "08 Dec 2022, 17:14",
            "summary": "Korn is an American nu metal band.",
            "content": "Korn is an American nu metal band from Bakersfield.",
        },
    }
}


class TestArtistShapes:
    """Test the accepted input shapes."""

    def test_full_get_info(self) -> None:
        """Test artist.getInfo body decodes every field."""
        artist = decode_artist(ARTIST_GET_INFO)

        assert artist.name == "Korn"
        assert artist.mbid == "ac865b2e-bba8-4f5a-8756-dd40d5e39f46"
        assert artist.url == "https://www.last.fm/music/Korn"
        assert artist.images[ImageSize.MEGA] == "https://x/mega.png"
        assert artist.image_url == "https://x/mega.png"
        assert artist.is_streamable is False
        assert artist.on_tour is True
        assert artist.listeners == 2531447
        assert artist.play_count == 116412030
        assert artist.user_play_count == 321
        assert [a.name for a in artist.similar_artists] == ["Limp Bizkit", "Deftones"]
        assert artist.tags[0].name == "Nu Metal"
        assert artist.biography is not None
        assert artist.biography.summary.startswith("Korn")

    def test_bare_string(self) -> None:
        """Test a bare string gives name plus synthesized URL."""
        artist = decode_artist("Nine Inch Nails")
        assert artist.name == "Nine Inch Nails"
        assert artist.url == "https://www.last.fm/music/Nine+Inch+Nails"
        assert artist.similar_artists == ()
        assert artist.tags == ()

    def test_text_key_used_as_name(self) -> None:
        """Test {"#text": ...} (artist nested in a recent track)."""
        artist = decode_artist({"mbid": "", "#text": "Korn"})
        assert artist.name == "Korn"
        assert artist.mbid is None
        assert artist.url == "https://www.last.fm/music/Korn"

    def test_missing_wrappers_give_empty_lists(self) -> None:
        """Test absent similar/tags wrappers yield (), never None."""
        artist = decode_artist({"name": "Korn", "url": "https://www.last.fm/music/Korn"})
        assert artist.similar_artists == ()
        assert artist.tags == ()
        assert artist.biography is None

    def test_single_similar_object(self) -> None:
        """Test a one-element similar list sent as a bare object."""
        artist = decode_artist({"name": "Korn", "similar": {"artist": {"name": "Deftones"}}})
        assert len(artist.similar_artists) == 1
        assert artist.similar_artists[0].url == "https://www.last.fm/music/Deftones"

    @pytest.mark.parametrize("node", [{"name": ""}, {"url": "https://x"}, "", 42, None])
    def test_nameless_nodes_fail(self, node: Any) -> None:
        """Test a node without a usable name fails the decode."""
        with pytest.raises(DecodeError):
            decode_artist(node)

    def test_malformed_numbers_only_drop_the_field(self) -> None:
        """Test a junk listener count leaves the rest intact."""
        artist = decode_artist({"name": "Korn", "listeners": "lots", "playcount": "10"})
        assert artist.listeners is None
        assert artist.play_count == 10


class TestPlayCountDisambiguation:
    """Test playcount routing on @attr.rank."""

    def test_without_rank_is_global_play_count(self) -> None:
        """Test playcount "42" without rank → play_count 42, user_play_count None."""
        artist = decode_artist({"name": "Korn", "playcount": "42"})
        assert artist.play_count == 42
        assert artist.user_play_count is None
        assert artist.rank is None

    def test_with_rank_is_user_play_count(self) -> None:
        """Test same node plus @attr.rank "3" → user_play_count 42, play_count None, rank 3."""
        artist = decode_artist({"name": "Korn", "playcount": "42", "@attr": {"rank": "3"}})
        assert artist.user_play_count == 42
        assert artist.play_count is None
        assert artist.rank == 3

    @pytest.mark.parametrize("playcount", ["42", 42])
    @pytest.mark.parametrize("rank", [None, "1", 7])
    def test_exactly_one_destination(self, playcount: Any, rank: Any) -> None:
        """Test the single playcount source never fills both fields."""
        node: dict[str, Any] = {"name": "Korn", "playcount": playcount}
        if rank is not None:
            node["@attr"] = {"rank": rank}

        artist = decode_artist(node)

        filled = [v for v in (artist.play_count, artist.user_play_count) if v is not None]
        assert filled == [42]
        assert (artist.user_play_count == 42) == (rank is not None)

    def test_stats_take_priority_over_flat_fields(self) -> None:
        """Test stats.playcount/listeners win over flat playcount/listeners."""
        artist = decode_artist(
            {"name": "Korn", "playcount": "1", "listeners": "2", "stats": {"playcount": "100", "listeners": "200"}}
        )
        assert artist.play_count == 100
        assert artist.listeners == 200

    def test_stats_with_rank(self) -> None:
        """Test the rank rule also applies to stats.playcount."""
        artist = decode_artist({"name": "Korn", "stats": {"playcount": "5"}, "@attr": {"rank": "1"}})
        assert artist.user_play_count == 5
        assert artist.play_count is None
