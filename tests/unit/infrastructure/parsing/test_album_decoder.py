"""Tests for the album decoder."""

from typing import Any

import pytest

from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.domain.value_objects import ImageSize
from scrobblekit.infrastructure.parsing.album import _track_decoder, decode_album
from scrobblekit.infrastructure.parsing.track import decode_track


class TestAlbumDecoder:
    """Test decode_album."""

    def test_album_get_info(self) -> None:
        """Test album.getInfo body with string artist, tracks and tags."""
        album = decode_album(
            {
                "album": {
                    "name": "Issues",
                    "artist": "Korn",
                    "mbid": "",
                    "url": "https://www.last.fm/music/Korn/Issues",
                    "image": [{"#text": "https://x/l.png", "size": "large"}],
                    "listeners": "611005",
                    "playcount": "13127427",
                    "userplaycount": "12",
                    "tracks": {
                        "track": [
                            {"name": "Dead", "duration": 72, "artist": {"name": "Korn"}, "@attr": {"rank": 1}},
                            {"name": "Falling Away from Me", "artist": {"name": "Korn"}, "@attr": {"rank": 2}},
                        ]
                    },
                    "tags": {"tag": {"name": "nu metal", "url": "https://www.last.fm/tag/nu+metal"}},
                    "wiki": {"summary": "Fourth album.", "content": "Fourth studio album."},
                }
            }
        )

        assert album.title == "Issues"
        assert album.artist is not None and album.artist.name == "Korn"
        assert album.mbid is None
        assert album.images == {ImageSize.LARGE: "https://x/l.png"}
        assert album.listeners == 611005
        assert album.play_count == 13127427
        assert album.user_play_count == 12
        assert [t.name for t in album.tracks] == ["Dead", "Falling Away from Me"]
        assert album.tracks[1].rank == 2
        assert len(album.tags) == 1
        assert album.wiki is not None and album.wiki.summary == "Fourth album."

    @pytest.mark.parametrize("key", ["title", "name", "#text"])
    def test_title_keys(self, key: str) -> None:
        """Test all three places the title hides."""
        album = decode_album({key: "Issues", "artist": {"name": "Korn"}})
        assert album.title == "Issues"
        assert album.url == "https://www.last.fm/music/Korn/Issues"

    def test_top_album_list_item(self) -> None:
        """Test an element of user.getTopAlbums (artist object, rank)."""
        album = decode_album(
            {
                "name": "Follow the Leader",
                "playcount": "88",
                "artist": {"name": "Korn", "url": "https://www.last.fm/music/Korn"},
                "@attr": {"rank": "1"},
            }
        )
        assert album.rank == 1
        assert album.artist is not None and album.artist.url == "https://www.last.fm/music/Korn"

    def test_without_artist_has_no_url(self) -> None:
        """Test url stays None when it can't be built."""
        album = decode_album({"title": "Issues"})
        assert album.artist is None
        assert album.url is None

    def test_absent_lists_are_empty(self) -> None:
        """Test missing tracks/tags give ()."""
        album = decode_album({"name": "Issues", "artist": "Korn", "tracks": "", "tags": "\n"})
        assert album.tracks == ()
        assert album.tags == ()

    @pytest.mark.parametrize("node", [{"title": ""}, {"artist": "Korn"}, "Issues", None])
    def test_untitled_fails(self, node: Any) -> None:
        """Test a node without title is a decode error."""
        with pytest.raises(DecodeError):
            decode_album(node)

    def test_track_decoder_resolved_once(self) -> None:
        """Test the nested track decoder is looked up once and reused across albums."""
        for title in ("Issues", "Follow the Leader"):
            album = decode_album(
                {"name": title, "artist": "Korn", "tracks": {"track": {"name": "Dead", "artist": {"name": "Korn"}}}}
            )
            assert album.tracks[0].name == "Dead"

        assert _track_decoder() is decode_track
        assert _track_decoder.cache_info().currsize == 1
