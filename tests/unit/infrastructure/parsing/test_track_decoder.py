"""Tests for the track decoder."""

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.infrastructure.parsing.track import decode_track

BLIND_FIXTURE: dict[str, Any] = {
    "track": {
        "name": "Blind",
        "url": "https://www.last.fm/music/Korn/_/Blind",
        "duration": "263000",
        "listeners": "913699",
        "playcount": "6750088",
        "userplaycount": "15",
        "artist": {"name": "Korn", "url": "https://www.last.fm/music/Korn"},
        "album": {
            "artist": "Korn",
            "title": "Korn",
            "url": "https://www.last.fm/music/Korn/Korn",
            "image": [{"size": "small", "#text": "https://last.fm/small.png"}],
        },
        "toptags": {"tag": [{"name": "Nu Metal", "url": "https://www.last.fm/tag/Nu+Metal"}]},
        "wiki": {
            "published": "08 Dec 2022, 17:14",
            "summary": "Sample summary...",
            "content": "Full content...",
        },
    }
}

PLAYED = {"uts": "1700000000", "#text": "14 Nov 2023, 22:13"}
PLAYED_AT = datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)


class TestWellFormedFixture:
    """Test the track.getInfo fixture end to end."""

    def test_blind(self) -> None:
        """Test name, nested artist/album, duration, counts, tags and wiki."""
        track = decode_track(BLIND_FIXTURE)

        assert track.name == "Blind"
        assert track.artist is not None and track.artist.name == "Korn"
        assert track.album is not None and track.album.title == "Korn"
        assert track.album.artist is not None and track.album.artist.name == "Korn"
        assert track.duration == timedelta(milliseconds=263000)
        assert track.listeners == 913699
        assert track.play_count == 6750088
        assert track.user_play_count == 15
        assert len(track.top_tags) == 1
        assert track.top_tags[0].name == "Nu Metal"
        assert track.wiki is not None
        assert track.wiki.summary == "Sample summary..."
        assert track.wiki.published == datetime(2022, 12, 8, 17, 14, tzinfo=UTC)


class TestDateMutualExclusion:
    """Test date.uts lands in played_at or user_loved_date, never both."""

    def test_with_album_is_played_at(self) -> None:
        """Test an album member makes the date played_at."""
        track = decode_track(
            {"name": "Blind", "artist": {"#text": "Korn"}, "album": {"#text": "Korn"}, "date": PLAYED}
        )
        assert track.played_at == PLAYED_AT
        assert track.user_loved_date is None

    def test_without_album_is_loved_date(self) -> None:
        """Test no album key makes the same date user_loved_date."""
        track = decode_track({"name": "Blind", "artist": {"name": "Korn"}, "date": PLAYED})
        assert track.user_loved_date == PLAYED_AT
        assert track.played_at is None

    def test_empty_album_still_counts_as_present(self) -> None:
        """Test a recent track without album ({"#text": ""}) has album None but played_at set."""
        track = decode_track(
            {"name": "Blind", "artist": {"#text": "Korn"}, "album": {"mbid": "", "#text": ""}, "date": PLAYED}
        )
        assert track.album is None
        assert track.played_at == PLAYED_AT
        assert track.user_loved_date is None

    @pytest.mark.parametrize("with_album", [True, False])
    def test_never_both(self, with_album: bool) -> None:
        """Test at most one of the two dates is ever set."""
        node: dict[str, Any] = {"name": "Blind", "artist": "Korn", "date": PLAYED}
        if with_album:
            node["album"] = {"#text": "Korn"}
        track = decode_track(node)
        assert (track.played_at is None) != (track.user_loved_date is None)


class TestTrackFields:
    """Test individual field rules."""

    def test_user_play_count_falls_back_to_playcount(self) -> None:
        """Known quirk: without userplaycount the user count is re-read from playcount.

        Some endpoints reuse "playcount" for the requesting user's count. Facades null it
        where that's wrong (track.getInfo without username, chart/geo lists).
        """
        track = decode_track({"name": "Blind", "artist": "Korn", "playcount": "99"})
        assert track.play_count == 99
        assert track.user_play_count == 99

    @pytest.mark.parametrize(
        ("node", "expected"),
        [
            ({"userloved": "1"}, True),
            ({"userloved": "0"}, False),
            ({"loved": "1"}, True),
            ({}, None),
        ],
    )
    def test_user_loved_sources(self, node: dict[str, Any], expected: bool | None) -> None:
        """Test userloved (getInfo) and loved (extended recent tracks)."""
        track = decode_track({"name": "Blind", "artist": "Korn", **node})
        assert track.user_loved is expected

    def test_now_playing(self) -> None:
        """Test @attr.nowplaying "true"."""
        track = decode_track(
            {"name": "Blind", "artist": {"#text": "Korn"}, "album": {"#text": ""}, "@attr": {"nowplaying": "true"}}
        )
        assert track.is_now_playing is True
        assert track.played_at is None

    def test_not_now_playing_by_default(self) -> None:
        """Test absent @attr means not playing."""
        assert decode_track({"name": "Blind", "artist": "Korn"}).is_now_playing is False

    def test_streamable_object_and_match(self) -> None:
        """Test streamable as object and match as float."""
        track = decode_track(
            {
                "name": "Blind",
                "artist": {"name": "Korn"},
                "streamable": {"#text": "0", "fulltrack": "0"},
                "match": 0.87,
                "@attr": {"rank": "4"},
            }
        )
        assert track.is_streamable is False
        assert track.match == 0.87
        assert track.rank == 4

    def test_url_synthesized_from_artist(self) -> None:
        """Test a missing url is built from artist and track name."""
        track = decode_track({"name": "Blind", "artist": {"#text": "Korn"}})
        assert track.url == "https://www.last.fm/music/Korn/_/Blind"

    def test_missing_name_fails(self) -> None:
        """Test a track without name can't be decoded."""
        with pytest.raises(DecodeError):
            decode_track({"url": "https://www.last.fm/music/Korn/_/Blind"})

    def test_missing_url_without_artist_fails(self) -> None:
        """Test no url and no artist to build one from is a decode error."""
        with pytest.raises(DecodeError):
            decode_track({"name": "Blind"})

    def test_malformed_duration_is_none(self) -> None:
        """Test a junk duration only drops the duration."""
        track = decode_track({"name": "Blind", "artist": "Korn", "duration": "n/a"})
        assert track.duration is None
