"""Tests for the tag and wiki decoders."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from scrobblekit.domain.exceptions import DecodeError
from scrobblekit.infrastructure.parsing.tag import decode_tag, decode_tag_list
from scrobblekit.infrastructure.parsing.wiki import decode_wiki, parse_published


class TestDecodeTag:
    """Test decode_tag."""

    def test_tag_get_info(self) -> None:
        """Test tag.getInfo body with reach, total and wiki."""
        tag = decode_tag(
            {
                "tag": {
                    "name": "metal",
                    "total": 1004291,
                    "reach": 150224,
                    "wiki": {"summary": "Metal is a genre.", "content": "Heavy metal."},
                }
            }
        )
        assert tag.name == "metal"
        assert tag.url == "https://www.last.fm/tag/metal"
        assert tag.reach == 150224
        assert tag.taggings == 1004291
        assert tag.count is None
        assert tag.wiki is not None and tag.wiki.content == "Heavy metal."

    def test_count_fills_every_count_field(self) -> None:
        """Test count lands in count, weight_on_album and user_used_count."""
        tag = decode_tag({"name": "rock", "url": "https://www.last.fm/tag/rock", "count": "100"})
        assert tag.count == 100
        assert tag.weight_on_album == 100
        assert tag.user_used_count == 100
        assert tag.taggings == 100

    def test_taggings_wins_over_total(self) -> None:
        """Test taggings → total → count priority."""
        tag = decode_tag({"name": "rock", "taggings": "5", "total": "6", "count": "7"})
        assert tag.taggings == 5

    def test_empty_wiki_is_none(self) -> None:
        """Test an empty wiki object is dropped."""
        assert decode_tag({"name": "rock", "wiki": {}}).wiki is None

    def test_url_is_encoded(self) -> None:
        """Test synthesized url escapes the name."""
        assert decode_tag({"name": "hip hop"}).url == "https://www.last.fm/tag/hip+hop"

    @pytest.mark.parametrize("node", [{"name": ""}, {"count": 3}, "rock", None])
    def test_invalid_nodes(self, node: object) -> None:
        """Test nameless or non-object nodes fail."""
        with pytest.raises(DecodeError):
            decode_tag(node)

    def test_tag_list_single_object(self) -> None:
        """Test decode_tag_list with a single object instead of an array."""
        tags = decode_tag_list({"toptags": {"tag": {"name": "rock"}}}, "toptags", "tag")
        assert [t.name for t in tags] == ["rock"]

    def test_tag_list_absent(self) -> None:
        """Test decode_tag_list without wrapper."""
        assert decode_tag_list({}, "tags", "tag") == ()


class TestDecodeWiki:
    """Test wiki parsing."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("08 Dec 2022, 17:14", datetime(2022, 12, 8, 17, 14, tzinfo=UTC)),
            ("8 December 2022, 17:14", datetime(2022, 12, 8, 17, 14, tzinfo=UTC)),
            ("2022-12-08 17:14:00", datetime(2022, 12, 8, 17, 14, tzinfo=UTC)),
            ("2022-12-08T17:14:00Z", datetime(2022, 12, 8, 17, 14, tzinfo=UTC)),
        ],
    )
    def test_published_formats(self, raw: str, expected: datetime) -> None:
        """Test the accepted publish date formats."""
        assert parse_published(raw) == expected

    def test_published_with_offset(self) -> None:
        """Test RFC 2822 dates keep their offset."""
        parsed = parse_published("Thu, 08 Dec 2022 17:14:00 +0100")
        assert parsed == datetime(2022, 12, 8, 17, 14, tzinfo=timezone(timedelta(hours=1)))

    @pytest.mark.parametrize("raw", [None, "", "yesterday-ish"])
    def test_unparseable_published(self, raw: str | None) -> None:
        """Test garbage gives None, never an exception."""
        assert parse_published(raw) is None

    def test_missing_text_is_empty(self) -> None:
        """Test missing summary/content default to ""."""
        wiki = decode_wiki({"published": "08 Dec 2022, 17:14"})
        assert wiki.summary == ""
        assert wiki.content == ""
        assert wiki.published is not None
