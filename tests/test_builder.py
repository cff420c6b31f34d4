import pytest

from hls_playlist.builder import PlaylistBuilder, check_domain
from hls_playlist.domain import tags
from hls_playlist.domain.errors import BuilderError
from hls_playlist.parser import parse_playlist
from hls_playlist.serializer import render_playlist
from hls_playlist.validator import validate


@pytest.fixture
def builder():
    """Provides an empty PlaylistBuilder."""
    return PlaylistBuilder()


def test_build_media_playlist(builder):
    """
    Given tags added through the builder,
    When the playlist is built, rendered and parsed again,
    Then the same playlist comes back and it validates.
    """
    result = (
        builder.header(version=3)
        .target_duration(10)
        .segment("segment1.ts", 9.5, "Title")
        .segment("segment2.ts", 4.0)
        .end()
        .build()
    )

    assert result.is_right()
    playlist = result.value
    assert playlist.tags[0] == tags.ExtM3U()
    assert playlist.tags[3] == tags.ExtInf(duration=9.5, uri="segment1.ts", title="Title")
    assert parse_playlist(render_playlist(playlist)).playlist == playlist
    assert validate(playlist) == []


def test_build_master_playlist(builder):
    result = (
        builder.header()
        .add(tags.Media(type="AUDIO", group_id="aac", name="English", uri="en.m3u8"))
        .variant("low.m3u8", 500000, codecs="avc1.42c01e,mp4a.40.2", audio="aac")
        .variant("high.m3u8", 3000000, resolution="1920x1080")
        .build()
    )

    assert result.is_right()
    assert parse_playlist(render_playlist(result.value)).playlist == result.value


@pytest.mark.parametrize(
    "title", ["a\u2028b", "a\x85b", "form\x0cfeed", 'name="open']
)
def test_built_titles_with_unusual_characters_round_trip(builder, title):
    """
    Given a segment title holding characters that are not LF or CR,
    When the built playlist is rendered and parsed again,
    Then the title and the URI come back unchanged.
    """
    result = builder.header(version=3).segment("seg.ts", 9.5, title).end().build()

    assert result.is_right()
    parsed = parse_playlist(render_playlist(result.value))
    assert parsed.is_clean
    assert parsed.playlist == result.value
    assert parsed.playlist.segments() == (
        tags.ExtInf(duration=9.5, uri="seg.ts", title=title),
    )


@pytest.mark.parametrize(
    "tag, reason",
    [
        (tags.ExtInf(duration=-1.0, uri="a.ts"), "negative"),
        (tags.ExtInf(duration=float("inf"), uri="a.ts"), "finite"),
        (tags.ExtInf(duration=1.0, uri=""), "URI"),
        (tags.ExtInf(duration=1.0, uri="a.ts", title=""), "title"),
        (tags.ExtInf(duration=1.0, uri="a.ts", title="two\nlines"), "line breaks"),
        (tags.StreamInf(bandwidth=1, uri="#not-a-uri"), "URI"),
        (tags.Key(method="AES-128", uri='say "hi"'), "double quotes"),
        (tags.Key(method="AES,128"), "bare token"),
        (tags.Version(-1), "negative"),
        (tags.ByteRange("lots"), "byte range"),
        (tags.PlaylistType(" VOD"), "spaces"),
        (tags.PreloadHint(uri="n.mp4", byterange_length=-5), "negative"),
    ],
)
def test_check_domain_rejects_values_text_cannot_hold(tag, reason):
    assert reason in check_domain(tag)


def test_check_domain_accepts_values_the_validator_flags():
    assert check_domain(tags.Key(method="FAKE")) is None
    assert check_domain(tags.Map(uri="")) is None
    assert check_domain(tags.ExtInf(duration=0.0, uri="a.ts")) is None


def test_build_reports_first_bad_tag(builder, caplog):
    result = builder.header().segment("a.ts", -3.0).segment("", 1.0).build()

    assert result.is_left()
    error = result.monoid[0]
    assert isinstance(error, BuilderError)
    assert error.message.startswith("Tag 1 (ExtInf)")
    assert "rejected" in caplog.text


def test_builder_rejects_foreign_objects(builder):
    result = builder.add("#EXTM3U").build()

    assert result.is_left()
    assert "not a playlist tag" in result.monoid[0].message
