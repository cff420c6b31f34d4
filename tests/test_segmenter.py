from hls_playlist.segmenter import is_comment, segment


def test_segment_groups_uri_with_its_directive():
    """
    Given a media playlist,
    When it is segmented,
    Then each #EXTINF candidate carries the URI line that follows it.
    """
    text = "#EXTM3U\n#EXTINF:9.5,Title\nsegment1.ts\n#EXT-X-ENDLIST\n"

    assert list(segment(text)) == [
        "#EXTM3U",
        "#EXTINF:9.5,Title\nsegment1.ts",
        "#EXT-X-ENDLIST",
    ]


def test_segment_does_not_split_on_marker_inside_line():
    text = '#EXT-X-KEY:METHOD=AES-128,URI="https://example.com/key#1"\n#EXT-X-ENDLIST'

    assert list(segment(text)) == [
        '#EXT-X-KEY:METHOD=AES-128,URI="https://example.com/key#1"',
        "#EXT-X-ENDLIST",
    ]


def test_segment_unterminated_quote_does_not_swallow_later_lines():
    """
    Given a directive whose quoted value is never closed,
    When the text is segmented,
    Then the next line starting with '#' still opens a new candidate.
    """
    text = '#EXT-X-KEY:METHOD=AES-128,URI="k.bin\n#EXTINF:10,\nseg.ts\n#EXT-X-ENDLIST\n'

    assert list(segment(text)) == [
        '#EXT-X-KEY:METHOD=AES-128,URI="k.bin',
        "#EXTINF:10,\nseg.ts",
        "#EXT-X-ENDLIST",
    ]


def test_segment_splits_on_line_feed_only():
    text = "#EXTINF:4,a\u2028b\x85c\x0cd\r\nseg.ts\r\n"

    assert list(segment(text)) == ["#EXTINF:4,a\u2028b\x85c\x0cd\nseg.ts"]


def test_segment_trims_and_drops_blank_lines():
    text = "\ufeff  #EXTM3U  \r\n\r\n   \n#EXTINF:4,\r\n\r\n  a.ts  \r\n"

    assert list(segment(text)) == ["#EXTM3U", "#EXTINF:4,\na.ts"]


def test_segment_passes_leading_non_directive_lines_through():
    assert list(segment("stray.ts\n#EXTM3U")) == ["stray.ts", "#EXTM3U"]


def test_segment_is_lazy_and_handles_empty_text():
    candidates = segment("")

    assert iter(candidates) is candidates
    assert list(candidates) == []


def test_is_comment():
    assert is_comment("# produced by encoder 4.2")
    assert is_comment("#just a note")
    assert not is_comment("#EXTM3U")
    assert not is_comment("#EXT-X-ENDLIST")
    assert not is_comment("segment.ts")
