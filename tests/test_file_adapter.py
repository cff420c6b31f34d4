import pytest
from unittest.mock import MagicMock
from pymonad.either import Left, Right

from hls_playlist.adapters.file_adapter import (
    FilePlaylistStore,
    decode_text,
    load_playlist,
    save_playlist,
)
from hls_playlist.domain import tags
from hls_playlist.domain.errors import PlaylistIOError
from hls_playlist.domain.models import Playlist
from hls_playlist.domain.ports import PlaylistStore


@pytest.fixture
def store():
    """Provides a FilePlaylistStore instance."""
    return FilePlaylistStore()


def test_read_success(store, tmp_path):
    path = tmp_path / "media.m3u8"
    path.write_bytes("\ufeff#EXTM3U\n#EXTINF:4,Café\na.ts\n".encode("utf-8"))

    result = store.read(str(path))

    assert result.is_right()
    assert result.value == "#EXTM3U\n#EXTINF:4,Café\na.ts\n"


def test_read_missing_file(store, tmp_path, caplog):
    """
    Given a path that does not exist,
    When it is read,
    Then a Left(PlaylistIOError) is returned and the failure is logged.
    """
    result = store.read(str(tmp_path / "missing.m3u8"))

    assert result.is_left()
    assert isinstance(result.monoid[0], PlaylistIOError)
    assert "Could not read" in caplog.text


def test_read_undecodable_bytes_is_fatal(store, tmp_path):
    path = tmp_path / "binary.m3u8"
    path.write_bytes(b"#EXTM3U\n\xff\xfe\xfa")

    result = store.read(str(path))

    assert result.is_left()
    assert "not valid UTF-8" in result.monoid[0].message


def test_decode_text():
    assert decode_text(b"#EXTM3U").value == "#EXTM3U"
    assert decode_text(b"\xc3\x28").is_left()


def test_write_success(store, tmp_path):
    path = tmp_path / "out.m3u8"

    result = store.write(str(path), "#EXTM3U\n")

    assert result.is_right()
    assert path.read_text(encoding="utf-8") == "#EXTM3U\n"


def test_write_into_missing_directory(store, tmp_path):
    result = store.write(str(tmp_path / "nope" / "out.m3u8"), "#EXTM3U\n")

    assert result.is_left()
    assert "Could not write" in result.monoid[0].message


def test_load_and_save_round_trip(tmp_path):
    playlist = Playlist((tags.ExtM3U(), tags.ExtInf(duration=6.0, uri="a.ts"), tags.EndList()))
    path = tmp_path / "round.m3u8"

    saved = save_playlist(playlist, str(path))
    loaded = load_playlist(str(path))

    assert saved.is_right()
    assert loaded.value.playlist == playlist
    assert loaded.value.is_clean


def test_load_playlist_uses_the_given_store():
    mock_store = MagicMock(spec=PlaylistStore)
    mock_store.read.return_value = Right("#EXTM3U\n#EXT-X-VERSION:4\n")

    result = load_playlist("memory://playlist", mock_store)

    mock_store.read.assert_called_once_with("memory://playlist")
    assert result.value.playlist.tags == (tags.ExtM3U(), tags.Version(4))


def test_load_playlist_propagates_read_error():
    mock_store = MagicMock(spec=PlaylistStore)
    mock_store.read.return_value = Left(PlaylistIOError("boom"))

    result = load_playlist("memory://playlist", mock_store)

    assert result.is_left()
    assert result.monoid[0].message == "boom"
