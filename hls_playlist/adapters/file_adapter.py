import logging
from pathlib import Path

from pymonad.either import Either, Left, Right

from hls_playlist.domain.errors import PlaylistIOError
from hls_playlist.domain.models import ParseResult, Playlist
from hls_playlist.domain.ports import PlaylistStore
from hls_playlist.parser import parse_playlist
from hls_playlist.serializer import render_playlist

logger = logging.getLogger(__name__)


def decode_text(data: bytes, source: str = "<bytes>") -> Either[PlaylistIOError, str]:
    """Decodes playlist bytes as UTF-8. A byte order mark is dropped."""
    try:
        return Right(data.decode("utf-8-sig"))
    except UnicodeDecodeError as e:
        logger.error(f"'{source}' is not valid UTF-8: {e}")
        return Left(PlaylistIOError(f"'{source}' is not valid UTF-8: {e}"))


class FilePlaylistStore(PlaylistStore):
    """
    Adapter reading and writing playlists on the local filesystem.
    """

    def read(self, location: str) -> Either[PlaylistIOError, str]:
        path = Path(location)
        logger.info(f"Reading playlist '{path}'.")
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.error(f"Could not read '{path}': {e}")
            return Left(PlaylistIOError(f"Could not read '{path}': {e}"))
        return decode_text(data, str(path))

    def write(self, location: str, text: str) -> Either[PlaylistIOError, str]:
        path = Path(location)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not write '{path}': {e}")
            return Left(PlaylistIOError(f"Could not write '{path}': {e}"))
        logger.info(f"Playlist written to '{path}'.")
        return Right(str(path))


def load_playlist(
    location: str, store: PlaylistStore = FilePlaylistStore()
) -> Either[PlaylistIOError, ParseResult]:
    return store.read(location).map(parse_playlist)


def save_playlist(
    playlist: Playlist, location: str, store: PlaylistStore = FilePlaylistStore()
) -> Either[PlaylistIOError, str]:
    return store.write(location, render_playlist(playlist))
