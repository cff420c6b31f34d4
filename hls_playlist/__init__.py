"""Parse, validate and serialize HLS (M3U8) playlists."""
from .builder import PlaylistBuilder
from .domain.models import ParseResult, Playlist
from .parser import parse_line, parse_playlist
from .segmenter import segment
from .serializer import render, render_playlist
from .validator import validate

__all__ = [
    "ParseResult",
    "Playlist",
    "PlaylistBuilder",
    "parse_line",
    "parse_playlist",
    "render",
    "render_playlist",
    "segment",
    "validate",
]
