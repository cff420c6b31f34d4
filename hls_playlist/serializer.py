"""Renders tags back to canonical playlist text."""
import logging
from dataclasses import asdict

from .attributes import encode_attributes, format_float
from .domain.models import Playlist
from .domain.tags import Tag
from .grammar import BY_TYPE, MARKER, Payload, UriLine

logger = logging.getLogger(__name__)


def render(tag: Tag) -> str:
    """
    Returns the directive line for tag. #EXTINF and #EXT-X-STREAM-INF with a
    URI come back as two lines.
    """
    grammar = BY_TYPE[type(tag)]
    fields = asdict(tag)
    directive = f"{MARKER}{grammar.keyword}"

    if grammar.payload is Payload.NONE:
        line = directive
    elif grammar.payload is Payload.ATTRIBUTES:
        line = f"{directive}:{encode_attributes(grammar.attributes, fields)}"
    elif grammar.payload is Payload.SEGMENT_INFO:
        line = f"{directive}:{format_float(tag.duration)},{tag.title or ''}"
    else:
        line = f"{directive}:{fields[grammar.field]}"

    if grammar.uri_line is not UriLine.NONE and fields.get("uri") is not None:
        return f"{line}\n{fields['uri']}"
    return line


def render_playlist(playlist: Playlist) -> str:
    """Renders every tag, one directive per line, with a trailing newline."""
    logger.debug(f"Rendering {len(playlist)} tags.")
    return "".join(f"{render(tag)}\n" for tag in playlist)
