"""
Turns candidate directives into typed tags.

``parse_line`` handles one candidate and returns an Either; ``parse_playlist``
runs the whole document and collects the failures as diagnostics instead of
stopping on them.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from pymonad.either import Either, Left, Right

from .attributes import AttributeKind, decode_attributes, decode_value
from .domain.errors import MalformedTag, OrphanLine, ParseError, UnrecognizedLine
from .domain.models import ParseResult, Playlist
from .domain.tags import Tag
from .grammar import (
    BY_KEYWORD,
    BYTERANGE_PATTERN,
    MARKER,
    Payload,
    TagGrammar,
    UriLine,
    split_directive,
)
from .segmenter import is_comment, segment, split_lines

logger = logging.getLogger(__name__)


def _parse_segment_info(payload: str) -> Either[str, Dict[str, Any]]:
    duration_text, _, title = payload.partition(",")
    return decode_value(AttributeKind.FLOAT, duration_text.strip()).map(
        lambda duration: {"duration": duration, "title": title.strip() or None}
    )


def _parse_payload(grammar: TagGrammar, payload: Optional[str]) -> Either[str, Dict[str, Any]]:
    """Converts the text after ``:`` into constructor arguments for the tag."""
    kind = grammar.payload

    if kind is Payload.NONE:
        if payload:
            return Left(f"unexpected value '{payload}'")
        return Right({})
    if kind is Payload.TEXT:
        return Right({grammar.field: payload or ""})
    if kind is Payload.ATTRIBUTES:
        return decode_attributes(grammar.attributes, payload or "")
    if not payload:
        return Left("missing value")
    if kind is Payload.INTEGER:
        return decode_value(AttributeKind.INTEGER, payload).map(
            lambda number: {grammar.field: number}
        )
    if kind is Payload.BYTERANGE:
        if BYTERANGE_PATTERN.match(payload):
            return Right({grammar.field: payload})
        return Left(f"'{payload}' is not a byte range")
    if kind is Payload.SEGMENT_INFO:
        return _parse_segment_info(payload)
    return Left(f"unsupported payload {kind}")


def _orphans(lines: List[str]) -> List[ParseError]:
    return [OrphanLine(f"Line not attached to any tag: {line}", line) for line in lines]


def _parse_candidate(candidate: str) -> Tuple[Either[ParseError, Tag], List[str]]:
    """
    Parses one candidate. Also returns the trailing lines the tag did not
    consume, so the caller can report them.
    """
    lines = [line.strip() for line in split_lines(candidate) if line.strip()]
    if not lines:
        return Left(UnrecognizedLine("Empty line", candidate)), []

    head, rest = lines[0], lines[1:]
    if not head.startswith(MARKER):
        return Left(OrphanLine(f"Line not attached to any tag: {head}", head)), rest

    keyword, payload = split_directive(head)
    grammar = BY_KEYWORD.get(keyword)
    if grammar is None:
        return Left(UnrecognizedLine(f"Unrecognized tag: {head}", head)), rest

    uri = None
    if grammar.uri_line is not UriLine.NONE and rest:
        uri, rest = rest[0], rest[1:]
    if grammar.uri_line is UriLine.REQUIRED and uri is None:
        return Left(MalformedTag(f"{keyword} is not followed by a URI line", head)), rest

    fields = _parse_payload(grammar, payload)
    if fields.is_left():
        return Left(MalformedTag(f"{keyword}: {fields.monoid[0]}", head)), rest

    values = dict(fields.value)
    if grammar.uri_line is not UriLine.NONE:
        values["uri"] = uri
    return Right(grammar.tag_type(**values)), rest


def parse_line(line: str) -> Either[ParseError, Tag]:
    """
    Parses a single directive. For #EXTINF (and #EXT-X-STREAM-INF) the URI
    line is expected after a newline in the same string.

    Returns:
        Either: A Right(tag) or a Left(ParseError).
    """
    result, _ = _parse_candidate(line)
    return result


def parse_playlist(text: str) -> ParseResult:
    """
    Parses a whole playlist. Bad lines become diagnostics and parsing goes
    on with the next candidate.
    """
    tags: List[Tag] = []
    diagnostics: List[ParseError] = []

    for candidate in segment(text):
        if is_comment(candidate):
            head, *rest = candidate.split("\n")
            logger.debug(f"Skipping comment: {head}")
            diagnostics.extend(_orphans(rest))
            continue

        result, leftovers = _parse_candidate(candidate)
        if result.is_right():
            tags.append(result.value)
        else:
            error = result.monoid[0]
            logger.warning(error.message)
            diagnostics.append(error)
        diagnostics.extend(_orphans(leftovers))

    logger.info(f"Parsed {len(tags)} tags with {len(diagnostics)} diagnostics.")
    return ParseResult(Playlist(tuple(tags)), tuple(diagnostics))
