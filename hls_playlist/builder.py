"""
Programmatic construction of playlists, without going through text.

``build`` checks each tag against the domain its text form can express, so
that anything it returns renders and re-parses to an equal playlist.
"""
import logging
import math
from dataclasses import asdict
from typing import List, Optional

from pymonad.either import Either, Left, Right

from .attributes import AttributeKind
from .domain import tags
from .domain.errors import BuilderError
from .domain.models import Playlist
from .grammar import BY_TYPE, BYTERANGE_PATTERN, Payload, UriLine

logger = logging.getLogger(__name__)

_FORBIDDEN_EVERYWHERE = ("\n", "\r")


def _check_text(name: str, value: str, kind: Optional[AttributeKind]) -> Optional[str]:
    if any(char in value for char in _FORBIDDEN_EVERYWHERE):
        return f"{name} must not contain line breaks"
    if kind in (AttributeKind.QUOTED, AttributeKind.QUOTED_OR_NONE) and '"' in value:
        return f"{name} must not contain double quotes"
    if kind is AttributeKind.ENUMERATED and (
        any(char in value for char in ',"') or value != value.strip()
    ):
        return f"{name} must be a bare token"
    return None


def _check_number(name: str, value) -> Optional[str]:
    if isinstance(value, float) and not math.isfinite(value):
        return f"{name} must be finite"
    if value < 0:
        return f"{name} must not be negative"
    return None


def check_domain(tag: tags.Tag) -> Optional[str]:
    """Returns why tag cannot be written faithfully, or None when it can."""
    grammar = BY_TYPE.get(type(tag))
    if grammar is None:
        return f"{type(tag).__name__} is not a playlist tag"
    fields = asdict(tag)

    if grammar.payload is Payload.ATTRIBUTES:
        for spec in grammar.attributes:
            value = fields[spec.field]
            if value is None:
                continue
            if isinstance(value, str):
                problem = _check_text(spec.name, value, spec.kind)
            elif isinstance(value, bool):
                problem = None
            else:
                problem = _check_number(spec.name, value)
            if problem:
                return problem
    elif grammar.payload is Payload.INTEGER:
        problem = _check_number(grammar.keyword, fields[grammar.field])
        if problem:
            return problem
    elif grammar.payload is Payload.TEXT:
        problem = _check_text(grammar.keyword, fields[grammar.field], None)
        if problem:
            return problem
        if fields[grammar.field] != fields[grammar.field].strip():
            return f"{grammar.keyword} must not have surrounding spaces"
    elif grammar.payload is Payload.BYTERANGE:
        if not BYTERANGE_PATTERN.match(fields[grammar.field]):
            return f"'{fields[grammar.field]}' is not a byte range"
    elif grammar.payload is Payload.SEGMENT_INFO:
        problem = _check_number("duration", tag.duration)
        if problem:
            return problem
        if tag.title is not None:
            if not tag.title.strip() or tag.title != tag.title.strip():
                return "title must be non-empty without surrounding spaces"
            problem = _check_text("title", tag.title, None)
            if problem:
                return problem

    if grammar.uri_line is not UriLine.NONE:
        uri = fields["uri"]
        if uri is None and grammar.uri_line is UriLine.REQUIRED:
            return f"{grammar.keyword} needs a URI"
        if uri is not None:
            if not uri.strip() or uri != uri.strip() or uri.startswith("#"):
                return f"{grammar.keyword} URI must be a non-empty line"
            problem = _check_text("URI", uri, None)
            if problem:
                return problem
    return None


class PlaylistBuilder:
    """
    Collects tags in order. Each helper returns the builder so calls can be
    chained.
    """

    def __init__(self):
        self._tags: List[tags.Tag] = []

    def add(self, tag: tags.Tag) -> "PlaylistBuilder":
        self._tags.append(tag)
        return self

    def header(self, version: Optional[int] = None) -> "PlaylistBuilder":
        self.add(tags.ExtM3U())
        if version is not None:
            self.add(tags.Version(version))
        return self

    def target_duration(self, seconds: int) -> "PlaylistBuilder":
        return self.add(tags.TargetDuration(seconds))

    def segment(self, uri: str, duration: float, title: Optional[str] = None) -> "PlaylistBuilder":
        return self.add(tags.ExtInf(duration=duration, uri=uri, title=title))

    def variant(self, uri: str, bandwidth: int, **attributes) -> "PlaylistBuilder":
        return self.add(tags.StreamInf(bandwidth=bandwidth, uri=uri, **attributes))

    def end(self) -> "PlaylistBuilder":
        return self.add(tags.EndList())

    def build(self) -> Either[BuilderError, Playlist]:
        """
        Returns:
            Either: A Right(Playlist) or a Left(BuilderError) naming the
            first tag outside its legal domain.
        """
        for index, tag in enumerate(self._tags):
            problem = check_domain(tag)
            if problem:
                logger.error(f"Tag {index} ({type(tag).__name__}) rejected: {problem}")
                return Left(BuilderError(f"Tag {index} ({type(tag).__name__}): {problem}"))
        return Right(Playlist(tuple(self._tags)))
