"""
Splits playlist text into candidate directives.

A candidate is a directive line plus the non-directive lines (URIs) that
follow it. A ``#`` only starts a new candidate at the beginning of a line;
quoted attribute values never span lines.
"""
from typing import Iterator, List

from .grammar import MARKER

DIRECTIVE_PREFIX = MARKER + "EXT"


def split_lines(text: str) -> List[str]:
    """
    Splits on LF only, dropping the CR of CRLF endings. Other characters
    ``str.splitlines`` treats as breaks stay inside the line.
    """
    return [line.rstrip("\r") for line in text.split("\n")]


def _flush(lines: List[str]) -> str:
    return "\n".join(line for line in lines if line)


def segment(text: str) -> Iterator[str]:
    """Yields trimmed candidates in document order. Never raises."""
    text = text.lstrip("\ufeff")
    pending: List[str] = []

    for raw_line in split_lines(text):
        line = raw_line.strip()
        if line.startswith(MARKER) and pending:
            candidate = _flush(pending)
            if candidate:
                yield candidate
            pending = []
        pending.append(line)

    candidate = _flush(pending)
    if candidate:
        yield candidate


def is_comment(candidate: str) -> bool:
    return candidate.startswith(MARKER) and not candidate.startswith(DIRECTIVE_PREFIX)
