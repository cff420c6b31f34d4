from dataclasses import dataclass
from typing import Iterator, Tuple, Type

from .errors import ParseError
from .tags import ExtInf, Tag


@dataclass(frozen=True)
class Playlist:
    """An ordered, immutable sequence of tags."""
    tags: Tuple[Tag, ...] = ()

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def find(self, tag_type: Type) -> Tuple[Tag, ...]:
        """Returns every tag of the given variant, in playlist order."""
        return tuple(tag for tag in self.tags if isinstance(tag, tag_type))

    def segments(self) -> Tuple[ExtInf, ...]:
        return self.find(ExtInf)


@dataclass(frozen=True)
class ParseResult:
    """DTO returned by the parser: the playlist and the per-line diagnostics."""
    playlist: Playlist
    diagnostics: Tuple[ParseError, ...] = ()

    @property
    def is_clean(self) -> bool:
        return not self.diagnostics
