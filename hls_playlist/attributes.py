"""
Attribute-list grammar shared by every attribute-bearing directive.

A payload such as ``METHOD=AES-128,URI="k,1.bin"`` is split on top-level
commas only, each segment is split once on ``=``, and values are converted
according to the kind declared for the attribute. Nothing is unescaped.
"""
import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from pymonad.either import Either, Left, Right

logger = logging.getLogger(__name__)

# A run of non-comma characters or whole quoted spans. An unterminated quote
# swallows the rest of the payload instead of splitting inside it.
ATTRIBUTE_SEGMENT_PATTERN = re.compile(r'(?:[^,"]|"[^"]*"?)+')

_INTEGER_PATTERN = re.compile(r"-?\d+\Z")
_FLOAT_PATTERN = re.compile(r"-?(?:\d+\.?\d*|\.\d+)\Z")


class AttributeKind(Enum):
    QUOTED = "quoted-string"
    ENUMERATED = "enumerated-string"
    INTEGER = "decimal-integer"
    FLOAT = "decimal-floating-point"
    BOOLEAN = "YES/NO"
    QUOTED_OR_NONE = "quoted-string or NONE"


@dataclass(frozen=True)
class AttributeSpec:
    """Binds an attribute name to a tag field and the kind of its value."""
    name: str
    field: str
    kind: AttributeKind
    required: bool = False
    aliases: Tuple[str, ...] = ()


def tokenize(payload: str) -> Iterator[Tuple[str, Optional[str]]]:
    """
    Yields (key, raw value) pairs. A segment without ``=`` is a bare flag
    and comes back with a None value.
    """
    for segment in ATTRIBUTE_SEGMENT_PATTERN.findall(payload):
        if not segment.strip():
            continue
        key, separator, value = segment.partition("=")
        yield key.strip(), value.strip() if separator else None


def parse_attribute_list(payload: str) -> Dict[str, Optional[str]]:
    """Builds the key -> raw value mapping. The first occurrence of a key wins."""
    attributes: Dict[str, Optional[str]] = {}
    for key, value in tokenize(payload):
        if key in attributes:
            logger.debug(f"Duplicate attribute '{key}' ignored.")
            continue
        attributes[key] = value
    return attributes


def unquote(raw: str) -> str:
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        return raw[1:-1]
    return raw


def format_float(value: float) -> str:
    """Plain decimal notation that parses back to the same float."""
    return format(Decimal(repr(float(value))), "f")


def decode_value(kind: AttributeKind, raw: Optional[str]) -> Either[str, Any]:
    """Converts a raw attribute value. Returns a Left(reason) when malformed."""
    if raw is None:
        return Left("flag has no value")

    if kind is AttributeKind.QUOTED:
        return Right(unquote(raw))
    if kind is AttributeKind.ENUMERATED:
        return Right(raw)
    if kind is AttributeKind.QUOTED_OR_NONE:
        return Right(raw if raw == "NONE" else unquote(raw))
    if kind is AttributeKind.INTEGER:
        if _INTEGER_PATTERN.match(raw):
            return Right(int(raw))
        return Left(f"'{raw}' is not a decimal integer")
    if kind is AttributeKind.FLOAT:
        if _FLOAT_PATTERN.match(raw):
            return Right(float(raw))
        return Left(f"'{raw}' is not a decimal number")
    if kind is AttributeKind.BOOLEAN:
        if raw == "YES":
            return Right(True)
        if raw == "NO":
            return Right(False)
        return Left(f"'{raw}' is neither YES nor NO")
    return Left(f"unsupported attribute kind {kind}")


def encode_value(kind: AttributeKind, value: Any) -> str:
    if kind is AttributeKind.QUOTED:
        return f'"{value}"'
    if kind is AttributeKind.QUOTED_OR_NONE:
        return value if value == "NONE" else f'"{value}"'
    if kind is AttributeKind.BOOLEAN:
        return "YES" if value else "NO"
    if kind is AttributeKind.FLOAT:
        return format_float(value)
    return str(value)


def decode_attributes(
    specs: Iterable[AttributeSpec], payload: str
) -> Either[str, Dict[str, Any]]:
    """
    Pulls the attributes named by specs out of payload and converts them.

    Unknown attributes are ignored. A malformed optional value degrades to
    None; a missing or malformed required value fails the whole list.

    Returns:
        Either: A Right(field -> value) or a Left(reason).
    """
    specs = tuple(specs)
    raw_attributes = parse_attribute_list(payload)

    known = {name for spec in specs for name in (spec.name,) + spec.aliases}
    unknown = [key for key in raw_attributes if key not in known]
    if unknown:
        logger.debug(f"Ignoring unknown attributes: {', '.join(unknown)}")

    fields: Dict[str, Any] = {}
    for spec in specs:
        name = next(
            (n for n in (spec.name,) + spec.aliases if n in raw_attributes), None
        )
        if name is None:
            if spec.required:
                return Left(f"missing required attribute {spec.name}")
            fields[spec.field] = None
            continue

        decoded = decode_value(spec.kind, raw_attributes[name])
        if decoded.is_right():
            fields[spec.field] = decoded.value
        elif spec.required:
            return Left(f"{name}: {decoded.monoid[0]}")
        else:
            logger.debug(f"Dropping malformed attribute {name}: {decoded.monoid[0]}")
            fields[spec.field] = None
    return Right(fields)


def encode_attributes(specs: Iterable[AttributeSpec], fields: Dict[str, Any]) -> str:
    """Renders the present fields in declaration order."""
    return ",".join(
        f"{spec.name}={encode_value(spec.kind, fields[spec.field])}"
        for spec in specs
        if fields.get(spec.field) is not None
    )
