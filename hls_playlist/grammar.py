"""
Registry of the directives this package understands.

Each entry describes how a keyword's payload is shaped. The parser and the
serializer both read from this table, so a directive is added in one place.
"""
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Type

from .attributes import AttributeKind, AttributeSpec
from .domain import tags

MARKER = "#"
BYTERANGE_PATTERN = re.compile(r"\d+(?:@\d+)?\Z")

QUOTED = AttributeKind.QUOTED
ENUM = AttributeKind.ENUMERATED
INTEGER = AttributeKind.INTEGER
FLOAT = AttributeKind.FLOAT
BOOLEAN = AttributeKind.BOOLEAN


class Payload(Enum):
    NONE = "none"
    INTEGER = "integer"
    TEXT = "text"
    BYTERANGE = "byterange"
    ATTRIBUTES = "attributes"
    SEGMENT_INFO = "segment-info"


class UriLine(Enum):
    NONE = "none"
    OPTIONAL = "optional"
    REQUIRED = "required"


@dataclass(frozen=True)
class TagGrammar:
    keyword: str
    tag_type: Type
    payload: Payload
    field: Optional[str] = None
    attributes: Tuple[AttributeSpec, ...] = ()
    uri_line: UriLine = UriLine.NONE


def attr(name, field, kind, required=False, aliases=()):
    return AttributeSpec(name, field, kind, required, tuple(aliases))


_KEY_ATTRIBUTES = (
    attr("METHOD", "method", ENUM, required=True),
    attr("URI", "uri", QUOTED),
    attr("IV", "iv", ENUM),
    attr("KEYFORMAT", "keyformat", QUOTED),
    attr("KEYFORMATVERSIONS", "keyformatversions", QUOTED),
)

GRAMMARS = (
    TagGrammar("EXTM3U", tags.ExtM3U, Payload.NONE),
    TagGrammar("EXT-X-VERSION", tags.Version, Payload.INTEGER, "number"),
    TagGrammar("EXT-X-TARGETDURATION", tags.TargetDuration, Payload.INTEGER, "duration"),
    TagGrammar("EXT-X-PLAYLIST-TYPE", tags.PlaylistType, Payload.TEXT, "value"),
    TagGrammar("EXT-X-MEDIA-SEQUENCE", tags.MediaSequence, Payload.INTEGER, "number"),
    TagGrammar(
        "EXT-X-DISCONTINUITY-SEQUENCE", tags.DiscontinuitySequence, Payload.INTEGER, "number"
    ),
    TagGrammar("EXT-X-ENDLIST", tags.EndList, Payload.NONE),
    TagGrammar("EXT-X-KEY", tags.Key, Payload.ATTRIBUTES, attributes=_KEY_ATTRIBUTES),
    TagGrammar(
        "EXT-X-MAP",
        tags.Map,
        Payload.ATTRIBUTES,
        attributes=(
            attr("URI", "uri", QUOTED, required=True),
            attr("BYTERANGE", "byterange", QUOTED),
        ),
    ),
    TagGrammar("EXT-X-PROGRAM-DATE-TIME", tags.ProgramDateTime, Payload.TEXT, "value"),
    TagGrammar("EXT-X-DISCONTINUITY", tags.Discontinuity, Payload.NONE),
    TagGrammar(
        "EXT-X-PART",
        tags.Part,
        Payload.ATTRIBUTES,
        attributes=(
            attr("URI", "uri", QUOTED, required=True),
            attr("DURATION", "duration", FLOAT),
            attr("INDEPENDENT", "independent", BOOLEAN),
            attr("BYTERANGE", "byterange", QUOTED),
            attr("GAP", "gap", BOOLEAN),
        ),
    ),
    TagGrammar(
        "EXT-X-PART-INF",
        tags.PartInf,
        Payload.ATTRIBUTES,
        attributes=(
            attr("PART-TARGET", "part_target", FLOAT, required=True,
                 aliases=("PART-TARGET-DURATION",)),
        ),
    ),
    TagGrammar(
        "EXT-X-SERVER-CONTROL",
        tags.ServerControl,
        Payload.ATTRIBUTES,
        attributes=(
            attr("CAN-PLAY", "can_play", BOOLEAN),
            attr("CAN-SEEK", "can_seek", BOOLEAN),
            attr("CAN-PAUSE", "can_pause", BOOLEAN),
            attr("MIN-BUFFER-TIME", "min_buffer_time", FLOAT),
            attr("CAN-BLOCK-RELOAD", "can_block_reload", BOOLEAN),
            attr("HOLD-BACK", "hold_back", FLOAT),
            attr("PART-HOLD-BACK", "part_hold_back", FLOAT),
            attr("CAN-SKIP-UNTIL", "can_skip_until", FLOAT),
            attr("CAN-SKIP-DATERANGES", "can_skip_dateranges", BOOLEAN),
        ),
    ),
    TagGrammar(
        "EXT-X-SKIP",
        tags.Skip,
        Payload.ATTRIBUTES,
        attributes=(
            attr("SKIPPED-SEGMENTS", "skipped_segments", INTEGER, required=True),
            attr("RECENTLY-REMOVED-DATERANGES", "recently_removed_dateranges", QUOTED),
        ),
    ),
    TagGrammar(
        "EXT-X-START",
        tags.Start,
        Payload.ATTRIBUTES,
        attributes=(
            attr("TIME-OFFSET", "time_offset", ENUM, required=True),
            attr("PRECISE", "precise", BOOLEAN),
        ),
    ),
    TagGrammar("EXT-X-INDEPENDENT-SEGMENTS", tags.IndependentSegments, Payload.NONE),
    TagGrammar(
        "EXT-X-STREAM-INF",
        tags.StreamInf,
        Payload.ATTRIBUTES,
        attributes=(
            attr("BANDWIDTH", "bandwidth", INTEGER, required=True),
            attr("AVERAGE-BANDWIDTH", "average_bandwidth", INTEGER),
            attr("CODECS", "codecs", QUOTED),
            attr("RESOLUTION", "resolution", ENUM),
            attr("FRAME-RATE", "frame_rate", FLOAT),
            attr("AUDIO", "audio", QUOTED),
            attr("VIDEO", "video", QUOTED),
            attr("SUBTITLES", "subtitles", QUOTED),
            attr("CLOSED-CAPTIONS", "closed_captions", AttributeKind.QUOTED_OR_NONE),
        ),
        uri_line=UriLine.OPTIONAL,
    ),
    TagGrammar(
        "EXT-X-MEDIA",
        tags.Media,
        Payload.ATTRIBUTES,
        attributes=(
            attr("TYPE", "type", ENUM, required=True),
            attr("GROUP-ID", "group_id", QUOTED, required=True),
            attr("NAME", "name", QUOTED),
            attr("LANGUAGE", "language", QUOTED),
            attr("ASSOC-LANGUAGE", "assoc_language", QUOTED),
            attr("DEFAULT", "default", BOOLEAN),
            attr("AUTOSELECT", "autoselect", BOOLEAN),
            attr("FORCED", "forced", BOOLEAN),
            attr("INSTREAM-ID", "instream_id", QUOTED),
            attr("CHARACTERISTICS", "characteristics", QUOTED),
            attr("CHANNELS", "channels", QUOTED),
            attr("URI", "uri", QUOTED),
        ),
    ),
    TagGrammar(
        "EXT-X-RENDITION-REPORT",
        tags.RenditionReport,
        Payload.ATTRIBUTES,
        attributes=(
            attr("URI", "uri", QUOTED, required=True),
            attr("LAST-MSN", "last_msn", INTEGER),
            attr("LAST-PART", "last_part", INTEGER),
            attr("BANDWIDTH", "bandwidth", INTEGER),
        ),
    ),
    TagGrammar("EXT-X-BYTERANGE", tags.ByteRange, Payload.BYTERANGE, "value"),
    TagGrammar(
        "EXT-X-I-FRAME-STREAM-INF",
        tags.IFrameStreamInf,
        Payload.ATTRIBUTES,
        attributes=(
            attr("BANDWIDTH", "bandwidth", INTEGER, required=True),
            attr("AVERAGE-BANDWIDTH", "average_bandwidth", INTEGER),
            attr("CODECS", "codecs", QUOTED),
            attr("RESOLUTION", "resolution", ENUM),
            attr("FRAME-RATE", "frame_rate", FLOAT),
            attr("VIDEO", "video", QUOTED),
            attr("URI", "uri", QUOTED, required=True),
        ),
    ),
    TagGrammar(
        "EXT-X-SESSION-DATA",
        tags.SessionData,
        Payload.ATTRIBUTES,
        attributes=(
            attr("DATA-ID", "data_id", QUOTED, required=True, aliases=("ID",)),
            attr("VALUE", "value", QUOTED),
            attr("URI", "uri", QUOTED),
            attr("LANGUAGE", "language", QUOTED),
        ),
    ),
    TagGrammar(
        "EXT-X-PRELOAD-HINT",
        tags.PreloadHint,
        Payload.ATTRIBUTES,
        attributes=(
            attr("TYPE", "hint_type", ENUM),
            attr("URI", "uri", QUOTED, required=True),
            attr("BYTERANGE-START", "byterange_start", INTEGER),
            attr("BYTERANGE-LENGTH", "byterange_length", INTEGER),
        ),
    ),
    TagGrammar(
        "EXT-X-SESSION-KEY", tags.SessionKey, Payload.ATTRIBUTES, attributes=_KEY_ATTRIBUTES
    ),
    TagGrammar(
        "EXTINF", tags.ExtInf, Payload.SEGMENT_INFO, uri_line=UriLine.REQUIRED
    ),
    TagGrammar("EXT-X-GAP", tags.Gap, Payload.NONE),
    TagGrammar("EXT-X-BITRATE", tags.Bitrate, Payload.INTEGER, "kbps"),
)

BY_KEYWORD: Mapping[str, TagGrammar] = MappingProxyType(
    {grammar.keyword: grammar for grammar in GRAMMARS}
)
BY_TYPE: Mapping[Type, TagGrammar] = MappingProxyType(
    {grammar.tag_type: grammar for grammar in GRAMMARS}
)


def split_directive(line: str) -> Tuple[str, Optional[str]]:
    """
    Splits ``#KEYWORD:payload`` into its keyword and payload. The payload is
    None when the line has no ``:``.
    """
    body = line[len(MARKER):] if line.startswith(MARKER) else line
    keyword, separator, payload = body.partition(":")
    return keyword.strip(), payload.strip() if separator else None
