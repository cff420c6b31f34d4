"""
Typed records for every HLS directive the parser understands.

Each class is one variant of the closed ``Tag`` union. Optional fields are
``None`` when the directive does not carry them.
"""
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class ExtM3U:
    """#EXTM3U, the stream marker."""


@dataclass(frozen=True)
class Version:
    number: int


@dataclass(frozen=True)
class TargetDuration:
    duration: int


@dataclass(frozen=True)
class PlaylistType:
    value: str


@dataclass(frozen=True)
class MediaSequence:
    number: int


@dataclass(frozen=True)
class DiscontinuitySequence:
    number: int


@dataclass(frozen=True)
class EndList:
    pass


@dataclass(frozen=True)
class Key:
    """Encryption key descriptor (#EXT-X-KEY)."""
    method: str
    uri: Optional[str] = None
    iv: Optional[str] = None
    keyformat: Optional[str] = None
    keyformatversions: Optional[str] = None


@dataclass(frozen=True)
class Map:
    """Initialization segment (#EXT-X-MAP)."""
    uri: str
    byterange: Optional[str] = None


@dataclass(frozen=True)
class ProgramDateTime:
    value: str


@dataclass(frozen=True)
class Discontinuity:
    pass


@dataclass(frozen=True)
class Part:
    """Partial segment (#EXT-X-PART)."""
    uri: str
    duration: Optional[float] = None
    independent: Optional[bool] = None
    byterange: Optional[str] = None
    gap: Optional[bool] = None


@dataclass(frozen=True)
class PartInf:
    part_target: float


@dataclass(frozen=True)
class ServerControl:
    """Server capabilities for low-latency delivery (#EXT-X-SERVER-CONTROL)."""
    can_play: Optional[bool] = None
    can_seek: Optional[bool] = None
    can_pause: Optional[bool] = None
    min_buffer_time: Optional[float] = None
    can_block_reload: Optional[bool] = None
    hold_back: Optional[float] = None
    part_hold_back: Optional[float] = None
    can_skip_until: Optional[float] = None
    can_skip_dateranges: Optional[bool] = None


@dataclass(frozen=True)
class Skip:
    skipped_segments: int
    recently_removed_dateranges: Optional[str] = None


@dataclass(frozen=True)
class Start:
    # Kept as text: an empty offset is reported by the validator.
    time_offset: str
    precise: Optional[bool] = None


@dataclass(frozen=True)
class IndependentSegments:
    pass


@dataclass(frozen=True)
class StreamInf:
    """Variant stream (#EXT-X-STREAM-INF) and the playlist URI on the next line."""
    bandwidth: int
    average_bandwidth: Optional[int] = None
    codecs: Optional[str] = None
    resolution: Optional[str] = None
    frame_rate: Optional[float] = None
    audio: Optional[str] = None
    video: Optional[str] = None
    subtitles: Optional[str] = None
    closed_captions: Optional[str] = None
    uri: Optional[str] = None


@dataclass(frozen=True)
class Media:
    """Alternate rendition (#EXT-X-MEDIA)."""
    type: str
    group_id: str
    name: Optional[str] = None
    language: Optional[str] = None
    assoc_language: Optional[str] = None
    default: Optional[bool] = None
    autoselect: Optional[bool] = None
    forced: Optional[bool] = None
    instream_id: Optional[str] = None
    characteristics: Optional[str] = None
    channels: Optional[str] = None
    uri: Optional[str] = None


@dataclass(frozen=True)
class RenditionReport:
    uri: str
    last_msn: Optional[int] = None
    last_part: Optional[int] = None
    bandwidth: Optional[int] = None


@dataclass(frozen=True)
class ByteRange:
    """Sub-range of the next segment, ``length[@offset]``."""
    value: str


@dataclass(frozen=True)
class IFrameStreamInf:
    bandwidth: int
    uri: str
    average_bandwidth: Optional[int] = None
    codecs: Optional[str] = None
    resolution: Optional[str] = None
    frame_rate: Optional[float] = None
    video: Optional[str] = None


@dataclass(frozen=True)
class SessionData:
    data_id: str
    value: Optional[str] = None
    uri: Optional[str] = None
    language: Optional[str] = None


@dataclass(frozen=True)
class PreloadHint:
    uri: str
    hint_type: Optional[str] = None
    byterange_start: Optional[int] = None
    byterange_length: Optional[int] = None


@dataclass(frozen=True)
class SessionKey:
    method: str
    uri: Optional[str] = None
    iv: Optional[str] = None
    keyformat: Optional[str] = None
    keyformatversions: Optional[str] = None


@dataclass(frozen=True)
class ExtInf:
    """
    Media segment: the #EXTINF duration and title together with the URI
    line that follows it in the playlist.
    """
    duration: float
    uri: str
    title: Optional[str] = None


@dataclass(frozen=True)
class Gap:
    pass


@dataclass(frozen=True)
class Bitrate:
    kbps: int


Tag = Union[
    ExtM3U,
    Version,
    TargetDuration,
    PlaylistType,
    MediaSequence,
    DiscontinuitySequence,
    EndList,
    Key,
    Map,
    ProgramDateTime,
    Discontinuity,
    Part,
    PartInf,
    ServerControl,
    Skip,
    Start,
    IndependentSegments,
    StreamInf,
    Media,
    RenditionReport,
    ByteRange,
    IFrameStreamInf,
    SessionData,
    PreloadHint,
    SessionKey,
    ExtInf,
    Gap,
    Bitrate,
]
