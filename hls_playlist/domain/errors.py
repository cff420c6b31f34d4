# hls_playlist/domain/errors.py
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class AppError:
    """Classe de base pour les erreurs de l'application."""
    message: str


@dataclass(frozen=True)
class PlaylistIOError(AppError):
    """Erreur fatale de lecture, de décodage ou d'écriture d'une playlist."""
    pass


@dataclass(frozen=True)
class ConfigError(AppError):
    """Erreur liée au fichier de configuration."""
    pass


@dataclass(frozen=True)
class BuilderError(AppError):
    """Tag construit hors du domaine légal de sa directive."""
    pass


@dataclass(frozen=True)
class ParseError(AppError):
    """Diagnostic non fatal produit pour une ligne de la playlist."""
    line: str


@dataclass(frozen=True)
class UnrecognizedLine(ParseError):
    """Ligne qui n'est pas une directive connue."""
    pass


@dataclass(frozen=True)
class MalformedTag(ParseError):
    """Directive connue dont la valeur ne respecte pas la grammaire."""
    pass


@dataclass(frozen=True)
class OrphanLine(ParseError):
    """Ligne d'URI qu'aucune directive n'a consommée."""
    pass


@dataclass(frozen=True)
class ValidationError:
    """
    Violation d'une règle sémantique. Ce sont des données, jamais des
    exceptions : le validateur les accumule toutes.
    """
    message_key: ClassVar[str] = "violation_unknown"


@dataclass(frozen=True)
class MissingStreamMarker(ValidationError):
    message_key: ClassVar[str] = "violation_missing_stream_marker"


@dataclass(frozen=True)
class InvalidVersion(ValidationError):
    version: int
    message_key: ClassVar[str] = "violation_invalid_version"


@dataclass(frozen=True)
class InvalidDuration(ValidationError):
    duration: float
    message_key: ClassVar[str] = "violation_invalid_duration"


@dataclass(frozen=True)
class InvalidTargetDuration(ValidationError):
    duration: int
    message_key: ClassVar[str] = "violation_invalid_target_duration"


@dataclass(frozen=True)
class InvalidKeyMethod(ValidationError):
    method: str
    message_key: ClassVar[str] = "violation_invalid_key_method"


@dataclass(frozen=True)
class InvalidMapUri(ValidationError):
    message_key: ClassVar[str] = "violation_invalid_map_uri"


@dataclass(frozen=True)
class InvalidProgramDateTime(ValidationError):
    message_key: ClassVar[str] = "violation_invalid_program_date_time"


@dataclass(frozen=True)
class InvalidBitrate(ValidationError):
    bitrate: int
    message_key: ClassVar[str] = "violation_invalid_bitrate"


@dataclass(frozen=True)
class InvalidStartOffset(ValidationError):
    message_key: ClassVar[str] = "violation_invalid_start_offset"


@dataclass(frozen=True)
class InvalidSkipTag(ValidationError):
    skipped_segments: int
    message_key: ClassVar[str] = "violation_invalid_skip_tag"


@dataclass(frozen=True)
class InvalidPreloadHintUri(ValidationError):
    message_key: ClassVar[str] = "violation_invalid_preload_hint_uri"


@dataclass(frozen=True)
class InvalidRenditionReportUri(ValidationError):
    message_key: ClassVar[str] = "violation_invalid_rendition_report_uri"
