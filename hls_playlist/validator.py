"""
Semantic checks on a parsed playlist.

Rules are looked up per tag type in a read-only table; tags without a rule
pass. Every violation is collected, none stops the walk.
"""
import logging
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Type

from .domain import errors
from .domain import tags
from .domain.models import Playlist

logger = logging.getLogger(__name__)

SUPPORTED_VERSIONS = range(1, 8)
KEY_METHODS = frozenset({"NONE", "AES-128", "SAMPLE-AES"})

Rule = Callable[[tags.Tag], Optional[errors.ValidationError]]


def _check_version(tag: tags.Version):
    if tag.number not in SUPPORTED_VERSIONS:
        return errors.InvalidVersion(tag.number)


def _check_segment_duration(tag: tags.ExtInf):
    if tag.duration <= 0:
        return errors.InvalidDuration(tag.duration)


def _check_target_duration(tag: tags.TargetDuration):
    if tag.duration == 0:
        return errors.InvalidTargetDuration(tag.duration)


def _check_key_method(tag: tags.Key):
    if tag.method not in KEY_METHODS:
        return errors.InvalidKeyMethod(tag.method)


def _check_map_uri(tag: tags.Map):
    if not tag.uri:
        return errors.InvalidMapUri()


def _check_program_date_time(tag: tags.ProgramDateTime):
    if not tag.value:
        return errors.InvalidProgramDateTime()


def _check_bitrate(tag: tags.Bitrate):
    if tag.kbps < 0:
        return errors.InvalidBitrate(tag.kbps)


def _check_start_offset(tag: tags.Start):
    if not tag.time_offset:
        return errors.InvalidStartOffset()


def _check_skip(tag: tags.Skip):
    if tag.skipped_segments == 0:
        return errors.InvalidSkipTag(tag.skipped_segments)


def _check_preload_hint(tag: tags.PreloadHint):
    if not tag.uri:
        return errors.InvalidPreloadHintUri()


def _check_rendition_report(tag: tags.RenditionReport):
    if not tag.uri:
        return errors.InvalidRenditionReportUri()


RULES: Mapping[Type, Rule] = MappingProxyType({
    tags.Version: _check_version,
    tags.ExtInf: _check_segment_duration,
    tags.TargetDuration: _check_target_duration,
    tags.Key: _check_key_method,
    tags.Map: _check_map_uri,
    tags.ProgramDateTime: _check_program_date_time,
    tags.Bitrate: _check_bitrate,
    tags.Start: _check_start_offset,
    tags.Skip: _check_skip,
    tags.PreloadHint: _check_preload_hint,
    tags.RenditionReport: _check_rendition_report,
})


def validate(playlist: Playlist) -> List[errors.ValidationError]:
    """
    Checks a playlist against the HLS rules.

    Args:
        playlist: The parsed (or built) playlist. It is only read.

    Returns:
        The violations in tag order, the missing stream marker first. An
        empty list means the playlist is valid.
    """
    violations: List[errors.ValidationError] = []

    if not any(isinstance(tag, tags.ExtM3U) for tag in playlist):
        violations.append(errors.MissingStreamMarker())

    for tag in playlist:
        rule = RULES.get(type(tag))
        if rule is None:
            continue
        violation = rule(tag)
        if violation is not None:
            violations.append(violation)

    if violations:
        logger.info(f"Playlist has {len(violations)} violation(s).")
    else:
        logger.info("Playlist is valid.")
    return violations
