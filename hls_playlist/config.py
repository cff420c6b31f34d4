import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from pymonad.either import Either, Left, Right

from .domain.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "hls-playlist.yml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Options read from the YAML configuration file."""
    lang: Optional[str] = None
    log_level: str = "WARNING"
    strict: bool = False


def _settings_from_mapping(data: dict, source: str) -> Either[ConfigError, Settings]:
    lang = data.get("lang")
    if lang is not None and not isinstance(lang, str):
        return Left(ConfigError(f"'lang' must be a string in '{source}'."))

    log_level = str(data.get("log_level", Settings.log_level)).upper()
    if log_level not in LOG_LEVELS:
        return Left(ConfigError(f"Unknown log level '{log_level}' in '{source}'."))

    strict = data.get("strict", Settings.strict)
    if not isinstance(strict, bool):
        return Left(ConfigError(f"'strict' must be true or false in '{source}'."))

    return Right(Settings(lang=lang, log_level=log_level, strict=strict))


def load_settings(path: Optional[Path] = None) -> Either[ConfigError, Settings]:
    """
    Loads the settings from a YAML file.

    Without an explicit path the default file in the working directory is
    used if it exists; otherwise the defaults apply. An explicit path that
    does not exist is an error.
    """
    explicit = path is not None
    path = Path(path) if explicit else Path(DEFAULT_CONFIG_FILE)

    if not path.exists():
        if explicit:
            return Left(ConfigError(f"Configuration file '{path}' not found."))
        return Right(Settings())

    try:
        with open(path, "r", encoding="utf-8") as file:
            data = yaml.safe_load(file)
    except (yaml.YAMLError, IOError) as e:
        logger.error(f"Could not load configuration '{path}': {e}")
        return Left(ConfigError(f"Could not load configuration '{path}': {e}"))

    if data is None:
        return Right(Settings())
    if not isinstance(data, dict):
        return Left(ConfigError(f"Configuration '{path}' must be a mapping."))

    logger.info(f"Configuration loaded from '{path}'.")
    return _settings_from_mapping(data, str(path))
