"""Configuration helpers for range display settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from .constants import DEFAULT_FORMAT_SETTINGS, REQUIRED_NON_EMPTY_FORMAT_KEYS
from .logging_config import get_logger, setup_logging

logger = get_logger()


@dataclass(frozen=True)
class FormatSettings:
    """Literal strings used when rendering runs."""

    separator: str = DEFAULT_FORMAT_SETTINGS['separator']
    range_separator: str = DEFAULT_FORMAT_SETTINGS['range_separator']
    open_delimiter: str = DEFAULT_FORMAT_SETTINGS['open_delimiter']
    close_delimiter: str = DEFAULT_FORMAT_SETTINGS['close_delimiter']


DEFAULT_SETTINGS = FormatSettings()


class FormatConfigService:
    """Stateful access wrapper for the formatting and logging sections of one config file."""

    def __init__(self, config_file: Path = Path("config.yaml")) -> None:
        self.config_file = config_file

    def load_format_settings(self) -> FormatSettings:
        return load_format_settings(self.config_file)

    def setup_logging(self) -> logging.Logger:
        return setup_logging(self.config_file)


def parse_format_settings(formatting_config: dict | None, source: str = "config") -> FormatSettings:
    """
    Validate a ``formatting`` mapping and build FormatSettings from it.

    Args:
        formatting_config: Mapping of setting name to string, or None for defaults.
        source: Name of the config source used in error messages.

    Returns:
        FormatSettings with defaults for any keys not provided.
    """
    if formatting_config is None:
        return DEFAULT_SETTINGS
    if not isinstance(formatting_config, dict):
        raise ValueError(f"Invalid formatting section in {source}; expected mapping.")

    unknown_keys = sorted(set(formatting_config) - set(DEFAULT_FORMAT_SETTINGS))
    if unknown_keys:
        allowed = ', '.join(DEFAULT_FORMAT_SETTINGS)
        raise ValueError(
            f"Unknown formatting keys in {source}: {', '.join(map(str, unknown_keys))}. Use one of: {allowed}."
        )

    settings = DEFAULT_FORMAT_SETTINGS.copy()
    settings.update(formatting_config)

    for key, value in settings.items():
        if not isinstance(value, str):
            raise ValueError(f"formatting.{key} must be a string")
    for key in REQUIRED_NON_EMPTY_FORMAT_KEYS:
        if not settings[key]:
            raise ValueError(f"formatting.{key} must be a non-empty string")

    return FormatSettings(**settings)


def load_format_settings(config_path: Path = Path("config.yaml")) -> FormatSettings:
    """Load and validate range display settings from config file."""
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}

    settings = parse_format_settings(config.get('formatting'), source=str(config_path))
    logger.debug("Loaded format settings from %s: %s", config_path, settings)
    return settings
