"""Logging setup for adjranges.

The package logs under the ``adjranges`` logger. ``setup_logging`` attaches a
file handler (always DEBUG) and a console handler (configured level) from
the ``logging`` section of config.yaml.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import yaml

from .constants import DEFAULT_LOGGING_SETTINGS, LOGGER_NAME


@dataclass(frozen=True)
class LoggingSettings:
    """Validated ``logging`` section of config.yaml."""

    log_file: str = DEFAULT_LOGGING_SETTINGS['log_file']
    console_level: str = DEFAULT_LOGGING_SETTINGS['console_level']
    file_mode: str = DEFAULT_LOGGING_SETTINGS['file_mode']
    suppress_root_logger: bool = DEFAULT_LOGGING_SETTINGS['suppress_root_logger']
    third_party_log_level: str = DEFAULT_LOGGING_SETTINGS['third_party_log_level']


def _level_name(value: object, key: str) -> str:
    level = str(value).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid logging.{key} '{value}'")
    return level


def parse_logging_settings(logging_config: dict | None, source: str = "config") -> LoggingSettings:
    """
    Validate a ``logging`` mapping and build LoggingSettings from it.

    Args:
        logging_config: Mapping from config.yaml, or None for defaults.
        source: Name of the config source used in error messages.

    Returns:
        LoggingSettings with defaults for any keys not provided.
    """
    if logging_config is None:
        return LoggingSettings()
    if not isinstance(logging_config, dict):
        raise ValueError(f"Invalid logging section in {source}; expected mapping.")

    unknown_keys = sorted(set(logging_config) - set(DEFAULT_LOGGING_SETTINGS))
    if unknown_keys:
        raise ValueError(f"Unknown logging keys in {source}: {', '.join(map(str, unknown_keys))}")

    settings = DEFAULT_LOGGING_SETTINGS.copy()
    settings.update(logging_config)

    settings['console_level'] = _level_name(settings['console_level'], 'console_level')
    settings['third_party_log_level'] = _level_name(settings['third_party_log_level'], 'third_party_log_level')
    if settings['file_mode'] not in ('w', 'a'):
        raise ValueError("logging.file_mode must be 'w' or 'a'")
    if not isinstance(settings['suppress_root_logger'], bool):
        raise ValueError("logging.suppress_root_logger must be boolean")
    if not isinstance(settings['log_file'], str) or not settings['log_file'].strip():
        raise ValueError("logging.log_file must be a non-empty string")

    return LoggingSettings(**settings)


def configure_logging(settings: LoggingSettings) -> logging.Logger:
    """Attach file and console handlers to the package logger (once)."""
    logger = get_logger()
    logger.setLevel(logging.DEBUG)

    # Avoid adding handlers multiple times if called repeatedly
    if logger.handlers:
        return logger

    file_handler = logging.FileHandler(settings.log_file, mode=settings.file_mode, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.getLevelName(settings.console_level))
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    if settings.suppress_root_logger:
        logging.getLogger().setLevel(logging.getLevelName(settings.third_party_log_level))

    logger.debug("Logging configured: %s", settings)
    return logger


def setup_logging(config_path: Path = Path("config.yaml")) -> logging.Logger:
    """
    Configure the package logger from the ``logging`` section of a config file.

    Args:
        config_path: Path to the configuration YAML file.

    Returns:
        The ``adjranges`` logger.
    """
    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}

    settings = parse_logging_settings(config.get('logging'), source=str(config_path))
    return configure_logging(settings)


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the package logger, or a named logger."""
    return logging.getLogger(name)
