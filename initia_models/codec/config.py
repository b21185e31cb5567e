"""
Codec configuration.

Settings are plain dataclass fields and can be loaded from a YAML file:

    reject_unknown_fields: true
    timestamp_precision: milliseconds
    log_level: DEBUG

``timestamp_precision: milliseconds`` is lossy: sub-millisecond digits are
dropped on encode, so a timestamp carrying microseconds no longer decodes
to an equal value. ``auto`` (the default) and ``microseconds`` keep every
digit a ``datetime`` holds.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict

import yaml

from .errors import ConfigurationError


TIMESTAMP_PRECISIONS = ("auto", "milliseconds", "microseconds")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CodecConfig:
    """Process-wide codec settings."""
    reject_unknown_fields: bool = False
    timestamp_precision: str = "auto"
    log_level: str = "WARNING"

    def __post_init__(self):
        if not isinstance(self.reject_unknown_fields, bool):
            raise ConfigurationError(
                f"reject_unknown_fields must be a boolean, got {self.reject_unknown_fields!r}"
            )
        if self.timestamp_precision not in TIMESTAMP_PRECISIONS:
            raise ConfigurationError(
                f"Invalid timestamp_precision: {self.timestamp_precision}. "
                f"Valid values: {list(TIMESTAMP_PRECISIONS)}"
            )
        level = str(self.log_level).upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log_level: {self.log_level}. Valid levels: {list(LOG_LEVELS)}"
            )
        self.log_level = level


_active = CodecConfig()


def get_config() -> CodecConfig:
    """Return the active configuration."""
    return _active


def configure(config: CodecConfig) -> CodecConfig:
    """Install a configuration and apply its log level to the package logger."""
    global _active
    _active = config
    logging.getLogger("initia_models").setLevel(config.log_level)
    return config


def parse_config(yaml_content: str) -> CodecConfig:
    """Parse a configuration from YAML content."""
    data = yaml.safe_load(yaml_content)
    if data is None:
        return CodecConfig()
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a mapping")
    return _parse_config_dict(data)


def load_config(file_path: str) -> CodecConfig:
    """Load a configuration from a YAML file."""
    with open(file_path, 'r') as f:
        return parse_config(f.read())


def _parse_config_dict(data: Dict[str, Any]) -> CodecConfig:
    known = {f.name for f in fields(CodecConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {unknown}")
    return CodecConfig(**data)
