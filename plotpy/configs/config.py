"""Renderer configuration for plotpy figures."""

import configparser
import json
import os
from dataclasses import asdict, dataclass, fields
from typing import Any

import yaml

from plotpy.configs.constants import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PYTHON_COMMAND,
    LOG_EXTENSION,
    RENDERER_SECTION,
    SCRIPT_EXTENSION,
)
from plotpy.configs.errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from plotpy.utils.logging_config import LOG_LEVELS


@dataclass
class RendererConfig:
    """Settings of the external interpreter that renders figures."""

    python_command: str = DEFAULT_PYTHON_COMMAND
    encoding: str = DEFAULT_ENCODING
    script_extension: str = SCRIPT_EXTENSION
    log_extension: str = LOG_EXTENSION
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """Validate field values."""
        for config_field in fields(self):
            value = getattr(self, config_field.name)
            if not isinstance(value, str) or not value:
                raise ConfigValidationError(
                    f"'{config_field.name}' must be a non-empty string, got {value!r}"
                )
        for name in ("script_extension", "log_extension"):
            if not getattr(self, name).startswith("."):
                raise ConfigValidationError(f"'{name}' must start with a dot")
        if self.script_extension == self.log_extension:
            raise ConfigValidationError("Script and log extensions must differ")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigValidationError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> "RendererConfig":
        """Create a configuration from a dictionary, rejecting unknown keys.

        Args:
            values: Mapping of field names to values

        Returns:
            Validated configuration object

        Raises:
            ConfigValidationError: If a key is unknown or a value is invalid
        """
        known = {config_field.name for config_field in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigValidationError(f"Unknown renderer options: {', '.join(unknown)}")
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return asdict(self)


def load_renderer_config(path: str) -> RendererConfig:
    """Load the renderer configuration from an INI, JSON or YAML file.

    INI files keep the options in a ``[renderer]`` section; JSON and YAML
    files keep them under a ``renderer`` key.

    Args:
        path: Path to configuration file

    Returns:
        Validated configuration object

    Raises:
        ConfigFileNotFoundError: If configuration file doesn't exist
        ConfigParseError: If the file cannot be parsed or the format is unsupported
        ConfigValidationError: If the options are invalid
    """
    if not os.path.exists(path):
        raise ConfigFileNotFoundError(f"Configuration file not found: {path}")

    if path.endswith(".ini"):
        section = _load_ini(path)
    elif path.endswith(".json"):
        section = _load_json(path)
    elif path.endswith((".yaml", ".yml")):
        section = _load_yaml(path)
    else:
        raise ConfigParseError(f"Unsupported configuration file format: {path}")

    return RendererConfig.from_dict(section)


def _load_ini(path: str) -> dict[str, Any]:
    """Load the renderer section of an INI file."""
    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error as error:
        raise ConfigParseError(f"Cannot parse {path}: {error}") from error

    if not parser.has_section(RENDERER_SECTION):
        return {}
    return dict(parser[RENDERER_SECTION].items())


def _load_json(path: str) -> dict[str, Any]:
    """Load the renderer mapping of a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw_config = json.load(f)
        except json.JSONDecodeError as error:
            raise ConfigParseError(f"Cannot parse {path}: {error}") from error
    return _renderer_section(raw_config, path)


def _load_yaml(path: str) -> dict[str, Any]:
    """Load the renderer mapping of a YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as error:
            raise ConfigParseError(f"Cannot parse {path}: {error}") from error
    return _renderer_section(raw_config, path)


def _renderer_section(raw_config: Any, path: str) -> dict[str, Any]:
    if raw_config is None:
        return {}
    if not isinstance(raw_config, dict):
        raise ConfigParseError(f"Top level of {path} must be a mapping")
    section = raw_config.get(RENDERER_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigParseError(f"'{RENDERER_SECTION}' in {path} must be a mapping")
    return section
