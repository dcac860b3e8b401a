"""Configuration of the plotpy renderer."""

from plotpy.configs.config import RendererConfig, load_renderer_config
from plotpy.configs.errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)

__all__ = [
    "RendererConfig",
    "load_renderer_config",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]
