"""Unit tests for plotpy.configs.config module."""

import json
from pathlib import Path

import pytest
import yaml

from plotpy.configs.config import RendererConfig, load_renderer_config
from plotpy.configs.errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)


class TestRendererConfig:
    """Tests for RendererConfig class."""

    def test_defaults(self) -> None:
        """Test default renderer settings."""
        # Arrange & Act
        config = RendererConfig()

        # Assert
        assert config.python_command == "python3"
        assert config.encoding == "utf-8"
        assert config.script_extension == ".py"
        assert config.log_extension == ".log"
        assert config.log_level == "INFO"

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"python_command": ""}, "non-empty string"),
            ({"encoding": 8}, "non-empty string"),
            ({"script_extension": "py"}, "must start with a dot"),
            ({"log_extension": ".py"}, "must differ"),
            ({"log_level": "LOUD"}, "Unknown log level"),
        ],
    )
    def test_invalid_values_raise_validation_error(self, overrides: dict, message: str) -> None:
        """Test field validation."""
        # Act & Assert
        with pytest.raises(ConfigValidationError, match=message):
            RendererConfig(**overrides)

    def test_from_dict_with_unknown_key_raises_validation_error(self) -> None:
        """Test unknown options are rejected."""
        # Act & Assert
        with pytest.raises(ConfigValidationError, match="Unknown renderer options: dpi"):
            RendererConfig.from_dict({"dpi": "300"})

    def test_to_dict_round_trips_through_from_dict(self) -> None:
        """Test dictionary conversion keeps every field."""
        # Arrange
        config = RendererConfig(python_command="/usr/bin/python3", log_level="DEBUG")

        # Act
        result = RendererConfig.from_dict(config.to_dict())

        # Assert
        assert result == config


class TestLoadRendererConfig:
    """Tests for load_renderer_config function."""

    def test_load_ini_reads_renderer_section(self, tmp_path: Path) -> None:
        """Test INI files."""
        # Arrange
        path = tmp_path / "plotpy.ini"
        path.write_text("[renderer]\npython_command = python3.11\nlog_level = DEBUG\n", encoding="utf-8")

        # Act
        config = load_renderer_config(str(path))

        # Assert
        assert config.python_command == "python3.11"
        assert config.log_level == "DEBUG"
        assert config.encoding == "utf-8"

    def test_load_ini_without_section_returns_defaults(self, tmp_path: Path) -> None:
        """Test a missing section keeps the defaults."""
        # Arrange
        path = tmp_path / "plotpy.ini"
        path.write_text("[other]\nkey = value\n", encoding="utf-8")

        # Act & Assert
        assert load_renderer_config(str(path)) == RendererConfig()

    def test_load_json_reads_renderer_key(self, tmp_path: Path) -> None:
        """Test JSON files."""
        # Arrange
        path = tmp_path / "plotpy.json"
        path.write_text(json.dumps({"renderer": {"log_extension": ".txt"}}), encoding="utf-8")

        # Act
        config = load_renderer_config(str(path))

        # Assert
        assert config.log_extension == ".txt"

    def test_load_yaml_reads_renderer_key(self, tmp_path: Path) -> None:
        """Test YAML files."""
        # Arrange
        path = tmp_path / "plotpy.yml"
        path.write_text(yaml.safe_dump({"renderer": {"python_command": "py"}}), encoding="utf-8")

        # Act
        config = load_renderer_config(str(path))

        # Assert
        assert config.python_command == "py"

    def test_load_empty_yaml_returns_defaults(self, tmp_path: Path) -> None:
        """Test an empty YAML document keeps the defaults."""
        # Arrange
        path = tmp_path / "plotpy.yaml"
        path.write_text("", encoding="utf-8")

        # Act & Assert
        assert load_renderer_config(str(path)) == RendererConfig()

    def test_load_missing_file_raises_not_found(self, tmp_path: Path) -> None:
        """Test a missing file."""
        # Act & Assert
        with pytest.raises(ConfigFileNotFoundError):
            load_renderer_config(str(tmp_path / "missing.yml"))

    def test_load_unsupported_format_raises_parse_error(self, tmp_path: Path) -> None:
        """Test an unknown extension."""
        # Arrange
        path = tmp_path / "plotpy.toml"
        path.write_text("", encoding="utf-8")

        # Act & Assert
        with pytest.raises(ConfigParseError, match="Unsupported"):
            load_renderer_config(str(path))

    @pytest.mark.parametrize(
        "filename,content",
        [
            ("bad.json", "{not json"),
            ("bad.yml", "renderer: [unclosed"),
            ("bad.ini", "no section header\n"),
            ("list.json", "[1, 2]"),
            ("scalar.yml", "renderer: python3\n"),
        ],
    )
    def test_load_malformed_file_raises_parse_error(
        self, tmp_path: Path, filename: str, content: str
    ) -> None:
        """Test syntax errors and wrong structure."""
        # Arrange
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")

        # Act & Assert
        with pytest.raises(ConfigParseError):
            load_renderer_config(str(path))

    def test_config_errors_share_base_class(self) -> None:
        """Test every config error is a ConfigError."""
        # Assert
        for error_class in (ConfigFileNotFoundError, ConfigParseError, ConfigValidationError):
            assert issubclass(error_class, ConfigError)
