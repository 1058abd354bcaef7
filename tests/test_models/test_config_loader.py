"""Tests for configuration file loading."""

from pathlib import Path

import pytest
from typebridge.ir.types import TRDPType
from typebridge.models import BridgeConfig, ConfigError, load_config, load_yaml_file


class TestLoadYamlFile:
    """Tests for load_yaml_file."""

    def test_load_yaml(self, tmp_path: Path) -> None:
        """Should load a YAML mapping."""
        path = tmp_path / "bridge.yaml"
        path.write_text("dataset_name_length: 20\n")
        assert load_yaml_file(path) == {"dataset_name_length": 20}

    def test_load_json(self, tmp_path: Path) -> None:
        """JSON is valid YAML."""
        path = tmp_path / "bridge.json"
        path.write_text('{"numeric_type_ids": true}')
        assert load_yaml_file(path) == {"numeric_type_ids": True}

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file is an empty configuration."""
        path = tmp_path / "bridge.yml"
        path.write_text("")
        assert load_yaml_file(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Should report missing files."""
        with pytest.raises(ConfigError, match="File not found"):
            load_yaml_file(tmp_path / "missing.yaml")

    def test_directory(self, tmp_path: Path) -> None:
        """Should reject directories."""
        directory = tmp_path / "conf.yaml"
        directory.mkdir()
        with pytest.raises(ConfigError, match="Not a file"):
            load_yaml_file(directory)

    def test_wrong_extension(self, tmp_path: Path) -> None:
        """Should reject unknown file types."""
        path = tmp_path / "bridge.toml"
        path.write_text("a = 1")
        with pytest.raises(ConfigError, match="Unsupported file extension"):
            load_yaml_file(path)

    def test_syntax_error(self, tmp_path: Path) -> None:
        """Should report YAML syntax errors."""
        path = tmp_path / "bridge.yaml"
        path.write_text("not: valid: yaml: [")
        with pytest.raises(ConfigError, match="YAML parsing error"):
            load_yaml_file(path)

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        """The document root must be a mapping."""
        path = tmp_path / "bridge.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected dictionary"):
            load_yaml_file(path)


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_file_gives_defaults(self) -> None:
        """No file means default settings."""
        assert load_config(None) == BridgeConfig()

    def test_load_settings(self, tmp_path: Path) -> None:
        """Should validate the loaded settings."""
        path = tmp_path / "bridge.yaml"
        path.write_text("max_model_id: 0x100\nsize_type_maps_to: UINT32\nname_separator: '.'\n")

        config = load_config(path)
        assert config.max_model_id == 256
        assert config.size_type_maps_to is TRDPType.UINT32
        assert config.name_separator == "."

    def test_invalid_settings(self, tmp_path: Path) -> None:
        """Validation errors become configuration errors naming the setting."""
        path = tmp_path / "bridge.yaml"
        path.write_text("dataset_name_length: -1\nbogus: 1\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        message = str(exc_info.value)
        assert "Invalid configuration" in message
        assert "dataset_name_length" in message
        assert "bogus" in message
        assert exc_info.value.path == path
