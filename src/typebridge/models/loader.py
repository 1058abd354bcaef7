"""YAML/JSON configuration file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from typebridge.models.config import BridgeConfig


class ConfigError(Exception):
    """Error during configuration file loading."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize ConfigError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the file that caused the error.

        """
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML or JSON file and return the raw dictionary.

    An empty file yields an empty dictionary, so that every setting
    falls back to its default.

    Raises:
    ------
        ConfigError: If the file cannot be loaded or parsed.

    """
    if not path.exists():
        raise ConfigError(f"File not found: {path}", path)

    if not path.is_file():
        raise ConfigError(f"Not a file: {path}", path)

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise ConfigError(
            f"Unsupported file extension: {suffix}. Use .yaml, .yml, or .json",
            path,
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parsing error: {e}", path) from e
    except OSError as e:
        raise ConfigError(f"File read error: {e}", path) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected dictionary at root level, got {type(data).__name__}",
            path,
        )

    return data


def load_config(path: Path | None) -> BridgeConfig:
    """Load and validate a bridge configuration.

    Args:
    ----
        path: Path to the configuration file, or None for defaults.

    Returns:
    -------
        Validated BridgeConfig instance.

    Raises:
    ------
        ConfigError: If the file cannot be loaded or holds invalid settings.

    """
    if path is None:
        return BridgeConfig()

    data = load_yaml_file(path)

    try:
        return BridgeConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(x) for x in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}", path) from e
