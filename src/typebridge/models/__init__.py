"""Pydantic models for the bridge configuration.

This module contains the configuration schema and its loader.
"""

from typebridge.models.common import HexInt, TRDPTypeName, parse_hex_int
from typebridge.models.config import BridgeConfig
from typebridge.models.loader import ConfigError, load_config, load_yaml_file

__all__ = [
    "BridgeConfig",
    "ConfigError",
    "HexInt",
    "TRDPTypeName",
    "load_config",
    "load_yaml_file",
    "parse_hex_int",
]
