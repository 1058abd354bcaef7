"""Common types and validators for Pydantic models."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from typebridge.ir.types import TRDPType


def parse_hex_int(value: Any) -> int:
    """Parse a value that can be either an integer or a hex string.

    Args:
    ----
        value: Input value - can be int, str (hex format like "0x4000"), or None

    Returns:
    -------
        Parsed integer value

    Raises:
    ------
        ValueError: If the value cannot be parsed as an integer

    Examples:
    --------
        >>> parse_hex_int(16384)
        16384
        >>> parse_hex_int("0x4000")
        16384
        >>> parse_hex_int("16384")  # Decimal string
        16384

    """
    if value is None:
        raise ValueError("Value cannot be None")

    if isinstance(value, bool):
        raise ValueError(f"Cannot parse bool as integer: {value}")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        value = value.strip()
        if value.lower().startswith("0x"):
            try:
                return int(value, 16)
            except ValueError as e:
                raise ValueError(f"Invalid hex string: {value}") from e
        else:
            try:
                return int(value)
            except ValueError as e:
                raise ValueError(f"Invalid integer string: {value}") from e

    raise ValueError(f"Cannot parse {type(value).__name__} as integer: {value}")


def serialize_hex_int(value: int) -> str:
    """Serialize an integer to a hex string for YAML output."""
    return f"0x{value:X}"


# HexInt type that accepts both "0x4000" and 16384
HexInt = Annotated[
    int,
    BeforeValidator(parse_hex_int),
    PlainSerializer(serialize_hex_int, return_type=str),
]


def parse_trdp_type(value: Any) -> TRDPType:
    """Parse a TRDP type given by name ("INT32") or numeric code (6)."""
    if isinstance(value, (TRDPType, str, int)) and not isinstance(value, bool):
        return TRDPType.parse(value)
    raise ValueError(f"Cannot parse {type(value).__name__} as TRDP type: {value}")


# TRDP type accepted by name or code, serialized by name
TRDPTypeName = Annotated[
    TRDPType,
    BeforeValidator(parse_trdp_type),
    PlainSerializer(lambda t: t.name, return_type=str),
]
