"""TRDP primitive types and their SCADE counterparts.

This module defines the closed set of scalar types the TRDP data-set
description knows, and how the predefined SCADE/KCG types map onto them.
"""

from __future__ import annotations

from enum import Enum


class TRDPType(Enum):
    """TRDP primitive data types.

    Values are the numeric type codes used in TRDP data-set descriptions.
    """

    BOOL8 = 1
    CHAR8 = 2
    UTF16 = 3
    INT8 = 4
    INT16 = 5
    INT32 = 6
    INT64 = 7
    UINT8 = 8
    UINT16 = 9
    UINT32 = 10
    UINT64 = 11
    REAL32 = 12
    REAL64 = 13
    TIMEDATE32 = 14
    TIMEDATE48 = 15
    TIMEDATE64 = 16

    @classmethod
    def parse(cls, value: TRDPType | str | int) -> TRDPType:
        """Parse a type given by member, name ("INT32") or code (6)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        text = value.strip()
        if text.isdigit():
            return cls(int(text))
        try:
            return cls[text.upper()]
        except KeyError as e:
            raise ValueError(f"Unknown TRDP type: {value}") from e


# Predefined KCG type names. "size" has no fixed width and maps to the
# configured default instead.
SCADE_BASE_TYPES: dict[str, TRDPType | None] = {
    "bool": TRDPType.BOOL8,
    "char": TRDPType.CHAR8,
    "wchar": TRDPType.UTF16,
    "int8": TRDPType.INT8,
    "int16": TRDPType.INT16,
    "int32": TRDPType.INT32,
    "int64": TRDPType.INT64,
    "uint8": TRDPType.UINT8,
    "uint16": TRDPType.UINT16,
    "uint32": TRDPType.UINT32,
    "uint64": TRDPType.UINT64,
    "float32": TRDPType.REAL32,
    "float64": TRDPType.REAL64,
    "timedate32": TRDPType.TIMEDATE32,
    "timedate48": TRDPType.TIMEDATE48,
    "timedate64": TRDPType.TIMEDATE64,
    "size": None,
}


def map_scade_type(name: str | None, size_maps_to: TRDPType = TRDPType.INT32) -> TRDPType | None:
    """Map a predefined SCADE type name onto its TRDP type.

    Args:
    ----
        name: SCADE type name as found in the mapping (case-insensitive).
        size_maps_to: TRDP type used for the width-less "size" type.

    Returns:
    -------
        The TRDP type, or None if the name is not a known SCADE type.

    """
    if not name:
        return None
    key = name.strip().lower()
    if key not in SCADE_BASE_TYPES:
        return None
    return SCADE_BASE_TYPES[key] or size_maps_to
