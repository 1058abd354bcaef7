"""Bounded integer attribute parsing for mapping nodes."""

from __future__ import annotations

import re
from xml.etree.ElementTree import Element

from typebridge.diagnostics.errors import DiagnosticLog, ErrorCodes

DECIMAL = re.compile(r"[0-9]+")


def node_path(node: Element) -> str:
    """Describe a node for diagnostics, e.g. ``struct[@id=12]``."""
    for key in ("id", "name"):
        value = node.get(key)
        if value:
            return f"{node.tag}[@{key}={value}]"
    return node.tag


def int_attribute(
    node: Element,
    attribute: str,
    minimum: int,
    maximum: int,
    diagnostics: DiagnosticLog,
) -> int | None:
    """Read a decimal integer attribute within ``minimum .. maximum``.

    Returns
    -------
        The value, or None (with a warning logged) if the attribute is
        missing, empty, not an integer or out of bounds.

    """
    text = node.get(attribute)
    if not text:
        diagnostics.warning(
            ErrorCodes.W002_MISSING_ATTRIBUTE,
            f"{node.tag}.{attribute} not set.",
            path=node_path(node),
        )
        return None

    # Plain ASCII digits only: no sign, whitespace or underscores.
    value = int(text) if DECIMAL.fullmatch(text) else None

    if value is None or not minimum <= value <= maximum:
        diagnostics.warning(
            ErrorCodes.W001_INVALID_ATTRIBUTE,
            f'{node.tag}.{attribute} = "{text}" is invalid.',
            path=node_path(node),
            suggestion=f"Expected an integer in {minimum}..{maximum}",
        )
        return None

    return value
