"""Read KCG ``mapping.xml`` files into an element tree.

The mapping is untrusted generator output, so it is parsed with
defusedxml. Everything downstream only uses the ElementTree interface.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO
from xml.etree.ElementTree import Element, ParseError

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

MAPPING_TAG = "mapping"


class MappingReaderError(Exception):
    """Error during mapping file loading."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize MappingReaderError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the file that caused the error.

        """
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


def read_mapping_bytes(data: bytes | str, path: Path | None = None) -> Element:
    """Parse mapping document text.

    Args:
    ----
        data: The document text.
        path: Source path, for error messages only.

    Returns:
    -------
        Root element of the document.

    Raises:
    ------
        MappingReaderError: If the text is not well-formed XML.

    """
    if not data or not data.strip():
        raise MappingReaderError("File is empty", path)

    try:
        return ET.fromstring(data)
    except ParseError as e:
        raise MappingReaderError(f"Does not contain valid XML: {e}", path) from e
    except DefusedXmlException as e:
        raise MappingReaderError(f"Refusing unsafe XML: {e}", path) from e


def read_mapping(path: Path | None = None, stream: BinaryIO | None = None) -> Element:
    """Read a mapping document from a file or a stream.

    Args:
    ----
        path: Mapping file; None or ``-`` reads ``stream`` instead.
        stream: Binary stream to read when no path is given (default stdin).

    Raises:
    ------
        MappingReaderError: If the input cannot be read or parsed.

    """
    if path is None or str(path) == "-":
        source = stream if stream is not None else sys.stdin.buffer
        try:
            data = source.read()
        except OSError as e:
            raise MappingReaderError(f"Read error on <stdin>: {e}") from e
        return read_mapping_bytes(data)

    if not path.exists():
        raise MappingReaderError(f"File not found: {path}", path)

    if not path.is_file():
        raise MappingReaderError(f"Not a file: {path}", path)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise MappingReaderError(f"Could not open for reading: {e}", path) from e

    return read_mapping_bytes(data, path)


def mapping_section(doc: Element | None, tag: str) -> Element | None:
    """Find a top-level section (``config`` or ``model``) of a mapping.

    Accepts either the ``mapping`` element itself or a wrapper holding
    it as a direct child.
    """
    if doc is None:
        return None
    mapping = doc if doc.tag == MAPPING_TAG else doc.find(MAPPING_TAG)
    if mapping is None:
        return None
    return mapping.find(tag)
