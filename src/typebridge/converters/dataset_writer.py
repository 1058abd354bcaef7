"""Write TRDP data-set description documents.

The output is a single ``data-set-list`` element::

    <data-set-list>
      <data-set name="Pkg_MyStruct" id="1002">
        <element name="x" type="INT32" />
        <element name="samples" array-size="8" type="REAL32" />
      </data-set>
    </data-set-list>
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO
from xml.etree.ElementTree import Element, SubElement, indent, tostring

from typebridge.ir.datasets import DataSet, DataSetList


class DataSetWriter:
    """Serialize a DataSetList to XML.

    Usage:
        writer = DataSetWriter()
        writer.write(data_sets, Path("trdp-datasets.xml"))

    Or for in-memory conversion:
        xml_bytes = writer.write_bytes(data_sets)
    """

    def __init__(self, indentation: str | None = "  ") -> None:
        """Initialize the writer.

        Args:
        ----
            indentation: Indent per nesting level, None for a single line.

        """
        self._indentation = indentation

    def build_tree(self, data_sets: DataSetList) -> Element:
        """Build the ``data-set-list`` element tree."""
        root = Element("data-set-list")
        for data_set in data_sets:
            self._add_data_set(root, data_set)
        if self._indentation:
            indent(root, space=self._indentation)
        return root

    def _add_data_set(self, parent: Element, data_set: DataSet) -> None:
        node = SubElement(parent, "data-set")
        if data_set.name:
            node.set("name", data_set.name)
        node.set("id", data_set.dataset_id)

        for element in data_set.elements:
            child = SubElement(node, "element")
            if element.name:
                child.set("name", element.name)
            if element.array_size:
                child.set("array-size", str(element.array_size))
            if element.type is not None:
                child.set("type", element.type)

    def write_bytes(self, data_sets: DataSetList) -> bytes:
        """Convert data-sets to an XML document without writing to file.

        Returns
        -------
            UTF-8 encoded document including the XML declaration.

        """
        body = tostring(self.build_tree(data_sets), encoding="unicode")
        return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'.encode()

    def write_stream(self, data_sets: DataSetList, stream: BinaryIO | None = None) -> None:
        """Write data-sets to a binary stream (default stdout)."""
        target = stream if stream is not None else sys.stdout.buffer
        target.write(self.write_bytes(data_sets))
        target.flush()

    def write(self, data_sets: DataSetList, output_path: Path | None) -> None:
        """Write data-sets to a file; None or ``-`` writes to stdout.

        Args:
        ----
            data_sets: The compiled data-sets.
            output_path: Output file path. Parent directories will be created.

        """
        if output_path is None or str(output_path) == "-":
            self.write_stream(data_sets)
            return

        # Ensure parent directory exists
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "wb") as f:
            f.write(self.write_bytes(data_sets))
