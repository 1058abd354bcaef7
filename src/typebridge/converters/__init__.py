"""Converters for reading mappings and writing data-set documents.

This package provides both ends of the conversion pipeline:

Reading:
    read_mapping: Parse a KCG mapping.xml (file or stdin) with defusedxml
    mapping_section: Find the ``config`` or ``model`` section of a mapping

Writing:
    DataSetWriter: Serialize a DataSetList as a TRDP ``data-set-list``

Example:
-------
    >>> from typebridge.converters import DataSetWriter, read_mapping
    >>> from typebridge.transform import MappingToDataSetTransformer
    >>>
    >>> doc = read_mapping(Path("mapping.xml"))
    >>> data_sets = MappingToDataSetTransformer().transform(doc)
    >>>
    >>> # Write to a file
    >>> DataSetWriter().write(data_sets, Path("trdp-datasets.xml"))
    >>>
    >>> # Get bytes without writing to file
    >>> xml_bytes = DataSetWriter().write_bytes(data_sets)

"""

from typebridge.converters.dataset_writer import DataSetWriter
from typebridge.converters.mapping_reader import (
    MappingReaderError,
    mapping_section,
    read_mapping,
    read_mapping_bytes,
)

__all__ = [
    "DataSetWriter",
    "MappingReaderError",
    "mapping_section",
    "read_mapping",
    "read_mapping_bytes",
]
