"""Mapping to data-set transformation module.

This module turns a parsed KCG mapping document into TRDP data-sets.

The transformation process:
    1. Scan predefined types, arrays, structs and named types into a TypeStore
    2. Propagate package-qualified names from named types to structs
    3. Locate the root operator in the package hierarchy
    4. Mark every type reachable from its inputs and outputs as required
    5. Compile required structs into flat data-sets

Primary Class:
    MappingToDataSetTransformer: Main transformer class

Example:
-------
    >>> from typebridge.converters import read_mapping
    >>> from typebridge.transform import MappingToDataSetTransformer
    >>>
    >>> doc = read_mapping(Path("mapping.xml"))
    >>> transformer = MappingToDataSetTransformer()
    >>> data_sets = transformer.transform(doc)
    >>>
    >>> print(f"Data-sets: {len(data_sets)}")
    >>> print(f"Issues: {len(transformer.diagnostics.issues)}")

"""

from typebridge.transform.compiler import DataSetCompiler
from typebridge.transform.operator_locator import LocatedOperator, OperatorLocator
from typebridge.transform.reachability import (
    OperatorInterface,
    OperatorParameter,
    ReachabilityAnalyzer,
)
from typebridge.transform.scanner import CatalogueScanner, ScanSummary
from typebridge.transform.transformer import MappingToDataSetTransformer

__all__ = [
    "CatalogueScanner",
    "DataSetCompiler",
    "LocatedOperator",
    "MappingToDataSetTransformer",
    "OperatorInterface",
    "OperatorLocator",
    "OperatorParameter",
    "ReachabilityAnalyzer",
    "ScanSummary",
]
