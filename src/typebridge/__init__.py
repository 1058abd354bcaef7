"""typebridge: Map the I/O types of a SCADE model onto TRDP data-sets.

This package provides tools for:
- Reading the type catalogue of a KCG generated mapping.xml
- Resolving the root operator and the types its interface needs
- Compiling those types into flat TRDP data-set descriptions

Quick Start:
    >>> from typebridge.converters import DataSetWriter, read_mapping
    >>> from typebridge.transform import MappingToDataSetTransformer
    >>>
    >>> doc = read_mapping(Path("mapping.xml"))
    >>> data_sets = MappingToDataSetTransformer().transform(doc, ["Pkg::Root"])
    >>> DataSetWriter().write(data_sets, Path("trdp-datasets.xml"))

Modules:
    models: Pydantic configuration model and loader
    ir: Type store, TRDP types and compiled data-sets
    transform: Catalogue scan, operator lookup, reachability and compilation
    converters: Mapping reader and data-set writer
    diagnostics: Issue log shared by all stages
    cli: Command-line interface helpers
"""

__version__ = "0.1.0"
