"""Intermediate Representation (IR) for the SCADE to TRDP bridge.

The IR has two halves:

1. The type store (``typebridge.ir.store``): one entry per model id,
   filled by the catalogue scanner and marked by the reachability pass
2. The compiled data-sets (``typebridge.ir.datasets``): flat records
   ready to be written as a TRDP data-set list

The store is not re-exported here since it depends on the configuration
models, which in turn depend on the primitive types below.
"""

from typebridge.ir.datasets import DataSet, DataSetElement, DataSetList
from typebridge.ir.naming import stitch_names
from typebridge.ir.types import SCADE_BASE_TYPES, TRDPType, map_scade_type

__all__ = [
    # Types
    "SCADE_BASE_TYPES",
    "TRDPType",
    "map_scade_type",
    "stitch_names",
    # Data-sets
    "DataSet",
    "DataSetElement",
    "DataSetList",
]
