"""Main mapping to data-set transformer."""

from __future__ import annotations

from collections.abc import Sequence
from xml.etree.ElementTree import Element

from typebridge.diagnostics.errors import DiagnosticLog
from typebridge.ir.datasets import DataSetList
from typebridge.ir.store import TypeStore
from typebridge.models.config import BridgeConfig
from typebridge.transform.compiler import DataSetCompiler
from typebridge.transform.operator_locator import OperatorLocator
from typebridge.transform.reachability import OperatorInterface, ReachabilityAnalyzer
from typebridge.transform.scanner import CatalogueScanner, ScanSummary


class MappingToDataSetTransformer:
    """Transform a KCG mapping document into TRDP data-sets.

    This is the main entry point. It runs the whole batch pipeline:

    1. Scan the model catalogue into a fresh TypeStore
    2. Resolve the operator(s) (given names, or the mapping's root option)
    3. Require the types of their inputs and outputs
    4. Compile the required (or all) structures into data-sets

    Failures along the way are reported to ``diagnostics`` and the
    pipeline carries on with what it has.

    Usage:
        transformer = MappingToDataSetTransformer()
        data_sets = transformer.transform(mapping_root)
    """

    def __init__(
        self,
        config: BridgeConfig | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        """Initialize the transformer.

        Args:
        ----
            config: Bridge configuration, defaults to BridgeConfig().
            diagnostics: Log collecting issues of all stages.

        """
        self.config = config or BridgeConfig()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self.store = TypeStore(self.config, self.diagnostics)
        self.summary: ScanSummary | None = None
        self.interfaces: list[OperatorInterface] = []

    def transform(
        self,
        doc: Element | None,
        operators: Sequence[str] = (),
        include_all: bool = False,
    ) -> DataSetList:
        """Transform a mapping document to data-sets.

        Args:
        ----
            doc: Root of the mapping document.
            operators: Scoped operator names; empty uses the root option.
            include_all: Emit all known data-sets, not only required ones.

        Returns:
        -------
            The compiled data-sets.

        """
        self.summary = CatalogueScanner(self.store, self.diagnostics).scan(doc)

        locator = OperatorLocator(self.config, self.diagnostics)
        analyzer = ReachabilityAnalyzer(self.store, self.diagnostics)
        for name in operators or [None]:
            located = locator.locate_qualified(doc, name)
            if located is None:
                continue
            self.interfaces.append(
                analyzer.require_operator(
                    located.node, located.qualified_name(self.config.scope_separator)
                )
            )

        return DataSetCompiler(self.store, self.diagnostics).compile(include_all=include_all)
