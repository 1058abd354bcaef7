"""Catalogue scanner: fills the type store from a KCG mapping.

The ``model`` section of a mapping lists its types as flat, id-indexed
declarations::

    <predefType id="1" name="int32"/>                      mapping to base types
    <array id="5" baseType="1" size="8"/>                  directly below <model>
    <struct id="2"> <field id="3" name="x" type="1"/> </struct>
    <type id="4" name="MyStruct" type="2"/>                naming of existing type
    <package name="Pkg"> <type .../> <package .../> </package>

Declarations may reference each other in any order; nothing is resolved
while scanning.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.etree.ElementTree import Element

from typebridge.converters.mapping_reader import mapping_section
from typebridge.diagnostics.errors import DiagnosticLog, ErrorCodes
from typebridge.ir.naming import stitch_names
from typebridge.ir.store import AliasRef, FieldsRef, PrimitiveRef, TypeStore
from typebridge.ir.types import map_scade_type
from typebridge.transform.attributes import int_attribute, node_path


@dataclass
class ScanSummary:
    """Counts of the declarations successfully entered into the store."""

    primitives: int = 0
    arrays: int = 0
    structs: int = 0
    type_refs: int = 0
    named: int = 0
    packages: int = 0


class CatalogueScanner:
    """Populate a TypeStore from the ``model`` section of a mapping.

    Usage:
        scanner = CatalogueScanner(store)
        summary = scanner.scan(mapping_root)
    """

    def __init__(self, store: TypeStore, diagnostics: DiagnosticLog | None = None) -> None:
        """Initialize the scanner.

        Args:
        ----
            store: The store to fill; it also provides the configuration.
            diagnostics: Log for skipped declarations, defaults to the store's.

        """
        self.store = store
        self.config = store.config
        self.diagnostics = diagnostics if diagnostics is not None else store.diagnostics

    def scan(self, doc: Element | None) -> ScanSummary:
        """Scan all declarations of the mapping's model section."""
        summary = ScanSummary()
        model = mapping_section(doc, "model")
        if model is None:
            self.diagnostics.warning(
                ErrorCodes.W004_MISSING_SECTION,
                "Mapping has no <model> section, no types known.",
                path="mapping/model",
            )
            return summary

        summary.primitives = self._scan_primitives(model)
        summary.arrays = self._scan_arrays(model)
        summary.structs = self._scan_structs(model)

        defined, named = self._scan_types(model, prefix=None)
        summary.type_refs += defined
        summary.named += named
        self._scan_packages(model, None, summary)

        self.diagnostics.info(
            ErrorCodes.I003_CATALOGUE_SUMMARY,
            f"Found {summary.arrays} arrays, {summary.structs} structs, "
            f"{summary.type_refs} type instantiations.",
            primitives=summary.primitives,
            named=summary.named,
            packages=summary.packages,
        )
        return summary

    def _model_id(self, node: Element, attribute: str = "id") -> int | None:
        return int_attribute(node, attribute, 1, self.store.capacity - 1, self.diagnostics)

    def _scan_primitives(self, model: Element) -> int:
        count = 0
        for node in model.findall("predefType"):
            mid = self._model_id(node)
            if mid is None:
                continue

            scade_name = node.get("name")
            trdp_type = map_scade_type(scade_name, self.config.size_type_maps_to)
            if trdp_type is None:
                self.diagnostics.critical(
                    ErrorCodes.E004_UNKNOWN_PRIMITIVE,
                    f'Unknown Scade predef type definition ("{scade_name}").',
                    path=node_path(node),
                    model_id=mid,
                )
                continue

            count += self.store.define(mid, PrimitiveRef(trdp_type))
        return count

    def _scan_arrays(self, model: Element) -> int:
        count = 0
        for node in model.findall("array"):
            mid = self._model_id(node)
            base = mid is not None and self._model_id(node, "baseType")
            size = base and int_attribute(
                node, "size", 1, self.config.max_array_size, self.diagnostics
            )
            if mid is None or not base or not size:
                continue

            count += self.store.define(mid, AliasRef(target=base, size=size))
        return count

    def _scan_structs(self, model: Element) -> int:
        count = 0
        for node in model.findall("struct"):
            mid = self._model_id(node)
            if mid is None:
                continue

            fields: list[int] = []
            for field_node in node.findall("field"):
                fmid = self._model_id(field_node)
                target = fmid is not None and self._model_id(field_node, "type")
                if fmid is None or not target:
                    continue
                if self.store.define(fmid, AliasRef(target=target), name=field_node.get("name")):
                    fields.append(fmid)

            # The data-set name is inherited later from a <type> naming this struct.
            count += self.store.define(mid, FieldsRef(tuple(fields)))
        return count

    def _scan_types(self, parent: Element, prefix: str | None) -> tuple[int, int]:
        """Scan the ``type`` declarations directly below ``parent``.

        Returns
        -------
            Number of aliases defined and number of structures they named.

        """
        defined = named = 0
        for node in parent.findall("type"):
            mid = self._model_id(node)
            target = mid is not None and self._model_id(node, "type")
            if mid is None or not target:
                continue

            name = node.get("name")
            if not self.store.define(mid, AliasRef(target=target), name=name):
                continue
            defined += 1
            named += self.store.propagate_name(target, name, prefix)
        return defined, named

    def _scan_packages(self, parent: Element, prefix: str | None, summary: ScanSummary) -> None:
        """Walk nested packages depth-first, naming types by package path."""
        for package in parent.findall("package"):
            package_prefix = stitch_names(prefix, package.get("name"), self.config.name_separator)
            summary.packages += 1

            defined, named = self._scan_types(package, package_prefix)
            summary.type_refs += defined
            summary.named += named
            self._scan_packages(package, package_prefix, summary)
