"""Compile required model structures into flat TRDP data-sets."""

from __future__ import annotations

from typebridge.diagnostics.errors import DiagnosticLog, ErrorCodes
from typebridge.ir.datasets import DataSet, DataSetElement, DataSetList
from typebridge.ir.store import AliasRef, FieldsRef, TypeEntry, TypeStore


class DataSetCompiler:
    """Flatten the type store into a DataSetList.

    Every structure with at least one field becomes a data-set, either
    when it was required by the operator or when all known data-sets are
    requested. Each field becomes one element whose type is found by
    following aliases and arrays down to a primitive or another
    structure. TRDP knows a single array dimension only.

    Usage:
        compiler = DataSetCompiler(store)
        data_sets = compiler.compile(include_all=False)
    """

    def __init__(self, store: TypeStore, diagnostics: DiagnosticLog | None = None) -> None:
        self.store = store
        self.diagnostics = diagnostics if diagnostics is not None else store.diagnostics

    def compile(self, include_all: bool = False) -> DataSetList:
        """Compile data-sets in model identifier order.

        Args:
        ----
            include_all: Emit every known structure, not only required ones.

        Returns:
        -------
            The compiled data-sets (possibly empty).

        """
        data_sets = DataSetList()
        for entry in self.store.entries():
            reference = entry.reference
            if not isinstance(reference, FieldsRef) or reference.count == 0:
                continue
            if not include_all and entry.ref_count <= 0:
                continue

            elements = tuple(
                self._compile_element(entry, field_id) for field_id in reference.fields
            )
            data_sets.add(
                DataSet(
                    dataset_id=entry.dataset_id,
                    code=entry.dataset_code,
                    model_id=entry.model_id,
                    name=entry.name,
                    elements=elements,
                )
            )
        return data_sets

    def _compile_element(self, data_set: TypeEntry, field_id: int) -> DataSetElement:
        """Resolve one structure field to its element type and array size."""
        field = self.store.get(field_id)
        if field is None:
            self._unresolved(data_set, None, field_id)
            return DataSetElement(name=None, type=None)

        current = field
        array: TypeEntry | None = None
        seen = {field_id}
        while isinstance(current.reference, AliasRef):
            target_id = current.reference.target
            target = self.store.get(target_id)
            if target is None:
                self._unresolved(data_set, field, target_id)
                return self._element(field, None, array)
            if target_id in seen:
                self._cycle(data_set, field, current.model_id, target_id)
                return self._element(field, None, array)
            seen.add(target_id)

            if target.is_array:
                if array is None:
                    array = target
                else:
                    self.diagnostics.error(
                        ErrorCodes.E008_ARRAY_OF_ARRAY,
                        "Array of array is not mapable in TRDP. Output may be incomplete. "
                        f"Check (DS={data_set.dataset_id}) {data_set.name}->{field.name}"
                        f"[{array.size}][{target.size}]",
                        path=self._path(data_set, field),
                        suggestion="Wrap the inner array in a structure",
                        dimensions=(array.size, target.size),
                    )
            current = target

        return self._element(field, current, array)

    @staticmethod
    def _element(
        field: TypeEntry, base: TypeEntry | None, array: TypeEntry | None
    ) -> DataSetElement:
        return DataSetElement(
            name=field.name,
            type=base.dataset_id if base else None,
            type_code=base.dataset_code if base else None,
            array_size=array.size if array else None,
        )

    @staticmethod
    def _path(data_set: TypeEntry, field: TypeEntry | None) -> str:
        parts = [f"data-set[@id={data_set.dataset_id}]"]
        if field is not None:
            parts.append(f"element[@name={field.name}]")
        return "/".join(parts)

    def _unresolved(self, data_set: TypeEntry, field: TypeEntry | None, model_id: int) -> None:
        self.diagnostics.error(
            ErrorCodes.E007_UNRESOLVED_REFERENCE,
            f"(DS={data_set.dataset_id}) {data_set.name}: reference to undefined "
            f"model id={model_id}, element type left empty.",
            path=self._path(data_set, field),
            model_id=model_id,
        )

    def _cycle(
        self, data_set: TypeEntry, field: TypeEntry, source_id: int, target_id: int
    ) -> None:
        code = ErrorCodes.E009_REFERENCE_CYCLE
        if source_id == target_id:
            code = ErrorCodes.E003_SELF_REFERENCE
        self.diagnostics.error(
            code,
            f"(DS={data_set.dataset_id}) {data_set.name}->{field.name}: "
            f"mid={target_id} is reached again through its own aliases.",
            path=self._path(data_set, field),
            model_id=target_id,
        )
