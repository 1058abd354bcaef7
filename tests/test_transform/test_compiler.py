"""Tests for the data-set compiler."""

from xml.etree.ElementTree import Element

from typebridge.diagnostics import DiagnosticLog, ErrorCodes
from typebridge.ir import DataSetElement
from typebridge.ir.store import AliasRef, FieldsRef, PrimitiveRef, TypeStore
from typebridge.ir.types import TRDPType
from typebridge.transform import CatalogueScanner, DataSetCompiler, ReachabilityAnalyzer


def _struct(store: TypeStore, mid: int, *fields: tuple[int, str, int]) -> None:
    """Define a structure with (field id, name, type id) fields."""
    store.define(mid, FieldsRef(tuple(fid for fid, _, _ in fields)))
    for fid, name, target in fields:
        store.define(fid, AliasRef(target=target), name=name)


class TestSelection:
    """Tests for which structures become data-sets."""

    def test_only_required(self, sample_doc: Element, store: TypeStore) -> None:
        """Only structures reached from the operator are emitted."""
        CatalogueScanner(store).scan(sample_doc)
        ReachabilityAnalyzer(store).require(41)

        data_sets = DataSetCompiler(store).compile()

        assert [d.dataset_id for d in data_sets] == ["1020", "1030"]
        assert [d.name for d in data_sets] == ["Pkg_MyStruct", "Pkg_Outer"]

    def test_include_all(self, sample_doc: Element, store: TypeStore) -> None:
        """All structures with fields are emitted on request."""
        CatalogueScanner(store).scan(sample_doc)

        data_sets = DataSetCompiler(store).compile(include_all=True)

        assert [d.model_id for d in data_sets] == [20, 30, 50]

    def test_nothing_required(self, sample_doc: Element, store: TypeStore) -> None:
        """Without reachability marks nothing is emitted."""
        CatalogueScanner(store).scan(sample_doc)

        assert DataSetCompiler(store).compile().is_empty

    def test_empty_struct_never_emitted(self, store: TypeStore) -> None:
        """Structures without fields are skipped even when required."""
        store.define(2, FieldsRef(()))
        ReachabilityAnalyzer(store).require(2)

        assert DataSetCompiler(store).compile(include_all=True).is_empty

    def test_unnamed_struct(self, store: TypeStore) -> None:
        """Structures without alias are emitted without name."""
        store.define(1, PrimitiveRef(TRDPType.INT16))
        _struct(store, 2, (3, "a", 1))

        (data_set,) = DataSetCompiler(store).compile(include_all=True)
        assert data_set.name is None
        assert data_set.dataset_id == "1002"
        assert data_set.code == 1002


class TestElements:
    """Tests for element type resolution."""

    def test_sample_elements(self, sample_doc: Element, store: TypeStore) -> None:
        """Fields resolve to primitives, arrays and nested data-sets."""
        CatalogueScanner(store).scan(sample_doc)
        data_sets = DataSetCompiler(store).compile(include_all=True)

        assert data_sets.get("1020").elements == (
            DataSetElement(name="x", type="INT32", type_code=6),
            DataSetElement(name="samples", type="REAL64", type_code=13, array_size=8),
        )
        assert data_sets.get("1030").elements == (
            DataSetElement(name="flag", type="BOOL8", type_code=1),
            DataSetElement(name="inner", type="1020", type_code=1020),
        )

    def test_alias_chain(self, store: TypeStore) -> None:
        """Plain aliases are followed to the base type."""
        store.define(1, PrimitiveRef(TRDPType.UINT32))
        store.define(4, AliasRef(target=1), name="Speed")
        store.define(5, AliasRef(target=4), name="WheelSpeed")
        _struct(store, 2, (3, "v", 5))

        (data_set,) = DataSetCompiler(store).compile(include_all=True)
        assert data_set.elements[0] == DataSetElement(name="v", type="UINT32", type_code=10)

    def test_array_of_structs(self, store: TypeStore) -> None:
        """Arrays may hold structures."""
        store.define(1, PrimitiveRef(TRDPType.UINT8))
        _struct(store, 2, (3, "a", 1))
        store.define(4, AliasRef(target=2, size=5))
        _struct(store, 6, (7, "items", 4))

        data_sets = DataSetCompiler(store).compile(include_all=True)
        assert data_sets.get("1006").elements[0] == DataSetElement(
            name="items", type="1002", type_code=1002, array_size=5
        )

    def test_array_of_array(self, store: TypeStore, diagnostics: DiagnosticLog) -> None:
        """Only the outer dimension is kept and the loss is reported."""
        store.define(1, PrimitiveRef(TRDPType.INT32))
        store.define(11, AliasRef(target=1, size=4))
        store.define(12, AliasRef(target=11, size=3))
        _struct(store, 20, (21, "matrix", 12))

        (data_set,) = DataSetCompiler(store).compile(include_all=True)

        assert data_set.elements[0] == DataSetElement(
            name="matrix", type="INT32", type_code=6, array_size=3
        )
        issues = diagnostics.with_code(ErrorCodes.E008_ARRAY_OF_ARRAY)
        assert len(issues) == 1
        assert "Array of array is not mapable in TRDP" in issues[0].message
        assert "[3][4]" in issues[0].message
        assert issues[0].context["dimensions"] == (3, 4)

    def test_undefined_field_type(self, store: TypeStore, diagnostics: DiagnosticLog) -> None:
        """Broken references leave the element untyped."""
        _struct(store, 2, (3, "ghost", 99))

        (data_set,) = DataSetCompiler(store).compile(include_all=True)

        assert data_set.elements[0] == DataSetElement(name="ghost", type=None)
        issues = diagnostics.with_code(ErrorCodes.E007_UNRESOLVED_REFERENCE)
        assert len(issues) == 1
        assert issues[0].context["model_id"] == 99

    def test_undefined_field(self, store: TypeStore, diagnostics: DiagnosticLog) -> None:
        """A structure listing an undefined field keeps an empty element."""
        store.define(2, FieldsRef((3,)))

        (data_set,) = DataSetCompiler(store).compile(include_all=True)

        assert data_set.elements == (DataSetElement(name=None, type=None),)
        assert diagnostics.with_code(ErrorCodes.E007_UNRESOLVED_REFERENCE)

    def test_alias_cycle(self, store: TypeStore, diagnostics: DiagnosticLog) -> None:
        """Alias cycles terminate with an untyped element."""
        store.define(4, AliasRef(target=5), name="A")
        store.define(5, AliasRef(target=4), name="B")
        _struct(store, 2, (3, "loop", 4))

        (data_set,) = DataSetCompiler(store).compile(include_all=True)

        assert data_set.elements[0].type is None
        assert diagnostics.with_code(ErrorCodes.E009_REFERENCE_CYCLE)

    def test_self_alias(self, store: TypeStore, diagnostics: DiagnosticLog) -> None:
        """An alias of itself is reported as self reference."""
        store.define(4, AliasRef(target=4), name="Me")
        _struct(store, 2, (3, "me", 4))

        (data_set,) = DataSetCompiler(store).compile(include_all=True)

        assert data_set.elements[0].type is None
        assert diagnostics.with_code(ErrorCodes.E003_SELF_REFERENCE)
