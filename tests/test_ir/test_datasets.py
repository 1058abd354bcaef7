"""Tests for compiled data-set records."""

from typebridge.ir import DataSet, DataSetElement, DataSetList


class TestDataSetList:
    """Tests for DataSetList."""

    def test_empty(self) -> None:
        """A new list is empty."""
        data_sets = DataSetList()
        assert data_sets.is_empty
        assert len(data_sets) == 0
        assert list(data_sets) == []

    def test_add_and_get(self) -> None:
        """Data-sets keep insertion order and can be found by id."""
        data_sets = DataSetList()
        first = DataSet(dataset_id="1020", code=1020, model_id=20, name="A")
        second = DataSet(
            dataset_id="1030",
            code=1030,
            model_id=30,
            elements=(DataSetElement(name="x", type="INT32", type_code=6),),
        )
        data_sets.add(first)
        data_sets.add(second)

        assert not data_sets.is_empty
        assert [d.dataset_id for d in data_sets] == ["1020", "1030"]
        assert data_sets.get("1030") is second
        assert data_sets.get("9999") is None

    def test_element_defaults(self) -> None:
        """Elements are scalar and untyped unless stated."""
        element = DataSetElement(name="x", type=None)
        assert element.array_size is None
        assert element.type_code is None
