"""IR model for compiled TRDP data-sets.

These are the flattened, protocol-legal records produced by the data-set
compiler and consumed by the XML writer.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class DataSetElement:
    """One element (member) of a data-set.

    Attributes
    ----------
        name: Field name, if the model gave one.
        type: Resolved TRDP type or data-set id; None for a broken reference.
        type_code: Numeric code of ``type``.
        array_size: Element count if the field is a (one-dimensional) array.

    """

    name: str | None
    type: str | None
    type_code: int | None = None
    array_size: int | None = None


@dataclass(frozen=True)
class DataSet:
    """A TRDP data-set compiled from one model structure."""

    dataset_id: str
    code: int
    model_id: int
    name: str | None = None
    elements: tuple[DataSetElement, ...] = ()


@dataclass
class DataSetList:
    """Ordered list of data-sets, in model identifier order."""

    data_sets: list[DataSet] = field(default_factory=list)

    def add(self, data_set: DataSet) -> None:
        """Append a data-set."""
        self.data_sets.append(data_set)

    def get(self, dataset_id: str) -> DataSet | None:
        """Get a data-set by its id.

        Returns
        -------
            The data-set if found, None otherwise.

        """
        for data_set in self.data_sets:
            if data_set.dataset_id == dataset_id:
                return data_set
        return None

    def __iter__(self) -> Iterator[DataSet]:
        return iter(self.data_sets)

    def __len__(self) -> int:
        return len(self.data_sets)

    @property
    def is_empty(self) -> bool:
        return not self.data_sets
