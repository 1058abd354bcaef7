"""Type store: the ID-indexed catalogue of model types.

Every model identifier of a KCG mapping owns at most one slot in the
store. Slots are created once while scanning and never removed; only
their reference count and (for structures) their name change later.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from typebridge.diagnostics.errors import DiagnosticLog, ErrorCodes
from typebridge.ir.naming import stitch_names
from typebridge.ir.types import TRDPType
from typebridge.models.config import BridgeConfig


@dataclass(frozen=True)
class PrimitiveRef:
    """Leaf entry standing for a TRDP scalar type."""

    trdp_type: TRDPType


@dataclass(frozen=True)
class AliasRef:
    """Entry that is the same as, or an array of, another entry.

    Used for arrays (``size`` > 0), named type aliases and structure
    fields (``size`` == 0).
    """

    target: int
    size: int = 0

    @property
    def is_array(self) -> bool:
        """True if this alias declares an array."""
        return self.size > 0


@dataclass(frozen=True)
class FieldsRef:
    """Structure entry owning an ordered run of field entries."""

    fields: tuple[int, ...] = ()

    @property
    def count(self) -> int:
        """Number of fields."""
        return len(self.fields)


TypeRef = PrimitiveRef | AliasRef | FieldsRef


@dataclass
class TypeEntry:
    """One model type.

    Attributes
    ----------
        model_id: The model identifier of this entry.
        dataset_id: TRDP type/data-set id as written to the output.
        dataset_code: Numeric TRDP type code or synthesized data-set code.
        reference: What kind of type this is (primitive, alias, structure).
        name: Display name; field and alias names, or a propagated data-set name.
        ref_count: How often the entry was reached from an operator interface.

    """

    model_id: int
    dataset_id: str
    dataset_code: int
    reference: TypeRef
    name: str | None = None
    ref_count: int = field(default=0, compare=False)

    @property
    def size(self) -> int:
        """Array element count for arrays, field count for structures, else 0."""
        if isinstance(self.reference, AliasRef):
            return self.reference.size
        if isinstance(self.reference, FieldsRef):
            return self.reference.count
        return 0

    @property
    def is_primitive(self) -> bool:
        return isinstance(self.reference, PrimitiveRef)

    @property
    def is_alias(self) -> bool:
        return isinstance(self.reference, AliasRef)

    @property
    def is_array(self) -> bool:
        return isinstance(self.reference, AliasRef) and self.reference.is_array

    @property
    def is_struct(self) -> bool:
        return isinstance(self.reference, FieldsRef)


class TypeStore:
    """Dense arena of type entries indexed by model identifier.

    Identifiers are small, dense and assigned by the code generator, so
    the store is a plain list with one optional slot per identifier in
    ``1 .. config.max_model_id - 1``. An empty slot means "not defined".
    """

    def __init__(
        self,
        config: BridgeConfig | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
        ----
            config: Bridge configuration (identifier bound, naming rules).
            diagnostics: Log receiving definition conflicts.

        """
        self.config = config or BridgeConfig()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self._slots: list[TypeEntry | None] = [None] * self.config.max_model_id
        self._defined = 0

    @property
    def capacity(self) -> int:
        """Exclusive upper bound of valid identifiers."""
        return len(self._slots)

    def in_range(self, model_id: int) -> bool:
        """Check if an identifier may be stored at all."""
        return 0 < model_id < self.capacity

    def get(self, model_id: int) -> TypeEntry | None:
        """Get the entry of an identifier, None if undefined or out of range."""
        if not self.in_range(model_id):
            return None
        return self._slots[model_id]

    def __contains__(self, model_id: object) -> bool:
        return isinstance(model_id, int) and self.get(model_id) is not None

    def __len__(self) -> int:
        return self._defined

    def entries(self) -> Iterator[TypeEntry]:
        """Iterate over all defined entries in identifier order."""
        return (entry for entry in self._slots if entry is not None)

    def define(self, model_id: int, reference: TypeRef, name: str | None = None) -> bool:
        """Create the entry for an identifier.

        Args:
        ----
            model_id: Identifier of the new entry.
            reference: Primitive, alias/array or structure variant.
            name: Optional display name (field or alias name).

        Returns:
        -------
            True if the entry was created. False if the identifier is out of
            range or already defined; the first definition is kept.

        """
        if not self.in_range(model_id):
            self.diagnostics.error(
                ErrorCodes.E001_ID_OUT_OF_RANGE,
                f"Model id={model_id} is off scope (name={name!r}, {reference}).",
                path=f"model[@id={model_id}]",
                model_id=model_id,
            )
            return False

        existing = self._slots[model_id]
        if existing is not None:
            self.diagnostics.critical(
                ErrorCodes.E002_DUPLICATE_ID,
                f"Model id={model_id} not defined again.",
                path=f"model[@id={model_id}]",
                suggestion="Each model id may only be declared once",
                model_id=model_id,
                kept=existing.reference,
                rejected=reference,
            )
            return False

        if isinstance(reference, PrimitiveRef):
            entry = TypeEntry(
                model_id=model_id,
                dataset_id=self.config.primitive_id(reference.trdp_type),
                dataset_code=reference.trdp_type.value,
                reference=reference,
            )
        else:
            code = self.config.dataset_code(model_id)
            entry = TypeEntry(
                model_id=model_id,
                dataset_id=str(code)[: self.config.dataset_id_length],
                dataset_code=code,
                reference=reference,
                name=name,
            )

        self._slots[model_id] = entry
        self._defined += 1
        return True

    def propagate_name(self, model_id: int, name: str | None, prefix: str | None = None) -> bool:
        """Give a structure its data-set name from an alias pointing at it.

        The name is ``prefix + separator + name``, cut from the front to
        the data-set name length when too long.

        Returns
        -------
            True if the structure was named. Entries that are not
            structures with fields are ignored; an already named structure
            keeps its name and the conflict is reported.

        """
        entry = self.get(model_id)
        if entry is None or not entry.is_struct or entry.size == 0:
            return False

        proposal = stitch_names(
            prefix,
            name,
            self.config.name_separator,
            self.config.dataset_name_length,
        )
        if entry.name:
            self.diagnostics.critical(
                ErrorCodes.E005_NAME_CONFLICT,
                f'Model id {model_id} = "{entry.name}" should be renamed "{name}".',
                path=f"model/struct[@id={model_id}]",
                model_id=model_id,
                current=entry.name,
                proposed=proposal,
            )
            return False

        entry.name = proposal
        return proposal is not None
