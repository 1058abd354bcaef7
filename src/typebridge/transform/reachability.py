"""Mark the types reachable from an operator's interface as required."""

from __future__ import annotations

from dataclasses import dataclass
from xml.etree.ElementTree import Element

from typebridge.diagnostics.errors import DiagnosticLog, ErrorCodes
from typebridge.ir.store import AliasRef, FieldsRef, TypeStore
from typebridge.transform.attributes import int_attribute


@dataclass(frozen=True)
class OperatorParameter:
    """One declared input or output of an operator."""

    name: str | None
    type_id: int
    direction: str  # "input" or "output"
    composite: bool


@dataclass(frozen=True)
class OperatorInterface:
    """The parameters of a resolved operator."""

    operator: str
    inputs: tuple[OperatorParameter, ...] = ()
    outputs: tuple[OperatorParameter, ...] = ()

    @property
    def composite_inputs(self) -> int:
        return sum(p.composite for p in self.inputs)

    @property
    def composite_outputs(self) -> int:
        return sum(p.composite for p in self.outputs)


class ReachabilityAnalyzer:
    """Walk the type graph below operator parameters, counting references.

    Only composite parameters (structures, arrays) lead to data-sets;
    plain scalars are counted but are expected to be wrapped in a
    structure by a well-formed model.
    """

    def __init__(self, store: TypeStore, diagnostics: DiagnosticLog | None = None) -> None:
        self.store = store
        self.diagnostics = diagnostics if diagnostics is not None else store.diagnostics
        self._active: set[int] = set()

    def require(self, model_id: int) -> bool:
        """Mark an entry and everything below it as required.

        Args:
        ----
            model_id: Entry to mark.

        Returns:
        -------
            True if the entry or anything below it is an array or a
            structure with fields, i.e. worth emitting.

        """
        entry = self.store.get(model_id)
        if entry is None:
            reason = "is out of scope" if not self.store.in_range(model_id) else "is not defined"
            self.diagnostics.error(
                ErrorCodes.E006_UNDEFINED_ID,
                f"mid={model_id} {reason}.",
                path=f"model[@id={model_id}]",
            )
            return False

        entry.ref_count += 1
        if model_id in self._active:
            self.diagnostics.error(
                ErrorCodes.E009_REFERENCE_CYCLE,
                f"mid={model_id} is part of a reference cycle.",
                path=f"model[@id={model_id}]",
            )
            return False

        sub = entry.size
        reference = entry.reference
        self._active.add(model_id)
        try:
            if isinstance(reference, AliasRef):
                if reference.target == model_id:
                    self.diagnostics.error(
                        ErrorCodes.E003_SELF_REFERENCE,
                        f"mid={model_id} is self-referencing. bug.",
                        path=f"model[@id={model_id}]",
                    )
                else:
                    sub += self.require(reference.target)
            elif isinstance(reference, FieldsRef):
                for field_id in reference.fields:
                    sub += self.require(field_id)
        finally:
            self._active.discard(model_id)

        return sub > 0

    def require_operator(
        self, operator: Element, qualified_name: str | None = None
    ) -> OperatorInterface:
        """Require the types of every input and output of an operator.

        Args:
        ----
            operator: The operator node.
            qualified_name: Display name, defaults to the node's name.

        Returns:
        -------
            The operator's parameters.

        """
        name = qualified_name or operator.get("name", "")
        inputs = self._require_parameters(operator, "input", name)
        outputs = self._require_parameters(operator, "output", name)
        return OperatorInterface(operator=name, inputs=inputs, outputs=outputs)

    def _require_parameters(
        self, operator: Element, direction: str, operator_name: str
    ) -> tuple[OperatorParameter, ...]:
        parameters: list[OperatorParameter] = []
        # Direct children only; nested operators declare their own interface.
        for node in operator.findall(direction):
            type_id = int_attribute(node, "type", 1, self.store.capacity - 1, self.diagnostics)
            if type_id is None:
                continue
            parameters.append(
                OperatorParameter(
                    name=node.get("name"),
                    type_id=type_id,
                    direction=direction,
                    composite=self.require(type_id),
                )
            )

        if parameters:
            composite = sum(p.composite for p in parameters)
            message = (
                f'"{operator_name}" has {composite:2d} DS-{direction}s out of {len(parameters):2d}'
            )
            if composite:
                self.diagnostics.info(ErrorCodes.I004_INTERFACE_SUMMARY, message)
            else:
                self.diagnostics.warning(
                    ErrorCodes.W003_NO_COMPOSITE_PARAMETERS,
                    message,
                    suggestion="Wrap scalar parameters in a structure or an array",
                )
        return tuple(parameters)
