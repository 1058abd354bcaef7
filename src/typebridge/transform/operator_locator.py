"""Resolve scoped operator names inside the package hierarchy."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from xml.etree.ElementTree import Element

from typebridge.converters.mapping_reader import mapping_section
from typebridge.diagnostics.errors import DiagnosticLog, ErrorCodes
from typebridge.models.config import BridgeConfig


@dataclass(frozen=True)
class LocatedOperator:
    """An operator node together with its package path."""

    node: Element
    path: tuple[str, ...]

    @property
    def name(self) -> str:
        return self.path[-1]

    def qualified_name(self, separator: str = "::") -> str:
        """Full name, e.g. ``Pkg::Sub::Root``."""
        return separator.join(self.path)


class OperatorLocator:
    """Find the operator whose interface selects the data-sets.

    Operators are named ``Pkg::Sub::Op``. Every leading segment names a
    package directly below the previous scope; the operator itself may
    sit anywhere below the last package, so a bare ``Op`` is enough when
    it is unique in the whole model.
    """

    def __init__(
        self,
        config: BridgeConfig | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        self.config = config or BridgeConfig()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()

    def root_name(self, doc: Element | None) -> str | None:
        """Read the default operator name from the mapping's config section."""
        config = mapping_section(doc, "config")
        if config is None:
            return None

        option = next(
            (o for o in config.iter("option") if o.get("name") == self.config.root_option),
            None,
        )
        root_name = option.get("value") if option is not None else None
        if not root_name:
            return None

        self.diagnostics.info(
            ErrorCodes.I001_ROOT_NAME,
            f"Identified root name: {root_name}",
            path=f"config/option[@name={self.config.root_option}]",
        )
        return root_name

    def locate(self, doc: Element | None, scoped_name: str | None = None) -> Element | None:
        """Resolve an operator node.

        Args:
        ----
            doc: The mapping document.
            scoped_name: ``Pkg::Op`` style name; None reads the root option.

        Returns:
        -------
            The operator node, or None if it is unknown or ambiguous.

        """
        located = self.locate_qualified(doc, scoped_name)
        return located.node if located else None

    def locate_qualified(
        self, doc: Element | None, scoped_name: str | None = None
    ) -> LocatedOperator | None:
        """Resolve an operator node and its package path."""
        if scoped_name is None:
            scoped_name = self.root_name(doc)

        if not scoped_name:
            self.diagnostics.error(
                ErrorCodes.F003_OPERATOR_UNDEFINED,
                "Operator not defined.",
                suggestion=(
                    f"Name an operator or set the '{self.config.root_option}' "
                    "option in the mapping config"
                ),
            )
            return None

        model = mapping_section(doc, "model")
        if model is None:
            self.diagnostics.error(
                ErrorCodes.F001_OPERATOR_NOT_FOUND,
                f'Operator "{scoped_name}" not found, mapping has no model.',
            )
            return None

        *packages, operator_name = scoped_name.split(self.config.scope_separator)
        scope = model
        path: list[str] = []
        for segment in packages:
            matches = [p for p in scope.findall("package") if p.get("name") == segment]
            if len(matches) != 1:
                problem = "not found" if not matches else "is ambiguous"
                self.diagnostics.error(
                    ErrorCodes.F004_PACKAGE_NOT_FOUND,
                    f'Package "{segment}" of "{scoped_name}" {problem}.',
                    path="/".join(["model", *path, segment]),
                )
                return None
            scope = matches[0]
            path.append(segment)

        candidates = [op for op in self._walk(scope, tuple(path)) if op.name == operator_name]

        if not candidates:
            self.diagnostics.error(
                ErrorCodes.F001_OPERATOR_NOT_FOUND,
                f'Operator "{scoped_name}" not found.',
            )
            return None

        if len(candidates) > 1:
            self.diagnostics.error(
                ErrorCodes.F002_OPERATOR_AMBIGUOUS,
                f'Encountered multiple matching operators for "{scoped_name}". Add package path.',
                suggestion=" or ".join(
                    c.qualified_name(self.config.scope_separator) for c in candidates
                ),
            )
            return None

        located = candidates[0]
        self.diagnostics.info(
            ErrorCodes.I002_OPERATOR_RESOLVED,
            f'Resolved operator "{located.qualified_name(self.config.scope_separator)}"',
        )
        return located

    def operators(self, doc: Element | None) -> list[LocatedOperator]:
        """List every operator of the model with its package path."""
        model = mapping_section(doc, "model")
        if model is None:
            return []
        return list(self._walk(model, ()))

    def _walk(self, scope: Element, path: tuple[str, ...]) -> Iterator[LocatedOperator]:
        """Yield operators below ``scope`` in document order."""
        for child in scope:
            if child.tag == "operator":
                yield LocatedOperator(child, (*path, child.get("name", "")))
            elif child.tag == "package":
                yield from self._walk(child, (*path, child.get("name", "")))
