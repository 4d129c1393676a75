"""Field descriptor: one constrained attribute of a target type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from declcheck.domain.model.constraints import Constraint, Range, Required, Validate

C = TypeVar("C", bound=Constraint)


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Constrained attribute discovered on a target type.

    Attributes:
        name: Physical attribute name
        constraints: Declarations attached to the attribute (non-empty)
    """

    name: str
    constraints: tuple[Constraint, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.constraints:
            raise ValueError(f"field '{self.name}' must carry at least one constraint")

    @property
    def alias(self) -> str | None:
        """Alias from the Validate marker, if any."""
        for constraint in self.constraints:
            if isinstance(constraint, Validate) and constraint.alias is not None:
                return constraint.alias
        return None

    @property
    def key(self) -> str:
        """Lookup key: alias if declared, else the attribute name."""
        return self.alias or self.name

    @property
    def range(self) -> Range | None:
        """Range declaration, if any."""
        return self._first(Range)

    @property
    def required(self) -> Required | None:
        """Required declaration, if any."""
        return self._first(Required)

    def value_of(self, target: object) -> object:
        """Read the attribute's current value (None when unset)."""
        return getattr(target, self.name, None)

    def _first(self, constraint_type: type[C]) -> C | None:
        for constraint in self.constraints:
            if isinstance(constraint, constraint_type):
                return constraint
        return None
