"""Structural (schema) exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from declcheck.domain.exceptions.base import SchemaError

if TYPE_CHECKING:
    from declcheck.domain.model.enums import ConstraintKind


class InvalidFieldError(SchemaError):
    """Dependency list names a field that the schema does not declare.

    Raised when an `or_fields`/`with_fields` entry cannot be resolved
    against the descriptors of its own traversal level.

    Attributes:
        field_path: Composed path of the unresolvable name
    """

    def __init__(self, field_path: str) -> None:
        super().__init__(field_path, f"Unknown field referenced by constraint: {field_path}")


class UnsupportedFieldError(SchemaError):
    """Constraint applied to a value shape it cannot check.

    Attributes:
        field_path: Composed path of the field
        constraint_kind: Constraint that cannot handle the value
    """

    def __init__(self, field_path: str, constraint_kind: ConstraintKind) -> None:
        # FAIL-FIRST: validate required parameters
        if constraint_kind is None:
            raise TypeError("constraint_kind must not be None")

        self.constraint_kind = constraint_kind
        super().__init__(
            field_path,
            f"{constraint_kind.name} constraint does not support the value of {field_path}",
        )


class DependencyCycleError(SchemaError):
    """`with_fields` dependencies form a cycle.

    Attributes:
        field_path: Composed path of one field in the cycle
        cycle: Field keys participating in the cycle
    """

    def __init__(self, field_path: str, cycle: frozenset[str]) -> None:
        if not cycle:
            raise ValueError("cycle must not be empty")

        self.cycle = cycle
        super().__init__(
            field_path,
            f"Circular with-dependency at {field_path}: {', '.join(sorted(cycle))}",
        )
