"""Base class for constraint validators.

One validator instance checks one declared constraint of one field.
Concrete validators inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from declcheck.domain.model.enums import ConstraintKind
    from declcheck.domain.model.field_descriptor import FieldDescriptor


class DependencyResolver(Protocol):
    """Answers dependency queries within one traversal level."""

    def is_fully_valid(self, key: str) -> bool:
        """Evaluate ``key`` on demand and report whether all its constraints passed."""
        ...


class BaseConstraintValidator(ABC):
    """Base class for constraint validators.

    Concrete validators must:
    1. Set `kind` class attribute
    2. Implement `validate()` method
    3. Implement `from_descriptor()` returning None when the field does
       not declare the constraint

    Example:
        class RangeValidator(BaseConstraintValidator):
            kind = ConstraintKind.RANGE

            def __init__(self, declaration: Range) -> None:
                self._declaration = declaration

            def validate(self, value, field_path, resolver) -> str | None:
                ...

            @classmethod
            def from_descriptor(cls, descriptor: FieldDescriptor) -> Self | None:
                if descriptor.range is None:
                    return None  # Not declared
                return cls(descriptor.range)
    """

    kind: ConstraintKind
    """Constraint kind recorded in the field summary."""

    def applies_to(self, value: object) -> bool:
        """Check if the constraint is evaluated for this value.

        Default: always. Constraints that ignore missing values override.
        """
        return True

    @abstractmethod
    def validate(
        self,
        value: object,
        field_path: str,
        resolver: DependencyResolver,
    ) -> str | None:
        """Check the field's current value.

        Args:
            value: Current field value
            field_path: Composed path of the field (for structural errors)
            resolver: Lazy access to sibling fields' validity

        Returns:
            Violation reason, or None if the constraint passed
        """

    @classmethod
    @abstractmethod
    def from_descriptor(cls, descriptor: FieldDescriptor) -> Self | None:
        """Create validator for a field.

        Args:
            descriptor: Field with its declarations

        Returns:
            Validator instance if the field declares the constraint, None otherwise
        """
