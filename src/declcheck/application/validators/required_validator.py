"""Required constraint validator.

Missing value: passes if any ``or_fields`` entry is fully valid (first
success wins). Present value: passes if every ``with_fields`` entry is fully
valid (first failure loses). Referenced fields are evaluated on demand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from declcheck.application.validators._base import BaseConstraintValidator
from declcheck.domain.model.enums import ConstraintKind

if TYPE_CHECKING:
    from declcheck.application.validators._base import DependencyResolver
    from declcheck.domain.model.constraints import Required
    from declcheck.domain.model.field_descriptor import FieldDescriptor

REQUIRED_FIELD = "Required field."
DEPENDENTS_FAILED = "Validation failed due to dependents."


class RequiredValidator(BaseConstraintValidator):
    """Required constraint validator."""

    kind = ConstraintKind.REQUIRED

    def __init__(self, declaration: Required) -> None:
        """Initialize with the field's Required declaration.

        Args:
            declaration: Declared alternatives and dependents
        """
        self._declaration = declaration

    def validate(
        self,
        value: object,
        field_path: str,
        resolver: DependencyResolver,
    ) -> str | None:
        """Check presence against alternatives or dependents.

        A failing dependent is reported on this field; the dependent's own
        violation is reported once, on the dependent.
        """
        if value is None:
            if any(resolver.is_fully_valid(name) for name in self._declaration.or_fields):
                return None
            return REQUIRED_FIELD

        if all(resolver.is_fully_valid(name) for name in self._declaration.with_fields):
            return None
        return DEPENDENTS_FAILED

    @classmethod
    def from_descriptor(cls, descriptor: FieldDescriptor) -> Self | None:
        """Create from descriptor if Required is declared."""
        if descriptor.required is None:
            return None
        return cls(descriptor.required)
