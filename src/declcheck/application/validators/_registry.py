"""Validator registry for constraint validators.

Closed set: the engine checks Range and Required only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from declcheck.application.validators._base import BaseConstraintValidator
from declcheck.application.validators.range_validator import RangeValidator
from declcheck.application.validators.required_validator import RequiredValidator

if TYPE_CHECKING:
    from declcheck.domain.model.field_descriptor import FieldDescriptor


# Order matters: validators are run in this order for each field
_ALL_VALIDATORS: tuple[type[BaseConstraintValidator], ...] = (
    RangeValidator,
    RequiredValidator,
)


def validators_for(descriptor: FieldDescriptor) -> tuple[BaseConstraintValidator, ...]:
    """Instantiate validators for the constraints a field declares.

    Validators are created using their from_descriptor() factory method.
    If from_descriptor() returns None, the constraint is not declared.

    Args:
        descriptor: Field with its declarations

    Returns:
        Tuple of validators in evaluation order
    """
    validators: list[BaseConstraintValidator] = []

    for validator_cls in _ALL_VALIDATORS:
        validator = validator_cls.from_descriptor(descriptor)
        if validator is not None:
            validators.append(validator)

    return tuple(validators)
