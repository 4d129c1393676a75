"""Range constraint validator.

Compares a value against inclusive bounds through a closed set of value
capabilities:

- NUMERIC: real numbers and Decimal (bool excluded), compared directly
- TEXTUAL: str, compared by length
- SIZED: any other sized value, compared by len()

A value matching none of them is a schema error, not a data violation.
"""

from __future__ import annotations

import math
from collections.abc import Sized
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import TYPE_CHECKING, Self

from declcheck.application.validators._base import BaseConstraintValidator
from declcheck.domain.exceptions.schema import UnsupportedFieldError
from declcheck.domain.model.enums import ConstraintKind, ValueShape

if TYPE_CHECKING:
    from declcheck.application.validators._base import DependencyResolver
    from declcheck.domain.model.constraints import Range
    from declcheck.domain.model.field_descriptor import FieldDescriptor


@dataclass(frozen=True, slots=True)
class _Capability:
    """Bound comparison for one value shape.

    Attributes:
        shape: Value shape handled
        below: Message when only the upper bound is declared
        above: Message when only the lower bound is declared
        between: Message when both bounds are declared
    """

    shape: ValueShape
    below: str
    above: str
    between: str

    def matches(self, value: object) -> bool:
        """Check if the value has this capability."""
        match self.shape:
            case ValueShape.NUMERIC:
                return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)
            case ValueShape.TEXTUAL:
                return isinstance(value, str)
            case ValueShape.SIZED:
                return isinstance(value, Sized)

    def measure(self, value: object) -> float | Decimal:
        """Quantity compared against the bounds."""
        if self.shape is ValueShape.NUMERIC:
            return value  # type: ignore[return-value]
        return len(value)  # type: ignore[arg-type]

    def bounds(self, declaration: Range) -> tuple[float, float]:
        """Effective bounds (lengths and sizes cannot be negative)."""
        if self.shape is ValueShape.NUMERIC:
            return declaration.from_, declaration.to
        return max(declaration.from_, 0), declaration.to

    def render(self, bound: float) -> str:
        """Bound as shown in messages."""
        if self.shape is ValueShape.NUMERIC:
            return str(bound)
        return str(int(bound))

    def message(self, declaration: Range) -> str:
        """Violation message for the declared bounds."""
        low, high = self.bounds(declaration)
        if not declaration.has_lower:
            return self.below.format(to=self.render(high))
        if not declaration.has_upper:
            return self.above.format(from_=self.render(low))
        return self.between.format(from_=self.render(low), to=self.render(high))


# Order matters: str is Sized, so TEXTUAL must come before SIZED
_CAPABILITIES: tuple[_Capability, ...] = (
    _Capability(
        shape=ValueShape.NUMERIC,
        below="Value must be lesser than {to}.",
        above="Value must be greater than {from_}.",
        between="Value must range between {from_} and {to}.",
    ),
    _Capability(
        shape=ValueShape.TEXTUAL,
        below="String length must be at most {to} characters.",
        above="String length must be at least {from_} characters.",
        between="String length must range between {from_} and {to} characters.",
    ),
    _Capability(
        shape=ValueShape.SIZED,
        below="Collection size must be at most {to} elements.",
        above="Collection size must be at least {from_} elements.",
        between="Collection size must range between {from_} and {to} elements.",
    ),
)


def _is_nan(quantity: object) -> bool:
    """Check for float or Decimal NaN (signaling NaN included)."""
    if isinstance(quantity, Decimal):
        return quantity.is_nan()
    return isinstance(quantity, float) and math.isnan(quantity)


def capability_of(value: object) -> _Capability | None:
    """Find the capability handling a value, None if unsupported."""
    for capability in _CAPABILITIES:
        if capability.matches(value):
            return capability
    return None


class RangeValidator(BaseConstraintValidator):
    """Range constraint validator.

    Skips missing values: absence is the Required constraint's concern.
    """

    kind = ConstraintKind.RANGE

    def __init__(self, declaration: Range) -> None:
        """Initialize with the field's Range declaration.

        Args:
            declaration: Declared bounds
        """
        self._declaration = declaration

    def applies_to(self, value: object) -> bool:
        """Only present values are checked."""
        return value is not None

    def validate(
        self,
        value: object,
        field_path: str,
        resolver: DependencyResolver,
    ) -> str | None:
        """Compare the value against the declared bounds.

        Raises:
            UnsupportedFieldError: Value is neither numeric, textual nor sized
        """
        capability = capability_of(value)
        if capability is None:
            raise UnsupportedFieldError(field_path, self.kind)

        low, high = capability.bounds(self._declaration)
        quantity = capability.measure(value)
        if not _is_nan(quantity) and low <= quantity <= high:
            return None
        return capability.message(self._declaration)

    @classmethod
    def from_descriptor(cls, descriptor: FieldDescriptor) -> Self | None:
        """Create from descriptor if Range is declared."""
        if descriptor.range is None:
            return None
        return cls(descriptor.range)
