"""Constraint declarations attached to fields.

Declarations are plain immutable values placed in ``typing.Annotated``
metadata:

    class Order(Validatable):
        code: Annotated[str | None, Required(), Range(from_=3, to=12)] = None
        items: Annotated[list[Line], Range(from_=1)] = field(default_factory=list)
        note: Annotated[str | None, Validate(alias="comment")] = None

Any attribute carrying at least one declaration is part of the type's
schema and is traversed for nested validatable values.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from declcheck.domain.model.enums import ConstraintKind


def _as_names(value: str | Iterable[str], label: str) -> tuple[str, ...]:
    """Normalize a single name or an iterable of names to a tuple."""
    names = (value,) if isinstance(value, str) else tuple(value)
    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"{label} must contain non-empty field names, got {name!r}")
    return names


class Constraint:
    """Base for all field declarations recognized by the resolver."""

    kind: ClassVar[ConstraintKind | None] = None


@dataclass(frozen=True, slots=True)
class Range(Constraint):
    """Inclusive bounds on a number, a text length or a collection size.

    Attributes:
        from_: Lower bound (default: -infinity)
        to: Upper bound (default: +infinity)
    """

    kind: ClassVar[ConstraintKind | None] = ConstraintKind.RANGE

    from_: float = -math.inf
    to: float = math.inf

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if math.isnan(self.from_) or math.isnan(self.to):
            raise ValueError("Range bounds must not be NaN")
        if self.from_ > self.to:
            raise ValueError(f"Range from_ must be <= to, got {self.from_} > {self.to}")

    @property
    def has_lower(self) -> bool:
        """Lower bound was declared."""
        return not math.isinf(self.from_)

    @property
    def has_upper(self) -> bool:
        """Upper bound was declared."""
        return not math.isinf(self.to)


@dataclass(frozen=True, slots=True)
class Required(Constraint):
    """Field must be present, optionally relaxed or tightened by siblings.

    A missing value is accepted when any field of ``or_fields`` is fully
    valid. A present value is rejected when any field of ``with_fields``
    is not fully valid.

    Attributes:
        or_fields: Alternatives, checked in order
        with_fields: Dependents, checked in order
    """

    kind: ClassVar[ConstraintKind | None] = ConstraintKind.REQUIRED

    or_fields: tuple[str, ...] = ()
    with_fields: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize name lists. FAIL-FIRST on blank names."""
        object.__setattr__(self, "or_fields", _as_names(self.or_fields, "or_fields"))
        object.__setattr__(self, "with_fields", _as_names(self.with_fields, "with_fields"))


@dataclass(frozen=True, slots=True)
class Validate(Constraint):
    """Traversal marker with optional alias.

    Marks a field for nested traversal without adding a check. A non-blank
    alias replaces the attribute name in error paths and in or/with lookups.

    Attributes:
        alias: Lookup key replacing the attribute name
    """

    alias: str | None = None

    def __post_init__(self) -> None:
        """Treat a blank alias as no alias."""
        if self.alias is not None and not self.alias.strip():
            object.__setattr__(self, "alias", None)
