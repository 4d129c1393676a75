"""Error aggregator for one validation call."""

from __future__ import annotations

from collections.abc import Iterable

from declcheck.domain.model.violation import ValidationError


class ErrorAggregator:
    """Ordered, append-only collection of violations.

    One instance per top-level call, shared by every walker of that call.
    Order equals first-discovered order across the whole walk.
    """

    __slots__ = ("_errors",)

    def __init__(self) -> None:
        self._errors: list[ValidationError] = []

    def __len__(self) -> int:
        return len(self._errors)

    def add(self, error: ValidationError) -> None:
        """Append one violation."""
        self._errors.append(error)

    def extend(self, errors: Iterable[ValidationError]) -> None:
        """Append violations preserving their order."""
        self._errors.extend(errors)

    def since(self, mark: int) -> tuple[ValidationError, ...]:
        """Violations appended after ``mark`` (a previous len())."""
        return tuple(self._errors[mark:])
