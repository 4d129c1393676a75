"""Memoized per-level constraint outcomes."""

from __future__ import annotations

from declcheck.domain.model.enums import ConstraintKind


class FieldValidationSummary:
    """Constraint outcomes of one traversal level, keyed by field key.

    A field's record is opened before any of its constraints runs, so a
    re-entrant lookup (or-cycle) sees the in-progress record instead of
    evaluating the field again.
    """

    __slots__ = ("_outcomes",)

    def __init__(self) -> None:
        self._outcomes: dict[str, dict[ConstraintKind, bool]] = {}

    def open(self, key: str) -> bool:
        """Open a record for ``key``.

        Returns:
            True if the record is new, False if the field was already seen
        """
        if key in self._outcomes:
            return False
        self._outcomes[key] = {}
        return True

    def record(self, key: str, kind: ConstraintKind, passed: bool) -> None:
        """Store the outcome of one constraint on an opened record."""
        if key not in self._outcomes:
            raise KeyError(f"no open record for field '{key}'")
        self._outcomes[key][kind] = passed

    def is_valid(self, key: str) -> bool:
        """Every recorded outcome passed (an empty record is valid)."""
        return all(self._outcomes.get(key, {}).values())

    @property
    def field_count(self) -> int:
        """Number of fields evaluated so far."""
        return len(self._outcomes)
