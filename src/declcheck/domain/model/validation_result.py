"""Validation result aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from declcheck.domain.exceptions.processing import ProcessingError
from declcheck.domain.model.validation_stats import ValidationStats
from declcheck.domain.model.violation import ValidationError


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating one object graph.

    Immutable aggregate. Used by ReporterProtocol.report().

    Attributes:
        errors: Reported violations in discovery order
        stats: Traversal statistics
    """

    errors: tuple[ValidationError, ...]
    stats: ValidationStats

    @property
    def passed(self) -> bool:
        """Check if validation passed (no violations)."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of reported violations."""
        return len(self.errors)

    @property
    def truncated(self) -> bool:
        """Some violations were dropped by max_errors."""
        return self.stats.errors_found > len(self.errors)

    def errors_for(self, field: str) -> tuple[ValidationError, ...]:
        """Violations reported at exactly ``field``."""
        return tuple(e for e in self.errors if e.field == field)

    def raise_if_failed(self) -> None:
        """Raise ProcessingError carrying the reported violations."""
        if self.errors:
            raise ProcessingError(self.errors)

    @classmethod
    def empty(cls) -> ValidationResult:
        """Create empty validation result (passed, no violations)."""
        return cls(errors=(), stats=ValidationStats.empty())
