"""Statistics for a validation call."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationStats:
    """Statistics from one validation call.

    Immutable value object tracking traversal metrics.

    Attributes:
        objects_visited: Objects walked (root, nested and collection elements)
        fields_evaluated: Constrained fields evaluated across all levels
        max_depth_reached: Deepest recursion level entered (root = 1)
        errors_found: Violations found, before any max_errors cap
        validation_time_ms: Total time in milliseconds
    """

    objects_visited: int
    fields_evaluated: int
    max_depth_reached: int
    errors_found: int
    validation_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.objects_visited < 0:
            raise ValueError(f"objects_visited must be >= 0, got {self.objects_visited}")
        if self.fields_evaluated < 0:
            raise ValueError(f"fields_evaluated must be >= 0, got {self.fields_evaluated}")
        if self.max_depth_reached < 0:
            raise ValueError(f"max_depth_reached must be >= 0, got {self.max_depth_reached}")
        if self.errors_found < 0:
            raise ValueError(f"errors_found must be >= 0, got {self.errors_found}")
        if self.validation_time_ms < 0:
            raise ValueError(f"validation_time_ms must be >= 0, got {self.validation_time_ms}")

    @classmethod
    def empty(cls) -> ValidationStats:
        """Create empty validation stats."""
        return cls(
            objects_visited=0,
            fields_evaluated=0,
            max_depth_reached=0,
            errors_found=0,
            validation_time_ms=0.0,
        )
