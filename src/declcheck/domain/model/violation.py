"""Validation error entity."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Single data violation found during traversal.

    Not an exception: violations are collected, never raised individually.
    ProcessingError carries the complete list.

    Attributes:
        field: Dot/bracket path from the root object (e.g. "items[1].name")
        reason: Human-readable message
    """

    field: str
    reason: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.field is None:
            raise TypeError("field must not be None")
        if not self.reason:
            raise ValueError("reason must not be empty")

    def __str__(self) -> str:
        """Format as 'field -> reason'."""
        return f"{self.field} -> {self.reason}"
