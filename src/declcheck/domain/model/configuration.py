"""Validator configuration.

None = feature disabled, value = feature enabled with that config.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Configuration DTO for a validation call.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        max_depth: Depth budget of the root object. Nested objects beyond it
            produce a single "Reached max validation depth." error per branch.
        max_errors: Cap on reported violations. None = report all.
            The walk always completes; only the reported list is cut.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    max_errors: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")

        if self.max_errors is not None and self.max_errors < 1:
            raise ValueError(f"max_errors must be >= 1, got {self.max_errors}")

    def has_error_cap(self) -> bool:
        """Check if reported violations are capped."""
        return self.max_errors is not None
