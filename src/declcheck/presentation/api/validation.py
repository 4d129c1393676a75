"""Module-level validation entry points.

Thin wrappers over ObjectValidator for one-off calls:

    from declcheck import validate

    validate(order)  # raises ProcessingError on violations
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from declcheck.application.services.object_validator import ObjectValidator

if TYPE_CHECKING:
    from declcheck.domain.model.configuration import ValidatorConfig
    from declcheck.domain.model.validation_result import ValidationResult


def check(target: object, config: ValidatorConfig | None = None) -> ValidationResult:
    """Validate an object graph and return the result without raising.

    Args:
        target: Root object (None passes)
        config: Validation configuration (defaults if None)

    Returns:
        ValidationResult with violations and stats

    Raises:
        SchemaError: Misconfigured constraint schema
    """
    return ObjectValidator(config).check(target)


def validate(target: object, config: ValidatorConfig | None = None) -> None:
    """Validate an object graph.

    Args:
        target: Root object (None passes)
        config: Validation configuration (defaults if None)

    Raises:
        ProcessingError: At least one violation found
        SchemaError: Misconfigured constraint schema
    """
    ObjectValidator(config).validate(target)
