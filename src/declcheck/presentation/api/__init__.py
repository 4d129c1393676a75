"""Public validation API.

Public exports:
    validate: Validate and raise ProcessingError on violations
    check: Validate and return a ValidationResult
"""

from declcheck.presentation.api.validation import check, validate

__all__ = [
    "check",
    "validate",
]
