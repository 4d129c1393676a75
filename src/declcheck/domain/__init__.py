"""declcheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, graphlib, collections.abc
"""

from declcheck.domain.exceptions import (
    DeclCheckError,
    DependencyCycleError,
    InvalidFieldError,
    ProcessingError,
    SchemaError,
    UnsupportedFieldError,
)
from declcheck.domain.model import (
    ConstraintKind,
    ErrorAggregator,
    FieldDescriptor,
    FieldValidationSummary,
    Range,
    Required,
    Schema,
    TraversalContext,
    Validate,
    ValidationError,
    ValidationResult,
    ValidationStats,
    ValidatorConfig,
)
from declcheck.domain.ports import ReporterProtocol, Validatable, ValidatableProtocol

__all__ = [
    # Exceptions
    "DeclCheckError",
    "SchemaError",
    "InvalidFieldError",
    "UnsupportedFieldError",
    "DependencyCycleError",
    "ProcessingError",
    # Model
    "ConstraintKind",
    "ErrorAggregator",
    "FieldDescriptor",
    "FieldValidationSummary",
    "Range",
    "Required",
    "Schema",
    "TraversalContext",
    "Validate",
    "ValidationError",
    "ValidationResult",
    "ValidationStats",
    "ValidatorConfig",
    # Ports
    "ReporterProtocol",
    "Validatable",
    "ValidatableProtocol",
]
