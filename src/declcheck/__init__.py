"""declcheck - declarative constraint validation for Python object graphs."""

__version__ = "0.1.0"

from declcheck.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from declcheck.application.services import ObjectValidator
from declcheck.domain.exceptions import (
    DeclCheckError,
    DependencyCycleError,
    InvalidFieldError,
    ProcessingError,
    SchemaError,
    UnsupportedFieldError,
)
from declcheck.domain.model import (
    Range,
    Required,
    Validate,
    ValidationError,
    ValidationResult,
    ValidatorConfig,
)
from declcheck.domain.ports import Validatable
from declcheck.infrastructure.logging import configure_logging
from declcheck.presentation.api import check, validate

__all__ = [
    "__version__",
    # Entry points
    "validate",
    "check",
    "ObjectValidator",
    "ValidatorConfig",
    # Declarations
    "Range",
    "Required",
    "Validate",
    "Validatable",
    # Results
    "ValidationError",
    "ValidationResult",
    # Exceptions
    "DeclCheckError",
    "SchemaError",
    "InvalidFieldError",
    "UnsupportedFieldError",
    "DependencyCycleError",
    "ProcessingError",
    # Reporting
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleReporter",
    "configure_logging",
]
