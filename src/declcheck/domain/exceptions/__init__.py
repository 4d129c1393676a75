"""Domain exceptions."""

from declcheck.domain.exceptions.base import DeclCheckError, SchemaError
from declcheck.domain.exceptions.processing import ProcessingError
from declcheck.domain.exceptions.schema import (
    DependencyCycleError,
    InvalidFieldError,
    UnsupportedFieldError,
)

__all__ = [
    "DeclCheckError",
    "SchemaError",
    "InvalidFieldError",
    "UnsupportedFieldError",
    "DependencyCycleError",
    "ProcessingError",
]
