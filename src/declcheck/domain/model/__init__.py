"""Domain model entities."""

from declcheck.domain.model.aggregator import ErrorAggregator
from declcheck.domain.model.configuration import DEFAULT_MAX_DEPTH, ValidatorConfig
from declcheck.domain.model.constraints import Constraint, Range, Required, Validate
from declcheck.domain.model.context import TraversalContext, join_path
from declcheck.domain.model.enums import ConstraintKind, ValueShape
from declcheck.domain.model.field_descriptor import FieldDescriptor
from declcheck.domain.model.graph import DiGraph, detect_cycles
from declcheck.domain.model.schema import Schema
from declcheck.domain.model.summary import FieldValidationSummary
from declcheck.domain.model.validation_result import ValidationResult
from declcheck.domain.model.validation_stats import ValidationStats
from declcheck.domain.model.violation import ValidationError

__all__ = [
    # Declarations
    "Constraint",
    "Range",
    "Required",
    "Validate",
    # Enums
    "ConstraintKind",
    "ValueShape",
    # Schema
    "FieldDescriptor",
    "Schema",
    "DiGraph",
    "detect_cycles",
    # Traversal
    "TraversalContext",
    "join_path",
    "FieldValidationSummary",
    "ErrorAggregator",
    # Results
    "ValidationError",
    "ValidationResult",
    "ValidationStats",
    # Configuration
    "ValidatorConfig",
    "DEFAULT_MAX_DEPTH",
]
