"""Constraint validators and the per-level field evaluator.

- RangeValidator: bounds on numbers, text length, collection size
- RequiredValidator: presence with or/with dependencies
- FieldEvaluator: memoized evaluation of one object's fields
"""

from declcheck.application.validators._base import BaseConstraintValidator, DependencyResolver
from declcheck.application.validators._registry import validators_for
from declcheck.application.validators.evaluator import FieldEvaluator
from declcheck.application.validators.range_validator import RangeValidator
from declcheck.application.validators.required_validator import (
    DEPENDENTS_FAILED,
    REQUIRED_FIELD,
    RequiredValidator,
)

__all__ = [
    # Base
    "BaseConstraintValidator",
    "DependencyResolver",
    # Validators
    "RangeValidator",
    "RequiredValidator",
    "REQUIRED_FIELD",
    "DEPENDENTS_FAILED",
    # Factory functions
    "validators_for",
    # Evaluation
    "FieldEvaluator",
]
