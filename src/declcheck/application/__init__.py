"""declcheck application layer.

Schema discovery, constraint validators, graph walker and reporters.
"""

from declcheck.application.discovery import discover
from declcheck.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from declcheck.application.services import GraphWalker, ObjectValidator, TraversalState
from declcheck.application.validators import (
    BaseConstraintValidator,
    FieldEvaluator,
    RangeValidator,
    RequiredValidator,
)

__all__ = [
    "discover",
    "ObjectValidator",
    "GraphWalker",
    "TraversalState",
    "FieldEvaluator",
    "BaseConstraintValidator",
    "RangeValidator",
    "RequiredValidator",
    "BaseReporter",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleReporter",
]
