"""Domain enumerations."""

from enum import Enum, auto


class ConstraintKind(Enum):
    """Evaluated constraint kind.

    Keys of a field's memoized summary. The traversal marker (Validate)
    carries no check of its own and has no kind.
    """

    RANGE = auto()  # bounds on number, text length or collection size
    REQUIRED = auto()  # presence, with or/with dependencies


class ValueShape(Enum):
    """Value capability a Range bound is compared against."""

    NUMERIC = auto()
    TEXTUAL = auto()
    SIZED = auto()
