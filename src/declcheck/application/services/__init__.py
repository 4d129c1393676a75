"""Validation services: graph walker and facade."""

from declcheck.application.services.object_validator import ObjectValidator
from declcheck.application.services.walker import (
    MAX_DEPTH_REACHED,
    GraphWalker,
    TraversalState,
)

__all__ = [
    "ObjectValidator",
    "GraphWalker",
    "TraversalState",
    "MAX_DEPTH_REACHED",
]
