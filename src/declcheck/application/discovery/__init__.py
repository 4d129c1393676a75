"""Schema discovery for validation targets."""

from declcheck.application.discovery.schema import (
    check_dependencies,
    discover,
    discover_fields,
)

__all__ = [
    "discover",
    "discover_fields",
    "check_dependencies",
]
