"""pytest plugin for declcheck.

Provides fixtures for validating object graphs in tests:
    validation_config: Validation configuration (override in conftest.py)
    object_validator: ObjectValidator built from validation_config

Configuration (pytest.ini or pyproject.toml):
    declcheck_max_depth: Depth budget of object_validator (default: 256)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from declcheck.presentation.pytest_plugin.fixtures import (
    object_validator,
    validation_config,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "object_validator",
    "validation_config",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "declcheck_max_depth",
        "Max traversal depth for the object_validator fixture",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "declcheck: mark test as object-graph validation test",
    )
