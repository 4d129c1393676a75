"""pytest fixtures for object validation.

User overrides validation_config in their conftest.py.
"""

from __future__ import annotations

import pytest

from declcheck.application.services import ObjectValidator
from declcheck.domain.model.configuration import DEFAULT_MAX_DEPTH, ValidatorConfig


def _get_ini_int(config: pytest.Config, name: str, default: int) -> int:
    """Get integer ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        Integer value of ini option

    Raises:
        pytest.UsageError: Value is not an integer
    """
    value = config.getini(name)
    if not value:
        return default
    try:
        return int(str(value))
    except ValueError:
        raise pytest.UsageError(f"{name} must be an integer, got {value!r}") from None


@pytest.fixture(scope="session")
def validation_config(request: pytest.FixtureRequest) -> ValidatorConfig:
    """Default validation configuration.

    Reads declcheck_max_depth from pytest.ini (default 256).
    User overrides this fixture in their conftest.py to provide
    custom configuration.

    Returns:
        ValidatorConfig
    """
    max_depth = _get_ini_int(request.config, "declcheck_max_depth", DEFAULT_MAX_DEPTH)
    return ValidatorConfig(max_depth=max_depth)


@pytest.fixture(scope="session")
def object_validator(validation_config: ValidatorConfig) -> ObjectValidator:
    """ObjectValidator facade built from validation_config.

    Returns:
        ObjectValidator
    """
    return ObjectValidator(validation_config)
