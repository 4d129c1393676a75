"""Tests for validators/required_validator.py."""

from declcheck.application.validators.required_validator import (
    DEPENDENTS_FAILED,
    REQUIRED_FIELD,
    RequiredValidator,
)
from declcheck.domain.model.constraints import Range, Required
from declcheck.domain.model.field_descriptor import FieldDescriptor


class _Resolver:
    """Resolver stub recording lookups."""

    def __init__(self, **valid: bool) -> None:
        self._valid = valid
        self.lookups: list[str] = []

    def is_fully_valid(self, key: str) -> bool:
        self.lookups.append(key)
        return self._valid[key]


class TestRequiredValidator:
    """Tests for RequiredValidator."""

    def test_messages(self) -> None:
        assert REQUIRED_FIELD == "Required field."
        assert DEPENDENTS_FAILED == "Validation failed due to dependents."

    def test_missing_value_fails(self) -> None:
        result = RequiredValidator(Required()).validate(None, "x", _Resolver())
        assert result == REQUIRED_FIELD

    def test_present_value_passes(self) -> None:
        assert RequiredValidator(Required()).validate(0, "x", _Resolver()) is None

    def test_empty_string_is_present(self) -> None:
        assert RequiredValidator(Required()).validate("", "x", _Resolver()) is None

    def test_or_field_valid_passes(self) -> None:
        resolver = _Resolver(x=True)
        validator = RequiredValidator(Required(or_fields=("x",)))
        assert validator.validate(None, "y", resolver) is None

    def test_or_fields_first_success_wins(self) -> None:
        resolver = _Resolver(a=True, b=False)
        validator = RequiredValidator(Required(or_fields=("a", "b")))
        assert validator.validate(None, "y", resolver) is None
        assert resolver.lookups == ["a"]

    def test_all_or_fields_invalid_fails(self) -> None:
        resolver = _Resolver(a=False, b=False)
        validator = RequiredValidator(Required(or_fields=("a", "b")))
        assert validator.validate(None, "y", resolver) == REQUIRED_FIELD
        assert resolver.lookups == ["a", "b"]

    def test_or_fields_ignored_when_present(self) -> None:
        resolver = _Resolver(a=False)
        validator = RequiredValidator(Required(or_fields=("a",)))
        assert validator.validate(1, "y", resolver) is None
        assert resolver.lookups == []

    def test_with_field_invalid_fails(self) -> None:
        resolver = _Resolver(y=False)
        validator = RequiredValidator(Required(with_fields=("y",)))
        assert validator.validate(1, "z", resolver) == DEPENDENTS_FAILED

    def test_with_fields_first_failure_loses(self) -> None:
        resolver = _Resolver(a=False, b=True)
        validator = RequiredValidator(Required(with_fields=("a", "b")))
        assert validator.validate(1, "z", resolver) == DEPENDENTS_FAILED
        assert resolver.lookups == ["a"]

    def test_with_fields_ignored_when_missing(self) -> None:
        resolver = _Resolver(a=True)
        validator = RequiredValidator(Required(with_fields=("a",)))
        assert validator.validate(None, "z", resolver) == REQUIRED_FIELD
        assert resolver.lookups == []

    def test_applies_to_missing_values(self) -> None:
        assert RequiredValidator(Required()).applies_to(None)

    def test_from_descriptor(self) -> None:
        with_required = FieldDescriptor(name="x", constraints=(Required(),))
        without_required = FieldDescriptor(name="x", constraints=(Range(),))
        assert isinstance(RequiredValidator.from_descriptor(with_required), RequiredValidator)
        assert RequiredValidator.from_descriptor(without_required) is None
