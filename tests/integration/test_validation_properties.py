"""End-to-end behavior of validate() and check() on realistic graphs."""

from decimal import Decimal

import pytest

from declcheck import (
    DependencyCycleError,
    InvalidFieldError,
    ProcessingError,
    UnsupportedFieldError,
    ValidationError,
    ValidatorConfig,
    check,
    validate,
)
from declcheck.domain.model.enums import ConstraintKind
from tests.factories import (
    DEMO_ERRORS,
    Aliased,
    Alternatives,
    Bounded,
    DecimalBounded,
    Dependents,
    DerivedRecord,
    Holder,
    Item,
    Leaf,
    LowerBounded,
    OrCycle,
    Parent,
    ParentOfBad,
    Plain,
    TextBounded,
    ToValidate,
    Unsupported,
    UpperBounded,
    ValidatableBadReference,
    WithCycle,
    make_chain,
)


def _errors(target: object, config: ValidatorConfig | None = None) -> list[tuple[str, str]]:
    with pytest.raises(ProcessingError) as exc_info:
        validate(target, config)
    return [(e.field, e.reason) for e in exc_info.value.errors]


class TestNoConstraints:
    def test_plain_object_passes(self) -> None:
        validate(Plain())

    def test_root_none_passes(self) -> None:
        validate(None)


class TestRequiredProperties:
    """Presence and or/with dependencies."""

    def test_missing_value(self) -> None:
        assert _errors(Leaf()) == [("x", "Required field.")]

    def test_or_field_valid(self) -> None:
        validate(Alternatives(x=1, y=None))

    def test_with_field_invalid_reported_separately(self) -> None:
        assert _errors(Dependents(y=20, z=1)) == [
            ("y", "Value must range between 0 and 10."),
            ("z", "Validation failed due to dependents."),
        ]

    def test_or_cycle_terminates(self) -> None:
        assert _errors(OrCycle()) == [("b", "Required field."), ("a", "Required field.")]

    def test_alias_in_path_and_lookup(self) -> None:
        assert _errors(Aliased()) == [
            ("product_code", "Required field."),
            ("fallback", "Required field."),
        ]
        validate(Aliased(code="A-1"))

    def test_inherited_fields(self) -> None:
        assert _errors(DerivedRecord()) == [("id", "Required field."), ("name", "Required field.")]
        validate(DerivedRecord(id=7))


class TestRangeProperties:
    """Bounds on numbers, text and collections."""

    def test_both_bounds_cited(self) -> None:
        [(field, reason)] = _errors(Bounded(value=6))
        assert field == "value"
        assert "2" in reason
        assert "5" in reason

    def test_upper_bound_only(self) -> None:
        assert _errors(UpperBounded(value=6)) == [("value", "Value must be lesser than 5.")]

    def test_lower_bound_only(self) -> None:
        assert _errors(LowerBounded(value=1)) == [("value", "Value must be greater than 2.")]

    def test_missing_value_skipped(self) -> None:
        validate(Bounded(value=None))

    def test_text_lower_bound_clamped(self) -> None:
        assert _errors(TextBounded(name="abcd")) == [
            ("name", "String length must range between 0 and 3 characters.")
        ]

    def test_unsupported_value(self) -> None:
        with pytest.raises(UnsupportedFieldError) as exc_info:
            validate(Unsupported())
        assert exc_info.value.field_path == "value"
        assert exc_info.value.constraint_kind is ConstraintKind.RANGE


class TestTraversalProperties:
    """Paths, collections and depth."""

    def test_nested_path(self) -> None:
        assert _errors(Parent(child=Leaf())) == [("child.x", "Required field.")]

    def test_collection_path(self) -> None:
        assert _errors(Holder(items=[Item(), Item(y=None)])) == [("items[1].y", "Required field.")]

    def test_demo_graph(self) -> None:
        assert _errors(ToValidate()) == list(DEMO_ERRORS)

    def test_deep_chain_single_error(self) -> None:
        errors = _errors(make_chain(1000))
        assert len(errors) == 1
        assert errors[0][1] == "Reached max validation depth."

    def test_small_depth_budget(self) -> None:
        assert _errors(make_chain(4), ValidatorConfig(max_depth=2)) == [
            ("next.next", "Reached max validation depth.")
        ]

    def test_check_does_not_raise(self) -> None:
        result = check(Parent(child=Leaf()))
        assert result.errors == (ValidationError("child.x", "Required field."),)
        assert result.stats.objects_visited == 2


class TestSchemaProperties:
    """Misconfigured schemas abort the call."""

    def test_unknown_reference(self) -> None:
        with pytest.raises(InvalidFieldError) as exc_info:
            check(ParentOfBad(child=ValidatableBadReference()))
        assert exc_info.value.field_path == "child.missing"

    def test_with_cycle(self) -> None:
        with pytest.raises(DependencyCycleError):
            validate(WithCycle())

    def test_schema_errors_never_collected(self) -> None:
        with pytest.raises(InvalidFieldError):
            check(ParentOfBad(child=ValidatableBadReference()), ValidatorConfig(max_errors=1))


class TestDeepGraphs:
    """Depth is bounded by max_depth, not by the interpreter."""

    def test_depth_limit_above_recursion_limit(self) -> None:
        errors = check(make_chain(3000), ValidatorConfig(max_depth=2000))

        assert len(errors) == 1
        assert errors[0].reason == "Reached max validation depth."


class TestNotANumber:
    """NaN never satisfies a bound."""

    @pytest.mark.parametrize("value", [Decimal("NaN"), float("nan")])
    def test_nan_reported(self, value: object) -> None:
        with pytest.raises(ProcessingError) as exc_info:
            validate(DecimalBounded(value=value))

        assert [(e.field, e.reason) for e in exc_info.value.errors] == [
            ("value", "Value must range between 0 and 10.")
        ]
