"""Tests for validators/evaluator.py."""

import pytest

from declcheck.application.discovery.schema import discover
from declcheck.application.validators.evaluator import FieldEvaluator
from declcheck.domain.exceptions.schema import UnsupportedFieldError
from declcheck.domain.model.context import TraversalContext
from declcheck.domain.model.violation import ValidationError
from tests.factories import (
    Alternatives,
    Dependents,
    OrCycle,
    SubValidate,
    Unsupported,
)


def _evaluate_all(target: object, prefix: str = "") -> tuple[FieldEvaluator, list[ValidationError]]:
    context = TraversalContext(prefix=prefix, depth=5)
    schema = discover(type(target), context)
    emitted: list[ValidationError] = []
    evaluator = FieldEvaluator(schema, target, context, emitted.append)
    for descriptor in schema:
        evaluator.evaluate(descriptor)
    return evaluator, emitted


class TestFieldEvaluator:
    """Tests for FieldEvaluator."""

    def test_or_field_valid(self) -> None:
        evaluator, emitted = _evaluate_all(Alternatives(x=1, y=None))
        assert emitted == []
        assert evaluator.summary.is_valid("y")

    def test_or_field_invalid(self) -> None:
        _, emitted = _evaluate_all(Alternatives(x=None, y=None))
        assert emitted == [
            ValidationError("x", "Required field."),
            ValidationError("y", "Required field."),
        ]

    def test_with_field_invalid_reported_once(self) -> None:
        _, emitted = _evaluate_all(Dependents(y=20, z=1))
        assert emitted == [
            ValidationError("y", "Value must range between 0 and 10."),
            ValidationError("z", "Validation failed due to dependents."),
        ]

    def test_dependency_evaluated_on_demand(self) -> None:
        # sub_property_1 is declared first but waits for its dependents
        _, emitted = _evaluate_all(SubValidate(), prefix="items[0]")
        assert [e.field for e in emitted] == [
            "items[0].sub_property_3",
            "items[0].sub_property_2",
            "items[0].sub_property_1",
        ]

    def test_each_field_evaluated_once(self) -> None:
        evaluator, emitted = _evaluate_all(Dependents(y=20, z=1))
        evaluator.evaluate(evaluator._schema["y"])
        assert len(emitted) == 2
        assert evaluator.summary.field_count == 2

    def test_or_cycle_terminates(self) -> None:
        evaluator, emitted = _evaluate_all(OrCycle())
        assert emitted == [
            ValidationError("b", "Required field."),
            ValidationError("a", "Required field."),
        ]
        assert not evaluator.summary.is_valid("a")

    def test_or_cycle_with_present_value(self) -> None:
        _, emitted = _evaluate_all(OrCycle(a=None, b=1))
        assert emitted == []

    def test_is_fully_valid_evaluates(self) -> None:
        target = Dependents(y=5, z=1)
        context = TraversalContext.root(5)
        schema = discover(Dependents, context)
        evaluator = FieldEvaluator(schema, target, context, lambda e: None)
        assert evaluator.is_fully_valid("y")
        assert evaluator.summary.field_count == 1

    def test_unsupported_raises(self) -> None:
        with pytest.raises(UnsupportedFieldError) as exc_info:
            _evaluate_all(Unsupported(), prefix="child")
        assert exc_info.value.field_path == "child.value"
