"""Tests for services/walker.py."""

import pytest

from declcheck.application.services.walker import MAX_DEPTH_REACHED, GraphWalker, TraversalState
from declcheck.domain.exceptions.schema import InvalidFieldError
from declcheck.domain.model.context import TraversalContext
from declcheck.domain.model.violation import ValidationError
from tests.factories import (
    DEMO_ERRORS,
    Booking,
    Holder,
    Item,
    Leaf,
    MixedHolder,
    Parent,
    ParentOfBad,
    Period,
    Plain,
    ToValidate,
    TupleChecked,
    ValidatableBadReference,
    make_chain,
)


def _walk(target: object, max_depth: int = 256) -> tuple[tuple[ValidationError, ...], TraversalState]:
    state = TraversalState(max_depth=max_depth)
    errors = GraphWalker(target, TraversalContext.root(max_depth), state).compute()
    return errors, state


def _pairs(errors: tuple[ValidationError, ...]) -> list[tuple[str, str]]:
    return [(e.field, e.reason) for e in errors]


class TestGraphWalker:
    """Tests for GraphWalker."""

    def test_none_target(self) -> None:
        errors, state = _walk(None)
        assert errors == ()
        assert state.objects_visited == 0

    def test_plain_object(self) -> None:
        errors, state = _walk(Plain())
        assert errors == ()
        assert state.objects_visited == 1

    def test_demo_graph(self) -> None:
        errors, _ = _walk(ToValidate())
        assert _pairs(errors) == list(DEMO_ERRORS)

    def test_nested_path(self) -> None:
        errors, _ = _walk(Parent(child=Leaf()))
        assert _pairs(errors) == [("child.x", "Required field.")]

    def test_collection_index(self) -> None:
        errors, _ = _walk(Holder(items=[Item(), Item(y=None)]))
        assert _pairs(errors) == [("items[1].y", "Required field.")]

    def test_index_counts_non_validatable_elements(self) -> None:
        errors, _ = _walk(MixedHolder(items=["text", None, Item(y=None)]))
        assert _pairs(errors) == [("items[2].y", "Required field.")]

    def test_mapping_values_not_walked(self) -> None:
        errors, _ = _walk(MixedHolder(lookup={"a": Item(y=None)}))
        assert errors == ()

    def test_hook_prefix_at_root(self) -> None:
        errors, _ = _walk(Period(start=5, end=1))
        assert _pairs(errors) == [("end", "End precedes start.")]

    def test_hook_prefix_nested(self) -> None:
        errors, _ = _walk(Booking(period=Period(start=5, end=1)))
        assert _pairs(errors) == [("period.end", "End precedes start.")]

    def test_hook_and_fields_both_checked(self) -> None:
        errors, _ = _walk(Period(start=5, end=None))
        assert _pairs(errors) == [("end", "Required field.")]
        errors, _ = _walk(Booking(period=Period(start=None, end=None)))
        assert [e.field for e in errors] == ["period.start", "period.end"]

    def test_hook_tuples_normalized(self) -> None:
        errors, _ = _walk(TupleChecked())
        assert errors == (ValidationError("whole", "Always wrong."),)

    def test_depth_limit_single_error(self) -> None:
        errors, state = _walk(make_chain(10), max_depth=3)
        assert _pairs(errors) == [("next.next.next", MAX_DEPTH_REACHED)]
        assert state.objects_visited == 3
        assert state.max_depth_reached == 3

    def test_chain_within_budget(self) -> None:
        errors, state = _walk(make_chain(3), max_depth=3)
        assert errors == ()
        assert state.max_depth_reached == 3

    def test_default_depth_on_long_chain(self) -> None:
        errors, state = _walk(make_chain(300))
        assert len(errors) == 1
        assert errors[0].reason == MAX_DEPTH_REACHED
        assert errors[0].field == ".".join(["next"] * 256)
        assert state.objects_visited == 256

    def test_depth_beyond_recursion_limit(self) -> None:
        errors, state = _walk(make_chain(3000), max_depth=2000)
        assert len(errors) == 1
        assert errors[0].reason == MAX_DEPTH_REACHED
        assert errors[0].field == ".".join(["next"] * 2000)
        assert state.objects_visited == 2000
        assert state.max_depth_reached == 2000

    def test_siblings_walked_in_discovery_order(self) -> None:
        errors, _ = _walk(Holder(items=[Item(y=None), Item(), Item(y=None)]))
        assert [e.field for e in errors] == ["items[0].y", "items[2].y"]

    def test_compute_returns_subtree_errors(self) -> None:
        state = TraversalState(max_depth=5)
        state.aggregator.add(ValidationError("earlier", "r"))
        errors = GraphWalker(Leaf(), TraversalContext.root(5), state).compute()
        assert _pairs(errors) == [("x", "Required field.")]
        assert len(state.aggregator) == 2

    def test_schema_error_in_nested_object(self) -> None:
        with pytest.raises(InvalidFieldError) as exc_info:
            _walk(ParentOfBad(child=ValidatableBadReference()))
        assert exc_info.value.field_path == "child.missing"

    def test_counts_fields(self) -> None:
        _, state = _walk(Parent(child=Leaf(x=1)))
        assert state.objects_visited == 2
        assert state.fields_evaluated == 2
