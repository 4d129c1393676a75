"""Depth-first graph walker.

One GraphWalker per object encountered. For its object it runs the
self-validation hook, evaluates every constrained field, and descends into
validatable field values and validatable collection elements with a
shrinking depth budget.

Each level is a generator that yields the walkers of its children; compute()
drives them from an explicit stack, so depth is bounded by max_depth only,
not by the interpreter recursion limit.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from declcheck.application.discovery.schema import discover
from declcheck.application.validators.evaluator import FieldEvaluator
from declcheck.domain.model.aggregator import ErrorAggregator
from declcheck.domain.model.violation import ValidationError
from declcheck.domain.ports.validatable import is_validatable

if TYPE_CHECKING:
    from declcheck.domain.model.context import TraversalContext

MAX_DEPTH_REACHED = "Reached max validation depth."


@dataclass(slots=True)
class TraversalState:
    """Mutable state of one validation call.

    Created once per call and shared by all walkers of that call only.

    Attributes:
        max_depth: Depth budget of the root
        aggregator: Violations in discovery order
        objects_visited: Objects walked so far
        fields_evaluated: Constrained fields evaluated so far
        max_depth_reached: Deepest level entered (root = 1)
    """

    max_depth: int
    aggregator: ErrorAggregator = field(default_factory=ErrorAggregator)
    objects_visited: int = 0
    fields_evaluated: int = 0
    max_depth_reached: int = 0

    def enter(self, context: TraversalContext) -> None:
        """Count an object walk at the context's level."""
        self.objects_visited += 1
        level = self.max_depth - context.depth + 1
        self.max_depth_reached = max(self.max_depth_reached, level)


def _is_traversable_collection(value: object) -> bool:
    """Collections whose elements are walked (text and mappings excluded)."""
    return isinstance(value, Collection) and not isinstance(
        value, (str, bytes, bytearray, Mapping)
    )


def _hook_errors(items: Iterable[ValidationError | tuple[str, str]] | None) -> list[ValidationError]:
    """Normalize self_validate output to ValidationError records."""
    if not items:
        return []
    return [item if isinstance(item, ValidationError) else ValidationError(*item) for item in items]


class GraphWalker:
    """Walks one object and its descendants.

    Example:
        state = TraversalState(max_depth=256)
        errors = GraphWalker(order, TraversalContext.root(256), state).compute()
    """

    def __init__(
        self,
        target: object,
        context: TraversalContext,
        state: TraversalState,
    ) -> None:
        """Initialize walker.

        Args:
            target: Object to walk (None is skipped)
            context: Path prefix and remaining depth of this object
            state: Shared state of the current call
        """
        self._target = target
        self._context = context
        self._state = state

    def compute(self) -> tuple[ValidationError, ...]:
        """Walk the object graph below this walker's target.

        Returns:
            Violations found in this subtree, in discovery order
            (they are also appended to the shared aggregator)

        Raises:
            SchemaError: Misconfigured constraint schema anywhere in the subtree
        """
        mark = len(self._state.aggregator)

        # depth-first, children in discovery order
        stack: list[Iterator[GraphWalker]] = [self._steps()]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
            else:
                stack.append(child._steps())

        return self._state.aggregator.since(mark)

    def _steps(self) -> Iterator[GraphWalker]:
        """Walk this object, yielding a walker for every nested validatable value."""
        context = self._context
        aggregator = self._state.aggregator

        if context.exhausted:
            aggregator.add(ValidationError(field=context.prefix, reason=MAX_DEPTH_REACHED))
            return

        if self._target is None:
            return

        self._state.enter(context)

        if is_validatable(self._target):
            aggregator.extend(_hook_errors(self._target.self_validate(context.hook_prefix)))  # type: ignore[attr-defined]

        schema = discover(type(self._target), context)
        evaluator = FieldEvaluator(schema, self._target, context, aggregator.add)

        for descriptor in schema:
            evaluator.evaluate(descriptor)

            value = descriptor.value_of(self._target)
            key = descriptor.key

            if is_validatable(value):
                yield GraphWalker(value, context.child(key), self._state)

            if _is_traversable_collection(value):
                # index counts every element, validatable or not
                for index, element in enumerate(value):  # type: ignore[arg-type]
                    if is_validatable(element):
                        yield GraphWalker(element, context.element(key, index), self._state)

        self._state.fields_evaluated += evaluator.summary.field_count
