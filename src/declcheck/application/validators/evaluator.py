"""Field constraint evaluator for one traversal level."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from declcheck.application.validators._registry import validators_for
from declcheck.domain.model.summary import FieldValidationSummary
from declcheck.domain.model.violation import ValidationError

if TYPE_CHECKING:
    from declcheck.domain.model.context import TraversalContext
    from declcheck.domain.model.field_descriptor import FieldDescriptor
    from declcheck.domain.model.schema import Schema


class FieldEvaluator:
    """Evaluates the constraints of one object's fields.

    Each field is evaluated at most once; dependency lookups trigger
    evaluation on demand, so declaration order does not matter. Violations
    are emitted at the moment they are found.

    Example:
        evaluator = FieldEvaluator(schema, target, context, aggregator.add)
        for descriptor in schema:
            evaluator.evaluate(descriptor)
    """

    def __init__(
        self,
        schema: Schema,
        target: object,
        context: TraversalContext,
        emit: Callable[[ValidationError], None],
    ) -> None:
        """Initialize evaluator for one level.

        Args:
            schema: Checked schema of the target's type
            target: Object whose fields are evaluated
            context: Traversal level (for error paths)
            emit: Sink receiving violations in discovery order
        """
        self._schema = schema
        self._target = target
        self._context = context
        self._emit = emit
        self._summary = FieldValidationSummary()

    @property
    def summary(self) -> FieldValidationSummary:
        """Outcomes recorded so far at this level."""
        return self._summary

    def evaluate(self, descriptor: FieldDescriptor) -> None:
        """Evaluate all constraints of one field (no-op if already done).

        Raises:
            UnsupportedFieldError: Range declared on an unsupported value
        """
        key = descriptor.key
        if not self._summary.open(key):
            return

        value = descriptor.value_of(self._target)
        field_path = self._context.path(key)

        for validator in validators_for(descriptor):
            if not validator.applies_to(value):
                continue
            # failed until proven otherwise: re-entrant lookups see a failure
            self._summary.record(key, validator.kind, False)
            reason = validator.validate(value, field_path, self)
            self._summary.record(key, validator.kind, reason is None)
            if reason is not None:
                self._emit(ValidationError(field=field_path, reason=reason))

    def is_fully_valid(self, key: str) -> bool:
        """Evaluate ``key`` if needed and report whether all its constraints passed."""
        self.evaluate(self._schema[key])
        return self._summary.is_valid(key)
