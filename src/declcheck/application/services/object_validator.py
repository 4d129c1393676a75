"""Main facade for object-graph validation.

ObjectValidator is the primary entry point for running a validation.
Composition-based: accepts configuration and an optional reporter.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from declcheck.application.services.walker import GraphWalker, TraversalState
from declcheck.domain.model.configuration import ValidatorConfig
from declcheck.domain.model.context import TraversalContext
from declcheck.domain.model.validation_result import ValidationResult
from declcheck.domain.model.validation_stats import ValidationStats
from declcheck.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from declcheck.domain.ports.reporter import ReporterProtocol

logger = get_logger(__name__)


class ObjectValidator:
    """Main facade for object-graph validation.

    Each call builds its own traversal state, so one validator can be used
    from several threads on independent targets.

    Example:
        validator = ObjectValidator(ValidatorConfig(max_depth=32))
        result = validator.check(order)
        if not result.passed:
            for error in result.errors:
                print(error)
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize validator.

        Args:
            config: Validation configuration (defaults if None)
            reporter: Optional reporter called with every result
        """
        self._config = config or ValidatorConfig()
        self._reporter = reporter

    @property
    def config(self) -> ValidatorConfig:
        """Active configuration."""
        return self._config

    def check(self, target: object) -> ValidationResult:
        """Validate an object graph and return the result.

        Reports result if reporter is configured.

        Args:
            target: Root object

        Returns:
            ValidationResult with violations and stats

        Raises:
            SchemaError: Misconfigured constraint schema (never collected)
        """
        start_time = time.perf_counter()
        logger.debug("validation.started", target=type(target).__qualname__)

        state = TraversalState(max_depth=self._config.max_depth)
        errors = GraphWalker(target, TraversalContext.root(self._config.max_depth), state).compute()
        if self._config.has_error_cap():
            errors = errors[: self._config.max_errors]

        stats = self._build_stats(state, time.perf_counter() - start_time)
        result = ValidationResult(errors=errors, stats=stats)

        logger.debug(
            "validation.finished",
            target=type(target).__qualname__,
            errors=stats.errors_found,
            objects=stats.objects_visited,
            time_ms=stats.validation_time_ms,
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def validate(self, target: object) -> None:
        """Validate an object graph, raising on violations.

        Args:
            target: Root object

        Raises:
            ProcessingError: At least one violation found
            SchemaError: Misconfigured constraint schema
        """
        self.check(target).raise_if_failed()

    def _build_stats(self, state: TraversalState, elapsed_s: float) -> ValidationStats:
        """Build validation statistics.

        Args:
            state: Finished traversal state
            elapsed_s: Validation time in seconds

        Returns:
            ValidationStats for the call
        """
        return ValidationStats(
            objects_visited=state.objects_visited,
            fields_evaluated=state.fields_evaluated,
            max_depth_reached=state.max_depth_reached,
            errors_found=len(state.aggregator),
            validation_time_ms=elapsed_s * 1000,
        )
