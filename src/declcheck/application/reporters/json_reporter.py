"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from declcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from declcheck.domain.model.validation_result import ValidationResult
    from declcheck.domain.model.violation import ValidationError


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs validation results as JSON for CI/CD integration
    or parsing by other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: ValidationResult) -> None:
        """Report validation results as JSON.

        Args:
            result: Complete validation result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: ValidationResult) -> dict[str, object]:
        """Convert ValidationResult to JSON-serializable dict.

        Args:
            result: Validation result to convert

        Returns:
            Dictionary suitable for json.dump()
        """
        return {
            "passed": result.passed,
            "summary": {
                "error_count": result.error_count,
                "errors_found": result.stats.errors_found,
                "truncated": result.truncated,
            },
            "errors": [self._error_to_dict(e) for e in result.errors],
            "stats": {
                "objects_visited": result.stats.objects_visited,
                "fields_evaluated": result.stats.fields_evaluated,
                "max_depth_reached": result.stats.max_depth_reached,
                "validation_time_ms": result.stats.validation_time_ms,
            },
        }

    def _error_to_dict(self, error: ValidationError) -> dict[str, object]:
        """Convert ValidationError to JSON-serializable dict."""
        return {
            "field": error.field,
            "reason": error.reason,
        }
