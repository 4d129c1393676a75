"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from declcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from declcheck.domain.model.validation_result import ValidationResult
    from declcheck.domain.model.violation import ValidationError


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    One ``field\\t -> reason`` line per violation, then a summary.
    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: ValidationResult) -> None:
        """Report validation results as plain text.

        Args:
            result: Complete validation result
        """
        self._report_header()

        if result.errors:
            self._report_errors(result.errors)

        self._report_summary(result)
        self._report_footer(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_header(self) -> None:
        """Print report header."""
        self._write("=" * 70)
        self._write("Validation Results")
        self._write("=" * 70)

    def _report_errors(self, errors: tuple[ValidationError, ...]) -> None:
        """Print violations section."""
        self._write()
        for error in errors:
            self._write(f"{error.field}\t -> {error.reason}")

    def _report_summary(self, result: ValidationResult) -> None:
        """Print summary section."""
        stats = result.stats
        self._write()
        self._write("Summary:")
        self._write(f"  Violations: {result.error_count}")
        if result.truncated:
            self._write(f"    Found: {stats.errors_found} (truncated)")
        self._write(f"  Objects: {stats.objects_visited}")
        self._write(f"  Fields: {stats.fields_evaluated}")
        self._write(f"  Depth: {stats.max_depth_reached}")
        self._write(f"  Time: {stats.validation_time_ms:.2f} ms")

    def _report_footer(self, result: ValidationResult) -> None:
        """Print report footer."""
        self._write()
        self._write("=" * 70)
        status = "PASSED" if result.passed else "FAILED"
        self._write(f"Result: {status}")
        self._write("=" * 70)
