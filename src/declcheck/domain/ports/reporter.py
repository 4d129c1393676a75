"""Reporter protocol for output formatting.

Users extend declcheck by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from declcheck.domain.model.validation_result import ValidationResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    declcheck provides PlainTextReporter, JSONReporter and ConsoleReporter.
    Users can implement HTMLReporter, JUnitReporter, etc.

    Example:
        class CountReporter:
            def report(self, result: ValidationResult) -> None:
                print(f"{result.error_count} violation(s)")
    """

    def report(self, result: ValidationResult) -> None:
        """Report validation results.

        Implementation decides output format and destination.

        Args:
            result: Complete validation result with violations and stats
        """
        ...
