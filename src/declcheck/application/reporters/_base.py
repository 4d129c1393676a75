"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from declcheck.domain.model.validation_result import ValidationResult


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Concrete reporters must implement the report() method.

    Example:
        class MyReporter(BaseReporter):
            def report(self, result: ValidationResult) -> None:
                print(f"Violations: {result.error_count}")
    """

    @abstractmethod
    def report(self, result: ValidationResult) -> None:
        """Report validation results.

        Args:
            result: Complete validation result with violations and stats
        """
