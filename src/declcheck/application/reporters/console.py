"""Console reporter: ValidationResult → rich formatted text."""

from __future__ import annotations

import sys
from io import StringIO
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.table import Table

from declcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from declcheck.domain.model.validation_result import ValidationResult


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    report() writes to the configured stream (stdout by default);
    render() returns the same text as a string.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        width: int = 120,
        show_stats: bool = True,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            width: Console width in characters
            show_stats: Render the traversal statistics line
        """
        self._output = output if output is not None else sys.stdout
        self._width = width
        self._show_stats = show_stats

    def report(self, result: ValidationResult) -> None:
        """Report validation results as rich formatted text.

        Args:
            result: Complete validation result
        """
        self._output.write(self.render(result))

    def render(self, result: ValidationResult) -> str:
        """Format validation result as rich formatted string.

        Args:
            result: Validation result to format.

        Returns:
            Formatted string with colors and a violations table.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._width, highlight=False)

        self._render_header(console, result)
        if result.errors:
            self._render_errors(console, result)
        if self._show_stats:
            self._render_stats(console, result)

        return output.getvalue()

    def _render_header(self, console: Console, result: ValidationResult) -> None:
        """Render header with status."""
        console.print()
        console.rule("[bold]VALIDATION RESULT[/bold]")
        console.print()

        if result.passed:
            console.print("[bold green]PASSED[/bold green]")
        else:
            console.print(f"[bold red]FAILED[/bold red] ({result.error_count} violation(s))")
        console.print()

    def _render_errors(self, console: Console, result: ValidationResult) -> None:
        """Render violations table."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Field", style="yellow")
        table.add_column("Reason")

        for error in result.errors:
            # empty path is the root object
            table.add_row(error.field or "<root>", error.reason)

        console.print(table)
        if result.truncated:
            console.print(f"[dim]{result.stats.errors_found - result.error_count} more not shown[/dim]")
        console.print()

    def _render_stats(self, console: Console, result: ValidationResult) -> None:
        """Render traversal statistics."""
        stats = result.stats
        console.print(
            f"[dim]objects={stats.objects_visited} fields={stats.fields_evaluated} "
            f"depth={stats.max_depth_reached} time={stats.validation_time_ms:.2f}ms[/dim]"
        )
