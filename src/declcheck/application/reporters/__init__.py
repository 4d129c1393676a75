"""Reporters for validation results.

All reporters write to a stream (stdout by default). PlainTextReporter and
JSONReporter use stdlib only; ConsoleReporter renders with rich.
"""

from declcheck.application.reporters._base import BaseReporter
from declcheck.application.reporters.console import ConsoleReporter
from declcheck.application.reporters.json_reporter import JSONReporter
from declcheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleReporter",
]
