"""Validation processing exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from declcheck.domain.exceptions.base import DeclCheckError

if TYPE_CHECKING:
    from declcheck.domain.model.violation import ValidationError


class ProcessingError(DeclCheckError):
    """Target failed validation.

    Raised by validate() when at least one violation was collected.
    The only failure a well-formed schema produces against bad data.

    Attributes:
        errors: All violations in discovery order
    """

    def __init__(self, errors: tuple[ValidationError, ...]) -> None:
        if not errors:
            raise ValueError("ProcessingError requires at least one validation error")

        self.errors = tuple(errors)

        msg_parts = [f"Found {len(self.errors)} validation error(s):"]
        for error in self.errors:
            msg_parts.append(f"  {error}")

        super().__init__("\n".join(msg_parts))
