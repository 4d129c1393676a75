"""Validatable capability consumed by the graph walker.

Objects opt into nested traversal and custom checks by exposing
self_validate(). Only values with this capability are recursed into.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from declcheck.domain.model.violation import ValidationError


@runtime_checkable
class ValidatableProtocol(Protocol):
    """Contract for validatable values.

    Example:
        @dataclass
        class Period(Validatable):
            start: Annotated[int | None, Required()] = None
            end: Annotated[int | None, Required()] = None

            def self_validate(self, path_prefix: str) -> list[ValidationError]:
                if self.start is not None and self.end is not None and self.start > self.end:
                    return [ValidationError(f"{path_prefix}end", "End precedes start.")]
                return []
    """

    def self_validate(
        self,
        path_prefix: str,
    ) -> Iterable[ValidationError | tuple[str, str]] | None:
        """Run custom checks beyond declarative constraints.

        Args:
            path_prefix: "" for the root object, otherwise the object's
                path followed by a dot (e.g. "items[0].")

        Returns:
            Violations found; None or empty means none
        """
        ...


class Validatable:
    """Base class implementing ValidatableProtocol with no custom checks."""

    def self_validate(
        self,
        path_prefix: str,
    ) -> Iterable[ValidationError | tuple[str, str]] | None:
        """No custom violations by default."""
        return ()


def is_validatable(value: object) -> bool:
    """Check if value exposes the validatable capability."""
    return not isinstance(value, type) and isinstance(value, ValidatableProtocol)
