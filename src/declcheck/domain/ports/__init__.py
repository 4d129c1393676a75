"""Domain ports: contracts implemented by users or adapters."""

from declcheck.domain.ports.reporter import ReporterProtocol
from declcheck.domain.ports.validatable import Validatable, ValidatableProtocol, is_validatable

__all__ = [
    "ReporterProtocol",
    "Validatable",
    "ValidatableProtocol",
    "is_validatable",
]
