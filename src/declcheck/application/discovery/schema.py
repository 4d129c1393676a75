"""Constraint metadata discovery.

Builds the Schema of a target type from ``typing.Annotated`` metadata and
checks it before any field is evaluated:

- every or/with name must resolve to a field of the same level
- with-dependencies must not form a cycle
"""

from __future__ import annotations

import logging
from typing import Annotated, get_origin, get_type_hints

from declcheck.domain.exceptions.schema import DependencyCycleError, InvalidFieldError
from declcheck.domain.model.constraints import Constraint
from declcheck.domain.model.context import TraversalContext
from declcheck.domain.model.field_descriptor import FieldDescriptor
from declcheck.domain.model.graph import detect_cycles
from declcheck.domain.model.schema import Schema
from declcheck.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _declarations(hint: object) -> tuple[Constraint, ...]:
    """Extract recognized declarations from an Annotated hint."""
    if get_origin(hint) is not Annotated:
        return ()
    return tuple(m for m in getattr(hint, "__metadata__", ()) if isinstance(m, Constraint))


def discover_fields(target_type: type) -> dict[str, FieldDescriptor]:
    """Collect constrained attributes across the full MRO.

    Base-class attributes come first. When two attributes share a key
    (alias collision), the later one replaces the earlier silently.

    Args:
        target_type: Runtime type of the validation target

    Returns:
        Key → descriptor, in declaration order
    """
    fields: dict[str, FieldDescriptor] = {}

    # get_type_hints walks reversed(__mro__): bases first, overrides keep their slot
    for name, hint in get_type_hints(target_type, include_extras=True).items():
        constraints = _declarations(hint)
        if not constraints:
            continue
        descriptor = FieldDescriptor(name=name, constraints=constraints)
        fields[descriptor.key] = descriptor

    return fields


def check_dependencies(schema: Schema, context: TraversalContext) -> None:
    """Validate or/with references of a schema.

    Args:
        schema: Schema to check
        context: Level the schema belongs to (for error paths)

    Raises:
        InvalidFieldError: A reference names no field of this level
        DependencyCycleError: with-dependencies form a cycle
    """
    for _key, name in schema.dependency_names():
        if name not in schema:
            raise InvalidFieldError(context.path(name))

    cycles = detect_cycles(schema.with_graph())
    if cycles:
        cycle = cycles[0]
        raise DependencyCycleError(context.path(min(cycle)), cycle)


def discover(target_type: type, context: TraversalContext | None = None) -> Schema:
    """Resolve and check the schema of a target type.

    Built fresh for every traversal level; nothing is cached across calls.

    Args:
        target_type: Runtime type of the validation target
        context: Traversal level (for error paths). Root if None.

    Returns:
        Checked Schema

    Raises:
        InvalidFieldError: A reference names no field of this level
        DependencyCycleError: with-dependencies form a cycle
    """
    context = context or TraversalContext(prefix="", depth=1)

    schema = Schema(owner=target_type, fields=discover_fields(target_type))
    check_dependencies(schema, context)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "schema.discovered",
            owner=target_type.__qualname__,
            prefix=context.prefix,
            fields=list(schema.fields),
        )
    return schema
