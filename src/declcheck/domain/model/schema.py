"""Schema: the constrained fields of one target type."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from declcheck.domain.model.field_descriptor import FieldDescriptor
from declcheck.domain.model.graph import DiGraph


@dataclass(frozen=True, slots=True)
class Schema:
    """Name → descriptor map for one traversal level.

    Keys are descriptor keys (alias or attribute name), in MRO declaration
    order, base classes first.

    Attributes:
        owner: Type the schema was discovered on
        fields: Key → descriptor
    """

    owner: type
    fields: Mapping[str, FieldDescriptor]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.owner is None:
            raise TypeError("owner must not be None")
        for key, descriptor in self.fields.items():
            if key != descriptor.key:
                raise ValueError(f"schema key '{key}' does not match descriptor key '{descriptor.key}'")

    def __getitem__(self, key: str) -> FieldDescriptor:
        return self.fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields.values())

    def dependency_names(self) -> Iterator[tuple[str, str]]:
        """Yield (field key, referenced name) for every or/with reference."""
        for descriptor in self:
            required = descriptor.required
            if required is None:
                continue
            for name in (*required.or_fields, *required.with_fields):
                yield descriptor.key, name

    def with_graph(self) -> DiGraph[str]:
        """Graph of with-dependencies: key → keys it requires to be valid."""
        edges = [
            (descriptor.key, name)
            for descriptor in self
            if descriptor.required is not None
            for name in descriptor.required.with_fields
        ]
        return DiGraph.from_edges(edges, extra_nodes=self.fields.keys())
