"""Immutable directed graph of field dependencies.

Includes cycle detection using stdlib graphlib.TopologicalSorter.
"""

from __future__ import annotations

from dataclasses import dataclass
from graphlib import CycleError, TopologicalSorter
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DiGraph(Generic[T]):
    """Immutable directed graph.

    Invariants (FAIL-FIRST):
    - All nodes in edges must be in nodes set

    Attributes:
        forward: Node → set of successors (outgoing edges)
        nodes: All nodes in graph (including isolated)
    """

    forward: Mapping[T, frozenset[T]]
    nodes: frozenset[T]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for node, successors in self.forward.items():
            if node not in self.nodes:
                raise ValueError(f"forward key '{node}' not in nodes")
            for succ in successors:
                if succ not in self.nodes:
                    raise ValueError(f"successor '{succ}' of '{node}' not in nodes")

    def successors(self, node: T) -> frozenset[T]:
        """Get direct successors (outgoing edges). O(1)."""
        return self.forward.get(node, frozenset())

    @property
    def node_count(self) -> int:
        """Get total number of nodes."""
        return len(self.nodes)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        extra_nodes: Iterable[T] | None = None,
    ) -> DiGraph[T]:
        """Build graph from edge iterable.

        Args:
            edges: Iterable of (from, to) tuples
            extra_nodes: Additional isolated nodes to include

        Returns:
            DiGraph with all edges and nodes
        """
        forward: dict[T, set[T]] = {}
        nodes: set[T] = set()

        for from_node, to_node in edges:
            nodes.add(from_node)
            nodes.add(to_node)
            forward.setdefault(from_node, set()).add(to_node)

        if extra_nodes is not None:
            nodes.update(extra_nodes)

        return cls(
            forward={k: frozenset(v) for k, v in forward.items()},
            nodes=frozenset(nodes),
        )


def detect_cycles(graph: DiGraph[T]) -> tuple[frozenset[T], ...]:
    """Detect cycles in directed graph using graphlib.TopologicalSorter.

    Args:
        graph: Directed graph to check

    Returns:
        Empty tuple if no cycles.
        Tuple of frozensets, each containing nodes in a cycle.

    Note:
        graphlib.TopologicalSorter only reports ONE cycle when several exist.
        Rejecting a schema needs only one.
    """
    if graph.node_count == 0:
        return ()

    # successors act as graphlib "dependencies": a field is evaluated after its with_fields
    adjacency: dict[T, set[T]] = {node: set(graph.successors(node)) for node in graph.nodes}

    ts: TopologicalSorter[T] = TopologicalSorter(adjacency)
    try:
        tuple(ts.static_order())
        return ()
    except CycleError as e:
        # e.args[1] is the cycle path: [a, b, c, a]
        return (frozenset(e.args[1]),)
