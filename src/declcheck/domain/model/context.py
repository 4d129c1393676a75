"""Traversal context threaded through recursive walks."""

from __future__ import annotations

from dataclasses import dataclass


def join_path(prefix: str, name: str) -> str:
    """Compose a field path.

    Examples:
        join_path("", "x") -> "x"
        join_path("child", "x") -> "child.x"
        join_path("child", "") -> "child."
    """
    if prefix:
        return f"{prefix}.{name}"
    return name


@dataclass(frozen=True, slots=True)
class TraversalContext:
    """Position of one traversal level in the object graph.

    Immutable: each recursion derives a new context, nothing is shared.

    Attributes:
        prefix: Field path of the current object ("" for the root)
        depth: Remaining depth budget
    """

    prefix: str
    depth: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.prefix is None:
            raise TypeError("prefix must not be None")

    @classmethod
    def root(cls, max_depth: int) -> TraversalContext:
        """Context for the root object."""
        return cls(prefix="", depth=max_depth)

    @property
    def exhausted(self) -> bool:
        """Depth budget is used up."""
        return self.depth <= 0

    @property
    def hook_prefix(self) -> str:
        """Prefix handed to self_validate: "" at the root, "path." below."""
        return join_path(self.prefix, "")

    def path(self, name: str) -> str:
        """Path of a field of the current object."""
        return join_path(self.prefix, name)

    def child(self, name: str) -> TraversalContext:
        """Context for the object held by field ``name``."""
        return TraversalContext(prefix=self.path(name), depth=self.depth - 1)

    def element(self, name: str, index: int) -> TraversalContext:
        """Context for element ``index`` of the collection held by ``name``."""
        return TraversalContext(prefix=f"{self.path(name)}[{index}]", depth=self.depth - 1)
