from __future__ import annotations

"""Base Node class for treelette view trees."""

from typing import Iterator

from treelette.errors import UnsupportedOperation

__all__ = ["Node"]


class Node:  # noqa: D101 – minimalist base class
    id: str
    name: str

    @property
    def is_composite(self) -> bool:
        return False

    def perform(self) -> None:
        """Run the node's action (leaf) or delegate it to the children (composite)."""
        raise UnsupportedOperation(self, "perform")

    # Container operations live on the base so every node shares one
    # interface; only composites implement them.
    def add(self, child: "Node") -> "Node":
        raise UnsupportedOperation(self, "add")

    def remove(self, child: "Node") -> bool:
        raise UnsupportedOperation(self, "remove")

    def __iter__(self) -> Iterator["Node"]:
        raise UnsupportedOperation(self, "iterate")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={getattr(self, 'id', '?')!r})"
