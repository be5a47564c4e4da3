from __future__ import annotations
"""Composite – container node delegating ``perform`` to its children.

Children are kept in an ordered list. The same node may be added several
times or to several composites; nothing checks for cycles, so a composite
that (indirectly) contains itself recurses until Python gives up.
"""
from typing import Iterator, List, Tuple

from treelette.core.node import Node
from treelette.utils.events import ChildAdded, ChildRemoved, publish
from treelette.utils.ids import new_node_id
from treelette.utils.logging import log

__all__ = ["Composite"]


class Composite(Node):  # noqa: D101
    def __init__(self, *children: Node, id: str | None = None, name: str | None = None):
        self.id = id or new_node_id(type(self).__name__, name)
        self.name = name or self.id
        self._children: List[Node] = []
        for child in children:
            self.add(child)

    @property
    def is_composite(self) -> bool:
        return True

    @property
    def children(self) -> Tuple[Node, ...]:
        """Snapshot of the direct children, in insertion order."""
        return tuple(self._children)

    # -------------------------------------------------- #

    def add(self, child: Node) -> "Composite":
        self._children.append(child)
        log.debug("%s: added %s", self.id, getattr(child, "id", child))
        publish(ChildAdded(parent_id=self.id, child_id=getattr(child, "id", repr(child))))
        return self

    def remove(self, child: Node) -> bool:
        """Remove the first occurrence of *child* (by identity).

        Returns ``False`` instead of raising when *child* is not present.
        """
        for idx, existing in enumerate(self._children):
            if existing is child:
                del self._children[idx]
                found = True
                break
        else:
            found = False
        log.debug("%s: remove %s -> %s", self.id, getattr(child, "id", child), found)
        publish(ChildRemoved(parent_id=self.id, child_id=getattr(child, "id", repr(child)), found=found))
        return found

    # -------------------------------------------------- #

    def perform(self) -> None:
        for child in self._children:
            child.perform()

    def __iter__(self) -> Iterator[Node]:
        # Iterates a snapshot of the direct children taken at call time;
        # each call starts over.
        return iter(list(self._children))

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, children={len(self._children)})"
