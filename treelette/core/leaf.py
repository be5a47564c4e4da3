from __future__ import annotations

"""Leaf nodes – the ends of a view tree.

A leaf holds an immutable payload and acts on it directly when performed.
"""

from treelette.core.node import Node
from treelette.io.output import emit
from treelette.utils.ids import new_node_id

__all__ = ["Leaf", "PrintLeaf"]


class Leaf(Node):  # noqa: D101
    pass


class PrintLeaf(Leaf):
    """Leaf that emits its text as one output line."""

    def __init__(self, text: str, *, id: str | None = None):
        self._text = str(text)
        self.id = id or new_node_id("print_leaf", self._text)
        self.name = self._text

    @property
    def text(self) -> str:
        return self._text

    def perform(self) -> None:
        emit(self._text, source=self.id)

    def __repr__(self) -> str:
        return f"PrintLeaf({self._text!r})"
