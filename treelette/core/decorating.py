from __future__ import annotations
"""DecoratingComposite – Composite variant wrapping delegation in markers.

Emits a fixed *before* line, performs every child exactly like
:class:`Composite`, then emits a fixed *after* line. Nesting depth is not
tracked, so nested decorators produce flat output.
"""
from treelette.core.composite import Composite
from treelette.core.node import Node
from treelette.io.output import emit

__all__ = ["DecoratingComposite", "DEFAULT_BEFORE", "DEFAULT_AFTER"]

DEFAULT_BEFORE = "NestedStart"
DEFAULT_AFTER = "NestedEnd"


class DecoratingComposite(Composite):  # noqa: D101
    def __init__(
        self,
        *children: Node,
        before: str = DEFAULT_BEFORE,
        after: str = DEFAULT_AFTER,
        id: str | None = None,
        name: str | None = None,
    ):
        super().__init__(*children, id=id, name=name)
        self.before = before
        self.after = after

    # ------------------------------------------------------------------ #
    def perform(self) -> None:
        emit(self.before, source=self.id)
        super().perform()
        emit(self.after, source=self.id)
