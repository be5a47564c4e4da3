from __future__ import annotations

"""Error types raised by treelette."""

__all__ = ["UnsupportedOperation", "TreeDefinitionError"]


class UnsupportedOperation(NotImplementedError):
    """A node variant was asked for a capability it does not provide.

    Raised by the base :class:`~treelette.core.node.Node` for ``perform()``
    and by leaves for ``add``/``remove``/iteration. Signals a programming
    error and is never caught inside the library.
    """

    def __init__(self, node: object, operation: str):
        self.node = node
        self.operation = operation
        super().__init__(f"{type(node).__name__} does not support '{operation}'")


class TreeDefinitionError(ValueError):  # noqa: D101
    pass
