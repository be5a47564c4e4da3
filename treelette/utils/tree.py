from __future__ import annotations

"""Tree helpers (no side-effects).

iter_nodes(root) yields (depth, obj) depth-first, left to right.
build_rich_tree(root) returns a Rich *Tree* ready for printing.
total_line(total) renders the fixed total-price line.
"""
from typing import Any, Iterator, Tuple

from rich.markup import escape
from rich.tree import Tree

from treelette.core.decorating import DecoratingComposite
from treelette.core.leaf import PrintLeaf
from treelette.core.node import Node
from treelette.core.priced import Collection, PricedItem, Product
from treelette.utils.templates import TOTAL_TEMPLATE, render

__all__ = [
    "iter_nodes",
    "build_rich_tree",
    "total_line",
]

# --------------------------------------------------------------------------- #
# Core traverser
# --------------------------------------------------------------------------- #

def _members(obj: Any) -> list:
    if isinstance(obj, Collection):
        return list(obj)
    if isinstance(obj, Node) and obj.is_composite:
        return list(obj)
    return []


def iter_nodes(root: Any) -> Iterator[Tuple[int, Any]]:  # noqa: D401
    """Yield *(depth, obj)* for *root* and everything below it (DFS)."""

    def _walk(obj: Any, depth: int):
        yield depth, obj
        for child in _members(obj):
            yield from _walk(child, depth + 1)

    yield from _walk(root, 0)


# --------------------------------------------------------------------------- #
# Rich tree builder
# --------------------------------------------------------------------------- #

def _label(obj: Any, show_prices: bool) -> str:
    if isinstance(obj, PrintLeaf):
        return f"[cyan]{escape(obj.text)}[/]"
    if isinstance(obj, DecoratingComposite):
        return f"[magenta]{escape(obj.name)}[/] [dim]({escape(obj.before)} … {escape(obj.after)})[/]"
    if isinstance(obj, Node):
        return f"[magenta]{escape(obj.name)}[/]"
    if isinstance(obj, Product):
        return f"[cyan]{escape(obj.name)}[/]: {obj.price}" if show_prices else f"[cyan]{escape(obj.name)}[/]"
    if isinstance(obj, PricedItem):
        return f"[bold magenta]{escape(obj.name)}[/]: {obj.price}" if show_prices else f"[bold magenta]{escape(obj.name)}[/]"
    return f"[red]{escape(repr(obj))}[/]"


def build_rich_tree(root: Any, *, show_prices: bool = True) -> Tree:  # noqa: D401
    """Return a *rich.tree.Tree* visualisation of *root* (side-effect-free)."""
    tree = Tree(_label(root, show_prices))

    def _add(parent: Tree, obj: Any):
        for child in _members(obj):
            _add(parent.add(_label(child, show_prices)), child)

    _add(tree, root)
    return tree


def total_line(total: Any, template: str = TOTAL_TEMPLATE) -> str:  # noqa: D401
    """Return the summary line for *total*, e.g. ``Total is 1690``."""
    return render(template, {"total": total})
