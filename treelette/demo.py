from __future__ import annotations

"""Demonstration scenarios.

``run_views`` shows that leaves and composites are driven through the same
``perform()`` call; ``run_purchase`` shows prices aggregating through nested
collections.
"""

from typing import Dict

from treelette.core.composite import Composite
from treelette.core.decorating import DecoratingComposite
from treelette.core.leaf import PrintLeaf
from treelette.core.node import Node
from treelette.core.priced import Collection, PricedItem, Product
from treelette.io.output import emit
from treelette.utils.logging import console, show_tree
from treelette.utils.tree import total_line

__all__ = ["build_views", "run_views", "build_purchase", "run_purchase", "perform_group"]


def build_views() -> Dict[str, Node]:
    """Return the demo view nodes keyed by name (``nested`` is the root)."""
    hello = PrintLeaf("hello")
    world = PrintLeaf("world")
    js = PrintLeaf("js")

    hello_view = Composite(hello, world, name="helloView")
    # world is shared with hello_view on purpose
    js_view = Composite(world, js, name="jsView")
    nested = DecoratingComposite(hello_view, js_view, name="nestedView")

    return {
        "hello": hello,
        "world": world,
        "js": js,
        "hello_view": hello_view,
        "js_view": js_view,
        "nested": nested,
    }


def perform_group(title: str, node: Node, *, iterate: bool = False) -> None:
    """Print a heading, perform *node* (or each direct child), then a blank line."""
    console.rule(f"[bold cyan]{title}[/]", align="left", style="cyan")
    if iterate:
        for child in node:
            child.perform()
    else:
        node.perform()
    console.print()


def run_views() -> Dict[str, Node]:
    views = build_views()
    perform_group("Leaf component .perform()", views["hello"])
    perform_group("Composite component .perform()", views["hello_view"])
    perform_group("Another Composite component .perform()", views["js_view"])
    perform_group("Composite of composites component .perform()", views["nested"])
    perform_group("Composite of composites component iterate children", views["nested"], iterate=True)
    return views


def build_purchase() -> Collection:
    electronics = Collection(
        "Electronics",
        Product("Laptop", 1500),
        Product("Mouse", 25),
        Product("Keyboard", 100),
        Product("HDMI cable", 10),
    )
    textile = Collection(
        "Textile",
        Product("Bag", 50),
        Product("Mouse pad", 5),
    )
    return Collection("Purchase", electronics, textile)


def run_purchase(purchase: PricedItem | None = None, *, as_json: bool = False) -> PricedItem:
    """Dump the structure of *purchase* and emit its total line."""
    purchase = purchase if purchase is not None else build_purchase()
    if as_json:
        console.print_json(purchase.snapshot().model_dump_json())
    else:
        show_tree(purchase)
    emit(total_line(purchase.price), source=purchase.name)
    return purchase
