from __future__ import annotations

"""Priced items – aggregation variant of the composite tree.

A :class:`Product` carries a fixed price; a :class:`Collection` groups
products and other collections and derives its price from its members on
every access. Members are held with set semantics keyed by *identity*: the
same object added twice counts once, two equal-looking products count twice.
"""

from typing import Dict, Iterator, List, Literal, Union

from pydantic import BaseModel, Field

from treelette.errors import UnsupportedOperation

__all__ = ["PricedItem", "Product", "Collection", "ItemSnapshot", "Number"]

Number = Union[int, float]


class ItemSnapshot(BaseModel):
    """Structural dump of a priced item (and its members, recursively)."""

    kind: Literal["product", "collection"]
    name: str
    price: Number
    items: List["ItemSnapshot"] = Field(default_factory=list)


ItemSnapshot.model_rebuild()


class PricedItem:  # noqa: D101
    name: str

    @property
    def price(self) -> Number:
        raise UnsupportedOperation(self, "price")

    def snapshot(self) -> ItemSnapshot:
        raise UnsupportedOperation(self, "snapshot")


class Product(PricedItem):
    def __init__(self, name: str, price: Number):
        self._name = name
        self._price = price

    @property
    def name(self) -> str:  # type: ignore[override]
        return self._name

    @property
    def price(self) -> Number:
        return self._price

    def snapshot(self) -> ItemSnapshot:
        return ItemSnapshot(kind="product", name=self._name, price=self._price)

    def __repr__(self) -> str:
        return f"Product({self._name!r}, {self._price!r})"


class Collection(PricedItem):
    def __init__(self, name: str, *items: PricedItem):
        self._name = name
        # id(item) -> item; dicts keep insertion order, which only makes dumps
        # stable – callers must not rely on it.
        self._items: Dict[int, PricedItem] = {}
        for item in items:
            self.add(item)

    @property
    def name(self) -> str:  # type: ignore[override]
        return self._name

    # -------------------------------------------------- #

    def add(self, item: PricedItem) -> bool:
        """Add *item*; return ``False`` if that exact object is already a member."""
        key = id(item)
        if key in self._items:
            return False
        self._items[key] = item
        return True

    def discard(self, item: PricedItem) -> bool:
        return self._items.pop(id(item), None) is not None

    def __contains__(self, item: object) -> bool:
        return id(item) in self._items and self._items[id(item)] is item

    def __iter__(self) -> Iterator[PricedItem]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    # -------------------------------------------------- #

    @property
    def price(self) -> Number:
        total: Number = 0
        for item in self._items.values():
            total += item.price
        return total

    def snapshot(self) -> ItemSnapshot:
        return ItemSnapshot(
            kind="collection",
            name=self.name,
            price=self.price,
            items=[item.snapshot() for item in self._items.values()],
        )

    def __repr__(self) -> str:
        return f"Collection({self.name!r}, items={len(self._items)})"
