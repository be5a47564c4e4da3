from __future__ import annotations
"""Minimal YAML → tree loader.

A declarative alternative to wiring nodes up in Python. View tree:

```yaml
nodes:                  # optional named nodes, reusable via {ref: name}
  world: world          # bare string → PrintLeaf
root:
  decorate: {before: NestedStart, after: NestedEnd}
  children:
    - children: [hello, {ref: world}]
    - children: [{ref: world}, js]
```

Priced tree:

```yaml
root:
  name: Purchase
  items:
    - name: Textile
      items:
        - {name: Bag, price: 50}
        - {name: Mouse pad, price: 5}
```

Usage:
    from treelette.yaml_loader import load_view, load_collection
    view = load_view("views.yml")
    purchase = load_collection("purchase.yml")

A ``ref`` yields the *same* object every time it is used, so shared children
behave exactly as when the tree is built in code.
"""
from pathlib import Path
from typing import Any, Callable, Dict, Set

import yaml
from jsonschema import validate

from treelette.core.composite import Composite
from treelette.core.decorating import DEFAULT_AFTER, DEFAULT_BEFORE, DecoratingComposite
from treelette.core.leaf import PrintLeaf
from treelette.core.node import Node
from treelette.core.priced import Collection, PricedItem, Product
from treelette.errors import TreeDefinitionError
from treelette.utils.logging import log

__all__ = ["load_view", "load_collection", "build_view", "build_collection"]


# --------------------------------------------------------------------------- #

class _Builder:  # noqa: D101 – resolves refs once, memoised
    def __init__(self, data: Dict[str, Any], make: Callable[["_Builder", Any], Any]):
        self.named: Dict[str, Any] = data.get("nodes") or {}
        self.make = make
        self.built: Dict[str, Any] = {}
        self._resolving: Set[str] = set()

    def node(self, spec: Any) -> Any:
        if isinstance(spec, dict) and "ref" in spec:
            return self.ref(spec["ref"])
        return self.make(self, spec)

    def ref(self, name: str) -> Any:
        if name in self.built:
            return self.built[name]
        if name not in self.named:
            raise TreeDefinitionError(f"Unknown node reference '{name}'")
        if name in self._resolving:
            raise TreeDefinitionError(f"Node reference '{name}' refers back to itself")
        self._resolving.add(name)
        try:
            obj = self.node(self.named[name])
        finally:
            self._resolving.discard(name)
        self.built[name] = obj
        return obj


def _make_view(b: _Builder, spec: Any) -> Node:
    if isinstance(spec, str):
        return PrintLeaf(spec)
    if "text" in spec:
        return PrintLeaf(spec["text"], id=spec.get("id"))
    children = [b.node(c) for c in spec["children"]]
    if "decorate" in spec:
        deco = spec["decorate"] or {}
        return DecoratingComposite(
            *children,
            before=deco.get("before", DEFAULT_BEFORE),
            after=deco.get("after", DEFAULT_AFTER),
            id=spec.get("id"),
            name=spec.get("name"),
        )
    return Composite(*children, id=spec.get("id"), name=spec.get("name"))


def _make_priced(b: _Builder, spec: Any) -> PricedItem:
    if "price" in spec:
        return Product(spec["name"], spec["price"])
    return Collection(spec["name"], *[b.node(item) for item in spec["items"]])


def build_view(data: Dict[str, Any]) -> Node:  # noqa: D401
    """Build a view tree from already-parsed *data*."""
    validate(instance=data, schema=_VIEW_SCHEMA)
    return _Builder(data, _make_view).node(data["root"])


def build_collection(data: Dict[str, Any]) -> PricedItem:  # noqa: D401
    """Build a priced tree from already-parsed *data*."""
    validate(instance=data, schema=_PRICED_SCHEMA)
    return _Builder(data, _make_priced).node(data["root"])


def load_view(path: str | Path) -> Node:  # noqa: D401
    """Load YAML file at *path* into a view tree."""
    log.debug("loading view tree from %s", path)
    return build_view(_read(path))


def load_collection(path: str | Path) -> PricedItem:  # noqa: D401
    """Load YAML file at *path* into a priced tree."""
    log.debug("loading priced tree from %s", path)
    return build_collection(_read(path))


def _read(path: str | Path) -> Dict[str, Any]:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise TreeDefinitionError(f"{path}: expected a mapping at top level")
    return data


# --------------------------------------------------------------------------- #
# JSON Schemas for YAML files
# --------------------------------------------------------------------------- #

_REF = {
    "type": "object",
    "required": ["ref"],
    "properties": {"ref": {"type": "string"}},
    "additionalProperties": False,
}

_VIEW_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["root"],
    "properties": {
        "nodes": {"type": "object", "additionalProperties": {"$ref": "#/$defs/node"}},
        "root": {"$ref": "#/$defs/node"},
    },
    "$defs": {
        "node": {
            "anyOf": [
                {"type": "string"},
                _REF,
                {
                    "type": "object",
                    "required": ["text"],
                    "properties": {"text": {"type": "string"}, "id": {"type": "string"}},
                    "additionalProperties": False,
                },
                {
                    "type": "object",
                    "required": ["children"],
                    "properties": {
                        "id": {"type": "string"},
                        "name": {"type": "string"},
                        "children": {"type": "array", "items": {"$ref": "#/$defs/node"}},
                        "decorate": {
                            "type": ["object", "null"],
                            "properties": {
                                "before": {"type": "string"},
                                "after": {"type": "string"},
                            },
                            "additionalProperties": False,
                        },
                    },
                    "additionalProperties": False,
                },
            ]
        }
    },
}

_PRICED_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["root"],
    "properties": {
        "nodes": {"type": "object", "additionalProperties": {"$ref": "#/$defs/item"}},
        "root": {"$ref": "#/$defs/item"},
    },
    "$defs": {
        "item": {
            "anyOf": [
                _REF,
                {
                    "type": "object",
                    "required": ["name", "price"],
                    "properties": {"name": {"type": "string"}, "price": {"type": "number"}},
                    "additionalProperties": False,
                },
                {
                    "type": "object",
                    "required": ["name", "items"],
                    "properties": {
                        "name": {"type": "string"},
                        "items": {"type": "array", "items": {"$ref": "#/$defs/item"}},
                    },
                    "additionalProperties": False,
                },
            ]
        }
    },
}
