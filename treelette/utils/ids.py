from __future__ import annotations

"""treelette.utils.ids
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Tiny helpers for consistent node identifiers.

Nodes built without an explicit ``id`` get one derived from their class and
payload, e.g. ``print_leaf_hello_3``.
"""

import itertools
import re

__all__ = ["snake_case", "new_node_id"]

_PATTERN = re.compile(r"[^a-zA-Z0-9]+")
_CAMEL = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_COUNTER = itertools.count(1)


def snake_case(text: str) -> str:  # noqa: D401
    """Return *text* converted to ``snake_case``.

    * CamelCase boundaries become ``_``
    * non‑alphanumeric chars become ``_``
    * multiple underscores are squeezed
    * leading/trailing underscores are stripped
    * everything lower‑cased
    """

    s = _CAMEL.sub("_", text)
    s = _PATTERN.sub("_", s)
    s = re.sub(r"_+", "_", s)
    return s.strip("_").lower()


def new_node_id(kind: str, label: str | None = None) -> str:
    """Return a process-unique id such as ``composite_7``."""
    parts = [snake_case(kind)]
    if label:
        parts.append(snake_case(label)[:24])
    parts.append(str(next(_COUNTER)))
    return "_".join(p for p in parts if p)
