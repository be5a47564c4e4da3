"""treelette utilities."""

from .ids import snake_case, new_node_id
from .templates import render

__all__ = [
    "snake_case",
    "new_node_id",
    "render",
]
