from __future__ import annotations
"""Rich console & logger shared by treelette.

Plain log messages go through a ``RichHandler`` on *stderr* so that stdout
carries only what nodes emit and the structural dumps.
"""
from typing import Any
from logging import Logger, getLogger, INFO, DEBUG, WARNING, ERROR, basicConfig
from rich.console import Console
from rich.logging import RichHandler

__all__ = [
    "console",
    "get",
    "log",
    "show_tree",
]

console = Console()

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

# Configure root once with Rich handler for plain log messages
basicConfig(
    level=INFO,
    format="%(message)s",
    datefmt="%H:%M:%S",
    handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=True)],
)

log: Logger = getLogger("treelette")


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the package logger set to *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    lg = getLogger("treelette")
    lg.setLevel(lvl)
    return lg


def show_tree(root: Any, **kw) -> None:
    """Print the structure below *root* (view node or priced item)."""
    from treelette.utils.tree import build_rich_tree

    console.print(build_rich_tree(root, **kw))
