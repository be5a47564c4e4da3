from __future__ import annotations
"""Ultra-lightweight pub/sub **EventBus** used by nodes and the output boundary.

Example
-------
```python
from treelette.utils.events import subscribe, publish, LineEmitted

@subscribe(LineEmitted)
def _on_line(evt: LineEmitted):
    print(f"{evt.source} said {evt.line!r}")

publish(LineEmitted(line="hello", source="hello"))
```
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

__all__ = [
    "Event",
    "LineEmitted",
    "ChildAdded",
    "ChildRemoved",
    "subscribe",
    "unsubscribe",
    "publish",
]

T = TypeVar("T", bound="Event")
_Handler = Callable[[Any], None]
_REGISTRY: Dict[Type["Event"], List[_Handler]] = {}


@dataclass(slots=True, kw_only=True)
class Event:  # noqa: D101 – base event
    ts: datetime = field(default_factory=datetime.now)


# --------------------------------------------------------------------------- #
# Concrete events
# --------------------------------------------------------------------------- #
@dataclass(slots=True)
class LineEmitted(Event):
    line: str
    source: Optional[str] = None  # id of the emitting node


@dataclass(slots=True)
class ChildAdded(Event):
    parent_id: str
    child_id: str


@dataclass(slots=True)
class ChildRemoved(Event):
    parent_id: str
    child_id: str
    found: bool


# --------------------------------------------------------------------------- #
# API helpers
# --------------------------------------------------------------------------- #

def subscribe(event_type: Type[T]):  # noqa: D401
    """Decorator: register *func* to receive *event_type* events."""

    def _decorator(func: _Handler) -> _Handler:
        _REGISTRY.setdefault(event_type, []).append(func)
        return func

    return _decorator


def unsubscribe(event_type: Type[T], func: _Handler) -> None:
    handlers = _REGISTRY.get(event_type, [])
    if func in handlers:
        handlers.remove(func)


def publish(evt: Event) -> None:  # noqa: D401
    """Publish an event to all registered subscribers."""
    for func in list(_REGISTRY.get(type(evt), [])):
        try:
            func(evt)
        except Exception as e:  # noqa: BLE001
            # A broken subscriber must not interrupt a traversal.
            from treelette.utils.logging import log

            log.warning("event handler %s failed: %s", getattr(func, "__name__", func), e)
