from __future__ import annotations

"""Line output boundary.

Everything a node *performs* ends up here: one call to :func:`emit` per line.
The line is published as a :class:`LineEmitted` event (so callers can record
it) and printed verbatim to the shared console.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

from treelette.utils.events import LineEmitted, publish, subscribe, unsubscribe
from treelette.utils.logging import console

__all__ = ["emit", "record"]


def emit(line: str, *, source: Optional[str] = None) -> None:
    """Publish *line* and write it to the console stream exactly as given."""
    publish(LineEmitted(line=line, source=source))
    # Bypasses rich rendering: the stream receives the payload unchanged.
    console.file.write(line + "\n")


@contextmanager
def record() -> Iterator[List[str]]:
    """Collect every emitted line while the block runs.

    Usage::

        with record() as lines:
            view.perform()
        assert lines == ["hello", "world"]
    """
    lines: List[str] = []

    def _collect(evt: LineEmitted) -> None:
        lines.append(evt.line)

    subscribe(LineEmitted)(_collect)
    try:
        yield lines
    finally:
        unsubscribe(LineEmitted, _collect)
