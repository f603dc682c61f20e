"""FIFO buffer holding entries until they are thrown or flushed.

Purpose
-------
Keep pending :class:`LogEntry` objects in arrival order and hand them out one
at a time during dispatch.

Contents
--------
* :class:`MessageBuffer` with append, drain and snapshot helpers.

System Role
-----------
Owned exclusively by :class:`log_stack.LogStack`. The buffer is unbounded and
lives only in memory.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator

from .entry import LogEntry


class MessageBuffer:
    """Growable first-in/first-out queue of :class:`LogEntry` objects."""

    def __init__(self) -> None:
        self._entries: Deque[LogEntry] = deque()

    def append(self, entry: LogEntry) -> None:
        """Add ``entry`` at the tail."""

        self._entries.append(entry)

    def extend(self, entries: Iterable[LogEntry]) -> None:
        """Append a sequence of entries preserving their order."""
        for entry in entries:
            self.append(entry)

    def drain(self) -> Iterator[LogEntry]:
        """Yield entries oldest first, removing each before it is yielded.

        Entries appended while draining are yielded as well. Abandoning the
        iterator leaves the not-yet-yielded entries in place.

        Examples
        --------
        >>> buffer = MessageBuffer()
        >>> buffer.extend([LogEntry("info", "a"), LogEntry("info", "b")])
        >>> drained = buffer.drain()
        >>> next(drained).message, len(buffer)
        ('a', 1)
        """
        while self._entries:
            yield self._entries.popleft()

    def snapshot(self) -> list[LogEntry]:
        """Return a copy of the pending entries."""

        return list(self._entries)

    def clear(self) -> int:
        """Discard every pending entry and return how many were dropped."""
        count = len(self._entries)
        self._entries.clear()
        return count

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["MessageBuffer"]
