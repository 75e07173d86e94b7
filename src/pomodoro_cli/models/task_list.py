"""Ordered list of free-text tasks."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .exceptions import TaskIndexError

logger = logging.getLogger(__name__)


class TaskList:
    """Insertion-ordered task entries.

    Entries are trimmed, non-empty strings. Duplicates are allowed.
    """

    def __init__(self, items: Iterable[str] | None = None):
        self._items: list[str] = []
        for item in items or ():
            self.add_task(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._items))

    def __getitem__(self, index: int) -> str:
        self._check_index(index)
        return self._items[index]

    def __repr__(self) -> str:
        return f"TaskList({self._items!r})"

    @property
    def items(self) -> tuple[str, ...]:
        """Snapshot of the current entries in display order."""
        return tuple(self._items)

    def add_task(self, text: str) -> str | None:
        """Append ``text`` after trimming it.

        Blank input is ignored. Returns the stored entry, or None when
        nothing was added.
        """
        entry = text.strip()
        if not entry:
            return None
        self._items.append(entry)
        logger.debug("task added at %d: %r", len(self._items) - 1, entry)
        return entry

    def remove_task_at(self, index: int) -> str:
        """Remove and return the entry at ``index`` (0-based display order)."""
        self._check_index(index)
        entry = self._items.pop(index)
        logger.debug("task removed at %d: %r", index, entry)
        return entry

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise TaskIndexError(index, len(self._items))
