from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from foldernav.utils.logging import TRACE_LEVEL

logger = logging.getLogger(__name__)


class EntrySet:
    """
    The names held by one folder. Names are unique; a plain dict keeps them
    in insertion order so listings come out the way entries were added.
    """

    EMPTY_MARKER = "(empty)"

    def __init__(self, names: Optional[Iterable[str]] = None):
        self.entries: dict[str, None] = {}
        if names:
            for name in names:
                self.insert(name)

    def insert(self, name: str) -> bool:
        """Add name. Returns False, leaving the set alone, if it is already present."""
        if name in self.entries:
            return False
        self.entries[name] = None
        return True

    def remove(self, name: str) -> bool:
        if name not in self.entries:
            return False
        del self.entries[name]
        return True

    def contains(self, name: str) -> bool:
        return name in self.entries

    def clear(self):
        """Remove every name."""
        self.entries.clear()

    def snapshot(self) -> "EntrySet":
        """
        Return an independent copy. Later changes to either set are not
        visible in the other.
        """
        copy = EntrySet()
        copy.entries = dict(self.entries)
        logger.log(TRACE_LEVEL, "Snapshot of %d entries taken", len(copy.entries))
        return copy

    def list(self) -> Iterator[str]:
        """
        Yield names in insertion order. Yields nothing for an empty set;
        callers show EMPTY_MARKER in that case.

        The keys are copied when iteration starts, so the set may be changed
        while a listing is in progress. Only the per-name yield is lazy.
        """
        for name in list(self.entries):
            yield name

    def __contains__(self, name):
        return name in self.entries

    def __iter__(self):
        return self.list()

    def __len__(self):
        return len(self.entries)

    def __eq__(self, other):
        if not isinstance(other, EntrySet):
            return NotImplemented
        return self.entries.keys() == other.entries.keys()

    def __repr__(self):
        return f"EntrySet({list(self.entries)})"
