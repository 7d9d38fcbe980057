"""Array-backed max-heap used to rank word counts."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class RankedEntry:
    """A word and its count, as held by a PriorityQueue."""

    word: str
    count: int
    index: int = -1  # Position in the heap array, -1 when not queued

    def outranks(self, other: "RankedEntry") -> bool:
        """Check if this entry should be extracted before ``other``.

        Higher counts come first. Equal counts fall back to the word in
        ascending order, so extraction order is reproducible.
        """
        if self.count != other.count:
            return self.count > other.count
        return self.word < other.word


class PriorityQueue:
    """Binary max-heap of RankedEntry ordered by count.

    Every entry outranks its children in the underlying array, so the
    root is always the highest-count entry still queued. Each entry's
    ``index`` tracks its array position so it can be updated in place.
    """

    def __init__(self, entries: Iterable[RankedEntry] = ()) -> None:
        self._items: list[RankedEntry] = list(entries)
        for i, entry in enumerate(self._items):
            entry.index = i
        self.heapify()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def heapify(self) -> None:
        """Establish the heap property over all entries in O(n)."""
        for i in reversed(range(len(self._items) // 2)):
            self._sift_down(i)

    def push(self, entry: RankedEntry) -> None:
        """Insert an entry, restoring the heap property in O(log n)."""
        entry.index = len(self._items)
        self._items.append(entry)
        self._sift_up(entry.index)

    def peek(self) -> RankedEntry:
        """Return the highest ranked entry without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._items:
            raise IndexError("peek from empty queue")
        return self._items[0]

    def pop(self) -> RankedEntry:
        """Remove and return the highest ranked entry.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._items:
            raise IndexError("pop from empty queue")
        last = len(self._items) - 1
        self._swap(0, last)
        entry = self._items.pop()
        entry.index = -1
        if self._items:
            self._sift_down(0)
        return entry

    def update(self, entry: RankedEntry, count: int) -> None:
        """Change the count of a queued entry and reposition it.

        Raises:
            ValueError: If the entry is not in this queue.
        """
        if not 0 <= entry.index < len(self._items) or self._items[entry.index] is not entry:
            raise ValueError(f"Entry not in queue: {entry.word}")
        entry.count = count
        self.fix(entry.index)

    def fix(self, i: int) -> None:
        """Restore the heap property after the entry at ``i`` changed."""
        if not self._sift_down(i):
            self._sift_up(i)

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]
        items[i].index = i
        items[j].index = j

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._items[i].outranks(self._items[parent]):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> bool:
        """Move entry ``i`` down to its place. Returns True if it moved."""
        start = i
        n = len(self._items)
        while True:
            best = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and self._items[child].outranks(self._items[best]):
                    best = child
            if best == i:
                break
            self._swap(i, best)
            i = best
        return i > start
