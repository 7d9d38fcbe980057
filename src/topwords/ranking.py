"""Top-N selection of word counts."""

import logging
from dataclasses import dataclass, field

from .counter import WordCount, count_words
from .heap import PriorityQueue, RankedEntry

log = logging.getLogger(__name__)

# Number of words reported when the caller does not ask for a specific amount
DEFAULT_TOP_N = 10


@dataclass
class RankingResult:
    """Ranked words, most frequent first."""

    requested: int
    entries: list[tuple[str, int]] = field(default_factory=list)

    @property
    def returned(self) -> int:
        """Number of entries actually returned."""
        return len(self.entries)

    @property
    def truncated(self) -> bool:
        """True when fewer words were available than requested."""
        return self.returned < self.requested


def build_queue(counts: WordCount) -> PriorityQueue:
    """Put every word count into a priority queue.

    The heap is built in one pass over all entries rather than by
    inserting them one at a time.
    """
    return PriorityQueue(RankedEntry(word, count) for word, count in counts.items())


def top_n(counts: WordCount, n: int = DEFAULT_TOP_N) -> RankingResult:
    """Select the ``n`` most frequent words.

    Only ``min(n, len(counts))`` entries are extracted from the heap, so
    the vocabulary is never fully sorted.

    Args:
        counts: Map of word to occurrence count.
        n: Number of words requested.

    Returns:
        RankingResult with entries in non-increasing count order. If fewer
        than ``n`` words exist, the result is marked truncated.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Number of words must be non-negative, got {n}")

    queue = build_queue(counts)
    log.debug("Built queue over %d distinct words", len(queue))

    take = n
    if len(queue) < n:
        log.info("There are fewer words than %d, retrieving %d instead", n, len(queue))
        take = len(queue)

    entries = []
    for _ in range(take):
        entry = queue.pop()
        entries.append((entry.word, entry.count))

    return RankingResult(requested=n, entries=entries)


def rank_text(text: str, n: int = DEFAULT_TOP_N) -> RankingResult:
    """Count the words of ``text`` and return its ``n`` most frequent."""
    return top_n(count_words(text), n)
