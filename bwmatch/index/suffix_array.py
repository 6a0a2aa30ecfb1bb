# index/suffix_array.py
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..errors import InconsistentIndex

logger = logging.getLogger(__name__)


def build_suffix_array(s: str) -> List[int]:
    """
    Suffix array by prefix doubling: suffixes are ranked by their first
    width symbols, then re-sorted on (rank of first width, rank of next
    width) pairs with width doubled each round until all ranks are distinct.
    A suffix that runs out of symbols ranks below every symbol, which matches
    plain string ordering.
    """
    n = len(s)
    if n == 0:
        return []
    alphabet = {symbol: code for code, symbol in enumerate(sorted(set(s)))}
    ranks = [alphabet[symbol] for symbol in s]
    order = list(range(n))
    width = 1
    while True:
        keys = [(ranks[i], ranks[i + width] if i + width < n else -1) for i in range(n)]
        order.sort(key=keys.__getitem__)
        distinct = 0
        ranks = [0] * n
        for prev, cur in zip(order, order[1:]):
            if keys[cur] != keys[prev]:
                distinct += 1
            ranks[cur] = distinct
        if distinct == n - 1:
            return order
        width *= 2


@dataclass(frozen=True)
class PartialSuffixArray:
    """
    Sparse suffix array: maps a suffix-array rank to its text offset, only for
    the ranks whose offset is a multiple of k.
    """
    length: int
    entries: Dict[int, int] = field(default_factory=dict)
    k: Optional[int] = None     # unknown when loaded from rank,offset pairs

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, int]], length: int,
                   k: Optional[int] = None) -> "PartialSuffixArray":
        return cls(length=length, entries=dict(pairs), k=k)

    def __contains__(self, rank: int) -> bool:
        return rank in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def offset(self, rank: int) -> int:
        return self.entries[rank]

    def items(self) -> List[Tuple[int, int]]:
        """(rank, offset) pairs in rank order."""
        return sorted(self.entries.items())

    def locate(self, rank_index, rank: int) -> int:
        """
        Text offset of the suffix at `rank`.

        Unsampled ranks are walked back with last-to-first steps (each step
        moves one symbol towards the start of the text) until a sampled rank is
        reached; the number of steps is added to that rank's offset.
        """
        steps = 0
        while rank not in self.entries:
            if steps >= self.length:
                raise InconsistentIndex(
                    f"no sampled rank reachable from rank {rank} within {self.length} steps"
                )
            rank = rank_index.last_to_first(rank)
            steps += 1
        return self.entries[rank] + steps


def build_partial_suffix_array(text: str, k: int) -> PartialSuffixArray:
    if k < 1:
        raise ValueError(f"k must be a positive integer, got {k}")
    sa = build_suffix_array(text)
    entries = {rank: offset for rank, offset in enumerate(sa) if offset % k == 0}
    logger.debug("partial suffix array: kept %d of %d entries (k=%d)", len(entries), len(sa), k)
    return PartialSuffixArray(length=len(text), entries=entries, k=k)
