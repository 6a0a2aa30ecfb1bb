"""
Exact pattern matching over a Burrows-Wheeler transform.
"""
from dataclasses import dataclass
from typing import List, Optional

from ..index.fm_index import RankIndex
from ..index.suffix_array import PartialSuffixArray
from ..transform.bwt import last_to_first


@dataclass(frozen=True)
class MatchRange:
    top: int        # first matching row of the sorted rotations
    bottom: int     # last matching row, inclusive

    @property
    def count(self) -> int:
        return self.bottom - self.top + 1

    def ranks(self) -> range:
        return range(self.top, self.bottom + 1)


def backward_search(rank_index: RankIndex, pattern: str) -> Optional[MatchRange]:
    """
    Narrow [top, bottom] one pattern symbol at a time, last symbol first.

    Returns the range of rows whose rotations start with pattern, or None when
    the pattern does not occur. An empty pattern matches every row.
    """
    top, bottom = 0, len(rank_index) - 1
    for symbol in reversed(pattern):
        if symbol not in rank_index:
            return None
        top_count = rank_index.count_symbol(symbol, top)
        bottom_count = rank_index.count_symbol(symbol, bottom + 1)
        if top_count == bottom_count:
            return None
        top = rank_index.first_occurrence[symbol] + top_count
        bottom = rank_index.first_occurrence[symbol] + bottom_count - 1
    if top > bottom:
        return None
    return MatchRange(top, bottom)


def count_matches(rank_index: RankIndex, pattern: str) -> int:
    match = backward_search(rank_index, pattern)
    return match.count if match else 0


def locate(rank_index: RankIndex, partial_suffix_array: PartialSuffixArray,
           match: Optional[MatchRange]) -> List[int]:
    """Text offsets of every row of a match range."""
    if match is None:
        return []
    return [partial_suffix_array.locate(rank_index, rank) for rank in match.ranks()]


def bw_matching(bwt: str, pattern: str, ltf: Optional[List[int]] = None) -> int:
    """
    Count occurrences of pattern using only the last column and the full
    last-to-first array: find the first and last row in [top, bottom] whose
    last symbol is the current pattern symbol and map both through the array.

    Scans the range for every symbol, so prefer backward_search() on a
    RankIndex for anything beyond small inputs.
    """
    if ltf is None:
        ltf = last_to_first(bwt)
    top, bottom = 0, len(bwt) - 1
    for symbol in reversed(pattern):
        rows = [pos for pos in range(top, bottom + 1) if bwt[pos] == symbol]
        if not rows:
            return 0
        top, bottom = ltf[rows[0]], ltf[rows[-1]]
    return bottom - top + 1
