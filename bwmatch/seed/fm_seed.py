from dataclasses import dataclass
from typing import List, Tuple

from ..index.fm_index import RankIndex
from ..index.suffix_array import PartialSuffixArray
from ..search.backward import backward_search, locate


@dataclass(frozen=True)
class Seed:
    sequence: str
    offset: int     # start of the seed within the pattern


def split_seeds(pattern: str, d: int) -> List[Seed]:
    """
    Cut pattern into d+1 seeds. Seeds 0..d-1 are len(pattern) // (d+1) long and
    the last one takes the remainder, so an occurrence with at most d
    mismatches leaves at least one seed matching exactly.
    """
    if d < 0:
        raise ValueError(f"Maximum mismatches must be >= 0, got {d}")
    seed_len = len(pattern) // (d + 1)
    seeds = [Seed(pattern[i * seed_len:(i + 1) * seed_len], i * seed_len) for i in range(d)]
    seeds.append(Seed(pattern[d * seed_len:], d * seed_len))
    return seeds


class SeedExtractor:
    """
    Exact seeding on top of a RankIndex.
    seed_pattern(pattern) -> List[(text_pos, pattern_offset)]
    """
    def __init__(self, rank_index: RankIndex, partial_suffix_array: PartialSuffixArray, d: int):
        self.fm = rank_index
        self.psa = partial_suffix_array
        self.d = d

    def seed_pattern(self, pattern: str) -> List[Tuple[int, int]]:
        hits = []
        for seed in split_seeds(pattern, self.d):
            match = backward_search(self.fm, seed.sequence)
            for pos in locate(self.fm, self.psa, match):
                hits.append((pos, seed.offset))
        return hits

    def candidates(self, pattern: str) -> List[int]:
        """Distinct pattern start offsets implied by the seed hits, ascending."""
        starts = {pos - offset for pos, offset in self.seed_pattern(pattern)}
        return sorted(start for start in starts if start >= 0)
