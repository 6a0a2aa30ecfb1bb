"""
Seed-and-extend approximate matching with at most d substitutions.

The pattern is split into d+1 seeds; every exact seed occurrence proposes a
start for the whole pattern, and each distinct start is verified against the
text. By pigeonhole an occurrence with at most d mismatches has at least one
seed without mismatches, so no occurrence is missed.
"""
import logging
from typing import Iterable, List, Set

from ..extend.verifier import Verifier
from ..index.fm_index import RankIndex
from ..index.suffix_array import PartialSuffixArray
from ..seed.fm_seed import SeedExtractor

logger = logging.getLogger(__name__)


def approximate_match(text: str, rank_index: RankIndex,
                      partial_suffix_array: PartialSuffixArray,
                      pattern: str, d: int) -> Set[int]:
    """
    Offsets where pattern occurs in text with at most d mismatches. An empty
    pattern has no positions.
    """
    extractor = SeedExtractor(rank_index, partial_suffix_array, d)
    verifier = Verifier(d)
    if not pattern:
        return set()
    candidates = extractor.candidates(pattern)
    starts = {start for start in candidates if verifier.accepts(pattern, text, start)}
    logger.debug("%s: %d candidates, %d accepted", pattern, len(candidates), len(starts))
    return starts


def approximate_match_all(text: str, rank_index: RankIndex,
                          partial_suffix_array: PartialSuffixArray,
                          patterns: Iterable[str], d: int) -> List[int]:
    """
    Positions of every pattern, merged and sorted. A position matched by
    several patterns appears once per pattern.
    """
    positions: List[int] = []
    for pattern in patterns:
        positions.extend(approximate_match(text, rank_index, partial_suffix_array, pattern, d))
    return sorted(positions)
