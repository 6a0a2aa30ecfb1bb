"""
bwmatch - Burrows-Wheeler transform indexing and pattern matching

Modules:
    - transform.bwt: transform construction, inversion, last-to-first array
    - index.fm_index: checkpointed rank index over a transform
    - index.suffix_array: suffix array and partial suffix array
    - search.backward: exact backward search
    - search.approximate: seed-and-extend matching with at most d mismatches
"""

from .errors import MalformedInput, InconsistentIndex
from .transform.bwt import transform, transform_from_suffix_array, invert, last_to_first, count_runs
from .index.suffix_array import PartialSuffixArray, build_suffix_array, build_partial_suffix_array
from .index.fm_index import RankIndex, build_index
from .search.backward import MatchRange, backward_search, count_matches, bw_matching
from .search.approximate import approximate_match, approximate_match_all

__version__ = "0.1.0"
__all__ = [
    "MalformedInput",
    "InconsistentIndex",
    "transform",
    "transform_from_suffix_array",
    "invert",
    "last_to_first",
    "count_runs",
    "PartialSuffixArray",
    "build_suffix_array",
    "build_partial_suffix_array",
    "RankIndex",
    "build_index",
    "MatchRange",
    "backward_search",
    "count_matches",
    "bw_matching",
    "approximate_match",
    "approximate_match_all",
]
