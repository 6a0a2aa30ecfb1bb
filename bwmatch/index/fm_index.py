# index/fm_index.py
import logging
from typing import Dict, List

import numpy as np

from ..constants.constants import CHECKPOINT_INTERVAL
from ..errors import InconsistentIndex
from ..transform.bwt import transform

logger = logging.getLogger(__name__)


class RankIndex:
    """
    Rank structures over a Burrows-Wheeler transform: first occurrence of each
    symbol in the first column, plus symbol counts checkpointed every `step`
    positions of the last column.

    Symbols are mapped once to dense codes 0..|alphabet|-1 so the transform is
    a numpy code array and the checkpoints a (rows, |alphabet|) table. Row r
    holds the counts of every symbol in bwt[0 : r*step]; there is one row per
    multiple of step up to n inclusive.
    """
    def __init__(self, bwt: str, step: int = CHECKPOINT_INTERVAL):
        if step < 1:
            raise ValueError(f"Checkpoint interval must be a positive integer, got {step}")
        self.bwt = bwt
        self.n = len(bwt)
        self.step = step
        self.alphabet: List[str] = sorted(set(bwt))
        self.code: Dict[str, int] = {ch: i for i, ch in enumerate(self.alphabet)}
        self.codes = np.fromiter((self.code[ch] for ch in bwt), dtype=np.int32, count=self.n)
        self.first_occurrence = self._build_first_occurrence(self.codes, self.alphabet)
        self.occ_chk = self._build_occ(self.codes, len(self.alphabet), step)
        logger.debug(
            "rank index: n=%d, alphabet=%d, interval=%d, checkpoint rows=%d",
            self.n, len(self.alphabet), step, self.occ_chk.shape[0],
        )

    @staticmethod
    def _build_first_occurrence(codes: np.ndarray, alphabet: List[str]) -> Dict[str, int]:
        # block of each symbol in the sorted transform starts after all smaller symbols
        counts = np.bincount(codes, minlength=len(alphabet))
        starts = np.cumsum(counts) - counts
        return {ch: int(starts[i]) for i, ch in enumerate(alphabet)}

    @staticmethod
    def _build_occ(codes: np.ndarray, sigma: int, step: int) -> np.ndarray:
        n = len(codes)
        chk = np.zeros((n // step + 1, sigma), dtype=np.int64)
        for c in range(sigma):
            running = np.concatenate(([0], np.cumsum(codes == c)))
            chk[:, c] = running[::step]
        return chk

    def __len__(self) -> int:
        return self.n

    def __contains__(self, symbol: str) -> bool:
        return symbol in self.code

    def _code_of(self, symbol: str) -> int:
        try:
            return self.code[symbol]
        except KeyError:
            raise InconsistentIndex(f"Symbol {symbol!r} is not in the indexed transform") from None

    def checkpoint(self, symbol: str, position: int) -> int:
        """Stored count of symbol in bwt[0:position]; position must be a checkpoint."""
        if position % self.step or not 0 <= position <= self.n:
            raise InconsistentIndex(f"No checkpoint at position {position}")
        return int(self.occ_chk[position // self.step, self._code_of(symbol)])

    def count_symbol(self, symbol: str, limit: int) -> int:
        """Occurrences of symbol in bwt[0:limit], for 0 <= limit <= n."""
        if not 0 <= limit <= self.n:
            raise InconsistentIndex(f"Limit {limit} outside of [0, {self.n}]")
        c = self._code_of(symbol)
        block = limit // self.step
        start = block * self.step
        rem = np.count_nonzero(self.codes[start:limit] == c)
        return int(self.occ_chk[block, c]) + int(rem)

    def last_to_first(self, rank: int) -> int:
        ch = self.bwt[rank]
        return self.first_occurrence[ch] + self.count_symbol(ch, rank)


def build_index(text: str, checkpoint_interval: int = CHECKPOINT_INTERVAL) -> RankIndex:
    """Transform text (already sentinel-terminated) and index the result."""
    return RankIndex(transform(text), step=checkpoint_interval)
