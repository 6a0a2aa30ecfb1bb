"""
Burrows-Wheeler transform construction and inversion.

The reference construction sorts every cyclic rotation of the text, which is
O(n^2 log n) in the worst case and only suitable for small to medium texts.
transform_from_suffix_array() produces the same string from a prefix-doubling
suffix array and is the replacement for larger sentinel-terminated inputs.
"""
from collections import defaultdict
from functools import cmp_to_key
from typing import Dict, List, Tuple

from ..constants.constants import SENTINEL, RUN_LENGTH
from ..errors import MalformedInput
from ..index.suffix_array import build_suffix_array


def _compare_rotations(text: str, a: int, b: int) -> int:
    # walk both rotations with wraparound until they differ
    n = len(text)
    for i in range(n):
        chr_a = text[(a + i) % n]
        chr_b = text[(b + i) % n]
        if chr_a != chr_b:
            return -1 if chr_a < chr_b else 1
    return 0


def rotation_order(text: str) -> List[int]:
    """Start offsets of the cyclic rotations of text, in sorted order."""
    return sorted(
        range(len(text)),
        key=cmp_to_key(lambda a, b: _compare_rotations(text, a, b)),
    )


def transform(text: str) -> str:
    """
    Burrows-Wheeler transform of text by sorting its cyclic rotations.

    The sentinel is not added here: callers append it when the text needs one.
    """
    # text[-1] is the symbol cyclically preceding the rotation at offset 0
    return "".join(text[start - 1] for start in rotation_order(text))


def transform_from_suffix_array(text: str) -> str:
    """
    Same result as transform() for text ending in a unique sentinel, built
    from the suffix array instead of a rotation sort.
    """
    assert text.endswith(SENTINEL), "Text must end with sentinel '$'"
    return "".join(text[p - 1] for p in build_suffix_array(text))


def invert(bwt: str) -> str:
    """
    Reconstruct the text whose transform is bwt.

    Every symbol is tagged with its occurrence ordinal (first 'a' -> ('a', 1),
    second 'a' -> ('a', 2), ...) so that the first column can be obtained by
    sorting the tags, then the text is read off by repeatedly jumping from a
    first-column tag to the row where the same tag sits in the last column.
    """
    if bwt.count(SENTINEL) != 1:
        raise MalformedInput(
            f"Transform must contain exactly one '{SENTINEL}', found {bwt.count(SENTINEL)}"
        )

    ordinal_of: Dict[str, int] = defaultdict(int)
    tagged: List[Tuple[str, int]] = []
    for symbol in bwt:
        ordinal_of[symbol] += 1
        tagged.append((symbol, ordinal_of[symbol]))

    first_column = sorted(tagged)
    row_of = {tag: i for i, tag in enumerate(tagged)}

    text = []
    pos = row_of[(SENTINEL, 1)]
    while len(text) < len(bwt):
        tag = first_column[pos]
        text.append(tag[0])
        pos = row_of[tag]
    return "".join(text)


def last_to_first(bwt: str) -> List[int]:
    """
    Full last-to-first array: entry i is the first-column row holding the
    same symbol occurrence as last-column row i.
    """
    mapping = [0] * len(bwt)
    # sorted() is stable, so equal symbols keep their last-column order
    for row, i in enumerate(sorted(range(len(bwt)), key=lambda j: bwt[j])):
        mapping[i] = row
    return mapping


def count_runs(bwt: str, run_length: int = RUN_LENGTH) -> int:
    """Number of runs of a repeated symbol that are at least run_length long."""
    count = 0
    current = 0
    last_chr = None
    for chr_ in bwt:
        current = current + 1 if chr_ == last_chr else 1
        if current == run_length:
            count += 1
        last_chr = chr_
    return count
