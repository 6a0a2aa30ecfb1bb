from typing import Optional


# Verifier implementation
class Verifier:
    """
    Checks a candidate start against the text with substitutions only:
    compares pattern and text symbol by symbol and gives up as soon as more
    than max_mismatches positions differ. Insertions and deletions are not
    considered.
    """
    def __init__(self, max_mismatches: int):
        if max_mismatches < 0:
            raise ValueError(f"Maximum mismatches must be >= 0, got {max_mismatches}")
        self.max_mismatches = max_mismatches

    def mismatches(self, pattern: str, text: str, start: int) -> Optional[int]:
        """
        The sentinel is compared like any other symbol, and every pattern
        position that falls past the end of the text counts as a mismatch.

        :param pattern: full query pattern
        :param text:    indexed text, including its trailing sentinel
        :param start:   candidate start offset of pattern in text
        :return: number of mismatches, or None if start is negative or the
                 count exceeds max_mismatches
        """
        if start < 0:
            return None

        n = len(text)
        count = 0
        for pos, symbol in enumerate(pattern, start):
            if pos >= n or text[pos] != symbol:
                count += 1
                if count > self.max_mismatches:
                    return None
        return count

    def accepts(self, pattern: str, text: str, start: int) -> bool:
        return self.mismatches(pattern, text, start) is not None
