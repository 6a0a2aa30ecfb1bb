from typing import IO, List, Tuple

from ..constants.constants import SENTINEL
from ..errors import MalformedInput


class Parser:
    """
    Reads the plain-text exercise inputs: whole file at once, one record per
    line. Every parse method checks the number of lines it expects and raises
    MalformedInput otherwise.
    """
    def __init__(self, inputFile: IO):
        self.inputFile = inputFile
        self.name = getattr(inputFile, "name", "<input>")

    def getLines(self) -> List[str]:
        lines = [line.strip() for line in self.inputFile]
        # trailing blank lines are not records
        while lines and not lines[-1]:
            lines.pop()
        return lines

    def _expectLines(self, count: int) -> List[str]:
        lines = self.getLines()
        if len(lines) != count:
            raise MalformedInput(f"{self.name}: expected {count} line(s), found {len(lines)}")
        return lines

    def _parseInt(self, value: str, field: str, minimum: int) -> int:
        try:
            number = int(value)
        except ValueError:
            raise MalformedInput(f"{self.name}: {field} must be an integer, got {value!r}") from None
        if number < minimum:
            raise MalformedInput(f"{self.name}: {field} must be >= {minimum}, got {number}")
        return number

    def parseText(self) -> str:
        return self._expectLines(1)[0]

    def parseTransform(self) -> str:
        bwt = self._expectLines(1)[0]
        if bwt.count(SENTINEL) != 1:
            raise MalformedInput(f"{self.name}: transform must contain exactly one '{SENTINEL}'")
        return bwt

    def parseExactMatching(self) -> Tuple[str, List[str]]:
        bwt, patterns = self._expectLines(2)
        if bwt.count(SENTINEL) != 1:
            raise MalformedInput(f"{self.name}: transform must contain exactly one '{SENTINEL}'")
        return bwt, patterns.split()

    def parseApproximateMatching(self) -> Tuple[str, List[str], int]:
        text, patterns, d = self._expectLines(3)
        return text, patterns.split(), self._parseInt(d, "d", 0)

    def parsePartialSuffixArray(self) -> Tuple[str, int]:
        text, k = self._expectLines(2)
        return text, self._parseInt(k, "K", 1)

    def parseIndexPairs(self) -> List[Tuple[int, int]]:
        """rank,offset lines as written by partial-suffix-array."""
        pairs = []
        for lineNumber, line in enumerate(self.getLines(), start=1):
            if not line:
                continue
            fields = line.split(",")
            if len(fields) != 2:
                raise MalformedInput(f"{self.name}:{lineNumber}: expected 'rank,offset', got {line!r}")
            pairs.append((
                self._parseInt(fields[0], "rank", 0),
                self._parseInt(fields[1], "offset", 0),
            ))
        return pairs

    def parseReads(self) -> List[str]:
        return [line for line in self.getLines() if line]
