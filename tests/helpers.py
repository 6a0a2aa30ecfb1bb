BANANA_TEXT = "panamabananas$"
BANANA_BWT = "smnpbnnaaaaa$a"
BANANA_SUFFIX_ARRAY = [13, 5, 3, 1, 7, 9, 11, 6, 4, 2, 8, 10, 0, 12]


def naive_occurrences(text: str, pattern: str):
    """Offsets where pattern occurs exactly in text."""
    return [i for i in range(len(text) - len(pattern) + 1) if text[i:i + len(pattern)] == pattern]


def hamming_occurrences(text: str, pattern: str, d: int):
    """
    Offsets where pattern occurs in text with at most d substitutions. Pattern
    positions past the end of the text count as mismatches.
    """
    hits = set()
    for i in range(len(text)):
        window = text[i:i + len(pattern)]
        missing = len(pattern) - len(window)
        if missing + sum(1 for a, b in zip(window, pattern) if a != b) <= d:
            hits.add(i)
    return hits
