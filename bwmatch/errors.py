class MalformedInput(ValueError):
    """
    Raised when an input file or transform does not have the expected shape:
    missing sentinel, wrong number of lines, non-numeric parameters.
    """


class InconsistentIndex(LookupError):
    """
    Raised when an index structure is queried outside of what it was built for
    (unknown symbol, out-of-bounds limit). Signals a construction bug.
    """
