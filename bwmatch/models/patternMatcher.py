from dataclasses import dataclass, field
from typing import IO, List

from ..constants.constants import CHECKPOINT_INTERVAL, SUFFIX_ARRAY_INTERVAL, MAX_MISMATCHES


@dataclass
class MatcherInput:
    # required fields
    inputFile: IO               # text, patterns and d, one per line

    # optional fields
    checkpointInterval: int = CHECKPOINT_INTERVAL
    suffixArrayInterval: int = SUFFIX_ARRAY_INTERVAL


@dataclass
class MatcherOutput:
    positions: List[int] = field(default_factory=list)
    numberOfPatterns: int = 0


@dataclass
class ReadMapperInput:
    # required fields
    bwtFile: IO
    partialSuffixArrayFile: IO  # rank,offset per line
    readsFile: IO               # one read per line

    # optional fields
    maxMismatches: int = MAX_MISMATCHES
    checkpointInterval: int = CHECKPOINT_INTERVAL


@dataclass
class ReadMapperOutput:
    mappedReads: List[str] = field(default_factory=list)
    numberOfMappedReads: int = 0
    numberOfReads: int = 0
