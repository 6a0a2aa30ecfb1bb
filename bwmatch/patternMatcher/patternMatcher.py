import logging
from abc import ABC, abstractmethod
from typing import List

from ..constants.constants import SENTINEL
from ..index.fm_index import RankIndex, build_index
from ..index.suffix_array import PartialSuffixArray, build_partial_suffix_array
from ..models.patternMatcher import MatcherInput, MatcherOutput, ReadMapperInput, ReadMapperOutput
from ..parser.parser import Parser
from ..search.approximate import approximate_match, approximate_match_all
from ..transform.bwt import invert

logger = logging.getLogger(__name__)


class APatternMatcher(ABC):
    @abstractmethod
    def matchPatterns(self, inputData: MatcherInput) -> MatcherOutput:
        pass

    @abstractmethod
    def mapReads(self, inputData: ReadMapperInput) -> ReadMapperOutput:
        pass


class PatternMatcher(APatternMatcher):
    def __init__(self):
        pass

    def matchPatterns(self, inputData: MatcherInput) -> MatcherOutput:
        """
        Multiple approximate pattern matching: index the text once, then
        report every position of every pattern with at most d mismatches.
        """
        parser: Parser = Parser(inputData.inputFile)
        text, patterns, d = parser.parseApproximateMatching()
        if not text.endswith(SENTINEL):
            text += SENTINEL

        rankIndex: RankIndex = build_index(text, checkpoint_interval=inputData.checkpointInterval)
        partialSuffixArray: PartialSuffixArray = build_partial_suffix_array(
            text, inputData.suffixArrayInterval)
        logger.info("Indexed text of length %d; matching %d patterns with d=%d",
                    len(text), len(patterns), d)

        positions: List[int] = approximate_match_all(
            text, rankIndex, partialSuffixArray, patterns, d)

        return MatcherOutput(positions=positions, numberOfPatterns=len(patterns))

    def mapReads(self, inputData: ReadMapperInput) -> ReadMapperOutput:
        """
        Report the reads that occur in a genome with at most maxMismatches
        mismatches. The genome is only given as its transform plus a partial
        suffix array, so the text used for verification is recovered by
        inverting the transform.
        """
        bwt: str = Parser(inputData.bwtFile).parseTransform()
        pairs = Parser(inputData.partialSuffixArrayFile).parseIndexPairs()
        reads: List[str] = Parser(inputData.readsFile).parseReads()

        text: str = invert(bwt)
        rankIndex: RankIndex = RankIndex(bwt, step=inputData.checkpointInterval)
        partialSuffixArray = PartialSuffixArray.from_pairs(pairs, length=len(bwt))
        logger.info("Loaded genome of length %d with %d sampled suffixes; mapping %d reads",
                    len(bwt), len(partialSuffixArray), len(reads))

        mappedReads: List[str] = []
        for read in reads:
            if approximate_match(text, rankIndex, partialSuffixArray, read, inputData.maxMismatches):
                mappedReads.append(read)

        return ReadMapperOutput(
            mappedReads=mappedReads,
            numberOfMappedReads=len(mappedReads),
            numberOfReads=len(reads),
        )
