"""
Main.py:
Handles the command line: one sub-command per Burrows-Wheeler exercise
"""

import argparse
import logging
import os
import sys
import time
from typing import Callable, Dict, List

import psutil

from .constants.constants import (
    CHECKPOINT_INTERVAL, MAX_MISMATCHES, RUN_LENGTH, SENTINEL, SUFFIX_ARRAY_INTERVAL,
)
from .index.fm_index import RankIndex
from .index.suffix_array import build_partial_suffix_array, build_suffix_array
from .models.patternMatcher import MatcherInput, MatcherOutput, ReadMapperInput, ReadMapperOutput
from .parser.parser import Parser
from .patternMatcher.patternMatcher import APatternMatcher, PatternMatcher
from .search.backward import bw_matching, count_matches
from .transform.bwt import count_runs, invert, last_to_first, transform

logger = logging.getLogger(__name__)


def get_memory_usage():
    """Get current memory usage in bytes using psutil"""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_args(argv: List[str] = None):
    parser = argparse.ArgumentParser(description='Burrows-Wheeler transform and pattern matching')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    parser.add_argument('-m', '--memory', action='store_true', help='Track memory usage')

    sub = parser.add_subparsers(dest='command', required=True)

    def add(name: str, help_text: str) -> argparse.ArgumentParser:
        p = sub.add_parser(name, help=help_text)
        p.add_argument('-i', '--input_file', required=True, help='Input file')
        return p

    add('bwt', 'Burrows-Wheeler transform of a text')
    add('inverse-bwt', 'Text whose transform is given')
    runs = add('bwt-runs', 'Number of long runs in the transform of a text')
    runs.add_argument('--run-length', type=int, default=RUN_LENGTH, help='Minimum run length')
    add('suffix-array', 'Suffix array of a text')
    add('partial-suffix-array', 'Sampled suffix array of a text')
    add('bw-matching', 'Count pattern matches with the last-to-first array')
    better = add('better-bw-matching', 'Count pattern matches with a checkpointed rank index')
    better.add_argument('-c', '--checkpoint', type=int, default=CHECKPOINT_INTERVAL,
                        help='Checkpoint interval')
    approx = add('approximate-matching', 'Positions of patterns with at most d mismatches')
    approx.add_argument('-c', '--checkpoint', type=int, default=CHECKPOINT_INTERVAL,
                        help='Checkpoint interval')
    approx.add_argument('-k', '--suffix-interval', type=int, default=SUFFIX_ARRAY_INTERVAL,
                        help='Keep suffix array entries whose offset is a multiple of this')

    reads = sub.add_parser('map-reads', help='Reads occurring in a genome with at most d mismatches')
    reads.add_argument('-b', '--bwt', required=True, help='Transform of the genome')
    reads.add_argument('-p', '--partial-suffix-array', required=True, help='rank,offset file')
    reads.add_argument('-r', '--reads', required=True, help='Reads file, one per line')
    reads.add_argument('-d', '--mismatches', type=int, default=MAX_MISMATCHES,
                       help='Maximum mismatches')
    reads.add_argument('-c', '--checkpoint', type=int, default=CHECKPOINT_INTERVAL,
                       help='Checkpoint interval')

    return parser.parse_args(argv)


def run_bwt(args) -> List[str]:
    with open(args.input_file, "r") as fh:
        text = Parser(fh).parseText()
    return [transform(text)]


def run_inverse_bwt(args) -> List[str]:
    with open(args.input_file, "r") as fh:
        bwt = Parser(fh).parseTransform()
    return [invert(bwt)]


def run_bwt_runs(args) -> List[str]:
    with open(args.input_file, "r") as fh:
        text = Parser(fh).parseText()
    return [str(count_runs(transform(text + SENTINEL), args.run_length))]


def run_suffix_array(args) -> List[str]:
    with open(args.input_file, "r") as fh:
        text = Parser(fh).parseText()
    return [", ".join(str(i) for i in build_suffix_array(text))]


def run_partial_suffix_array(args) -> List[str]:
    with open(args.input_file, "r") as fh:
        text, k = Parser(fh).parsePartialSuffixArray()
    partial = build_partial_suffix_array(text, k)
    return [f"{rank},{offset}" for rank, offset in partial.items()]


def run_bw_matching(args) -> List[str]:
    with open(args.input_file, "r") as fh:
        bwt, patterns = Parser(fh).parseExactMatching()
    ltf = last_to_first(bwt)
    return [" ".join(str(bw_matching(bwt, pattern, ltf)) for pattern in patterns)]


def run_better_bw_matching(args) -> List[str]:
    with open(args.input_file, "r") as fh:
        bwt, patterns = Parser(fh).parseExactMatching()
    rankIndex = RankIndex(bwt, step=args.checkpoint)
    return [" ".join(str(count_matches(rankIndex, pattern)) for pattern in patterns)]


def run_approximate_matching(args) -> List[str]:
    matcher: APatternMatcher = PatternMatcher()
    with open(args.input_file, "r") as fh:
        output: MatcherOutput = matcher.matchPatterns(MatcherInput(
            inputFile=fh,
            checkpointInterval=args.checkpoint,
            suffixArrayInterval=args.suffix_interval,
        ))
    return [" ".join(str(pos) for pos in output.positions)]


def run_map_reads(args) -> List[str]:
    matcher: APatternMatcher = PatternMatcher()
    with open(args.bwt, "r") as bwtFile, \
            open(args.partial_suffix_array, "r") as psaFile, \
            open(args.reads, "r") as readsFile:
        output: ReadMapperOutput = matcher.mapReads(ReadMapperInput(
            bwtFile=bwtFile,
            partialSuffixArrayFile=psaFile,
            readsFile=readsFile,
            maxMismatches=args.mismatches,
            checkpointInterval=args.checkpoint,
        ))
    logger.info("Mapped %d of %d reads", output.numberOfMappedReads, output.numberOfReads)
    return output.mappedReads


COMMANDS: Dict[str, Callable] = {
    'bwt': run_bwt,
    'inverse-bwt': run_inverse_bwt,
    'bwt-runs': run_bwt_runs,
    'suffix-array': run_suffix_array,
    'partial-suffix-array': run_partial_suffix_array,
    'bw-matching': run_bw_matching,
    'better-bw-matching': run_better_bw_matching,
    'approximate-matching': run_approximate_matching,
    'map-reads': run_map_reads,
}


def main(argv: List[str] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    startTime = time.perf_counter()
    startCpuTime = time.process_time()
    if args.memory:
        baseline_memory = get_memory_usage()

    try:
        lines = COMMANDS[args.command](args)
    except ValueError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        return 1

    for line in lines:
        print(line)

    elapsedTime = time.perf_counter() - startTime
    elapsedCpuTime = time.process_time() - startCpuTime
    logger.debug(f"The '{args.command}' part took {elapsedTime:.4f} seconds to execute.")
    logger.debug(f"The '{args.command}' cpu part took {elapsedCpuTime:.4f} seconds to execute.")

    if args.memory:
        used = get_memory_usage() - baseline_memory
        logger.info(f"Total memory used: {used / 10**6:.2f} MB")
    return 0


if __name__ == "__main__":
    sys.exit(main())
