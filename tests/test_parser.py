"""
Tests for input parsing and the PatternMatcher facade.
"""

import io

import pytest

from bwmatch.errors import MalformedInput
from bwmatch.index.suffix_array import build_partial_suffix_array
from bwmatch.models.patternMatcher import MatcherInput, ReadMapperInput
from bwmatch.parser.parser import Parser
from bwmatch.patternMatcher.patternMatcher import PatternMatcher
from bwmatch.transform.bwt import transform


def parser_for(content: str) -> Parser:
    return Parser(io.StringIO(content))


class TestParser:
    """Tests for Parser."""

    def test_text_ignores_trailing_newlines(self):
        """Test a single-line text file with trailing blank lines."""
        assert parser_for("GCGTGCCTGGTCA$\n\n").parseText() == "GCGTGCCTGGTCA$"

    def test_text_with_extra_lines_raises_error(self):
        """Test that a second record is rejected."""
        with pytest.raises(MalformedInput):
            parser_for("ACGT\nACGT\n").parseText()

    def test_transform_needs_one_sentinel(self):
        """Test sentinel checks on a transform."""
        assert parser_for("TTCCTAACG$A\n").parseTransform() == "TTCCTAACG$A"
        with pytest.raises(MalformedInput):
            parser_for("TTCCTAACGA\n").parseTransform()

    def test_exact_matching(self):
        """Test transform plus whitespace-separated patterns."""
        bwt, patterns = parser_for("smnpbnnaaaaa$a\nana  nab\n").parseExactMatching()
        assert bwt == "smnpbnnaaaaa$a"
        assert patterns == ["ana", "nab"]

    def test_approximate_matching(self):
        """Test text, patterns and d."""
        text, patterns, d = parser_for("ACATGCTACTTT\nATT GCC GCTA TATT\n1\n").parseApproximateMatching()
        assert text == "ACATGCTACTTT"
        assert patterns == ["ATT", "GCC", "GCTA", "TATT"]
        assert d == 1

    def test_non_numeric_d_raises_error(self):
        """Test that d must be an integer."""
        with pytest.raises(MalformedInput):
            parser_for("ACGT\nAC\none\n").parseApproximateMatching()

    def test_negative_d_raises_error(self):
        """Test that d must not be negative."""
        with pytest.raises(MalformedInput):
            parser_for("ACGT\nAC\n-1\n").parseApproximateMatching()

    def test_partial_suffix_array(self):
        """Test text plus K, with K at least 1."""
        assert parser_for("PANAMABANANAS$\n5\n").parsePartialSuffixArray() == ("PANAMABANANAS$", 5)
        with pytest.raises(MalformedInput):
            parser_for("PANAMABANANAS$\n0\n").parsePartialSuffixArray()

    def test_missing_line_raises_error(self):
        """Test a file with too few lines."""
        with pytest.raises(MalformedInput):
            parser_for("PANAMABANANAS$\n").parsePartialSuffixArray()

    def test_index_pairs(self):
        """Test rank,offset lines."""
        assert parser_for("1,5\n11,10\n12,0\n").parseIndexPairs() == [(1, 5), (11, 10), (12, 0)]
        with pytest.raises(MalformedInput):
            parser_for("1;5\n").parseIndexPairs()

    def test_reads(self):
        """Test one read per line."""
        assert parser_for("ACG\nTTA\n\n").parseReads() == ["ACG", "TTA"]


class TestPatternMatcher:
    """Tests for PatternMatcher."""

    def test_match_patterns(self):
        """Test the approximate matching sample through the facade."""
        output = PatternMatcher().matchPatterns(MatcherInput(
            inputFile=io.StringIO("ACATGCTACTTT\nATT GCC GCTA TATT\n1\n"),
        ))
        assert output.positions == [2, 4, 4, 6, 7, 8, 9]
        assert output.numberOfPatterns == 4

    def test_match_patterns_other_intervals(self):
        """Test that index parameters do not change the result."""
        output = PatternMatcher().matchPatterns(MatcherInput(
            inputFile=io.StringIO("ACATGCTACTTT\nATT GCC GCTA TATT\n1\n"),
            checkpointInterval=1,
            suffixArrayInterval=2,
        ))
        assert output.positions == [2, 4, 4, 6, 7, 8, 9]

    def test_map_reads(self):
        """Test reads mapped with at most one mismatch."""
        text = "ACATGCTACTTT$"
        partial = build_partial_suffix_array(text, 5)
        output = PatternMatcher().mapReads(ReadMapperInput(
            bwtFile=io.StringIO(transform(text) + "\n"),
            partialSuffixArrayFile=io.StringIO(
                "".join(f"{rank},{offset}\n" for rank, offset in partial.items())),
            readsFile=io.StringIO("ATT\nGGGG\nGCTA\n"),
        ))
        assert output.mappedReads == ["ATT", "GCTA"]
        assert output.numberOfMappedReads == 2
        assert output.numberOfReads == 3
