"""
Pytest configuration and common fixtures for bwmatch tests.
"""
import random

import pytest

from bwmatch.index.fm_index import build_index
from bwmatch.index.suffix_array import build_partial_suffix_array

from .helpers import BANANA_TEXT


@pytest.fixture
def banana_index():
    return build_index(BANANA_TEXT, checkpoint_interval=5)


@pytest.fixture
def banana_partial():
    return build_partial_suffix_array(BANANA_TEXT, 5)


@pytest.fixture
def random_texts():
    """Reproducible DNA texts of assorted lengths, sentinel-terminated."""
    rng = random.Random(20150402)
    texts = []
    for length in (1, 2, 7, 20, 53, 120):
        texts.append("".join(rng.choice("ACGT") for _ in range(length)) + "$")
    return texts


@pytest.fixture
def rng():
    return random.Random(304)
