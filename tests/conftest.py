"""Shared fixtures for b39geo tests."""

import itertools
import string

import pytest

from b39geo.dictionary import Wordlist, load_wordlist


@pytest.fixture
def wordlist():
    """The standard BIP-39 English wordlist."""
    return load_wordlist()


@pytest.fixture
def synthetic_words():
    """2048 words 'aaazz', 'aabzz', ... 'datzz' with unique 4-letter prefixes."""
    combos = itertools.product(string.ascii_lowercase, repeat=3)
    return [''.join(combo) + 'zz' for combo in itertools.islice(combos, 2048)]


@pytest.fixture
def synthetic_wordlist(synthetic_words):
    return Wordlist(synthetic_words)


@pytest.fixture
def sample_coordinates():
    return [
        (37.7749, -122.4194),
        (51.5074, -0.1278),
        (-33.8688, 151.2093),
        (35.6762, 139.6503),
        (0.0, 0.0),
        (-54.8019, -68.3030),
        (64.1466, -21.9426),
        (89.9999, 179.9999),
        (-89.9999, -179.9999),
    ]
