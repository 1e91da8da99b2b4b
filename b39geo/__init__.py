"""
b39geo - BIP-39 four-word geocoding.

Encodes a latitude/longitude as four BIP-39 English words (cells of about
4.8 m x 9.5 m at the equator) and decodes them back, tolerating typos and
four-letter abbreviations.
"""
from .codec import CellSize, Coordinate, cell_size, decode, encode, pack, try_parse, unpack
from .dictionary import Wordlist, available_languages, load_wordlist
from .errors import (
    B39GeoError,
    BitWidthViolation,
    ExactlyFourWordsRequired,
    InvalidInput,
    UnknownOrAmbiguousWord,
    WordlistError,
)
from .resolver import WordResolver, resolve_word

__all__ = [
    "B39GeoError",
    "BitWidthViolation",
    "CellSize",
    "Coordinate",
    "ExactlyFourWordsRequired",
    "InvalidInput",
    "UnknownOrAmbiguousWord",
    "WordResolver",
    "Wordlist",
    "WordlistError",
    "available_languages",
    "cell_size",
    "decode",
    "encode",
    "load_wordlist",
    "pack",
    "resolve_word",
    "try_parse",
    "unpack",
]
