"""
Word dictionary for encoding/decoding locations.
Uses the 2048 BIP-39 words to encode 44 bits as 4 words (11 bits per word).

Entries are output as shipped, but matched on their normalized form
(NFKD, lowercase), the same form typed tokens are reduced to.
"""
import logging
import unicodedata
from functools import lru_cache
from typing import Dict, Iterator, List, Sequence, Tuple

from mnemonic import Mnemonic

from .errors import WordlistError

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "english"
WORD_BITS = 11
WORDLIST_SIZE = 1 << WORD_BITS  # 2048
PREFIX_LENGTH = 4


def normalize_word(word: str) -> str:
    """Compatibility-decompose, lowercase and trim a word."""
    return unicodedata.normalize("NFKD", word).lower().strip()


def prefix_key(word: str) -> str:
    """First four letters of a word, accented letters counting as one."""
    return unicodedata.normalize("NFC", normalize_word(word))[:PREFIX_LENGTH]


class Wordlist:
    """
    Immutable, ordered list of 2048 distinct lowercase words.

    The list is validated once on construction, including the unique
    4-letter prefix property that prefix resolution depends on.
    """

    __slots__ = ("_words", "_entries", "_index")

    def __init__(self, words: Sequence[str]):
        words = tuple(words)
        validate_words(words)
        self._words = words
        self._entries: Tuple[str, ...] = tuple(normalize_word(word) for word in words)
        self._index: Dict[str, int] = {entry: i for i, entry in enumerate(self._entries)}

    @property
    def entries(self) -> Tuple[str, ...]:
        """Normalized entries, in list order."""
        return self._entries

    def word(self, index: int) -> str:
        """
        Look up the word at a word index.

        Args:
            index: Integer in [0, 2047]

        Returns:
            Word string, spelled as in the source list
        """
        if not 0 <= index < WORDLIST_SIZE:
            raise IndexError(f"Word index out of range: {index}")
        return self._words[index]

    def index(self, word: str) -> int:
        """
        Look up the index of a word, in source or normalized spelling.

        Raises:
            KeyError: If the word is not in the list
        """
        if word in self._index:
            return self._index[word]
        return self._index[normalize_word(word)]

    def words_with_prefix(self, prefix: str) -> List[str]:
        """Return every normalized entry starting with prefix, in list order."""
        return [entry for entry in self._entries if entry.startswith(prefix)]

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word in self._index or normalize_word(word) in self._index

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Wordlist({self._words[0]!r}..{self._words[-1]!r})"


def validate_words(words: Sequence[str]) -> None:
    """
    Check the invariants a wordlist must satisfy.

    Distinctness and prefixes are checked on the normalized spelling, so
    two entries a user could not tell apart by typing are rejected.

    Args:
        words: Ordered word sequence

    Raises:
        WordlistError: If the list has the wrong size, duplicates,
            non-lowercase entries or a shared 4-letter prefix
    """
    if len(words) != WORDLIST_SIZE:
        raise WordlistError(f"Expected {WORDLIST_SIZE} words, got {len(words)}")

    seen_entries: Dict[str, str] = {}
    seen_prefixes: Dict[str, str] = {}
    for word in words:
        if not isinstance(word, str) or not normalize_word(word):
            raise WordlistError(f"Invalid wordlist entry: {word!r}")
        if word != word.lower():
            raise WordlistError(f"Wordlist entry is not lowercase: {word!r}")

        entry = normalize_word(word)
        if entry in seen_entries:
            raise WordlistError(
                f"Duplicate wordlist entry: {word!r} (same as {seen_entries[entry]!r})"
            )
        seen_entries[entry] = word

        prefix = prefix_key(word)
        if prefix in seen_prefixes:
            raise WordlistError(
                f"Entries {seen_prefixes[prefix]!r} and {word!r} share the prefix {prefix!r}"
            )
        seen_prefixes[prefix] = word


def available_languages() -> List[str]:
    """Names of the wordlists shipped with the mnemonic package."""
    return sorted(Mnemonic.list_languages())


@lru_cache(maxsize=None)
def load_wordlist(language: str = DEFAULT_LANGUAGE) -> Wordlist:
    """
    Load and validate a BIP-39 wordlist.

    Args:
        language: Name of a wordlist shipped with the mnemonic package

    Returns:
        Validated Wordlist, shared by every caller for that language

    Raises:
        WordlistError: If the list breaks an invariant the codec relies on
    """
    logger.debug(f"Loading BIP-39 wordlist: {language}")
    return Wordlist(Mnemonic(language).wordlist)
