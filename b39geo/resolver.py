"""
Resolution of user-typed tokens to canonical wordlist entries.

A token is matched exactly, then as a unique prefix of at least four
letters, then by edit distance of at most one. Anything that does not
resolve to exactly one entry is rejected rather than guessed.
"""
import logging
from typing import List, Optional

from .dictionary import PREFIX_LENGTH, Wordlist, load_wordlist, normalize_word
from .errors import UnknownOrAmbiguousWord

logger = logging.getLogger(__name__)

MAX_EDIT_DISTANCE = 1


def levenshtein_distance(a: str, b: str, max_distance: int) -> int:
    """
    Edit distance between two strings, bounded by max_distance.

    Args:
        a: First string
        b: Second string
        max_distance: Bound; once exceeded, computation stops

    Returns:
        The distance if it is <= max_distance, otherwise max_distance + 1
    """
    if a == b:
        return 0
    if abs(len(a) - len(b)) > max_distance:
        return max_distance + 1

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        curr = [i]
        for j, cb in enumerate(b, 1):
            cost = 0 if ca == cb else 1
            curr.append(min(prev[j] + 1, curr[j - 1] + 1, prev[j - 1] + cost))
        if min(curr) > max_distance:
            return max_distance + 1
        prev = curr
    return min(prev[-1], max_distance + 1)


class WordResolver:
    """Resolves tokens against one wordlist."""

    def __init__(self, wordlist: Wordlist):
        self.wordlist = wordlist

    def prefix_candidates(self, token: str) -> List[str]:
        if len(token) < PREFIX_LENGTH:
            return []
        return self.wordlist.words_with_prefix(token)

    def nearby_candidates(self, token: str) -> List[str]:
        return [
            entry for entry in self.wordlist.entries
            if levenshtein_distance(token, entry, MAX_EDIT_DISTANCE) <= MAX_EDIT_DISTANCE
        ]

    def canonical(self, entry: str) -> str:
        """Source spelling of a normalized entry."""
        return self.wordlist.word(self.wordlist.index(entry))

    def resolve(self, token: str) -> str:
        """
        Resolve a token to exactly one canonical word.

        Args:
            token: Word as typed by a user

        Returns:
            Canonical wordlist entry, spelled as in the source list

        Raises:
            UnknownOrAmbiguousWord: If zero or several entries match
        """
        word = normalize_word(token)
        if word in self.wordlist:
            return self.canonical(word)

        prefixed = self.prefix_candidates(word)
        if len(prefixed) == 1:
            logger.debug(f"Resolved {token!r} as prefix of {prefixed[0]!r}")
            return self.canonical(prefixed[0])

        nearby = self.nearby_candidates(word)
        if len(nearby) == 1:
            logger.debug(f"Resolved {token!r} by edit distance to {nearby[0]!r}")
            return self.canonical(nearby[0])

        raise UnknownOrAmbiguousWord(token, [self.canonical(entry) for entry in nearby or prefixed])


def resolve_word(token: str, wordlist: Optional[Wordlist] = None) -> str:
    """Resolve a token against wordlist (the English list by default)."""
    if wordlist is None:
        wordlist = load_wordlist()
    return WordResolver(wordlist).resolve(token)
