"""
Error taxonomy for the b39geo codec.

Everything the codec raises derives from B39GeoError. Errors caused by
caller input also derive from ValueError, so callers that already handle
ValueError (like the HTTP handler) report them as bad input.
"""
from typing import Sequence


class B39GeoError(Exception):
    """Base class for codec errors."""


class InvalidInput(B39GeoError, ValueError):
    """A coordinate or option given to encode cannot be quantized."""


class ExactlyFourWordsRequired(B39GeoError, ValueError):
    """A phrase with a word count other than four was given to decode."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Expected exactly 4 words, got {count}")


class UnknownOrAmbiguousWord(B39GeoError, ValueError):
    """A token resolved to no wordlist entry, or to more than one."""

    def __init__(self, token: str, candidates: Sequence[str] = ()):
        self.token = token
        self.candidates = list(candidates)
        if self.candidates:
            message = (
                f"Ambiguous BIP-39 word: {token!r} "
                f"(could be {', '.join(self.candidates)})"
            )
        else:
            message = f"Unknown BIP-39 word: {token!r}"
        super().__init__(message)


class WordlistError(B39GeoError, ValueError):
    """A wordlist does not satisfy the invariants the codec relies on."""


class BitWidthViolation(B39GeoError):
    """
    A value escaped its 11-, 22- or 44-bit range.

    This signals a programming error inside the codec, not bad input.
    """

    def __init__(self, name: str, value: int, bits: int):
        self.name = name
        self.value = value
        self.bits = bits
        super().__init__(f"{name}={value} does not fit in {bits} bits")
