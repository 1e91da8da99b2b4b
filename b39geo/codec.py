"""
Four-word location codec.

encode: (lat, lon) -> 22-bit grid indices -> 44-bit Morton code ->
four 11-bit word indices -> four BIP-39 words.
decode runs the same steps in reverse, resolving typed words first.
"""
from typing import List, NamedTuple, Optional, Sequence, Union

from . import quantizer
from .dictionary import WORD_BITS, Wordlist, load_wordlist
from .errors import B39GeoError, BitWidthViolation, ExactlyFourWordsRequired
from .morton import CODE_MASK, TOTAL_BITS, deinterleave, interleave
from .resolver import WordResolver

WORDS_PER_PHRASE = TOTAL_BITS // WORD_BITS  # 4
WORD_MASK = (1 << WORD_BITS) - 1


class Coordinate(NamedTuple):
    lat: float
    lon: float


class CellSize(NamedTuple):
    lat_degrees: float
    lon_degrees: float


def pack(code: int) -> List[int]:
    """
    Split a 44-bit code into four 11-bit word indices.

    Args:
        code: Morton code in [0, 2^44)

    Returns:
        Four word indices, most significant group first
    """
    if not 0 <= code <= CODE_MASK:
        raise BitWidthViolation("code", code, TOTAL_BITS)
    return [
        (code >> (WORD_BITS * shift)) & WORD_MASK
        for shift in reversed(range(WORDS_PER_PHRASE))
    ]


def unpack(indices: Sequence[int]) -> int:
    """
    Join four 11-bit word indices into a 44-bit code.

    Args:
        indices: Four word indices, most significant group first

    Returns:
        Morton code in [0, 2^44)
    """
    if len(indices) != WORDS_PER_PHRASE:
        raise ExactlyFourWordsRequired(len(indices))
    code = 0
    for index in indices:
        if not 0 <= index <= WORD_MASK:
            raise BitWidthViolation("index", index, WORD_BITS)
        code = (code << WORD_BITS) | index
    return code


def encode(
    lat: float,
    lon: float,
    rounding: quantizer.Rounding = "nearest",
    wordlist: Optional[Wordlist] = None,
) -> List[str]:
    """
    Encode a coordinate as four words.

    Args:
        lat: Latitude in degrees, clamped into [-90, 90]
        lon: Longitude in degrees, clamped into [-180, 180]
        rounding: Quantization rounding, one of 'nearest', 'floor', 'ceil'
        wordlist: Wordlist to draw from (BIP-39 English by default)

    Returns:
        List of 4 words

    Raises:
        InvalidInput: If lat or lon is not a finite number
    """
    if wordlist is None:
        wordlist = load_wordlist()
    y = quantizer.quantize_lat(lat, rounding)
    x = quantizer.quantize_lon(lon, rounding)
    return [wordlist.word(index) for index in pack(interleave(x, y))]


def decode(
    words: Sequence[str],
    center: bool = True,
    wordlist: Optional[Wordlist] = None,
) -> Coordinate:
    """
    Decode four (possibly misspelled or abbreviated) words to a coordinate.

    Args:
        words: Sequence of exactly 4 tokens
        center: Return the middle of the cell instead of its lower corner
        wordlist: Wordlist the phrase was drawn from (BIP-39 English by default)

    Returns:
        Coordinate clamped into the valid latitude/longitude ranges

    Raises:
        ExactlyFourWordsRequired: If the phrase does not have 4 words
        UnknownOrAmbiguousWord: If a token cannot be resolved unambiguously
    """
    if isinstance(words, str):
        words = [words]
    if len(words) != WORDS_PER_PHRASE:
        raise ExactlyFourWordsRequired(len(words))
    if wordlist is None:
        wordlist = load_wordlist()

    resolver = WordResolver(wordlist)
    indices = [wordlist.index(resolver.resolve(token)) for token in words]
    x, y = deinterleave(unpack(indices))

    lat = quantizer.dequantize_lat(y, center)
    lon = quantizer.dequantize_lon(x, center)
    return Coordinate(
        lat=quantizer.clamp(lat, quantizer.LAT_MIN, quantizer.LAT_MAX),
        lon=quantizer.clamp(lon, quantizer.LON_MIN, quantizer.LON_MAX),
    )


def cell_size() -> CellSize:
    """Size in degrees of one quantization cell."""
    return CellSize(lat_degrees=quantizer.LAT_STEP, lon_degrees=quantizer.LON_STEP)


def try_parse(
    words_or_text: Union[str, Sequence[str]],
    center: bool = True,
    wordlist: Optional[Wordlist] = None,
) -> Optional[Coordinate]:
    """
    Decode a phrase given as a list of tokens or as whitespace separated text.

    Returns:
        Coordinate, or None if the phrase cannot be decoded
    """
    if isinstance(words_or_text, str):
        words = words_or_text.split()
    else:
        words = list(words_or_text)
    try:
        return decode(words, center=center, wordlist=wordlist)
    except B39GeoError:
        return None
