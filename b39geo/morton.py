"""
Morton (Z-order) interleaving of two 22-bit grid indices into a 44-bit code.

Bit 2i of the code holds bit i of x (longitude); bit 2i+1 holds bit i of
y (latitude).
"""
from typing import Tuple

from .errors import BitWidthViolation
from .quantizer import BITS_PER_COORD, MAX_COORD

TOTAL_BITS = BITS_PER_COORD * 2  # 44
CODE_MASK = (1 << TOTAL_BITS) - 1


def _spread(value: int) -> int:
    # Insert a zero bit above each of the low 22 bits.
    value &= MAX_COORD
    value = (value | (value << 16)) & 0x0000FFFF0000FFFF
    value = (value | (value << 8)) & 0x00FF00FF00FF00FF
    value = (value | (value << 4)) & 0x0F0F0F0F0F0F0F0F
    value = (value | (value << 2)) & 0x3333333333333333
    value = (value | (value << 1)) & 0x5555555555555555
    return value


def _compact(value: int) -> int:
    # Inverse of _spread: gather the even bits into the low 22 bits.
    value &= 0x5555555555555555
    value = (value | (value >> 1)) & 0x3333333333333333
    value = (value | (value >> 2)) & 0x0F0F0F0F0F0F0F0F
    value = (value | (value >> 4)) & 0x00FF00FF00FF00FF
    value = (value | (value >> 8)) & 0x0000FFFF0000FFFF
    value = (value | (value >> 16)) & 0x00000000FFFFFFFF
    return value & MAX_COORD


def interleave(x: int, y: int) -> int:
    """
    Interleave two 22-bit grid indices into one 44-bit Morton code.

    Args:
        x: Longitude grid index
        y: Latitude grid index

    Returns:
        Morton code in [0, 2^44)

    Raises:
        BitWidthViolation: If x or y does not fit in 22 bits
    """
    if not 0 <= x <= MAX_COORD:
        raise BitWidthViolation("x", x, BITS_PER_COORD)
    if not 0 <= y <= MAX_COORD:
        raise BitWidthViolation("y", y, BITS_PER_COORD)
    return _spread(x) | (_spread(y) << 1)


def deinterleave(code: int) -> Tuple[int, int]:
    """
    Split a Morton code back into its (x, y) grid indices.

    Bits above bit 43 are ignored.
    """
    code &= CODE_MASK
    return _compact(code), _compact(code >> 1)
