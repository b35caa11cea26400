"""Fixed tables used by the bcrypt hash: Blowfish boxes, magic IV and alphabet.

The Blowfish P-array and S-boxes are the hexadecimal digits of the
fractional part of pi, so they are computed here rather than listed.
"""

import string
import struct
from types import MappingProxyType

_P_WORDS = 18
_S_BOX_WORDS = 256
_S_BOXES = 4
_TOTAL_WORDS = _P_WORDS + _S_BOXES * _S_BOX_WORDS
_FRACTION_BITS = _TOTAL_WORDS * 32
_GUARD_BITS = 64


def _arctan_inverse(x: int, one: int) -> int:
    """Return arctan(1/x) as a fixed-point integer scaled by ``one``."""
    term = one // x
    total = term
    x_squared = x * x
    divisor = 1
    sign = -1
    while term:
        term //= x_squared
        divisor += 2
        total += sign * (term // divisor)
        sign = -sign
    return total


def _pi_fraction_words() -> tuple[int, ...]:
    """Return the leading 32-bit words of the fractional part of pi."""
    bits = _FRACTION_BITS + _GUARD_BITS
    one = 1 << bits
    # Machin's formula: pi = 16 atan(1/5) - 4 atan(1/239).
    pi_fixed = 16 * _arctan_inverse(5, one) - 4 * _arctan_inverse(239, one)
    fraction = (pi_fixed - 3 * one) >> _GUARD_BITS
    raw = fraction.to_bytes(_TOTAL_WORDS * 4, "big")
    return struct.unpack(f">{_TOTAL_WORDS}I", raw)


_PI_WORDS = _pi_fraction_words()

# "OrpheanBeholderScryDoubt" read as six big-endian 32-bit words.
MAGIC_WORDS: tuple[int, ...] = struct.unpack(">6I", b"OrpheanBeholderScryDoubt")

# Initial P-array: the first digits of pi.
P_INIT: tuple[int, ...] = _PI_WORDS[:_P_WORDS]

# Initial S-boxes: the continuation of the digits of pi.
S_INIT: tuple[tuple[int, ...], ...] = tuple(
    _PI_WORDS[_P_WORDS + box * _S_BOX_WORDS:_P_WORDS + (box + 1) * _S_BOX_WORDS]
    for box in range(_S_BOXES)
)

# The bcrypt base-64 alphabet (not the RFC 4648 one).
ITOA64 = "./" + string.ascii_uppercase + string.ascii_lowercase + string.digits

# Reverse lookup: character to its 6-bit value.
ATOI64 = MappingProxyType({char: value for value, char in enumerate(ITOA64)})