"""Salt builders for the traditional DES, extended BSDI DES and MD5 crypt schemes."""

from .blowfish import CryptError

# The crypt(3) base-64 alphabet; digits come before letters here.
ITOA64 = "./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

_EXTENDED_DEFAULT_COUNT = 725
_EXTENDED_MAX_COUNT = 0xFFFFFF
_TRADITIONAL_COUNT = 25
_MD5_COUNT = 1000


def _encode_24(value: int) -> str:
    """Encode the low 24 bits of ``value`` as four characters, least significant first."""
    return "".join(ITOA64[(value >> shift) & 0x3F] for shift in (0, 6, 12, 18))


def _little_endian_24(chunk: bytes) -> int:
    return int.from_bytes(chunk[:3], "little")


def gensalt_traditional(prefix: str, count: int, data: bytes) -> str:
    """Build a two-character traditional DES salt from two random bytes.

    ``count`` must be 0 or 25. ``prefix`` is not used.
    """
    if len(data) < 2 or (count and count != _TRADITIONAL_COUNT):
        raise CryptError("invalid traditional DES salt parameters")
    return ITOA64[data[0] & 0x3F] + ITOA64[data[1] & 0x3F]


def gensalt_extended(prefix: str, count: int, data: bytes) -> str:
    """Build an extended DES setting ("_" + count + salt) from three random bytes.

    ``count`` must be 0 (meaning 725) or an odd number up to 0xffffff;
    even counts make weak DES keys easier to spot and are refused.
    """
    if len(data) < 3 or (count and (count > _EXTENDED_MAX_COUNT or not count & 1)):
        raise CryptError("invalid extended DES salt parameters")
    rounds = count or _EXTENDED_DEFAULT_COUNT
    return "_" + _encode_24(rounds) + _encode_24(_little_endian_24(data))


def gensalt_md5(prefix: str, count: int, data: bytes) -> str:
    """Build an MD5 crypt setting ("$1$" + salt) from three or six random bytes.

    ``count`` must be 0 or 1000. With at least six bytes the salt has
    eight characters, otherwise four.
    """
    if len(data) < 3 or (count and count != _MD5_COUNT):
        raise CryptError("invalid MD5 salt parameters")
    salt = _encode_24(_little_endian_24(data))
    if len(data) >= 6:
        salt += _encode_24(_little_endian_24(data[3:6]))
    return "$1$" + salt