"""crypt(3)-style entry points: hashing with a setting and salt generation."""

from .blowfish import CryptError, crypt_blowfish, gensalt_blowfish, output_magic
from .gensalt import ITOA64, gensalt_extended, gensalt_md5, gensalt_traditional

_BLOWFISH_PREFIXES = ("$2a$", "$2b$", "$2y$")


def crypt_rn(key: bytes | str, setting: str) -> str:
    """Hash ``key`` with ``setting``; raise CryptError if the setting is refused."""
    return crypt_blowfish(key, setting)


def crypt(key: bytes | str, setting: str) -> str:
    """Hash ``key`` with ``setting``.

    On failure return the token "*0" (or "*1" when the setting is "*0"),
    which can never match a real hash.
    """
    try:
        return crypt_rn(key, setting)
    except CryptError:
        return output_magic(setting)


def gensalt(prefix: str, count: int, data: bytes | None) -> str:
    """Build a setting for the scheme named by ``prefix`` from random ``data``.

    ``count`` is the scheme's cost parameter, 0 for its default.
    Raises CryptError for an unknown prefix, missing data or bad parameters.
    """
    if data is None:
        raise CryptError("no random input given")
    data = bytes(data)

    if prefix.startswith(_BLOWFISH_PREFIXES):
        builder = gensalt_blowfish
    elif prefix.startswith("$1$"):
        builder = gensalt_md5
    elif prefix.startswith("_"):
        builder = gensalt_extended
    elif not prefix or (
        len(prefix) >= 2 and prefix[0] in ITOA64 and prefix[1] in ITOA64
    ):
        builder = gensalt_traditional
    else:
        raise CryptError(f"unsupported salt prefix {prefix!r}")

    return builder(prefix, count, data)