"""High-level bcrypt helpers: salt generation, hashing and verification."""

import hmac
import os

from .api import crypt_rn, gensalt as _build_setting
from .blowfish import CryptError

HASH_PREFIX = "$2a$"
DEFAULT_WORK_FACTOR = 12
MIN_WORK_FACTOR = 4
MAX_WORK_FACTOR = 31
_RANDOM_BYTES = 16


def gensalt(factor: int = DEFAULT_WORK_FACTOR) -> str:
    """Generate a fresh "$2a$" salt with the given work factor.

    A factor outside 4..31 falls back to 12. Raises OSError if the system
    random source fails, CryptError if the salt cannot be built.
    """
    if not MIN_WORK_FACTOR <= factor <= MAX_WORK_FACTOR:
        factor = DEFAULT_WORK_FACTOR
    return _build_setting(HASH_PREFIX, factor, os.urandom(_RANDOM_BYTES))


def hashpw(password: bytes | str, salt: str) -> str:
    """Hash ``password`` with ``salt``, which may also be a complete hash.

    Raises CryptError when the salt is not a usable bcrypt setting.
    """
    return crypt_rn(password, salt)


def checkpw(password: bytes | str, hashed: str) -> bool:
    """Tell whether ``password`` matches ``hashed``, comparing in constant time.

    Raises CryptError when ``hashed`` is not a usable bcrypt hash.
    """
    computed = hashpw(password, hashed)
    return hmac.compare_digest(computed.encode("utf-8"), hashed.encode("utf-8"))


def generate_hash(password: bytes | str, workload: int = DEFAULT_WORK_FACTOR) -> str:
    """Hash ``password`` under a newly generated salt of the given workload."""
    return hashpw(password, gensalt(workload))


def validate_password(password: bytes | str, hashed: str) -> bool:
    """Return True only if ``password`` matches ``hashed``; a bad hash gives False."""
    try:
        return checkpw(password, hashed)
    except CryptError:
        return False