"""The bcrypt ($2a$, $2b$, $2x$, $2y$) password hash on top of Blowfish."""

from functools import lru_cache

from . import radix64
from .tables import ATOI64, ITOA64, MAGIC_WORDS, P_INIT, S_INIT

_MASK = 0xFFFFFFFF
_ROUNDS = 16
_KEY_WORDS = _ROUNDS + 2

# Flags per subtype letter: bit 0 emulates the sign-extension bug,
# bit 1 enables the anti-collision safety measure, 4 marks "valid, no quirks".
_FLAGS_BY_SUBTYPE = {"a": 2, "b": 4, "x": 1, "y": 4}

_SELF_TEST_KEY = b"8b \xd0\xc1\xd2\xcf\xcc\xd8"
_SELF_TEST_SETTING = "$2a$00$abcdefghijklmnopqrstuu"
_SELF_TEST_HASHES = (
    "i1D709vfamulimlGcq0qq3UvuUasvEa",  # 'a', 'b', 'y'
    "VUrPmXD6q/nVSSp7pNDhCR9071IfIRe",  # 'x'
)
_SELF_TEST_SETKEY = b"\xff\xa3" b"34" b"\xff\xff\xff\xa3" b"345"

_GENSALT_DEFAULT_COST = 5


class CryptError(ValueError):
    """Raised when a setting, prefix or salt input is not acceptable."""


def _as_bytes(key: bytes | str) -> bytes:
    return key.encode("utf-8") if isinstance(key, str) else bytes(key)


def _key_stream(key: bytes):
    """Yield key bytes forever, as a C string including its terminator."""
    body = key.split(b"\0", 1)[0] + b"\0"
    while True:
        yield from body


def set_key(key: bytes | str, flags: int) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Expand a key into the Eksblowfish key words.

    Returns ``(expanded, initial)``: the 18 key words and the initial P-array
    (pi digits xored with the key, with the $2a$ safety tweak applied).
    """
    stream = _key_stream(_as_bytes(key))
    bug = flags & 1
    safety = (flags & 2) << 15
    sign = diff = 0
    expanded: list[int] = []
    initial: list[int] = []

    for p_word in P_INIT:
        correct = buggy = 0
        for position in range(4):
            byte = next(stream)
            correct = ((correct << 8) | byte) & _MASK
            signed = byte | 0xFFFFFF00 if byte & 0x80 else byte
            buggy = ((buggy << 8) | signed) & _MASK
            if position:
                sign |= buggy & 0x80
        diff |= correct ^ buggy
        word = buggy if bug else correct
        expanded.append(word)
        initial.append(p_word ^ word)

    diff |= diff >> 16
    diff &= 0xFFFF
    diff += 0xFFFF
    sign <<= 9
    sign &= (~diff & _MASK) & safety
    initial[0] ^= sign
    return tuple(expanded), tuple(initial)


def output_magic(setting: str) -> str:
    """Return the failure token: "*0", or "*1" when the setting itself is "*0"."""
    return "*1" if setting.startswith("*0") else "*0"


def _encrypt(left, right, p, s0, s1, s2, s3):
    left ^= p[0]
    for i in range(1, _ROUNDS + 1, 2):
        right ^= p[i] ^ (
            (((s0[left >> 24] + s1[(left >> 16) & 0xFF]) ^ s2[(left >> 8) & 0xFF])
             + s3[left & 0xFF]) & _MASK
        )
        left ^= p[i + 1] ^ (
            (((s0[right >> 24] + s1[(right >> 16) & 0xFF]) ^ s2[(right >> 8) & 0xFF])
             + s3[right & 0xFF]) & _MASK
        )
    return right ^ p[_ROUNDS + 1], left


def _expand(p, boxes):
    """Re-key P and all S-boxes by encrypting a zero block in chain."""
    s0, s1, s2, s3 = boxes
    left = right = 0
    for i in range(0, _KEY_WORDS, 2):
        left, right = _encrypt(left, right, p, s0, s1, s2, s3)
        p[i] = left
        p[i + 1] = right
    for box in boxes:
        for i in range(0, 256, 2):
            left, right = _encrypt(left, right, p, s0, s1, s2, s3)
            box[i] = left
            box[i + 1] = right


def _parse_setting(setting: str, min_count: int) -> tuple[int, int, list[int]]:
    if (
        len(setting) < 7
        or setting[0] != "$"
        or setting[1] != "2"
        or setting[2] not in _FLAGS_BY_SUBTYPE
        or setting[3] != "$"
        or setting[4] not in "0123"
        or setting[5] not in "0123456789"
        or (setting[4] == "3" and setting[5] > "1")
        or setting[6] != "$"
    ):
        raise CryptError(f"unsupported bcrypt setting {setting!r}")
    flags = _FLAGS_BY_SUBTYPE[setting[2]]
    count = 1 << int(setting[4:6])
    if count < min_count:
        raise CryptError(f"bcrypt cost too low in {setting!r}")
    try:
        raw = radix64.decode(setting[7:], 16)
    except ValueError as exc:
        raise CryptError(f"invalid bcrypt salt in {setting!r}") from exc
    salt = [int.from_bytes(raw[i:i + 4], "big") for i in range(0, 16, 4)]
    return flags, count, salt


def _bf_crypt(key: bytes, setting: str, min_count: int) -> str:
    flags, count, salt = _parse_setting(setting, min_count)
    expanded, initial = set_key(key, flags)

    p = list(initial)
    boxes = [list(box) for box in S_INIT]
    s0, s1, s2, s3 = boxes

    left = right = 0
    for i in range(0, _KEY_WORDS, 2):
        left ^= salt[i & 2]
        right ^= salt[(i & 2) + 1]
        left, right = _encrypt(left, right, p, s0, s1, s2, s3)
        p[i] = left
        p[i + 1] = right

    for box in boxes:
        for i in range(0, 256, 4):
            left ^= salt[2]
            right ^= salt[3]
            left, right = _encrypt(left, right, p, s0, s1, s2, s3)
            box[i] = left
            box[i + 1] = right
            left ^= salt[0]
            right ^= salt[1]
            left, right = _encrypt(left, right, p, s0, s1, s2, s3)
            box[i + 2] = left
            box[i + 3] = right

    salt_words = [salt[i & 3] for i in range(_KEY_WORDS)]
    for _ in range(count):
        for i, word in enumerate(expanded):
            p[i] ^= word
        _expand(p, boxes)
        for i, word in enumerate(salt_words):
            p[i] ^= word
        _expand(p, boxes)

    output_words: list[int] = []
    for i in range(0, 6, 2):
        left, right = MAGIC_WORDS[i], MAGIC_WORDS[i + 1]
        for _ in range(64):
            left, right = _encrypt(left, right, p, s0, s1, s2, s3)
        output_words += (left, right)

    digest = b"".join(word.to_bytes(4, "big") for word in output_words)
    last_salt_char = ITOA64[ATOI64[setting[28]] & 0x30]
    return setting[:28] + last_salt_char + radix64.encode(digest[:23])


@lru_cache(maxsize=None)
def _self_test(subtype: str) -> bool:
    """Check the implementation against known answers for one subtype."""
    test_setting = _SELF_TEST_SETTING[:2] + subtype + _SELF_TEST_SETTING[3:]
    expected = test_setting + _SELF_TEST_HASHES[_FLAGS_BY_SUBTYPE[subtype] & 1]
    try:
        ok = _bf_crypt(_SELF_TEST_KEY, test_setting, 1) == expected
    except CryptError:
        ok = False

    ae, ai = set_key(_SELF_TEST_SETKEY, 2)
    ye, yi = set_key(_SELF_TEST_SETKEY, 4)
    ai_undone = (ai[0] ^ 0x10000,) + ai[1:]
    return (
        ok
        and ai_undone[0] == 0xDB9C59BC
        and ye[17] == 0x33343500
        and ae == ye
        and ai_undone == yi
    )


def crypt_blowfish(key: bytes | str, setting: str) -> str:
    """Hash ``key`` with a bcrypt setting (a salt string or a full hash).

    Only the key bytes up to the first NUL count, and at most 72 of them.
    Raises CryptError when the setting is malformed or its cost is below 4.
    """
    result = _bf_crypt(_as_bytes(key), setting, 16)
    if not _self_test(setting[2]):
        raise CryptError("bcrypt self-test failed")
    return result


def gensalt_blowfish(prefix: str, count: int, data: bytes) -> str:
    """Build a bcrypt setting from a prefix, a cost and 16 random bytes.

    A ``count`` of 0 selects the default cost of 5.
    """
    if (
        len(data) < 16
        or (count and not 4 <= count <= 31)
        or len(prefix) < 3
        or prefix[0] != "$"
        or prefix[1] != "2"
        or prefix[2] not in "aby"
    ):
        raise CryptError("invalid bcrypt salt parameters")
    cost = count or _GENSALT_DEFAULT_COST
    return f"$2{prefix[2]}${cost:02d}${radix64.encode(bytes(data[:16]))}"