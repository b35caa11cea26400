import pytest

from owbcrypt.blowfish import CryptError
from owbcrypt.gensalt import (
    ITOA64,
    gensalt_extended,
    gensalt_md5,
    gensalt_traditional,
)


def _decode_24(text):
    return sum(ITOA64.index(char) << (6 * i) for i, char in enumerate(text))


def test_traditional_uses_low_six_bits():
    assert gensalt_traditional("", 0, b"\x00\x01") == "./"
    assert gensalt_traditional("", 25, b"\x40\x41") == "./"


def test_traditional_characters_come_from_alphabet():
    salt = gensalt_traditional("ab", 0, bytes(range(200, 202)))
    assert len(salt) == 2
    assert all(char in ITOA64 for char in salt)


@pytest.mark.parametrize("count", [1, 24, 26, 1000])
def test_traditional_rejects_other_counts(count):
    with pytest.raises(CryptError):
        gensalt_traditional("", count, b"ab")


def test_traditional_rejects_short_input():
    with pytest.raises(CryptError):
        gensalt_traditional("", 0, b"a")


def test_extended_default_count_round_trips():
    salt = gensalt_extended("_", 0, b"\x00\x00\x00")
    assert salt[0] == "_"
    assert len(salt) == 9
    assert _decode_24(salt[1:5]) == 725
    assert salt[5:] == "...."


@pytest.mark.parametrize("count", [1, 3, 725, 12345, 0xFFFFFF])
def test_extended_count_round_trips(count):
    data = b"\x12\x34\x56"
    salt = gensalt_extended("_", count, data)
    assert _decode_24(salt[1:5]) == count
    assert _decode_24(salt[5:9]) == int.from_bytes(data, "little")


@pytest.mark.parametrize("count", [2, 724, 0x1000000, 0x1000001])
def test_extended_rejects_even_or_large_counts(count):
    with pytest.raises(CryptError):
        gensalt_extended("_", count, b"abc")


def test_extended_rejects_short_input():
    with pytest.raises(CryptError):
        gensalt_extended("_", 0, b"ab")


def test_md5_with_three_bytes_has_four_salt_chars():
    assert gensalt_md5("$1$", 0, b"\x00\x00\x00") == "$1$...."
    assert gensalt_md5("$1$", 1000, b"\x00\x00\x00\x00\x00") == "$1$...."


def test_md5_with_six_bytes_has_eight_salt_chars():
    data = b"\x01\x02\x03\x04\x05\x06"
    salt = gensalt_md5("$1$", 0, data)
    assert salt.startswith("$1$")
    assert len(salt) == 11
    assert _decode_24(salt[3:7]) == int.from_bytes(data[:3], "little")
    assert _decode_24(salt[7:11]) == int.from_bytes(data[3:6], "little")


def test_md5_extra_bytes_ignored():
    data = bytes(range(6))
    assert gensalt_md5("$1$", 0, data + b"zzz") == gensalt_md5("$1$", 0, data)


@pytest.mark.parametrize("count", [1, 999, 1001])
def test_md5_rejects_other_counts(count):
    with pytest.raises(CryptError):
        gensalt_md5("$1$", count, b"abcdef")


def test_md5_rejects_short_input():
    with pytest.raises(CryptError):
        gensalt_md5("$1$", 0, b"ab")