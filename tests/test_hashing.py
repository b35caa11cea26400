import pytest

from owbcrypt.blowfish import CryptError
from owbcrypt.hashing import (
    checkpw,
    generate_hash,
    gensalt,
    hashpw,
    validate_password,
)
from owbcrypt.tables import ITOA64

KNOWN = [
    ("U*U", "$2a$05$CCCCCCCCCCCCCCCCCCCCC.E5YPO9kmyuRGyh0XouQYb4YMJKvyOeW"),
    (b"\xa3", "$2y$05$/OK.fbVrR/bpIqNJ5ianF.Sa7shbm4.OzKpvFnX1pQLmQW96oUlCq"),
    (b"\xff\xff\xa3", "$2a$05$/OK.fbVrR/bpIqNJ5ianF.nqd1wy.pTMdcvrRWxyiGL2eMz.2a85."),
    (b"\xa3", "$2x$05$/OK.fbVrR/bpIqNJ5ianF.CE5elHaaO4EbggVDjb8P19RukzXSM3e"),
    ("", "$2a$05$CCCCCCCCCCCCCCCCCCCCC.7uG0VCzI2bS7j6ymqJi9CdcdxiRTWNy"),
]


def test_gensalt_shape():
    salt = gensalt(5)
    assert salt.startswith("$2a$05$")
    assert len(salt) == 29
    assert all(char in ITOA64 for char in salt[7:])


@pytest.mark.parametrize("factor", [0, 3, 32, -1])
def test_gensalt_out_of_range_defaults_to_twelve(factor):
    assert gensalt(factor).startswith("$2a$12$")


def test_gensalt_is_random():
    salts = [gensalt(4) for _ in range(8)]
    assert len(set(salts)) == 8
    assert {salt[:7] for salt in salts} == {"$2a$04$"}


@pytest.mark.parametrize("key, expected", KNOWN)
def test_hashpw_known_vectors(key, expected):
    assert hashpw(key, expected[:29]) == expected


def test_hashpw_with_full_hash_as_salt():
    key, expected = KNOWN[0]
    assert hashpw(key, expected) == expected


@pytest.mark.parametrize(
    "salt",
    [
        "$2a$03$CCCCCCCCCCCCCCCCCCCCC.",
        "$2a$32$CCCCCCCCCCCCCCCCCCCCC.",
        "$2c$05$CCCCCCCCCCCCCCCCCCCCC.",
        "*0",
        "",
    ],
)
def test_hashpw_rejects_bad_salt(salt):
    with pytest.raises(CryptError):
        hashpw("U*U", salt)


def test_checkpw_matches_known_hash():
    key, expected = KNOWN[0]
    assert checkpw(key, expected) is True


def test_checkpw_rejects_wrong_key():
    _, expected = KNOWN[0]
    assert checkpw("U*U*", expected) is False


def test_checkpw_rejects_trailing_garbage():
    key, expected = KNOWN[0]
    assert checkpw(key, expected + "x") is False


def test_checkpw_raises_on_invalid_hash():
    with pytest.raises(CryptError):
        checkpw("U*U", "not a hash")


def test_generate_and_validate_round_trip():
    password = "password"
    hashed = generate_hash(password, 4)
    assert hashed.startswith("$2a$04$")
    assert len(hashed) == 60
    assert validate_password(password, hashed) is True
    assert validate_password("secret", hashed) is False


def test_generate_hash_bytes_and_str_agree():
    password = "password"
    hashed = generate_hash(password, 4)
    assert hashpw(password.encode("utf-8"), hashed) == hashed


def test_validate_password_bad_hash_is_false():
    password = "password"
    assert validate_password(password, "$2c$05$CCCCCCCCCCCCCCCCCCCCC.") is False