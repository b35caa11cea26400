# owbcrypt

Password hashing with bcrypt, written entirely in Python with no
dependencies outside the standard library. Hashes it produces are
interchangeable with those of other bcrypt implementations using the
`$2a$`, `$2b$`, `$2x$` and `$2y$` prefixes.

## Installing

```
pip install owbcrypt
```

## Hashing and checking passwords

The simplest interface lives in `owbcrypt.hashing`:

```python
from owbcrypt.hashing import generate_hash, validate_password

password = "password"
hashed = generate_hash(password, 12)      # "$2a$12$..." (60 characters)

validate_password(password, hashed)       # True
validate_password("secret", hashed)       # False
```

The second argument of `generate_hash` is the work factor (default 12):
the cost doubles with each step. Values from 4 to 31 are accepted;
anything outside that range falls back to 12. Being pure Python, hashing
is much slower than in compiled implementations, so high work factors
take a long time.

The same module exposes the individual steps:

- `gensalt(factor)` draws 16 random bytes from `os.urandom` and returns
  a `$2a$` salt string for the given work factor.
- `hashpw(password, salt)` hashes a password with a salt. An existing
  hash can be passed as the salt to recompute it. It raises
  `owbcrypt.blowfish.CryptError` when the salt is not a usable bcrypt
  setting.
- `checkpw(password, hashed)` checks a password against a stored hash,
  comparing the results in constant time. It raises `CryptError` for a
  malformed hash, whereas `validate_password` returns `False` instead.

Passwords may be given as `str` (encoded as UTF-8) or `bytes`. Only the
bytes before the first NUL byte, and at most the first 72 of them, take
part in the hash.

## Lower-level interface

`owbcrypt.api` offers crypt(3)-style entry points:

- `crypt_rn(key, setting)` hashes `key` with the bcrypt `setting` and
  raises `CryptError` if the setting is not valid (including a cost
  below 4).
- `crypt(key, setting)` does the same but, on failure, returns the
  failure marker `"*0"` (or `"*1"` when the setting itself begins with
  `"*0"`), which can never match a real hash.
- `gensalt(prefix, count, data)` builds a setting string from a prefix,
  a cost (`0` for the scheme's default) and caller-supplied random
  bytes. The prefixes `$2a$`, `$2b$` and `$2y$` give bcrypt settings
  (16 bytes of data, cost 4 to 31, default 5); `$1$`, `_` and
  two-character prefixes give settings in the MD5, extended DES and
  traditional DES formats.

```python
import os
from owbcrypt.api import crypt, gensalt

setting = gensalt("$2b$", 10, os.urandom(16))
password = "password"
hashed = crypt(password, setting)
assert crypt(password, hashed) == hashed
```

`CryptError` is a subclass of `ValueError`.

Other modules:

- `owbcrypt.blowfish` holds the bcrypt algorithm itself
  (`crypt_blowfish`, `gensalt_blowfish`, `set_key`, `output_magic`,
  `CryptError`). Before returning a hash, `crypt_blowfish` checks itself
  once per hash prefix against known answers.
- `owbcrypt.gensalt` holds the salt builders for the other formats
  (`gensalt_traditional`, `gensalt_extended`, `gensalt_md5`).
- `owbcrypt.radix64` holds the bcrypt flavour of base-64 (`encode`,
  `decode`).
- `owbcrypt.tables` holds the Blowfish initial boxes, the magic words and
  the bcrypt alphabet.

## Hash prefixes

| Prefix | Meaning |
| ------ | ------- |
| `$2b$` | Correct handling of all password bytes. |
| `$2y$` | Same as `$2b$`. |
| `$2a$` | Correct handling, plus a safeguard against collisions with hashes made by old implementations that sign-extended 8-bit characters. |
| `$2x$` | Reproduces that old sign-extension behaviour, for checking legacy hashes only. |

`gensalt` does not build `$2x$` settings, but `crypt` and `crypt_rn`
accept them.

## What this package does not do

Only bcrypt hashes can be computed. The MD5, extended DES and
traditional DES settings made by `owbcrypt.api.gensalt` are salt strings
only: passing them to `crypt_rn` raises `CryptError`, and `crypt`
returns `"*0"`. There is no command-line program.

## Running the tests

```
pip install owbcrypt[test]
pytest
```