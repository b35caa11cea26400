"""The base-64 variant bcrypt uses for salts and digests."""

from collections.abc import Iterator

from .tables import ATOI64, ITOA64


def encode(data: bytes) -> str:
    """Encode bytes with the bcrypt alphabet, without padding."""
    out: list[str] = []
    for start in range(0, len(data), 3):
        chunk = data[start:start + 3]
        first = chunk[0]
        out.append(ITOA64[first >> 2])
        carry = (first & 0x03) << 4
        if len(chunk) == 1:
            out.append(ITOA64[carry])
            break
        second = chunk[1]
        out.append(ITOA64[carry | (second >> 4)])
        carry = (second & 0x0F) << 2
        if len(chunk) == 2:
            out.append(ITOA64[carry])
            break
        third = chunk[2]
        out.append(ITOA64[carry | (third >> 6)])
        out.append(ITOA64[third & 0x3F])
    return "".join(out)


def _digits(text: str) -> Iterator[int]:
    for char in text:
        value = ATOI64.get(char)
        if value is None:
            raise ValueError(f"invalid character {char!r} in bcrypt base-64 text")
        yield value
    raise ValueError("bcrypt base-64 text is too short")


def decode(text: str, size: int) -> bytes:
    """Decode exactly ``size`` bytes from the start of ``text``.

    Characters beyond those needed are ignored. Raises ValueError when a
    needed character is outside the alphabet or the text runs out.
    """
    digits = _digits(text)
    out = bytearray()
    while len(out) < size:
        c1 = next(digits)
        c2 = next(digits)
        out.append(((c1 << 2) | ((c2 & 0x30) >> 4)) & 0xFF)
        if len(out) >= size:
            break
        c3 = next(digits)
        out.append((((c2 & 0x0F) << 4) | ((c3 & 0x3C) >> 2)) & 0xFF)
        if len(out) >= size:
            break
        c4 = next(digits)
        out.append((((c3 & 0x03) << 6) | c4) & 0xFF)
    return bytes(out)