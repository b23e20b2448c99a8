"""Base64 encoding and decoding with the standard alphabet and '=' padding."""

from __future__ import annotations

__all__ = [
    "BASE64_PAD",
    "encoded_size",
    "decoded_size",
    "b64_encode",
    "b64_decode",
]

BASE64_PAD = "="
_FIRST = "+"
_LAST = "z"

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_DECODE = {ch: value for value, ch in enumerate(_ALPHABET)}


def encoded_size(length: int) -> int:
    """Buffer size for encoding ``length`` bytes, terminating NUL included."""
    return ((length + 2) // 3) * 4 + 1


def decoded_size(length: int) -> int:
    """Upper bound on the number of bytes decoded from ``length`` characters."""
    return (length // 4) * 3


def b64_encode(data: bytes) -> str:
    """Encode ``data`` as padded base64 text."""
    data = bytes(data)
    out: list[str] = []
    for start in range(0, len(data), 3):
        chunk = data[start : start + 3]
        value = int.from_bytes(chunk + b"\0" * (3 - len(chunk)), "big")
        digits = [_ALPHABET[(value >> shift) & 0x3F] for shift in (18, 12, 6, 0)]
        kept = len(chunk) + 1
        out.extend(digits[:kept])
        out.append(BASE64_PAD * (4 - kept))
    return "".join(out)


def b64_decode(text: str | bytes) -> bytes:
    """Decode base64 text.

    Decoding stops at the first '=' character; anything after it is ignored.
    Raises ValueError if the length is not a multiple of four or if a
    character outside the alphabet appears before the padding.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    if len(text) % 4:
        raise ValueError(f"base64 length must be a multiple of 4, got {len(text)}")

    out = bytearray()
    pending = 0
    for index, ch in enumerate(text):
        if ch == BASE64_PAD:
            break
        if not _FIRST <= ch <= _LAST or ch not in _DECODE:
            raise ValueError(f"invalid base64 character {ch!r} at offset {index}")
        c = _DECODE[ch]
        phase = index % 4
        if phase == 0:
            pending = (c << 2) & 0xFF
        elif phase == 1:
            out.append(pending | ((c >> 4) & 0x3))
            pending = (c & 0xF) << 4
        elif phase == 2:
            out.append(pending | ((c >> 2) & 0xF))
            pending = (c & 0x3) << 6
        else:
            out.append(pending | c)
    return bytes(out)