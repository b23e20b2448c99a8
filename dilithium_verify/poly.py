"""Operations on polynomials of Z_Q[X]/(X^256 + 1), held as lists of N ints."""

from __future__ import annotations

from typing import Sequence

from .ntt import invntt_tomont, ntt
from .params import D, N, Q
from .reduce import caddq, montgomery_reduce, reduce32
from .rounding import use_hint
from .shake import SHAKE256_RATE, STREAM128_BLOCKBYTES, shake256_xof, stream128

__all__ = [
    "POLY_UNIFORM_NBLOCKS",
    "poly_reduce",
    "poly_caddq",
    "poly_add",
    "poly_sub",
    "poly_shiftl",
    "poly_ntt",
    "poly_invntt_tomont",
    "poly_pointwise_montgomery",
    "poly_use_hint",
    "poly_chknorm",
    "poly_uniform",
    "poly_challenge",
    "polyt1_unpack",
    "polyz_unpack",
    "polyw1_pack",
]

POLY_UNIFORM_NBLOCKS = (768 + STREAM128_BLOCKBYTES - 1) // STREAM128_BLOCKBYTES

_T1_BYTES = 320
_GAMMA2_32 = (Q - 1) // 32
_GAMMA2_88 = (Q - 1) // 88


def _checked(a: Sequence[int]) -> list[int]:
    coeffs = [int(x) for x in a]
    if len(coeffs) != N:
        raise ValueError(f"polynomial must have {N} coefficients, got {len(coeffs)}")
    return coeffs


def _checked_pair(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], list[int]]:
    return _checked(a), _checked(b)


def _packed(data: bytes, size: int, what: str) -> bytes:
    data = bytes(data)
    if len(data) < size:
        raise ValueError(f"{what} needs {size} bytes, got {len(data)}")
    return data[:size]


def poly_reduce(a: Sequence[int]) -> list[int]:
    """Reduce every coefficient to a representative in [-6283008, 6283008]."""
    return [reduce32(x) for x in _checked(a)]


def poly_caddq(a: Sequence[int]) -> list[int]:
    """Add Q to every negative coefficient."""
    return [caddq(x) for x in _checked(a)]


def poly_add(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Coefficient-wise sum, without reduction."""
    a, b = _checked_pair(a, b)
    return [x + y for x, y in zip(a, b)]


def poly_sub(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Coefficient-wise difference ``a - b``, without reduction."""
    a, b = _checked_pair(a, b)
    return [x - y for x, y in zip(a, b)]


def poly_shiftl(a: Sequence[int]) -> list[int]:
    """Multiply by 2^D without reduction."""
    return [x << D for x in _checked(a)]


def poly_ntt(a: Sequence[int]) -> list[int]:
    """Forward NTT of the polynomial."""
    return ntt(_checked(a))


def poly_invntt_tomont(a: Sequence[int]) -> list[int]:
    """Inverse NTT and multiplication by 2^32."""
    return invntt_tomont(_checked(a))


def poly_pointwise_montgomery(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Pointwise product in the NTT domain, multiplied by 2^-32."""
    a, b = _checked_pair(a, b)
    return [montgomery_reduce(x * y) for x, y in zip(a, b)]


def poly_use_hint(a: Sequence[int], h: Sequence[int], gamma2: int) -> list[int]:
    """High bits of ``a`` corrected by the hint polynomial ``h``."""
    a, h = _checked_pair(a, h)
    return [use_hint(x, hint, gamma2) for x, hint in zip(a, h)]


def poly_chknorm(a: Sequence[int], bound: int) -> bool:
    """True if some coefficient has absolute value >= ``bound``.

    Bounds above (Q-1)/8 are always reported as exceeded.
    """
    coeffs = _checked(a)
    if bound > (Q - 1) // 8:
        return True
    return any(abs(x) >= bound for x in coeffs)


def _rej_uniform(buf: bytes, wanted: int) -> list[int]:
    out: list[int] = []
    for pos in range(0, len(buf) - 2, 3):
        if len(out) >= wanted:
            break
        t = int.from_bytes(buf[pos : pos + 3], "little") & 0x7FFFFF
        if t < Q:
            out.append(t)
    return out


def poly_uniform(seed: bytes, nonce: int) -> list[int]:
    """Sample coefficients uniform in [0, Q-1] from SHAKE128(seed | nonce)."""
    xof = stream128(seed, nonce)
    buf = xof.squeeze_blocks(POLY_UNIFORM_NBLOCKS)
    coeffs = _rej_uniform(buf, N)
    while len(coeffs) < N:
        leftover = buf[len(buf) - len(buf) % 3 :]
        buf = leftover + xof.squeeze_blocks(1)
        coeffs += _rej_uniform(buf, N - len(coeffs))
    return coeffs


def poly_challenge(seed: bytes, tau: int) -> list[int]:
    """Sample a polynomial with ``tau`` coefficients in {-1, 1} from SHAKE256(seed)."""
    if not 0 <= tau <= N:
        raise ValueError(f"tau out of range: {tau}")
    xof = shake256_xof().absorb(bytes(seed)).finalize()
    buf = xof.squeeze_blocks(1)
    signs = int.from_bytes(buf[:8], "little")
    pos = 8

    c = [0] * N
    for i in range(N - tau, N):
        while True:
            if pos >= SHAKE256_RATE:
                buf = xof.squeeze_blocks(1)
                pos = 0
            b = buf[pos]
            pos += 1
            if b <= i:
                break
        c[i] = c[b]
        c[b] = 1 - 2 * (signs & 1)
        signs >>= 1
    return c


def polyt1_unpack(data: bytes) -> list[int]:
    """Unpack 256 10-bit coefficients from 320 bytes."""
    data = _packed(data, _T1_BYTES, "t1 polynomial")
    coeffs: list[int] = []
    for i in range(0, _T1_BYTES, 5):
        chunk = int.from_bytes(data[i : i + 5], "little")
        coeffs.extend((chunk >> (10 * j)) & 0x3FF for j in range(4))
    return coeffs


def polyz_unpack(data: bytes, gamma1: int) -> list[int]:
    """Unpack z with coefficients in [-(gamma1 - 1), gamma1]."""
    if gamma1 == 1 << 17:
        bits, size = 18, 576
    elif gamma1 == 1 << 19:
        bits, size = 20, 640
    else:
        raise ValueError(f"unsupported gamma1: {gamma1}")
    data = _packed(data, size, "z polynomial")
    mask = (1 << bits) - 1
    value = int.from_bytes(data, "little")
    return [gamma1 - ((value >> (bits * i)) & mask) for i in range(N)]


def polyw1_pack(a: Sequence[int], gamma2: int) -> bytes:
    """Bit-pack w1 with coefficients in [0, 15] or [0, 43]."""
    coeffs = _checked(a)
    out = bytearray()
    if gamma2 == _GAMMA2_88:
        for i in range(0, N, 4):
            c0, c1, c2, c3 = coeffs[i : i + 4]
            out.append((c0 | (c1 << 6)) & 0xFF)
            out.append(((c1 >> 2) | (c2 << 4)) & 0xFF)
            out.append(((c2 >> 4) | (c3 << 2)) & 0xFF)
    elif gamma2 == _GAMMA2_32:
        for i in range(0, N, 2):
            out.append((coeffs[i] | (coeffs[i + 1] << 4)) & 0xFF)
    else:
        raise ValueError(f"unsupported gamma2: {gamma2}")
    return bytes(out)