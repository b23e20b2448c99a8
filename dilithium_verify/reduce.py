"""Modular reductions modulo Q on 32-bit signed coefficients."""

from __future__ import annotations

from .params import Q

__all__ = ["MONT", "QINV", "montgomery_reduce", "reduce32", "caddq"]

MONT = -4186625  # 2^32 mod Q
QINV = 58728449  # Q^(-1) mod 2^32


def _int32(value: int) -> int:
    return ((value + (1 << 31)) & 0xFFFFFFFF) - (1 << 31)


def _int64(value: int) -> int:
    return ((value + (1 << 63)) & 0xFFFFFFFFFFFFFFFF) - (1 << 63)


def montgomery_reduce(a: int) -> int:
    """Return r = a * 2^-32 mod Q with -Q < r < Q, for |a| <= 2^31 * Q."""
    a = _int64(a)
    t = _int32(_int32(a) * QINV)
    return _int32((a - t * Q) >> 32)


def reduce32(a: int) -> int:
    """Return r = a mod Q with -6283008 <= r <= 6283008, for a <= 2^31 - 2^22 - 1."""
    a = _int32(a)
    t = (a + (1 << 22)) >> 23
    return _int32(a - t * Q)


def caddq(a: int) -> int:
    """Add Q to ``a`` if it is negative."""
    a = _int32(a)
    return _int32(a + ((a >> 31) & Q))