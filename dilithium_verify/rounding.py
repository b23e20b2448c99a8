"""Decomposition into high and low bits and hint application."""

from __future__ import annotations

from .params import Q

__all__ = ["decompose", "use_hint"]

_GAMMA2_32 = (Q - 1) // 32
_GAMMA2_88 = (Q - 1) // 88


def decompose(a: int, gamma2: int) -> tuple[int, int]:
    """Split a standard representative ``a`` into ``(a1, a0)``.

    ``a mod+ Q = a1 * 2*gamma2 + a0`` with ``-gamma2 < a0 <= gamma2``, except
    when ``a1`` would be ``(Q-1)/(2*gamma2)``: then ``a1 = 0`` and
    ``a0 = a - Q``.
    """
    a1 = (a + 127) >> 7
    if gamma2 == _GAMMA2_32:
        a1 = (a1 * 1025 + (1 << 21)) >> 22
        a1 &= 15
    elif gamma2 == _GAMMA2_88:
        a1 = (a1 * 11275 + (1 << 23)) >> 24
        a1 ^= ((43 - a1) >> 31) & a1
    else:
        raise ValueError(f"unsupported gamma2: {gamma2}")

    a0 = a - a1 * 2 * gamma2
    a0 -= (((Q - 1) // 2 - a0) >> 31) & Q
    return a1, a0


def use_hint(a: int, hint: int, gamma2: int) -> int:
    """Return the high bits of ``a``, corrected by the hint bit."""
    a1, a0 = decompose(a, gamma2)
    if hint == 0:
        return a1

    if gamma2 == _GAMMA2_32:
        return (a1 + 1) & 15 if a0 > 0 else (a1 - 1) & 15
    if a0 > 0:
        return 0 if a1 == 43 else a1 + 1
    return 43 if a1 == 0 else a1 - 1