"""Forward and inverse number-theoretic transform over Z_Q[X]/(X^256 + 1)."""

from __future__ import annotations

from typing import Sequence

from .params import N, Q
from .reduce import montgomery_reduce

__all__ = ["ZETAS", "ntt", "invntt_tomont"]

_ROOT_OF_UNITY = 1753
_MONT = pow(2, 32, Q)


def _centered(x: int) -> int:
    x %= Q
    return x - Q if x > Q // 2 else x


def _bit_reverse8(i: int) -> int:
    return int(f"{i:08b}"[::-1], 2)


def _make_zetas() -> tuple[int, ...]:
    # Entry 0 is never used by the transforms and is kept as zero.
    return (0,) + tuple(
        _centered(_MONT * pow(_ROOT_OF_UNITY, _bit_reverse8(i), Q))
        for i in range(1, N)
    )


# Powers of the root of unity in Montgomery form, in bit-reversed order.
ZETAS: tuple[int, ...] = _make_zetas()

# Montgomery factor squared divided by 256, undoing the scaling of the inverse.
_INV_F = _centered(pow(2, 64, Q) * pow(N, -1, Q))

_LENGTHS_DOWN = tuple(128 >> level for level in range(8))


def _coefficients(a: Sequence[int]) -> list[int]:
    coeffs = [int(x) for x in a]
    if len(coeffs) != N:
        raise ValueError(f"polynomial must have {N} coefficients, got {len(coeffs)}")
    return coeffs


def ntt(a: Sequence[int]) -> list[int]:
    """Forward NTT; output is in bit-reversed order and not reduced."""
    coeffs = _coefficients(a)
    zeta_index = iter(range(1, N))
    for length in _LENGTHS_DOWN:
        for start in range(0, N, 2 * length):
            zeta = ZETAS[next(zeta_index)]
            for lo in range(start, start + length):
                hi = lo + length
                t = montgomery_reduce(zeta * coeffs[hi])
                coeffs[lo], coeffs[hi] = coeffs[lo] + t, coeffs[lo] - t
    return coeffs


def invntt_tomont(a: Sequence[int]) -> list[int]:
    """Inverse NTT followed by multiplication by the Montgomery factor 2^32.

    Inputs must be smaller than Q in absolute value; so are the outputs.
    """
    coeffs = _coefficients(a)
    zeta_index = iter(range(N - 1, 0, -1))
    for length in reversed(_LENGTHS_DOWN):
        for start in range(0, N, 2 * length):
            zeta = -ZETAS[next(zeta_index)]
            for lo in range(start, start + length):
                hi = lo + length
                x, y = coeffs[lo], coeffs[hi]
                coeffs[lo] = x + y
                coeffs[hi] = montgomery_reduce(zeta * (x - y))
    return [montgomery_reduce(_INV_F * x) for x in coeffs]