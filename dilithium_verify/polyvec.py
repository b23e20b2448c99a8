"""Vectors and matrices of polynomials, held as lists of polynomials."""

from __future__ import annotations

from typing import Sequence

from .poly import (
    poly_add,
    poly_caddq,
    poly_chknorm,
    poly_invntt_tomont,
    poly_ntt,
    poly_pointwise_montgomery,
    poly_reduce,
    poly_shiftl,
    poly_sub,
    poly_uniform,
    poly_use_hint,
    polyw1_pack,
)

__all__ = [
    "matrix_expand",
    "matrix_pointwise_montgomery",
    "pointwise_acc_montgomery",
    "polyvec_ntt",
    "polyvec_invntt_tomont",
    "polyvec_chknorm",
    "polyvec_reduce",
    "polyvec_caddq",
    "polyvec_sub",
    "polyvec_shiftl",
    "polyvec_pointwise_poly_montgomery",
    "polyvec_use_hint",
    "pack_w1",
]

Poly = list[int]
PolyVec = list[Poly]


def _same_length(u: Sequence, v: Sequence) -> None:
    if len(u) != len(v):
        raise ValueError(f"vector lengths differ: {len(u)} and {len(v)}")


def matrix_expand(rho: bytes, k: int, l: int) -> list[PolyVec]:  # noqa: E741
    """ExpandA: a k-by-l matrix sampled from SHAKE128(rho | j | i)."""
    return [[poly_uniform(rho, (i << 8) + j) for j in range(l)] for i in range(k)]


def pointwise_acc_montgomery(u: Sequence[Sequence[int]], v: Sequence[Sequence[int]]) -> Poly:
    """Sum of pointwise products of two vectors in the NTT domain, times 2^-32."""
    _same_length(u, v)
    if not u:
        raise ValueError("vectors must not be empty")
    acc = poly_pointwise_montgomery(u[0], v[0])
    for a, b in zip(u[1:], v[1:]):
        acc = poly_add(acc, poly_pointwise_montgomery(a, b))
    return acc


def matrix_pointwise_montgomery(
    mat: Sequence[Sequence[Sequence[int]]], v: Sequence[Sequence[int]]
) -> PolyVec:
    """Matrix-vector product in the NTT domain."""
    return [pointwise_acc_montgomery(row, v) for row in mat]


def polyvec_ntt(v: Sequence[Sequence[int]]) -> PolyVec:
    """Forward NTT of every polynomial."""
    return [poly_ntt(p) for p in v]


def polyvec_invntt_tomont(v: Sequence[Sequence[int]]) -> PolyVec:
    """Inverse NTT and multiplication by 2^32 of every polynomial."""
    return [poly_invntt_tomont(p) for p in v]


def polyvec_chknorm(v: Sequence[Sequence[int]], bound: int) -> bool:
    """True if any polynomial has a coefficient at or beyond ``bound``."""
    return any(poly_chknorm(p, bound) for p in v)


def polyvec_reduce(v: Sequence[Sequence[int]]) -> PolyVec:
    """Reduce every coefficient to a representative in [-6283008, 6283008]."""
    return [poly_reduce(p) for p in v]


def polyvec_caddq(v: Sequence[Sequence[int]]) -> PolyVec:
    """Add Q to every negative coefficient."""
    return [poly_caddq(p) for p in v]


def polyvec_sub(u: Sequence[Sequence[int]], v: Sequence[Sequence[int]]) -> PolyVec:
    """Element-wise difference ``u - v``, without reduction."""
    _same_length(u, v)
    return [poly_sub(a, b) for a, b in zip(u, v)]


def polyvec_shiftl(v: Sequence[Sequence[int]]) -> PolyVec:
    """Multiply every polynomial by 2^D without reduction."""
    return [poly_shiftl(p) for p in v]


def polyvec_pointwise_poly_montgomery(
    a: Sequence[int], v: Sequence[Sequence[int]]
) -> PolyVec:
    """Pointwise product of one polynomial with every vector entry."""
    return [poly_pointwise_montgomery(a, p) for p in v]


def polyvec_use_hint(
    u: Sequence[Sequence[int]], h: Sequence[Sequence[int]], gamma2: int
) -> PolyVec:
    """High bits of ``u`` corrected by the hint vector ``h``."""
    _same_length(u, h)
    return [poly_use_hint(a, b, gamma2) for a, b in zip(u, h)]


def pack_w1(w1: Sequence[Sequence[int]], gamma2: int) -> bytes:
    """Concatenated bit-packing of every polynomial of w1."""
    return b"".join(polyw1_pack(p, gamma2) for p in w1)