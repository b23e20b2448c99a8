"""Unpacking of public keys and signatures."""

from __future__ import annotations

from .params import N, POLYT1_PACKEDBYTES, SEEDBYTES, ParameterSet
from .poly import polyt1_unpack, polyz_unpack

__all__ = ["MalformedSignatureError", "unpack_pk", "unpack_sig"]


class MalformedSignatureError(ValueError):
    """The signature bytes do not form a valid encoding."""


def unpack_pk(public_key: bytes, params: ParameterSet) -> tuple[bytes, list[list[int]]]:
    """Split a packed public key into ``(rho, t1)``."""
    public_key = bytes(public_key)
    if len(public_key) != params.public_key_bytes:
        raise ValueError(
            f"public key must be {params.public_key_bytes} bytes, got {len(public_key)}"
        )
    rho = public_key[:SEEDBYTES]
    body = public_key[SEEDBYTES:]
    t1 = [
        polyt1_unpack(body[i * POLYT1_PACKEDBYTES : (i + 1) * POLYT1_PACKEDBYTES])
        for i in range(params.k)
    ]
    return rho, t1


def _decode_hints(hints: bytes, params: ParameterSet) -> list[list[int]]:
    omega = params.omega
    h = [[0] * N for _ in range(params.k)]
    start = 0
    for i in range(params.k):
        end = hints[omega + i]
        if end < start or end > omega:
            raise MalformedSignatureError("hint counts out of order or too large")
        for j in range(start, end):
            # Indices must be strictly increasing for strong unforgeability.
            if j > start and hints[j] <= hints[j - 1]:
                raise MalformedSignatureError("hint indices not strictly increasing")
            h[i][hints[j]] = 1
        start = end
    if any(hints[start:omega]):
        raise MalformedSignatureError("unused hint slots are not zero")
    return h


def unpack_sig(
    signature: bytes, params: ParameterSet
) -> tuple[bytes, list[list[int]], list[list[int]]]:
    """Split a packed signature into ``(c, z, h)``.

    Raises MalformedSignatureError on a wrong length or an invalid hint
    encoding.
    """
    signature = bytes(signature)
    if len(signature) != params.signature_bytes:
        raise MalformedSignatureError(
            f"signature must be {params.signature_bytes} bytes, got {len(signature)}"
        )
    c = signature[: params.ctilde_bytes]
    offset = params.ctilde_bytes
    zsize = params.polyz_packed_bytes
    z = [
        polyz_unpack(signature[offset + i * zsize : offset + (i + 1) * zsize], params.gamma1)
        for i in range(params.l)
    ]
    offset += params.l * zsize
    h = _decode_hints(signature[offset:], params)
    return c, z, h