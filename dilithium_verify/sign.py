"""Dilithium signature verification."""

from __future__ import annotations

import hmac

from .packing import MalformedSignatureError, unpack_pk, unpack_sig
from .params import CRHBYTES, TRBYTES, ParameterSet, get_params
from .poly import poly_challenge, poly_ntt
from .polyvec import (
    matrix_expand,
    matrix_pointwise_montgomery,
    pack_w1,
    polyvec_caddq,
    polyvec_chknorm,
    polyvec_invntt_tomont,
    polyvec_ntt,
    polyvec_pointwise_poly_montgomery,
    polyvec_reduce,
    polyvec_shiftl,
    polyvec_sub,
    polyvec_use_hint,
)
from .shake import shake256, shake256_xof

__all__ = ["MAX_CONTEXT_BYTES", "verify_internal", "verify"]

MAX_CONTEXT_BYTES = 255


def verify_internal(
    signature: bytes,
    message: bytes,
    prefix: bytes,
    public_key: bytes,
    params: ParameterSet,
) -> bool:
    """Check ``signature`` over ``prefix | message`` against ``public_key``.

    Returns True if the signature is valid and False otherwise. A public
    key of the wrong size raises ValueError.
    """
    signature = bytes(signature)
    public_key = bytes(public_key)
    if len(signature) != params.signature_bytes:
        return False

    rho, t1 = unpack_pk(public_key, params)
    try:
        c, z, h = unpack_sig(signature, params)
    except MalformedSignatureError:
        return False
    if polyvec_chknorm(z, params.gamma1 - params.beta):
        return False

    # mu = CRH(H(pk), prefix, message)
    tr = shake256(public_key, TRBYTES)
    mu = (
        shake256_xof()
        .absorb(tr)
        .absorb(bytes(prefix))
        .absorb(bytes(message))
        .finalize()
        .squeeze(CRHBYTES)
    )

    # w1' = UseHint(h, A*z - c*t1*2^d)
    cp = poly_ntt(poly_challenge(c, params.tau))
    mat = matrix_expand(rho, params.k, params.l)
    w1 = matrix_pointwise_montgomery(mat, polyvec_ntt(z))

    t1 = polyvec_ntt(polyvec_shiftl(t1))
    t1 = polyvec_pointwise_poly_montgomery(cp, t1)

    w1 = polyvec_invntt_tomont(polyvec_reduce(polyvec_sub(w1, t1)))
    w1 = polyvec_use_hint(polyvec_caddq(w1), h, params.gamma2)
    packed = pack_w1(w1, params.gamma2)

    c2 = (
        shake256_xof()
        .absorb(mu)
        .absorb(packed)
        .finalize()
        .squeeze(params.ctilde_bytes)
    )
    return hmac.compare_digest(c, c2)


def verify(
    signature: bytes,
    message: bytes,
    public_key: bytes,
    context: bytes = b"",
    params: ParameterSet | None = None,
) -> bool:
    """Verify a signature over ``message`` with an optional context string.

    ``params`` defaults to the default security mode. A context longer than
    255 bytes raises ValueError.
    """
    context = bytes(context)
    if len(context) > MAX_CONTEXT_BYTES:
        raise ValueError(
            f"context must be at most {MAX_CONTEXT_BYTES} bytes, got {len(context)}"
        )
    if params is None:
        params = get_params()
    prefix = bytes([0, len(context)]) + context
    return verify_internal(signature, message, prefix, public_key, params)