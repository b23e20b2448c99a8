import pytest

from dilithium_verify.params import (
    CRHBYTES,
    POLYT1_PACKEDBYTES,
    TRBYTES,
    N,
    get_params,
)
from dilithium_verify.poly import polyz_unpack
from dilithium_verify.shake import shake256, shake256_xof
from dilithium_verify.sign import verify, verify_internal


def _zero_z(params):
    bits = 18 if params.gamma1 == 1 << 17 else 20
    value = sum(params.gamma1 << (bits * i) for i in range(N))
    return value.to_bytes(params.polyz_packed_bytes, "little") * params.l


def _forge(params, message, context=b""):
    """A valid signature for a key whose t1 is zero, so w1 does not depend on c."""
    public_key = bytes(range(32)) + bytes(params.k * POLYT1_PACKEDBYTES)
    prefix = bytes([0, len(context)]) + context
    tr = shake256(public_key, TRBYTES)
    mu = (
        shake256_xof().absorb(tr).absorb(prefix).absorb(message).finalize().squeeze(CRHBYTES)
    )
    w1 = bytes(params.k * params.polyw1_packed_bytes)
    c = shake256_xof().absorb(mu).absorb(w1).finalize().squeeze(params.ctilde_bytes)
    signature = c + _zero_z(params) + bytes(params.polyvech_packed_bytes)
    return public_key, signature


@pytest.fixture(scope="module")
def mode2():
    params = get_params(2)
    public_key, signature = _forge(params, b"hello", b"ctx")
    return params, public_key, signature


def test_zero_z_helper_unpacks_to_zero():
    params = get_params(2)
    packed = _zero_z(params)[: params.polyz_packed_bytes]
    assert polyz_unpack(packed, params.gamma1) == [0] * N


def test_valid_signature_accepted(mode2):
    params, public_key, signature = mode2
    assert verify(signature, b"hello", public_key, b"ctx", params) is True


def test_verify_internal_with_prefix(mode2):
    params, public_key, signature = mode2
    prefix = bytes([0, 3]) + b"ctx"
    assert verify_internal(signature, b"hello", prefix, public_key, params) is True


def test_other_message_rejected(mode2):
    params, public_key, signature = mode2
    assert verify(signature, b"hellp", public_key, b"ctx", params) is False


def test_other_context_rejected(mode2):
    params, public_key, signature = mode2
    assert verify(signature, b"hello", public_key, b"", params) is False


def test_tampered_challenge_rejected(mode2):
    params, public_key, signature = mode2
    tampered = bytes([signature[0] ^ 1]) + signature[1:]
    assert verify(tampered, b"hello", public_key, b"ctx", params) is False


def test_wrong_length_rejected(mode2):
    params, public_key, signature = mode2
    assert verify(signature[:-1], b"hello", public_key, b"ctx", params) is False
    assert verify(signature + b"\0", b"hello", public_key, b"ctx", params) is False


def test_z_norm_too_large_rejected(mode2):
    params, public_key, signature = mode2
    start = params.ctilde_bytes
    # A packed value of zero unpacks to gamma1, beyond gamma1 - beta.
    tampered = signature[:start] + b"\0\0\0" + signature[start + 3 :]
    assert verify(tampered, b"hello", public_key, b"ctx", params) is False


def test_malformed_hints_rejected(mode2):
    params, public_key, signature = mode2
    hints = bytearray(signature[-params.polyvech_packed_bytes :])
    hints[params.omega] = params.omega + 1
    tampered = signature[: -params.polyvech_packed_bytes] + bytes(hints)
    assert verify(tampered, b"hello", public_key, b"ctx", params) is False


def test_valid_hint_changes_result(mode2):
    params, public_key, signature = mode2
    hints = bytearray(params.polyvech_packed_bytes)
    hints[0] = 0
    for i in range(params.k):
        hints[params.omega + i] = 1
    tampered = signature[: -params.polyvech_packed_bytes] + bytes(hints)
    assert verify(tampered, b"hello", public_key, b"ctx", params) is False


def test_context_too_long_raises(mode2):
    params, public_key, signature = mode2
    with pytest.raises(ValueError):
        verify(signature, b"hello", public_key, bytes(256), params)


def test_longest_context_allowed():
    params = get_params(2)
    context = bytes(range(255))
    public_key, signature = _forge(params, b"m", context)
    assert verify(signature, b"m", public_key, context, params) is True


def test_wrong_public_key_length_raises(mode2):
    params, public_key, signature = mode2
    with pytest.raises(ValueError):
        verify(signature, b"hello", public_key[:-1], b"ctx", params)


def test_default_parameters_are_mode5():
    params = get_params(5)
    public_key, signature = _forge(params, b"default")
    assert verify(signature, b"default", public_key) is True
    assert verify(signature, b"other", public_key) is False