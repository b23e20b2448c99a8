import pytest

from dilithium_verify.params import (
    DEFAULT_MODE,
    POLYT1_PACKEDBYTES,
    Q,
    SEEDBYTES,
    get_params,
)


@pytest.mark.parametrize(
    "mode, pk, sk, sig",
    [
        (2, 1312, 2560, 2420),
        (3, 1952, 4032, 3309),
        (5, 2592, 4896, 4627),
    ],
)
def test_sizes_match_api(mode, pk, sk, sig):
    params = get_params(mode)
    assert params.public_key_bytes == pk
    assert params.secret_key_bytes == sk
    assert params.signature_bytes == sig


@pytest.mark.parametrize(
    "mode, name", [(2, "Dilithium2"), (3, "Dilithium3"), (5, "Dilithium5")]
)
def test_names(mode, name):
    params = get_params(mode)
    assert params.name == name
    assert params.mode == mode


def test_default_mode_is_five():
    assert get_params() == get_params(DEFAULT_MODE)
    assert get_params().mode == 5


@pytest.mark.parametrize("mode", [2, 3, 5])
def test_polyvech_is_omega_plus_k(mode):
    params = get_params(mode)
    assert params.polyvech_packed_bytes == params.omega + params.k


@pytest.mark.parametrize("mode", [2, 3, 5])
def test_public_key_layout(mode):
    params = get_params(mode)
    assert params.public_key_bytes - SEEDBYTES == params.k * POLYT1_PACKEDBYTES


def test_mode2_packing_sizes():
    params = get_params(2)
    assert params.polyz_packed_bytes == 576
    assert params.polyw1_packed_bytes == 192
    assert params.polyeta_packed_bytes == 96
    assert params.gamma2 == (Q - 1) // 88


def test_mode3_packing_sizes():
    params = get_params(3)
    assert params.polyz_packed_bytes == 640
    assert params.polyw1_packed_bytes == 128
    assert params.polyeta_packed_bytes == 128


@pytest.mark.parametrize("mode", [0, 1, 4, 6, "5", None])
def test_unknown_mode_raises(mode):
    with pytest.raises(ValueError):
        get_params(mode)


def test_parameter_set_is_frozen():
    params = get_params(2)
    with pytest.raises(AttributeError):
        params.k = 10
    assert params.k == 4