import pytest
from hypothesis import given, strategies as st

from dilithium_verify.params import Q
from dilithium_verify.rounding import decompose, use_hint

GAMMAS = [(Q - 1) // 32, (Q - 1) // 88]
coefficients = st.integers(min_value=0, max_value=Q - 1)


def _modulus(gamma2):
    return (Q - 1) // (2 * gamma2)


@pytest.mark.parametrize("gamma2", GAMMAS)
def test_decompose_zero(gamma2):
    assert decompose(0, gamma2) == (0, 0)


@pytest.mark.parametrize("gamma2", GAMMAS)
def test_decompose_top_wraps_to_zero(gamma2):
    assert decompose(Q - 1, gamma2) == (0, -1)


@pytest.mark.parametrize("gamma2", GAMMAS)
@given(a=coefficients)
def test_decompose_reconstructs(gamma2, a):
    a1, a0 = decompose(a, gamma2)
    assert 0 <= a1 < _modulus(gamma2)
    assert (a1 * 2 * gamma2 + a0 - a) % Q == 0
    assert -gamma2 <= a0 <= gamma2


@pytest.mark.parametrize("gamma2", GAMMAS)
@given(a=coefficients)
def test_use_hint_zero_returns_high_bits(gamma2, a):
    assert use_hint(a, 0, gamma2) == decompose(a, gamma2)[0]


@pytest.mark.parametrize("gamma2", GAMMAS)
@given(a=coefficients)
def test_use_hint_one_moves_by_one(gamma2, a):
    a1, a0 = decompose(a, gamma2)
    m = _modulus(gamma2)
    r = use_hint(a, 1, gamma2)
    assert 0 <= r < m
    step = 1 if a0 > 0 else -1
    assert (r - a1) % m == step % m


@pytest.mark.parametrize("gamma2", GAMMAS)
def test_use_hint_wraps_below_zero(gamma2):
    assert use_hint(0, 1, gamma2) == _modulus(gamma2) - 1


def test_decompose_rejects_unknown_gamma2():
    with pytest.raises(ValueError):
        decompose(5, 1000)


def test_use_hint_rejects_unknown_gamma2():
    with pytest.raises(ValueError):
        use_hint(5, 1, 1000)