import pytest
from hypothesis import given, settings, strategies as st

from algokit.ntt import (
    MOD, convolve, ntt, poly_derivative, poly_exp, poly_integral, poly_inverse, poly_ln, poly_sqrt,
)


def _naive(a, b):
    out = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            out[i + j] = (out[i + j] + x * y) % MOD
    return out


@given(st.lists(st.integers(0, MOD - 1), min_size=1, max_size=20),
       st.lists(st.integers(0, MOD - 1), min_size=1, max_size=20))
def test_convolve(a, b):
    assert convolve(a, b) == _naive(a, b)


def test_ntt_round_trip():
    data = [5, 1, 0, 7, 3, 3, 9, 2]
    assert ntt(ntt(data), inverse=True) == data


def test_ntt_bad_length():
    with pytest.raises(ValueError):
        ntt([1, 2, 3])


@settings(max_examples=25)
@given(st.lists(st.integers(0, MOD - 1), min_size=1, max_size=10), st.integers(1, 12))
def test_inverse(a, m):
    a[0] = a[0] or 1
    prod = convolve(a, poly_inverse(a, m))[:m]
    assert prod == [1] + [0] * (m - 1)


def test_sqrt_squares_back():
    a = [1, 4, 6, 11, 2, 9]
    b = poly_sqrt(a, 6)
    assert convolve(b, b)[:6] == a


def test_exp_of_ln():
    a = [1, 3, 5, 7, 2, 8, 1]
    assert poly_exp(poly_ln(a, 7), 7) == a


def test_derivative_integral():
    a = [9, 4, 3, 8]
    assert poly_integral(poly_derivative(a)) == [0, 4, 3, 8]


def test_errors():
    with pytest.raises(ValueError):
        poly_inverse([0, 1], 2)
    with pytest.raises(ValueError):
        poly_ln([2, 1], 2)
    with pytest.raises(ValueError):
        poly_exp([1, 1], 2)