import pytest
from hypothesis import given, strategies as st

from algokit.modular import bezout, ext_gcd, mat_mul, mat_pow, mod_inverse, power_mod


@given(st.integers(0, 10**6), st.integers(0, 200), st.integers(1, 10**9))
def test_power_mod_matches_builtin(base, exponent, modulus):
    assert power_mod(base, exponent, modulus) == pow(base, exponent, modulus)


def test_power_mod_negative_exponent():
    with pytest.raises(ValueError):
        power_mod(2, -1, 7)


@given(st.integers(0, 10**9), st.integers(0, 10**9))
def test_ext_gcd_identity(a, b):
    g, x, y = ext_gcd(a, b)
    assert a * x + b * y == g
    if a or b:
        assert a % g == 0 and b % g == 0


@given(st.integers(-1000, 1000), st.integers(-1000, 1000), st.integers(-1000, 1000))
def test_bezout_solution(a, b, c):
    sol = bezout(a, b, c)
    if sol is not None:
        assert a * sol[0] + b * sol[1] == c


def test_bezout_none():
    assert bezout(4, 6, 3) is None


@given(st.integers(1, 10**6))
def test_mod_inverse(a):
    p = 10**9 + 7
    assert a * mod_inverse(a, p) % p == 1


def test_mod_inverse_errors():
    with pytest.raises(ValueError):
        mod_inverse(4, 8)
    with pytest.raises(ValueError):
        mod_inverse(3, 1)


def test_mat_pow_fibonacci():
    assert mat_pow([[1, 1], [1, 0]], 10)[0][1] == 55


def test_mat_pow_zero_is_identity():
    assert mat_pow([[2, 3], [4, 5]], 0) == [[1, 0], [0, 1]]


def test_mat_pow_matches_repeated_mul():
    m = [[2, 3], [4, 5]]
    acc = m
    for _ in range(4):
        acc = mat_mul(acc, m, 97)
    assert mat_pow(m, 5, 97) == acc


def test_mat_mul_dimension_error():
    with pytest.raises(ValueError):
        mat_mul([[1, 2]], [[1, 2]])