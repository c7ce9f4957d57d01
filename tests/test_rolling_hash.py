import pytest
from hypothesis import given, strategies as st

from algokit.rolling_hash import RollingHash


def test_single_letters_map_to_their_codes():
    assert RollingHash("a").query(0, 0) == 1
    assert RollingHash("b").query(0, 0) == 2


@given(st.text(alphabet="abcxyz", min_size=1, max_size=30), st.data())
def test_substring_hash_matches_fresh_hash(text, data):
    left = data.draw(st.integers(0, len(text) - 1))
    right = data.draw(st.integers(left, len(text) - 1))
    h = RollingHash(text, 1_000_003)
    fresh = RollingHash(text[left:right + 1], 1_000_003)
    assert h.query(left, right) == fresh.query(0, right - left)


def test_equal_substrings_hash_equal():
    h = RollingHash("abcabc")
    assert h.query(0, 2) == h.query(3, 5)
    assert h.query(0, 1) != h.query(1, 2)


@given(st.text(alphabet="abz", min_size=1, max_size=20))
def test_hash_within_modulus(text):
    h = RollingHash(text, 97)
    assert 0 <= h.query(0, len(text) - 1) < 97


def test_out_of_range_query():
    with pytest.raises(IndexError):
        RollingHash("abc").query(1, 3)


def test_empty_text_rejected():
    with pytest.raises(ValueError):
        RollingHash("")