import pytest
from hypothesis import given, strategies as st

from algokit.aho_corasick import AhoCorasick


def _automaton(patterns, alphabet="ab"):
    ac = AhoCorasick(alphabet)
    for p in patterns:
        ac.insert(p)
    return ac


def test_longest_pattern_is_reported():
    ac = _automaton(["a", "ab", "bab"])
    result = dict(ac.match("bab"))
    assert result[2] == 3
    assert result[1] == 1


def test_positions_without_match_are_absent():
    ac = _automaton(["bb"])
    assert ac.match("abab") == []


@given(
    st.lists(st.text(alphabet="ab", min_size=1, max_size=4), min_size=1, max_size=5),
    st.text(alphabet="ab", max_size=30),
)
def test_matches_every_ending_pattern(patterns, text):
    ac = _automaton(patterns)
    result = dict(ac.match(text))
    for i in range(len(text)):
        lengths = [len(p) for p in patterns if text.endswith(p, 0, i + 1)]
        if lengths:
            assert result[i] == max(lengths)
        else:
            assert i not in result


def test_unknown_character_resets():
    ac = _automaton(["ab"])
    ends = [end for end, _ in ac.match("axbab")]
    assert ends == [4]


def test_insert_rejects_foreign_character():
    ac = AhoCorasick("ab")
    with pytest.raises(ValueError):
        ac.insert("abc")


def test_insert_rejects_empty_pattern():
    with pytest.raises(ValueError):
        AhoCorasick("ab").insert("")


def test_insert_after_build_fails():
    ac = _automaton(["a"])
    ac.build()
    with pytest.raises(RuntimeError):
        ac.insert("b")


def test_empty_alphabet_rejected():
    with pytest.raises(ValueError):
        AhoCorasick("")