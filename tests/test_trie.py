from collections import Counter

from hypothesis import given, strategies as st

from algokit.trie import Trie


def test_counts_repeated_inserts():
    trie = Trie()
    for word in ["apple", "apple", "app"]:
        trie.insert(word)
    assert trie.count("apple") == 2
    assert trie.count("app") == 1


def test_prefix_only_is_zero():
    trie = Trie()
    trie.insert("apple")
    assert trie.count("ap") == 0
    assert trie.count("apples") == 0


def test_empty_word():
    trie = Trie()
    trie.insert("")
    assert trie.count("") == 1


@given(st.lists(st.text(alphabet="abc", max_size=5), max_size=20), st.text(alphabet="abc", max_size=5))
def test_counts_match_multiset(words, probe):
    trie = Trie()
    for w in words:
        trie.insert(w)
    counts = Counter(words)
    assert trie.count(probe) == counts[probe]
    for w in words:
        assert trie.count(w) == counts[w]