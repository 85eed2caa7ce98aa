import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.trie import Trie

WORDS = ["apple", "app", "apply", "banana", "band", "bandana", "can"]


@pytest.fixture
def trie():
    t = Trie()
    for word in WORDS:
        t.insert(word)
    return t


def test_len_counts_distinct_words(trie):
    assert len(trie) == len(WORDS)
    trie.insert("apple")
    assert len(trie) == len(WORDS)


def test_search_and_contains(trie):
    for word in WORDS:
        assert trie.search(word)
        assert word in trie
    assert not trie.search("ap")
    assert "bandanas" not in trie
    assert not trie.search("zebra")


def test_search_rejects_non_lowercase(trie):
    assert not trie.search("Apple")
    assert "APP" not in trie


def test_insert_rejects_non_lowercase():
    t = Trie()
    with pytest.raises(ValueError):
        t.insert("Hello")
    with pytest.raises(ValueError):
        t.insert("two words")
    assert len(t) == 0
    assert t.count_prefix("h") == 0


def test_autocomplete_is_sorted(trie):
    assert trie.autocomplete("app") == ["app", "apple", "apply"]
    assert trie.autocomplete("ban") == ["banana", "band", "bandana"]
    assert trie.autocomplete("") == sorted(WORDS)


def test_autocomplete_without_match(trie):
    assert trie.autocomplete("zz") == []
    assert trie.autocomplete("Q") == []


def test_count_prefix(trie):
    assert trie.count_prefix("app") == 3
    assert trie.count_prefix("band") == 2
    assert trie.count_prefix("x") == 0


def test_count_prefix_counts_repeated_insertions():
    t = Trie()
    t.insert("apple")
    t.insert("apple")
    assert len(t) == 1
    assert t.count_prefix("apple") == 2


words_strategy = st.lists(
    st.text(alphabet="abcde", min_size=1, max_size=6), max_size=40
)


@given(words_strategy)
def test_everything_inserted_is_found(words):
    t = Trie()
    for word in words:
        t.insert(word)
    assert len(t) == len(set(words))
    for word in words:
        assert word in t
    assert t.autocomplete("") == sorted(set(words))


@given(words_strategy, st.text(alphabet="abcde", min_size=1, max_size=3))
def test_prefix_queries(words, prefix):
    t = Trie()
    for word in words:
        t.insert(word)
    assert t.count_prefix(prefix) == sum(w.startswith(prefix) for w in words)
    assert t.autocomplete(prefix) == sorted({w for w in words if w.startswith(prefix)})