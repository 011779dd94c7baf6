import pytest

from core.trie import Trie


def _trie(*words):
    trie = Trie()
    for rank, word in enumerate(words):
        trie.insert(word, rank)
    return trie


def test_lookup_collects_whole_subtree():
    trie = _trie("hello", "help", "helmet", "world")
    assert sorted(trie.lookup("hel")) == [("hello", 0), ("helmet", 2), ("help", 1)]


def test_lookup_includes_exact_word_and_longer_ones():
    trie = _trie("help", "helpful")
    assert sorted(trie.lookup("help")) == [("help", 0), ("helpful", 1)]


def test_lookup_missing_prefix_is_empty():
    trie = _trie("hello")
    assert trie.lookup("hex") == []
    assert trie.lookup("helloo") == []


def test_insert_and_lookup_are_case_insensitive():
    trie = Trie()
    trie.insert("Hello", 3)
    assert trie.lookup("HE") == [("hello", 3)]
    assert "HELLO" in trie


def test_empty_word_is_ignored():
    trie = Trie()
    trie.insert("", 0)
    assert len(trie) == 0
    assert trie.lookup("") == []


def test_reinsert_keeps_minimum_rank():
    trie = Trie()
    trie.insert("help", 5)
    trie.insert("help", 9)
    assert trie.lookup("help") == [("help", 5)]
    trie.insert("help", 2)
    assert trie.lookup("help") == [("help", 2)]
    assert len(trie) == 1


@pytest.mark.parametrize("word", ["a", "hello", "help", "helmet", "water"])
def test_every_prefix_finds_the_word(word):
    trie = _trie("a", "hello", "help", "helmet", "water")
    for end in range(1, len(word) + 1):
        assert word in [w for w, _ in trie.lookup(word[:end])]


def test_completions_are_ranked_and_limited():
    trie = Trie()
    trie.insert("helmet", 7)
    trie.insert("help", 1)
    trie.insert("hello", 0)
    assert trie.completions("he") == ["hello", "help"]
    assert trie.completions("he", limit=3) == ["hello", "help", "helmet"]
    assert trie.completions("x") == []


def test_contains_requires_terminal_node():
    trie = _trie("hello")
    assert "hello" in trie
    assert "hell" not in trie
    assert "" not in trie
