import json

from core.vocabulary import build_trie, load_vocabulary
from utils.constants import FALLBACK_WORDS


def test_rank_is_list_position():
    trie = build_trie(["help", "", "hello", "  ", "helmet"])
    assert sorted(trie.lookup("hel")) == [("hello", 1), ("helmet", 2), ("help", 0)]


def test_text_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("water\nwant\nwait\n")
    vocab = load_vocabulary(path)
    assert vocab.loaded
    assert vocab.trie.completions("wa") == ["water", "want"]


def test_json_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["yes", "yellow"]))
    vocab = load_vocabulary(path)
    assert vocab.loaded
    assert vocab.trie.completions("ye") == ["yes", "yellow"]


def test_missing_file_uses_fallback(tmp_path):
    vocab = load_vocabulary(tmp_path / "nope.txt")
    assert not vocab.loaded
    assert vocab.source == "built-in"
    assert len(vocab.trie) == len(set(FALLBACK_WORDS))
    assert vocab.trie.completions("he") == ["here", "hello"]


def test_corrupt_json_uses_fallback(tmp_path):
    path = tmp_path / "words.json"
    path.write_text('{"not": "a list"}')
    assert not load_vocabulary(path).loaded


def test_empty_file_uses_fallback(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n\n")
    assert not load_vocabulary(path).loaded


def test_no_path_uses_fallback():
    assert not load_vocabulary(None).loaded


def test_bundled_dictionary_loads():
    from pathlib import Path
    vocab = load_vocabulary(Path(__file__).resolve().parent.parent / "data" / "words.txt")
    assert vocab.loaded
    assert "water" in vocab.trie
