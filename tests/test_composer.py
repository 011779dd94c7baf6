from core.composer import Composer


def test_trailing_word(trie):
    assert Composer(trie).trailing_word == ""
    assert Composer(trie, message="hi ").trailing_word == ""
    assert Composer(trie, message="hello wor").trailing_word == "wor"


def test_characters_follow_sentence_case(trie):
    composer = Composer(trie)
    composer.add_character("H")
    composer.add_character("E")
    assert composer.message == "He"

    composer = Composer(trie, message="Hi. ")
    composer.add_character("t")
    assert composer.message == "Hi. T"


def test_suggestions_follow_trailing_word(trie):
    composer = Composer(trie)
    composer.add_character("h")
    assert composer.suggestions == ["hello", "help"]
    composer.add_character("o")
    assert composer.suggestions == ["home"]
    composer.add_space()
    assert composer.suggestions == []


def test_suggestions_are_case_insensitive(trie):
    assert Composer(trie, message="HEL").suggestions == ["hello", "help"]


def test_add_word_replaces_partial(trie):
    composer = Composer(trie, message="he")
    composer.add_word("hello")
    assert composer.message == "hello "
    assert composer.suggestions == []


def test_add_word_lowercases_mid_sentence(trie):
    composer = Composer(trie, message="I need He")
    composer.add_word("help")
    assert composer.message == "I need help "


def test_add_word_capitalises_only_at_sentence_start(trie):
    composer = Composer(trie, message="Ok. he")
    composer.add_word("hello")
    assert composer.message == "Ok. hello "

    composer = Composer(trie, message="He")
    composer.add_word("help")
    assert composer.message == "help "


def test_add_word_without_partial(trie):
    composer = Composer(trie, message="I ")
    composer.add_word("WATER")
    assert composer.message == "I water "

    composer = Composer(trie, message="Ok. ")
    composer.add_word("water")
    assert composer.message == "Ok. Water "

    composer = Composer(trie)
    composer.add_word("water")
    assert composer.message == "Water "


def test_delete_last(trie):
    composer = Composer(trie, message="hi ")
    composer.delete_last()
    assert composer.message == "hi"
    assert composer.suggestions == ["hi"]

    empty = Composer(trie)
    empty.delete_last()
    assert empty.message == ""


def test_clear(trie):
    composer = Composer(trie, message="hel")
    composer.clear()
    assert composer.message == ""
    assert composer.suggestions == []
