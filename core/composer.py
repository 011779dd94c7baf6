"""
Composer — owns the message being typed and the word suggestions for it.

Every edit recomputes the suggestions from the trailing partial word,
except word insertion, which always leaves them empty.
"""
from __future__ import annotations
from typing import List

from core.trie import Trie
from utils.constants import SUGGESTION_LIMIT


class Composer:
    """
    Parameters
    ----------
    trie : Trie
        Read-only vocabulary used for completions.
    suggestion_limit : int
        Maximum number of suggestions kept.
    message : str
        Text to start from (e.g. a restored draft).
    """

    def __init__(
        self,
        trie: Trie,
        suggestion_limit: int = SUGGESTION_LIMIT,
        message: str = "",
    ) -> None:
        self._trie = trie
        self._limit = suggestion_limit
        self._message = message
        self._suggestions: List[str] = []
        self.refresh_suggestions()

    # ---- read-only state ----------------------------------------------
    @property
    def message(self) -> str:
        return self._message

    @property
    def suggestions(self) -> List[str]:
        return list(self._suggestions)

    @property
    def trailing_word(self) -> str:
        """Last whitespace-separated token, or "" if the message ends in whitespace."""
        if not self._message or self._message[-1].isspace():
            return ""
        return self._message.split()[-1]

    def at_sentence_start(self) -> bool:
        return self._message == "" or self._message.endswith(". ")

    def apply_case(self, text: str) -> str:
        """Capitalise at a sentence start, lowercase anywhere else."""
        if self.at_sentence_start():
            return text[:1].upper() + text[1:].lower()
        return text.lower()

    # ---- edits ---------------------------------------------------------
    def add_character(self, char: str) -> None:
        self._message += self.apply_case(char)
        self.refresh_suggestions()

    def add_word(self, word: str) -> None:
        """
        Replace the trailing partial word with *word* and a trailing space.

        Case follows the message as it stands before the partial is removed,
        so completing "he" gives "hello " rather than "Hello ".
        """
        cased = self.apply_case(word)
        partial = self.trailing_word
        if partial:
            self._message = self._message[: -len(partial)]
        self._message += cased + " "
        self._suggestions = []

    def add_space(self) -> None:
        self._message += " "
        self.refresh_suggestions()

    def delete_last(self) -> None:
        if self._message:
            self._message = self._message[:-1]
            self.refresh_suggestions()

    def clear(self) -> None:
        self._message = ""
        self._suggestions = []

    def clear_suggestions(self) -> None:
        self._suggestions = []

    def refresh_suggestions(self) -> None:
        word = self.trailing_word
        self._suggestions = self._trie.completions(word, self._limit) if word else []
