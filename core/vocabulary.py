"""
Vocabulary — builds the completion Trie from an ordered word list.

The list is ranked by position (first line = rank 0 = most frequent).
Plain-text files hold one word per line; ``.json`` files hold a JSON array
of strings. When the file is missing, unreadable or empty the small
built-in list is used and ``loaded`` stays False.
"""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from core.trie import Trie
from utils.constants import FALLBACK_WORDS

logger = logging.getLogger(__name__)


@dataclass
class Vocabulary:
    trie: Trie
    loaded: bool              # True only when the external list was used
    source: str


def build_trie(words: Iterable[str]) -> Trie:
    """Insert *words* with rank = position among the non-blank entries."""
    trie = Trie()
    rank = 0
    for word in words:
        word = word.strip()
        if not word:
            continue
        trie.insert(word, rank)
        rank += 1
    return trie


def read_word_list(path: Path) -> List[str]:
    """Raises OSError / ValueError when the file can't be used."""
    text = Path(path).read_text(encoding="utf-8")
    if Path(path).suffix.lower() == ".json":
        data = json.loads(text)
        if not isinstance(data, list) or not all(isinstance(w, str) for w in data):
            raise ValueError("word list JSON must be an array of strings")
        return data
    return text.splitlines()


def load_vocabulary(path: Optional[Path]) -> Vocabulary:
    if path is not None:
        try:
            words = read_word_list(path)
        except (OSError, ValueError) as exc:
            logger.warning("Dictionary %s unavailable (%s), using fallback list", path, exc)
        else:
            trie = build_trie(words)
            if len(trie):
                logger.info("Loaded %d words from %s", len(trie), path)
                return Vocabulary(trie=trie, loaded=True, source=str(path))
            logger.warning("Dictionary %s is empty, using fallback list", path)

    return Vocabulary(trie=build_trie(FALLBACK_WORDS), loaded=False, source="built-in")
