"""
MenuNavigator — binary-split menu driven by three confirmed actions.

At the root the user picks between the alphabet (left) and a contextual
menu (right). Inside a branch every SELECT halves the candidate list until
one item remains; that leaf is then resolved into a text edit, a spoken
phrase or a command, and navigation returns to the root. BACK climbs one
level, or deletes the last character when already at the root.
"""
from __future__ import annotations
import logging
import math
from typing import List, Optional, Sequence, Tuple

from core.composer import Composer
from core.speech import Speaker
from domain.enums import ActionKind, Command, EntryMode
from domain.models import Branch, NavigatorView
from utils.constants import ALPHABET, QUICK_PHRASES

logger = logging.getLogger(__name__)

ROOT_LEFT_LABEL = "A - Z"
QUICK_WORDS_LABEL = "Quick Words"
PREDICT_LABEL = "Predict & Edit"
EDIT_LABEL = "Edit & Speak"

_COMMANDS = {c.value: c for c in Command}
_EDIT_COMMANDS = [Command.SPACE.value, Command.CLEAR.value, Command.SPEAK.value]


def split_branch(items: Sequence[str]) -> Tuple[Branch, Branch]:
    """Left half gets the first ceil(n/2) items."""
    mid = math.ceil(len(items) / 2)
    return list(items[:mid]), list(items[mid:])


class MenuNavigator:
    """
    Parameters
    ----------
    composer : Composer
        Message + suggestions being edited.
    speaker : Speaker
        Fire-and-forget speech output.
    quick_phrases : sequence of str
        Whole phrases offered when the message is empty.
    """

    def __init__(
        self,
        composer: Composer,
        speaker: Speaker,
        quick_phrases: Sequence[str] = QUICK_PHRASES,
    ) -> None:
        self._composer = composer
        self._speaker = speaker
        self._quick_phrases = list(quick_phrases)
        self._alphabet = list(ALPHABET)

        self._branch: Branch = []
        self._history: List[Branch] = []
        self._mode: Optional[EntryMode] = None

    # ------------------------------------------------------------------
    def handle(self, action: ActionKind) -> None:
        """Apply one confirmed action."""
        if action is ActionKind.SELECT_LEFT:
            self.select(is_left=True)
        elif action is ActionKind.SELECT_RIGHT:
            self.select(is_left=False)
        else:
            self.back()

    def select(self, is_left: bool) -> None:
        if not self._branch:
            self._open_root_menu(is_left)
            return

        left, right = split_branch(self._branch)
        chosen = left if is_left else right
        if not chosen:
            # one-item branch: only its left half is selectable
            return
        if len(chosen) > 1:
            self._history.append(self._branch)
            self._branch = chosen
            logger.debug("Descend -> %d items", len(chosen))
        else:
            self._resolve_leaf(chosen[0])

    def back(self) -> None:
        if self._history:
            previous = self._history.pop()
            if not previous:
                self.reset_to_root()
            else:
                self._branch = previous
                logger.debug("Ascend -> %d items", len(previous))
            return
        self._composer.delete_last()
        self.reset_to_root()

    def reset_to_root(self) -> None:
        self._branch = []
        self._history = []
        self._mode = None

    # ------------------------------------------------------------------
    def _open_root_menu(self, is_left: bool) -> None:
        self._history.append([])
        if is_left:
            self._mode = EntryMode.CHARACTER
            self._branch = list(self._alphabet)
        else:
            self._branch, self._mode = self.context_menu()
        logger.debug("Open %s menu (%s)", "left" if is_left else "right", self._mode.value)

    def context_menu(self) -> Tuple[Branch, EntryMode]:
        """Right-hand root menu: quick phrases, or suggestions then edit commands."""
        if not self._composer.message:
            return list(self._quick_phrases), EntryMode.PHRASE
        suggestions = self._composer.suggestions
        mode = EntryMode.WORD if suggestions else EntryMode.PHRASE
        return suggestions + _EDIT_COMMANDS, mode

    def _resolve_leaf(self, item: str) -> None:
        command = _COMMANDS.get(item)
        if command is Command.SPACE:
            self._composer.add_space()
        elif command is Command.SPEAK:
            self._speaker.speak(self._composer.message)
            self._composer.clear_suggestions()
        elif command is Command.CLEAR:
            self._composer.clear()
        elif item in self._quick_phrases:
            self._speaker.speak(item)
            self._composer.clear()
        elif self._mode is EntryMode.WORD:
            self._composer.add_word(item)
        else:
            self._composer.add_character(item)
        logger.info("Selected %r -> message=%r", item, self._composer.message)
        self.reset_to_root()

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------
    def format_label(self, items: Sequence[str]) -> str:
        if not items:
            return ""
        if len(items) == 1:
            return items[0]
        if list(items) == self._alphabet:
            return ROOT_LEFT_LABEL
        if len(items) <= 3:
            return "\n".join(items)
        if self._mode is EntryMode.WORD:
            return f"{items[0]} ... {items[-1]}"
        return f"{items[0]} - {items[-1]}"

    @property
    def labels(self) -> Tuple[str, str]:
        if not self._branch:
            if not self._composer.message:
                right = QUICK_WORDS_LABEL
            elif self._composer.suggestions:
                right = PREDICT_LABEL
            else:
                right = EDIT_LABEL
            return ROOT_LEFT_LABEL, right
        left, right_half = split_branch(self._branch)
        return self.format_label(left), self.format_label(right_half)

    # ------------------------------------------------------------------
    @property
    def at_root(self) -> bool:
        return not self._branch

    @property
    def branch(self) -> Branch:
        return list(self._branch)

    @property
    def history_depth(self) -> int:
        return len(self._history)

    @property
    def mode(self) -> Optional[EntryMode]:
        return self._mode

    @property
    def is_selecting_word(self) -> bool:
        return self._mode is EntryMode.WORD

    @property
    def view(self) -> NavigatorView:
        left, right = self.labels
        return NavigatorView(
            left_label=left,
            right_label=right,
            message=self._composer.message,
            suggestions=tuple(self._composer.suggestions),
            mode=self._mode,
            at_root=self.at_root,
            depth=len(self._history),
        )
