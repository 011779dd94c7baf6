from enum import Enum


class Channel(str, Enum):
    """Facial-expression channels delivered by the face tracker."""
    LEFT_SMILE  = "LEFT_SMILE"
    RIGHT_SMILE = "RIGHT_SMILE"
    PUCKER      = "PUCKER"


class ActionKind(str, Enum):
    """Confirmed actions produced by the hold timer."""
    SELECT_LEFT    = "SELECT_LEFT"
    SELECT_RIGHT   = "SELECT_RIGHT"
    BACK_OR_DELETE = "BACK_OR_DELETE"


class EntryMode(str, Enum):
    """How a leaf selection in the current branch is interpreted."""
    CHARACTER = "CHARACTER"
    WORD      = "WORD"
    PHRASE    = "PHRASE"


class Command(str, Enum):
    """Reserved menu items that edit the message instead of inserting text."""
    SPACE = "Space"
    CLEAR = "Clear"
    SPEAK = "Speak"
