from __future__ import annotations

import pytest

from core.calibration_store import InMemoryCalibrationStore
from core.composer import Composer
from core.hold_timer import HoldTimer
from core.navigator import MenuNavigator
from core.selection_engine import SelectionEngine
from core.speech import RecordingSpeaker
from core.trie import Trie
from core.trigger_evaluator import TriggerEvaluator
from core.vocabulary import build_trie


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def trie() -> Trie:
    return build_trie(["hello", "help", "helmet", "home", "hi", "water"])


@pytest.fixture
def speaker() -> RecordingSpeaker:
    return RecordingSpeaker()


@pytest.fixture
def store() -> InMemoryCalibrationStore:
    return InMemoryCalibrationStore()


@pytest.fixture
def evaluator(store) -> TriggerEvaluator:
    return TriggerEvaluator(store)


def make_navigator(trie: Trie, speaker: RecordingSpeaker, message: str = "", **kwargs) -> MenuNavigator:
    return MenuNavigator(Composer(trie, message=message, **kwargs), speaker)


@pytest.fixture
def navigator(trie, speaker) -> MenuNavigator:
    return make_navigator(trie, speaker)


@pytest.fixture
def engine(evaluator, trie, speaker, clock) -> SelectionEngine:
    return SelectionEngine(evaluator, HoldTimer(0.4, clock=clock), make_navigator(trie, speaker))


@pytest.fixture
def navigator_factory(trie, speaker):
    def factory(message: str = "", **kwargs) -> MenuNavigator:
        return make_navigator(trie, speaker, message=message, **kwargs)
    return factory
