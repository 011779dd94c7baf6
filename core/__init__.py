from core.trie import Trie, TrieNode
from core.calibration_store import CalibrationStore, InMemoryCalibrationStore, JsonCalibrationStore
from core.trigger_evaluator import TriggerEvaluator
from core.hold_timer import HoldTimer
from core.composer import Composer
from core.navigator import MenuNavigator
from core.selection_engine import SelectionEngine

__all__ = [
    "Trie",
    "TrieNode",
    "CalibrationStore",
    "InMemoryCalibrationStore",
    "JsonCalibrationStore",
    "TriggerEvaluator",
    "HoldTimer",
    "Composer",
    "MenuNavigator",
    "SelectionEngine",
]
