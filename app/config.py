from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from utils import constants


def _settings_dir() -> Path:
    return Path.home() / ".facetype"


@dataclass
class AppConfig:
    """
    Central configuration injected into all components.
    Engine defaults come from utils.constants; override here or in tests.
    """
    # ---- paths ---------------------------------------------------------
    face_model_path: Path = Path("models/face_landmarker.task")
    dictionary_path: Path = Path("data/words.txt")
    calibration_path: Path = field(default_factory=lambda: _settings_dir() / "calibration.json")

    # ---- camera --------------------------------------------------------
    camera_device: int = 0
    mirror: bool = True

    # ---- face tracker --------------------------------------------------
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5

    # ---- triggers ------------------------------------------------------
    dead_zone: float = constants.DEAD_ZONE
    dominance_margin: float = constants.DOMINANCE_MARGIN
    throttle_interval: float = constants.THROTTLE_INTERVAL
    face_lost_timeout: float = constants.FACE_LOST_TIMEOUT

    # ---- hold timer ----------------------------------------------------
    hold_duration: float = constants.HOLD_DURATION

    # ---- calibration capture ------------------------------------------
    calibration_window: float = constants.CALIBRATION_WINDOW

    # ---- menu ----------------------------------------------------------
    quick_phrases: List[str] = field(default_factory=lambda: list(constants.QUICK_PHRASES))
    suggestion_limit: int = constants.SUGGESTION_LIMIT

    # ---- speech --------------------------------------------------------
    speech_enabled: bool = True
    speech_rate: int = 180
    speech_volume: float = 1.0


# Default singleton — import and use directly, or override in tests.
default_config = AppConfig()
