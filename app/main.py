"""
main.py — Application entry point.

    Camera → FaceTracker → ChannelFrame ──(Qt signal)──▶ SelectionEngine
          → TriggerEvaluator → HoldTimer → MenuNavigator → MainWindow

Each component is independently testable and replaceable.
"""
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from PyQt6.QtWidgets import QApplication

from app.config import AppConfig, default_config
from app.face_type_app import FaceTypeApp
from core.calibration_store import JsonCalibrationStore
from core.composer import Composer
from core.hold_timer import HoldTimer
from core.navigator import MenuNavigator
from core.selection_engine import SelectionEngine
from core.speech import Pyttsx3Speaker, RecordingSpeaker, Speaker
from core.trigger_evaluator import TriggerEvaluator
from core.vocabulary import load_vocabulary

logger = logging.getLogger("facetype")


def _beep() -> None:
    QApplication.beep()


def _make_speaker(config: AppConfig) -> Speaker:
    if not config.speech_enabled:
        return RecordingSpeaker()
    try:
        return Pyttsx3Speaker(rate=config.speech_rate, volume=config.speech_volume)
    except RuntimeError as exc:
        logger.warning("%s — speech disabled", exc)
        return RecordingSpeaker()


def build_engine(config: AppConfig, speaker: Speaker) -> tuple[SelectionEngine, TriggerEvaluator]:
    vocabulary = load_vocabulary(config.dictionary_path)
    logger.info("Vocabulary: %d words (%s)", len(vocabulary.trie), vocabulary.source)

    evaluator = TriggerEvaluator(
        JsonCalibrationStore(config.calibration_path),
        on_back_pulse=_beep,
        dead_zone=config.dead_zone,
        dominance_margin=config.dominance_margin,
        throttle_interval=config.throttle_interval,
        face_lost_timeout=config.face_lost_timeout,
    )
    navigator = MenuNavigator(
        Composer(vocabulary.trie, suggestion_limit=config.suggestion_limit),
        speaker,
        quick_phrases=config.quick_phrases,
    )
    engine = SelectionEngine(evaluator, HoldTimer(config.hold_duration), navigator)
    return engine, evaluator


def run(config: AppConfig = default_config) -> int:
    print("=" * 55)
    print("  FACETYPE — gesture typing")
    print("=" * 55)
    print(f"  Face model : {config.face_model_path}")
    print(f"  Dictionary : {config.dictionary_path}")
    print(f"  Hold       : {config.hold_duration:.2f}s")
    print("  Keys ← → ↓ simulate gestures")
    print("=" * 55 + "\n")

    qt_app = QApplication(sys.argv)
    speaker = _make_speaker(config)
    engine, evaluator = build_engine(config, speaker)

    app = FaceTypeApp(config, engine, evaluator)
    app.start()
    try:
        return qt_app.exec()
    finally:
        app.stop()
        speaker.close()
        print("\n✓ Application closed cleanly")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="facetype", description=__doc__.splitlines()[1])
    parser.add_argument("--camera", type=int, default=default_config.camera_device)
    parser.add_argument("--model", type=Path, default=default_config.face_model_path)
    parser.add_argument("--dictionary", type=Path, default=default_config.dictionary_path)
    parser.add_argument("--calibration", type=Path, default=default_config.calibration_path)
    parser.add_argument("--hold", type=float, default=default_config.hold_duration)
    parser.add_argument("--no-speech", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    config = AppConfig(
        face_model_path=args.model,
        dictionary_path=args.dictionary,
        calibration_path=args.calibration,
        camera_device=args.camera,
        hold_duration=args.hold,
        speech_enabled=not args.no_speech,
    )
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
