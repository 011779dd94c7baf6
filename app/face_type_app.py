"""
FaceTypeApp — wires the camera worker, the selection engine and the window.

Behaviour:
  • Frames arrive from CameraWorker on the main thread (queued signals),
    are fed to the SelectionEngine, and the window is refreshed.
  • A frame without a face cancels any pending hold at once; a 200ms
    QTimer also catches the tracker going quiet altogether.
  • Calibration buttons start a capture on the chosen channel.
  • ← → ↓ inject SelectLeft / SelectRight / Back without the camera.
"""
from __future__ import annotations
import logging
import time

from PyQt6.QtCore import QTimer

from app.camera_worker import CameraWorker
from app.config import AppConfig
from app.main_window import MainWindow
from core.selection_engine import SelectionEngine
from core.trigger_evaluator import TriggerEvaluator
from domain.enums import ActionKind, Channel
from domain.models import ChannelFrame, NavigatorView

logger = logging.getLogger(__name__)

_FACE_CHECK_MS = 200


class FaceTypeApp:
    """
    Parameters
    ----------
    config : AppConfig
    engine : SelectionEngine
    evaluator : TriggerEvaluator
        The engine's evaluator, read for calibration thresholds in the meters.
    """

    def __init__(
        self,
        config: AppConfig,
        engine: SelectionEngine,
        evaluator: TriggerEvaluator,
    ) -> None:
        self._config    = config
        self._engine    = engine
        self._evaluator = evaluator

        self._window = MainWindow(
            on_calibrate=self._start_calibration,
            on_debug_action=self._inject,
        )
        self._engine.add_listener(self._on_view)

        self._worker = CameraWorker(config)
        self._connect_worker()

        self._face_timer = QTimer()
        self._face_timer.setInterval(_FACE_CHECK_MS)
        self._face_timer.timeout.connect(self._check_face)

    # ------------------------------------------------------------------
    def start(self) -> None:
        self._window.on_view(self._engine.view)
        self._window.show()
        self._worker.start()
        self._face_timer.start()

    def stop(self) -> None:
        self._face_timer.stop()
        self._worker.stop()

    # ------------------------------------------------------------------
    def _connect_worker(self) -> None:
        self._worker.frame_ready.connect(self._window.on_frame)
        self._worker.channels_ready.connect(self._on_channels)
        self._worker.face_lost.connect(self._on_face_lost)
        self._worker.status_msg.connect(self._window.on_status)

    def _on_channels(self, frame: ChannelFrame) -> None:
        was_calibrating = self._engine.calibrating
        self._engine.process(frame)
        if was_calibrating and not self._engine.calibrating:
            cal = self._evaluator.calibration
            self._window.on_status(
                f"Calibration saved: left={cal.left_max:.2f} "
                f"right={cal.right_max:.2f} pucker={cal.back_max:.2f}"
            )
        self._window.on_triggers(
            self._engine.triggers,
            self._evaluator.calibration,
            self._engine.hold_progress(frame.timestamp),
        )

    def _on_face_lost(self) -> None:
        self._engine.face_lost()
        self._window.on_face(False)

    def _on_view(self, view: NavigatorView) -> None:
        self._window.on_view(view)

    def _check_face(self) -> None:
        self._window.on_face(self._engine.check_face(time.monotonic()))

    def _start_calibration(self, channel: Channel) -> None:
        self._engine.start_calibration(channel, window=self._config.calibration_window)
        self._window.on_status(
            f"Calibrating {channel.value}: hold the expression for "
            f"{self._config.calibration_window:.0f}s"
        )

    def _inject(self, action: ActionKind) -> None:
        self._window.on_status(f"[EVENT] {action.value} (keyboard)")
        self._engine.inject(action)
