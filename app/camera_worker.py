"""
CameraWorker — runs camera capture and face tracking on a QThread and hands
each ChannelFrame to the main thread through a Qt signal.

The selection engine itself lives on the main thread; this worker never
touches navigation state.
"""
from __future__ import annotations
import time
from typing import Optional

import numpy as np
from PyQt6.QtCore import QThread, pyqtSignal

from app.config import AppConfig
from core.camera import Camera
from core.face_tracker import FaceTracker, ensure_model


class CameraWorker(QThread):
    """
    Signals emitted per frame:
        frame_ready    — mirrored BGR frame as np.ndarray (for the preview)
        channels_ready — ChannelFrame with the three channel intensities
        face_lost      — no face in this frame
        status_msg     — log line for the UI console
    """

    frame_ready    = pyqtSignal(np.ndarray)
    channels_ready = pyqtSignal(object)        # ChannelFrame
    face_lost      = pyqtSignal()
    status_msg     = pyqtSignal(str)

    def __init__(self, config: AppConfig, parent=None) -> None:
        super().__init__(parent)
        self._config  = config
        self._running = False

        # Built in run() so they live on the worker thread
        self._camera:  Optional[Camera]      = None
        self._tracker: Optional[FaceTracker] = None

    # ------------------------------------------------------------------
    def run(self) -> None:
        cfg = self._config

        try:
            self._camera = Camera(
                cfg.camera_device,
                min_interval=cfg.throttle_interval,
                mirror=cfg.mirror,
            )
            self._tracker = FaceTracker(
                ensure_model(cfg.face_model_path),
                min_detection_confidence=cfg.min_detection_confidence,
                min_tracking_confidence=cfg.min_tracking_confidence,
            )
        except RuntimeError as exc:
            self.status_msg.emit(f"[ERROR] Startup: {exc}")
            self._cleanup()
            return

        self._running = True
        had_face = False
        self.status_msg.emit("Pipeline started")

        while self._running:
            captured = self._camera.read()
            if captured is None:
                self.status_msg.emit("[WARN] Empty frame, retrying")
                time.sleep(0.05)
                continue
            frame, timestamp = captured

            channels = self._tracker.process(frame, timestamp)
            if channels is None:
                if had_face:
                    self.status_msg.emit("[STATE] face lost")
                    had_face = False
                self.face_lost.emit()
            else:
                if not had_face:
                    self.status_msg.emit("[STATE] face tracked")
                    had_face = True
                self.channels_ready.emit(channels)

            self.frame_ready.emit(frame.copy())

        self._cleanup()

    # ------------------------------------------------------------------
    def stop(self) -> None:
        self._running = False
        self.wait(3000)

    def _cleanup(self) -> None:
        if self._camera:
            self._camera.release()
        if self._tracker:
            self._tracker.release()
        self.status_msg.emit("Pipeline stopped")
