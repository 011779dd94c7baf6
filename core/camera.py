"""
Camera — OpenCV VideoCapture wrapper that paces frames to the tracker
rate and mirrors them for the front-facing view.
"""
from __future__ import annotations
import time
from typing import Optional, Tuple

import cv2
import numpy as np


class Camera:
    """
    Parameters
    ----------
    device : int
        Camera index (0 = default webcam).
    min_interval : float
        Minimum seconds between returned frames (0.05 → 20 fps).
    mirror : bool
        Flip horizontally so the preview behaves like a mirror.
    """

    def __init__(self, device: int = 0, min_interval: float = 0.05, mirror: bool = True) -> None:
        self._cap = cv2.VideoCapture(device)
        self._min_interval = min_interval
        self._mirror = mirror
        self._prev_time: float = 0.0

        if not self._cap.isOpened():
            raise RuntimeError(f"Cannot open camera device {device}")

    # ------------------------------------------------------------------
    def read(self) -> Optional[Tuple[np.ndarray, float]]:
        """
        Sleep until the next frame is due, then return (frame, timestamp).
        Returns None on read failure.
        """
        wait = self._prev_time + self._min_interval - time.monotonic()
        if wait > 0:
            time.sleep(wait)

        ok, frame = self._cap.read()
        now = time.monotonic()
        self._prev_time = now
        if not ok:
            return None
        if self._mirror:
            frame = cv2.flip(frame, 1)
        return frame, now

    def release(self) -> None:
        self._cap.release()

    def __enter__(self) -> "Camera":
        return self

    def __exit__(self, *_) -> None:
        self.release()
