"""
FaceTracker — encapsulates all MediaPipe logic.
The rest of the application never imports mediapipe directly; it only
sees ChannelFrame values.
"""
from __future__ import annotations
import logging
import urllib.request
from pathlib import Path
from typing import Any, Optional

import cv2
import mediapipe as mp
from mediapipe.tasks import python as mp_tasks
from mediapipe.tasks.python import vision

from domain.models import ChannelFrame

logger = logging.getLogger(__name__)

MODEL_URL = (
    "https://storage.googleapis.com/mediapipe-models/face_landmarker/"
    "face_landmarker/float16/latest/face_landmarker.task"
)


def ensure_model(path: Path, url: str = MODEL_URL) -> Path:
    """Download the face landmarker bundle if it is not on disk yet."""
    path = Path(path)
    if path.exists():
        return path
    logger.info("Downloading face landmarker model to %s", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        urllib.request.urlretrieve(url, path)
    except OSError as exc:
        raise RuntimeError(f"Cannot download face landmarker model: {exc}") from exc
    return path


class FaceTracker:
    """
    Runs the MediaPipe FaceLandmarker (VIDEO mode) on BGR frames and
    returns the smile / pucker blendshape scores.

    Parameters
    ----------
    model_path : Path
        face_landmarker.task model bundle.
    min_detection_confidence : float
    min_tracking_confidence : float
    """

    def __init__(
        self,
        model_path: Path,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
    ) -> None:
        model_path = Path(model_path)
        if not model_path.exists():
            raise RuntimeError(f"Face landmarker model not found: {model_path}")

        options = vision.FaceLandmarkerOptions(
            base_options=mp_tasks.BaseOptions(model_asset_path=str(model_path)),
            running_mode=vision.RunningMode.VIDEO,
            num_faces=1,
            min_face_detection_confidence=min_detection_confidence,
            min_face_presence_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
            output_face_blendshapes=True,
            output_facial_transformation_matrixes=False,
        )
        self._landmarker = vision.FaceLandmarker.create_from_options(options)
        self._last_ms = -1

    # ------------------------------------------------------------------
    def process(self, frame: Any, timestamp: float) -> Optional[ChannelFrame]:
        """
        Parameters
        ----------
        frame : np.ndarray
            BGR frame from OpenCV.
        timestamp : float
            Monotonic capture time in seconds.

        Returns
        -------
        ChannelFrame, or None when no face is visible.
        """
        # VIDEO mode requires strictly increasing timestamps
        timestamp_ms = max(int(timestamp * 1000), self._last_ms + 1)
        self._last_ms = timestamp_ms

        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb)
        result = self._landmarker.detect_for_video(image, timestamp_ms)

        if not result.face_blendshapes:
            return None
        scores = {c.category_name: c.score for c in result.face_blendshapes[0]}
        return ChannelFrame.from_blendshapes(scores, timestamp)

    def release(self) -> None:
        self._landmarker.close()
