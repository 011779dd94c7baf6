"""
CalibrationSession — captures the strongest expression the user can make
on one channel and stores it as that channel's calibrated max.
"""
from __future__ import annotations
import logging
from typing import Optional

from core.trigger_evaluator import TriggerEvaluator
from domain.enums import Channel
from domain.models import ChannelFrame
from utils.constants import CALIBRATION_WINDOW

logger = logging.getLogger(__name__)


class CalibrationSession:
    """
    Records the maximum raw intensity of *channel* over a fixed window,
    then commits it via TriggerEvaluator.set_calibration_max() (which
    floors values below the minimum instead of rejecting them).

    Parameters
    ----------
    evaluator : TriggerEvaluator
    channel : Channel
    window : float
        Capture length in seconds, measured on frame timestamps.
    """

    def __init__(
        self,
        evaluator: TriggerEvaluator,
        channel: Channel,
        window: float = CALIBRATION_WINDOW,
    ) -> None:
        self._evaluator = evaluator
        self._channel = channel
        self._window = window
        self._started_at: Optional[float] = None
        self._peak = 0.0
        self._done = False

    # ------------------------------------------------------------------
    def feed(self, frame: ChannelFrame) -> bool:
        """
        Record one frame. The first frame starts the window.
        Returns True once the capture has been committed.
        """
        if self._done:
            return True
        if self._started_at is None:
            self._started_at = frame.timestamp
            logger.info("Calibrating %s for %.1fs", self._channel.value, self._window)

        self._peak = max(self._peak, frame.value(self._channel))

        if frame.timestamp - self._started_at >= self._window:
            self._evaluator.set_calibration_max(self._channel, self._peak)
            self._done = True
        return self._done

    def progress(self, now: float) -> float:
        if self._done:
            return 1.0
        if self._started_at is None:
            return 0.0
        return max(0.0, min(1.0, (now - self._started_at) / self._window))

    @property
    def channel(self) -> Channel:
        return self._channel

    @property
    def peak(self) -> float:
        return self._peak

    @property
    def done(self) -> bool:
        return self._done
