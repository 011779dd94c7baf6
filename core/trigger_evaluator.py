"""
TriggerEvaluator — turns raw channel intensities into three boolean
triggers, using the user's calibration.

Per accepted frame:
  1. Dead zone     — raw values under the floor read as 0.
  2. Dominance     — left/right smiles exclude each other unless one beats
                     the other by the margin. The winning raw value is
                     written to the OPPOSITE side's field; see
                     _apply_dominance().
  3. Threshold     — value > calibrated max * trigger factor.

Frames closer than the throttle interval to the last accepted one are
dropped so the cadence never exceeds the tracker's rate.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import Callable, Optional, Tuple

from core.calibration_store import CalibrationStore
from domain.enums import Channel
from domain.models import Calibration, ChannelFrame, TriggerState
from utils.constants import (
    DEAD_ZONE,
    DOMINANCE_MARGIN,
    FACE_LOST_TIMEOUT,
    THROTTLE_INTERVAL,
)

logger = logging.getLogger(__name__)


class TriggerEvaluator:
    """
    Parameters
    ----------
    store : CalibrationStore
        Loaded once on construction; every calibration change is saved back.
    on_back_pulse : callable, optional
        Invoked once on each false→true edge of the back trigger
        (haptic / audible feedback).
    dead_zone, dominance_margin, throttle_interval, face_lost_timeout : float
        Tuning knobs; defaults come from utils.constants.
    """

    def __init__(
        self,
        store: CalibrationStore,
        on_back_pulse: Optional[Callable[[], None]] = None,
        dead_zone: float = DEAD_ZONE,
        dominance_margin: float = DOMINANCE_MARGIN,
        throttle_interval: float = THROTTLE_INTERVAL,
        face_lost_timeout: float = FACE_LOST_TIMEOUT,
    ) -> None:
        self._store = store
        self._on_back_pulse = on_back_pulse
        self._dead_zone = dead_zone
        self._dominance_margin = dominance_margin
        self._throttle_interval = throttle_interval
        self._face_lost_timeout = face_lost_timeout

        self._calibration: Calibration = store.load()
        self._state = TriggerState()
        self._last_update: Optional[float] = None

    # ------------------------------------------------------------------
    def update(self, frame: ChannelFrame) -> Optional[TriggerState]:
        """
        Feed one tracker frame.

        Returns the new TriggerState, or None when the frame was throttled
        (the previous state stays in self.state).
        """
        if (
            self._last_update is not None
            and frame.timestamp - self._last_update < self._throttle_interval
        ):
            return None
        self._last_update = frame.timestamp

        left_raw = self._floor(frame.left_smile)
        right_raw = self._floor(frame.right_smile)
        back_value = self._floor(frame.pucker)
        left_value, right_value = self._apply_dominance(left_raw, right_raw)

        cal = self._calibration
        new_state = TriggerState(
            is_triggering_left=left_value > cal.threshold(Channel.LEFT_SMILE),
            is_triggering_right=right_value > cal.threshold(Channel.RIGHT_SMILE),
            is_triggering_back=back_value > cal.threshold(Channel.PUCKER),
            left_value=left_value,
            right_value=right_value,
            back_value=back_value,
        )

        if new_state.is_triggering_back and not self._state.is_triggering_back:
            if self._on_back_pulse is not None:
                self._on_back_pulse()

        self._state = new_state
        return new_state

    def _floor(self, value: float) -> float:
        return 0.0 if value < self._dead_zone else value

    def _apply_dominance(self, left_raw: float, right_raw: float) -> Tuple[float, float]:
        """
        Returns (left_value, right_value).

        The dominant raw smile lands in the opposite field: a clear left
        smile drives the right trigger and vice versa. Downstream action
        mapping depends on this, so it is kept as is.
        """
        if left_raw > right_raw + self._dominance_margin:
            return 0.0, left_raw
        if right_raw > left_raw + self._dominance_margin:
            return right_raw, 0.0
        return 0.0, 0.0

    # ------------------------------------------------------------------
    # Calibration API (the only write access the UI has)
    # ------------------------------------------------------------------
    def set_calibration_max(self, channel: Channel, value: float) -> None:
        """Store a new max for *channel*; values under the minimum are floored."""
        self._calibration = self._calibration.with_max(channel, value)
        self._store.save(self._calibration)
        logger.info(
            "Calibration %s max=%.3f (requested %.3f)",
            channel.value, self._calibration.max_for(channel), value,
        )

    def set_trigger_factor(self, factor: float) -> None:
        self._calibration = replace(self._calibration, trigger_factor=factor)
        self._store.save(self._calibration)

    def reset_calibration(self) -> None:
        self._calibration = Calibration()
        self._store.save(self._calibration)

    # ------------------------------------------------------------------
    @property
    def calibration(self) -> Calibration:
        return self._calibration

    @property
    def state(self) -> TriggerState:
        """The last computed trigger state."""
        return self._state

    def is_face_tracked(self, now: float) -> bool:
        """False when no frame has been accepted within the face-lost timeout."""
        if self._last_update is None:
            return False
        return now - self._last_update <= self._face_lost_timeout

    def reset(self) -> None:
        """Forget the current frame (e.g. when tracking is lost)."""
        self._state = TriggerState()
        self._last_update = None
