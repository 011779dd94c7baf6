"""
SelectionEngine — the single entry point the shell feeds frames into.

Pipeline per frame:

    ChannelFrame → TriggerEvaluator → HoldTimer → MenuNavigator

Design decisions:
  - Components are injected, not created here (tests wire fakes).
  - The timer is polled only on frames the evaluator accepted, so both run
    at the same throttled cadence and use the frame timestamp as "now".
  - While a calibration capture runs, frames go to the capture and no
    navigation happens.
  - All of this runs on one thread; observers see a change only after the
    whole transition has been applied.
"""
from __future__ import annotations
import logging
from typing import Callable, List, Optional

from core.calibration_session import CalibrationSession
from core.hold_timer import HoldTimer
from core.navigator import MenuNavigator
from core.trigger_evaluator import TriggerEvaluator
from domain.enums import ActionKind, Channel
from domain.models import ChannelFrame, NavigatorView, TriggerState

logger = logging.getLogger(__name__)

ViewListener = Callable[[NavigatorView], None]


class SelectionEngine:
    """
    Usage
    -----
    engine = SelectionEngine(evaluator, timer, navigator)
    engine.add_listener(window.on_view)
    engine.process(frame)            # once per tracker frame
    """

    def __init__(
        self,
        evaluator: TriggerEvaluator,
        timer: HoldTimer,
        navigator: MenuNavigator,
    ) -> None:
        self._evaluator = evaluator
        self._timer = timer
        self._navigator = navigator
        self._listeners: List[ViewListener] = []
        self._calibration: Optional[CalibrationSession] = None

    # ------------------------------------------------------------------
    def process(self, frame: ChannelFrame) -> Optional[ActionKind]:
        """
        Feed one tracker frame; returns the action confirmed on this frame,
        if any.
        """
        if self._calibration is not None:
            if self._calibration.feed(frame):
                logger.info(
                    "Calibration of %s finished (peak %.3f)",
                    self._calibration.channel.value, self._calibration.peak,
                )
                self._calibration = None
            self._evaluator.update(frame)
            return None

        state = self._evaluator.update(frame)
        if state is None:
            return None

        action = self._timer.poll(state, now=frame.timestamp)
        if action is not None:
            self._apply(action)
        return action

    def inject(self, action: ActionKind) -> None:
        """Apply an action directly, bypassing the hold timer (debug controls)."""
        self._timer.cancel()
        self._apply(action)

    def _apply(self, action: ActionKind) -> None:
        logger.info("[EVENT] %s", action.value)
        self._navigator.handle(action)
        self._notify()

    # ------------------------------------------------------------------
    # Calibration
    # ------------------------------------------------------------------
    def start_calibration(self, channel: Channel, window: Optional[float] = None) -> CalibrationSession:
        self._timer.cancel()
        if window is None:
            session = CalibrationSession(self._evaluator, channel)
        else:
            session = CalibrationSession(self._evaluator, channel, window=window)
        self._calibration = session
        return session

    def set_calibration_max(self, channel: Channel, value: float) -> None:
        self._evaluator.set_calibration_max(channel, value)

    @property
    def calibrating(self) -> bool:
        return self._calibration is not None

    # ------------------------------------------------------------------
    def check_face(self, now: float) -> bool:
        """Returns False and drops any pending hold when the face was lost."""
        tracked = self._evaluator.is_face_tracked(now)
        if not tracked and self._timer.pending is not None:
            logger.debug("Face lost, cancelling pending hold")
            self._timer.cancel()
        return tracked

    def face_lost(self) -> None:
        """Tracker reported no face: drop the pending hold and the last trigger state."""
        if self._timer.pending is not None:
            logger.debug("Face lost, cancelling pending hold")
        self._timer.cancel()
        self._evaluator.reset()

    # ------------------------------------------------------------------
    def add_listener(self, listener: ViewListener) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        view = self._navigator.view
        for listener in self._listeners:
            listener(view)

    @property
    def view(self) -> NavigatorView:
        return self._navigator.view

    @property
    def triggers(self) -> TriggerState:
        return self._evaluator.state

    def hold_progress(self, now: float) -> float:
        return self._timer.progress(now)
