"""
HoldTimer — debounces a sustained trigger into exactly one confirmed action.

Idle ──trigger──▶ Pending(kind, deadline) ──still held at deadline──▶ fire
                         │
                         └──released before deadline──▶ cancelled (Idle)

Only one action can be pending. Triggers that show up while one is pending
are ignored until it fires or is cancelled. Cancellation is polled on
every accepted tracker frame, so no background timer is involved.
"""
from __future__ import annotations
import logging
import time
from typing import Callable, Optional

from domain.enums import ActionKind
from domain.models import PendingAction, TriggerState
from utils.constants import HOLD_DURATION

logger = logging.getLogger(__name__)

# Checked in this order when several triggers are true on the same frame.
_PRIORITY = (ActionKind.SELECT_LEFT, ActionKind.SELECT_RIGHT, ActionKind.BACK_OR_DELETE)


class HoldTimer:
    """
    Usage
    -----
    timer = HoldTimer(hold_duration=0.4)
    action = timer.poll(evaluator.state)
    if action is not None:
        ...  # confirmed

    Parameters
    ----------
    hold_duration : float
        Seconds a trigger must stay true before it is confirmed.
    clock : callable
        Monotonic time source (injected so tests don't sleep).
    """

    def __init__(
        self,
        hold_duration: float = HOLD_DURATION,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._hold = hold_duration
        self._clock = clock
        self._pending: Optional[PendingAction] = None

    # ------------------------------------------------------------------
    def poll(self, triggers: TriggerState, now: Optional[float] = None) -> Optional[ActionKind]:
        """
        Advance the timer with the current trigger flags.

        Returns the confirmed ActionKind on the poll where the hold
        completes, otherwise None.
        """
        now = self._clock() if now is None else now

        if self._pending is not None:
            pending = self._pending
            if not triggers.is_active(pending.kind):
                logger.debug("Hold cancelled: %s", pending.kind.value)
                self._pending = None
                return None
            if now >= pending.deadline(self._hold):
                self._pending = None
                logger.debug("Hold confirmed: %s", pending.kind.value)
                return pending.kind
            return None

        for kind in _PRIORITY:
            if triggers.is_active(kind):
                self._pending = PendingAction(kind=kind, started_at=now)
                logger.debug("Hold started: %s", kind.value)
                break
        return None

    def progress(self, now: Optional[float] = None) -> float:
        """Fraction of the hold completed, 0.0 when idle."""
        if self._pending is None:
            return 0.0
        now = self._clock() if now is None else now
        elapsed = now - self._pending.started_at
        return max(0.0, min(1.0, elapsed / self._hold)) if self._hold > 0 else 1.0

    @property
    def pending(self) -> Optional[PendingAction]:
        return self._pending

    @property
    def hold_duration(self) -> float:
        return self._hold

    def cancel(self) -> None:
        """Drop the pending action, if any (e.g. on face loss)."""
        self._pending = None
