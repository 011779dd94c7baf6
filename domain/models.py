from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple
import time

from domain.enums import ActionKind, Channel, EntryMode
from utils.constants import (
    DEFAULT_CHANNEL_MAX,
    MIN_CALIBRATION_VALUE,
    TRIGGER_FACTOR,
)

# Type aliases
Branch = List[str]
Completion = Tuple[str, int]          # (word, rank)

# Face-tracker blendshape feeding each channel
BLENDSHAPE_NAMES: Dict[Channel, str] = {
    Channel.LEFT_SMILE:  "mouthSmileLeft",
    Channel.RIGHT_SMILE: "mouthSmileRight",
    Channel.PUCKER:      "mouthPucker",
}


@dataclass
class ChannelFrame:
    """
    Raw channel intensities for a single tracked frame, each in [0, 1].
    Passed through the engine instead of individual arguments.
    """
    left_smile: float = 0.0
    right_smile: float = 0.0
    pucker: float = 0.0
    timestamp: float = field(default_factory=time.monotonic)

    @classmethod
    def from_blendshapes(cls, scores: Dict[str, float], timestamp: float) -> "ChannelFrame":
        """Pick the three channels out of a blendshape-name → score mapping."""
        return cls(
            left_smile=float(scores.get(BLENDSHAPE_NAMES[Channel.LEFT_SMILE], 0.0)),
            right_smile=float(scores.get(BLENDSHAPE_NAMES[Channel.RIGHT_SMILE], 0.0)),
            pucker=float(scores.get(BLENDSHAPE_NAMES[Channel.PUCKER], 0.0)),
            timestamp=timestamp,
        )

    def value(self, channel: Channel) -> float:
        if channel is Channel.LEFT_SMILE:
            return self.left_smile
        if channel is Channel.RIGHT_SMILE:
            return self.right_smile
        return self.pucker


@dataclass(frozen=True)
class Calibration:
    """
    Per-user maximum intensities plus the trigger factor.

    Serialised with the camelCase keys the settings file uses:
    {"leftMax", "rightMax", "backMax", "triggerFactor"}.
    """
    left_max: float = DEFAULT_CHANNEL_MAX
    right_max: float = DEFAULT_CHANNEL_MAX
    back_max: float = DEFAULT_CHANNEL_MAX
    trigger_factor: float = TRIGGER_FACTOR

    def max_for(self, channel: Channel) -> float:
        if channel is Channel.LEFT_SMILE:
            return self.left_max
        if channel is Channel.RIGHT_SMILE:
            return self.right_max
        return self.back_max

    def with_max(self, channel: Channel, value: float) -> "Calibration":
        """Return a copy with *channel*'s max replaced, floored at the minimum valid value."""
        floored = max(float(value), MIN_CALIBRATION_VALUE)
        if channel is Channel.LEFT_SMILE:
            return replace(self, left_max=floored)
        if channel is Channel.RIGHT_SMILE:
            return replace(self, right_max=floored)
        return replace(self, back_max=floored)

    def threshold(self, channel: Channel) -> float:
        return self.max_for(channel) * self.trigger_factor

    # ---- serialisation -------------------------------------------------
    def to_dict(self) -> Dict[str, float]:
        return {
            "leftMax": self.left_max,
            "rightMax": self.right_max,
            "backMax": self.back_max,
            "triggerFactor": self.trigger_factor,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Calibration":
        """
        Build a Calibration from a decoded settings blob.
        Stored maxima are floored at the minimum valid value, like with_max().
        Raises KeyError / TypeError / ValueError on malformed input.
        """
        if not isinstance(data, dict):
            raise TypeError(f"calibration blob must be an object, got {type(data).__name__}")
        return cls(
            left_max=max(float(data["leftMax"]), MIN_CALIBRATION_VALUE),
            right_max=max(float(data["rightMax"]), MIN_CALIBRATION_VALUE),
            back_max=max(float(data["backMax"]), MIN_CALIBRATION_VALUE),
            trigger_factor=float(data.get("triggerFactor", TRIGGER_FACTOR)),
        )


@dataclass(frozen=True)
class TriggerState:
    """Per-frame trigger flags plus the processed values they came from."""
    is_triggering_left: bool = False
    is_triggering_right: bool = False
    is_triggering_back: bool = False
    left_value: float = 0.0
    right_value: float = 0.0
    back_value: float = 0.0

    @property
    def any_active(self) -> bool:
        return self.is_triggering_left or self.is_triggering_right or self.is_triggering_back

    def is_active(self, kind: ActionKind) -> bool:
        if kind is ActionKind.SELECT_LEFT:
            return self.is_triggering_left
        if kind is ActionKind.SELECT_RIGHT:
            return self.is_triggering_right
        return self.is_triggering_back


@dataclass(frozen=True)
class PendingAction:
    kind: ActionKind
    started_at: float

    def deadline(self, hold_duration: float) -> float:
        return self.started_at + hold_duration


@dataclass(frozen=True)
class NavigatorView:
    """Read-only snapshot of everything the UI is allowed to show."""
    left_label: str
    right_label: str
    message: str
    suggestions: Tuple[str, ...]
    mode: Optional[EntryMode]
    at_root: bool
    depth: int
