import pytest

from domain.enums import ActionKind, Channel
from domain.models import Calibration, ChannelFrame, PendingAction, TriggerState


def test_calibration_defaults():
    cal = Calibration()
    assert (cal.left_max, cal.right_max, cal.back_max) == (0.5, 0.5, 0.5)
    assert cal.trigger_factor == 0.6
    assert cal.threshold(Channel.PUCKER) == pytest.approx(0.3)


def test_with_max_floors_small_values():
    cal = Calibration().with_max(Channel.RIGHT_SMILE, 0.03)
    assert cal.right_max == 0.1
    assert cal.left_max == 0.5


def test_calibration_dict_layout():
    cal = Calibration(left_max=0.7, right_max=0.6, back_max=0.4, trigger_factor=0.5)
    assert cal.to_dict() == {"leftMax": 0.7, "rightMax": 0.6, "backMax": 0.4, "triggerFactor": 0.5}
    assert Calibration.from_dict(cal.to_dict()) == cal


def test_from_dict_rejects_missing_keys():
    with pytest.raises(KeyError):
        Calibration.from_dict({"leftMax": 0.5})


def test_frame_from_blendshapes():
    scores = {"mouthSmileLeft": 0.4, "mouthSmileRight": 0.1, "mouthPucker": 0.8, "jawOpen": 0.9}
    frame = ChannelFrame.from_blendshapes(scores, timestamp=12.5)
    assert frame.left_smile == 0.4
    assert frame.right_smile == 0.1
    assert frame.pucker == 0.8
    assert frame.timestamp == 12.5
    assert frame.value(Channel.PUCKER) == 0.8


def test_missing_blendshapes_read_as_zero():
    frame = ChannelFrame.from_blendshapes({}, timestamp=0.0)
    assert (frame.left_smile, frame.right_smile, frame.pucker) == (0.0, 0.0, 0.0)


def test_trigger_state_lookup_by_action():
    state = TriggerState(is_triggering_right=True)
    assert state.is_active(ActionKind.SELECT_RIGHT)
    assert not state.is_active(ActionKind.SELECT_LEFT)
    assert state.any_active


def test_pending_action_deadline():
    assert PendingAction(ActionKind.BACK_OR_DELETE, started_at=2.0).deadline(0.4) == pytest.approx(2.4)
