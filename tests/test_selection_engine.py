import pytest

from domain.enums import ActionKind, Channel
from domain.models import ChannelFrame


def feed(engine, start, stop, step=0.1, **channels):
    """Feed frames from start to stop (inclusive) and collect confirmed actions."""
    actions = []
    steps = int(round((stop - start) / step))
    for i in range(steps + 1):
        action = engine.process(ChannelFrame(timestamp=start + i * step, **channels))
        if action is not None:
            actions.append(action)
    return actions


def test_held_gesture_confirms_one_action(engine):
    # a clear right smile lands on the left trigger
    assert feed(engine, 0.0, 0.5, right_smile=0.8) == [ActionKind.SELECT_LEFT]
    assert engine.view.left_label == "A - M"


def test_short_gesture_is_cancelled(engine):
    assert feed(engine, 0.0, 0.3, right_smile=0.8) == []
    assert feed(engine, 0.4, 1.0) == []
    assert engine.view.at_root


def test_type_h_with_gestures(engine):
    L = dict(right_smile=0.8)       # drives SELECT_LEFT
    R = dict(left_smile=0.8)        # drives SELECT_RIGHT
    t = 0.0
    for side in (L, L, R, L, L, L):
        assert len(feed(engine, t, t + 0.5, **side)) == 1
        feed(engine, t + 0.6, t + 0.8)          # relax
        t += 1.0
    assert engine.view.message == "H"


def test_pucker_steps_back(engine):
    feed(engine, 0.0, 0.5, right_smile=0.8)                 # open alphabet
    feed(engine, 0.6, 0.8)
    assert feed(engine, 1.0, 1.5, pucker=0.9) == [ActionKind.BACK_OR_DELETE]
    assert engine.view.at_root


def test_throttled_frames_do_not_advance_timer(engine):
    engine.process(ChannelFrame(right_smile=0.8, timestamp=0.0))
    # dropped by the throttle, so the release is never seen
    for t in (0.01, 0.02, 0.03, 0.04):
        assert engine.process(ChannelFrame(right_smile=0.0, timestamp=t)) is None
    assert engine.process(ChannelFrame(right_smile=0.8, timestamp=0.45)) is ActionKind.SELECT_LEFT


def test_listeners_see_views(engine):
    views = []
    engine.add_listener(views.append)
    engine.inject(ActionKind.SELECT_LEFT)
    assert [v.left_label for v in views] == ["A - M"]


def test_inject_cancels_pending_hold(engine):
    engine.process(ChannelFrame(pucker=0.9, timestamp=0.0))
    engine.inject(ActionKind.SELECT_RIGHT)
    assert feed(engine, 0.1, 0.4, pucker=0.9) == []


def test_calibration_capture_blocks_navigation(engine, evaluator):
    engine.start_calibration(Channel.PUCKER, window=1.0)
    assert engine.calibrating
    assert feed(engine, 0.0, 1.1, pucker=0.7) == []
    assert not engine.calibrating
    assert evaluator.calibration.back_max == 0.7
    assert engine.view.at_root


def test_set_calibration_max_passes_through(engine, evaluator):
    engine.set_calibration_max(Channel.LEFT_SMILE, 0.02)
    assert evaluator.calibration.left_max == 0.1


def test_face_loss_cancels_pending(engine):
    engine.process(ChannelFrame(right_smile=0.8, timestamp=0.0))
    assert engine.hold_progress(0.2) == pytest.approx(0.5)
    assert engine.check_face(0.2)
    assert not engine.check_face(1.0)
    assert engine.hold_progress(1.0) == 0.0


def test_triggers_exposed(engine):
    engine.process(ChannelFrame(pucker=0.9, timestamp=0.0))
    assert engine.triggers.is_triggering_back


def test_face_lost_frame_drops_hold_and_state(engine):
    engine.process(ChannelFrame(right_smile=0.8, timestamp=0.0))
    engine.face_lost()
    assert engine.hold_progress(0.2) == 0.0
    assert not engine.triggers.any_active
    assert not engine.check_face(0.1)
    # face back: a fresh hold is needed
    assert feed(engine, 0.3, 0.6, right_smile=0.8) == []
    assert feed(engine, 0.8, 0.8, right_smile=0.8) == [ActionKind.SELECT_LEFT]
