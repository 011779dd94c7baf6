import pytest

from core.calibration_session import CalibrationSession
from domain.enums import Channel
from domain.models import ChannelFrame


def test_records_peak_and_commits(evaluator, store):
    session = CalibrationSession(evaluator, Channel.RIGHT_SMILE, window=1.0)
    values = [0.2, 0.6, 0.75, 0.4, 0.5]
    for i, value in enumerate(values):
        assert not session.feed(ChannelFrame(right_smile=value, timestamp=i * 0.2))
    assert session.peak == 0.75
    assert session.feed(ChannelFrame(right_smile=0.1, timestamp=1.0))
    assert session.done
    assert evaluator.calibration.right_max == 0.75
    assert store.saves == 1


def test_weak_capture_is_floored(evaluator):
    session = CalibrationSession(evaluator, Channel.PUCKER, window=0.5)
    session.feed(ChannelFrame(pucker=0.03, timestamp=0.0))
    session.feed(ChannelFrame(pucker=0.05, timestamp=0.6))
    assert evaluator.calibration.back_max == 0.1


def test_progress(evaluator):
    session = CalibrationSession(evaluator, Channel.LEFT_SMILE, window=2.0)
    assert session.progress(5.0) == 0.0
    session.feed(ChannelFrame(timestamp=10.0))
    assert session.progress(11.0) == pytest.approx(0.5)
    session.feed(ChannelFrame(timestamp=12.0))
    assert session.progress(11.0) == 1.0


def test_feeding_after_done_changes_nothing(evaluator, store):
    session = CalibrationSession(evaluator, Channel.PUCKER, window=0.0)
    assert session.feed(ChannelFrame(pucker=0.4, timestamp=0.0))
    assert session.feed(ChannelFrame(pucker=0.9, timestamp=1.0))
    assert evaluator.calibration.back_max == 0.4
    assert store.saves == 1
