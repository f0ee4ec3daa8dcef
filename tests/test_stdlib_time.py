import time
from unittest import mock

import pytest

from softlang.native import NativeError
from softlang.stdlib_time import (
    Timer,
    time_now,
    time_now_micros,
    time_now_millis,
    time_sleep,
    time_sleep_millis,
)
from softlang.value import Value, ValueKind


def test_now_is_between_clock_readings():
    before = int(time.time())
    result = time_now([])
    after = int(time.time()) + 1
    assert result.kind is ValueKind.INT
    assert before <= result.payload <= after


def test_millis_and_micros_agree_with_seconds():
    seconds = time_now([]).payload
    millis = time_now_millis([]).payload
    micros = time_now_micros([]).payload
    assert abs(millis // 1000 - seconds) <= 1
    assert abs(micros // 1000 - millis) <= 1000


@pytest.mark.parametrize(
    "func, name", [(time_now, "now"), (time_now_millis, "now_millis"), (time_now_micros, "now_micros")]
)
def test_clock_functions_reject_arguments(func, name):
    with pytest.raises(NativeError, match=rf"{name}\(\) takes no arguments \(2 given\)"):
        func([Value.integer(1), Value.integer(2)])


def test_sleep_int_seconds():
    with mock.patch("time.sleep") as fake_sleep:
        assert time_sleep([Value.integer(2)]) == Value.integer(0)
    fake_sleep.assert_called_once_with(2)


def test_sleep_float_seconds():
    with mock.patch("time.sleep") as fake_sleep:
        result = time_sleep([Value.floating(0.25)])
    assert result == Value.integer(0)
    fake_sleep.assert_called_once_with(0.25)


def test_sleep_errors():
    with pytest.raises(NativeError, match="must be non-negative"):
        time_sleep([Value.integer(-1)])
    with pytest.raises(NativeError, match="must be non-negative"):
        time_sleep([Value.floating(-0.5)])
    with pytest.raises(NativeError, match="must be a number"):
        time_sleep([Value.string("1")])
    with pytest.raises(NativeError, match=r"takes exactly 1 argument \(0 given\)"):
        time_sleep([])


def test_sleep_millis_converts_to_seconds():
    with mock.patch("time.sleep") as fake_sleep:
        assert time_sleep_millis([Value.integer(1500)]) == Value.integer(0)
    fake_sleep.assert_called_once_with(1.5)


def test_sleep_millis_errors():
    with pytest.raises(NativeError, match="must be an integer"):
        time_sleep_millis([Value.floating(1.0)])
    with pytest.raises(NativeError, match="must be non-negative"):
        time_sleep_millis([Value.integer(-5)])


def test_timer_elapsed_before_start_fails():
    with pytest.raises(NativeError, match=r"timer_start\(\) must be called before timer_elapsed\(\)"):
        Timer().elapsed([])


def test_timer_measures_non_negative_float():
    timer = Timer()
    assert timer.start([]) == Value.integer(0)
    first = timer.elapsed([])
    second = timer.elapsed([])
    assert first.kind is ValueKind.FLOAT
    assert 0.0 <= first.payload <= second.payload


def test_timer_rejects_arguments():
    timer = Timer()
    with pytest.raises(NativeError, match="timer_start"):
        timer.start([Value.integer(1)])
    timer.start([])
    with pytest.raises(NativeError, match="timer_elapsed"):
        timer.elapsed([Value.integer(1)])