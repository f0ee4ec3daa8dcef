"""Clock, sleep and timer built-in functions."""

from __future__ import annotations

import math
import time
from collections.abc import Sequence

from .native import NativeError
from .value import Value, ValueKind

_OK = Value.integer(0)


def _no_args(name: str, args: Sequence[Value]) -> None:
    if args:
        raise NativeError(f"{name}() takes no arguments ({len(args)} given)")


def _one_arg(name: str, args: Sequence[Value]) -> Value:
    if len(args) != 1:
        raise NativeError(f"{name}() takes exactly 1 argument ({len(args)} given)")
    return args[0]


def time_now(args: Sequence[Value]) -> Value:
    """Seconds since the Unix epoch."""
    _no_args("now", args)
    return Value.integer(time.time_ns() // 1_000_000_000)


def time_now_millis(args: Sequence[Value]) -> Value:
    """Milliseconds since the Unix epoch."""
    _no_args("now_millis", args)
    return Value.integer(time.time_ns() // 1_000_000)


def time_now_micros(args: Sequence[Value]) -> Value:
    """Microseconds since the Unix epoch."""
    _no_args("now_micros", args)
    return Value.integer(time.time_ns() // 1_000)


def time_sleep(args: Sequence[Value]) -> Value:
    """Sleep for a whole or fractional number of seconds."""
    arg = _one_arg("sleep", args)
    if arg.kind not in (ValueKind.INT, ValueKind.FLOAT):
        raise NativeError("sleep() argument must be a number")
    seconds = arg.payload
    if seconds < 0:
        raise NativeError("sleep() argument must be non-negative")
    if arg.kind is ValueKind.FLOAT and not math.isfinite(seconds):
        raise NativeError("sleep() argument must be a finite number")
    time.sleep(seconds)
    return _OK


def time_sleep_millis(args: Sequence[Value]) -> Value:
    """Sleep for a whole number of milliseconds."""
    arg = _one_arg("sleep_millis", args)
    if arg.kind is not ValueKind.INT:
        raise NativeError("sleep_millis() argument must be an integer")
    if arg.payload < 0:
        raise NativeError("sleep_millis() argument must be non-negative")
    time.sleep(arg.payload / 1000)
    return _OK


class Timer:
    """A stopwatch: ``start`` marks a moment, ``elapsed`` gives seconds since it."""

    def __init__(self) -> None:
        self._started: float | None = None

    def start(self, args: Sequence[Value]) -> Value:
        _no_args("timer_start", args)
        self._started = time.perf_counter()
        return _OK

    def elapsed(self, args: Sequence[Value]) -> Value:
        _no_args("timer_elapsed", args)
        if self._started is None:
            raise NativeError("timer_start() must be called before timer_elapsed()")
        return Value.floating(time.perf_counter() - self._started)