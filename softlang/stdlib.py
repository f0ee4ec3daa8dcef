"""Registration of the standard library of native functions."""

from __future__ import annotations

from . import stdlib_io, stdlib_math, stdlib_string, stdlib_time
from .native import VARIADIC, NativeFunction, NativeRegistry


def register_stdlib(registry: NativeRegistry) -> None:
    """Add every standard library function to ``registry``."""
    timer = stdlib_time.Timer()
    entries = [
        ("abs", 1, stdlib_math.math_abs),
        ("max", 2, stdlib_math.math_max),
        ("min", 2, stdlib_math.math_min),
        ("sqrt", 1, stdlib_math.math_sqrt),
        ("pow", 2, stdlib_math.math_pow),
        ("floor", 1, stdlib_math.math_floor),
        ("ceil", 1, stdlib_math.math_ceil),
        ("round", 1, stdlib_math.math_round),
        ("print", VARIADIC, stdlib_io.io_print),
        ("println", VARIADIC, stdlib_io.io_println),
        ("eprint", VARIADIC, stdlib_io.io_eprint),
        ("eprintln", VARIADIC, stdlib_io.io_eprintln),
        ("read_line", 0, stdlib_io.io_read_line),
        ("len", 1, stdlib_string.string_len),
        ("to_upper", 1, stdlib_string.string_to_upper),
        ("to_lower", 1, stdlib_string.string_to_lower),
        ("trim", 1, stdlib_string.string_trim),
        ("split", 2, stdlib_string.string_split),
        ("join", 2, stdlib_string.string_join),
        ("contains", 2, stdlib_string.string_contains),
        ("starts_with", 2, stdlib_string.string_starts_with),
        ("ends_with", 2, stdlib_string.string_ends_with),
        ("now", 0, stdlib_time.time_now),
        ("now_millis", 0, stdlib_time.time_now_millis),
        ("now_micros", 0, stdlib_time.time_now_micros),
        ("sleep", 1, stdlib_time.time_sleep),
        ("sleep_millis", 1, stdlib_time.time_sleep_millis),
        ("timer_start", 0, timer.start),
        ("timer_elapsed", 0, timer.elapsed),
    ]
    for name, arity, function in entries:
        registry.register(NativeFunction(name, arity, function))


def default_registry() -> NativeRegistry:
    """A new registry holding the standard library."""
    registry = NativeRegistry()
    register_stdlib(registry)
    return registry