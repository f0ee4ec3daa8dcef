"""Numeric built-in functions."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .native import NativeError
from .value import Value, ValueKind

_NUMERIC = (ValueKind.INT, ValueKind.FLOAT)


def _check_count(name: str, args: Sequence[Value], count: int) -> None:
    if len(args) != count:
        noun = "argument" if count == 1 else "arguments"
        raise NativeError(f"{name}() takes exactly {count} {noun} ({len(args)} given)")


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def _powf(base: float, exp: float) -> float:
    """IEEE power: overflow and poles give infinities, domain errors give NaN."""
    try:
        return math.pow(base, exp)
    except OverflowError:
        if base < 0 and _is_odd_integer(exp):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exp):
                return -math.inf
            return math.inf
        return math.nan


def _to_int(x: float) -> int:
    """Saturating float-to-int cast; NaN becomes 0."""
    return Value.floating(x).to_int()


def _round_half_away(x: float) -> float:
    if not math.isfinite(x):
        return x
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += int(math.copysign(1, x))
    return float(whole)


def _numeric_pair(name: str, args: Sequence[Value], plural_msg: str) -> tuple[Value, Value]:
    _check_count(name, args, 2)
    a, b = args
    if a.kind not in _NUMERIC or b.kind not in _NUMERIC:
        raise NativeError(plural_msg)
    return a, b


def math_abs(args: Sequence[Value]) -> Value:
    _check_count("abs", args, 1)
    (arg,) = args
    if arg.kind is ValueKind.INT:
        return Value.integer(abs(arg.payload))
    if arg.kind is ValueKind.FLOAT:
        return Value.floating(abs(arg.payload))
    raise NativeError("abs() argument must be a number")


def math_max(args: Sequence[Value]) -> Value:
    a, b = _numeric_pair("max", args, "max() arguments must be numbers")
    if a.kind is ValueKind.INT and b.kind is ValueKind.INT:
        return Value.integer(max(a.payload, b.payload))
    return Value.floating(_fmax(a.to_float(), b.to_float()))


def math_min(args: Sequence[Value]) -> Value:
    a, b = _numeric_pair("min", args, "min() arguments must be numbers")
    if a.kind is ValueKind.INT and b.kind is ValueKind.INT:
        return Value.integer(min(a.payload, b.payload))
    return Value.floating(_fmin(a.to_float(), b.to_float()))


def math_sqrt(args: Sequence[Value]) -> Value:
    _check_count("sqrt", args, 1)
    (arg,) = args
    if arg.kind not in _NUMERIC:
        raise NativeError("sqrt() argument must be a number")
    x = arg.to_float()
    if x < 0:
        raise NativeError("sqrt() of negative number")
    return Value.floating(x if math.isnan(x) else math.sqrt(x))


def math_pow(args: Sequence[Value]) -> Value:
    base, exp = _numeric_pair("pow", args, "pow() arguments must be numbers")
    return Value.floating(_powf(base.to_float(), exp.to_float()))


def _rounding(name: str, args: Sequence[Value], op) -> Value:
    _check_count(name, args, 1)
    (arg,) = args
    if arg.kind is ValueKind.INT:
        return arg
    if arg.kind is ValueKind.FLOAT:
        return Value.integer(_to_int(op(arg.payload)))
    raise NativeError(f"{name}() argument must be a number")


def _float_floor(x: float) -> float:
    return float(math.floor(x)) if math.isfinite(x) else x


def _float_ceil(x: float) -> float:
    return float(math.ceil(x)) if math.isfinite(x) else x


def math_floor(args: Sequence[Value]) -> Value:
    return _rounding("floor", args, _float_floor)


def math_ceil(args: Sequence[Value]) -> Value:
    return _rounding("ceil", args, _float_ceil)


def math_round(args: Sequence[Value]) -> Value:
    """Round half away from zero."""
    return _rounding("round", args, _round_half_away)