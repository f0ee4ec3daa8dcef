"""String built-in functions."""

from __future__ import annotations

from collections.abc import Sequence

from .native import NativeError
from .value import Value, ValueKind


def _check_count(name: str, args: Sequence[Value], count: int) -> None:
    if len(args) != count:
        noun = "argument" if count == 1 else "arguments"
        raise NativeError(f"{name}() takes exactly {count} {noun} ({len(args)} given)")


def _one_string(name: str, args: Sequence[Value]) -> str:
    _check_count(name, args, 1)
    (arg,) = args
    if arg.kind is not ValueKind.STRING:
        raise NativeError(f"{name}() argument must be a string")
    return arg.payload


def _two_strings(name: str, args: Sequence[Value]) -> tuple[str, str]:
    _check_count(name, args, 2)
    a, b = args
    if a.kind is not ValueKind.STRING or b.kind is not ValueKind.STRING:
        raise NativeError(f"{name}() arguments must be strings")
    return a.payload, b.payload


def string_len(args: Sequence[Value]) -> Value:
    """Length of a string in UTF-8 bytes."""
    return Value.integer(len(_one_string("len", args).encode("utf-8")))


def string_to_upper(args: Sequence[Value]) -> Value:
    return Value.string(_one_string("to_upper", args).upper())


def string_to_lower(args: Sequence[Value]) -> Value:
    return Value.string(_one_string("to_lower", args).lower())


def string_trim(args: Sequence[Value]) -> Value:
    return Value.string(_one_string("trim", args).strip())


def string_split(args: Sequence[Value]) -> Value:
    """Split on a delimiter; an empty delimiter splits between every character."""
    text, delimiter = _two_strings("split", args)
    parts = ["", *text, ""] if delimiter == "" else text.split(delimiter)
    return Value.array(Value.string(part) for part in parts)


def string_join(args: Sequence[Value]) -> Value:
    _check_count("join", args, 2)
    items, delimiter = args
    if items.kind is not ValueKind.ARRAY or delimiter.kind is not ValueKind.STRING:
        raise NativeError("join() first argument must be an array, second must be a string")
    if any(item.kind is not ValueKind.STRING for item in items.payload):
        raise NativeError("join() array must contain only strings")
    return Value.string(delimiter.payload.join(item.payload for item in items.payload))


def string_contains(args: Sequence[Value]) -> Value:
    haystack, needle = _two_strings("contains", args)
    return Value.boolean(needle in haystack)


def string_starts_with(args: Sequence[Value]) -> Value:
    text, prefix = _two_strings("starts_with", args)
    return Value.boolean(text.startswith(prefix))


def string_ends_with(args: Sequence[Value]) -> Value:
    text, suffix = _two_strings("ends_with", args)
    return Value.boolean(text.endswith(suffix))