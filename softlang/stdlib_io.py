"""Console input and output built-in functions."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .native import NativeError
from .value import Value

_OK = Value.integer(0)


def _render(args: Sequence[Value]) -> str:
    return " ".join(str(arg) for arg in args)


def _write_line(stream: TextIO, args: Sequence[Value], *, flush: bool) -> Value:
    print(_render(args), file=stream, flush=flush)
    return _OK


def io_print(args: Sequence[Value]) -> Value:
    """Write the arguments, separated by spaces, and a newline to stdout."""
    return _write_line(sys.stdout, args, flush=True)


def io_println(args: Sequence[Value]) -> Value:
    """Write the arguments, separated by spaces, and a newline to stdout."""
    return _write_line(sys.stdout, args, flush=False)


def io_eprint(args: Sequence[Value]) -> Value:
    """Write the arguments to stderr without a newline; no arguments writes one."""
    if not args:
        print(file=sys.stderr)
        return _OK
    print(_render(args), end="", file=sys.stderr, flush=True)
    return _OK


def io_eprintln(args: Sequence[Value]) -> Value:
    """Write the arguments, separated by spaces, and a newline to stderr."""
    return _write_line(sys.stderr, args, flush=False)


def io_read_line(args: Sequence[Value]) -> Value:
    """Read one line from stdin without its line ending; empty at end of input."""
    if args:
        raise NativeError(f"read_line() takes no arguments ({len(args)} given)")
    try:
        line = sys.stdin.readline()
    except (OSError, ValueError) as err:
        raise NativeError(f"Failed to read line: {err}") from err
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return Value.string(line)