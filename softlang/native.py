"""Functions implemented by the host and callable from programs."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .value import Value

VARIADIC = 255
"""Arity of a function that accepts any number of arguments."""


class NativeError(Exception):
    """A native function rejected its arguments or failed."""


@dataclass(frozen=True)
class NativeFunction:
    """A named host function taking a list of values and returning a value."""

    name: str
    arity: int
    function: Callable[[list[Value]], Value]

    def __call__(self, args: Iterable[Value]) -> Value:
        return self.function(list(args))


class NativeRegistry:
    """Native functions by name."""

    def __init__(self) -> None:
        self._functions: dict[str, NativeFunction] = {}

    def register(self, function: NativeFunction) -> None:
        """Add ``function``, replacing any earlier one of the same name."""
        self._functions[function.name] = function

    def get(self, name: str) -> NativeFunction | None:
        return self._functions.get(name)

    def call(self, name: str, args: Iterable[Value]) -> Value:
        """Call the function called ``name``; raise NativeError if there is none."""
        function = self._functions.get(name)
        if function is None:
            raise NativeError(f"Native function '{name}' not found")
        return function(args)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)