"""Activation records for function calls in the virtual machine."""

from __future__ import annotations

from dataclasses import dataclass, field

from .value import Value


@dataclass
class CallFrame:
    """A function's local slots and where to return to."""

    function_name: str = ""
    locals: list[Value] = field(default_factory=list)
    return_address: int = 0

    @classmethod
    def create(cls, return_address: int, locals_count: int, function_name: str = "") -> CallFrame:
        """A frame with ``locals_count`` slots, all null."""
        return cls(
            function_name=function_name,
            locals=[Value.null() for _ in range(locals_count)],
            return_address=return_address,
        )