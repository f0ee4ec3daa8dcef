"""Runtime values handled by the virtual machine."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class ValueKind(Enum):
    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    CHAR = "Char"
    BOOL = "Bool"
    ARRAY = "Array"
    STRUCT = "Struct"
    OBJECT_REF = "ObjectRef"
    NULL = "Null"


def _format_float(x: float) -> str:
    """Shortest round-tripping decimal form, never in exponent notation."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    text = format(Decimal(repr(x)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class Value:
    """A tagged runtime value."""

    kind: ValueKind
    payload: object = None

    @classmethod
    def integer(cls, n: int) -> Value:
        return cls(ValueKind.INT, int(n))

    @classmethod
    def floating(cls, x: float) -> Value:
        return cls(ValueKind.FLOAT, float(x))

    @classmethod
    def string(cls, s: str) -> Value:
        return cls(ValueKind.STRING, str(s))

    @classmethod
    def char(cls, c: str) -> Value:
        if len(c) != 1:
            raise ValueError(f"a char value holds exactly one character, got {c!r}")
        return cls(ValueKind.CHAR, c)

    @classmethod
    def boolean(cls, b: bool) -> Value:
        return cls(ValueKind.BOOL, bool(b))

    @classmethod
    def array(cls, items: Iterable[Value]) -> Value:
        return cls(ValueKind.ARRAY, tuple(items))

    @classmethod
    def struct(cls, fields: Mapping[str, Value]) -> Value:
        return cls(ValueKind.STRUCT, dict(fields))

    @classmethod
    def object_ref(cls, object_id: int) -> Value:
        return cls(ValueKind.OBJECT_REF, int(object_id))

    @classmethod
    def null(cls) -> Value:
        return cls(ValueKind.NULL, None)

    def is_truthy(self) -> bool:
        kind = self.kind
        if kind in (ValueKind.STRUCT, ValueKind.OBJECT_REF):
            return True
        if kind is ValueKind.NULL:
            return False
        if kind is ValueKind.CHAR:
            return self.payload != "\0"
        return bool(self.payload)

    def to_int(self) -> int:
        """Convert to an integer the way a numeric cast does."""
        kind = self.kind
        if kind is ValueKind.INT:
            return self.payload
        if kind is ValueKind.FLOAT:
            x = self.payload
            if math.isnan(x):
                return 0
            if x >= _I64_MAX:
                return _I64_MAX
            if x <= _I64_MIN:
                return _I64_MIN
            return math.trunc(x)
        if kind is ValueKind.BOOL:
            return 1 if self.payload else 0
        if kind is ValueKind.CHAR:
            return ord(self.payload)
        raise TypeError(f"Cannot convert {self!r} to int")

    def to_float(self) -> float:
        kind = self.kind
        if kind is ValueKind.INT:
            return float(self.payload)
        if kind is ValueKind.FLOAT:
            return self.payload
        if kind is ValueKind.BOOL:
            return 1.0 if self.payload else 0.0
        raise TypeError(f"Cannot convert {self!r} to float")

    def to_bool(self) -> bool:
        return self.is_truthy()

    def __str__(self) -> str:
        kind = self.kind
        if kind is ValueKind.FLOAT:
            return _format_float(self.payload)
        if kind is ValueKind.BOOL:
            return "true" if self.payload else "false"
        if kind is ValueKind.ARRAY:
            return "[" + ", ".join(str(v) for v in self.payload) + "]"
        if kind is ValueKind.STRUCT:
            return "{" + ", ".join(f"{k}: {v}" for k, v in self.payload.items()) + "}"
        if kind is ValueKind.OBJECT_REF:
            return f"ObjectRef({self.payload})"
        if kind is ValueKind.NULL:
            return "null"
        return str(self.payload)

    def __repr__(self) -> str:
        kind = self.kind
        if kind is ValueKind.NULL:
            return "Null"
        if kind is ValueKind.ARRAY:
            return "Array([" + ", ".join(repr(v) for v in self.payload) + "])"
        if kind is ValueKind.STRUCT:
            inner = ", ".join(f"{k!r}: {v!r}" for k, v in self.payload.items())
            return "Struct({" + inner + "})"
        return f"{kind.value}({self.payload!r})"