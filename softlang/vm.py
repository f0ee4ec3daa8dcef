"""A stack-based virtual machine that runs bytecode instructions."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from .call_frame import CallFrame
from .native import NativeError, NativeRegistry
from .value import Value, ValueKind

_MAIN_LOCALS = 10
_NUMERIC = (ValueKind.INT, ValueKind.FLOAT)


class VMError(Exception):
    """A runtime error raised while executing bytecode."""


class Opcode(Enum):
    LOAD_INT = "LoadInt"
    LOAD_FLOAT = "LoadFloat"
    LOAD_STRING = "LoadString"
    LOAD_CHAR = "LoadChar"
    LOAD_BOOL = "LoadBool"
    LOAD_NULL = "LoadNull"
    LOAD_LOCAL = "LoadLocal"
    STORE_LOCAL = "StoreLocal"
    LOAD_GLOBAL = "LoadGlobal"
    STORE_GLOBAL = "StoreGlobal"
    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    MOD = "Mod"
    NEG = "Neg"
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    LESS = "Less"
    GREATER = "Greater"
    LESS_EQUAL = "LessEqual"
    GREATER_EQUAL = "GreaterEqual"
    LOGICAL_AND = "LogicalAnd"
    LOGICAL_OR = "LogicalOr"
    LOGICAL_NOT = "LogicalNot"
    JUMP = "Jump"
    JUMP_IF_FALSE = "JumpIfFalse"
    JUMP_IF_TRUE = "JumpIfTrue"
    PRINT = "Print"
    CALL = "Call"
    CALL_MAIN = "CallMain"
    RETURN_MAIN = "ReturnMain"
    POP = "Pop"
    DUP = "Dup"
    HALT = "Halt"

    def __str__(self) -> str:
        return self.value


_OPERAND_COUNTS = {
    Opcode.LOAD_INT: 1,
    Opcode.LOAD_FLOAT: 1,
    Opcode.LOAD_STRING: 1,
    Opcode.LOAD_CHAR: 1,
    Opcode.LOAD_BOOL: 1,
    Opcode.LOAD_LOCAL: 1,
    Opcode.STORE_LOCAL: 1,
    Opcode.LOAD_GLOBAL: 1,
    Opcode.STORE_GLOBAL: 1,
    Opcode.JUMP: 1,
    Opcode.JUMP_IF_FALSE: 1,
    Opcode.JUMP_IF_TRUE: 1,
    Opcode.CALL: 2,
}


@dataclass(frozen=True)
class Instruction:
    """One bytecode instruction: an opcode with its operands."""

    opcode: Opcode
    operands: tuple = ()

    def __post_init__(self) -> None:
        expected = _OPERAND_COUNTS.get(self.opcode, 0)
        if len(self.operands) != expected:
            raise ValueError(
                f"{self.opcode} takes {expected} operand(s), got {len(self.operands)}"
            )

    @classmethod
    def of(cls, opcode: Opcode, *operands: object) -> Instruction:
        return cls(opcode, tuple(operands))

    def __str__(self) -> str:
        if not self.operands:
            return str(self.opcode)
        return f"{self.opcode}({', '.join(repr(op) for op in self.operands)})"


def _wrap_i64(n: int) -> int:
    return (n + 2**63) % 2**64 - 2**63


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


class VirtualMachine:
    """Executes a list of instructions against a value stack."""

    def __init__(self, program: Iterable[Instruction]) -> None:
        self.program: list[Instruction] = list(program)
        self.stack: list[Value] = []
        self.call_stack: list[CallFrame] = []
        self.globals: dict[str, Value] = {}
        self.object_heap: list[dict[str, Value]] = []
        self.this_stack: list[int | None] = [None]
        self.function_addresses: dict[str, int] = {}
        self.ip = 0
        self.halted = False
        self.native_registry = NativeRegistry()
        self._handlers: dict[Opcode, Callable[..., bool | None]] = {
            Opcode.LOAD_INT: lambda v: self._push(Value.integer(v)),
            Opcode.LOAD_FLOAT: lambda v: self._push(Value.floating(v)),
            Opcode.LOAD_STRING: lambda v: self._push(Value.string(v)),
            Opcode.LOAD_CHAR: lambda v: self._push(Value.char(v)),
            Opcode.LOAD_BOOL: lambda v: self._push(Value.boolean(v)),
            Opcode.LOAD_NULL: lambda: self._push(Value.null()),
            Opcode.LOAD_LOCAL: self._load_local,
            Opcode.STORE_LOCAL: self._store_local,
            Opcode.LOAD_GLOBAL: self._load_global,
            Opcode.STORE_GLOBAL: self._store_global,
            Opcode.ADD: self._add,
            Opcode.SUB: lambda: self._arith("subtraction", lambda a, b: a - b),
            Opcode.MUL: lambda: self._arith("multiplication", lambda a, b: a * b),
            Opcode.DIV: self._div,
            Opcode.MOD: self._mod,
            Opcode.NEG: self._neg,
            Opcode.EQUAL: lambda: self._equality(lambda a, b: a == b),
            Opcode.NOT_EQUAL: lambda: self._equality(lambda a, b: a != b),
            Opcode.LESS: lambda: self._compare(lambda a, b: a < b),
            Opcode.GREATER: lambda: self._compare(lambda a, b: a > b),
            Opcode.LESS_EQUAL: lambda: self._compare(lambda a, b: a <= b),
            Opcode.GREATER_EQUAL: lambda: self._compare(lambda a, b: a >= b),
            Opcode.LOGICAL_AND: lambda: self._logical(lambda a, b: a and b),
            Opcode.LOGICAL_OR: lambda: self._logical(lambda a, b: a or b),
            Opcode.LOGICAL_NOT: lambda: self._push(Value.boolean(not self._pop().is_truthy())),
            Opcode.JUMP: self._jump,
            Opcode.JUMP_IF_FALSE: lambda addr: self._jump_if(addr, False),
            Opcode.JUMP_IF_TRUE: lambda addr: self._jump_if(addr, True),
            Opcode.PRINT: self._print,
            Opcode.CALL: self._call_native,
            Opcode.CALL_MAIN: self._call_main,
            Opcode.RETURN_MAIN: self._halt,
            Opcode.POP: lambda: self._pop() and None,
            Opcode.DUP: self._dup,
            Opcode.HALT: self._halt,
        }

    def with_native_registry(self, registry: NativeRegistry) -> VirtualMachine:
        """Use ``registry`` for native calls; returns the machine itself."""
        self.native_registry = registry
        return self

    def execute(self) -> None:
        """Run from the current instruction until halted or past the end."""
        self.call_stack.append(CallFrame(function_name="main", return_address=0))
        while not self.halted and 0 <= self.ip < len(self.program):
            self._step()

    def _step(self) -> None:
        instruction = self.program[self.ip]
        handler = self._handlers.get(instruction.opcode)
        if handler is None:
            raise VMError(f"Unimplemented instruction: {instruction}")
        if not handler(*instruction.operands):
            self.ip += 1

    # -- objects --------------------------------------------------------------

    def allocate_object(self, fields: Mapping[str, Value]) -> Value:
        """Store a new object on the heap and return a reference to it."""
        self.object_heap.append(dict(fields))
        return Value.object_ref(len(self.object_heap) - 1)

    def get_object(self, object_id: int) -> dict[str, Value]:
        if not 0 <= object_id < len(self.object_heap):
            raise VMError(f"Object with ID {object_id} not found")
        return self.object_heap[object_id]

    def get_object_field(self, object_id: int, field_name: str) -> Value:
        fields = self.get_object(object_id)
        try:
            return fields[field_name]
        except KeyError:
            raise VMError(f"Field '{field_name}' not found in object") from None

    def set_object_field(self, object_id: int, field_name: str, value: Value) -> None:
        self.get_object(object_id)[field_name] = value

    def set_function_addresses(self, addresses: Mapping[str, int]) -> None:
        self.function_addresses = dict(addresses)

    # -- stack ----------------------------------------------------------------

    def _push(self, value: Value) -> None:
        self.stack.append(value)

    def _pop(self) -> Value:
        if not self.stack:
            raise VMError("Stack underflow")
        return self.stack.pop()

    def _pop_pair(self) -> tuple[Value, Value]:
        b = self._pop()
        a = self._pop()
        return a, b

    def _dup(self) -> None:
        if not self.stack:
            raise VMError("Stack underflow for dup")
        self.stack.append(self.stack[-1])

    # -- variables ------------------------------------------------------------

    def _load_local(self, slot: int) -> None:
        if not self.call_stack:
            raise VMError("No call frame for local variable access")
        frame = self.call_stack[-1]
        if slot >= len(frame.locals):
            raise VMError(f"Local variable slot {slot} out of bounds")
        self._push(frame.locals[slot])

    def _store_local(self, slot: int) -> None:
        value = self._pop()
        if not self.call_stack:
            raise VMError("No call frame for local variable storage")
        frame = self.call_stack[-1]
        if slot >= len(frame.locals):
            frame.locals.extend(Value.null() for _ in range(slot + 1 - len(frame.locals)))
        frame.locals[slot] = value

    def _load_global(self, name: str) -> None:
        try:
            self._push(self.globals[name])
        except KeyError:
            raise VMError(f"Undefined global variable: {name}") from None

    def _store_global(self, name: str) -> None:
        self.globals[name] = self._pop()

    # -- arithmetic -----------------------------------------------------------

    def _arith(self, what: str, op: Callable, a: Value | None = None, b: Value | None = None) -> None:
        if a is None or b is None:
            a, b = self._pop_pair()
        if a.kind is ValueKind.INT and b.kind is ValueKind.INT:
            self._push(Value.integer(_wrap_i64(op(a.payload, b.payload))))
        elif a.kind in _NUMERIC and b.kind in _NUMERIC:
            self._push(Value.floating(op(a.to_float(), b.to_float())))
        else:
            raise VMError(f"Invalid types for {what}")

    def _add(self) -> None:
        a, b = self._pop_pair()
        if a.kind is ValueKind.STRING and b.kind is ValueKind.STRING:
            self._push(Value.string(a.payload + b.payload))
        else:
            self._arith("addition", lambda x, y: x + y, a, b)

    def _div(self) -> None:
        a, b = self._pop_pair()
        if a.kind in _NUMERIC and b.kind in _NUMERIC and b.payload == 0:
            raise VMError("Division by zero")
        if a.kind is ValueKind.INT and b.kind is ValueKind.INT:
            self._push(Value.integer(_wrap_i64(_trunc_div(a.payload, b.payload))))
        else:
            self._arith("division", lambda x, y: x / y, a, b)

    def _mod(self) -> None:
        a, b = self._pop_pair()
        if a.kind is not ValueKind.INT or b.kind is not ValueKind.INT:
            raise VMError("Invalid types for modulo")
        if b.payload == 0:
            raise VMError("Modulo by zero")
        rem = a.payload - _trunc_div(a.payload, b.payload) * b.payload
        self._push(Value.integer(rem))

    def _neg(self) -> None:
        a = self._pop()
        if a.kind is ValueKind.INT:
            self._push(Value.integer(_wrap_i64(-a.payload)))
        elif a.kind is ValueKind.FLOAT:
            self._push(Value.floating(-a.payload))
        else:
            raise VMError("Invalid type for negation")

    def _equality(self, op: Callable[[Value, Value], bool]) -> None:
        a, b = self._pop_pair()
        self._push(Value.boolean(op(a, b)))

    def _compare(self, op: Callable) -> None:
        a, b = self._pop_pair()
        if a.kind is ValueKind.INT and b.kind is ValueKind.INT:
            self._push(Value.boolean(op(a.payload, b.payload)))
        elif a.kind in _NUMERIC and b.kind in _NUMERIC:
            self._push(Value.boolean(op(a.to_float(), b.to_float())))
        else:
            raise VMError("Invalid types for comparison")

    def _logical(self, op: Callable[[bool, bool], bool]) -> None:
        a, b = self._pop_pair()
        self._push(Value.boolean(op(a.is_truthy(), b.is_truthy())))

    # -- control flow ---------------------------------------------------------

    def _jump(self, addr: int) -> bool:
        self.ip = addr
        return True

    def _jump_if(self, addr: int, when: bool) -> bool:
        if self._pop().is_truthy() == when:
            self.ip = addr
            return True
        return False

    def _halt(self) -> bool:
        self.halted = True
        return True

    def _call_main(self) -> bool:
        main_address = self.function_addresses.get("main")
        if main_address is None:
            raise VMError("Main function not found")
        self.call_stack.append(CallFrame.create(self.ip + 1, _MAIN_LOCALS, "main"))
        self.ip = main_address
        return True

    # -- natives --------------------------------------------------------------

    def _print(self) -> None:
        value = self._pop()
        try:
            self.native_registry.call("print", [value])
        except NativeError as err:
            raise VMError(f"Native function error: {err}") from err

    def _call_native(self, name: str, arg_count: int) -> None:
        args = [self._pop() for _ in range(arg_count)]
        args.reverse()
        try:
            result = self.native_registry.call(name, args)
        except NativeError as err:
            raise VMError(f"Function not found: {name}") from err
        if result != Value.null():
            self._push(result)