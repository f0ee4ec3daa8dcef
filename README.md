# softlang

Runtime pieces for the Soft programming language: tagged runtime values, a
standard library of native functions, and a small stack-based bytecode
virtual machine. It also provides source positions and the error types used
when scanning Soft source text.

The package has no third-party dependencies and needs Python 3.10 or later.

## What it does not do

softlang does not read Soft source text. It has no tokenizer, no parser and
no compiler from source to bytecode, and it installs no command. Programs are
handed to the virtual machine as lists of `Instruction` objects built in
Python.

## Values

`softlang.value.Value` is an immutable tagged value; its `kind` is a
`softlang.value.ValueKind` (`INT`, `FLOAT`, `STRING`, `CHAR`, `BOOL`,
`ARRAY`, `STRUCT`, `OBJECT_REF`, `NULL`).

```python
from softlang.value import Value

Value.integer(3)
Value.floating(2.5)
Value.string("hi")
Value.char("c")
Value.boolean(True)
Value.array([Value.integer(1), Value.integer(2)])
Value.struct({"x": Value.integer(1)})
Value.object_ref(0)
Value.null()

str(Value.array([Value.integer(1), Value.floating(2.0)]))  # "[1, 2]"
str(Value.boolean(False))                                   # "false"
Value.string("").is_truthy()                                # False
Value.floating(-2.7).to_int()                               # -2
```

`to_int` accepts ints, floats (truncated, saturating at the 64-bit range,
NaN gives 0), bools and chars; `to_float` accepts ints, floats and bools.
Anything else raises `TypeError`. `to_bool` is the same as `is_truthy`.

## Native functions

`softlang.native.NativeFunction` pairs a name and an arity with a Python
callable taking a list of values; `softlang.native.NativeRegistry` holds
them by name. `registry.call(name, args)` raises
`softlang.native.NativeError` when no function has that name, and the
functions themselves raise it for bad arguments, with messages such as
`abs() takes exactly 1 argument (2 given)`.

`softlang.stdlib.default_registry()` returns a registry holding the whole
standard library; `softlang.stdlib.register_stdlib(registry)` adds it to an
existing one:

| Module | Functions |
| --- | --- |
| `softlang.stdlib_math` | `abs`, `max`, `min`, `sqrt`, `pow`, `floor`, `ceil`, `round` |
| `softlang.stdlib_string` | `len`, `to_upper`, `to_lower`, `trim`, `split`, `join`, `contains`, `starts_with`, `ends_with` |
| `softlang.stdlib_io` | `print`, `println`, `eprint`, `eprintln`, `read_line` |
| `softlang.stdlib_time` | `now`, `now_millis`, `now_micros`, `sleep`, `sleep_millis`, `timer_start`, `timer_elapsed` |

```python
from softlang.stdlib import default_registry
from softlang.value import Value

registry = default_registry()
registry.call("max", [Value.integer(3), Value.floating(4.5)])  # Float(4.5)
registry.call("split", [Value.string("a,b"), Value.string(",")])
```

Some behaviours worth knowing: `pow` and `sqrt` always return floats;
`floor`, `ceil` and `round` return ints (`round` rounds halves away from
zero); `len` counts UTF-8 bytes; the output functions return `Int(0)`;
`read_line` strips the trailing line ending. Each registry gets its own
`softlang.stdlib_time.Timer` behind `timer_start` and `timer_elapsed`.

## The virtual machine

`softlang.vm.VirtualMachine` runs a list of `softlang.vm.Instruction`
objects, each an `softlang.vm.Opcode` with its operands, over a value
stack. `Instruction.of(opcode, *operands)` builds one and checks the
operand count.

```python
from softlang.stdlib import default_registry
from softlang.vm import Instruction, Opcode, VirtualMachine

program = [
    Instruction.of(Opcode.LOAD_INT, 2),
    Instruction.of(Opcode.LOAD_INT, 3),
    Instruction.of(Opcode.MUL),
    Instruction.of(Opcode.STORE_GLOBAL, "x"),
    Instruction.of(Opcode.LOAD_GLOBAL, "x"),
    Instruction.of(Opcode.PRINT),          # writes "6"
    Instruction.of(Opcode.HALT),
]

vm = VirtualMachine(program).with_native_registry(default_registry())
vm.execute()
vm.globals["x"]   # Int(6)
```

Supported opcodes:

- literals: `LOAD_INT`, `LOAD_FLOAT`, `LOAD_STRING`, `LOAD_CHAR`,
  `LOAD_BOOL`, `LOAD_NULL`
- variables: `LOAD_LOCAL`, `STORE_LOCAL` (slots of the current call frame,
  grown on store), `LOAD_GLOBAL`, `STORE_GLOBAL`
- arithmetic: `ADD` (also joins strings), `SUB`, `MUL`, `DIV`, `MOD`, `NEG`;
  integer results wrap at 64 bits, integer division truncates toward zero,
  mixed int/float operands give floats
- comparison and logic: `EQUAL`, `NOT_EQUAL`, `LESS`, `GREATER`,
  `LESS_EQUAL`, `GREATER_EQUAL`, `LOGICAL_AND`, `LOGICAL_OR`, `LOGICAL_NOT`
- control: `JUMP`, `JUMP_IF_FALSE`, `JUMP_IF_TRUE`, `HALT`, `CALL_MAIN`
  (jumps to the address set for `"main"` with `set_function_addresses`,
  with a fresh ten-slot frame), `RETURN_MAIN` (halts)
- stack: `POP`, `DUP`
- natives: `PRINT` (calls the registry's `print`) and `CALL` with a name
  and an argument count; a non-null result is pushed

The machine also keeps a heap of objects with named fields:
`allocate_object(fields)` returns an object reference value, and
`get_object`, `get_object_field` and `set_object_field` work on it by id.

Runtime faults — stack underflow, undefined globals, division or modulo by
zero, operands of the wrong type, a missing `main`, a failing native call —
raise `softlang.vm.VMError`.

## Positions and scanning errors

`softlang.position.Position` is a 1-based line and column (`str()` gives
`"line:column"`), and `softlang.position.PositionTracker` advances one
through text, moving tabs to the next multiple of four columns.
`softlang.tokenizer_errors` defines `TokenizerError` and its subclasses
`UnexpectedCharacter`, `UnterminatedString`, `UnterminatedCharLiteral`,
`InvalidCharLiteral`, `InvalidNumberFormat` and `InvalidEscapeSequence`,
each carrying the `position` where the problem was found.

## Call frames

`softlang.call_frame.CallFrame` holds a function name, its local slots and
a return address; `CallFrame.create(return_address, locals_count,
function_name)` makes one with all slots null.