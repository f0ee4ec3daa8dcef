import pytest

from softlang.native import VARIADIC, NativeError, NativeFunction, NativeRegistry
from softlang.stdlib import default_registry, register_stdlib
from softlang.value import Value, ValueKind

ALL_NAMES = [
    "abs", "max", "min", "sqrt", "pow", "floor", "ceil", "round",
    "print", "println", "eprint", "eprintln", "read_line",
    "len", "to_upper", "to_lower", "trim", "split", "join",
    "contains", "starts_with", "ends_with",
    "now", "now_millis", "now_micros", "sleep", "sleep_millis",
    "timer_start", "timer_elapsed",
]


def test_default_registry_holds_every_function():
    registry = default_registry()
    assert sorted(registry) == sorted(ALL_NAMES)
    assert all(name in registry for name in ALL_NAMES)


def test_registered_names_match_function_names():
    registry = default_registry()
    assert all(registry.get(name).name == name for name in ALL_NAMES)


@pytest.mark.parametrize(
    "name, arity",
    [("print", VARIADIC), ("eprintln", VARIADIC), ("read_line", 0), ("abs", 1), ("pow", 2), ("now", 0)],
)
def test_arities(name, arity):
    assert default_registry().get(name).arity == arity


def test_call_through_registry():
    registry = default_registry()
    assert registry.call("abs", [Value.integer(-7)]) == Value.integer(7)
    assert registry.call("to_upper", [Value.string("abc")]) == Value.string("ABC")


def test_call_errors_propagate():
    with pytest.raises(NativeError, match="sqrt\\(\\) of negative number"):
        default_registry().call("sqrt", [Value.integer(-1)])


def test_register_keeps_existing_functions():
    registry = NativeRegistry()
    registry.register(NativeFunction("custom", 0, lambda args: Value.integer(5)))
    register_stdlib(registry)
    assert registry.call("custom", []) == Value.integer(5)
    assert len(registry) == len(ALL_NAMES) + 1


def test_timer_through_registry():
    registry = default_registry()
    with pytest.raises(NativeError, match="timer_start"):
        registry.call("timer_elapsed", [])
    registry.call("timer_start", [])
    elapsed = registry.call("timer_elapsed", [])
    assert elapsed.kind is ValueKind.FLOAT
    assert elapsed.payload >= 0.0


def test_print_through_registry(capsys):
    result = default_registry().call("print", [Value.string("hi")])
    assert result == Value.integer(0)
    assert capsys.readouterr().out == "hi\n"