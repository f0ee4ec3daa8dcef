import io

import pytest

from softlang.native import NativeError
from softlang.stdlib_io import io_eprint, io_eprintln, io_print, io_println, io_read_line
from softlang.value import Value


def test_print_joins_with_spaces(capsys):
    result = io_print([Value.integer(1), Value.string("a")])
    assert result == Value.integer(0)
    assert capsys.readouterr().out == "1 a\n"


def test_print_without_arguments_writes_newline(capsys):
    assert io_print([]) == Value.integer(0)
    assert capsys.readouterr().out == "\n"


def test_println_uses_value_formatting(capsys):
    io_println([Value.boolean(True), Value.null()])
    assert capsys.readouterr().out == "true null\n"


def test_eprint_has_no_trailing_newline(capsys):
    io_eprint([Value.string("x"), Value.string("y")])
    captured = capsys.readouterr()
    assert captured.err == "x y"
    assert captured.out == ""


def test_eprint_without_arguments_writes_newline(capsys):
    io_eprint([])
    assert capsys.readouterr().err == "\n"


def test_eprintln_writes_line_to_stderr(capsys):
    assert io_eprintln([Value.string("oops")]) == Value.integer(0)
    assert capsys.readouterr().err == "oops\n"


def test_read_line_strips_line_endings(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("hello\r\nworld\nlast"))
    assert io_read_line([]) == Value.string("hello")
    assert io_read_line([]) == Value.string("world")
    assert io_read_line([]) == Value.string("last")
    assert io_read_line([]) == Value.string("")


def test_read_line_rejects_arguments():
    with pytest.raises(NativeError, match=r"read_line\(\) takes no arguments \(1 given\)"):
        io_read_line([Value.integer(1)])


def test_read_line_reports_failure(monkeypatch):
    closed = io.StringIO("text")
    closed.close()
    monkeypatch.setattr("sys.stdin", closed)
    with pytest.raises(NativeError, match="Failed to read line"):
        io_read_line([])