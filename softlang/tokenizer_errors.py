"""Errors raised while tokenizing source text."""

from __future__ import annotations

from .position import Position


class TokenizerError(Exception):
    """Base class of every tokenizer error; carries the source position."""

    def __init__(self, message: str, position: Position) -> None:
        super().__init__(message)
        self.position = position


class UnexpectedCharacter(TokenizerError):
    def __init__(self, ch: str, position: Position) -> None:
        super().__init__(f"Unexpected character '{ch}' at {position}", position)
        self.ch = ch


class UnterminatedString(TokenizerError):
    def __init__(self, position: Position) -> None:
        super().__init__(f"Unterminated string literal at {position}", position)


class UnterminatedCharLiteral(TokenizerError):
    def __init__(self, position: Position) -> None:
        super().__init__(f"Unterminated character literal at {position}", position)


class InvalidCharLiteral(TokenizerError):
    def __init__(self, content: str, position: Position) -> None:
        super().__init__(f"Invalid character literal '{content}' at {position}", position)
        self.content = content


class InvalidNumberFormat(TokenizerError):
    def __init__(self, content: str, position: Position) -> None:
        super().__init__(f"Invalid number format '{content}' at {position}", position)
        self.content = content


class InvalidEscapeSequence(TokenizerError):
    def __init__(self, sequence: str, position: Position) -> None:
        super().__init__(f"Invalid escape sequence '{sequence}' at {position}", position)
        self.sequence = sequence