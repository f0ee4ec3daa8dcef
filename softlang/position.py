"""Source positions and a tracker that follows them while scanning."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Position:
    """A 1-based line and column in the source text."""

    line: int
    column: int

    @classmethod
    def start(cls) -> Position:
        """The position of the first character."""
        return cls(1, 1)

    def advance_column(self) -> None:
        self.column += 1

    def next_line(self) -> None:
        self.line += 1
        self.column = 1

    def add_columns(self, count: int) -> None:
        self.column += count

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class PositionTracker:
    """Follows line and column as characters are consumed, expanding tabs."""

    def __init__(self, tab_width: int = 4) -> None:
        self._position = Position.start()
        self.tab_width = tab_width

    @property
    def position(self) -> Position:
        """A copy of the current position."""
        return replace(self._position)

    def advance(self, ch: str) -> None:
        """Move past one character."""
        if ch == "\n":
            self._position.next_line()
        elif ch == "\t":
            width = self.tab_width
            self._position.column = ((self._position.column - 1) // width + 1) * width + 1
        else:
            self._position.advance_column()

    def advance_by(self, text: str) -> None:
        """Move past every character of ``text``."""
        for ch in text:
            self.advance(ch)