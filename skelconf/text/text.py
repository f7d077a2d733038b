from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A point in source text.

    `index` is a character offset into the source string (python string
    indices, so slicing works directly). `line` and `column` are 1-based.
    """

    index: int
    line: int = 1
    column: int = 1

    def __post_init__(self):
        if self.index < 0:
            raise ValueError("Position index cannot be negative")
        if self.line < 1 or self.column < 1:
            raise ValueError("Position line/column are 1-based")

    def advance(self, text: str) -> "Position":
        """Return the position reached after consuming `text` from here.

        Each line feed increments the line and resets the column.
        """
        line = self.line
        column = self.column
        for ch in text:
            if ch == "\n":
                line += 1
                column = 1
            else:
                column += 1
        return Position(self.index + len(text), line, column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


START: Final[Position] = Position(0, 1, 1)
"""Position of the first character of any source."""


@dataclass(frozen=True, slots=True, order=True)
class TextSpan:
    """
    Half-open span [start, end) in source text.

    Invariant:
    - start.index <= end.index
    """

    start: Position
    end: Position

    def __post_init__(self):
        if self.start.index > self.end.index:
            raise ValueError("TextSpan invariant violated: start > end")

    @staticmethod
    def empty(at: Position) -> "TextSpan":
        """Create an empty TextSpan at the given position."""
        return TextSpan(at, at)

    def len(self) -> int:
        return self.end.index - self.start.index

    def is_empty(self) -> bool:
        return self.start.index == self.end.index

    def as_tuple(self) -> tuple[int, int]:
        """Get the span as a tuple of (start, end) offsets."""
        return (self.start.index, self.end.index)

    def contains_span(self, other: "TextSpan") -> bool:
        return self.start.index <= other.start.index and other.end.index <= self.end.index

    def cover(self, other: "TextSpan") -> "TextSpan":
        """Get the minimal span that covers both this span and another span."""
        start = self.start if self.start.index <= other.start.index else other.start
        end = self.end if self.end.index >= other.end.index else other.end
        return TextSpan(start, end)

    def __repr__(self) -> str:
        return f"TextSpan({self.start.index}, {self.end.index})"


def slice_span(source: str, span: TextSpan) -> str:
    """Get the substring of the source text covered by the given TextSpan."""
    return source[span.start.index : span.end.index]
