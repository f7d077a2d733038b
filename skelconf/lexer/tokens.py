"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from skelconf.text import Position, TextSpan


class TokenKind(IntEnum):
    # -------------------------
    # Literals
    # -------------------------
    IDENTIFIER = 20
    NUMBER = 21  # unsigned integer digits
    STRING = 22  # quoted string, text excludes the quotes

    # -------------------------
    # Structure
    # -------------------------
    OBJECT_START = 60  # {
    OBJECT_END = 61  # }
    ARRAY_START = 62  # [
    ARRAY_END = 63  # ]

    ASSIGN = 30  # =

    @property
    def is_opener(self) -> bool:
        return self in (TokenKind.OBJECT_START, TokenKind.ARRAY_START)

    @property
    def is_closer(self) -> bool:
        return self in (TokenKind.OBJECT_END, TokenKind.ARRAY_END)

    @property
    def closer(self) -> "TokenKind":
        """The closing kind matching this opener."""
        match self:
            case TokenKind.OBJECT_START:
                return TokenKind.OBJECT_END
            case TokenKind.ARRAY_START:
                return TokenKind.ARRAY_END
            case _:
                raise ValueError(f"Not an opening token kind: {self!r}")

    @property
    def label(self) -> str:
        """Human-readable name used in error messages, e.g. `ObjectStart`."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class TriviaKind(IntEnum):
    """Source text skipped by the lexer (never becomes a token)."""

    WHITESPACE = 1
    COMMENT = 2


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `text` is the token's value text: for strings the interior between the
    quotes, verbatim. `span` always covers the full source lexeme, quotes
    included. `comment` holds the line comments directly preceding the
    token, joined by newlines.
    """

    kind: TokenKind
    text: str
    span: TextSpan
    comment: str = ""

    @property
    def start(self) -> Position:
        return self.span.start

    @property
    def end(self) -> Position:
        return self.span.end


@dataclass(frozen=True, slots=True)
class Trivia:
    """Range of skipped whitespace or comment text recorded by the lexer."""

    kind: TriviaKind
    span: TextSpan
