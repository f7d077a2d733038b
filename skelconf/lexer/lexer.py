"""Lexer.

Rules are tried at the current offset in declaration order and the first
match wins; there is no longest-match arbitration. The number rule sits
before the identifier rule so `123` lexes as a number while `123abc`
lexes as the number `123` followed by the identifier `abc`. Identifiers
and numbers are ASCII only.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Final

from skelconf.diagnostics import LexError, ParseFailure
from skelconf.lexer.tokens import Token, TokenKind, Trivia, TriviaKind
from skelconf.pipeline import StageResult
from skelconf.text import START, Position, TextSpan, slice_span

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LexRule:
    """An anchored pattern and what a match at the current offset produces.

    When the pattern has a `text` group, that group becomes the token text.
    """

    pattern: re.Pattern[str]
    kind: TokenKind | TriviaKind


RULES: Final[tuple[LexRule, ...]] = (
    LexRule(re.compile(r"\s+"), TriviaKind.WHITESPACE),
    LexRule(re.compile(r"#(?P<text>[^\n]*)"), TriviaKind.COMMENT),
    LexRule(re.compile(r"[0-9]+"), TokenKind.NUMBER),
    LexRule(re.compile(r"\w+", re.ASCII), TokenKind.IDENTIFIER),
    LexRule(re.compile(r'"(?P<text>(?:\\.|[^"\\])*)"', re.DOTALL), TokenKind.STRING),
    LexRule(re.compile(r"\{"), TokenKind.OBJECT_START),
    LexRule(re.compile(r"\}"), TokenKind.OBJECT_END),
    LexRule(re.compile(r"\["), TokenKind.ARRAY_START),
    LexRule(re.compile(r"\]"), TokenKind.ARRAY_END),
    LexRule(re.compile(r"="), TokenKind.ASSIGN),
)


class Lexer:
    """Eager lexer producing tokens with positions and attached comments."""

    def __init__(self, source: str, rules: tuple[LexRule, ...] = RULES) -> None:
        self._source = source
        self._rules = rules
        self._position = START
        self._comments: list[str] = []
        self._tokens: list[Token] = []
        self._trivia: list[Trivia] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> Position:
        return self._position

    @property
    def trivia(self) -> list[Trivia]:
        """Whitespace and comment spans skipped so far, in source order."""
        return self._trivia

    @property
    def is_eof(self) -> bool:
        return self._position.index >= len(self._source)

    def lex(self) -> tuple[Token, ...]:
        """Lex the whole source.

        Raises `ParseFailure` carrying a `LexError` when no rule matches.
        """
        while not self.is_eof:
            self._lex_next()
        return tuple(self._tokens)

    def _lex_next(self) -> None:
        start = self._position
        for rule in self._rules:
            match = rule.pattern.match(self._source, start.index)
            if match is None:
                continue

            end = start.advance(match.group(0))
            span = TextSpan(start, end)
            text = match.group("text") if "text" in rule.pattern.groupindex else match.group(0)
            self._emit(rule.kind, text, span)
            self._position = end
            return

        raise ParseFailure(LexError(TextSpan.empty(start), char=self._source[start.index]))

    def _emit(self, kind: TokenKind | TriviaKind, text: str, span: TextSpan) -> None:
        match kind:
            case TriviaKind.WHITESPACE:
                self._trivia.append(Trivia(kind, span))
            case TriviaKind.COMMENT:
                self._trivia.append(Trivia(kind, span))
                self._comments.append(text.strip())
            case TokenKind():
                # Pending comments belong to this token and no other.
                comment = "\n".join(self._comments)
                self._comments.clear()
                self._tokens.append(Token(kind, text, span, comment))


def lex(text: str) -> StageResult[tuple[Token, ...]]:
    """Tokenize `text`; a failure carries the `LexError`."""
    try:
        tokens = Lexer(text).lex()
    except ParseFailure as failure:
        logger.debug("lexing failed at %s", failure.error.position)
        return StageResult.failure(failure.error)
    logger.debug("lexed %d tokens", len(tokens))
    return StageResult.success(tokens)


def token_lexeme(source: str, token: Token) -> str:
    """Get the full source lexeme of a token (quotes included for strings)."""
    return slice_span(source, token.span)


def dump_tokens(tokens: tuple[Token, ...] | list[Token]) -> str:
    """Render tokens one per line with kind, span, text and comment for debugging."""
    lines: list[str] = []
    for i, tok in enumerate(tokens):
        line = f"{i:03d} {tok.kind.name:<14} {tok.start}-{tok.end} text={tok.text!r}"
        if tok.comment:
            line += f" comment={tok.comment!r}"
        lines.append(line)
    return "\n".join(lines)
