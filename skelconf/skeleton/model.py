"""Grammar-agnostic structural forest."""

from __future__ import annotations

from dataclasses import dataclass

from skelconf.lexer import Token, TokenKind
from skelconf.text import TextSpan


@dataclass(frozen=True, slots=True)
class SkeletonLeaf:
    """Any token that does not open a bracket."""

    token: Token

    @property
    def span(self) -> TextSpan:
        return self.token.span

    @property
    def first_token(self) -> Token:
        return self.token

    @property
    def last_token(self) -> Token:
        return self.token


@dataclass(frozen=True, slots=True)
class SkeletonBranch:
    """An opener, its matching closer and everything nested between them."""

    start: Token
    end: Token
    children: tuple[SkeletonNode, ...]

    @property
    def kind(self) -> TokenKind:
        return self.start.kind

    @property
    def span(self) -> TextSpan:
        return self.start.span.cover(self.end.span)

    @property
    def first_token(self) -> Token:
        return self.start

    @property
    def last_token(self) -> Token:
        return self.end


type SkeletonNode = SkeletonLeaf | SkeletonBranch
