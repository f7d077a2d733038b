"""Lexer."""

from skelconf.lexer.lexer import RULES, Lexer, LexRule, dump_tokens, lex, token_lexeme
from skelconf.lexer.tokens import Token, TokenKind, Trivia, TriviaKind

__all__ = [
    "RULES",
    "LexRule",
    "Lexer",
    "Token",
    "TokenKind",
    "Trivia",
    "TriviaKind",
    "dump_tokens",
    "lex",
    "token_lexeme",
]
