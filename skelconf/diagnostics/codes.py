"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_NO_MATCHING_RULE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_NO_MATCHING_RULE",
    message="Unexpected character",
    hint="Strings must be closed with a double quote; numbers are unsigned integers.",
    severity="error",
    category="lexer",
)

SKELETON_UNBALANCED_BRACKETS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SKELETON_UNBALANCED_BRACKETS",
    message="Unbalanced brackets",
    hint="Every `{` needs a matching `}` and every `[` a matching `]`.",
    severity="error",
    category="skeleton",
)

AST_MALFORMED_OBJECT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="AST_MALFORMED_OBJECT",
    message="Malformed object",
    hint="Object bodies are made of `key = value` entries.",
    severity="error",
    category="ast",
)

AST_INVALID_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="AST_INVALID_KEY",
    message="Invalid key",
    hint="Keys are identifiers, quoted strings or numbers.",
    severity="error",
    category="ast",
)

AST_INVALID_ASSIGN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="AST_INVALID_ASSIGN",
    message="Expected `=`",
    severity="error",
    category="ast",
)

AST_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="AST_EXPECTED_VALUE",
    message="Expected a value",
    severity="error",
    category="ast",
)

AST_NUMBER_OUT_OF_RANGE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="AST_NUMBER_OUT_OF_RANGE",
    message="Number too long",
    hint="Quote very long digit runs as strings.",
    severity="error",
    category="ast",
)

AST_UNKNOWN_IDENTIFIER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="AST_UNKNOWN_IDENTIFIER",
    message="Unknown identifier",
    hint='Bare words are limited to `true`, `false` and `null`; quote other text as "...".',
    severity="error",
    category="ast",
)

DATA_DUPLICATE_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DATA_DUPLICATE_KEY",
    message="Duplicate key",
    hint="Remove the repeated entry or use the last-wins duplicate key policy.",
    severity="error",
    category="data",
)
