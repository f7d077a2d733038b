"""Diagnostics and fatal parse errors."""

from skelconf.diagnostics.codes import (
    AST_EXPECTED_VALUE,
    AST_INVALID_ASSIGN,
    AST_INVALID_KEY,
    AST_MALFORMED_OBJECT,
    AST_NUMBER_OUT_OF_RANGE,
    AST_UNKNOWN_IDENTIFIER,
    DATA_DUPLICATE_KEY,
    LEXER_NO_MATCHING_RULE,
    SKELETON_UNBALANCED_BRACKETS,
    DiagnosticSpec,
    Severity,
)
from skelconf.diagnostics.diagnostic import Diagnostic
from skelconf.diagnostics.errors import (
    AnyParseError,
    DuplicateKeyError,
    ExpectedValueError,
    InvalidAssignError,
    InvalidKeyError,
    LexError,
    MalformedObjectError,
    NumberOutOfRangeError,
    ParseError,
    ParseFailure,
    UnbalancedBracketsError,
    UnknownIdentifierError,
)

__all__ = [
    "AST_EXPECTED_VALUE",
    "AST_INVALID_ASSIGN",
    "AST_INVALID_KEY",
    "AST_MALFORMED_OBJECT",
    "AST_NUMBER_OUT_OF_RANGE",
    "AST_UNKNOWN_IDENTIFIER",
    "DATA_DUPLICATE_KEY",
    "LEXER_NO_MATCHING_RULE",
    "SKELETON_UNBALANCED_BRACKETS",
    "AnyParseError",
    "Diagnostic",
    "DiagnosticSpec",
    "DuplicateKeyError",
    "ExpectedValueError",
    "InvalidAssignError",
    "InvalidKeyError",
    "LexError",
    "MalformedObjectError",
    "NumberOutOfRangeError",
    "ParseError",
    "ParseFailure",
    "Severity",
    "UnbalancedBracketsError",
    "UnknownIdentifierError",
]
