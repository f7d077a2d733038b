"""Fatal parse errors.

Each error kind is an immutable value. A failing stage returns exactly one
of them inside its `StageResult`; `ParseFailure` carries one through an
exception where a caller asked for a plain value.
"""

from __future__ import annotations

from dataclasses import dataclass

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
)
from skelconf.diagnostics.diagnostic import Diagnostic
from skelconf.text import Position, TextSpan


@dataclass(frozen=True, slots=True)
class ParseError:
    """Base of the error kinds below; only its subclasses are instantiated."""

    span: TextSpan

    def __post_init__(self):
        if type(self) is ParseError:
            raise TypeError("ParseError is a base class; raise one of its error kinds")

    @property
    def spec(self) -> DiagnosticSpec:
        raise NotImplementedError

    @property
    def detail(self) -> str:
        return ""

    @property
    def code(self) -> str:
        return self.spec.code

    @property
    def position(self) -> Position:
        return self.span.start

    @property
    def line(self) -> int:
        return self.span.start.line

    @property
    def column(self) -> int:
        return self.span.start.column

    @property
    def message(self) -> str:
        detail = self.detail
        return f"{self.spec.message}: {detail}" if detail else self.spec.message

    def to_diagnostic(self) -> Diagnostic:
        spec = self.spec
        return Diagnostic(
            code=spec.code,
            message=self.message,
            span=self.span,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def __str__(self) -> str:
        return f"{self.position}: {self.message}"


@dataclass(frozen=True, slots=True)
class LexError(ParseError):
    """No lexical rule matched at `span.start`."""

    char: str = ""

    @property
    def spec(self) -> DiagnosticSpec:
        return LEXER_NO_MATCHING_RULE

    @property
    def detail(self) -> str:
        return repr(self.char) if self.char else ""


@dataclass(frozen=True, slots=True)
class UnbalancedBracketsError(ParseError):
    """An opener never closes, or a closer has no opener.

    `bracket` is the offending bracket text and `span` its location.
    """

    bracket: str = ""

    @property
    def spec(self) -> DiagnosticSpec:
        return SKELETON_UNBALANCED_BRACKETS

    @property
    def detail(self) -> str:
        if self.bracket in ("{", "["):
            return f"`{self.bracket}` is never closed"
        return f"`{self.bracket}` has no matching opener"


@dataclass(frozen=True, slots=True)
class MalformedObjectError(ParseError):
    child_count: int = 0

    @property
    def spec(self) -> DiagnosticSpec:
        return AST_MALFORMED_OBJECT

    @property
    def detail(self) -> str:
        return f"{self.child_count} items is not a whole number of `key = value` entries"


@dataclass(frozen=True, slots=True)
class InvalidKeyError(ParseError):
    actual: str = ""

    @property
    def spec(self) -> DiagnosticSpec:
        return AST_INVALID_KEY

    @property
    def detail(self) -> str:
        return f"got {self.actual}"


@dataclass(frozen=True, slots=True)
class InvalidAssignError(ParseError):
    actual: str = ""

    @property
    def spec(self) -> DiagnosticSpec:
        return AST_INVALID_ASSIGN

    @property
    def detail(self) -> str:
        return f"got {self.actual}"


@dataclass(frozen=True, slots=True)
class ExpectedValueError(ParseError):
    actual: str = ""

    @property
    def spec(self) -> DiagnosticSpec:
        return AST_EXPECTED_VALUE

    @property
    def detail(self) -> str:
        return f"got {self.actual}"


@dataclass(frozen=True, slots=True)
class NumberOutOfRangeError(ParseError):
    digits: int = 0

    @property
    def spec(self) -> DiagnosticSpec:
        return AST_NUMBER_OUT_OF_RANGE

    @property
    def detail(self) -> str:
        return f"{self.digits} digits"


@dataclass(frozen=True, slots=True)
class UnknownIdentifierError(ParseError):
    text: str = ""

    @property
    def spec(self) -> DiagnosticSpec:
        return AST_UNKNOWN_IDENTIFIER

    @property
    def detail(self) -> str:
        return repr(self.text)


@dataclass(frozen=True, slots=True)
class DuplicateKeyError(ParseError):
    key: str = ""

    @property
    def spec(self) -> DiagnosticSpec:
        return DATA_DUPLICATE_KEY

    @property
    def detail(self) -> str:
        return repr(self.key)


type AnyParseError = (
    LexError
    | UnbalancedBracketsError
    | MalformedObjectError
    | InvalidKeyError
    | InvalidAssignError
    | ExpectedValueError
    | NumberOutOfRangeError
    | UnknownIdentifierError
    | DuplicateKeyError
)


class ParseFailure(ValueError):
    """Raised when a caller unwraps a failed parse."""

    def __init__(self, error: ParseError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def diagnostic(self) -> Diagnostic:
        return self.error.to_diagnostic()
