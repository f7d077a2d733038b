"""Diagnostics core types."""

from dataclasses import dataclass

from skelconf.diagnostics.codes import Severity
from skelconf.text import TextSpan


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by any pipeline stage."""

    code: str
    message: str
    span: TextSpan
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def __str__(self) -> str:
        return f"{self.span.start}: {self.message}"
