"""Parser for a small bracketed `key = value` configuration language."""

from skelconf.ast import Data
from skelconf.diagnostics import Diagnostic, ParseError, ParseFailure
from skelconf.options import DuplicateKeyPolicy, ParseMode, ParserOptions
from skelconf.parser import loads, parse, parse_result
from skelconf.pipeline import ParseResult, StageResult

__all__ = [
    "Data",
    "Diagnostic",
    "DuplicateKeyPolicy",
    "ParseError",
    "ParseFailure",
    "ParseMode",
    "ParseResult",
    "ParserOptions",
    "StageResult",
    "loads",
    "parse",
    "parse_result",
]
