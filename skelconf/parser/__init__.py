"""Parse entrypoints and their configuration."""

from skelconf.options import DuplicateKeyPolicy, ParseMode, ParserOptions
from skelconf.parser.entrypoints import loads, parse, parse_result

__all__ = [
    "DuplicateKeyPolicy",
    "ParseMode",
    "ParserOptions",
    "loads",
    "parse",
    "parse_result",
]
