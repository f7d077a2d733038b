"""High-level parse entrypoints for configuration source text."""

from __future__ import annotations

import logging

from skelconf.ast import Data
from skelconf.options import ParseMode, ParserOptions, resolve_options
from skelconf.pipeline import ParseResult, StageResult

logger = logging.getLogger(__name__)


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParseResult:
    """Lazy carrier over `text`; stages run on first access and are cached."""
    resolved_options = resolve_options(options=options, mode=mode)
    return ParseResult(source_text=text, options=resolved_options)


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> StageResult[Data]:
    """Run the whole pipeline; the result holds plain data or the first error."""
    result = parse_result(text, options=options, mode=mode)
    logger.debug("parsing %d characters in %s mode", len(text), result.options.mode)
    return result.data()


def loads(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Data:
    """Parse `text` into plain data, raising `ParseFailure` on the first error."""
    return parse(text, options=options, mode=mode).unwrap()
