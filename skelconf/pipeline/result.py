"""Fallible stage results and the parse-once/consume-many carrier."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, cast

from skelconf.diagnostics import Diagnostic, ParseError, ParseFailure
from skelconf.options import ParserOptions

if TYPE_CHECKING:
    from skelconf.ast import AstObject, Data
    from skelconf.lexer import Token
    from skelconf.skeleton import SkeletonNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageResult[T]:
    """Outcome of one pipeline stage: a value, or the first fatal error.

    Exactly one of `value` / `error` is meaningful; `ok` tells which.
    """

    value: T | None = None
    error: ParseError | None = None

    @staticmethod
    def success[V](value: V) -> StageResult[V]:
        return StageResult(value=value)

    @staticmethod
    def failure[V](error: ParseError) -> StageResult[V]:
        return StageResult(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def diagnostics(self) -> list[Diagnostic]:
        if self.error is None:
            return []
        return [self.error.to_diagnostic()]

    def unwrap(self) -> T:
        if self.error is not None:
            raise ParseFailure(self.error)
        return cast(T, self.value)

    def then[U](self, stage: Callable[[T], StageResult[U]]) -> StageResult[U]:
        """Feed a successful value into the next stage; failures pass through."""
        if self.error is not None:
            return StageResult(error=self.error)
        return stage(cast(T, self.value))


@dataclass(slots=True)
class ParseResult:
    """Lazily runs and caches each stage over one source text."""

    source_text: str
    options: ParserOptions
    _tokens: StageResult[tuple[Token, ...]] | None = field(default=None, init=False, repr=False)
    _skeleton: StageResult[tuple[SkeletonNode, ...]] | None = field(default=None, init=False, repr=False)
    _ast: StageResult[AstObject] | None = field(default=None, init=False, repr=False)
    _data: StageResult[Data] | None = field(default=None, init=False, repr=False)

    def tokens(self) -> StageResult[tuple[Token, ...]]:
        if self._tokens is None:
            from skelconf.lexer import lex

            self._tokens = lex(self.source_text)
        return self._tokens

    def skeleton(self) -> StageResult[tuple[SkeletonNode, ...]]:
        if self._skeleton is None:
            from skelconf.skeleton import build_skeleton

            self._skeleton = self.tokens().then(build_skeleton)
        return self._skeleton

    def ast(self) -> StageResult[AstObject]:
        if self._ast is None:
            from skelconf.ast import lower_skeleton

            options = self.options
            self._ast = self.skeleton().then(lambda forest: lower_skeleton(forest, options))
        return self._ast

    def data(self) -> StageResult[Data]:
        if self._data is None:
            from skelconf.ast import to_data

            options = self.options
            self._data = self.ast().then(lambda root: to_data(root, options))
            if self._data.error is not None:
                logger.debug("parse failed with %s", self._data.error.code)
        return self._data

    @property
    def error(self) -> ParseError | None:
        return self.data().error

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.data().diagnostics

    @property
    def has_errors(self) -> bool:
        return self.error is not None

    def comments(self) -> dict[str, str]:
        """Entry documentation keyed by dotted path, e.g. `server.port` or `hosts[0].name`."""
        from skelconf.ast import collect_comments

        return collect_comments(self.ast().unwrap())
