"""Lower a skeleton forest into a typed AST."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import cast

from skelconf.ast.model import (
    AstArray,
    AstBoolean,
    AstEntry,
    AstNull,
    AstNumber,
    AstObject,
    AstString,
    AstValue,
)
from skelconf.diagnostics import (
    ExpectedValueError,
    InvalidAssignError,
    InvalidKeyError,
    MalformedObjectError,
    NumberOutOfRangeError,
    ParseFailure,
    UnknownIdentifierError,
)
from skelconf.lexer import Token, TokenKind
from skelconf.options import ParserOptions
from skelconf.pipeline import StageResult
from skelconf.skeleton import SkeletonBranch, SkeletonLeaf, SkeletonNode
from skelconf.text import START, TextSpan

logger = logging.getLogger(__name__)

_KEY_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.IDENTIFIER,
        TokenKind.STRING,
        TokenKind.NUMBER,
    }
)

_KEYWORDS: dict[str, bool | None] = {
    "true": True,
    "false": False,
    "null": None,
}


def lower_skeleton(
    forest: tuple[SkeletonNode, ...],
    options: ParserOptions | None = None,
) -> StageResult[AstObject]:
    """Interpret the top-level forest as the implicit root object."""
    lowering = _Lowering(options if options is not None else ParserOptions())
    try:
        root = lowering.lower_root(forest)
    except ParseFailure as failure:
        logger.debug("lowering failed with %s at %s", failure.error.code, failure.error.position)
        return StageResult.failure(failure.error)
    logger.debug("lowered root object with %d entries", len(root.entries))
    return StageResult.success(root)


@dataclass(slots=True)
class _OpenNode:
    """An object or array whose children are still being lowered.

    `branch` is None for the implicit root object.
    """

    items: tuple[SkeletonNode, ...]
    branch: SkeletonBranch | None
    is_object: bool
    index: int = 0
    values: list[AstValue] = field(default_factory=list)
    entries: list[AstEntry] = field(default_factory=list)
    pending_key: AstString | None = None


class _Lowering:
    """Lowers nodes depth-first with an explicit stack of open containers.

    Children are visited in source order, so the first grammar error in the
    source is the one reported, and nesting depth is not bounded by the
    interpreter's recursion limit.
    """

    def __init__(self, options: ParserOptions) -> None:
        self._validate_assign = options.validate_assign

    def lower_root(self, forest: tuple[SkeletonNode, ...]) -> AstObject:
        if not forest:
            return AstObject(entries=(), span=TextSpan.empty(START))
        self._check_triples(forest)
        root = self._lower_tree(_OpenNode(items=forest, branch=None, is_object=True))
        return cast(AstObject, root)

    def lower_value(self, node: SkeletonNode) -> AstValue:
        match node:
            case SkeletonBranch():
                return self._lower_tree(self._open(node))
            case SkeletonLeaf(token=token):
                return self._lower_leaf(token)

    def _lower_tree(self, top: _OpenNode) -> AstValue:
        stack = [top]
        while True:
            frame = stack[-1]
            if frame.index >= len(frame.items):
                stack.pop()
                value = self._close(frame)
                if not stack:
                    return value
                self._attach(stack[-1], value)
                continue

            if frame.is_object:
                key_node, assign_node, value_node = frame.items[frame.index : frame.index + 3]
                frame.index += 3
                frame.pending_key = self._lower_key(key_node)
                if self._validate_assign:
                    self._check_assign(assign_node)
            else:
                value_node = frame.items[frame.index]
                frame.index += 1

            match value_node:
                case SkeletonBranch():
                    stack.append(self._open(value_node))
                case SkeletonLeaf(token=token):
                    self._attach(frame, self._lower_leaf(token))

    def _open(self, node: SkeletonBranch) -> _OpenNode:
        match node.kind:
            case TokenKind.OBJECT_START:
                self._check_triples(node.children)
                return _OpenNode(items=node.children, branch=node, is_object=True)
            case TokenKind.ARRAY_START:
                return _OpenNode(items=node.children, branch=node, is_object=False)
            case _:
                raise ValueError(f"Not an opening token kind: {node.kind!r}")

    def _attach(self, frame: _OpenNode, value: AstValue) -> None:
        if not frame.is_object:
            frame.values.append(value)
            return
        key = cast(AstString, frame.pending_key)
        frame.entries.append(AstEntry(key=key, value=value, span=key.span.cover(value.span)))
        frame.pending_key = None

    def _close(self, frame: _OpenNode) -> AstValue:
        branch = frame.branch
        if branch is None:
            span = frame.items[0].span.cover(frame.items[-1].span)
            return AstObject(entries=tuple(frame.entries), span=span)
        if frame.is_object:
            return AstObject(entries=tuple(frame.entries), span=branch.span, comment=branch.start.comment)
        return AstArray(items=tuple(frame.values), span=branch.span, comment=branch.start.comment)

    def _lower_leaf(self, token: Token) -> AstValue:
        match token.kind:
            case TokenKind.IDENTIFIER:
                if token.text not in _KEYWORDS:
                    raise ParseFailure(UnknownIdentifierError(token.span, text=token.text))
                keyword = _KEYWORDS[token.text]
                if keyword is None:
                    return AstNull(span=token.span, comment=token.comment)
                return AstBoolean(value=keyword, span=token.span, comment=token.comment)
            case TokenKind.STRING:
                return AstString(value=token.text, span=token.span, comment=token.comment)
            case TokenKind.NUMBER:
                try:
                    number = int(token.text)
                except ValueError:
                    # Beyond the interpreter's int/str conversion digit limit.
                    raise ParseFailure(
                        NumberOutOfRangeError(token.span, digits=len(token.text))
                    ) from None
                return AstNumber(value=number, span=token.span, comment=token.comment)
            case _:
                # Closers never reach here as leaves; this is a stray `=`.
                raise ParseFailure(ExpectedValueError(token.span, actual=token.kind.label))

    def _check_triples(self, items: tuple[SkeletonNode, ...]) -> None:
        remainder = len(items) % 3
        if remainder:
            dangling = items[len(items) - remainder]
            raise ParseFailure(MalformedObjectError(dangling.span, child_count=len(items)))

    def _lower_key(self, node: SkeletonNode) -> AstString:
        match node:
            case SkeletonLeaf(token=token) if token.kind in _KEY_KINDS:
                return AstString(value=token.text, span=token.span, comment=token.comment)
            case SkeletonLeaf(token=token):
                raise ParseFailure(InvalidKeyError(token.span, actual=token.kind.label))
            case SkeletonBranch():
                raise ParseFailure(InvalidKeyError(node.span, actual=node.kind.label))

    def _check_assign(self, node: SkeletonNode) -> None:
        match node:
            case SkeletonLeaf(token=token) if token.kind == TokenKind.ASSIGN:
                return
            case SkeletonLeaf(token=token):
                raise ParseFailure(InvalidAssignError(token.span, actual=token.kind.label))
            case SkeletonBranch():
                raise ParseFailure(InvalidAssignError(node.span, actual=node.kind.label))


__all__ = ["lower_skeleton"]
