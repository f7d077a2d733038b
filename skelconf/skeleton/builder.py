"""Build a skeleton forest from a flat token sequence by bracket matching."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from skelconf.diagnostics import ParseFailure, UnbalancedBracketsError
from skelconf.lexer import Token
from skelconf.pipeline import StageResult
from skelconf.skeleton.model import SkeletonBranch, SkeletonLeaf, SkeletonNode

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _OpenBranch:
    start: Token
    end_index: int
    children: list[SkeletonNode] = field(default_factory=list)


def find_matching_close(tokens: tuple[Token, ...], open_index: int) -> int | None:
    """Index of the closer matching the opener at `open_index`, or None.

    Depth starts at 1 after the opener. Only brackets of the opener's own
    kind are counted, so a `[` inside `{ ... }` does not affect where the
    object closes.
    """
    opener = tokens[open_index].kind
    closer = opener.closer
    depth = 1
    for index in range(open_index + 1, len(tokens)):
        kind = tokens[index].kind
        if kind == opener:
            depth += 1
        elif kind == closer:
            depth -= 1
            if depth == 0:
                return index
    return None


class SkeletonBuilder:
    """Groups tokens into leaves and bracket-delimited branches.

    Branch interiors are skeletonized the same way as the top level. Open
    branches are kept on an explicit stack so nesting depth is not bounded
    by the interpreter's recursion limit.
    """

    def __init__(self, tokens: tuple[Token, ...]) -> None:
        self._tokens = tokens

    def build(self) -> tuple[SkeletonNode, ...]:
        """Raises `ParseFailure` carrying an `UnbalancedBracketsError`."""
        roots: list[SkeletonNode] = []
        stack: list[_OpenBranch] = []

        for index, token in enumerate(self._tokens):
            if stack and stack[-1].end_index == index:
                finished = stack.pop()
                branch = SkeletonBranch(
                    start=finished.start,
                    end=token,
                    children=tuple(finished.children),
                )
                (stack[-1].children if stack else roots).append(branch)
                continue

            if token.kind.is_opener:
                end_index = find_matching_close(self._tokens, index)
                if end_index is None or (stack and end_index > stack[-1].end_index):
                    raise ParseFailure(UnbalancedBracketsError(token.span, bracket=token.text))
                stack.append(_OpenBranch(start=token, end_index=end_index))
                continue

            if token.kind.is_closer:
                raise ParseFailure(UnbalancedBracketsError(token.span, bracket=token.text))

            (stack[-1].children if stack else roots).append(SkeletonLeaf(token))

        return tuple(roots)


def build_skeleton(tokens: tuple[Token, ...]) -> StageResult[tuple[SkeletonNode, ...]]:
    """Skeletonize a full token sequence; a failure carries the bracket error."""
    try:
        forest = SkeletonBuilder(tokens).build()
    except ParseFailure as failure:
        logger.debug("skeleton failed at %s", failure.error.position)
        return StageResult.failure(failure.error)
    logger.debug("built skeleton with %d top-level nodes", len(forest))
    return StageResult.success(forest)


def dump_skeleton(forest: tuple[SkeletonNode, ...]) -> str:
    """Render a forest one node per line, indented by depth, for debugging."""
    lines: list[str] = []

    def walk(node: SkeletonNode, depth: int) -> None:
        indent = "  " * depth
        match node:
            case SkeletonLeaf(token=token):
                lines.append(f"{indent}{token.kind.name} {token.text!r}")
            case SkeletonBranch(start=start, end=end, children=children):
                lines.append(f"{indent}{start.text}")
                for child in children:
                    walk(child, depth + 1)
                lines.append(f"{indent}{end.text}")

    for node in forest:
        walk(node, 0)
    return "\n".join(lines)
