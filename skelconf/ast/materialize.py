"""Materialize an AST into plain python data."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import cast

from skelconf.ast.model import (
    AstArray,
    AstBoolean,
    AstNull,
    AstNumber,
    AstObject,
    AstString,
    AstValue,
)
from skelconf.diagnostics import DuplicateKeyError, ParseFailure
from skelconf.options import DuplicateKeyPolicy, ParserOptions
from skelconf.pipeline import StageResult

logger = logging.getLogger(__name__)

type Data = str | int | bool | None | list[Data] | dict[str, Data]


def to_data(node: AstValue, options: ParserOptions | None = None) -> StageResult[Data]:
    """Strip spans and comments from `node`.

    Repeated keys in one object resolve last-write-wins: the later value
    replaces the earlier one but the key keeps its first insertion slot.
    With `DuplicateKeyPolicy.REJECT` the repeat fails with
    `DuplicateKeyError` at the second key instead.
    """
    policy = options.duplicate_keys if options is not None else DuplicateKeyPolicy.LAST_WINS
    try:
        data = _materialize(node, reject_duplicates=policy == DuplicateKeyPolicy.REJECT)
    except ParseFailure as failure:
        logger.debug("materialize failed with %s", failure.error.code)
        return StageResult.failure(failure.error)
    return StageResult.success(data)


@dataclass(slots=True)
class _Fill:
    """A container whose source children are still being copied into `target`."""

    source: AstArray | AstObject
    target: list[Data] | dict[str, Data]
    index: int = 0


def _shallow(node: AstValue) -> Data:
    match node:
        case AstString(value=value) | AstNumber(value=value) | AstBoolean(value=value):
            return value
        case AstNull():
            return None
        case AstArray():
            return []
        case AstObject():
            return {}


def _materialize(node: AstValue, *, reject_duplicates: bool) -> Data:
    # Containers are linked into their parent when first seen and filled in
    # later from an explicit stack, so depth is not bounded by recursion.
    root = _shallow(node)
    stack: list[_Fill] = []
    if isinstance(node, (AstArray, AstObject)):
        stack.append(_Fill(node, cast(list[Data] | dict[str, Data], root)))

    while stack:
        frame = stack[-1]
        source = frame.source
        if isinstance(source, AstArray):
            if frame.index >= len(source.items):
                stack.pop()
                continue
            child = source.items[frame.index]
            frame.index += 1
            value = _shallow(child)
            cast(list[Data], frame.target).append(value)
        else:
            if frame.index >= len(source.entries):
                stack.pop()
                continue
            entry = source.entries[frame.index]
            frame.index += 1
            target = cast(dict[str, Data], frame.target)
            key = entry.key.value
            if reject_duplicates and key in target:
                raise ParseFailure(DuplicateKeyError(entry.key.span, key=key))
            child = entry.value
            value = _shallow(child)
            target[key] = value

        if isinstance(child, (AstArray, AstObject)):
            stack.append(_Fill(child, cast(list[Data] | dict[str, Data], value)))

    return root


def collect_comments(root: AstObject) -> dict[str, str]:
    """Map dotted entry paths to the documentation attached to their keys."""
    comments: dict[str, str] = {}
    pending: list[tuple[AstValue, str]] = [(root, "")]

    while pending:
        node, path = pending.pop()
        children: list[tuple[AstValue, str]] = []
        match node:
            case AstObject(entries=entries):
                for entry in entries:
                    entry_path = f"{path}.{entry.key.value}" if path else entry.key.value
                    if entry.comment:
                        comments[entry_path] = entry.comment
                    children.append((entry.value, entry_path))
            case AstArray(items=items):
                children = [(item, f"{path}[{index}]") for index, item in enumerate(items)]
            case _:
                continue
        pending.extend(reversed(children))

    return comments


__all__ = ["Data", "collect_comments", "to_data"]
