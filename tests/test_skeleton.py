import pytest

from skelconf.diagnostics import UnbalancedBracketsError
from skelconf.lexer import Lexer, TokenKind, lex
from skelconf.skeleton import (
    SkeletonBranch,
    SkeletonLeaf,
    SkeletonNode,
    build_skeleton,
    dump_skeleton,
    find_matching_close,
)
from skelconf.text import Position
from tests._debug import debug_dump_skeleton
from tests._shared_cases import VALID_CASES, SourceCase, case_id, nested_source


def skeletonize(source: str) -> tuple[SkeletonNode, ...]:
    return lex(source).then(build_skeleton).unwrap()


def count_tokens(forest: tuple[SkeletonNode, ...]) -> int:
    total = 0
    for node in forest:
        match node:
            case SkeletonLeaf():
                total += 1
            case SkeletonBranch(children=children):
                total += 2 + count_tokens(children)
    return total


def assert_brackets_match(forest: tuple[SkeletonNode, ...]) -> None:
    for node in forest:
        if isinstance(node, SkeletonBranch):
            assert node.end.kind == node.start.kind.closer
            assert_brackets_match(node.children)
        else:
            assert not node.token.kind.is_opener
            assert not node.token.kind.is_closer


def test_flat_tokens_become_leaves() -> None:
    forest = skeletonize("x = 1")

    assert len(forest) == 3
    assert all(isinstance(node, SkeletonLeaf) for node in forest)


def test_branch_groups_children_between_brackets() -> None:
    forest = skeletonize("a = [1 2 3]")
    debug_dump_skeleton("branch", forest)

    branch = forest[2]
    assert isinstance(branch, SkeletonBranch)
    assert branch.kind == TokenKind.ARRAY_START
    assert branch.end.kind == TokenKind.ARRAY_END
    assert [child.token.text for child in branch.children if isinstance(child, SkeletonLeaf)] == ["1", "2", "3"]


def test_nested_closers_are_absorbed_by_inner_branches() -> None:
    forest = skeletonize("a = { b = { c = [[1] []] } }")

    outer = forest[2]
    assert isinstance(outer, SkeletonBranch)
    assert len(outer.children) == 3

    inner = outer.children[2]
    assert isinstance(inner, SkeletonBranch)
    array = inner.children[2]
    assert isinstance(array, SkeletonBranch)
    assert len(array.children) == 2
    assert all(isinstance(child, SkeletonBranch) for child in array.children)


def test_empty_branch() -> None:
    forest = skeletonize("a = [{}]")

    array = forest[2]
    assert isinstance(array, SkeletonBranch)
    (obj,) = array.children
    assert isinstance(obj, SkeletonBranch)
    assert obj.children == ()


def test_branch_span_covers_opener_and_closer() -> None:
    forest = skeletonize("a = [1\n2]")

    branch = forest[2]
    assert isinstance(branch, SkeletonBranch)
    assert branch.span.start == Position(4, 1, 5)
    assert branch.span.end == Position(9, 2, 3)


def test_find_matching_close_counts_only_same_bracket_kind() -> None:
    tokens = Lexer("{ [ { } ] }").lex()

    assert find_matching_close(tokens, 0) == 5
    assert find_matching_close(tokens, 1) == 4
    assert find_matching_close(tokens, 2) == 3
    assert find_matching_close(Lexer("{ {").lex(), 0) is None


def test_missing_closer_reports_opener_position() -> None:
    result = lex("a = {").then(build_skeleton)

    assert isinstance(result.error, UnbalancedBracketsError)
    assert result.error.position == Position(4, 1, 5)
    assert result.error.bracket == "{"


def test_missing_inner_closer_reports_inner_opener() -> None:
    result = lex("a = {\n  b = [1 2\n}").then(build_skeleton)

    assert isinstance(result.error, UnbalancedBracketsError)
    assert (result.error.line, result.error.column) == (2, 7)
    assert result.error.bracket == "["


def test_stray_top_level_closer() -> None:
    result = lex("a = 1 }").then(build_skeleton)

    assert isinstance(result.error, UnbalancedBracketsError)
    assert result.error.bracket == "}"
    assert result.error.column == 7


def test_stray_closer_inside_branch() -> None:
    result = lex("a = { ] }").then(build_skeleton)

    assert isinstance(result.error, UnbalancedBracketsError)
    assert result.error.bracket == "]"


def test_interleaved_brackets_are_rejected() -> None:
    result = lex("a = { [ } ]").then(build_skeleton)

    assert isinstance(result.error, UnbalancedBracketsError)
    assert result.error.bracket == "["


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_skeleton_covers_every_token_with_matching_brackets(case: SourceCase) -> None:
    tokens = lex(case.source).unwrap()
    forest = build_skeleton(tokens).unwrap()

    assert count_tokens(forest) == len(tokens)
    assert_brackets_match(forest)


def test_deep_nesting_beyond_recursion_limit() -> None:
    depth = 1500
    forest = skeletonize("a = " + "[" * depth + "]" * depth)

    node = forest[2]
    for _ in range(depth - 1):
        assert isinstance(node, SkeletonBranch)
        (node,) = node.children
    assert isinstance(node, SkeletonBranch)
    assert node.children == ()


def test_dump_skeleton_indents_children() -> None:
    dumped = dump_skeleton(skeletonize(nested_source(1)))

    assert dumped.splitlines() == [
        "IDENTIFIER 'a'",
        "ASSIGN '='",
        "{",
        "  IDENTIFIER 'a'",
        "  ASSIGN '='",
        "  [",
        "    NUMBER '1'",
        "  ]",
        "}",
    ]
