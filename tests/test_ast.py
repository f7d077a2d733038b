import pytest

from skelconf.ast import (
    AstArray,
    AstBoolean,
    AstNull,
    AstNumber,
    AstObject,
    AstString,
    lower_skeleton,
)
from skelconf.diagnostics import (
    ExpectedValueError,
    InvalidAssignError,
    InvalidKeyError,
    MalformedObjectError,
    NumberOutOfRangeError,
    UnknownIdentifierError,
)
from skelconf.lexer import lex
from skelconf.options import ParseMode, ParserOptions
from skelconf.pipeline import StageResult
from skelconf.skeleton import build_skeleton
from skelconf.text import Position, TextSpan
from tests._debug import debug_dump_ast


def lower(source: str, options: ParserOptions | None = None) -> StageResult[AstObject]:
    return lex(source).then(build_skeleton).then(lambda forest: lower_skeleton(forest, options))


def test_ast_scalar_values() -> None:
    root = lower('s = "hi" n = 42 t = true f = false z = null').unwrap()
    debug_dump_ast("scalars", root)

    values = [entry.value for entry in root.entries]
    assert isinstance(values[0], AstString) and values[0].value == "hi"
    assert isinstance(values[1], AstNumber) and values[1].value == 42
    assert isinstance(values[2], AstBoolean) and values[2].value is True
    assert isinstance(values[3], AstBoolean) and values[3].value is False
    assert isinstance(values[4], AstNull)


def test_ast_keys_from_identifier_string_and_number() -> None:
    root = lower('plain = 1 "quoted key" = 2 3 = 3').unwrap()

    assert [entry.key.value for entry in root.entries] == ["plain", "quoted key", "3"]
    assert all(isinstance(entry.key, AstString) for entry in root.entries)


def test_ast_nested_object_and_array_shape() -> None:
    root = lower("a = { b = [1 { c = 2 }] }").unwrap()

    outer = root.get("a")
    assert isinstance(outer, AstObject)
    array = outer.get("b")
    assert isinstance(array, AstArray)
    assert isinstance(array.items[0], AstNumber)
    inner = array.items[1]
    assert isinstance(inner, AstObject)
    assert [entry.key.value for entry in inner.entries] == ["c"]


def test_ast_number_is_decimal_integer() -> None:
    root = lower("n = 007").unwrap()

    value = root.get("n")
    assert isinstance(value, AstNumber)
    assert value.value == 7


def test_ast_object_keeps_repeated_entries() -> None:
    root = lower("a = 1 a = 2 b = 3").unwrap()

    assert len(root.entries) == 3
    assert root.keys() == ["a", "b"]
    assert [v.value for v in root.get_all("a") if isinstance(v, AstNumber)] == [1, 2]
    last = root.get("a")
    assert isinstance(last, AstNumber) and last.value == 2
    assert root.get("missing") is None


def test_ast_spans_cover_constituent_tokens() -> None:
    source = "a = {\n  b = [1 2]\n}"
    root = lower(source).unwrap()

    assert root.span == TextSpan(Position(0, 1, 1), Position(len(source), 3, 2))

    (entry,) = root.entries
    assert entry.span == root.span
    assert entry.key.span == TextSpan(Position(0, 1, 1), Position(1, 1, 2))

    inner = entry.value
    assert isinstance(inner, AstObject)
    assert inner.span.start == Position(4, 1, 5)

    (inner_entry,) = inner.entries
    assert inner_entry.span == TextSpan(Position(8, 2, 3), Position(17, 2, 12))


def test_ast_empty_source_is_empty_root_object() -> None:
    root = lower("# only a comment\n").unwrap()

    assert root.entries == ()
    assert root.span.is_empty()


def test_ast_entry_comment_comes_from_key_token() -> None:
    root = lower("# Hello\n# World\nfoo = {\n  # name doc\n  name = \"x\"\n}").unwrap()

    (foo,) = root.entries
    assert foo.comment == "Hello\nWorld"
    inner = foo.value
    assert isinstance(inner, AstObject)
    assert inner.entries[0].comment == "name doc"


def test_ast_value_comment_from_opener() -> None:
    root = lower("a =\n# the list\n[1]").unwrap()

    value = root.get("a")
    assert isinstance(value, AstArray)
    assert value.comment == "the list"


@pytest.mark.parametrize(
    ("source", "count", "position"),
    [
        ("a = 1 b", 4, Position(6, 1, 7)),
        ("a =", 2, Position(0, 1, 1)),
        ("a = { b = 1 c = }", 5, Position(12, 1, 13)),
    ],
)
def test_malformed_object(source: str, count: int, position: Position) -> None:
    result = lower(source)

    assert isinstance(result.error, MalformedObjectError)
    assert result.error.child_count == count
    assert result.error.position == position


@pytest.mark.parametrize(
    ("source", "actual"),
    [
        ("{} = 1", "ObjectStart"),
        ("[1] = 1", "ArrayStart"),
        ("= = 1", "Assign"),
    ],
)
def test_invalid_key(source: str, actual: str) -> None:
    result = lower(source)

    assert isinstance(result.error, InvalidKeyError)
    assert result.error.actual == actual
    assert result.error.position == Position(0, 1, 1)


def test_unknown_identifier_value() -> None:
    result = lower("a = [1 yes]")

    assert isinstance(result.error, UnknownIdentifierError)
    assert result.error.text == "yes"
    assert result.error.column == 8


def test_identifier_keywords_are_case_sensitive() -> None:
    result = lower("a = True")

    assert isinstance(result.error, UnknownIdentifierError)
    assert result.error.text == "True"


def test_stray_assign_in_array_is_expected_value_error() -> None:
    result = lower("a = [1 = 2]")

    assert isinstance(result.error, ExpectedValueError)
    assert result.error.actual == "Assign"


def test_strict_mode_rejects_non_assign_separator() -> None:
    result = lower("a 1 2")

    assert isinstance(result.error, InvalidAssignError)
    assert result.error.actual == "Number"
    assert result.error.column == 3


def test_strict_mode_rejects_branch_separator() -> None:
    result = lower("a {} 2")

    assert isinstance(result.error, InvalidAssignError)
    assert result.error.actual == "ObjectStart"


def test_permissive_mode_ignores_separator() -> None:
    result = lower("a x 2", ParserOptions.for_mode(ParseMode.PERMISSIVE))

    root = result.unwrap()
    value = root.get("a")
    assert isinstance(value, AstNumber) and value.value == 2


def test_first_error_wins() -> None:
    result = lower("{} = maybe")

    assert isinstance(result.error, InvalidKeyError)


def test_number_beyond_int_conversion_limit_is_structured_error() -> None:
    result = lower("n = " + "1" * 5000)

    assert isinstance(result.error, NumberOutOfRangeError)
    assert result.error.digits == 5000
    assert result.error.position == Position(4, 1, 5)


def test_flags_govern_behavior_not_mode_label() -> None:
    result = lower("a x 2", ParserOptions(mode=ParseMode.PERMISSIVE))

    assert isinstance(result.error, InvalidAssignError)
    assert lower("a x 2", ParserOptions(validate_assign=False)).ok


def test_deep_lowering_beyond_recursion_limit() -> None:
    depth = 1200
    root = lower("a = " + "[" * depth + "]" * depth).unwrap()

    node = root.get("a")
    for _ in range(depth - 1):
        assert isinstance(node, AstArray)
        (node,) = node.items
    assert isinstance(node, AstArray)
    assert node.items == ()
