"""AST data model: typed values with source spans."""

from __future__ import annotations

from dataclasses import dataclass

from skelconf.text import TextSpan


@dataclass(frozen=True, slots=True)
class AstString:
    value: str
    span: TextSpan
    comment: str = ""


@dataclass(frozen=True, slots=True)
class AstNumber:
    value: int
    span: TextSpan
    comment: str = ""


@dataclass(frozen=True, slots=True)
class AstBoolean:
    value: bool
    span: TextSpan
    comment: str = ""


@dataclass(frozen=True, slots=True)
class AstNull:
    span: TextSpan
    comment: str = ""

    @property
    def value(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class AstArray:
    items: tuple[AstValue, ...]
    span: TextSpan
    comment: str = ""


@dataclass(frozen=True, slots=True)
class AstEntry:
    """`key = value` inside an object; `span` runs from key to value."""

    key: AstString
    value: AstValue
    span: TextSpan

    @property
    def comment(self) -> str:
        """Documentation written on the lines above the key."""
        return self.key.comment


@dataclass(frozen=True, slots=True)
class AstObject:
    """Object preserving entry order, repeated keys included."""

    entries: tuple[AstEntry, ...]
    span: TextSpan
    comment: str = ""

    def keys(self) -> list[str]:
        seen: dict[str, None] = {}
        for entry in self.entries:
            seen.setdefault(entry.key.value, None)
        return list(seen)

    def get(self, key: str) -> AstValue | None:
        """Value of the last entry named `key`, matching last-wins materialization."""
        for entry in reversed(self.entries):
            if entry.key.value == key:
                return entry.value
        return None

    def get_all(self, key: str) -> list[AstValue]:
        return [entry.value for entry in self.entries if entry.key.value == key]


type AstScalar = AstString | AstNumber | AstBoolean | AstNull
type AstValue = AstString | AstNumber | AstBoolean | AstNull | AstArray | AstObject


__all__ = [
    "AstArray",
    "AstBoolean",
    "AstEntry",
    "AstNull",
    "AstNumber",
    "AstObject",
    "AstScalar",
    "AstString",
    "AstValue",
]
