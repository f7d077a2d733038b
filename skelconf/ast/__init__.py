"""Typed AST over the skeleton forest, and plain-data materialization."""

from skelconf.ast.lower import lower_skeleton
from skelconf.ast.materialize import Data, collect_comments, to_data
from skelconf.ast.model import (
    AstArray,
    AstBoolean,
    AstEntry,
    AstNull,
    AstNumber,
    AstObject,
    AstScalar,
    AstString,
    AstValue,
)

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
    "Data",
    "collect_comments",
    "lower_skeleton",
    "to_data",
]
