"""Skeleton (bracket structure) builder."""

from skelconf.skeleton.builder import (
    SkeletonBuilder,
    build_skeleton,
    dump_skeleton,
    find_matching_close,
)
from skelconf.skeleton.model import SkeletonBranch, SkeletonLeaf, SkeletonNode

__all__ = [
    "SkeletonBranch",
    "SkeletonBuilder",
    "SkeletonLeaf",
    "SkeletonNode",
    "build_skeleton",
    "dump_skeleton",
    "find_matching_close",
]
