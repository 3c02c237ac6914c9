"""Filesystem enumeration, sampling and deletion.

This module provides the ignore rules, the post-order tree scanner,
the random sampler and the deletion operator used by a snap.
"""

from gauntlet.filesystem.ignore import IGNORE_PATTERNS, IgnoreRule, PathFilter, should_ignore
from gauntlet.filesystem.operator import FilesystemActionResult, FilesystemOperator
from gauntlet.filesystem.sampler import sample
from gauntlet.filesystem.scanner import TreeScanner, enumerate_tree

__all__ = [
    "IGNORE_PATTERNS",
    "FilesystemActionResult",
    "FilesystemOperator",
    "IgnoreRule",
    "PathFilter",
    "TreeScanner",
    "enumerate_tree",
    "sample",
    "should_ignore",
]
