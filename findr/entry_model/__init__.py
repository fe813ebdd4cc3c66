"""Domain model for filesystem entries and the tree walker that yields them.

This package contains non-output traversal primitives:
- entry/error datatypes flowing through a walk
- lstat-based entry classification
- lazy depth-first walking with in-band errors
"""

from __future__ import annotations

from .types import EntryType, WalkEntry, WalkError, WalkItem
from .fs import classify_entry, entry_base_name, list_directory, walk_tree

__all__ = [
    "EntryType",
    "WalkEntry",
    "WalkError",
    "WalkItem",
    "classify_entry",
    "entry_base_name",
    "list_directory",
    "walk_tree",
]
