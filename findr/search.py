"""Search driver: walk each root, report errors, filter, and print matches.

Roots are processed one at a time and independently. Traversal errors go to
the diagnostic stream as they are found; matches for a root are written as a
single block once that root's walk is exhausted.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TextIO

from .entry_model import EntryType, WalkEntry, WalkError, walk_tree
from .filtering import EntryFilter, compile_name_patterns, parse_entry_types
from .render import render_group, resolve_palette

DEFAULT_PATHS: tuple[str, ...] = (".",)


@dataclass(frozen=True)
class SearchConfig:
    """Validated, read-only search request."""

    paths: tuple[str, ...] = DEFAULT_PATHS
    names: tuple[re.Pattern[str], ...] = ()
    entry_types: frozenset[EntryType] = frozenset()
    color: bool = False
    theme: str | None = None

    def entry_filter(self) -> EntryFilter:
        return EntryFilter(entry_types=self.entry_types, patterns=self.names)


def build_search_config(
    paths: Iterable[str] | None = None,
    names: Iterable[str] | None = None,
    type_tags: Iterable[str] | None = None,
    color: bool = False,
    theme: str | None = None,
) -> SearchConfig:
    """Validate raw user values into a ``SearchConfig``.

    Raises ``ConfigError`` for an invalid regular expression or type tag.
    """
    resolved_paths = tuple(paths or ()) or DEFAULT_PATHS
    return SearchConfig(
        paths=resolved_paths,
        names=compile_name_patterns(names or ()),
        entry_types=parse_entry_types(type_tags or ()),
        color=color,
        theme=theme,
    )


def search_root(
    root: str,
    entry_filter: EntryFilter,
    on_error: Callable[[WalkError], None],
) -> list[WalkEntry]:
    """Walk ``root`` and return the accepted entries in traversal order."""
    matched: list[WalkEntry] = []
    for item in walk_tree(root):
        if isinstance(item, WalkError):
            on_error(item)
            continue
        if entry_filter.accepts(item):
            matched.append(item)
    return matched


def run_search(config: SearchConfig, stdout: TextIO, stderr: TextIO) -> int:
    """Run every root in ``config`` and write results; return the exit status.

    Traversal errors never change the status.
    """
    entry_filter = config.entry_filter()
    palette = resolve_palette(config.theme)

    def report(error: WalkError) -> None:
        stderr.write(error.message() + "\n")
        stderr.flush()

    for root in config.paths:
        matched = search_root(root, entry_filter, report)
        stdout.write(render_group(matched, color=config.color, palette=palette))
        stdout.flush()
    return 0


__all__ = [
    "DEFAULT_PATHS",
    "SearchConfig",
    "build_search_config",
    "run_search",
    "search_root",
]
