"""Type and name predicates deciding which walked entries are reported."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .entry_model import EntryType, WalkEntry
from .errors import ConfigError

TYPE_TAGS: dict[str, EntryType] = {
    "d": EntryType.DIRECTORY,
    "f": EntryType.FILE,
    "l": EntryType.LINK,
}


def compile_name_patterns(raw_patterns: Iterable[str]) -> tuple[re.Pattern[str], ...]:
    """Compile ``--name`` values, raising ``ConfigError`` on the first bad one."""
    compiled: list[re.Pattern[str]] = []
    for raw in raw_patterns:
        try:
            compiled.append(re.compile(raw))
        except re.error as exc:
            raise ConfigError(f'Invalid --name "{raw}"') from exc
    return tuple(compiled)


def parse_entry_types(tags: Iterable[str]) -> frozenset[EntryType]:
    """Translate ``--type`` tags (``f``, ``d``, ``l``) into entry types."""
    types: set[EntryType] = set()
    for tag in tags:
        entry_type = TYPE_TAGS.get(tag)
        if entry_type is None:
            raise ConfigError(f'Invalid --type "{tag}"')
        types.add(entry_type)
    return frozenset(types)


def matches_type(entry: WalkEntry, entry_types: frozenset[EntryType]) -> bool:
    """Return whether ``entry`` passes the type filter; empty means no restriction."""
    if not entry_types:
        return True
    return entry.entry_type in entry_types


def matches_name(entry: WalkEntry, patterns: tuple[re.Pattern[str], ...]) -> bool:
    """Return whether any pattern partially matches the entry's base name.

    An empty pattern tuple means no restriction.
    """
    if not patterns:
        return True
    return any(pattern.search(entry.name) for pattern in patterns)


@dataclass(frozen=True)
class EntryFilter:
    """Conjunction of the type predicate and the name predicate."""

    entry_types: frozenset[EntryType] = frozenset()
    patterns: tuple[re.Pattern[str], ...] = ()

    def accepts(self, entry: WalkEntry) -> bool:
        return matches_type(entry, self.entry_types) and matches_name(entry, self.patterns)


__all__ = [
    "TYPE_TAGS",
    "EntryFilter",
    "compile_name_patterns",
    "matches_name",
    "matches_type",
    "parse_entry_types",
]
