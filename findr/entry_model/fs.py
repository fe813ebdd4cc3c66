"""Filesystem classification and lazy tree walking for search roots."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator

from .types import EntryType, WalkEntry, WalkError, WalkItem


def classify_entry(metadata: os.stat_result) -> EntryType:
    """Map ``lstat`` metadata to an entry type without following symlinks."""
    mode = metadata.st_mode
    if stat.S_ISLNK(mode):
        return EntryType.LINK
    if stat.S_ISDIR(mode):
        return EntryType.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryType.FILE
    return EntryType.OTHER


def entry_base_name(path: str) -> str:
    """Return the final component of ``path``.

    Paths without a final component (``.``, ``/``, ``dir/``) fall back to the
    normalized path so every entry has a non-empty name to match against.
    """
    normalized = os.path.normpath(path)
    return os.path.basename(normalized) or normalized


def list_directory(directory: str, depth: int) -> tuple[list[WalkItem], OSError | None]:
    """List children of ``directory`` sorted by name, classified via ``lstat``.

    Returns ``(items, scan_error)``. Children whose metadata cannot be read are
    returned as ``WalkError`` items. ``scan_error`` is set when the listing
    fails; children read before the failure are still returned.
    """
    children: list[os.DirEntry[str]] = []
    scan_error: OSError | None = None
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                children.append(child)
    except OSError as exc:
        scan_error = exc

    items: list[WalkItem] = []
    for child in sorted(children, key=lambda item: item.name):
        try:
            metadata = child.stat(follow_symlinks=False)
        except OSError as exc:
            items.append(WalkError(path=child.path, error=exc, depth=depth))
            continue
        items.append(
            WalkEntry(
                path=child.path,
                name=child.name,
                entry_type=classify_entry(metadata),
                depth=depth,
            )
        )
    return items, scan_error


def _should_descend(entry: WalkEntry) -> bool:
    """Directories are walked; a root symlink is walked when it targets one."""
    if entry.entry_type is EntryType.DIRECTORY:
        return True
    if entry.entry_type is not EntryType.LINK or entry.depth != 0:
        return False
    try:
        return stat.S_ISDIR(os.stat(entry.path).st_mode)
    except OSError:
        return False


def walk_tree(root: str | os.PathLike[str]) -> Iterator[WalkItem]:
    """Yield ``root`` and everything beneath it, depth-first in name order.

    Failures are yielded in-band as ``WalkError`` values and the walk moves on
    to the remaining nodes. A missing root yields a single error. A symlink
    root pointing at a directory is reported as a link and then walked;
    symlinks below the root are reported but never descended into.
    """
    root_path = os.fspath(root)
    try:
        root_type = classify_entry(os.lstat(root_path))
    except OSError as exc:
        yield WalkError(path=root_path, error=exc)
        return

    stack: list[WalkItem] = [
        WalkEntry(path=root_path, name=entry_base_name(root_path), entry_type=root_type)
    ]
    while stack:
        item = stack.pop()
        yield item
        if not isinstance(item, WalkEntry) or not _should_descend(item):
            continue

        children, scan_error = list_directory(item.path, item.depth + 1)
        if scan_error is not None:
            # Reported after whatever part of the listing was readable.
            stack.append(WalkError(path=item.path, error=scan_error, depth=item.depth))
        stack.extend(reversed(children))


__all__ = [
    "classify_entry",
    "entry_base_name",
    "list_directory",
    "walk_tree",
]
