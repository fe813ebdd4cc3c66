"""Output rendering for matched entries, one text block per search root.

Palettes are ANSI prefixes keyed by entry type. Plain rendering emits the bare
display paths so output stays pipe-friendly.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .entry_model import EntryType, WalkEntry


@dataclass(frozen=True)
class Palette:
    """ANSI prefixes used when colorizing matched paths."""

    name: str
    directory: str
    file: str
    link: str
    other: str
    reset: str = "\033[0m"

    def style_for(self, entry_type: EntryType) -> str:
        if entry_type is EntryType.DIRECTORY:
            return self.directory
        if entry_type is EntryType.LINK:
            return self.link
        if entry_type is EntryType.FILE:
            return self.file
        return self.other


DEFAULT_PALETTE = Palette(
    name="default",
    directory="\033[1;34m",
    file="",
    link="\033[36m",
    other="\033[33m",
)

MONO_PALETTE = Palette(
    name="mono",
    directory="\033[1m",
    file="",
    link="\033[4m",
    other="\033[2m",
)

_PALETTES = {palette.name: palette for palette in (DEFAULT_PALETTE, MONO_PALETTE)}


def available_palette_names() -> list[str]:
    return sorted(_PALETTES)


def resolve_palette(name: str | None) -> Palette:
    """Return the palette called ``name``, falling back to the default one."""
    if name is None:
        return DEFAULT_PALETTE
    return _PALETTES.get(name.strip().lower(), DEFAULT_PALETTE)


def render_path(entry: WalkEntry, color: bool, palette: Palette = DEFAULT_PALETTE) -> str:
    if not color:
        return entry.path
    style = palette.style_for(entry.entry_type)
    if not style:
        return entry.path
    return f"{style}{entry.path}{palette.reset}"


def render_group(
    entries: Sequence[WalkEntry],
    color: bool = False,
    palette: Palette = DEFAULT_PALETTE,
) -> str:
    """Join matched paths by newline and terminate the block with one newline.

    A root without matches still renders as a single blank line so every
    starting path contributes exactly one block.
    """
    return "\n".join(render_path(entry, color, palette) for entry in entries) + "\n"


__all__ = [
    "DEFAULT_PALETTE",
    "MONO_PALETTE",
    "Palette",
    "available_palette_names",
    "render_group",
    "render_path",
    "resolve_palette",
]
