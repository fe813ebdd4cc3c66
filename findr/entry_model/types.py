"""Domain datatypes for entries discovered while walking a filesystem tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class EntryType(enum.Enum):
    """Classification of one filesystem node from its own metadata."""

    DIRECTORY = "d"
    FILE = "f"
    LINK = "l"
    # FIFOs, sockets and device nodes; no command-line tag selects these.
    OTHER = "?"


@dataclass(frozen=True)
class WalkEntry:
    """One discovered node: display path, base name, and classified type."""

    path: str
    name: str
    entry_type: EntryType
    depth: int = 0


@dataclass(frozen=True)
class WalkError:
    """A node that could not be read or listed during traversal."""

    path: str
    error: OSError
    depth: int = 0

    def message(self) -> str:
        """Return a one-line human-readable diagnostic for this failure."""
        reason = self.error.strerror or str(self.error) or type(self.error).__name__
        return f"{self.path}: {reason}"


WalkItem = WalkEntry | WalkError


__all__ = [
    "EntryType",
    "WalkEntry",
    "WalkError",
    "WalkItem",
]
