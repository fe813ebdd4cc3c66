"""Error types raised while turning user input into a search configuration."""

from __future__ import annotations


class ConfigError(ValueError):
    """Invalid ``--name`` pattern or ``--type`` tag; fatal before any traversal."""


__all__ = ["ConfigError"]
