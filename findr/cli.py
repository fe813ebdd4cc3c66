"""Command-line front door for findr.

Parses CLI options into a validated ``SearchConfig``.
Then dispatches into the search driver.
"""

from __future__ import annotations

import argparse
import sys

from . import __version__
from .config import load_color, load_theme_name
from .errors import ConfigError
from .filtering import TYPE_TAGS
from .render import available_palette_names
from .search import build_search_config, run_search


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="findr",
        description="Recursively list filesystem entries matching type and name filters.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATHS",
        help="Starting paths to search. Defaults to the current directory.",
    )
    parser.add_argument(
        "-n",
        "--name",
        dest="names",
        action="append",
        default=[],
        metavar="NAME",
        help="Regular expression matched against entry base names (repeatable).",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="types",
        action="append",
        default=[],
        choices=sorted(TYPE_TAGS),
        metavar="TYPE",
        help="Entry type: f (file), d (directory), l (symbolic link). Repeatable.",
    )
    color_group = parser.add_mutually_exclusive_group()
    color_group.add_argument(
        "--color",
        dest="color",
        action="store_true",
        default=None,
        help="Colorize matched paths by entry type.",
    )
    color_group.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=None,
        help="Disable color output even on TTY.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color palette name ({', '.join(available_palette_names())}).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_color(flag: bool | None) -> bool:
    """Pick color output from the CLI flag, then persisted config, then TTY."""
    if flag is not None:
        return flag
    persisted = load_color()
    if persisted is not None:
        return persisted
    return sys.stdout.isatty()


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the search.

    Invalid ``--type`` values are rejected by argparse (exit status 2). Invalid
    ``--name`` patterns abort before any traversal with exit status 1.
    """
    args = build_parser().parse_intermixed_args(argv)
    try:
        config = build_search_config(
            paths=args.paths,
            names=args.names,
            type_tags=args.types,
            color=_resolve_color(args.color),
            theme=args.theme or load_theme_name(),
        )
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    status = run_search(config, sys.stdout, sys.stderr)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
