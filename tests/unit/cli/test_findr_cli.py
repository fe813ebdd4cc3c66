"""CLI argument parsing and exit-behavior tests.

Verifies how ``findr.cli.main`` maps arguments to a search configuration.
Prevents regressions in defaults, repeatable flags, and error exits.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from findr import cli
from findr.entry_model import EntryType


class CliArgumentTests(unittest.TestCase):
    def _main_with_captured_config(self, argv: list[str]):
        with (
            mock.patch("findr.cli.run_search", return_value=0) as run_search,
            mock.patch("findr.cli.load_color", return_value=None),
            mock.patch("findr.cli.load_theme_name", return_value=None),
        ):
            cli.main(argv)
        run_search.assert_called_once()
        return run_search.call_args.args[0]

    def test_defaults_to_current_directory_without_filters(self) -> None:
        config = self._main_with_captured_config([])

        self.assertEqual(config.paths, (".",))
        self.assertEqual(config.names, ())
        self.assertEqual(config.entry_types, frozenset())

    def test_repeatable_name_and_type_flags_accumulate(self) -> None:
        config = self._main_with_captured_config(
            ["src", "-n", "^a", "--name", "b$", "-t", "f", "--type", "l", "docs"]
        )

        self.assertEqual(config.paths, ("src", "docs"))
        self.assertEqual([pattern.pattern for pattern in config.names], ["^a", "b$"])
        self.assertEqual(config.entry_types, frozenset({EntryType.FILE, EntryType.LINK}))

    def test_invalid_type_is_rejected_by_parser_with_usage_status(self) -> None:
        with mock.patch("findr.cli.run_search") as run_search, mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as exc_info:
                cli.main(["-t", "x"])

        run_search.assert_not_called()
        self.assertEqual(exc_info.exception.code, 2)

    def test_invalid_name_aborts_before_search(self) -> None:
        with mock.patch("findr.cli.run_search") as run_search:
            with self.assertRaises(SystemExit) as exc_info:
                cli.main(["-n", "*foo"])

        run_search.assert_not_called()
        self.assertEqual(str(exc_info.exception), 'Invalid --name "*foo"')

    def test_color_flags_override_persisted_preference(self) -> None:
        with (
            mock.patch("findr.cli.run_search", return_value=0) as run_search,
            mock.patch("findr.cli.load_color", return_value=True),
            mock.patch("findr.cli.load_theme_name", return_value="mono"),
        ):
            cli.main(["--no-color"])

        config = run_search.call_args.args[0]
        self.assertFalse(config.color)
        self.assertEqual(config.theme, "mono")

    def test_theme_flag_overrides_persisted_theme(self) -> None:
        with (
            mock.patch("findr.cli.run_search", return_value=0) as run_search,
            mock.patch("findr.cli.load_color", return_value=None),
            mock.patch("findr.cli.load_theme_name", return_value="default"),
        ):
            cli.main(["--color", "--theme", "mono"])

        config = run_search.call_args.args[0]
        self.assertTrue(config.color)
        self.assertEqual(config.theme, "mono")

    def test_persisted_color_preference_is_used_without_flags(self) -> None:
        with (
            mock.patch("findr.cli.run_search", return_value=0) as run_search,
            mock.patch("findr.cli.load_color", return_value=True),
            mock.patch("findr.cli.load_theme_name", return_value=None),
        ):
            cli.main([])

        self.assertTrue(run_search.call_args.args[0].color)


class CliEndToEndTests(unittest.TestCase):
    def test_prints_matches_and_reports_missing_roots_without_failing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "keep.py").write_text("x\n", encoding="utf-8")
            (root / "skip.txt").write_text("x\n", encoding="utf-8")
            missing = os.path.join(tmp, "missing")

            stdout = io.StringIO()
            stderr = io.StringIO()
            with (
                mock.patch.object(sys, "argv", ["findr", tmp, missing, "-n", r"\.py$", "--no-color"]),
                mock.patch("sys.stdout", stdout),
                mock.patch("sys.stderr", stderr),
            ):
                cli.main()

            self.assertEqual(stdout.getvalue(), f"{os.path.join(tmp, 'keep.py')}\n\n")
            self.assertTrue(stderr.getvalue().startswith(f"{missing}: "))


if __name__ == "__main__":
    unittest.main()
