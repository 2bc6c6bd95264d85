"""CLI entrypoint and bootstrap tests.

Verifies the argument-free command line, exit behavior on terminal failures,
and how ``run_app`` wires snapshot, theme, and terminal into the loop.
"""

from __future__ import annotations

import unittest
from unittest import mock

from envreader import cli
from envreader.errors import TerminalIOError, TerminalUnavailableError
from envreader.runtime.app import run_app
from envreader.ui_theme import OCEAN_THEME, PLAIN_THEME


class CliMainTests(unittest.TestCase):
    def test_main_without_arguments_runs_app_and_returns(self) -> None:
        with mock.patch("envreader.cli.setup_logging") as setup_mock, mock.patch(
            "envreader.cli.load_log_level", return_value=None
        ), mock.patch("envreader.cli.run_app") as run_app_mock:
            result = cli.main([])

        self.assertIsNone(result)
        setup_mock.assert_called_once_with(None)
        run_app_mock.assert_called_once_with()

    def test_unexpected_arguments_are_a_usage_error(self) -> None:
        with mock.patch("envreader.cli.run_app") as run_app_mock, mock.patch("sys.stderr"):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--theme", "ocean"])

        self.assertEqual(ctx.exception.code, 2)
        run_app_mock.assert_not_called()

    def test_terminal_failures_exit_with_diagnostic(self) -> None:
        for error in (TerminalUnavailableError("not a terminal"), TerminalIOError("terminal input closed")):
            with self.subTest(error=error), mock.patch("envreader.cli.setup_logging"), mock.patch(
                "envreader.cli.load_log_level", return_value=None
            ), mock.patch("envreader.cli.run_app", side_effect=error):
                with self.assertRaises(SystemExit) as ctx:
                    cli.main([])

            self.assertEqual(ctx.exception.code, f"envreader: {error}")


class RunAppTests(unittest.TestCase):
    def test_run_app_builds_state_from_snapshot_and_runs_loop(self) -> None:
        with mock.patch("envreader.runtime.app.TerminalController") as terminal_cls, mock.patch(
            "envreader.runtime.app.run_main_loop"
        ) as loop_mock, mock.patch("envreader.runtime.app.load_theme_name", return_value="ocean"), mock.patch(
            "envreader.runtime.app.no_color_requested", return_value=False
        ):
            run_app([("PATH", "/usr/bin"), ("HOME", "/root")], stdin_fd=5, stdout_fd=6)

        terminal_cls.assert_called_once_with(5, 6)
        state, terminal, theme = loop_mock.call_args.args
        self.assertEqual(state.snapshot.keys(), ["PATH", "HOME"])
        self.assertIsNone(state.selection.selected)
        self.assertTrue(state.running)
        self.assertIs(terminal, terminal_cls.return_value)
        self.assertIs(theme, OCEAN_THEME)

    def test_no_color_selects_plain_theme(self) -> None:
        with mock.patch("envreader.runtime.app.TerminalController"), mock.patch(
            "envreader.runtime.app.run_main_loop"
        ) as loop_mock, mock.patch("envreader.runtime.app.load_theme_name", return_value="ocean"), mock.patch(
            "envreader.runtime.app.no_color_requested", return_value=True
        ):
            run_app([], stdin_fd=5, stdout_fd=6)

        self.assertIs(loop_mock.call_args.args[2], PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
