"""Command-line front door for envreader.

Takes no options: sets up logging, then hands over to the interactive
runtime. Terminal failures become a one-line diagnostic and exit status 1.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from .config import load_log_level
from .errors import TerminalUnavailableError
from .logging_setup import setup_logging
from .runtime import run_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="envreader",
        description="Browse the current process environment in an interactive terminal view.",
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Parse (empty) CLI arguments and launch the environment browser.

    Returns normally on quit. Raises ``SystemExit`` with a message when the
    terminal is unavailable or fails mid-session; by then the terminal has
    already been restored.
    """
    build_parser().parse_args(argv)
    try:
        setup_logging(load_log_level())
        run_app()
    except (TerminalUnavailableError, OSError) as exc:
        logger.error("terminal session failed: %s", exc, exc_info=True)
        raise SystemExit(f"envreader: {exc}") from exc


if __name__ == "__main__":
    main()
