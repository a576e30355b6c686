"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode.

    Args:
        parser: ArgumentParser to add the flag to
    """
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_wrapped_args(parser: argparse.ArgumentParser, program: str) -> None:
    """Add the trailing arguments passed through to ``program``.

    Args:
        parser: ArgumentParser to add the argument to
        program: Name of the wrapped program, for help text
    """
    parser.add_argument(
        "argv",
        nargs=argparse.REMAINDER,
        help=f"Arguments for `{program}` (use `--` before them).",
    )


def add_global_flags(parser: argparse.ArgumentParser) -> None:
    """Add the flags shared by every nixshim command.

    Args:
        parser: Top-level ArgumentParser
    """
    parser.add_argument(
        "--log",
        metavar="LEVEL",
        help=(
            "Log level: debug, info, warning, error or critical. "
            "Defaults to $NIXSHIM_LOG, then the `logging.level` setting."
        ),
    )
    parser.add_argument(
        "--absolute",
        action="store_true",
        help=(
            "Print the absolute path to nixshim in shell integration code. "
            "Done automatically when nixshim is not on $PATH."
        ),
    )
    parser.add_argument(
        "--nom",
        action="store_true",
        help="Use `nom` (nix-output-monitor) instead of `nix` for running commands.",
    )
    parser.add_argument(
        "shell",
        help=(
            "The shell to use for wrapped commands and the shell environment: "
            "an executable name like `fish` or a path like `/opt/homebrew/bin/fish`."
        ),
    )
