"""
nixshim nix command.

SUMMARY: Execute a `nix` command, running the shell if no command is explicitly given

`nix develop` and `nix shell` get `--command <shell>` appended, so they start
your shell instead of bash. Other subcommands run unchanged.
"""

from __future__ import annotations

import argparse

from nixshim.cli._args import add_wrapped_args
from nixshim.cli._exec import run_wrapped
from nixshim.core.launch import Wrapped

SUMMARY = "Execute a `nix` command, running the shell if no command is explicitly given"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_wrapped_args(parser, "nix")


def main(args: argparse.Namespace) -> int:
    return run_wrapped(args, Wrapped.NIX)
