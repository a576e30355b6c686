"""
nixshim nix-shell command.

SUMMARY: Execute a `nix-shell` command, running the shell if no command is explicitly given
"""

from __future__ import annotations

import argparse

from nixshim.cli._args import add_wrapped_args
from nixshim.cli._exec import run_wrapped
from nixshim.core.launch import Wrapped

SUMMARY = "Execute a `nix-shell` command, running the shell if no command is explicitly given"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_wrapped_args(parser, "nix-shell")


def main(args: argparse.Namespace) -> int:
    return run_wrapped(args, Wrapped.NIX_SHELL)
