"""
nixshim args command.

SUMMARY: Show how a `nix` or `nix-shell` command would be rewritten, without running it
"""

from __future__ import annotations

import argparse

from nixshim.cli import OutputFormatter, add_json_flag, add_wrapped_args, launch_for
from nixshim.cli._exec import EXIT_MALFORMED
from nixshim.core.exceptions import MalformedArgumentsError, NixShimError
from nixshim.core.launch import Wrapped

SUMMARY = "Show how a `nix` or `nix-shell` command would be rewritten, without running it"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_json_flag(parser)
    parser.add_argument(
        "target",
        choices=[w.value for w in Wrapped],
        help="Wrapped program",
    )
    add_wrapped_args(parser, "the wrapped program")


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        launch = launch_for(args, Wrapped(args.target))
    except MalformedArgumentsError as e:
        formatter.error(e, message=f"Malformed arguments: {e}", error_code="malformed_arguments")
        return EXIT_MALFORMED
    except NixShimError as e:
        formatter.error(e, error_code="args_error")
        return 1

    if formatter.json_mode:
        formatter.json_output(
            {
                "program": launch.program,
                "args": launch.args,
                "subcommand": launch.subcommand,
                "env": launch.env,
                "command": launch.display(),
            }
        )
    else:
        formatter.text(launch.display())
        if launch.subcommand:
            formatter.text_kv("subcommand", launch.subcommand)
    return 0
