"""
nixshim env command.

SUMMARY: Print the shell environment code to use nixshim

The code defines `nix` and `nix-shell` functions which call
`nixshim <shell> nix ...` and `nixshim <shell> nix-shell ...` instead.
This is the default command, so `nixshim fish | source` is enough.
"""

from __future__ import annotations

import argparse

from nixshim.cli import OutputFormatter, add_json_flag, get_config, get_shell
from nixshim.core.env import render_shell_env, resolve_wrapper
from nixshim.core.exceptions import NixShimError

SUMMARY = "Print the shell environment code to use nixshim"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        config = get_config(args)
        shell = get_shell(args)
        absolute = bool(getattr(args, "absolute", False) or config.get("env.absolute", False))
        # Only an explicit `--nom` is baked into the generated code; the
        # `nom.enabled` setting is read again each time nixshim runs.
        code = render_shell_env(
            shell,
            wrapper=resolve_wrapper(absolute=absolute),
            nom=bool(getattr(args, "nom", False)),
        )
    except NixShimError as e:
        formatter.error(e, error_code="env_error")
        return 1

    if formatter.json_mode:
        formatter.json_output({"shell": str(shell), "path": shell.path, "code": code})
    else:
        formatter.text(code)
    return 0
