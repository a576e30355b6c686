"""
Auto-discovery CLI dispatcher for nixshim.

Scans cli/commands/ for command modules and registers them as subcommands.
Each module provides SUMMARY, register_args(parser) and main(args) -> int.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import os
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from nixshim.cli._args import add_global_flags
from nixshim.cli._output import OutputFormatter
from nixshim.cli._utils import get_shell
from nixshim.core.config import ConfigManager
from nixshim.core.exceptions import NixShimError
from nixshim.core.stdlib_logging import DEFAULT_FORMAT, LOG_LEVEL_VAR, configure_logging

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "env"


@lru_cache(maxsize=1)
def discover_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands.

    Returns:
        Dict mapping module name (e.g. ``nix_shell``) to command info dict
    """
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        try:
            module = importlib.import_module(f"nixshim.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", cmd_name),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with auto-discovered commands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="nixshim",
        description=(
            "A `nix` and `nix-shell` wrapper for shells other than `bash`.\n\n"
            "Use by adding `nixshim fish | source` (or the equivalent for your "
            "shell) to your shell configuration."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    add_global_flags(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description=f"Available commands (default: {DEFAULT_COMMAND})",
        metavar="<command>",
    )

    for cmd_name, cmd_info in discover_commands().items():
        primary_name = cmd_name.replace("_", "-")
        aliases = [cmd_name] if primary_name != cmd_name else []
        cmd_parser = subparsers.add_parser(
            primary_name,
            aliases=aliases,
            help=cmd_info["summary"],
        )
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def _get_version() -> str:
    """Get nixshim version string."""
    from nixshim import __version__

    return __version__


def _log_level(args: argparse.Namespace, config: ConfigManager) -> str:
    """`--log`, then $NIXSHIM_LOG, then the `logging.level` setting."""
    return str(
        getattr(args, "log", None)
        or os.environ.get(LOG_LEVEL_VAR)
        or config.get("logging.level", "warning")
    )


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the nixshim CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    formatter = OutputFormatter(json_mode=bool(getattr(args, "json", False)))

    try:
        config = ConfigManager()
        config.load_config()
        args._config = config
        configure_logging(_log_level(args, config), fmt=config.get("logging.format", DEFAULT_FORMAT))
        shell = get_shell(args)
    except NixShimError as e:
        formatter.error(e, error_code="startup_error")
        return 1

    logger.debug("detected shell %s from %r", shell, args.shell)

    func = getattr(args, "_func", None)
    if func is None:
        func = discover_commands()[DEFAULT_COMMAND]["main"]
    return int(func(args))


if __name__ == "__main__":
    sys.exit(main())
