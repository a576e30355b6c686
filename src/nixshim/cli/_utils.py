"""Shared CLI utility functions.

Common helpers used across nixshim commands so they read configuration,
the shell and the wrapped arguments the same way.
"""
from __future__ import annotations

import argparse
from typing import Mapping

from nixshim.core.config import ConfigManager
from nixshim.core.launch import NIX_SOURCED_VAR, Launch, Wrapped, build_launch
from nixshim.core.shell import Shell


def get_config(args: argparse.Namespace) -> ConfigManager:
    """Get the ConfigManager attached by the dispatcher, or a fresh one.

    Args:
        args: Parsed arguments, possibly carrying ``_config``

    Returns:
        ConfigManager: Loaded configuration manager
    """
    config = getattr(args, "_config", None)
    if config is None:
        config = ConfigManager()
        args._config = config
    return config


def get_shell(args: argparse.Namespace) -> Shell:
    """Get the user's shell from the positional ``shell`` argument.

    Raises:
        ShellDetectionError: the path has no file name.
    """
    shell = getattr(args, "_shell", None)
    if shell is None:
        shell = Shell.from_path(args.shell)
        args._shell = shell
    return shell


def use_nom(args: argparse.Namespace, config: ConfigManager) -> bool:
    """Whether to run nix-output-monitor instead of nix (flag or `nom.enabled`)."""
    return bool(getattr(args, "nom", False) or config.get("nom.enabled", False))


def wrapped_argv(args: argparse.Namespace) -> list[str]:
    """Arguments meant for the wrapped program, minus a leading ``--``."""
    argv = list(getattr(args, "argv", []) or [])
    if argv and argv[0] == "--":
        argv = argv[1:]
    return argv


def launch_for(args: argparse.Namespace, wrapped: Wrapped) -> Launch:
    """Build the rewritten invocation of ``wrapped`` for these arguments.

    Raises:
        MalformedArgumentsError: a wrapped flag is missing some of its values.
    """
    config = get_config(args)
    shell = get_shell(args)
    programs: Mapping[str, str] = config.get("programs", {}) or {}
    return build_launch(
        wrapped,
        wrapped_argv(args),
        shell.path,
        nom=use_nom(args, config),
        programs=programs,
        sourced_var=str(config.get("environment.sourced_var", NIX_SOURCED_VAR)),
    )
