"""Pick the program to run for a wrapped invocation and replace this process with it."""
from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Sequence

from nixshim.core.args import transform_nix, transform_nix_shell
from nixshim.core.exceptions import LaunchError

logger = logging.getLogger(__name__)

# Set by the Nix profile scripts once sourced:
# - $HOME/.nix-profile/etc/profile.d/nix.sh
# - /nix/var/nix/profiles/default/etc/profile.d/nix-daemon.sh
# Exporting it keeps the shell we start from sourcing them again and clobbering $PATH.
NIX_SOURCED_VAR = "__ETC_PROFILE_NIX_SOURCED"

DEFAULT_PROGRAMS: Mapping[str, str] = {
    "nix": "nix",
    "nix_shell": "nix-shell",
    "nom": "nom",
    "nom_shell": "nom-shell",
}


class Wrapped(Enum):
    """The external command being wrapped."""

    NIX = "nix"
    NIX_SHELL = "nix-shell"


@dataclass(frozen=True)
class Launch:
    """A fully rewritten invocation, ready to exec."""

    program: str
    args: list[str]
    env: Dict[str, str] = field(default_factory=dict)
    subcommand: Optional[str] = None

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def display(self) -> str:
        """The command line, shell-quoted, for logs."""
        return shlex.join(self.argv)


def build_launch(
    wrapped: Wrapped,
    args: Sequence[str],
    shell_path: str,
    *,
    nom: bool = False,
    programs: Optional[Mapping[str, str]] = None,
    sourced_var: str = NIX_SOURCED_VAR,
) -> Launch:
    """Rewrite ``args`` for ``wrapped`` and choose the program to run.

    With ``nom``, `nix-shell` becomes `nom-shell`, and `nix` becomes `nom`
    for the subcommands that start a shell (`develop` and `shell`).

    Raises:
        MalformedArgumentsError: a flag is missing some of its values.
    """
    names = {**DEFAULT_PROGRAMS, **(programs or {})}
    env = {sourced_var: "1"}

    if wrapped is Wrapped.NIX_SHELL:
        new_args = transform_nix_shell(args, shell_path)
        program = names["nom_shell"] if nom else names["nix_shell"]
        return Launch(program=program, args=new_args, env=env)

    nix_args = transform_nix(args, shell_path)
    program = names["nom"] if nom and nix_args.wants_command else names["nix"]
    return Launch(program=program, args=nix_args.args, env=env, subcommand=nix_args.subcommand)


def exec_launch(launch: Launch) -> None:
    """Replace the current process with ``launch``.

    Does not return when the program starts.

    Raises:
        LaunchError: the program could not be executed.
    """
    logger.debug("launching %s: %s", launch.program, launch.display())
    env = {**os.environ, **launch.env}
    try:
        os.execvpe(launch.program, launch.argv, env)
    except OSError as exc:
        raise LaunchError(
            f"Failed to execute `{launch.program}`: {exc.strerror or exc}",
            program=launch.program,
            suggestion=f"Is `{launch.program}` installed and present in your `$PATH`?",
            context={"command": launch.display()},
        ) from exc


__all__ = [
    "NIX_SOURCED_VAR",
    "DEFAULT_PROGRAMS",
    "Wrapped",
    "Launch",
    "build_launch",
    "exec_launch",
]
