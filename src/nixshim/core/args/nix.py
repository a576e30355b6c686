"""Rewrite `nix` arguments so `nix develop` and `nix shell` run a given command."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .arity import Arity, classify, take_values
from .tables import NIX_COMMAND_SUBCOMMANDS, NIX_FLAGS, NIX_SUBCOMMANDS


@dataclass(frozen=True)
class NixArgs:
    """Arguments for a `nix` invocation."""

    args: list[str]
    # First top-level subcommand seen, like `build` or `shell`.
    subcommand: Optional[str] = None

    @property
    def wants_command(self) -> bool:
        """Whether the subcommand starts a shell that runs `--command`."""
        return self.subcommand in NIX_COMMAND_SUBCOMMANDS


def transform_nix(args: Sequence[str], command: str) -> NixArgs:
    """Transform arguments to a `nix` invocation to run ``command``.

    Only `nix develop` and `nix shell` get `--command <command>` appended; the
    arguments of every other subcommand are copied through unchanged.

    If the arguments already contain ``--command``/``-c`` (or ``--help`` or
    ``--version``) the original arguments are returned as-is.

    The subcommand is the *first* token matching a known subcommand name,
    wherever it appears. This is a heuristic: nothing here knows which
    positional arguments belong to which flag beyond the arity table.

    Raises:
        MalformedArgumentsError: a flag is missing some of its values.
    """
    ret: list[str] = []
    subcommand: Optional[str] = None

    i = 0
    while i < len(args):
        token = args[i]
        ret.append(token)

        arity = classify(NIX_FLAGS, token)
        if arity is Arity.TERMINAL:
            # We already have a command to run.
            return NixArgs(args=list(args), subcommand=subcommand)
        if arity is not None:
            values = take_values(args, i, arity)
            ret.extend(values)
            i += len(values)
        elif token in NIX_SUBCOMMANDS and subcommand is None:
            subcommand = token

        i += 1

    # `--command` goes last: every positional argument after it is passed to
    # the command, unlike `nix-shell --command` which takes a single string.
    if subcommand in NIX_COMMAND_SUBCOMMANDS:
        ret.extend(["--command", command])

    return NixArgs(args=ret, subcommand=subcommand)


__all__ = ["NixArgs", "transform_nix"]
