"""Rewrite `nix-shell` arguments to run a given command."""
from __future__ import annotations

from typing import Sequence

from .arity import Arity, classify, take_values
from .tables import NIX_SHELL_FLAGS


def transform_nix_shell(args: Sequence[str], command: str) -> list[str]:
    """Transform arguments to a `nix-shell` invocation to run ``command``.

    `nix-shell` has no subcommands, so `--command <command>` is always
    prepended unless the arguments already carry ``--command``, ``--run``,
    ``--help`` or ``--version``; then the original arguments are returned.

    Raises:
        MalformedArgumentsError: a flag is missing some of its values.
    """
    ret: list[str] = ["--command", command]

    i = 0
    while i < len(args):
        token = args[i]
        ret.append(token)

        arity = classify(NIX_SHELL_FLAGS, token)
        if arity is Arity.TERMINAL:
            return list(args)
        if arity is not None:
            values = take_values(args, i, arity)
            ret.extend(values)
            i += len(values)

        i += 1

    return ret


__all__ = ["transform_nix_shell"]
