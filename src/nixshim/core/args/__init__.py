"""Argument rewriting for `nix` and `nix-shell`.

Both rewriters are pure functions: they do no I/O and never mutate their
input.
"""
from __future__ import annotations

from .arity import Arity, classify, take_values
from .nix import NixArgs, transform_nix
from .nix_shell import transform_nix_shell
from .tables import NIX_COMMAND_SUBCOMMANDS, NIX_FLAGS, NIX_SHELL_FLAGS, NIX_SUBCOMMANDS

__all__ = [
    "Arity",
    "classify",
    "take_values",
    "NixArgs",
    "transform_nix",
    "transform_nix_shell",
    "NIX_FLAGS",
    "NIX_SHELL_FLAGS",
    "NIX_SUBCOMMANDS",
    "NIX_COMMAND_SUBCOMMANDS",
]
