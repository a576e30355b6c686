"""Identify a user's shell from the path (or name) of its executable."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath

from nixshim.core.exceptions import ShellDetectionError


class ShellKind(Enum):
    ZSH = "zsh"
    BASH = "bash"
    FISH = "fish"
    NUSHELL = "nushell"
    XONSH = "xonsh"
    OTHER = "other"


_PREFIXES = (
    ("zsh", ShellKind.ZSH),
    ("bash", ShellKind.BASH),
    ("fish", ShellKind.FISH),
    ("xonsh", ShellKind.XONSH),
    ("nushell", ShellKind.NUSHELL),
)


def _kind_from_name(name: str) -> ShellKind:
    if name == "nu":
        return ShellKind.NUSHELL
    for prefix, kind in _PREFIXES:
        if name.startswith(prefix):
            return kind
    return ShellKind.OTHER


@dataclass(frozen=True)
class Shell:
    """A user's shell.

    ``path`` is kept exactly as given; it may be a bare executable name like
    ``fish`` or a full path like ``/opt/homebrew/bin/fish``.
    """

    kind: ShellKind
    path: str
    name: str

    @classmethod
    def from_path(cls, path: str) -> "Shell":
        name = PurePath(path).name if path else ""
        if name in ("", ".", ".."):
            raise ShellDetectionError(f"Path has no filename: {path!r}", context={"path": path})
        return cls(kind=_kind_from_name(name), path=path, name=name)

    def __str__(self) -> str:
        if self.kind is ShellKind.OTHER:
            return self.name
        return self.kind.value


__all__ = ["Shell", "ShellKind"]
