"""Shell integration code: `nix` and `nix-shell` functions that call nixshim.

The snippets live in ``nixshim.data/templates/`` and are rendered with
Jinja2. Each one defines `nix` and `nix-shell` as shell functions that call
``<wrapper> nix -- ARGS`` and ``<wrapper> nix-shell -- ARGS``, where the
wrapper is the nixshim executable followed by its own arguments.
"""
from __future__ import annotations

import logging
import os
import shlex
import sys
from pathlib import Path
from typing import Mapping, Optional

from jinja2 import Environment, StrictUndefined

from nixshim.core.exceptions import NixShimError, UnsupportedShellError
from nixshim.core.shell import Shell, ShellKind
from nixshim.data import read_text

logger = logging.getLogger(__name__)

PROGRAM_NAME = "nixshim"

TEMPLATES: Mapping[ShellKind, str] = {
    ShellKind.ZSH: "env.sh",
    ShellKind.BASH: "env.sh",
    ShellKind.FISH: "env.fish",
    ShellKind.NUSHELL: "env.nu",
    ShellKind.XONSH: "env.xsh",
}

SUPPORTED_SHELLS_NOTE = "Supported shells are: `zsh`, `fish`, `nushell`, `xonsh`, and `bash`"


def current_exe() -> Path:
    """Absolute path of the running nixshim executable."""
    argv0 = sys.argv[0] if sys.argv else ""
    if not argv0:
        raise NixShimError("Unable to determine absolute path of `nixshim`")
    return Path(argv0).resolve()


def executable_is_on_path(executable: Path, path_var: Optional[str] = None) -> bool:
    """Whether ``executable``'s directory is listed in ``$PATH``."""
    if path_var is None:
        path_var = os.environ.get("PATH")
        if path_var is None:
            raise NixShimError("Failed to get $PATH environment variable")
    directory = executable.parent
    return any(Path(component) == directory for component in path_var.split(os.pathsep) if component)


def resolve_wrapper(*, absolute: bool = False) -> str:
    """Command used to call nixshim from the shell integration code.

    The bare program name is used unless ``absolute`` is set or nixshim is
    not reachable through ``$PATH``. When nixshim was started with
    ``python -m nixshim`` the same interpreter is called instead.
    """
    exe = current_exe()
    if exe.name == "__main__.py" or not os.access(exe, os.X_OK):
        # Started as `python -m nixshim`: the script itself cannot be run.
        logger.debug("running as a module, calling nixshim through %s", sys.executable)
        return shlex.join([sys.executable, "-m", PROGRAM_NAME])
    if absolute or not executable_is_on_path(exe):
        logger.debug("using absolute path to nixshim: %s", exe)
        return shlex.quote(str(exe))
    return PROGRAM_NAME


def wrapper_command(program: str, shell: Shell, *, nom: bool = False) -> str:
    """``program`` plus the arguments that pin the shell (and `--nom`)."""
    parts = [program, shlex.quote(shell.path)]
    if nom:
        parts.append("--nom")
    return " ".join(parts)


def render_shell_env(shell: Shell, *, wrapper: str = PROGRAM_NAME, nom: bool = False) -> str:
    """Render the integration code for ``shell``.

    Raises:
        UnsupportedShellError: there is no template for this kind of shell.
    """
    template_name = TEMPLATES.get(shell.kind)
    if template_name is None:
        raise UnsupportedShellError(
            f"I don't know how to generate a shell environment for `{shell}`",
            note=SUPPORTED_SHELLS_NOTE,
            context={"shell": str(shell), "path": shell.path},
        )

    env = Environment(undefined=StrictUndefined, keep_trailing_newline=False, autoescape=False)
    template = env.from_string(read_text("templates", template_name))
    return template.render(wrapper=wrapper_command(wrapper, shell, nom=nom))


__all__ = [
    "PROGRAM_NAME",
    "TEMPLATES",
    "current_exe",
    "executable_is_on_path",
    "resolve_wrapper",
    "wrapper_command",
    "render_shell_env",
]
