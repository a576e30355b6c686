import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'nixshim'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from nixshim.core.stdlib_logging import reset_logging_for_tests

SHELL = "/run/current-system/sw/bin/fish"


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path, monkeypatch):
    """Keep developer configuration and NIXSHIM_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("NIXSHIM_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    reset_logging_for_tests()
    yield
    reset_logging_for_tests()


@pytest.fixture
def shell_path() -> str:
    return SHELL


@pytest.fixture
def user_config(tmp_path):
    """Write ``$XDG_CONFIG_HOME/nixshim/config.yaml`` and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "xdg" / "nixshim" / "config.yaml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def exec_calls(monkeypatch):
    """Replace os.execvpe with a recorder; returns the list of calls."""
    calls = []

    def _fake_execvpe(file, args, env):
        calls.append({"file": file, "args": list(args), "env": dict(env)})

    monkeypatch.setattr(os, "execvpe", _fake_execvpe)
    return calls


@pytest.fixture
def nixshim_exe(tmp_path, monkeypatch):
    """Create an executable ``nixshim`` in ``tmp_path/<directory>`` and run as it."""

    def _install(directory: str = "bin") -> Path:
        exe = tmp_path / directory / "nixshim"
        exe.parent.mkdir(parents=True, exist_ok=True)
        exe.write_text("#!/bin/sh\n", encoding="utf-8")
        exe.chmod(0o755)
        monkeypatch.setattr(sys, "argv", [str(exe)])
        return exe

    return _install
