"""Flag classification tables for `nix` and `nix-shell`.

These approximate the real command-line grammars of the two tools. A flag
missing from a table is passed through untouched; if it actually takes a
value, that value is then scanned as if it were its own token. Keep the
tables in sync with upstream when new flags appear.

The two tables are deliberately independent: the same spelling can mean
different things to each tool (``-k`` takes a value for ``nix develop`` but
is ``--keep-going`` for ``nix-shell``).
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from .arity import Arity


def _build_table(
    *,
    terminal: Iterable[str],
    two: Iterable[str],
    one: Iterable[str],
    zero: Iterable[str],
) -> Mapping[str, Arity]:
    table: dict[str, Arity] = {}
    for arity, flags in (
        (Arity.TERMINAL, terminal),
        (Arity.TWO, two),
        (Arity.ONE, one),
        (Arity.ZERO, zero),
    ):
        for flag in flags:
            if flag in table:
                raise ValueError(f"Flag listed twice: {flag}")
            table[flag] = arity
    return MappingProxyType(table)


# Boolean nix settings; each is accepted as `--name` and `--no-name`.
_NIX_BOOLEAN_SETTINGS = (
    "accept-flake-config",
    "allow-dirty",
    "allow-import-from-derivation",
    "allow-symlinked-store",
    "allow-unsafe-native-code-during-evaluation",
    "auto-optimise-store",
    "builders-use-substitutes",
    "compress-build-log",
    "darwin-log-sandbox-violations",
    "enforce-determinism",
    "eval-cache",
    "fallback",
    "fsync-metadata",
    "http2",
    "ignore-try",
    "impersonate-linux-26",
    "keep-build-log",
    "keep-derivations",
    "keep-env-derivations",
    "keep-failed",
    "keep-going",
    "keep-outputs",
    "preallocate-contents",
    "print-missing",
    "pure-eval",
    "require-sigs",
    "restrict-eval",
    "run-diff-hook",
    "sandbox",
    "sandbox-fallback",
    "show-trace",
    "substitute",
    "sync-before-registering",
    "trace-function-calls",
    "trace-verbose",
    "use-case-hack",
    "use-registries",
    "use-sqlite-wal",
    "warn-dirty",
)

# nix settings taking a single value.
_NIX_VALUE_SETTINGS = (
    "access-tokens",
    "allowed-impure-host-deps",
    "allowed-uris",
    "allowed-users",
    "bash-prompt",
    "bash-prompt-prefix",
    "bash-prompt-suffix",
    "build-hook",
    "build-poll-interval",
    "build-users-group",
    "builders",
    "commit-lockfile-summary",
    "connect-timeout",
    "cores",
    "diff-hook",
    "download-attempts",
    "download-speed",
    "experimental-features",
    "extra-access-tokens",
    "extra-allowed-impure-host-deps",
    "extra-allowed-uris",
    "extra-allowed-users",
    "extra-experimental-features",
    "extra-extra-platforms",
    "extra-hashed-mirrors",
    "extra-nix-path",
    "extra-platforms",
    "extra-plugin-files",
    "extra-sandbox-paths",
    "extra-secret-key-files",
    "extra-substituters",
    "extra-system-features",
    "extra-trusted-public-keys",
    "extra-trusted-substituters",
    "extra-trusted-users",
    "flake-registry",
    "gc-reserved-space",
    "hashed-mirrors",
    "http-connections",
    "log-lines",
    "max-build-log-size",
    "max-free",
    "max-jobs",
    "max-silent-time",
    "min-free",
    "min-free-check-interval",
    "nar-buffer-size",
    "narinfo-cache-negative-ttl",
    "narinfo-cache-positive-ttl",
    "netrc-file",
    "nix-path",
    "plugin-files",
    "post-build-hook",
    "pre-build-hook",
    "repeat",
    "sandbox-paths",
    "secret-key-files",
    "stalled-download-timeout",
    "store",
    "substituters",
    "system",
    "system-features",
    "tarball-ttl",
    "timeout",
    "trusted-public-keys",
    "trusted-substituters",
    "trusted-users",
    "user-agent-suffix",
)

NIX_FLAGS: Mapping[str, Arity] = _build_table(
    terminal=("--help", "--version", "-c", "--command"),
    two=(
        "--option",
        "--redirect",
        "--override-flake",
        "--arg",
        "--argstr",
        "--override-input",
    ),
    one=(
        "--log-format",
        *(f"--{name}" for name in _NIX_VALUE_SETTINGS),
        # nix develop
        "-k",
        "--keep",
        "--phase",
        "--profile",
        "--unset",
        "--eval-store",
        "-I",
        "--include",
        "--inputs-from",
        "--update-input",
        "--expr",
        "-f",
        "--file",
    ),
    zero=(
        "--offline",
        "--refresh",
        "--debug",
        "-L",
        "--print-build-logs",
        "--quiet",
        "-v",
        "--verbose",
        *(
            flag
            for name in _NIX_BOOLEAN_SETTINGS
            for flag in (f"--{name}", f"--no-{name}")
        ),
        "--relaxed-sandbox",
        # nix develop
        "--build",
        "--check",
        "--configure",
        "--debugger",
        "-i",
        "--ignore-environment",
        "--install",
        "--installcheck",
        "--unpack",
        "--impure",
        "--commit-lock-file",
        "--no-registries",
        "--no-update-lock-file",
        "--no-write-lock-file",
        "--recreate-lock-file",
        "--derivation",
    ),
)

NIX_SUBCOMMANDS: frozenset[str] = frozenset(
    {
        "build",
        "develop",
        "flake",
        "help",
        "profile",
        "repl",
        "run",
        "search",
        "shell",
        "bundle",
        "copy",
        "edit",
        "eval",
        "fmt",
        "log",
        "path-info",
        "registry",
        "why-depends",
        "daemon",
        "describe-stores",
        "hash",
        "key",
        "nar",
        "print-dev-env",
        "realisation",
        "show-config",
        "show-derivation",
        "store",
        "doctor",
        "upgrade-nix",
    }
)

# Subcommands that start an interactive shell and accept `--command`.
NIX_COMMAND_SUBCOMMANDS: frozenset[str] = frozenset({"develop", "shell"})

NIX_SHELL_FLAGS: Mapping[str, Arity] = _build_table(
    terminal=("--command", "--run", "--help", "--version"),
    two=(
        "--arg",
        "--argstr",
        # nix-store
        "--option",
        # nix-build
        "--override-flake",
    ),
    one=(
        "--attr",
        "-A",
        "--exclude",
        "--keep",
        # shebang interpreter
        "-i",
        # nix-store
        "--add-root",
        # nix-build
        "--cores",
        "--max-silent-time",
        "--timeout",
        "--store-uri",
        "-I",
        "--include",
        "--eval-store",
        "-o",
        "--out-link",
    ),
    zero=(
        "--pure",
        "--impure",
        # Both of these change how positional arguments are read, which the
        # scan does not care about.
        "-p",
        "--packages",
        "-E",
        "--expr",
        # nix-store
        "--dry-run",
        "--ignore-unknown",
        "--check",
        # nix-build
        "-Q",
        "--no-build-output",
        "-K",
        "--keep-failed",
        "-k",
        "--keep-going",
        "--fallback",
        "--readonly-mode",
        "--no-gc-warning",
        "--add-drv-link",
        "--indirect",
        "--no-out-link",
        "--no-link",
        "--drv-link",
        "--repair",
        "--run-env",
    ),
)


__all__ = [
    "NIX_FLAGS",
    "NIX_SUBCOMMANDS",
    "NIX_COMMAND_SUBCOMMANDS",
    "NIX_SHELL_FLAGS",
]
