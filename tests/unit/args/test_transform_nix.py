"""Tests for the `nix` argument rewriter."""
from __future__ import annotations

import pytest

from nixshim.core.args import NixArgs, transform_nix
from nixshim.core.exceptions import MalformedArgumentsError

SHELL = "/bin/fish"


def test_develop_gets_command_appended() -> None:
    result = transform_nix(["develop"], SHELL)

    assert result == NixArgs(args=["develop", "--command", SHELL], subcommand="develop")
    assert result.wants_command is True


def test_shell_gets_command_appended_after_positionals() -> None:
    result = transform_nix(["shell", "nixpkgs#hello", "nixpkgs#cowsay"], SHELL)

    assert result.args == ["shell", "nixpkgs#hello", "nixpkgs#cowsay", "--command", SHELL]
    assert result.subcommand == "shell"


def test_build_is_not_injected() -> None:
    result = transform_nix(["build", "--option", "key", "value"], SHELL)

    assert result.args == ["build", "--option", "key", "value"]
    assert result.subcommand == "build"
    assert result.wants_command is False


def test_explicit_short_command_flag_passes_through() -> None:
    args = ["-c", "echo hi"]

    result = transform_nix(args, SHELL)

    assert result.args == args
    assert result.subcommand is None


@pytest.mark.parametrize("flag", ["--help", "--version", "-c", "--command"])
def test_terminal_flags_return_input_unchanged(flag: str) -> None:
    args = ["develop", "--impure", flag, "extra"]

    result = transform_nix(args, SHELL)

    assert result.args == args
    # The subcommand seen before the terminal flag is still reported.
    assert result.subcommand == "develop"


def test_terminal_flag_before_subcommand_reports_no_subcommand() -> None:
    result = transform_nix(["--help", "develop"], SHELL)

    assert result.args == ["--help", "develop"]
    assert result.subcommand is None


def test_rewriting_own_output_is_a_no_op() -> None:
    once = transform_nix(["develop", ".#ci"], SHELL)
    twice = transform_nix(once.args, SHELL)

    assert once.args == ["develop", ".#ci", "--command", SHELL]
    assert twice.args == once.args
    assert twice.subcommand == "develop"


def test_first_subcommand_wins() -> None:
    result = transform_nix(["build", "shell"], SHELL)

    assert result.subcommand == "build"
    assert result.args == ["build", "shell"]


def test_later_develop_does_not_trigger_injection() -> None:
    result = transform_nix(["run", "nixpkgs#hello", "develop"], SHELL)

    assert result.subcommand == "run"
    assert "--command" not in result.args


def test_flag_values_are_not_read_as_subcommands() -> None:
    # `--profile` takes a value, so `build` here is not the subcommand.
    result = transform_nix(["--profile", "build", "develop"], SHELL)

    assert result.subcommand == "develop"
    assert result.args == ["--profile", "build", "develop", "--command", SHELL]


def test_two_value_flags_skip_both_values() -> None:
    result = transform_nix(["--arg", "shell", "develop", "develop"], SHELL)

    assert result.subcommand == "develop"
    assert result.args == ["--arg", "shell", "develop", "develop", "--command", SHELL]


def test_flag_values_that_look_terminal_are_skipped() -> None:
    result = transform_nix(["develop", "--phase", "--help"], SHELL)

    assert result.args == ["develop", "--phase", "--help", "--command", SHELL]


def test_subcommand_after_flags() -> None:
    args = ["--extra-experimental-features", "nix-command flakes", "-L", "develop", "--impure"]

    result = transform_nix(args, SHELL)

    assert result.subcommand == "develop"
    assert result.args == [*args, "--command", SHELL]


def test_unknown_flags_pass_through() -> None:
    result = transform_nix(["develop", "--some-new-flag", "--option=x"], SHELL)

    assert result.args == ["develop", "--some-new-flag", "--option=x", "--command", SHELL]


def test_no_subcommand_means_no_injection() -> None:
    result = transform_nix(["--version-info", "nixpkgs#hello"], SHELL)

    assert result == NixArgs(args=["--version-info", "nixpkgs#hello"], subcommand=None)


def test_empty_arguments() -> None:
    assert transform_nix([], SHELL) == NixArgs(args=[], subcommand=None)


def test_shell_path_is_used_verbatim() -> None:
    result = transform_nix(["shell"], "my shell with spaces")

    assert result.args[-1] == "my shell with spaces"


def test_input_is_not_mutated() -> None:
    args = ["develop", "--impure"]

    transform_nix(args, SHELL)

    assert args == ["develop", "--impure"]


def test_returned_args_are_a_copy_on_pass_through() -> None:
    args = ["--help"]

    result = transform_nix(args, SHELL)
    result.args.append("x")

    assert args == ["--help"]


def test_command_injected_exactly_once() -> None:
    result = transform_nix(["develop", "shell", "develop"], SHELL)

    assert result.args.count("--command") == 1


def test_missing_value_for_one_value_flag() -> None:
    with pytest.raises(MalformedArgumentsError) as excinfo:
        transform_nix(["develop", "--phase"], SHELL)

    err = excinfo.value
    assert err.flag == "--phase"
    assert err.expected == 1
    assert err.available == 0
    assert err.context == {"flag": "--phase", "expected": 1, "available": 0}


def test_missing_second_value_for_two_value_flag() -> None:
    with pytest.raises(MalformedArgumentsError) as excinfo:
        transform_nix(["build", "--option", "cores"], SHELL)

    assert excinfo.value.flag == "--option"
    assert excinfo.value.expected == 2
    assert excinfo.value.available == 1
    assert "`--option` takes 2 arguments but 1 given" in str(excinfo.value)


def test_malformed_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        transform_nix(["-f"], SHELL)
