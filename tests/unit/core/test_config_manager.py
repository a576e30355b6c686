"""Tests for layered configuration loading."""
from __future__ import annotations

from pathlib import Path

import pytest

from nixshim.core.config import ConfigManager, config_errors
from nixshim.core.exceptions import ConfigError


def test_bundled_defaults() -> None:
    cfg = ConfigManager().load_config()

    assert cfg["logging"]["level"] == "warning"
    assert cfg["nom"]["enabled"] is False
    assert cfg["programs"] == {
        "nix": "nix",
        "nix_shell": "nix-shell",
        "nom": "nom",
        "nom_shell": "nom-shell",
    }
    assert cfg["environment"]["sourced_var"] == "__ETC_PROFILE_NIX_SOURCED"


def test_user_config_overrides_defaults(user_config) -> None:
    user_config("nom:\n  enabled: true\nprograms:\n  nix: /opt/nix/bin/nix\n")

    manager = ConfigManager()

    assert manager.get("nom.enabled") is True
    assert manager.get("programs.nix") == "/opt/nix/bin/nix"
    assert manager.get("programs.nix_shell") == "nix-shell"


def test_explicit_config_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("env:\n  absolute: true\n", encoding="utf-8")
    monkeypatch.setenv("NIXSHIM_CONFIG", str(path))

    manager = ConfigManager()

    assert manager.user_config_path == path
    assert manager.get("env.absolute") is True


def test_missing_user_config_is_fine(tmp_path: Path) -> None:
    manager = ConfigManager(user_config_path=tmp_path / "nope.yaml")

    assert manager.get("logging.level") == "warning"


def test_empty_user_config_is_fine(user_config) -> None:
    user_config("")

    assert ConfigManager().get("logging.level") == "warning"


def test_env_overrides_with_type_coercion(tmp_path: Path) -> None:
    manager = ConfigManager(
        tmp_path / "none.yaml",
        environ={
            "NIXSHIM_NOM__ENABLED": "true",
            "NIXSHIM_LOGGING__LEVEL": "debug",
            "NIXSHIM_PROGRAMS__NOM": "nom-wrapper",
        },
    )

    assert manager.get("nom.enabled") is True
    assert manager.get("logging.level") == "debug"
    assert manager.get("programs.nom") == "nom-wrapper"


def test_env_overrides_beat_user_config(user_config, monkeypatch: pytest.MonkeyPatch) -> None:
    user_config("nom:\n  enabled: true\n")
    monkeypatch.setenv("NIXSHIM_NOM__ENABLED", "false")

    assert ConfigManager().get("nom.enabled") is False


def test_plain_variables_are_not_overrides() -> None:
    manager = ConfigManager(environ={"NIXSHIM_LOG": "debug", "NIXSHIM_CONFIG": "/nonexistent"})

    assert manager.get("logging.level") == "warning"


def test_malformed_env_key(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "none.yaml", environ={"NIXSHIM_NOM____ENABLED": "true"})

    with pytest.raises(ConfigError):
        manager.load_config()


def test_env_override_into_scalar_fails(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "none.yaml", environ={"NIXSHIM_NOM__ENABLED__DEEPER": "1"})

    with pytest.raises(ConfigError):
        manager.load_config()


def test_invalid_yaml(user_config) -> None:
    user_config("nom: [unclosed\n")

    with pytest.raises(ConfigError) as excinfo:
        ConfigManager().load_config()

    assert "Cannot read config file" in str(excinfo.value)


def test_non_mapping_yaml(user_config) -> None:
    user_config("- just\n- a list\n")

    with pytest.raises(ConfigError):
        ConfigManager().load_config()


def test_schema_rejects_unknown_keys(user_config) -> None:
    user_config("programs:\n  nixx: nix\n")

    with pytest.raises(ConfigError) as excinfo:
        ConfigManager().load_config()

    assert "programs" in str(excinfo.value)
    assert excinfo.value.context["errors"]


def test_schema_rejects_wrong_types() -> None:
    errors = config_errors({"nom": {"enabled": "yes"}, "programs": {"nix": ""}})

    assert len(errors) == 2
    assert errors[0].startswith("nom.enabled:")
    assert errors[1].startswith("programs.nix:")


def test_get_default_for_missing_key() -> None:
    manager = ConfigManager()

    assert manager.get("nope.nothing", "fallback") == "fallback"
    assert manager.get("logging.level.deeper") is None


def test_config_is_cached_per_manager(user_config) -> None:
    path = user_config("nom:\n  enabled: true\n")
    manager = ConfigManager()
    assert manager.get("nom.enabled") is True

    path.write_text("nom:\n  enabled: false\n", encoding="utf-8")

    assert manager.get("nom.enabled") is True
    assert ConfigManager().get("nom.enabled") is False
