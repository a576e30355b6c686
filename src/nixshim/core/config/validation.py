"""Schema validation for nixshim configuration.

Schemas are JSON Schema documents written in YAML and bundled under
``nixshim.data/schemas/``.
"""
from __future__ import annotations

from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from nixshim.core.exceptions import ConfigError
from nixshim.data import read_yaml

CONFIG_SCHEMA = "config.schema.yaml"


def load_schema(schema_name: str = CONFIG_SCHEMA) -> Dict[str, Any]:
    schema = read_yaml("schemas", schema_name)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


def config_errors(config: Dict[str, Any]) -> List[str]:
    """Return validation error messages for ``config`` (empty if valid)."""
    validator = Draft202012Validator(load_schema())
    errors: List[str] = []
    for err in sorted(validator.iter_errors(config), key=lambda e: list(e.path)):
        where = ".".join(str(p) for p in err.path) or "<root>"
        errors.append(f"{where}: {err.message}")
    return errors


def validate_config(config: Dict[str, Any]) -> None:
    """Raise ConfigError when ``config`` does not match the bundled schema."""
    errors = config_errors(config)
    if errors:
        raise ConfigError(
            "Invalid configuration:\n" + "\n".join(f"- {e}" for e in errors),
            context={"errors": errors},
        )


__all__ = ["load_schema", "config_errors", "validate_config"]
