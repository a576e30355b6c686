"""Layered configuration: bundled defaults, user file, environment."""
from __future__ import annotations

from .manager import CONFIG_PATH_VAR, ENV_PREFIX, ConfigManager
from .validation import config_errors, validate_config

__all__ = ["ConfigManager", "ENV_PREFIX", "CONFIG_PATH_VAR", "config_errors", "validate_config"]
