"""
nixshim configuration management (layered YAML).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import yaml

from nixshim.core.exceptions import ConfigError
from nixshim.core.utils.merge import deep_merge
from nixshim.data import get_data_path

from .validation import validate_config

logger = logging.getLogger(__name__)

ENV_PREFIX = "NIXSHIM_"
CONFIG_PATH_VAR = "NIXSHIM_CONFIG"


class ConfigManager:
    """Load, merge, and validate nixshim configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: NIXSHIM_<SECTION>__<KEY>
    2. User config: $NIXSHIM_CONFIG, else $XDG_CONFIG_HOME/nixshim/config.yaml
    3. Bundled defaults: nixshim.data/config/defaults.yaml

    Only variables containing ``__`` are treated as overrides, so plain
    variables such as ``NIXSHIM_LOG`` and ``NIXSHIM_CONFIG`` are left alone.
    """

    def __init__(
        self,
        user_config_path: Optional[Path] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.environ: Mapping[str, str] = os.environ if environ is None else environ
        self.core_config_path = get_data_path("config", "defaults.yaml")
        self.user_config_path = user_config_path or self._default_user_config_path()
        self._config: Optional[Dict[str, Any]] = None

    def _default_user_config_path(self) -> Path:
        explicit = self.environ.get(CONFIG_PATH_VAR)
        if explicit:
            return Path(explicit).expanduser()
        xdg = self.environ.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else Path.home() / ".config"
        return base / "nixshim" / "config.yaml"

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            return {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}", context={"path": str(path)}) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping, got {type(data).__name__}",
                context={"path": str(path)},
            )
        return data

    # ========== Environment overrides ==========

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(self.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX) :]
            if "__" not in raw:
                continue
            path = [seg.lower() for seg in raw.split("__")]
            if any(seg == "" for seg in path):
                raise ConfigError(f"Malformed {ENV_PREFIX}* key: empty segment in '{key}'", context={"key": key})
            yield path, self._coerce_type(self.environ[key])

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self._iter_env_overrides():
            cur = cfg
            for part in path[:-1]:
                nxt = cur.setdefault(part, {})
                if not isinstance(nxt, dict):
                    raise ConfigError(
                        f"Cannot override {'.'.join(path)}: '{part}' is not a section",
                        context={"path": ".".join(path)},
                    )
                cur = nxt
            logger.debug("config override %s=%r", ".".join(path), value)
            cur[path[-1]] = value

    # ========== Loading ==========

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load the merged configuration (cached per manager).

        Raises:
            ConfigError: a file is unreadable or the result fails validation.
        """
        if self._config is None:
            cfg = self.load_yaml(self.core_config_path)
            user_cfg = self.load_yaml(self.user_config_path)
            if user_cfg:
                logger.debug("loaded user config from %s", self.user_config_path)
            cfg = deep_merge(cfg, user_cfg)
            self.apply_env_overrides(cfg)
            if validate:
                validate_config(cfg)
            self._config = cfg
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-notation key.

        Example:
            >>> manager.get("programs.nix")
            'nix'
            >>> manager.get("nonexistent.key", "fallback")
            'fallback'
        """
        current: Any = self.load_config()
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current


__all__ = ["ConfigManager", "ENV_PREFIX", "CONFIG_PATH_VAR"]
