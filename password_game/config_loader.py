"""
Config Loader: single source of truth for runtime settings.

Loads config/password_game.yaml, resolves ${VAR} and ${VAR:-default} from os.environ.
Exposes get_config() for dotted-key access (e.g. config.game.rule_set).

Usage:
    from password_game.config_loader import get_config, get_game_settings
    cfg = get_config()
    port = cfg.server.port
    settings = get_game_settings()
"""
import os
import re
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from password_game.schemas import GameSettings

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
DEFAULT_CONFIG_PATH = Path(
    os.environ.get("PASSWORD_GAME_CONFIG", _CONFIG_DIR / "password_game.yaml")
)

# Pattern: ${VAR} or ${VAR:-default}
_ENV_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def _resolve_env(value: Any) -> Any:
    """Recursively resolve ${VAR} and ${VAR:-default} in strings. Return as-is for non-strings."""
    if isinstance(value, str):
        def replacer(match):
            var_name = match.group(1)
            default = match.group(2)
            return os.environ.get(var_name, default if default is not None else "")
        return _ENV_PATTERN.sub(replacer, value)
    if isinstance(value, dict):
        return {k: _resolve_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_resolve_env(item) for item in value]
    return value


class _ConfigNode:
    """Read-only dotted access to nested dict. config.game.rule_set -> config["game"]["rule_set"]"""

    def __init__(self, data: Dict[str, Any]):
        self._data = data if isinstance(data, dict) else {}

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            return object.__getattribute__(self, name)
        val = self._data.get(name)
        if isinstance(val, dict):
            return _ConfigNode(val)
        return val

    def __getitem__(self, key: str) -> Any:
        val = self._data.get(key)
        if isinstance(val, dict):
            return _ConfigNode(val)
        return val

    def get(self, key: str, default: Any = None) -> Any:
        val = self._data.get(key, default)
        if isinstance(val, dict):
            return _ConfigNode(val)
        return val

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def __repr__(self) -> str:
        return f"Config({list(self._data.keys())})"


_config: Optional[_ConfigNode] = None


def _load_raw(path: Path) -> Dict[str, Any]:
    """Load YAML file. Returns empty dict if not found."""
    if not path.exists():
        logger.warning("Config not found at %s, using built-in defaults", path)
        return {}
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def load_config(path: Optional[Path] = None) -> _ConfigNode:
    """
    Load and resolve config. Caches result. Call with path=None to use default.
    """
    global _config
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    resolved = _resolve_env(_load_raw(cfg_path))
    _config = _ConfigNode(resolved)
    return _config


def get_config(path: Optional[Path] = None) -> _ConfigNode:
    """
    Get config singleton. Loads on first call, then returns cached.
    Use path= to force reload from a specific file.
    """
    global _config
    if path is not None:
        return load_config(path)
    if _config is None:
        load_config()
    return _config


def reload_config(path: Optional[Path] = None) -> _ConfigNode:
    """Force reload config (e.g. for tests)."""
    global _config
    _config = None
    return load_config(path)


def get_config_value(path: str, default: Any = None) -> Any:
    """
    Get config value by dotted path (e.g. 'server.port', 'logging.level').
    Returns default when any part of the path is missing or empty.
    """
    cfg: Any = get_config()
    for part in path.split("."):
        if not isinstance(cfg, _ConfigNode):
            return default
        cfg = cfg.get(part)
        if cfg is None or cfg == "":
            return default
    return cfg.to_dict() if isinstance(cfg, _ConfigNode) else cfg


def get_game_settings(path: Optional[Path] = None) -> GameSettings:
    """
    Validated game settings. Missing keys fall back to GameSettings defaults.
    Raises pydantic.ValidationError on invalid values (e.g. unknown display_order).
    """
    cfg = get_config(path)
    game = cfg.get("game")
    raw = game.to_dict() if isinstance(game, _ConfigNode) else {}
    # Empty strings come from unset env vars without a default.
    raw = {k: v for k, v in raw.items() if v is not None and v != ""}
    return GameSettings(**raw)


def get_log_level() -> str:
    return str(get_config_value("logging.level", "INFO")).upper()
