# passcraft/config.py
"""
Simple settings persistence for passcraft.
Settings saved as JSON in %APPDATA%/Passcraft/config.json (Windows) or ~/.passcraft/config.json (fallback)
"""

import os
import json
from typing import Dict, Any

from .errors import ConfigurationError
from .log import get_logger

logger = get_logger("config")

DEFAULTS: Dict[str, Any] = {
    "random_length": 20,
    "random_numbers": True,
    "random_uppercase": True,
    "random_symbols": False,
    "random_exclude_similar": False,
    "random_strict": True,
    "memorable_length": 4,
    "memorable_full_words": True,
    "memorable_capitalize": False,
    "memorable_uppercase": False,
    "memorable_separator": "-",
    "pin_length": 6,
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        d = os.path.join(appdata, "Passcraft")
    else:
        d = os.path.join(os.path.expanduser("~"), ".passcraft")
    os.makedirs(d, exist_ok=True)
    return d

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    if isinstance(data, dict):
        out.update(data)
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def _coerce(key: str, raw: str) -> Any:
    default = DEFAULTS[key]
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
        raise ConfigurationError(f"{key} expects true or false, got {raw!r}")
    if isinstance(default, int):
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} expects an integer, got {raw!r}") from None
    return raw

def set_value(key: str, raw: str) -> Dict[str, Any]:
    """
    Parse `raw` to the type of the default for `key`, save, and return the new config.
    Raises ConfigurationError for unknown keys or unparseable values.
    """
    if key not in DEFAULTS:
        raise ConfigurationError(f"unknown setting {key!r}; known: {', '.join(sorted(DEFAULTS))}")
    cfg = load_config()
    cfg[key] = _coerce(key, raw)
    save_config(cfg)
    logger.debug("saved %s=%r to %s", key, cfg[key], config_path())
    return cfg
