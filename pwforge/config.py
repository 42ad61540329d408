# pwforge/config.py
"""
Simple settings persistence for pwforge.
Settings saved as JSON in %APPDATA%/pwforge/config.json (Windows) or ~/.pwforge/config.json (fallback)
"""

import os
import json
import logging
from typing import Dict, Any

from .generator import GenerationOptions

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "lower": True,
    "upper": True,
    "digits": True,
    "symbols": True,
    "avoid_ambiguous": False,
    "copies": 1,
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        d = os.path.join(appdata, "pwforge")
    else:
        d = os.path.join(os.path.expanduser("~"), ".pwforge")
    os.makedirs(d, exist_ok=True)
    return d

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def coerce_value(key: str, value: Any) -> Any:
    """
    Convert `value` to the type of DEFAULTS[key].
    Strings such as "yes"/"off" are accepted for booleans (handy for `config set`).
    """
    if key not in DEFAULTS:
        raise KeyError(f"Unknown setting: {key}")
    default = DEFAULTS[key]
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in ("1", "true", "yes", "on"):
            return True
        if text in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"{key} expects a boolean, got {value!r}")
    if isinstance(default, int):
        if isinstance(value, bool):
            raise ValueError(f"{key} expects an integer, got {value!r}")
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"{key} expects an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{key} expects an integer, got {value!r}") from None
    return value

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("could not read %s, using defaults: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults; drop unknown keys and values of the wrong type
    out = DEFAULTS.copy()
    for key, value in data.items():
        if key not in DEFAULTS:
            logger.debug("ignoring unknown setting %r", key)
            continue
        try:
            out[key] = coerce_value(key, value)
        except ValueError as e:
            logger.warning("ignoring setting %r: %s", key, e)
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    tmp = p + ".tmp"
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(cfg, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        # atomic replace
        os.replace(tmp, p)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise
    logger.debug("saved settings to %s", p)

def options_from_config(cfg: Dict[str, Any]) -> GenerationOptions:
    return GenerationOptions.from_flags(
        lower=cfg.get("lower", DEFAULTS["lower"]),
        upper=cfg.get("upper", DEFAULTS["upper"]),
        digits=cfg.get("digits", DEFAULTS["digits"]),
        symbols=cfg.get("symbols", DEFAULTS["symbols"]),
        avoid_ambiguous=cfg.get("avoid_ambiguous", DEFAULTS["avoid_ambiguous"]),
    )
