# passmeter/config.py
"""
Settings persistence for PassMeter.
Settings saved as JSON in %APPDATA%/PassMeter/config.json (Windows) or ~/.passmeter/config.json (fallback).
$PASSMETER_CONFIG points at an explicit file instead.
"""

import os
import json
import math
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "attack_rate_per_second": 1e11,  # guesses per second assumed for crack-time estimates
    "symbol_pool_size": 32,
    "common_passwords_path": None,  # if None, dictionary.bundled_path() is used
    "host": "127.0.0.1",
    "port": 3000,
}


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "PassMeter")
    return os.path.join(os.path.expanduser("~"), ".passmeter")


def config_path() -> str:
    explicit = os.getenv("PASSMETER_CONFIG")
    if explicit:
        return explicit
    return os.path.join(_appdata_dir(), "config.json")


def _positive_number(value, default, name):
    if isinstance(value, bool):
        value = None
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = None
    if number is None or not math.isfinite(number) or number <= 0:
        logger.warning("Ignoring invalid %s=%r, using %r", name, value, default)
        return default
    return number


def _positive_int(value, default, name):
    number = _positive_number(value, default, name)
    if number is default:
        return default
    if not float(number).is_integer():
        logger.warning("Ignoring non-integer %s=%r, using %r", name, value, default)
        return default
    return int(number)


def check_policy(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of cfg whose scoring policy values are usable numbers.
    Invalid values are replaced by their DEFAULTS entry.
    """
    out = dict(cfg)
    out["attack_rate_per_second"] = _positive_number(
        out.get("attack_rate_per_second"), DEFAULTS["attack_rate_per_second"], "attack_rate_per_second")
    out["symbol_pool_size"] = _positive_int(
        out.get("symbol_pool_size"), DEFAULTS["symbol_pool_size"], "symbol_pool_size")
    return out


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    out = DEFAULTS.copy()
    if os.path.exists(p):
        try:
            with open(p, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", p, e)
            data = None
        if isinstance(data, dict):
            out.update(data)
        elif data is not None:
            logger.warning("Ignoring config %s: expected a JSON object, got %s", p, type(data).__name__)

    port = os.getenv("PORT")
    if port:
        try:
            out["port"] = int(port)
        except ValueError:
            logger.warning("Ignoring non-numeric PORT=%r", port)
    return check_policy(out)


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> None:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
