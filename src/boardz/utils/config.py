# Rev 0.1.1
# src/boardz/utils/config.py
from __future__ import annotations
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict

from .paths import config_dir

log = logging.getLogger(__name__)

_DEFAULTS: Dict[str, Any] = {
    "main_window": {
        "width": 1280,
        "height": 800,
        "is_maximized": False,
    },
    "board": {
        "seed_file": None,
    },
}


def settings_file() -> Path:
    return config_dir() / "settings.json"


def _merge(defaults: Dict[str, Any], loaded: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(defaults)
    for key, value in loaded.items():
        if isinstance(out.get(key), dict) and isinstance(value, dict):
            out[key] = {**out[key], **value}
        else:
            out[key] = value
    return out


def load_settings(path: Path | None = None) -> Dict[str, Any]:
    p = path or settings_file()
    if p.exists():
        try:
            loaded = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            log.warning("Ignoring unreadable settings %s: %s", p, e)
            return copy.deepcopy(_DEFAULTS)
        if isinstance(loaded, dict):
            return _merge(_DEFAULTS, loaded)
        log.warning("Ignoring settings %s: top level is not an object", p)
    return copy.deepcopy(_DEFAULTS)


def save_settings(data: Dict[str, Any], path: Path | None = None) -> None:
    p = path or settings_file()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(data, indent=2), encoding="utf-8")
