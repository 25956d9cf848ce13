"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Union

logger = logging.getLogger(__name__)

ConfigValue = Union[str, bool]

_DEFAULT_MARKER_STYLE = "emoji"
_DEFAULT_REPORT_FINAL_CHECK = True


def default_config() -> Dict[str, ConfigValue]:
    return {"marker_style": _DEFAULT_MARKER_STYLE, "report_final_check": _DEFAULT_REPORT_FINAL_CHECK}


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Exercheck"
        return Path.home() / "Exercheck"
    return Path.home() / ".config" / "exercheck"


def get_default_config_path() -> Path:
    return get_user_data_dir() / "config.json"


def _normalize(raw: Dict[str, object]) -> Dict[str, ConfigValue]:
    marker_style = "ascii" if raw.get("marker_style") == "ascii" else _DEFAULT_MARKER_STYLE
    report_final_check = raw.get("report_final_check")
    if not isinstance(report_final_check, bool):
        report_final_check = _DEFAULT_REPORT_FINAL_CHECK
    return {"marker_style": marker_style, "report_final_check": report_final_check}


def load_config(path: Path | None = None) -> Dict[str, ConfigValue]:
    """Load config from disk, falling back to defaults when it is missing or unreadable."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return default_config()
    if not isinstance(raw, dict):
        logger.warning("Ignoring config %s: expected a JSON object", config_path)
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, ConfigValue], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(dict(config))
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
