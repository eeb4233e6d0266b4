"""Configuration persistence for Quick Sort Studio."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
import os
from pathlib import Path
from typing import Any

from quick_sort_studio.narration import CATALOGS, DEFAULT_LOCALE
from quick_sort_studio.playback import DEFAULT_SPEED, MAX_SPEED, MIN_SPEED

logger = logging.getLogger(__name__)

MAX_ARRAY_SIZE = 64


@dataclass(frozen=True)
class AppConfig:
    """Immutable user configuration loaded from disk."""

    array_size: int = 12
    speed: int = DEFAULT_SPEED
    min_value: int = 15
    max_value: int = 94
    locale: str = DEFAULT_LOCALE


def get_config_dir(app_name: str = "quick-sort-studio") -> Path:
    """Return the per-user config directory for the current platform."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            root = Path(base)
        else:
            root = Path.home() / "AppData" / "Roaming"
        return _ensure_dir(root / app_name)
    elif os.name == "posix":
        if _is_macos():
            return _ensure_dir(
                Path.home() / "Library" / "Application Support" / app_name
            )
        base = os.environ.get("XDG_CONFIG_HOME")
        root = Path(base) if base else Path.home() / ".config"
        return _ensure_dir(root / app_name)
    else:
        return _ensure_dir(Path.home() / ".config" / app_name)


def get_config_path() -> Path:
    """Return the full config file path."""
    return get_config_dir() / "config.json"


def load_config() -> AppConfig:
    """Load configuration from disk, falling back to defaults on error."""
    path = get_config_path()
    if not path.exists():
        return AppConfig()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.exception("Failed to load config from %s", path)
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()
    return _config_from_mapping(raw)


def save_config(cfg: AppConfig) -> None:
    """Persist configuration to disk atomically."""
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(".tmp")
    data = {
        "array_size": cfg.array_size,
        "speed": cfg.speed,
        "min_value": cfg.min_value,
        "max_value": cfg.max_value,
        "locale": cfg.locale,
    }
    temp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    os.replace(temp_path, path)


def _ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def _is_macos() -> bool:
    return os.uname().sysname == "Darwin" if hasattr(os, "uname") else False


def _get_int(
    raw: dict[str, Any],
    key: str,
    default: int,
    *,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """Fetch an integer value with optional clamping."""
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        value = default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def _config_from_mapping(raw: dict[str, Any]) -> AppConfig:
    """Normalize raw JSON data into an AppConfig."""
    defaults = AppConfig()
    array_size = _get_int(
        raw, "array_size", defaults.array_size, min_value=1, max_value=MAX_ARRAY_SIZE
    )
    speed = _get_int(
        raw, "speed", defaults.speed, min_value=MIN_SPEED, max_value=MAX_SPEED
    )
    min_value = _get_int(raw, "min_value", defaults.min_value, min_value=1)
    max_value = _get_int(raw, "max_value", defaults.max_value, min_value=1)
    if max_value < min_value:
        min_value, max_value = defaults.min_value, defaults.max_value
    locale = raw.get("locale", defaults.locale)
    if not isinstance(locale, str) or locale not in CATALOGS:
        locale = defaults.locale
    return AppConfig(
        array_size=array_size,
        speed=speed,
        min_value=min_value,
        max_value=max_value,
        locale=locale,
    )
