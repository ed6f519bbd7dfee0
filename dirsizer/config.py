"""Persistent JSON config helpers.

Stores server address, default sort direction, the statistics collector URL
and the shutdown timeout. Malformed or missing values fall back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .scan_model import SortOrder

APP_NAME = "dirsizer"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9015
DEFAULT_SHUTDOWN_TIMEOUT = 5.0


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    default_sort: SortOrder = SortOrder.ASC
    stats_url: str | None = None
    shutdown_timeout: float = DEFAULT_SHUTDOWN_TIMEOUT

    def to_json(self) -> dict[str, object]:
        data = asdict(self)
        data["default_sort"] = self.default_sort.value
        return data


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON; write errors are ignored."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _nonempty_str(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _port(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if 0 <= value <= 65535 else None


def _positive_float(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value) if value > 0 else None


def _sort_order(value: object) -> SortOrder | None:
    if not isinstance(value, str):
        return None
    try:
        return SortOrder(value.strip())
    except ValueError:
        return None


def load_settings() -> Settings:
    """Build ``Settings`` from the config file, validating each key on its own."""
    data = load_config()
    defaults = Settings()
    port = _port(data.get("port"))
    return Settings(
        host=_nonempty_str(data.get("host")) or defaults.host,
        port=defaults.port if port is None else port,
        default_sort=_sort_order(data.get("default_sort")) or defaults.default_sort,
        stats_url=_nonempty_str(data.get("stats_url")),
        shutdown_timeout=_positive_float(data.get("shutdown_timeout")) or defaults.shutdown_timeout,
    )


def save_settings(settings: Settings) -> Path:
    """Merge ``settings`` into the stored config, keeping unrelated keys.

    Returns the config path written to.
    """
    config = load_config()
    config.update(settings.to_json())
    save_config(config)
    return CONFIG_PATH


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_SHUTDOWN_TIMEOUT",
    "Settings",
    "load_config",
    "save_config",
    "load_settings",
    "save_settings",
]
