"""
config_loader.py

Load configuration from environment variables (optionally from a .env file)
and an optional JSON config file. Environment variables take precedence over
JSON values, which take precedence over built-in defaults. The merged and
validated configuration is exposed via as_dict().

Classes:
    ConfigLoader

Usage:
    loader = ConfigLoader(logger)
    config = loader.as_dict()
"""

from __future__ import annotations

import os
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from hwmon_service.sensors.registry import DEFAULT_HWMON_ROOT

DEFAULTS: Dict[str, Any] = {
    "hwmon_root": DEFAULT_HWMON_ROOT,
    "log_level": "INFO",
    "log_dir": "log",
    "skip_failed_groups": False,
    "max_workers": 1,
    "show_group": False,
    "outputs": ["console"],
}

ENV_OVERRIDES = {
    "HWMON_ROOT": "hwmon_root",
    "LOG_LEVEL": "log_level",
    "LOG_DIR": "log_dir",
    "HWMON_SKIP_FAILED_GROUPS": "skip_failed_groups",
    "HWMON_MAX_WORKERS": "max_workers",
    "HWMON_OUTPUTS": "outputs",
}

OUTPUT_NAMES = ("console", "logging")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _log(logger, level: str, msg: str) -> None:
    if logger is None:
        return
    getattr(logger, level)(msg)


def _project_root() -> Path:
    """
    Return the project root directory based on the current file location.
    """
    return Path(__file__).resolve().parent.parent


def _find_config_path(logger=None) -> Optional[Path]:
    """
    Locate config.json based on environment variables or common fallback
    locations. Returns the resolved path or None if not found.
    """
    # 1) Env overrides
    for key in ("HWMON_CONFIG", "CONFIG_PATH"):
        p = os.environ.get(key)
        if p:
            path = Path(p).expanduser().resolve()
            if path.is_file():
                _log(logger, "info", f"ConfigLoader: using {key}={path}")
                return path
            _log(logger, "warning", f"ConfigLoader: {key} set but not a file: {path}")

    # 2) Common locations (in priority order)
    candidates = [
        Path.cwd() / "config.json",
        _project_root() / "config.json",
    ]
    for c in candidates:
        if c.is_file():
            _log(logger, "info", f"ConfigLoader: discovered config at {c}")
            return c

    _log(logger, "info", "ConfigLoader: no config.json found, using defaults")
    return None


def _load_json_config(path: Optional[Path], logger=None) -> Dict[str, Any]:
    """
    Load JSON configuration from the given file path.

    Raises:
        ValueError: If the file is not valid JSON or not a JSON object.
    """
    if not path:
        return {}
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        _log(logger, "error", f"ConfigLoader: invalid JSON in {path}: {e}")
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        _log(logger, "error", f"ConfigLoader: {path} must contain a JSON object")
        raise ValueError(f"{path} must contain a JSON object")
    return data


class ConfigLoader:
    """
    Load and validate configuration.

    Environment:
        HWMON_ROOT, LOG_LEVEL, LOG_DIR, HWMON_SKIP_FAILED_GROUPS,
        HWMON_MAX_WORKERS, HWMON_OUTPUTS (comma separated), and
        HWMON_CONFIG / CONFIG_PATH to point at a config file.

    JSON keys:
      - hwmon_root (str, default "/sys/class/hwmon")
      - log_level (str, default "INFO")
      - log_dir (str, default "log")
      - skip_failed_groups (bool, default false)
      - max_workers (int ≥ 1, default 1)
      - show_group (bool, default false)
      - outputs (list of "console" / "logging", default ["console"])
    """

    def __init__(self, logger=None):
        load_dotenv()
        self.logger = logger

        self.config_path: Optional[Path] = _find_config_path(self.logger)
        self.config: Dict[str, Any] = _load_json_config(self.config_path, self.logger)

        raw = dict(DEFAULTS)
        raw.update({k: v for k, v in self.config.items() if k in DEFAULTS})
        for env_key, config_key in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value is not None and value.strip():
                raw[config_key] = value.strip()
        self._raw = raw

        self.hwmon_root = self._get_hwmon_root()
        self.log_level = self._get_log_level()
        self.log_dir = str(raw["log_dir"])
        self.skip_failed_groups = self._get_bool("skip_failed_groups")
        self.show_group = self._get_bool("show_group")
        self.max_workers = self._get_max_workers()
        self.outputs = self._get_outputs()

    def as_dict(self) -> Dict[str, Any]:
        merged: Dict[str, Any] = {
            "hwmon_root": self.hwmon_root,
            "log_level": self.log_level,
            "log_dir": self.log_dir,
            "skip_failed_groups": self.skip_failed_groups,
            "max_workers": self.max_workers,
            "show_group": self.show_group,
            "outputs": list(self.outputs),
        }
        _log(self.logger, "debug", f"ConfigLoader: keys loaded: {list(merged.keys())}")
        return merged

    # ----------------- internal validation/parsers -----------------

    def _get_hwmon_root(self) -> str:
        val = self._raw["hwmon_root"]
        if not isinstance(val, str) or not val.strip():
            msg = f"Invalid hwmon_root: {val!r} (must be a non-empty string)"
            _log(self.logger, "error", msg)
            raise ValueError(msg)
        return val

    def _get_log_level(self) -> str:
        val = self._raw["log_level"]
        if not isinstance(val, str) or not val.strip():
            msg = f"Invalid log_level: {val!r}"
            _log(self.logger, "error", msg)
            raise ValueError(msg)
        return val.strip().upper()

    def _get_bool(self, key: str) -> bool:
        val = self._raw[key]
        if isinstance(val, bool):
            return val
        if isinstance(val, str) and val.strip().lower() in _TRUE | _FALSE:
            return val.strip().lower() in _TRUE
        msg = f"Invalid {key}: {val!r} (expected a boolean)"
        _log(self.logger, "error", msg)
        raise ValueError(msg)

    def _get_max_workers(self) -> int:
        raw_value = self._raw["max_workers"]
        try:
            if isinstance(raw_value, bool):
                raise TypeError("max_workers must be an integer")
            workers = int(raw_value)
            if workers < 1:
                raise ValueError("max_workers must be ≥ 1")
            return workers
        except (ValueError, TypeError) as e:
            _log(self.logger, "error", f"Invalid max_workers: {raw_value} ({e})")
            raise ValueError(f"Invalid max_workers: {raw_value!r}") from e

    def _get_outputs(self) -> List[str]:
        val = self._raw["outputs"]
        if isinstance(val, str):
            val = [part.strip() for part in val.split(",") if part.strip()]
        if not isinstance(val, list) or not val:
            msg = f"Invalid outputs: {val!r} (expected a non-empty list)"
            _log(self.logger, "error", msg)
            raise ValueError(msg)
        unknown = [name for name in val if name not in OUTPUT_NAMES]
        if unknown:
            msg = f"Invalid outputs: unknown {unknown} (known: {list(OUTPUT_NAMES)})"
            _log(self.logger, "error", msg)
            raise ValueError(msg)
        return list(dict.fromkeys(val))
