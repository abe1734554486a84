"""Configuration loading and defaults."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_SETTINGS: Dict[str, Any] = {
    "server": {
        "host": "0.0.0.0",
        "port": 5000,
        "api_prefix": "/api",
    },
    "auth": {
        "jwt_algorithm": "HS256",
    },
    "llm": {
        # None leaves the HTTP client default in place.
        "timeout_seconds": None,
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(settings_path: str = "config/settings.yaml") -> Dict[str, Any]:
    """Loads settings.yaml, merges it onto defaults, then applies env overrides."""
    merged = deepcopy(DEFAULT_SETTINGS)
    config_path = Path(settings_path)
    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as f:
            user_cfg = yaml.safe_load(f) or {}
        merged = _deep_merge(merged, user_cfg)

    log_level = os.getenv("LOG_LEVEL", "").strip()
    if log_level:
        merged["logging"]["level"] = log_level.upper()
    return merged


def configure_logging(config: Dict[str, Any]) -> None:
    log_cfg = config.get("logging", {})
    logging.basicConfig(
        level=str(log_cfg.get("level", "INFO")).upper(),
        format=log_cfg.get("format", DEFAULT_SETTINGS["logging"]["format"]),
    )
