"""Configuration bootstrapping."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

BACKEND_URL_ENV = "LEARNOS_BACKEND_URL"

DEFAULT_CONFIG: dict[str, Any] = {
    "backend": {"base_url": "http://localhost:8000", "timeout_seconds": 10},
    "logging": {"level": "WARNING"},
    "telemetry": {"delivery_log_path": None},
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(root: Path, user_config: Path | None = None) -> dict[str, Any]:
    """Merge built-in defaults, ``config/default.yaml``, an optional user file and env."""
    merged = merge_dicts(DEFAULT_CONFIG, load_yaml(root / "config" / "default.yaml"))
    if user_config is not None:
        merged = merge_dicts(merged, load_yaml(user_config))

    env_url = os.getenv(BACKEND_URL_ENV)
    if env_url:
        merged = merge_dicts(merged, {"backend": {"base_url": env_url}})
    return merged


def resolve_delivery_log_path(root: Path, config: dict[str, Any]) -> Path | None:
    """Resolve the optional JSONL delivery log relative to the project root."""
    raw = config.get("telemetry", {}).get("delivery_log_path")
    if not raw:
        return None
    path = Path(raw)
    if not path.is_absolute():
        path = root / path
    path.parent.mkdir(parents=True, exist_ok=True)
    return path.resolve()
