from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as SchemaError

from instruction_queue.usecases.config_models import AppConfig

_ALLOWED_KEYS = {"version", "ingest", "output", "logging"}


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> AppConfig:
    # YAML is parsed with safe_load and validated into typed models.
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    _validate_top_level(raw)
    try:
        return AppConfig.model_validate(raw)
    except SchemaError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Fail fast on unknown keys to prevent silent misconfiguration.
    unknown = set(raw.keys()) - _ALLOWED_KEYS
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")

    if "version" not in raw or "output" not in raw:
        raise ConfigError("Missing required top-level keys: version, output")
