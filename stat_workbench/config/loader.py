"""Configuration loading with CLI > ENV > file > default precedence."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from stat_workbench.exceptions import ConfigValidationError
from stat_workbench.utils.logging import get_logger

log = get_logger(__name__, component="config")


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    try:
        if path.suffix.lower() == ".json":
            content = json.loads(path.read_text())
        elif path.suffix.lower() in {".yml", ".yaml"}:
            content = yaml.safe_load(path.read_text())
        else:
            raise ConfigValidationError("Config file must be JSON or YAML")
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigValidationError(f"Invalid config file {path}: {exc}") from exc
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigValidationError(f"Config file {path} must contain a mapping")
    return content


def _cast(key: str, value: Any, casters: Mapping[str, Callable[[Any], Any]]) -> Any:
    caster = casters.get(key)
    if caster is None or value is None:
        return value
    try:
        return caster(value)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Invalid value for {key}: {value!r}") from exc


def load_config_with_precedence(
    config_path: Optional[Path],
    env_prefix: str,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Optional[Mapping[str, Callable[[Any], Any]]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Merge defaults, file values, ``{env_prefix}KEY`` variables and CLI values.

    Later sources win; ``None`` never overrides an earlier value.
    """

    casters = casters or {}
    environ = os.environ if environ is None else environ
    merged: Dict[str, Any] = dict(defaults)
    sources: Dict[str, str] = {key: "default" for key in defaults}

    if config_path is not None:
        for key, value in _load_yaml(Path(config_path)).items():
            if key not in defaults:
                log.warning("Ignoring unknown config key", extra={"path": str(config_path), "error": key})
                continue
            if value is not None:
                merged[key] = _cast(key, value, casters)
                sources[key] = "file"

    for key in defaults:
        env_value = environ.get(f"{env_prefix}{key.upper()}")
        if env_value not in (None, ""):
            merged[key] = _cast(key, env_value, casters)
            sources[key] = "env"

    for key, value in cli_values.items():
        if value is not None:
            merged[key] = _cast(key, value, casters)
            sources[key] = "cli"

    log.debug("Configuration resolved", extra={"status": json.dumps(sources, sort_keys=True)})
    return merged


__all__ = ["load_config_with_precedence"]
