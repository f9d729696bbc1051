"""CLI input helpers: sample resolution, parameter parsing, config precedence."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from stat_workbench.config.loader import load_config_with_precedence
from stat_workbench.data.loader import load_sample, parse_sample_text
from stat_workbench.exceptions import ConfigValidationError, InsufficientSampleError
from stat_workbench.schema.analysis_config import AnalysisConfig

ENV_PREFIX = "STATWB_"

CASTERS = {
    "confidence_level": int,
    "family": str,
    "method": str,
    "bin_count": int,
    "curve_resolution": int,
    "seed": int,
    "binomial_trials": int,
    "min_ci_samples": int,
}


def require_positive(name: str, value: int | float) -> None:
    if value <= 0:
        raise ConfigValidationError(f"{name} must be > 0")


def resolve_sample(input_path: Optional[Path], values: Optional[str]) -> np.ndarray:
    """Sample from ``--input`` or inline ``--values``; exactly one is required."""
    if input_path is not None and values is not None:
        raise ConfigValidationError("pass either --input or --values, not both")
    if input_path is not None:
        sample = load_sample(input_path)
    elif values is not None:
        sample = parse_sample_text(values)
    else:
        raise ConfigValidationError("a sample is required: pass --input PATH or --values '1,2,3'")
    if len(sample) == 0:
        raise InsufficientSampleError("sample contains no finite numeric values")
    return sample


def parse_params(pairs: Optional[List[str]]) -> Dict[str, float]:
    """Parse repeated ``--param key=value`` options."""
    params: Dict[str, float] = {}
    for pair in pairs or []:
        key, sep, raw = pair.partition("=")
        if not sep or not key.strip():
            raise ConfigValidationError(f"parameter must look like key=value, got {pair!r}")
        try:
            params[key.strip()] = float(raw)
        except ValueError as exc:
            raise ConfigValidationError(f"parameter {key.strip()} must be numeric, got {raw!r}") from exc
    return params


def resolve_config(config_path: Optional[Path], cli_values: Dict[str, Any]) -> AnalysisConfig:
    defaults = AnalysisConfig().to_dict()
    merged = load_config_with_precedence(
        config_path=config_path,
        env_prefix=ENV_PREFIX,
        cli_values=cli_values,
        defaults=defaults,
        casters=CASTERS,
    )
    return AnalysisConfig.from_dict(merged)


__all__ = ["parse_params", "require_positive", "resolve_config", "resolve_sample"]
