"""Analysis configuration schema and validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from stat_workbench.exceptions import ConfigValidationError, UnsupportedParameterError
from stat_workbench.distributions.factory import parse_family, parse_method
from stat_workbench.stats.confidence import Z_CRITICAL


@dataclass(slots=True)
class AnalysisConfig:
    confidence_level: int = 95
    family: str = "normal"
    method: str = "mle"
    bin_count: Optional[int] = None
    curve_resolution: int = 100
    seed: Optional[int] = None
    binomial_trials: Optional[int] = None
    min_ci_samples: int = 30

    def __post_init__(self) -> None:
        if self.confidence_level not in Z_CRITICAL:
            raise ConfigValidationError(
                f"confidence_level must be one of {sorted(Z_CRITICAL)}, got {self.confidence_level}"
            )
        try:
            self.family = parse_family(self.family).value
            self.method = parse_method(self.method).value
        except UnsupportedParameterError as exc:
            raise ConfigValidationError(str(exc)) from exc
        if self.bin_count is not None and self.bin_count <= 0:
            raise ConfigValidationError("bin_count must be positive when set")
        if self.curve_resolution <= 0:
            raise ConfigValidationError("curve_resolution must be > 0")
        if self.binomial_trials is not None and self.binomial_trials <= 0:
            raise ConfigValidationError("binomial_trials must be positive when set")
        if self.min_ci_samples <= 1:
            raise ConfigValidationError("min_ci_samples must be > 1")

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisConfig":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    def to_dict(self) -> dict:
        return {
            "confidence_level": self.confidence_level,
            "family": self.family,
            "method": self.method,
            "bin_count": self.bin_count,
            "curve_resolution": self.curve_resolution,
            "seed": self.seed,
            "binomial_trials": self.binomial_trials,
            "min_ci_samples": self.min_ci_samples,
        }
