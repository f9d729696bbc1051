"""Continuous uniform distribution on [a, b]."""

from __future__ import annotations

import math
from typing import Mapping, Optional, Tuple

import numpy as np

from stat_workbench.interfaces.distribution import DistributionModel, Family, Params
from stat_workbench.mc.variates import scaled_uniform


class UniformDistribution(DistributionModel):
    family = Family.UNIFORM
    param_names = ("a", "b")

    def _check_values(self, params: Mapping[str, float]) -> Optional[str]:
        if params["b"] <= params["a"]:
            return f"uniform bounds require b > a, got a={params['a']}, b={params['b']}"
        return None

    def pdf(self, x: float, params: Mapping[str, float]) -> float:
        p = self.validate_params(params)
        if x < p["a"] or x > p["b"]:
            return 0.0
        return 1.0 / (p["b"] - p["a"])

    def cdf(self, x: float, params: Mapping[str, float]) -> float:
        p = self.validate_params(params)
        if x < p["a"]:
            return 0.0
        if x > p["b"]:
            return 1.0
        return (x - p["a"]) / (p["b"] - p["a"])

    def log_likelihood(self, sample: np.ndarray, params: Mapping[str, float]) -> float:
        p = self.validate_params(params)
        if np.any(sample < p["a"]) or np.any(sample > p["b"]):
            return -math.inf
        return -len(sample) * math.log(p["b"] - p["a"])

    def fit_mle(self, sample: np.ndarray) -> Params:
        return {"a": float(np.min(sample)), "b": float(np.max(sample))}

    def fit_mom(self, sample: np.ndarray) -> Params:
        mean = float(np.mean(sample))
        # Matches population variance (divisor n) to (b - a)^2 / 12.
        variance = float(np.mean((sample - mean) ** 2))
        half_width = math.sqrt(12.0 * variance) / 2.0
        return {"a": mean - half_width, "b": mean + half_width}

    def sample(self, params: Mapping[str, float], count: int, rng: np.random.Generator) -> np.ndarray:
        p = self.validate_params(params)
        return scaled_uniform(rng, p["a"], p["b"], count)

    def support_bounds(self, params: Mapping[str, float]) -> Tuple[float, float]:
        return (float(params["a"]), float(params["b"]))


__all__ = ["UniformDistribution"]
