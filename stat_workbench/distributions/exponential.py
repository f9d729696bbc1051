"""Exponential distribution with rate parameter."""

from __future__ import annotations

import math
from typing import Mapping, Optional, Tuple

import numpy as np

from stat_workbench.interfaces.distribution import DistributionModel, Family, Params
from stat_workbench.mc.variates import inverse_exponential


class ExponentialDistribution(DistributionModel):
    family = Family.EXPONENTIAL
    param_names = ("rate",)

    def _check_values(self, params: Mapping[str, float]) -> Optional[str]:
        if params["rate"] <= 0:
            return f"exponential rate must be positive, got {params['rate']}"
        return None

    def pdf(self, x: float, params: Mapping[str, float]) -> float:
        rate = self.validate_params(params)["rate"]
        if x < 0:
            return 0.0
        return rate * math.exp(-rate * x)

    def cdf(self, x: float, params: Mapping[str, float]) -> float:
        rate = self.validate_params(params)["rate"]
        if x < 0:
            return 0.0
        return 1.0 - math.exp(-rate * x)

    def log_likelihood(self, sample: np.ndarray, params: Mapping[str, float]) -> float:
        rate = self.validate_params(params)["rate"]
        if np.any(sample < 0):
            return -math.inf
        return len(sample) * math.log(rate) - rate * float(np.sum(sample))

    def fit_mle(self, sample: np.ndarray) -> Params:
        mean = float(np.mean(sample))
        return {"rate": 1.0 / mean if mean != 0 else math.inf}

    def fit_mom(self, sample: np.ndarray) -> Params:
        return self.fit_mle(sample)

    def sample(self, params: Mapping[str, float], count: int, rng: np.random.Generator) -> np.ndarray:
        rate = self.validate_params(params)["rate"]
        return inverse_exponential(rng, rate, count)

    def support_bounds(self, params: Mapping[str, float]) -> Tuple[float, float]:
        return (0.0, math.inf)


__all__ = ["ExponentialDistribution"]
