"""Normal distribution parameterised by mean and variance."""

from __future__ import annotations

import math
from typing import Mapping, Optional

import numpy as np

from stat_workbench.distributions.special import normal_cdf
from stat_workbench.interfaces.distribution import DistributionModel, Family, Params
from stat_workbench.mc.variates import box_muller


class NormalDistribution(DistributionModel):
    family = Family.NORMAL
    param_names = ("mean", "variance")

    def _check_values(self, params: Mapping[str, float]) -> Optional[str]:
        if params["variance"] <= 0:
            return f"normal variance must be positive, got {params['variance']}"
        return None

    def pdf(self, x: float, params: Mapping[str, float]) -> float:
        p = self.validate_params(params)
        mean, variance = p["mean"], p["variance"]
        coefficient = 1.0 / math.sqrt(2.0 * math.pi * variance)
        return coefficient * math.exp(-((x - mean) ** 2) / (2.0 * variance))

    def cdf(self, x: float, params: Mapping[str, float]) -> float:
        p = self.validate_params(params)
        return normal_cdf(x, p["mean"], math.sqrt(p["variance"]))

    def log_likelihood(self, sample: np.ndarray, params: Mapping[str, float]) -> float:
        p = self.validate_params(params)
        mean, variance = p["mean"], p["variance"]
        n = len(sample)
        sq = float(np.sum((sample - mean) ** 2))
        return -0.5 * n * math.log(2.0 * math.pi * variance) - sq / (2.0 * variance)

    def fit_mle(self, sample: np.ndarray) -> Params:
        mean = float(np.mean(sample))
        # Population variance (divisor n) is the MLE; not the n-1 sample variance.
        variance = float(np.mean((sample - mean) ** 2))
        return {"mean": mean, "variance": variance}

    def fit_mom(self, sample: np.ndarray) -> Params:
        # First two moments give the same estimates as the MLE.
        return self.fit_mle(sample)

    def sample(self, params: Mapping[str, float], count: int, rng: np.random.Generator) -> np.ndarray:
        p = self.validate_params(params)
        return p["mean"] + math.sqrt(p["variance"]) * box_muller(rng, count)


__all__ = ["NormalDistribution"]
