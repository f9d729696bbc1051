"""Poisson distribution with rate (mean) parameter."""

from __future__ import annotations

import math
from typing import Mapping, Optional, Tuple

import numpy as np
from scipy.special import gammaln

from stat_workbench.distributions.special import is_integral, log_factorial
from stat_workbench.interfaces.distribution import DistributionModel, Family, Params
from stat_workbench.mc.variates import knuth_poisson

# CDF sums stop at rate + TAIL_SDS * sqrt(rate) + TAIL_SDS; the mass past that is below double precision.
TAIL_SDS = 40


class PoissonDistribution(DistributionModel):
    family = Family.POISSON
    param_names = ("rate",)
    discrete = True

    def _check_values(self, params: Mapping[str, float]) -> Optional[str]:
        if params["rate"] < 0:
            return f"poisson rate must be non-negative, got {params['rate']}"
        return None

    def pdf(self, x: float, params: Mapping[str, float]) -> float:
        rate = self.validate_params(params)["rate"]
        if x < 0 or not is_integral(x):
            return 0.0
        k = int(x)
        if rate == 0:
            return 1.0 if k == 0 else 0.0
        # log-space keeps lambda^k / k! finite for large k
        return math.exp(k * math.log(rate) - rate - log_factorial(k))

    def cdf(self, x: float, params: Mapping[str, float]) -> float:
        rate = self.validate_params(params)["rate"]
        if x < 0:
            return 0.0
        if rate == 0 or x == math.inf:
            return 1.0
        tail = math.ceil(rate + TAIL_SDS * math.sqrt(rate) + TAIL_SDS)
        ks = np.arange(min(math.floor(x), tail) + 1)
        terms = np.exp(ks * math.log(rate) - rate - gammaln(ks + 1))
        return min(1.0, float(terms.sum()))

    def log_likelihood(self, sample: np.ndarray, params: Mapping[str, float]) -> float:
        rate = self.validate_params(params)["rate"]
        if np.any(sample < 0) or not np.all(np.mod(sample, 1) == 0):
            return -math.inf
        if rate == 0:
            return 0.0 if np.all(sample == 0) else -math.inf
        return float(np.sum(sample * math.log(rate) - rate - gammaln(sample + 1)))

    def fit_mle(self, sample: np.ndarray) -> Params:
        return {"rate": float(np.mean(sample))}

    def fit_mom(self, sample: np.ndarray) -> Params:
        return self.fit_mle(sample)

    def sample(self, params: Mapping[str, float], count: int, rng: np.random.Generator) -> np.ndarray:
        rate = self.validate_params(params)["rate"]
        return knuth_poisson(rng, rate, count)

    def support_bounds(self, params: Mapping[str, float]) -> Tuple[float, float]:
        return (0.0, math.inf)


__all__ = ["PoissonDistribution", "TAIL_SDS"]
