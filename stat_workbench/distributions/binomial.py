"""Binomial distribution with a fixed number of trials."""

from __future__ import annotations

import math
from typing import Mapping, Optional, Tuple

import numpy as np
from scipy.special import gammaln

from stat_workbench.distributions.special import binomial_coefficient, is_integral, log_binomial_coefficient
from stat_workbench.interfaces.distribution import DistributionModel, Family, Params
from stat_workbench.mc.variates import bernoulli_sum

# Up to this many trials C(n, k) p^k (1-p)^(n-k) is evaluated directly; larger n goes through logs.
DIRECT_PRODUCT_MAX_TRIALS = 60


class BinomialDistribution(DistributionModel):
    """Binomial(n, p).

    The trial count is treated as known: pass ``trials`` when it is, otherwise
    fits take ``n`` as the largest observed count (rounded up).
    """

    family = Family.BINOMIAL
    param_names = ("n", "p")
    discrete = True

    def __init__(self, trials: int | None = None) -> None:
        self.trials = trials

    def _check_values(self, params: Mapping[str, float]) -> Optional[str]:
        n, p = params["n"], params["p"]
        if n < 0 or not is_integral(n):
            return f"binomial n must be a non-negative integer, got {n}"
        if not 0.0 <= p <= 1.0:
            return f"binomial p must lie in [0, 1], got {p}"
        return None

    def _log_pmf(self, k: int, n: int, p: float) -> float:
        if p == 0.0:
            return 0.0 if k == 0 else -math.inf
        if p == 1.0:
            return 0.0 if k == n else -math.inf
        return log_binomial_coefficient(n, k) + k * math.log(p) + (n - k) * math.log1p(-p)

    def _pmf(self, k: int, n: int, p: float) -> float:
        if n <= DIRECT_PRODUCT_MAX_TRIALS:
            return binomial_coefficient(n, k) * p**k * (1.0 - p) ** (n - k)
        return math.exp(self._log_pmf(k, n, p))

    def pdf(self, x: float, params: Mapping[str, float]) -> float:
        params = self.validate_params(params)
        n, p = int(params["n"]), params["p"]
        if x < 0 or x > n or not is_integral(x):
            return 0.0
        return self._pmf(int(x), n, p)

    def cdf(self, x: float, params: Mapping[str, float]) -> float:
        params = self.validate_params(params)
        n, p = int(params["n"]), params["p"]
        if x < 0:
            return 0.0
        if x >= n:
            return 1.0
        total = sum(self._pmf(k, n, p) for k in range(math.floor(x) + 1))
        return min(1.0, total)

    def log_likelihood(self, sample: np.ndarray, params: Mapping[str, float]) -> float:
        params = self.validate_params(params)
        n, p = int(params["n"]), params["p"]
        if np.any(sample < 0) or np.any(sample > n) or not np.all(np.mod(sample, 1) == 0):
            return -math.inf
        if p in (0.0, 1.0):
            return float(sum(self._log_pmf(int(k), n, p) for k in sample))
        log_comb = gammaln(n + 1) - gammaln(sample + 1) - gammaln(n - sample + 1)
        return float(np.sum(log_comb + sample * math.log(p) + (n - sample) * math.log1p(-p)))

    def _trials_for(self, sample: np.ndarray) -> int:
        if self.trials is not None:
            return int(self.trials)
        return int(math.ceil(float(np.max(sample))))

    def fit_mle(self, sample: np.ndarray) -> Params:
        n = self._trials_for(sample)
        mean = float(np.mean(sample))
        p = mean / n if n > 0 else math.nan
        return {"n": float(n), "p": p}

    def fit_mom(self, sample: np.ndarray) -> Params:
        # With n fixed, matching the first moment gives the MLE.
        return self.fit_mle(sample)

    def sample(self, params: Mapping[str, float], count: int, rng: np.random.Generator) -> np.ndarray:
        params = self.validate_params(params)
        return bernoulli_sum(rng, int(params["n"]), params["p"], count)

    def support_bounds(self, params: Mapping[str, float]) -> Tuple[float, float]:
        return (0.0, float(params["n"]))


__all__ = ["BinomialDistribution", "DIRECT_PRODUCT_MAX_TRIALS"]
