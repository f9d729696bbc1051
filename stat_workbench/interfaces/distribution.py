"""Distribution interface shared by the five supported families."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

import numpy as np

from stat_workbench.exceptions import UnsupportedParameterError

Params = Dict[str, float]


class Family(str, Enum):
    NORMAL = "normal"
    EXPONENTIAL = "exponential"
    POISSON = "poisson"
    UNIFORM = "uniform"
    BINOMIAL = "binomial"


class Method(str, Enum):
    MLE = "mle"
    MOM = "mom"


class DistributionModel(ABC):
    """Capability set every distribution family implements.

    Densities and CDFs are evaluated for a single point; fits consume a 1D
    array of finite observations and return a fresh parameter mapping;
    sampling draws from a caller-owned ``numpy.random.Generator``.
    """

    family: Family
    param_names: Tuple[str, ...] = ()
    discrete: bool = False

    @property
    def name(self) -> str:
        return self.family.value

    def check_params(self, params: Mapping[str, float]) -> Optional[str]:
        """Return a description of the first problem with ``params``, or None."""

        missing = [p for p in self.param_names if p not in params]
        if missing:
            return f"{self.name} requires parameters {list(self.param_names)}, missing {missing}"
        for key in self.param_names:
            value = params[key]
            if value is None or not np.isfinite(value):
                return f"{self.name} parameter '{key}' must be finite, got {value}"
        return self._check_values(params)

    def validate_params(self, params: Mapping[str, float]) -> Params:
        problem = self.check_params(params)
        if problem:
            raise UnsupportedParameterError(problem)
        return {key: float(params[key]) for key in self.param_names}

    def _check_values(self, params: Mapping[str, float]) -> Optional[str]:
        return None

    @abstractmethod
    def pdf(self, x: float, params: Mapping[str, float]) -> float:
        """Density (continuous) or probability mass (discrete) at ``x``."""

    @abstractmethod
    def cdf(self, x: float, params: Mapping[str, float]) -> float:
        """Probability that a variate is <= ``x``."""

    @abstractmethod
    def log_likelihood(self, sample: np.ndarray, params: Mapping[str, float]) -> float:
        """Sum of log densities over ``sample``; -inf when any point has zero density."""

    @abstractmethod
    def fit_mle(self, sample: np.ndarray) -> Params:
        """Maximum likelihood parameter estimates."""

    @abstractmethod
    def fit_mom(self, sample: np.ndarray) -> Params:
        """Method of moments parameter estimates."""

    @abstractmethod
    def sample(self, params: Mapping[str, float], count: int, rng: np.random.Generator) -> np.ndarray:
        """Draw ``count`` variates."""

    def support_bounds(self, params: Mapping[str, float]) -> Tuple[float, float]:
        """Closed interval outside which the density is zero."""
        return (-np.inf, np.inf)


__all__ = ["DistributionModel", "Family", "Method", "Params"]
