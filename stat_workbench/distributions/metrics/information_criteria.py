"""Akaike and Bayesian information criteria for fitted models."""

from __future__ import annotations

import math


def aic(log_likelihood: float, k: int) -> float:
    """2k - 2 ln L; a zero likelihood gives +inf rather than NaN."""
    if log_likelihood == -math.inf:
        return math.inf
    return 2.0 * k - 2.0 * log_likelihood


def bic(log_likelihood: float, k: int, n: int) -> float:
    """k ln(n) - 2 ln L for ``n`` observations."""
    if n < 1:
        raise ValueError("bic requires at least one observation")
    if log_likelihood == -math.inf:
        return math.inf
    return k * math.log(n) - 2.0 * log_likelihood


__all__ = ["aic", "bic"]
