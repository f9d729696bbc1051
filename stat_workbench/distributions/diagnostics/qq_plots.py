"""QQ plot helper returning quantile pairs (no plotting dependency)."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from scipy.stats import norm


def compute_normal_qq_pairs(sample: Sequence[float] | np.ndarray, mean: float, std_dev: float):
    """
    Pair sorted observations with normal quantiles at plotting positions (i + 0.5) / n.

    Returns (theoretical, empirical) arrays of equal length.
    """
    empirical = np.sort(np.asarray(sample, dtype=float).ravel())
    n = len(empirical)
    if n == 0:
        return np.array([]), np.array([])
    positions = (np.arange(n) + 0.5) / n
    theoretical = mean + norm.ppf(positions) * std_dev
    return theoretical, empirical


__all__ = ["compute_normal_qq_pairs"]
