"""Descriptive statistics for a flat numeric sample.

Callers supply finite values only; ``stat_workbench.data.validation.clean_sample``
drops NaN/inf before a sample reaches this module. Two variance conventions
coexist: the headline ``variance``/``std_dev`` use the n-1 sample
divisor, while skewness and kurtosis are standardised with the population
(divisor n) moments.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from stat_workbench.distributions.errors import handle_insufficient_data, has_minimum_samples
from stat_workbench.stats.models import DescriptiveResult


def as_sample(values: Sequence[float] | np.ndarray) -> np.ndarray:
    return np.asarray(values, dtype=float).ravel()


def percentile(sorted_values: np.ndarray, p: float) -> float:
    """Linear-interpolation percentile at fraction ``p`` of an ascending array."""
    n = len(sorted_values)
    index = p * (n - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    weight = index - lower
    return float(sorted_values[lower] * (1.0 - weight) + sorted_values[upper] * weight)


def median(sorted_values: np.ndarray) -> float:
    n = len(sorted_values)
    mid = n // 2
    if n % 2 == 0:
        return float((sorted_values[mid - 1] + sorted_values[mid]) / 2.0)
    return float(sorted_values[mid])


def mode(sorted_values: np.ndarray) -> Optional[float]:
    """Most repeated value; None when every value is distinct.

    Ties between equally repeated values resolve to the smallest one.
    """
    values, counts = np.unique(sorted_values, return_counts=True)
    if counts.size == 0 or counts.max() <= 1:
        return None
    return float(values[int(np.argmax(counts))])


def population_variance(values: np.ndarray, mean: float) -> float:
    return float(np.mean((values - mean) ** 2))


def sample_variance(values: np.ndarray, mean: float) -> float:
    return float(np.sum((values - mean) ** 2) / (len(values) - 1))


def standardized_moments(values: np.ndarray, mean: float, pop_variance: float) -> tuple[Optional[float], Optional[float]]:
    """Population skewness and excess kurtosis; None for a constant sample."""
    if pop_variance <= 0:
        return None, None
    z = (values - mean) / math.sqrt(pop_variance)
    skewness = float(np.mean(z**3))
    kurtosis = float(np.mean(z**4) - 3.0)
    return skewness, kurtosis


def compute_descriptive_statistics(sample: Sequence[float] | np.ndarray) -> Optional[DescriptiveResult]:
    values = as_sample(sample)
    count = len(values)
    if not has_minimum_samples("descriptive_statistics", count):
        return None

    ordered = np.sort(values)
    mean = float(np.mean(values))
    pop_var = population_variance(values, mean)
    skewness, kurtosis = standardized_moments(values, mean, pop_var)

    variance: Optional[float] = None
    std_dev: Optional[float] = None
    insufficient = not has_minimum_samples("variance", count)
    if insufficient:
        handle_insufficient_data("variance", count)
    else:
        variance = sample_variance(values, mean)
        std_dev = math.sqrt(variance)

    lo, hi = float(ordered[0]), float(ordered[-1])
    q1 = percentile(ordered, 0.25)
    q3 = percentile(ordered, 0.75)
    return DescriptiveResult(
        count=count,
        mean=mean,
        median=median(ordered),
        mode=mode(ordered),
        variance=variance,
        std_dev=std_dev,
        min=lo,
        max=hi,
        range=hi - lo,
        q1=q1,
        q3=q3,
        iqr=q3 - q1,
        skewness=skewness,
        kurtosis=kurtosis,
        population_variance=pop_var,
        insufficient_for_variance=insufficient,
    )


__all__ = [
    "as_sample",
    "compute_descriptive_statistics",
    "median",
    "mode",
    "percentile",
    "population_variance",
    "sample_variance",
    "standardized_moments",
]
