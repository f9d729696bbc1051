"""Closed-form numeric helpers for densities and CDFs."""

from __future__ import annotations

import math

from scipy.special import gammaln

# Abramowitz & Stegun 7.1.26, |error| <= 1.5e-7.
A1 = 0.254829592
A2 = -0.284496736
A3 = 1.421413741
A4 = -1.453152027
A5 = 1.061405429
P = 0.3275911


def erf(x: float) -> float:
    """Rational approximation of the error function.

    Accurate to roughly seven digits, which is enough for display but not for
    deep tail probabilities.
    """
    sign = 1.0 if x >= 0 else -1.0
    ax = abs(x)
    t = 1.0 / (1.0 + P * ax)
    poly = ((((A5 * t + A4) * t + A3) * t + A2) * t + A1) * t
    return sign * (1.0 - poly * math.exp(-ax * ax))


def normal_cdf(x: float, mean: float, std_dev: float) -> float:
    z = (x - mean) / std_dev
    return 0.5 * (1.0 + erf(z / math.sqrt(2.0)))


def log_factorial(k: int) -> float:
    """ln(k!) via the log-gamma function."""
    if k < 0:
        raise ValueError("factorial undefined for negative integers")
    return float(gammaln(k + 1))


def binomial_coefficient(n: int, k: int) -> float:
    """C(n, k) as an iterative product, using the smaller of k and n-k."""
    if k < 0 or k > n:
        return 0.0
    k = min(k, n - k)
    result = 1.0
    for i in range(1, k + 1):
        result = result * (n - k + i) / i
    return result


def log_binomial_coefficient(n: int, k: int) -> float:
    if k < 0 or k > n:
        return -math.inf
    return float(gammaln(n + 1) - gammaln(k + 1) - gammaln(n - k + 1))


def is_integral(x: float) -> bool:
    return math.isfinite(x) and float(x).is_integer()


__all__ = [
    "binomial_coefficient",
    "erf",
    "is_integral",
    "log_binomial_coefficient",
    "log_factorial",
    "normal_cdf",
]
