"""Random variate algorithms driven by uniform draws from a numpy Generator."""

from __future__ import annotations

import numpy as np

from stat_workbench.utils.logging import get_logger

log = get_logger(__name__, component="variates")

MAX_KNUTH_ITERATIONS = 10_000
BERNOULLI_CHUNK_CELLS = 1_000_000


def open_unit_uniform(rng: np.random.Generator, size: int) -> np.ndarray:
    """Uniform draws on (0, 1], safe to pass to log()."""
    return 1.0 - rng.random(size)


def box_muller(rng: np.random.Generator, count: int) -> np.ndarray:
    """Standard normal variates; each pair of uniforms yields (z0, z1)."""
    pairs = (count + 1) // 2
    u1 = open_unit_uniform(rng, pairs)
    u2 = rng.random(pairs)
    radius = np.sqrt(-2.0 * np.log(u1))
    theta = 2.0 * np.pi * u2
    z = np.empty(pairs * 2)
    z[0::2] = radius * np.cos(theta)
    z[1::2] = radius * np.sin(theta)
    return z[:count]


def inverse_exponential(rng: np.random.Generator, rate: float, count: int) -> np.ndarray:
    return -np.log(open_unit_uniform(rng, count)) / rate


def scaled_uniform(rng: np.random.Generator, a: float, b: float, count: int) -> np.ndarray:
    return a + rng.random(count) * (b - a)


def knuth_poisson(
    rng: np.random.Generator,
    rate: float,
    count: int,
    max_iterations: int = MAX_KNUTH_ITERATIONS,
) -> np.ndarray:
    """Knuth's multiplicative Poisson sampler.

    Multiplies uniforms until the product drops to e^-rate and counts the
    draws. The product is tracked as a sum of logs so large rates do not
    underflow; variates still running after ``max_iterations`` are truncated.
    """
    threshold = -rate
    log_product = np.zeros(count)
    k = np.zeros(count, dtype=np.int64)
    active = np.ones(count, dtype=bool)
    for _ in range(max_iterations):
        idx = np.flatnonzero(active)
        if idx.size == 0:
            break
        log_product[idx] += np.log(open_unit_uniform(rng, idx.size))
        done = log_product[idx] <= threshold
        k[idx[~done]] += 1
        active[idx[done]] = False
    truncated = int(active.sum())
    if truncated:
        log.warning(
            "Poisson sampler hit iteration cap",
            extra={"family": "poisson", "status": "TRUNCATED", "n_samples": truncated},
        )
    return k.astype(float)


def bernoulli_sum(rng: np.random.Generator, trials: int, p: float, count: int) -> np.ndarray:
    """Binomial variates as sums of ``trials`` independent Bernoulli(p) draws."""
    out = np.empty(count)
    if trials == 0:
        out[:] = 0.0
        return out
    rows_per_chunk = max(1, BERNOULLI_CHUNK_CELLS // trials)
    for start in range(0, count, rows_per_chunk):
        stop = min(count, start + rows_per_chunk)
        out[start:stop] = (rng.random((stop - start, trials)) < p).sum(axis=1)
    return out


__all__ = [
    "MAX_KNUTH_ITERATIONS",
    "bernoulli_sum",
    "box_muller",
    "inverse_exponential",
    "knuth_poisson",
    "open_unit_uniform",
    "scaled_uniform",
]
