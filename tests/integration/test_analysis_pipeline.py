"""End-to-end: generate, summarise, bin, fit and overlay a fitted curve."""

import math

import numpy as np
import pytest

from stat_workbench import (
    bin_histogram,
    compute_confidence_interval,
    compute_descriptive_statistics,
    fit_distribution,
    generate_fitted_curve,
    rank_families,
    sample_distribution,
)
from stat_workbench.data.loader import load_sample
from stat_workbench.stats.models import ConfidenceInterval


def test_normal_sample_pipeline(tmp_path):
    values = sample_distribution("normal", {"mean": 50.0, "variance": 25.0}, 2_000, seed=21)
    path = tmp_path / "sample.txt"
    path.write_text("\n".join(repr(float(v)) for v in values))
    sample = load_sample(path)
    assert np.allclose(sample, values, rtol=1e-12)

    summary = compute_descriptive_statistics(sample)
    interval = compute_confidence_interval(summary, 95)
    assert isinstance(interval, ConfidenceInterval)
    assert interval.lower < 50.0 < interval.upper

    bins = bin_histogram(sample)
    assert len(bins) == 20
    assert sum(bins.counts) == 2_000

    fit = fit_distribution(sample, "normal")
    curve = generate_fitted_curve(fit.family, fit.params, (summary.min, summary.max), resolution=200)
    assert curve[0].x < summary.min and curve[-1].x > summary.max

    # histogram density should track the fitted curve near the centre of the sample
    centre = max(bins, key=lambda b: b.count)
    midpoint = (centre.range_start + centre.range_end) / 2
    nearest = min(curve, key=lambda p: abs(p.x - midpoint))
    assert centre.density == pytest.approx(nearest.density, rel=0.25)


def test_poisson_sample_ranks_discrete_family_first():
    values = sample_distribution("poisson", {"rate": 6.0}, 3_000, seed=2)
    fits = rank_families(values, ["poisson", "normal", "exponential"])
    assert fits[0].family.value == "poisson"
    assert all(math.isfinite(f.aic) for f in fits)
