"""Statistical analysis workbench: descriptive statistics, parameter estimation and distributions."""

from stat_workbench.distributions.estimation import (
    compare_methods,
    fit_distribution,
    generate_fitted_curve,
    rank_families,
)
from stat_workbench.distributions.factory import evaluate_cdf, evaluate_density
from stat_workbench.interfaces.distribution import Family, Method
from stat_workbench.mc.generator import sample_distribution
from stat_workbench.stats.confidence import compute_confidence_interval
from stat_workbench.stats.descriptive import compute_descriptive_statistics
from stat_workbench.stats.histogram import bin_histogram

__version__ = "0.1.0"

__all__ = [
    "Family",
    "Method",
    "bin_histogram",
    "compare_methods",
    "compute_confidence_interval",
    "compute_descriptive_statistics",
    "evaluate_cdf",
    "evaluate_density",
    "fit_distribution",
    "generate_fitted_curve",
    "rank_families",
    "sample_distribution",
]
