"""Parameter estimation engine: fits, likelihood, information criteria, curves."""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from stat_workbench.distributions.errors import handle_insufficient_data, has_minimum_samples, record_degenerate_fit
from stat_workbench.distributions.factory import distribution_factory, get_distribution, parse_family, parse_method
from stat_workbench.distributions.metrics.information_criteria import aic as calc_aic, bic as calc_bic
from stat_workbench.distributions.models import CurvePoint, DistributionFit
from stat_workbench.interfaces.distribution import DistributionModel, Family, Method
from stat_workbench.utils.logging import get_logger

log = get_logger(__name__, component="estimation")

CURVE_RESOLUTION = 100
CURVE_PADDING = 0.1


def log_likelihood(model: DistributionModel, params: Mapping[str, float], sample: np.ndarray) -> float:
    """Sum of log densities; -inf when the sample falls outside the fitted support."""
    return model.log_likelihood(np.asarray(sample, dtype=float), params)


def fit_distribution(
    sample: Sequence[float] | np.ndarray,
    family: Family | str,
    method: Method | str = Method.MLE,
    *,
    trials: int | None = None,
) -> Optional[DistributionFit]:
    """Fit ``family`` to ``sample`` by MLE or MoM.

    Returns None for an empty sample. Degenerate estimates (zero variance,
    violated bounds, values outside the support) come back flagged instead of
    raising. Likelihood and AIC/BIC are only computed on the MLE path.
    """
    family = parse_family(family)
    method = parse_method(method)
    values = np.asarray(sample, dtype=float).ravel()
    n = len(values)
    if not has_minimum_samples("fit", n):
        handle_insufficient_data("fit", n)
        return None

    model = distribution_factory(family, trials=trials).create(source=method.value)
    params = model.fit_mle(values) if method is Method.MLE else model.fit_mom(values)

    problem = model.check_params(params)
    if problem:
        return record_degenerate_fit(family, method, params=params, n_samples=n, reason=problem)

    if method is Method.MOM:
        return DistributionFit(family=family, method=method, params=params, n=n)

    loglik = log_likelihood(model, params, values)
    if not math.isfinite(loglik):
        lo, hi = model.support_bounds(params)
        reason = (
            f"sample lies outside the fitted {family.value} support "
            f"[{lo:g}, {hi:g}] or off its lattice"
        )
        return record_degenerate_fit(family, method, params=params, n_samples=n, reason=reason)

    k = len(params)
    fit = DistributionFit(
        family=family,
        method=method,
        params=params,
        n=n,
        log_likelihood=loglik,
        aic=calc_aic(loglik, k),
        bic=calc_bic(loglik, k, n),
    )
    log.debug("Distribution fitted", extra={"family": family.value, "method": method.value, "n_samples": n})
    return fit


def _curve_window(sample_range: Tuple[float, float]) -> Tuple[float, float]:
    lo, hi = float(sample_range[0]), float(sample_range[1])
    if hi < lo:
        lo, hi = hi, lo
    span = hi - lo
    pad = span * CURVE_PADDING if span > 0 else 1.0
    return lo - pad, hi + pad


def generate_fitted_curve(
    family: Family | str,
    params: Mapping[str, float],
    sample_range: Tuple[float, float],
    resolution: int = CURVE_RESOLUTION,
) -> List[CurvePoint]:
    """Density series over the sample range padded by 10% on each side.

    Continuous families get ``resolution`` uniform steps (``resolution + 1``
    points); discrete families get one point per integer in the padded window
    that also lies inside the distribution's support.
    """
    model = get_distribution(family)
    params = model.validate_params(params)
    start, end = _curve_window(sample_range)

    if model.discrete:
        lo_support, hi_support = model.support_bounds(params)
        k_start = max(math.ceil(start), int(lo_support))
        k_end = math.floor(end)
        if math.isfinite(hi_support):
            k_end = min(k_end, int(hi_support))
        return [CurvePoint(float(k), model.pdf(k, params)) for k in range(k_start, k_end + 1)]

    if resolution < 1:
        raise ValueError("resolution must be >= 1")
    xs = np.linspace(start, end, resolution + 1)
    return [CurvePoint(float(x), model.pdf(float(x), params)) for x in xs]


def compare_methods(
    sample: Sequence[float] | np.ndarray,
    family: Family | str,
    *,
    trials: int | None = None,
) -> Dict[Method, Optional[DistributionFit]]:
    """MLE and MoM fits of the same family side by side."""
    return {method: fit_distribution(sample, family, method, trials=trials) for method in Method}


def rank_families(
    sample: Sequence[float] | np.ndarray,
    families: Optional[Iterable[Family | str]] = None,
    *,
    trials: int | None = None,
) -> List[DistributionFit]:
    """MLE fits for each family ordered by AIC, degenerate fits last."""
    candidates = [parse_family(f) for f in (families or list(Family))]
    fits: List[DistributionFit] = []
    for family in candidates:
        fit = fit_distribution(sample, family, Method.MLE, trials=trials)
        if fit is not None:
            fits.append(fit)
    return sorted(fits, key=lambda f: (f.degenerate, f.aic if f.aic is not None else math.inf))


__all__ = [
    "CURVE_RESOLUTION",
    "compare_methods",
    "fit_distribution",
    "generate_fitted_curve",
    "log_likelihood",
    "rank_families",
]
