"""PDF/PMF and CDF tables for browsing a family with chosen parameters."""

from __future__ import annotations

import math
from typing import Dict, List, Mapping, Optional

import numpy as np

from stat_workbench.distributions.factory import get_distribution, parse_family
from stat_workbench.interfaces.distribution import Family, Params

EXPLORER_STEPS = 100

DEFAULT_PARAMS: Dict[Family, Params] = {
    Family.NORMAL: {"mean": 0.0, "variance": 1.0},
    Family.EXPONENTIAL: {"rate": 1.0},
    Family.POISSON: {"rate": 3.0},
    Family.UNIFORM: {"a": 0.0, "b": 1.0},
    Family.BINOMIAL: {"n": 10.0, "p": 0.5},
}


def default_params(family: Family | str) -> Params:
    return dict(DEFAULT_PARAMS[parse_family(family)])


def _grid(family: Family, params: Params) -> np.ndarray:
    if family is Family.NORMAL:
        sd = math.sqrt(params["variance"])
        return np.linspace(params["mean"] - 4 * sd, params["mean"] + 4 * sd, EXPLORER_STEPS + 1)
    if family is Family.EXPONENTIAL:
        return np.linspace(0.0, 10.0 / params["rate"], EXPLORER_STEPS + 1)
    if family is Family.UNIFORM:
        margin = (params["b"] - params["a"]) * 0.2
        return np.linspace(params["a"] - margin, params["b"] + margin, EXPLORER_STEPS + 1)
    if family is Family.POISSON:
        rate = params["rate"]
        return np.arange(0, math.ceil(rate + 5 * math.sqrt(rate)) + 1, dtype=float)
    return np.arange(0, int(params["n"]) + 1, dtype=float)


def distribution_table(
    family: Family | str,
    params: Optional[Mapping[str, float]] = None,
    *,
    include_pdf: bool = True,
    include_cdf: bool = False,
) -> List[dict]:
    """Rows of ``{"x", "pdf"?, "cdf"?}`` over the family's default plotting window."""
    family = parse_family(family)
    model = get_distribution(family)
    resolved = model.validate_params(params if params is not None else DEFAULT_PARAMS[family])
    rows = []
    for x in _grid(family, resolved):
        row: dict = {"x": float(x)}
        if include_pdf:
            row["pdf"] = model.pdf(float(x), resolved)
        if include_cdf:
            row["cdf"] = model.cdf(float(x), resolved)
        rows.append(row)
    return rows


__all__ = ["DEFAULT_PARAMS", "EXPLORER_STEPS", "default_params", "distribution_table"]
