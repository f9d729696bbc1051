"""Degenerate fit helpers."""

from __future__ import annotations

import math
from typing import Iterable, Mapping, Optional

from stat_workbench.distributions.models import DistributionFit
from stat_workbench.interfaces.distribution import Family, Method
from stat_workbench.utils.logging import get_logger

log = get_logger(__name__, component="distribution_errors")


def record_degenerate_fit(
    family: Family,
    method: Method,
    *,
    params: Mapping[str, float],
    n_samples: int,
    reason: str,
    warnings: Optional[Iterable[str]] = None,
) -> DistributionFit:
    """Log diagnostics for a degenerate fit and return it flagged.

    On the MLE path the likelihood is reported as -inf and both criteria as
    +inf so rankings push the fit last; MoM fits carry no likelihood.
    """

    warning_list = list(warnings or [])
    if reason not in warning_list:
        warning_list.append(reason)

    log.warning(
        "Degenerate distribution fit",
        extra={
            "family": family.value,
            "method": method.value,
            "n_samples": n_samples,
            "status": "DEGENERATE",
            "error": reason,
        },
    )

    is_mle = method is Method.MLE
    return DistributionFit(
        family=family,
        method=method,
        params={k: float(v) for k, v in params.items()},
        n=n_samples,
        log_likelihood=-math.inf if is_mle else None,
        aic=math.inf if is_mle else None,
        bic=math.inf if is_mle else None,
        degenerate=True,
        message=reason,
        warnings=tuple(warning_list),
    )


__all__ = ["record_degenerate_fit"]
