"""Normal-approximation confidence interval for the population mean."""

from __future__ import annotations

import math

from stat_workbench.distributions.errors import MIN_SAMPLES, handle_insufficient_data, has_minimum_samples
from stat_workbench.exceptions import UnsupportedParameterError
from stat_workbench.stats.models import ConfidenceInterval, DescriptiveResult, InsufficientSample

Z_CRITICAL = {
    90: 1.645,
    95: 1.96,
    98: 2.33,
    99: 2.576,
}


def z_critical(level: int | float) -> float:
    """Look up the two-sided critical value; unsupported levels are rejected."""
    key = int(level) if float(level).is_integer() else level
    if key not in Z_CRITICAL:
        raise UnsupportedParameterError(
            f"Unsupported confidence level {level}; expected one of {sorted(Z_CRITICAL)}"
        )
    return Z_CRITICAL[key]


def compute_confidence_interval(
    result: DescriptiveResult,
    level: int = 95,
    *,
    min_samples: int | None = None,
) -> ConfidenceInterval | InsufficientSample:
    z = z_critical(level)
    required = min_samples if min_samples is not None else MIN_SAMPLES["confidence_interval"]
    if not has_minimum_samples("confidence_interval", result.count, required) or result.std_dev is None:
        return handle_insufficient_data("confidence_interval", result.count, min_required=required)

    standard_error = result.std_dev / math.sqrt(result.count)
    margin = z * standard_error
    return ConfidenceInterval(
        level=int(level),
        z_critical=z,
        standard_error=standard_error,
        margin_of_error=margin,
        lower=result.mean - margin,
        upper=result.mean + margin,
    )


__all__ = ["Z_CRITICAL", "compute_confidence_interval", "z_critical"]
