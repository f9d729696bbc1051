"""Insufficient data handling helpers."""

from __future__ import annotations

from typing import Optional

from stat_workbench.stats.models import InsufficientSample
from stat_workbench.utils.logging import get_logger

log = get_logger(__name__, component="distribution_errors")

MIN_SAMPLES = {
    "descriptive_statistics": 1,
    "variance": 2,
    "confidence_interval": 30,
    "fit": 1,
}


def has_minimum_samples(operation: str, sample_count: int, min_required: Optional[int] = None) -> bool:
    """Return True when the sample count satisfies the minimum requirement."""

    required = min_required if min_required is not None else MIN_SAMPLES.get(operation, 1)
    return sample_count >= required


def handle_insufficient_data(
    operation: str,
    sample_count: int,
    *,
    min_required: Optional[int] = None,
) -> InsufficientSample:
    """Log and return the marker for an operation skipped due to insufficient data."""

    required = min_required if min_required is not None else MIN_SAMPLES.get(operation, 1)
    log.warning(
        "Skipping computation due to insufficient data",
        extra={
            "operation": operation,
            "required": required,
            "n_samples": sample_count,
            "status": "SKIPPED_INSUFFICIENT_DATA",
        },
    )
    return InsufficientSample(operation=operation, required=required, actual=sample_count)


__all__ = ["MIN_SAMPLES", "handle_insufficient_data", "has_minimum_samples"]
