"""Error helpers for insufficient data and degenerate fits."""

from __future__ import annotations

from .data_errors import MIN_SAMPLES, handle_insufficient_data, has_minimum_samples
from .degenerate_errors import record_degenerate_fit

__all__ = [
    "MIN_SAMPLES",
    "handle_insufficient_data",
    "has_minimum_samples",
    "record_degenerate_fit",
]
