"""Fixed-count histogram binning."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from stat_workbench.exceptions import UnsupportedParameterError
from stat_workbench.stats.models import HistogramBin, HistogramBins

MIN_BINS = 5
MAX_BINS = 20


def default_bin_count(n: int) -> int:
    return max(MIN_BINS, min(MAX_BINS, math.ceil(math.sqrt(n))))


def bin_histogram(sample: Sequence[float] | np.ndarray, bin_count: Optional[int] = None) -> Optional[HistogramBins]:
    """Bin ``sample`` into equal-width bins spanning [min, max].

    Bins are closed-open except the last, which also takes values equal to the
    sample maximum. A constant sample yields a single unit-width bin centred on
    the value.
    """
    values = np.asarray(sample, dtype=float).ravel()
    n = len(values)
    if n == 0:
        return None
    if bin_count is not None and (int(bin_count) != bin_count or bin_count < 1):
        raise UnsupportedParameterError(f"bin_count must be a positive integer, got {bin_count}")

    lo, hi = float(values.min()), float(values.max())
    if hi == lo:
        only = HistogramBin(range_start=lo - 0.5, range_end=hi + 0.5, count=n, density=1.0)
        return HistogramBins(bins=(only,), bin_width=1.0, total=n)

    count = int(bin_count) if bin_count is not None else default_bin_count(n)
    width = (hi - lo) / count
    idx = np.floor((values - lo) / width).astype(np.int64)
    idx[values == hi] = count - 1
    np.clip(idx, 0, count - 1, out=idx)
    counts = np.bincount(idx, minlength=count)

    bins = tuple(
        HistogramBin(
            range_start=lo + i * width,
            range_end=hi if i == count - 1 else lo + (i + 1) * width,
            count=int(c),
            density=float(c) / (n * width),
        )
        for i, c in enumerate(counts)
    )
    return HistogramBins(bins=bins, bin_width=width, total=n)


__all__ = ["MAX_BINS", "MIN_BINS", "bin_histogram", "default_bin_count"]
