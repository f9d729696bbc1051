"""Sample validation utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np
import pandas as pd

from stat_workbench.utils.logging import get_logger

log = get_logger(__name__, component="data_validation")


@dataclass
class CleanResult:
    values: np.ndarray
    dropped: int


def clean_sample(values: Iterable) -> CleanResult:
    """Coerce to float and drop non-numeric and non-finite entries, keeping order."""

    series = pd.to_numeric(pd.Series(list(values), dtype=object), errors="coerce").astype(float)
    finite = np.isfinite(series.to_numpy())
    dropped = int((~finite).sum())
    if dropped:
        log.warning(
            "Dropped non-finite values from sample",
            extra={"n_samples": int(finite.sum()), "status": "DROPPED_NON_FINITE", "dropped": dropped},
        )
    return CleanResult(values=series.to_numpy()[finite], dropped=dropped)


__all__ = ["CleanResult", "clean_sample"]
