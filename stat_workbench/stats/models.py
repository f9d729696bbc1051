"""Value objects produced by the descriptive statistics layer."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class DescriptiveResult:
    count: int
    mean: float
    median: float
    mode: Optional[float]
    variance: Optional[float]
    std_dev: Optional[float]
    min: float
    max: float
    range: float
    q1: float
    q3: float
    iqr: float
    skewness: Optional[float]
    kurtosis: Optional[float]
    population_variance: float
    insufficient_for_variance: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ConfidenceInterval:
    level: int
    z_critical: float
    standard_error: float
    margin_of_error: float
    lower: float
    upper: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class InsufficientSample:
    """Explicit "not computed" marker for operations that need more data."""

    operation: str
    required: int
    actual: int

    @property
    def message(self) -> str:
        return f"Insufficient data for {self.operation}: need >={self.required}, got {self.actual}"

    def to_dict(self) -> dict:
        return {**asdict(self), "message": self.message}


@dataclass(frozen=True)
class HistogramBin:
    range_start: float
    range_end: float
    count: int
    density: float


@dataclass(frozen=True)
class HistogramBins:
    bins: Tuple[HistogramBin, ...]
    bin_width: float
    total: int

    def __len__(self) -> int:
        return len(self.bins)

    def __iter__(self):
        return iter(self.bins)

    @property
    def counts(self) -> Tuple[int, ...]:
        return tuple(b.count for b in self.bins)

    @property
    def densities(self) -> Tuple[float, ...]:
        return tuple(b.density for b in self.bins)

    def to_records(self) -> list[dict]:
        return [asdict(b) for b in self.bins]


__all__ = [
    "ConfidenceInterval",
    "DescriptiveResult",
    "HistogramBin",
    "HistogramBins",
    "InsufficientSample",
]
