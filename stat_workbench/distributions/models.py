"""Shared models for distribution fitting."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

from stat_workbench.exceptions import DegenerateFitError
from stat_workbench.interfaces.distribution import Family, Method


class CurvePoint(NamedTuple):
    x: float
    density: float


@dataclass(frozen=True)
class DistributionFit:
    family: Family
    method: Method
    params: Mapping[str, float]
    n: int
    log_likelihood: Optional[float] = None
    aic: Optional[float] = None
    bic: Optional[float] = None
    degenerate: bool = False
    message: Optional[str] = None
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @property
    def k(self) -> int:
        return len(self.params)

    def require_valid(self) -> "DistributionFit":
        if self.degenerate:
            raise DegenerateFitError(self.message or f"{self.family.value} fit is degenerate")
        return self

    def to_dict(self) -> dict:
        return {
            "family": self.family.value,
            "method": self.method.value,
            "params": dict(self.params),
            "n": self.n,
            "k": self.k,
            "log_likelihood": self.log_likelihood,
            "aic": self.aic,
            "bic": self.bic,
            "degenerate": self.degenerate,
            "message": self.message,
            "warnings": list(self.warnings),
        }


__all__ = ["CurvePoint", "DistributionFit"]
