"""Interfaces for pluggable components."""

from .distribution import DistributionModel, Family, Method, Params

__all__ = ["DistributionModel", "Family", "Method", "Params"]
