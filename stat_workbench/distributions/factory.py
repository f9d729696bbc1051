"""Factory and dispatch helpers for distribution families."""

from __future__ import annotations

from typing import Mapping

from stat_workbench.distributions.binomial import BinomialDistribution
from stat_workbench.distributions.exponential import ExponentialDistribution
from stat_workbench.distributions.normal import NormalDistribution
from stat_workbench.distributions.poisson import PoissonDistribution
from stat_workbench.distributions.uniform import UniformDistribution
from stat_workbench.exceptions import UnsupportedParameterError
from stat_workbench.interfaces.distribution import DistributionModel, Family, Method
from stat_workbench.utils.logging import get_logger

log = get_logger(__name__, component="distribution_factory")

_ALIASES = {
    "gaussian": Family.NORMAL,
    "norm": Family.NORMAL,
    "exp": Family.EXPONENTIAL,
    "pois": Family.POISSON,
    "binom": Family.BINOMIAL,
}


def parse_family(name: Family | str) -> Family:
    if isinstance(name, Family):
        return name
    key = str(name).strip().lower()
    try:
        return _ALIASES.get(key) or Family(key)
    except ValueError:
        allowed = sorted(f.value for f in Family)
        raise UnsupportedParameterError(f"Unknown distribution: {name}. Expected one of {allowed}") from None


def parse_method(name: Method | str) -> Method:
    if isinstance(name, Method):
        return name
    try:
        return Method(str(name).strip().lower())
    except ValueError:
        raise UnsupportedParameterError(f"Unknown estimation method: {name}. Expected 'mle' or 'mom'") from None


def get_distribution(family: Family | str, trials: int | None = None) -> DistributionModel:
    family = parse_family(family)
    if family is Family.NORMAL:
        return NormalDistribution()
    if family is Family.EXPONENTIAL:
        return ExponentialDistribution()
    if family is Family.POISSON:
        return PoissonDistribution()
    if family is Family.UNIFORM:
        return UniformDistribution()
    if family is Family.BINOMIAL:
        return BinomialDistribution(trials=trials)
    raise UnsupportedParameterError(f"Unknown distribution: {family}")


class ModelFactory:
    """Builds a fresh model for each fit, carrying the known binomial trial count."""

    def __init__(self, family: Family, trials: int | None = None) -> None:
        self.family = family
        self.trials = trials

    def create(self, source: str | None = None) -> DistributionModel:
        model = get_distribution(self.family, trials=self.trials)
        log.debug(
            "Distribution model loaded",
            extra={"family": self.family.value, "method": source, "status": model.__class__.__name__},
        )
        return model


def distribution_factory(family: Family | str, trials: int | None = None) -> ModelFactory:
    return ModelFactory(parse_family(family), trials=trials)


def evaluate_density(family: Family | str, params: Mapping[str, float], x: float) -> float:
    return get_distribution(family).pdf(x, params)


def evaluate_cdf(family: Family | str, params: Mapping[str, float], x: float) -> float:
    return get_distribution(family).cdf(x, params)


__all__ = [
    "ModelFactory",
    "distribution_factory",
    "evaluate_cdf",
    "evaluate_density",
    "get_distribution",
    "parse_family",
    "parse_method",
]
