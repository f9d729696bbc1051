import pytest

from stat_workbench.exceptions import ConfigValidationError
from stat_workbench.schema.analysis_config import AnalysisConfig


def test_defaults_round_trip_through_dict():
    cfg = AnalysisConfig()
    assert AnalysisConfig.from_dict(cfg.to_dict()) == cfg
    assert cfg.confidence_level == 95
    assert cfg.min_ci_samples == 30


def test_family_and_method_are_normalised():
    cfg = AnalysisConfig(family="Gaussian", method="MOM")
    assert cfg.family == "normal"
    assert cfg.method == "mom"


def test_from_dict_ignores_unknown_keys():
    cfg = AnalysisConfig.from_dict({"confidence_level": 99, "theme": "dark"})
    assert cfg.confidence_level == 99


@pytest.mark.parametrize(
    "kwargs",
    [
        {"confidence_level": 97},
        {"family": "gamma"},
        {"method": "bayes"},
        {"bin_count": 0},
        {"curve_resolution": 0},
        {"binomial_trials": -3},
        {"min_ci_samples": 1},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ConfigValidationError):
        AnalysisConfig(**kwargs)
