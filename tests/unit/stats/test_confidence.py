import pytest

from stat_workbench.exceptions import UnsupportedParameterError
from stat_workbench.stats.confidence import Z_CRITICAL, compute_confidence_interval, z_critical
from stat_workbench.stats.descriptive import compute_descriptive_statistics
from stat_workbench.stats.models import ConfidenceInterval, DescriptiveResult, InsufficientSample


def _summary(mean: float, std_dev: float, count: int) -> DescriptiveResult:
    return DescriptiveResult(
        count=count,
        mean=mean,
        median=mean,
        mode=None,
        variance=std_dev**2,
        std_dev=std_dev,
        min=mean - 3 * std_dev,
        max=mean + 3 * std_dev,
        range=6 * std_dev,
        q1=mean - std_dev,
        q3=mean + std_dev,
        iqr=2 * std_dev,
        skewness=0.0,
        kurtosis=0.0,
        population_variance=std_dev**2 * (count - 1) / count,
    )


def test_95_percent_interval_for_known_summary():
    interval = compute_confidence_interval(_summary(50.0, 10.0, 100), 95)
    assert isinstance(interval, ConfidenceInterval)
    assert interval.standard_error == pytest.approx(1.0)
    assert interval.margin_of_error == pytest.approx(1.96)
    assert interval.lower == pytest.approx(48.04)
    assert interval.upper == pytest.approx(51.96)


@pytest.mark.parametrize("level", sorted(Z_CRITICAL))
def test_wider_levels_give_wider_intervals(level):
    interval = compute_confidence_interval(_summary(0.0, 1.0, 400), level)
    assert interval.margin_of_error == pytest.approx(Z_CRITICAL[level] / 20.0)
    assert interval.lower < 0.0 < interval.upper


def test_small_sample_returns_insufficient_marker():
    result = compute_descriptive_statistics(list(range(10)))
    interval = compute_confidence_interval(result, 95)
    assert isinstance(interval, InsufficientSample)
    assert interval.required == 30
    assert interval.actual == 10
    assert "Insufficient data" in interval.message


def test_min_samples_override():
    result = compute_descriptive_statistics(list(range(10)))
    interval = compute_confidence_interval(result, 90, min_samples=5)
    assert isinstance(interval, ConfidenceInterval)


def test_unsupported_level_is_rejected_not_defaulted():
    with pytest.raises(UnsupportedParameterError):
        compute_confidence_interval(_summary(50.0, 10.0, 100), 97)
    with pytest.raises(ValueError):
        z_critical(80)


def test_float_levels_are_accepted_when_integral():
    assert z_critical(99.0) == 2.576
