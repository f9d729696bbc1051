import numpy as np
import pytest

from stat_workbench.distributions.estimation import fit_distribution
from stat_workbench.distributions.normal import NormalDistribution
from stat_workbench.exceptions import StatWorkbenchError, UnsupportedParameterError
from stat_workbench.mc import generator
from stat_workbench.mc.generator import sample_distribution


def test_sample_distribution_deterministic_seed():
    p1 = sample_distribution("normal", {"mean": 0.0, "variance": 1.0}, 50, seed=123)
    p2 = sample_distribution("normal", {"mean": 0.0, "variance": 1.0}, 50, seed=123)
    assert np.array_equal(p1, p2)
    p3 = sample_distribution("normal", {"mean": 0.0, "variance": 1.0}, 50, seed=124)
    assert not np.array_equal(p1, p3)


def test_normal_round_trip_recovers_parameters():
    values = sample_distribution("normal", {"mean": 10.0, "variance": 4.0}, 100_000, seed=7)
    fit = fit_distribution(values, "normal")
    assert fit.params["mean"] == pytest.approx(10.0, abs=0.05)
    assert np.sqrt(fit.params["variance"]) == pytest.approx(2.0, abs=0.05)


def test_exponential_round_trip_recovers_rate():
    values = sample_distribution("exponential", {"rate": 0.5}, 100_000, seed=11)
    assert values.min() >= 0.0
    assert fit_distribution(values, "exponential").params["rate"] == pytest.approx(0.5, abs=0.01)


def test_uniform_draws_stay_inside_bounds():
    values = sample_distribution("uniform", {"a": 2.0, "b": 5.0}, 10_000, seed=3)
    assert values.min() >= 2.0 and values.max() < 5.0
    assert values.min() == pytest.approx(2.0, abs=0.01)
    assert values.max() == pytest.approx(5.0, abs=0.01)


def test_poisson_draws_are_counts_with_expected_mean():
    values = sample_distribution("poisson", {"rate": 4.0}, 50_000, seed=5)
    assert np.all(values == np.floor(values))
    assert values.mean() == pytest.approx(4.0, abs=0.05)
    assert values.var() == pytest.approx(4.0, abs=0.15)


def test_poisson_zero_rate_draws_zeros():
    assert np.all(sample_distribution("poisson", {"rate": 0.0}, 20, seed=1) == 0.0)


def test_binomial_draws_with_expected_proportion():
    values = sample_distribution("binomial", {"n": 20, "p": 0.3}, 100_000, seed=9)
    assert values.min() >= 0 and values.max() <= 20
    fit = fit_distribution(values, "binomial", trials=20)
    assert fit.params["p"] == pytest.approx(0.3, abs=0.01)


def test_zero_count_returns_empty_array():
    assert sample_distribution("exponential", {"rate": 1.0}, 0, seed=1).shape == (0,)


@pytest.mark.parametrize("count", [-1, 2.5])
def test_invalid_count_rejected(count):
    with pytest.raises(UnsupportedParameterError):
        sample_distribution("normal", {"mean": 0.0, "variance": 1.0}, count)


def test_invalid_params_rejected():
    with pytest.raises(UnsupportedParameterError):
        sample_distribution("uniform", {"a": 3.0, "b": 1.0}, 5)


def test_sampler_with_bad_shape_raises(monkeypatch):
    class BadNormal(NormalDistribution):
        def sample(self, params, count, rng):
            return np.ones((1, 1))

    monkeypatch.setattr(generator, "get_distribution", lambda family: BadNormal())
    with pytest.raises(StatWorkbenchError):
        sample_distribution("normal", {"mean": 0.0, "variance": 1.0}, 2, seed=1)
