import math

import numpy as np
import pytest

from stat_workbench.distributions.special import (
    binomial_coefficient,
    erf,
    is_integral,
    log_binomial_coefficient,
    log_factorial,
    normal_cdf,
)


@pytest.mark.parametrize("x", np.linspace(-4.0, 4.0, 81))
def test_erf_approximation_error_bound(x):
    assert erf(float(x)) == pytest.approx(math.erf(float(x)), abs=2e-7)


def test_erf_is_odd():
    assert erf(-0.7) == pytest.approx(-erf(0.7))


def test_normal_cdf_centre_and_tails():
    assert normal_cdf(0.0, 0.0, 1.0) == pytest.approx(0.5, abs=1e-7)
    assert normal_cdf(1.96, 0.0, 1.0) == pytest.approx(0.975, abs=1e-4)
    assert normal_cdf(-10.0, 0.0, 1.0) == pytest.approx(0.0, abs=1e-7)


@pytest.mark.parametrize("n,k,expected", [(10, 3, 120), (5, 0, 1), (5, 5, 1), (52, 5, 2598960), (5, 6, 0), (5, -1, 0)])
def test_binomial_coefficient(n, k, expected):
    assert binomial_coefficient(n, k) == pytest.approx(expected)


def test_log_helpers_stay_finite_for_large_arguments():
    assert log_factorial(10) == pytest.approx(math.log(3628800))
    value = log_binomial_coefficient(10_000, 5_000)
    assert math.isfinite(value)
    assert value == pytest.approx(math.lgamma(10_001) - 2 * math.lgamma(5_001))
    assert log_binomial_coefficient(3, 4) == -math.inf


def test_log_factorial_rejects_negative():
    with pytest.raises(ValueError):
        log_factorial(-1)


def test_is_integral():
    assert is_integral(3.0)
    assert not is_integral(2.5)
    assert not is_integral(math.inf)
