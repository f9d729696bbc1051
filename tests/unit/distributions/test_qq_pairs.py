import numpy as np
import pytest

from stat_workbench.distributions.diagnostics.qq_plots import compute_normal_qq_pairs


def test_qq_pairs_sorted_and_centred():
    sample = [3.0, -1.0, 0.0, 2.0, 1.0]
    theoretical, empirical = compute_normal_qq_pairs(sample, mean=1.0, std_dev=1.5)
    assert list(empirical) == [-1.0, 0.0, 1.0, 2.0, 3.0]
    assert len(theoretical) == 5
    assert theoretical[2] == pytest.approx(1.0)
    assert np.all(np.diff(theoretical) > 0)
    assert theoretical[0] == pytest.approx(1.0 - (theoretical[-1] - 1.0))


def test_qq_pairs_empty_sample():
    theoretical, empirical = compute_normal_qq_pairs([], 0.0, 1.0)
    assert theoretical.size == 0 and empirical.size == 0
