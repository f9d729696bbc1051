"""Unit tests for insufficient-data and degenerate-fit helpers."""

import math

from stat_workbench.distributions.errors import (
    handle_insufficient_data,
    has_minimum_samples,
    record_degenerate_fit,
)
from stat_workbench.interfaces.distribution import Family, Method
from stat_workbench.stats.models import InsufficientSample


def test_has_minimum_samples_checks_threshold() -> None:
    assert has_minimum_samples("fit", 1)
    assert not has_minimum_samples("confidence_interval", 29)
    assert has_minimum_samples("confidence_interval", 10, min_required=5)


def test_handle_insufficient_data_returns_marker() -> None:
    result = handle_insufficient_data("confidence_interval", 12)
    assert isinstance(result, InsufficientSample)
    assert result.required == 30
    assert result.actual == 12
    assert "Insufficient data" in result.message
    assert result.to_dict()["operation"] == "confidence_interval"


def test_handle_insufficient_data_logs_warning(caplog) -> None:
    with caplog.at_level("WARNING"):
        handle_insufficient_data("variance", 1)
    assert any(getattr(r, "status", None) == "SKIPPED_INSUFFICIENT_DATA" for r in caplog.records)


def test_record_degenerate_fit_flags_mle_result() -> None:
    result = record_degenerate_fit(
        Family.NORMAL,
        Method.MLE,
        params={"mean": 2.0, "variance": 0.0},
        n_samples=4,
        reason="normal variance must be positive, got 0.0",
    )
    assert result.degenerate is True
    assert result.n == 4
    assert result.log_likelihood == -math.inf
    assert result.aic == math.inf and result.bic == math.inf
    assert any("variance" in warning for warning in result.warnings)


def test_record_degenerate_fit_keeps_mom_without_likelihood() -> None:
    result = record_degenerate_fit(
        Family.UNIFORM,
        Method.MOM,
        params={"a": 1.0, "b": 1.0},
        n_samples=3,
        reason="uniform bounds require b > a",
        warnings=["uniform bounds require b > a"],
    )
    assert result.log_likelihood is None
    assert result.aic is None
    assert result.warnings == ("uniform bounds require b > a",)
