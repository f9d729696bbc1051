import json
import sys

import numpy as np
import pytest

pytest.importorskip("typer")
from typer.testing import CliRunner

from stat_workbench.cli import main as cli_main
from stat_workbench.cli.main import app
from stat_workbench.exceptions import ConfigValidationError, DegenerateFitError

runner = CliRunner()

FORTY = ",".join(str(v) for v in range(1, 41))


def test_describe_prints_table_and_small_sample_warning():
    result = runner.invoke(app, ["describe", "--values", "1,2,3,4,5"])
    assert result.exit_code == 0, result.output
    assert "Descriptive statistics" in result.stdout
    assert "WARNING" in result.stdout


def test_describe_json_includes_interval():
    result = runner.invoke(app, ["describe", "--values", FORTY, "--level", "99", "--json", "--qq"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["statistics"]["count"] == 40
    assert payload["statistics"]["mean"] == pytest.approx(20.5)
    assert payload["confidence_interval"]["level"] == 99
    assert payload["confidence_interval"]["lower"] < 20.5 < payload["confidence_interval"]["upper"]
    assert len(payload["qq"]) == 40


def test_describe_requires_a_sample():
    result = runner.invoke(app, ["describe"])
    assert isinstance(result.exception, ConfigValidationError)


def test_histogram_json():
    values = ",".join(str(v) for v in range(1, 101))
    result = runner.invoke(app, ["histogram", "--values", values, "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert len(payload["bins"]) == 10
    assert sum(b["count"] for b in payload["bins"]) == 100


def test_fit_json_with_curve():
    result = runner.invoke(app, ["fit", "--values", "1,2,3,4,5", "--family", "normal", "--curve", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["params"]["mean"] == pytest.approx(3.0)
    assert payload["params"]["variance"] == pytest.approx(2.0)
    assert payload["k"] == 2
    assert len(payload["curve"]) == 101


def test_fit_strict_fails_on_degenerate_fit():
    result = runner.invoke(app, ["fit", "--values", "2,2,2", "--strict"])
    assert result.exit_code != 0
    assert isinstance(result.exception, DegenerateFitError)


def test_compare_and_rank_tables():
    sample = ",".join(f"{v:.4f}" for v in np.random.default_rng(0).uniform(0, 10, size=60))
    compare = runner.invoke(app, ["compare", "--values", sample, "--family", "uniform"])
    assert compare.exit_code == 0, compare.output
    assert "MLE vs MoM" in compare.stdout
    rank = runner.invoke(app, ["rank", "--values", sample, "--json"])
    assert rank.exit_code == 0, rank.output
    families = [f["family"] for f in json.loads(rank.stdout)]
    assert families[0] == "uniform"


def test_density_at_point():
    result = runner.invoke(app, ["density", "--family", "poisson", "--param", "rate=2", "--x", "1", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["density"] == pytest.approx(2 * np.exp(-2.0))


def test_generate_prints_requested_count():
    args = ["generate", "--family", "normal", "--param", "mean=5", "--param", "variance=1", "--count", "10", "--seed", "1"]
    result = runner.invoke(app, args)
    assert result.exit_code == 0, result.output
    assert len(result.stdout.strip().splitlines()) == 10


def test_generate_from_prompt_to_file(tmp_path):
    out = tmp_path / "sample.txt"
    result = runner.invoke(
        app, ["generate", "--prompt", "25 values between 0 and 10", "--seed", "2", "--output", str(out)]
    )
    assert result.exit_code == 0, result.output
    assert "Wrote 25 values" in result.stdout
    assert len(out.read_text().splitlines()) == 25


def test_main_maps_degenerate_fit_to_exit_code(monkeypatch):
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(sys, "argv", ["stat-workbench", "fit", "--values", "2,2,2", "--strict"])
    with pytest.raises(SystemExit) as excinfo:
        cli_main.main()
    assert excinfo.value.code == 3


def test_main_maps_unsupported_parameter_to_exit_code(monkeypatch):
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(sys, "argv", ["stat-workbench", "density", "--family", "gamma"])
    with pytest.raises(SystemExit) as excinfo:
        cli_main.main()
    assert excinfo.value.code == 4


def test_rank_reads_binomial_trials_from_config(tmp_path):
    config = tmp_path / "analysis.yaml"
    config.write_text("binomial_trials: 10\n")
    result = runner.invoke(app, ["rank", "--values", "1,2,3,4,2,3", "--config", str(config), "--json"])
    assert result.exit_code == 0, result.output
    binomial = next(f for f in json.loads(result.stdout) if f["family"] == "binomial")
    assert binomial["params"]["n"] == 10
    assert binomial["params"]["p"] == pytest.approx(2.5 / 10)


def test_main_interrupted_command_exits_with_abort_code(monkeypatch):
    def interrupted(sample):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr("stat_workbench.cli.commands.describe.compute_descriptive_statistics", interrupted)
    monkeypatch.setattr(sys, "argv", ["stat-workbench", "describe", "--values", "1,2,3"])
    with pytest.raises(SystemExit) as excinfo:
        cli_main.main()
    assert excinfo.value.code == 1
