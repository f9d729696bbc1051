"""Describe CLI command: descriptive statistics, confidence interval, Q-Q pairs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from stat_workbench.cli.validation import resolve_config, resolve_sample
from stat_workbench.distributions.diagnostics.qq_plots import compute_normal_qq_pairs
from stat_workbench.stats.confidence import compute_confidence_interval
from stat_workbench.stats.descriptive import compute_descriptive_statistics
from stat_workbench.stats.models import InsufficientSample
from stat_workbench.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli_describe")


def _fmt(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:.4f}"


def describe(
    input_path: Optional[Path] = typer.Option(None, "--input", help="CSV/TXT/JSON sample file"),
    values: Optional[str] = typer.Option(None, "--values", help="Inline sample, e.g. '1,2,3'"),
    level: Optional[int] = typer.Option(None, "--level", help="Confidence level (90/95/98/99)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    qq: bool = typer.Option(False, "--qq", help="Include normal Q-Q pairs"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of tables"),
) -> None:
    """Summarise a sample and estimate a confidence interval for its mean."""

    cfg = resolve_config(config, {"confidence_level": level})
    sample = resolve_sample(input_path, values)
    result = compute_descriptive_statistics(sample)
    log.info("Summary computed", extra={"n_samples": result.count})
    interval = compute_confidence_interval(result, cfg.confidence_level, min_samples=cfg.min_ci_samples)

    qq_pairs = None
    if qq and result.std_dev:
        theoretical, empirical = compute_normal_qq_pairs(sample, result.mean, result.std_dev)
        qq_pairs = [{"theoretical": float(t), "empirical": float(e)} for t, e in zip(theoretical, empirical)]

    if as_json:
        payload = {"statistics": result.to_dict(), "confidence_interval": interval.to_dict()}
        if qq_pairs is not None:
            payload["qq"] = qq_pairs
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title=f"Descriptive statistics (n={result.count})")
    table.add_column("Statistic")
    table.add_column("Value", justify="right")
    for label, value in (
        ("mean", result.mean),
        ("median", result.median),
        ("mode", result.mode),
        ("variance (n-1)", result.variance),
        ("std dev", result.std_dev),
        ("min", result.min),
        ("max", result.max),
        ("range", result.range),
        ("q1", result.q1),
        ("q3", result.q3),
        ("iqr", result.iqr),
        ("skewness", result.skewness),
        ("excess kurtosis", result.kurtosis),
    ):
        table.add_row(label, _fmt(value))
    console.print(table)

    if isinstance(interval, InsufficientSample):
        console.print(f"[yellow]WARNING: {interval.message}; confidence interval not computed[/yellow]")
    else:
        console.print(
            f"{interval.level}% CI for the mean: [{interval.lower:.4f}, {interval.upper:.4f}] "
            f"(margin of error {interval.margin_of_error:.4f})"
        )

    if qq_pairs is not None:
        qq_table = Table(title="Normal Q-Q pairs")
        qq_table.add_column("Theoretical", justify="right")
        qq_table.add_column("Empirical", justify="right")
        for pair in qq_pairs:
            qq_table.add_row(f"{pair['theoretical']:.4f}", f"{pair['empirical']:.4f}")
        console.print(qq_table)
