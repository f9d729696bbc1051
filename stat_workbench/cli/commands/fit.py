"""Fit, compare and rank CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from stat_workbench.cli.validation import resolve_config, resolve_sample
from stat_workbench.distributions.estimation import (
    compare_methods,
    fit_distribution,
    generate_fitted_curve,
    rank_families,
)
from stat_workbench.distributions.models import DistributionFit
from stat_workbench.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli_fit")


def _metric(value: Optional[float]) -> str:
    return "-" if value is None else f"{value:.4f}"


def _params(fit: DistributionFit) -> str:
    return ", ".join(f"{k}={v:.4f}" for k, v in fit.params.items())


def _fits_table(title: str, fits: List[DistributionFit]) -> Table:
    table = Table(title=title)
    for column in ("Family", "Method", "Parameters", "LogLik", "AIC", "BIC", "Status"):
        table.add_column(column)
    for f in fits:
        status = f"DEGENERATE: {f.message}" if f.degenerate else "ok"
        table.add_row(
            f.family.value,
            f.method.value.upper(),
            _params(f),
            _metric(f.log_likelihood),
            _metric(f.aic),
            _metric(f.bic),
            status,
        )
    return table


def fit(
    input_path: Optional[Path] = typer.Option(None, "--input", help="CSV/TXT/JSON sample file"),
    values: Optional[str] = typer.Option(None, "--values", help="Inline sample, e.g. '1,2,3'"),
    family: Optional[str] = typer.Option(None, "--family", help="normal|exponential|poisson|uniform|binomial"),
    method: Optional[str] = typer.Option(None, "--method", help="mle|mom"),
    trials: Optional[int] = typer.Option(None, "--trials", help="Known binomial trial count"),
    curve: bool = typer.Option(False, "--curve", help="Print the fitted density curve"),
    strict: bool = typer.Option(False, "--strict", help="Fail when the fit is degenerate"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of tables"),
) -> None:
    """Estimate distribution parameters by MLE or MoM."""

    cfg = resolve_config(config, {"family": family, "method": method, "binomial_trials": trials})
    sample = resolve_sample(input_path, values)
    result = fit_distribution(sample, cfg.family, cfg.method, trials=cfg.binomial_trials)
    log.info(
        "Fit completed",
        extra={"family": result.family.value, "method": result.method.value, "n_samples": result.n},
    )
    if strict:
        result.require_valid()

    points = []
    if curve and not result.degenerate:
        points = generate_fitted_curve(
            result.family, result.params, (float(sample.min()), float(sample.max())), cfg.curve_resolution
        )

    if as_json:
        payload = result.to_dict()
        if curve:
            payload["curve"] = [{"x": p.x, "density": p.density} for p in points]
        typer.echo(json.dumps(payload, indent=2, default=str))
        return

    console.print(_fits_table(f"{result.family.value} fit (n={result.n})", [result]))
    if result.degenerate:
        console.print(f"[yellow]WARNING: degenerate fit: {result.message}[/yellow]")
    if points:
        table = Table(title="Fitted curve")
        table.add_column("x", justify="right")
        table.add_column("density", justify="right")
        for p in points:
            table.add_row(f"{p.x:.4f}", f"{p.density:.6f}")
        console.print(table)


def compare(
    input_path: Optional[Path] = typer.Option(None, "--input", help="CSV/TXT/JSON sample file"),
    values: Optional[str] = typer.Option(None, "--values", help="Inline sample, e.g. '1,2,3'"),
    family: Optional[str] = typer.Option(None, "--family", help="normal|exponential|poisson|uniform|binomial"),
    trials: Optional[int] = typer.Option(None, "--trials", help="Known binomial trial count"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """Show MLE and MoM estimates for one family side by side."""

    cfg = resolve_config(config, {"family": family, "binomial_trials": trials})
    sample = resolve_sample(input_path, values)
    fits = compare_methods(sample, cfg.family, trials=cfg.binomial_trials)

    if as_json:
        typer.echo(json.dumps({m.value: f.to_dict() for m, f in fits.items()}, indent=2, default=str))
        return
    console.print(_fits_table(f"MLE vs MoM: {cfg.family}", list(fits.values())))


def rank(
    input_path: Optional[Path] = typer.Option(None, "--input", help="CSV/TXT/JSON sample file"),
    values: Optional[str] = typer.Option(None, "--values", help="Inline sample, e.g. '1,2,3'"),
    trials: Optional[int] = typer.Option(None, "--trials", help="Known binomial trial count"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """Fit every family by MLE and order the results by AIC."""

    cfg = resolve_config(config, {"binomial_trials": trials})
    sample = resolve_sample(input_path, values)
    fits = rank_families(sample, trials=cfg.binomial_trials)

    if as_json:
        typer.echo(json.dumps([f.to_dict() for f in fits], indent=2, default=str))
        return
    console.print(_fits_table("Families ranked by AIC", fits))
    best = next((f for f in fits if not f.degenerate), None)
    if best is not None:
        console.print(f"Best family: {best.family.value}")
