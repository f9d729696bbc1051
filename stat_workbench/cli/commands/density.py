"""Density CLI command: evaluate or tabulate a family's PDF/PMF and CDF."""

from __future__ import annotations

import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from stat_workbench.cli.validation import parse_params
from stat_workbench.distributions.explorer import default_params, distribution_table
from stat_workbench.distributions.factory import evaluate_cdf, evaluate_density, parse_family

console = Console()


def density(
    family: str = typer.Option("normal", "--family", help="normal|exponential|poisson|uniform|binomial"),
    param: Optional[List[str]] = typer.Option(None, "--param", help="Distribution parameter key=value (repeatable)"),
    x: Optional[float] = typer.Option(None, "--x", help="Evaluate at a single point instead of tabulating"),
    cdf: bool = typer.Option(False, "--cdf", help="Include the CDF when tabulating"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """Evaluate a distribution at a point or over its default plotting window."""

    fam = parse_family(family)
    params = default_params(fam)
    params.update(parse_params(param))

    if x is not None:
        payload = {
            "family": fam.value,
            "params": params,
            "x": x,
            "density": evaluate_density(fam, params, x),
            "cdf": evaluate_cdf(fam, params, x),
        }
        if as_json:
            typer.echo(json.dumps(payload, indent=2))
        else:
            console.print(f"{fam.value} {params}: f({x}) = {payload['density']:.6f}, F({x}) = {payload['cdf']:.6f}")
        return

    rows = distribution_table(fam, params, include_pdf=True, include_cdf=cdf)
    if as_json:
        typer.echo(json.dumps({"family": fam.value, "params": params, "rows": rows}, indent=2))
        return
    table = Table(title=f"{fam.value} {params}")
    table.add_column("x", justify="right")
    table.add_column("pdf/pmf", justify="right")
    if cdf:
        table.add_column("cdf", justify="right")
    for row in rows:
        cells = [f"{row['x']:.4f}", f"{row['pdf']:.6f}"]
        if cdf:
            cells.append(f"{row['cdf']:.6f}")
        table.add_row(*cells)
    console.print(table)
