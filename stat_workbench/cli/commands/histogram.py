"""Histogram CLI command."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from stat_workbench.cli.validation import resolve_config, resolve_sample
from stat_workbench.stats.histogram import bin_histogram

console = Console()


def histogram(
    input_path: Optional[Path] = typer.Option(None, "--input", help="CSV/TXT/JSON sample file"),
    values: Optional[str] = typer.Option(None, "--values", help="Inline sample, e.g. '1,2,3'"),
    bins: Optional[int] = typer.Option(None, "--bins", help="Explicit bin count (default clamp(ceil(sqrt(n)), 5, 20))"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """Bin a sample into equal-width frequency and density bins."""

    cfg = resolve_config(config, {"bin_count": bins})
    sample = resolve_sample(input_path, values)
    result = bin_histogram(sample, cfg.bin_count)

    if as_json:
        typer.echo(json.dumps({"bin_width": result.bin_width, "bins": result.to_records()}, indent=2))
        return

    table = Table(title=f"Histogram ({len(result)} bins, width {result.bin_width:.4f})")
    table.add_column("Range")
    table.add_column("Count", justify="right")
    table.add_column("Density", justify="right")
    for b in result:
        table.add_row(f"{b.range_start:.2f} - {b.range_end:.2f}", str(b.count), f"{b.density:.4f}")
    console.print(table)
