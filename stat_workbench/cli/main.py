"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from stat_workbench.cli.commands.density import density
from stat_workbench.cli.commands.describe import describe
from stat_workbench.cli.commands.fit import compare, fit, rank
from stat_workbench.cli.commands.generate import generate
from stat_workbench.cli.commands.histogram import histogram
from stat_workbench.exceptions import (
    ConfigValidationError,
    DataSourceError,
    DegenerateFitError,
    InsufficientSampleError,
    UnsupportedParameterError,
)
from stat_workbench.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Statistical analysis workbench CLI")


app.command()(describe)
app.command()(histogram)
app.command()(fit)
app.command()(compare)
app.command()(rank)
app.command()(density)
app.command()(generate)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except ConfigValidationError as exc:
        log.error(str(exc))
        sys.exit(1)
    except (InsufficientSampleError, DataSourceError) as exc:
        log.error(f"Data validation failed: {exc}")
        sys.exit(2)
    except DegenerateFitError as exc:
        log.error(f"Distribution fitting failed: {exc}")
        sys.exit(3)
    except UnsupportedParameterError as exc:
        log.error(f"Unsupported parameter: {exc}")
        sys.exit(4)
    except Exception:
        log.exception("Unhandled exception")
        sys.exit(255)


if __name__ == "__main__":
    main()
