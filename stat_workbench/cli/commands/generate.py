"""Generate CLI command: synthetic samples from a family or a text prompt."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from stat_workbench.cli.validation import parse_params, require_positive, resolve_config
from stat_workbench.data.prompt_parser import generate_from_prompt
from stat_workbench.distributions.explorer import default_params
from stat_workbench.mc.generator import sample_distribution
from stat_workbench.utils.logging import get_logger

log = get_logger(__name__, component="cli_generate")


def generate(
    family: Optional[str] = typer.Option(None, "--family", help="normal|exponential|poisson|uniform|binomial"),
    param: Optional[List[str]] = typer.Option(None, "--param", help="Distribution parameter key=value (repeatable)"),
    count: int = typer.Option(100, "--count", help="Number of values to draw"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    prompt: Optional[str] = typer.Option(None, "--prompt", help="Describe the data in words instead"),
    output: Optional[Path] = typer.Option(None, "--output", help="Write values to this file (one per line)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
) -> None:
    """Draw a synthetic sample and print or save it."""

    cfg = resolve_config(config, {"family": family, "seed": seed})
    if prompt is not None:
        request, values = generate_from_prompt(prompt, seed=cfg.seed)
        log.info(
            "Generated sample from prompt",
            extra={"family": request.family.value, "n_samples": request.count, "status": json.dumps(request.matched)},
        )
    else:
        require_positive("count", count)
        params = default_params(cfg.family)
        params.update(parse_params(param))
        values = sample_distribution(cfg.family, params, count, seed=cfg.seed)

    text = "\n".join(repr(float(v)) for v in values)
    if output is not None:
        output.write_text(text + "\n")
        typer.echo(f"Wrote {len(values)} values to {output}")
    else:
        typer.echo(text)
