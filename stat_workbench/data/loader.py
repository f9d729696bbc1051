"""Load a numeric sample from CSV, text, or JSON input."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd

from stat_workbench.data.validation import clean_sample
from stat_workbench.exceptions import DataSourceError, SchemaError
from stat_workbench.utils.logging import get_logger

log = get_logger(__name__, component="data_loader")

_TOKEN_SPLIT = re.compile(r"[\s,;]+")


def parse_sample_text(text: str) -> np.ndarray:
    """Split free text on whitespace, commas, or semicolons and keep the numbers."""
    tokens = [t for t in _TOKEN_SPLIT.split(text.strip()) if t]
    return clean_sample(tokens).values


def _looks_numeric(name: object) -> bool:
    try:
        float(str(name))
    except ValueError:
        return False
    return True


def _from_frame(df: pd.DataFrame, column: Optional[str], path: Path) -> np.ndarray:
    if column is not None:
        if column not in df.columns:
            raise SchemaError(f"Column '{column}' not found in {path.name}; available: {list(df.columns)}")
        return clean_sample(df[column]).values
    numeric = df.apply(pd.to_numeric, errors="coerce")
    usable = [c for c in numeric.columns if numeric[c].notna().any()]
    if not usable:
        raise SchemaError(f"No numeric column found in {path.name}")
    return clean_sample(numeric[usable[0]]).values


def _read_json(path: Path, column: Optional[str]) -> np.ndarray:
    payload = json.loads(path.read_text())
    if isinstance(payload, dict):
        key = column or next((k for k, v in payload.items() if isinstance(v, list)), None)
        if key is None or key not in payload:
            raise SchemaError(f"No list of values found in {path.name}")
        payload = payload[key]
    if not isinstance(payload, list):
        raise SchemaError(f"Expected a JSON list of numbers in {path.name}")
    if payload and isinstance(payload[0], dict):
        return _from_frame(pd.DataFrame(payload), column or "value", path)
    return clean_sample(payload).values


def load_sample(path: Path | str, column: Optional[str] = None) -> np.ndarray:
    """Read a finite numeric sample from ``path``.

    CSV files use ``column`` (or the first numeric column); ``.txt`` files are
    split on whitespace/commas; JSON may be a list of numbers, a list of
    ``{"value": x}`` records, or an object holding such a list.
    """
    path = Path(path)
    if not path.exists():
        raise DataSourceError(f"Sample file not found: {path}")
    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            df = pd.read_csv(path)
            if column is None and all(_looks_numeric(c) for c in df.columns):
                # headerless file: the first row is data
                df = pd.read_csv(path, header=None)
            values = _from_frame(df, column, path)
        elif suffix == ".json":
            values = _read_json(path, column)
        else:
            values = parse_sample_text(path.read_text())
    except (OSError, ValueError, pd.errors.ParserError) as exc:
        raise DataSourceError(f"Failed to read sample from {path}: {exc}") from exc

    log.info("Loaded sample", extra={"path": str(path), "n_samples": int(len(values))})
    return values


__all__ = ["load_sample", "parse_sample_text"]
