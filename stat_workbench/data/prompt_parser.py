"""Heuristic extraction of a sample request from a free-text prompt.

This is string processing, kept apart from the statistics core: it turns text
such as "generate 200 exam scores between 40 and 100 with mean 70 and standard
deviation 12" into a family, parameters and a count, then hands those to
``sample_distribution`` like any other synthetic source.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Dict, Tuple

import numpy as np

from stat_workbench.interfaces.distribution import Family
from stat_workbench.mc.generator import sample_distribution
from stat_workbench.utils.logging import get_logger

log = get_logger(__name__, component="prompt_parser")

DEFAULT_COUNT = 100
MAX_COUNT = 1000
DEFAULT_RANGE = (0.0, 100.0)
DEFAULT_PRECISION = 2

_NUM = r"(-?\d+(?:\.\d+)?)"
_SEP = r"\s*(?:of|=|:|is|at|around|about)?\s*"

COUNT_RE = re.compile(
    r"(\d+)\s+(?:[a-z\-]+\s+){0,3}?(?:values|samples|points|observations|numbers|records|data|readings|scores|measurements)",
    re.IGNORECASE,
)
RANGE_RE = re.compile(rf"(?:between|from|range(?:\s+of)?)\s*{_NUM}\s*(?:and|to|-)\s*{_NUM}", re.IGNORECASE)
MEAN_RE = re.compile(rf"(?:mean|average|expected value|expectation){_SEP}{_NUM}", re.IGNORECASE)
STD_RE = re.compile(rf"\b(?:standard deviation|std\.?\s*dev|std|sd|sigma){_SEP}{_NUM}", re.IGNORECASE)
VARIANCE_RE = re.compile(rf"variance{_SEP}{_NUM}", re.IGNORECASE)
PRECISION_RE = re.compile(r"(\d+)\s*decimal", re.IGNORECASE)
TRIALS_RE = re.compile(r"(\d+)\s*trials", re.IGNORECASE)
PROBABILITY_RE = re.compile(rf"(?:probability|success rate|\bp\b){_SEP}(0?\.\d+|1(?:\.0+)?|0)", re.IGNORECASE)

FAMILY_KEYWORDS: Tuple[Tuple[Family, Tuple[str, ...]], ...] = (
    (Family.UNIFORM, ("uniform", "evenly distributed")),
    (Family.EXPONENTIAL, ("exponential", "waiting time", "time between")),
    (Family.POISSON, ("poisson", "counts per", "arrivals")),
    (Family.BINOMIAL, ("binomial", "bernoulli", "successes")),
    (Family.NORMAL, ("normal", "gaussian", "bell")),
)


@dataclass
class SampleRequest:
    family: Family
    count: int
    params: Dict[str, float]
    minimum: float
    maximum: float
    precision: int = DEFAULT_PRECISION
    offset: float = 0.0
    matched: Dict[str, str] = field(default_factory=dict)


def detect_family(text: str, std_given: bool, minimum: float, maximum: float) -> Family:
    lowered = text.lower()
    for family, keywords in FAMILY_KEYWORDS:
        if any(word in lowered for word in keywords):
            return family
    if std_given:
        return Family.NORMAL
    if maximum - minimum < 100:
        return Family.UNIFORM
    return Family.NORMAL


def parse_prompt(text: str) -> SampleRequest:
    matched: Dict[str, str] = {}

    count = DEFAULT_COUNT
    m = COUNT_RE.search(text)
    if m:
        count = min(int(m.group(1)), MAX_COUNT)
        matched["count"] = m.group(0)

    minimum, maximum = DEFAULT_RANGE
    m = RANGE_RE.search(text)
    if m:
        minimum, maximum = float(m.group(1)), float(m.group(2))
        if minimum > maximum:
            minimum, maximum = maximum, minimum
        matched["range"] = m.group(0)

    mean = (minimum + maximum) / 2.0
    m = MEAN_RE.search(text)
    if m:
        mean = float(m.group(1))
        matched["mean"] = m.group(0)

    std_dev = (maximum - minimum) / 6.0
    std_given = False
    m = STD_RE.search(text)
    v = VARIANCE_RE.search(text)
    if m:
        std_dev = abs(float(m.group(1)))
        std_given = True
        matched["std_dev"] = m.group(0)
    elif v:
        std_dev = math.sqrt(abs(float(v.group(1))))
        std_given = True
        matched["variance"] = v.group(0)

    precision = DEFAULT_PRECISION
    m = PRECISION_RE.search(text)
    if m:
        precision = max(0, min(10, int(m.group(1))))
        matched["precision"] = m.group(0)

    family = detect_family(text, std_given, minimum, maximum)
    offset = 0.0
    if family is Family.NORMAL:
        params = {"mean": mean, "variance": max(std_dev, 1e-12) ** 2}
    elif family is Family.UNIFORM:
        if maximum == minimum:
            maximum = minimum + 1.0
        params = {"a": minimum, "b": maximum}
    elif family is Family.EXPONENTIAL:
        # shifted so the smallest value sits at the range minimum
        scale = mean - minimum
        params = {"rate": 1.0 / scale if scale > 0 else 1.0}
        offset = minimum
    elif family is Family.POISSON:
        params = {"rate": abs(mean)}
    else:
        trials = int(maximum) if maximum >= 1 else 1
        m = TRIALS_RE.search(text)
        if m:
            trials = max(1, int(m.group(1)))
            matched["trials"] = m.group(0)
        m = PROBABILITY_RE.search(text)
        if m:
            p = float(m.group(1))
            matched["probability"] = m.group(0)
        else:
            p = mean / trials
        params = {"n": float(trials), "p": min(1.0, max(0.0, p))}

    request = SampleRequest(
        family=family,
        count=count,
        params=params,
        minimum=minimum,
        maximum=maximum,
        precision=precision,
        offset=offset,
        matched=matched,
    )
    log.debug("Parsed prompt", extra={"family": family.value, "n_samples": count})
    return request


def generate_from_prompt(text: str, seed: int | None = None) -> Tuple[SampleRequest, np.ndarray]:
    request = parse_prompt(text)
    values = sample_distribution(request.family, request.params, request.count, seed=seed)
    values = np.round(values + request.offset, request.precision)
    return request, values


__all__ = [
    "DEFAULT_COUNT",
    "MAX_COUNT",
    "SampleRequest",
    "detect_family",
    "generate_from_prompt",
    "parse_prompt",
]
