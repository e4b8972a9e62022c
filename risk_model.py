# risk_model.py
"""
ARIC diabetes prediction model (Schmidt et al. 2005).

The model is linear in its predictors, so the mean-centered terms add up
exactly to the score's distance from the population-mean score. Adding
interaction terms to MODEL would break that identity.
"""
import logging
import math
from typing import Dict, List, Mapping, Tuple

from config import FACTORS, MEANS, MODEL, RISK_BANDS
from units import to_number

logger = logging.getLogger(__name__)


def logistic(x: float) -> float:
    # Split by sign so exp() never overflows
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def linear_score(normalized: Mapping[str, float]) -> float:
    betas = MODEL["betas"]
    return MODEL["intercept"] + sum(betas[f] * to_number(normalized.get(f)) for f in FACTORS)


def baseline_score() -> float:
    return linear_score(MEANS)


def contributions(normalized: Mapping[str, float]) -> Dict[str, float]:
    betas = MODEL["betas"]
    return {f: betas[f] * (to_number(normalized.get(f)) - MEANS[f]) for f in FACTORS}


def evaluate(normalized: Mapping[str, float]) -> Tuple[float, Dict[str, float]]:
    """Returns (probability in (0, 1), mean-centered contribution per factor)."""
    score = linear_score(normalized)
    prob = logistic(score)
    contrib = contributions(normalized)
    logger.debug("score=%.4f probability=%.4f", score, prob)
    return prob, contrib


def rank_contributions(contrib: Mapping[str, float]) -> List[Tuple[str, float]]:
    # sorted() is stable, so ties keep the caller's order
    return sorted(contrib.items(), key=lambda kv: abs(kv[1]), reverse=True)


def direction(value: float) -> str:
    return "protective" if value < 0 else "risk"


def risk_band(percent: float) -> Dict:
    """Band for a 0-100 risk; boundaries belong to the higher band."""
    band = RISK_BANDS[0]
    for candidate in RISK_BANDS:
        if percent >= candidate["min_pct"]:
            band = candidate
    return band
