# triage.py
from typing import Dict, List, Mapping

from config import DUAL_UNIT_FIELDS, RANGES, THRESHOLDS
from units import round_to_step, to_metric, to_number


def display_metric_values(raw: Mapping[str, float], use_us_units: bool) -> Dict[str, float]:
    """
    SI values for the modifiable factors, as the SI view would show them.
    US entries of dual-unit fields are converted and rounded to the SI step;
    everything else passes through.
    """
    values: Dict[str, float] = {}
    for field in THRESHOLDS:
        val = to_number(raw.get(field))
        if use_us_units and field in DUAL_UNIT_FIELDS:
            val = round_to_step(to_metric(field, val), RANGES[field]["si"][2])
        values[field] = val
    return values


def is_elevated(field: str, value: float) -> bool:
    rule = THRESHOLDS[field]
    if rule["direction"] == "below":
        return value <= rule["elevated"]
    return value >= rule["elevated"]


def elevated_factors(metric_values: Mapping[str, float]) -> List[str]:
    """
    Modifiable factors past their clinical cutoff, in THRESHOLDS order.
    Low HDL is the risk state, so cholHDL flags at or below its cutoff.
    """
    return [f for f in THRESHOLDS if is_elevated(f, to_number(metric_values.get(f)))]
