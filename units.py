# units.py
import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Mapping, Tuple, Union

from config import CONVERSIONS, DUAL_UNIT_FIELDS, FACTORS, RANGES

logger = logging.getLogger(__name__)


def to_number(value) -> float:
    """Best-effort float; None, blanks, garbage and NaN become 0.0."""
    if isinstance(value, bool):
        return float(value)
    try:
        num = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(num):
        return 0.0
    return num


def _mode(use_metric: bool) -> str:
    return "si" if use_metric else "us"


def slider_range(field: str, use_metric: bool) -> Tuple[float, float, float]:
    lo, hi, step = RANGES[field][_mode(use_metric)]
    return lo, hi, step


def round_to_step(value: float, step: float) -> Union[int, float]:
    """One decimal for fractional steps, nearest integer otherwise (half-up)."""
    quantum = Decimal("0.1") if step < 1 else Decimal("1")
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded) if step < 1 else int(rounded)


def clamp_to_range(field: str, value, use_metric: bool) -> float:
    lo, hi, _ = slider_range(field, use_metric)
    val = to_number(value)
    if val < lo:
        val = lo
    if val > hi:
        val = hi
    return val


def to_metric(field: str, value) -> float:
    return to_number(value) * CONVERSIONS.get(field, 1.0)


def from_metric(field: str, value) -> float:
    return to_number(value) / CONVERSIONS.get(field, 1.0)


def normalize_inputs(raw: Mapping[str, float], use_us_units: bool) -> Dict[str, float]:
    """
    Express every factor in SI units for the model.
    Only the dual-unit fields change, and only when US units are active.
    """
    normalized = {f: to_number(raw.get(f)) for f in FACTORS}
    if use_us_units:
        for field in DUAL_UNIT_FIELDS:
            normalized[field] = to_metric(field, normalized[field])
    return normalized


def convert_for_mode(values: Mapping[str, float], to_metric_units: bool) -> Dict[str, float]:
    """
    Re-express already-entered dual-unit values after a unit toggle.

    Converts into the new mode, clamps into its slider range, then rounds to
    the range's step. Clamping happens before rounding.
    """
    converted = {}
    for field in DUAL_UNIT_FIELDS:
        if field not in values:
            continue
        val = to_metric(field, values[field]) if to_metric_units else from_metric(field, values[field])
        val = clamp_to_range(field, val, to_metric_units)
        _, _, step = slider_range(field, to_metric_units)
        converted[field] = round_to_step(val, step)

    logger.debug("Converted %s to %s units: %s", dict(values), _mode(to_metric_units), converted)
    return converted
