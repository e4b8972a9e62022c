# calculator.py
import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Mapping, Optional, Tuple

from config import APP, DUAL_UNIT_FIELDS, FACTORS, MEANS, RANGES
from risk_model import evaluate, rank_contributions, risk_band
from triage import display_metric_values, elevated_factors
from units import clamp_to_range, convert_for_mode, normalize_inputs, to_number

logger = logging.getLogger(__name__)


@dataclass
class RiskResult:
    probability_percent: float
    contributions: Dict[str, float]
    elevated_factors: List[str]

    @property
    def band(self) -> Dict:
        return risk_band(self.probability_percent)

    def ranked_contributions(self) -> List[Tuple[str, float]]:
        return rank_contributions(self.contributions)

    def to_dict(self) -> Dict:
        return {
            "probabilityPercent": self.probability_percent,
            "contributions": dict(self.contributions),
            "elevatedFactors": list(self.elevated_factors),
        }


def compute(raw_inputs: Mapping[str, float], use_alternate_units: bool) -> RiskResult:
    """
    Single entry point for the UI.

    raw_inputs: factor -> value in the active unit system (missing/non-numeric = 0)
    use_alternate_units: True when values are in US units (in, mg/dL)
    """
    normalized = normalize_inputs(raw_inputs, use_us_units=use_alternate_units)
    probability, contrib = evaluate(normalized)
    elevated = elevated_factors(display_metric_values(raw_inputs, use_alternate_units))

    result = RiskResult(
        probability_percent=probability * 100,
        contributions=contrib,
        elevated_factors=elevated,
    )
    logger.debug("risk=%.2f%% elevated=%s", result.probability_percent, elevated)
    return result


@dataclass(frozen=True)
class CalculatorState:
    """Unit mode + current field values, owned by the UI and passed into compute()."""
    use_metric: bool = False
    values: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def default(cls, use_metric: Optional[bool] = None) -> "CalculatorState":
        if use_metric is None:
            use_metric = APP["default_units"] == "si"
        values = {f: MEANS[f] for f in FACTORS}
        values["race"] = 0
        values["parentHist"] = 0
        if not use_metric:
            values.update(convert_for_mode(values, to_metric_units=False))
        return cls(use_metric=use_metric, values=values)

    def with_units(self, use_metric: bool) -> "CalculatorState":
        if use_metric == self.use_metric:
            return self
        values = dict(self.values)
        values.update(convert_for_mode({f: values[f] for f in DUAL_UNIT_FIELDS if f in values}, use_metric))
        logger.info("Switched units to %s", "SI" if use_metric else "US")
        return replace(self, use_metric=use_metric, values=values)

    def with_value(self, name: str, value) -> "CalculatorState":
        values = dict(self.values)
        if name in RANGES:
            values[name] = clamp_to_range(name, value, self.use_metric)
        else:
            values[name] = to_number(value)
        return replace(self, values=values)

    def compute(self) -> RiskResult:
        return compute(self.values, use_alternate_units=not self.use_metric)
