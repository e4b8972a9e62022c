# planner.py
from typing import Dict, Iterable, List

from treatments import TREATMENTS


def build_treatment_plan(elevated: Iterable[str]) -> List[Dict]:
    """Treatment blocks for the elevated factors, in the given order. Empty means all normal."""
    plan = []
    for factor in elevated:
        treatment = TREATMENTS.get(factor)
        if not treatment:
            continue
        plan.append({"factor": factor, **treatment})
    return plan
