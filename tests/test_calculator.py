import math

import pytest

from calculator import CalculatorState, RiskResult, compute
from config import DUAL_UNIT_FIELDS, FACTORS
from risk_model import baseline_score, logistic


class TestCompute:
    def test_mean_patient_same_in_both_modes(self, mean_inputs_si, mean_inputs_us):
        si = compute(mean_inputs_si, use_alternate_units=False)
        us = compute(mean_inputs_us, use_alternate_units=True)
        expected = 100 * logistic(baseline_score())
        assert si.probability_percent == pytest.approx(expected)
        assert us.probability_percent == pytest.approx(expected)
        for f in FACTORS:
            assert si.contributions[f] == pytest.approx(0.0)
            assert us.contributions[f] == pytest.approx(0.0, abs=1e-9)

    def test_all_zero_inputs(self):
        result = compute({}, use_alternate_units=True)
        assert result.probability_percent == pytest.approx(100 / (1 + math.exp(9.9808)))

    def test_high_risk_patient(self, high_risk_si):
        result = compute(high_risk_si, use_alternate_units=False)
        assert result.probability_percent > 50
        assert result.band["key"] == "very-high"
        assert result.elevated_factors == ["fastGlu", "sbp", "cholHDL", "cholTri", "waist"]
        assert result.ranked_contributions()[0][0] == "fastGlu"

    def test_garbage_input_does_not_raise(self):
        result = compute({"age": "abc", "fastGlu": None, "sbp": float("nan")}, use_alternate_units=False)
        assert 0 < result.probability_percent < 100

    def test_to_dict_shape(self, mean_inputs_si):
        payload = compute(mean_inputs_si, use_alternate_units=False).to_dict()
        assert set(payload) == {"probabilityPercent", "contributions", "elevatedFactors"}
        assert set(payload["contributions"]) == set(FACTORS)
        # mean triglycerides and waist already sit at or above their cutoffs
        assert payload["elevatedFactors"] == ["cholTri", "waist"]

    def test_monotonic_in_us_units(self, mean_inputs_us):
        low = compute({**mean_inputs_us, "fastGlu": 90}, True).probability_percent
        high = compute({**mean_inputs_us, "fastGlu": 126}, True).probability_percent
        assert high > low


class TestCalculatorState:
    def test_default_us(self):
        state = CalculatorState.default(use_metric=False)
        assert state.use_metric is False
        assert state.values["height"] == 66
        assert state.values["fastGlu"] == 99
        assert state.values["race"] == 0

    def test_default_si_is_population_means(self):
        state = CalculatorState.default(use_metric=True)
        assert state.values["height"] == 168
        assert state.values["cholHDL"] == 1.3

    def test_toggle_converts_dual_fields_only(self):
        state = CalculatorState.default(use_metric=False).with_value("age", 61)
        si = state.with_units(True)
        assert si.use_metric is True
        assert si.values["age"] == 61
        assert si.values["height"] == 168
        assert si.values["fastGlu"] == 5.5

    def test_toggle_to_same_mode_is_noop(self):
        state = CalculatorState.default(use_metric=False)
        assert state.with_units(False) is state

    def test_double_toggle_is_idempotent(self):
        state = CalculatorState.default(use_metric=True)
        assert state.with_units(False).with_units(True) == state

    def test_with_value_clamps(self):
        state = CalculatorState.default(use_metric=True)
        assert state.with_value("fastGlu", 30).values["fastGlu"] == 16.7
        assert state.with_value("parentHist", "1").values["parentHist"] == 1.0

    def test_state_is_not_mutated(self):
        state = CalculatorState.default(use_metric=False)
        state.with_value("sbp", 150)
        state.with_units(True)
        assert state.values["sbp"] == 120
        assert state.use_metric is False

    def test_compute_uses_state_mode(self):
        us = CalculatorState.default(use_metric=False)
        si = us.with_units(True)
        assert isinstance(us.compute(), RiskResult)
        assert us.compute().probability_percent == pytest.approx(si.compute().probability_percent, abs=0.5)

    def test_dual_fields_listed(self):
        assert set(DUAL_UNIT_FIELDS) == {"height", "waist", "fastGlu", "cholHDL", "cholTri"}


def test_borderline_sbp_flag_does_not_depend_on_units(mean_inputs_si, mean_inputs_us):
    si = compute({**mean_inputs_si, "sbp": 129.6}, use_alternate_units=False)
    us = compute({**mean_inputs_us, "sbp": 129.6}, use_alternate_units=True)
    assert "sbp" not in si.elevated_factors
    assert si.elevated_factors == us.elevated_factors
