import pytest

from triage import display_metric_values, elevated_factors, is_elevated


@pytest.fixture
def normal_si():
    return {"fastGlu": 5.0, "sbp": 118, "cholHDL": 1.5, "cholTri": 1.2, "waist": 85}


class TestIsElevated:
    def test_hdl_inverse_direction(self):
        assert is_elevated("cholHDL", 0.8)
        assert is_elevated("cholHDL", 1.0)
        assert not is_elevated("cholHDL", 1.5)

    @pytest.mark.parametrize("field,at_cutoff,below", [
        ("fastGlu", 5.6, 5.5), ("sbp", 130, 129), ("cholTri", 1.7, 1.6), ("waist", 94, 93),
    ])
    def test_cutoff_is_inclusive(self, field, at_cutoff, below):
        assert is_elevated(field, at_cutoff)
        assert not is_elevated(field, below)


class TestElevatedFactors:
    def test_all_normal(self, normal_si):
        assert elevated_factors(normal_si) == []

    def test_order_follows_thresholds(self, normal_si):
        values = {**normal_si, "waist": 110, "fastGlu": 7.0, "cholHDL": 0.8}
        assert elevated_factors(values) == ["fastGlu", "cholHDL", "waist"]

    def test_missing_hdl_counts_as_low(self):
        # non-numeric -> 0, which is below the HDL cutoff
        assert "cholHDL" in elevated_factors({"cholHDL": "?"})


class TestDisplayMetricValues:
    def test_si_values_pass_through(self, normal_si):
        assert display_metric_values(normal_si, use_us_units=False) == normal_si

    def test_us_values_rounded_like_si_view(self):
        values = display_metric_values(
            {"fastGlu": 100, "sbp": 130, "cholHDL": 39, "cholTri": 150, "waist": 37}, use_us_units=True
        )
        assert values == {"fastGlu": 5.6, "sbp": 130, "cholHDL": 1.0, "cholTri": 1.7, "waist": 94}

    def test_rounding_decides_borderline_glucose(self):
        # 100 mg/dL = 5.556 mmol/L, shown as 5.6 in SI
        values = display_metric_values({"fastGlu": 100}, use_us_units=True)
        assert "fastGlu" in elevated_factors(values)

    def test_single_unit_fields_are_not_rounded(self):
        assert display_metric_values({"sbp": 129.6}, use_us_units=True)["sbp"] == 129.6

    @pytest.mark.parametrize("use_us_units", [False, True])
    def test_borderline_sbp_same_in_both_modes(self, normal_si, use_us_units):
        values = display_metric_values({**normal_si, "sbp": 129.6}, use_us_units=use_us_units)
        assert "sbp" not in elevated_factors(values)
