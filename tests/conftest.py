import matplotlib

matplotlib.use("Agg")

import pytest

from config import CONVERSIONS, DUAL_UNIT_FIELDS, MEANS


@pytest.fixture
def mean_inputs_si():
    """Population-mean patient in SI units."""
    return dict(MEANS)


@pytest.fixture
def mean_inputs_us():
    """Same patient expressed exactly in US units (no rounding)."""
    values = dict(MEANS)
    for field in DUAL_UNIT_FIELDS:
        values[field] = MEANS[field] / CONVERSIONS[field]
    return values


@pytest.fixture
def high_risk_si():
    return {
        "age": 65, "race": 1, "parentHist": 1, "sbp": 150,
        "waist": 115, "height": 160, "fastGlu": 7.2,
        "cholHDL": 0.8, "cholTri": 3.0,
    }
