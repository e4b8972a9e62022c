# config.py
# Model constants + UI settings (Schmidt et al. 2005, ARIC Study)
import os

# Factor order used everywhere (ranking ties keep this order)
FACTORS = ["age", "race", "parentHist", "sbp", "waist", "height", "fastGlu", "cholHDL", "cholTri"]

# Fields that have both a US and an SI unit
DUAL_UNIT_FIELDS = ["height", "waist", "fastGlu", "cholHDL", "cholTri"]

MODEL = {
    "intercept": -9.9808,
    "betas": {
        "age": 0.0173,
        "race": 0.4433,        # Black (1) vs other (0)
        "parentHist": 0.4981,  # yes (1) vs no (0)
        "sbp": 0.0111,
        "waist": 0.0273,       # cm
        "height": -0.0326,     # cm
        "fastGlu": 1.5849,     # mmol/L
        "cholHDL": -0.4718,    # mmol/L
        "cholTri": 0.242,      # mmol/L
    },
}

# Population means (ARIC baseline), SI units
MEANS = {
    "age": 54,
    "race": 0.25,
    "parentHist": 0.3,
    "sbp": 120,
    "waist": 97,
    "height": 168,
    "fastGlu": 5.5,
    "cholHDL": 1.3,
    "cholTri": 1.7,
}

# US -> SI multipliers
CONVERSIONS = {
    "height": 2.54,       # in -> cm
    "waist": 2.54,        # in -> cm
    "fastGlu": 1 / 18,    # mg/dL -> mmol/L
    "cholHDL": 1 / 38.67,
    "cholTri": 1 / 88.57,
}

# Slider limits [min, max, step]
RANGES = {
    "age": {"us": [20, 80, 1], "si": [20, 80, 1]},
    "sbp": {"us": [90, 200, 1], "si": [90, 200, 1]},
    "height": {"us": [48, 84, 1], "si": [122, 213, 1]},      # 48-84 in * 2.54
    "waist": {"us": [25, 60, 1], "si": [64, 152, 1]},        # 25-60 in * 2.54
    "fastGlu": {"us": [50, 300, 1], "si": [2.8, 16.7, 0.1]}, # 50-300 mg/dL / 18
    "cholHDL": {"us": [20, 100, 1], "si": [0.5, 2.6, 0.1]},  # 20-100 mg/dL / 38.67
    "cholTri": {"us": [50, 500, 1], "si": [0.6, 5.6, 0.1]},  # 50-500 mg/dL / 88.57
}

LABELS = {
    "age": "Age",
    "race": "Race",
    "parentHist": "Parental Diabetes History",
    "sbp": "Blood Pressure",
    "waist": "Waist Size",
    "height": "Height",
    "fastGlu": "Glucose",
    "cholHDL": "Good Cholesterol (HDL)",
    "cholTri": "Triglycerides",
}

UNIT_LABELS = {
    "us": {"age": "years", "sbp": "mmHg", "height": "in", "waist": "in",
           "fastGlu": "mg/dL", "cholHDL": "mg/dL", "cholTri": "mg/dL"},
    "si": {"age": "years", "sbp": "mmHg", "height": "cm", "waist": "cm",
           "fastGlu": "mmol/L", "cholHDL": "mmol/L", "cholTri": "mmol/L"},
}

# Elevation cutoffs, SI units
THRESHOLDS = {
    "fastGlu": {"elevated": 5.6, "direction": "above"},  # mmol/L - ADA 2024
    "sbp": {"elevated": 130, "direction": "above"},      # mmHg - ACC/AHA 2017
    "cholHDL": {"elevated": 1.0, "direction": "below"},  # mmol/L (low HDL is the risk state)
    "cholTri": {"elevated": 1.7, "direction": "above"},  # mmol/L - AHA
    "waist": {"elevated": 94, "direction": "above"},     # cm - WHO (male)
}

# Lower bound (%) of each band, ascending; a boundary belongs to the higher band
RISK_BANDS = [
    {"key": "low", "min_pct": 0.0, "label": "Low Risk", "color": "#22c55e"},
    {"key": "moderate", "min_pct": 10.0, "label": "Moderate Risk", "color": "#eab308"},
    {"key": "high", "min_pct": 25.0, "label": "High Risk", "color": "#f97316"},
    {"key": "very-high", "min_pct": 50.0, "label": "Very High Risk", "color": "#ef4444"},
]

CHART = {
    "protective_color": "#10b981",
    "risk_color": "#ef4444",
    "min_scale": 0.1,               # bar scale when every contribution is zero
    "heatmap_glu_range": (-4.0, 4.0),
    "heatmap_other_range": (-3.0, 3.0),
    "heatmap_margin_pct": 5.0,
}

APP = {
    "title": "Diabetes Risk Calculator",
    "default_units": os.getenv("RISK_CALC_DEFAULT_UNITS", "us").strip().lower(),
    "log_level": os.getenv("RISK_CALC_LOG_LEVEL", "INFO").strip().upper(),
    "disclaimer": (
        "Educational estimate based on the ARIC diabetes prediction model (Schmidt et al. 2005). "
        "Not medical advice. Does not diagnose, prescribe, or replace clinician care."
    ),
}
