import logging

import streamlit as st
import matplotlib.pyplot as plt

from config import APP, LABELS, MODEL, RANGES, UNIT_LABELS
from calculator import CalculatorState
from charts import contribution_frame, gauge_figure, heatmap_figure, tornado_figure
from planner import build_treatment_plan
from treatments import ALL_NORMAL_NOTICE

logging.basicConfig(level=APP["log_level"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(page_title=APP["title"], layout="wide")

SLIDER_FIELDS = ["age", "sbp", "height", "waist", "fastGlu", "cholHDL", "cholTri"]

# -------------------------
# Helpers
# -------------------------
def _mode(state: CalculatorState) -> str:
    return "si" if state.use_metric else "us"

def _typed(field: str, value, mode: str):
    step = RANGES[field][mode][2]
    return float(value) if step < 1 else int(round(value))

def _sync_widgets(state: CalculatorState) -> None:
    """Push state values into the widget keys (after a unit switch or on first load)."""
    mode = _mode(state)
    for f in SLIDER_FIELDS:
        st.session_state[f"{f}_slider"] = _typed(f, state.values[f], mode)
    st.session_state["race_toggle"] = bool(state.values.get("race"))
    st.session_state["parentHist_toggle"] = bool(state.values.get("parentHist"))
    st.session_state["use_metric"] = state.use_metric

def _read_widgets(state: CalculatorState) -> CalculatorState:
    for f in SLIDER_FIELDS:
        state = state.with_value(f, st.session_state.get(f"{f}_slider", state.values[f]))
    state = state.with_value("race", 1 if st.session_state.get("race_toggle") else 0)
    state = state.with_value("parentHist", 1 if st.session_state.get("parentHist_toggle") else 0)
    return state

def _on_unit_toggle() -> None:
    state = _read_widgets(st.session_state["calc"])
    state = state.with_units(st.session_state["use_metric"])
    st.session_state["calc"] = state
    _sync_widgets(state)

def _show(fig) -> None:
    st.pyplot(fig)
    plt.close(fig)

if "calc" not in st.session_state:
    st.session_state["calc"] = CalculatorState.default()
    _sync_widgets(st.session_state["calc"])

# -------------------------
# Header + Disclaimer
# -------------------------
st.title(APP["title"])
st.info(APP["disclaimer"])

# -------------------------
# Inputs (sidebar)
# -------------------------
st.sidebar.toggle("SI units (cm, mmol/L)", key="use_metric", on_change=_on_unit_toggle)

calc: CalculatorState = st.session_state["calc"]
mode = _mode(calc)

st.sidebar.markdown("### Measurements")
for f in SLIDER_FIELDS:
    lo, hi, step = RANGES[f][mode]
    st.sidebar.slider(
        f"{LABELS[f]} ({UNIT_LABELS[mode][f]})",
        min_value=_typed(f, lo, mode),
        max_value=_typed(f, hi, mode),
        step=_typed(f, step, mode),
        key=f"{f}_slider",
    )

st.sidebar.markdown("### Background")
st.sidebar.toggle("Black / African American", key="race_toggle")
st.sidebar.toggle("Parent with diabetes", key="parentHist_toggle")

calc = _read_widgets(calc)
st.session_state["calc"] = calc

result = calc.compute()
logger.info("Risk %.1f%% (%s), elevated: %s", result.probability_percent, result.band["key"], result.elevated_factors)

# -------------------------
# Results
# -------------------------
col_gauge, col_chart = st.columns([1, 2])

with col_gauge:
    st.subheader("Predicted risk")
    _show(gauge_figure(result.probability_percent))
    st.caption("Estimated probability of developing diabetes (ARIC model).")

with col_chart:
    st.subheader("What drives your risk")
    st.caption("Each bar compares you with the study population average. Left = protective, right = raises risk.")
    _show(tornado_figure(result.contributions))

col_map, col_table = st.columns(2)

with col_map:
    st.subheader("Risk map")
    _show(heatmap_figure(result.contributions, result.probability_percent))

with col_table:
    st.subheader("Contribution details")
    st.dataframe(contribution_frame(result.contributions), use_container_width=True, hide_index=True)
    st.caption(f"Model intercept: {MODEL['intercept']}")

# -------------------------
# Treatment suggestions
# -------------------------
st.subheader("Treatment considerations")

plan = build_treatment_plan(result.elevated_factors)
if not plan:
    st.success(ALL_NORMAL_NOTICE)
else:
    cols = st.columns(min(len(plan), 3))
    for i, block in enumerate(plan):
        with cols[i % len(cols)]:
            st.markdown(f"#### {block['title']}")
            for t in block["therapies"]:
                st.write(f"• **{t['name']}:** {t['desc']}")
