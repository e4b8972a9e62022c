# charts.py
# Layout maths + matplotlib figures for the risk gauge, tornado chart and heatmap.
from typing import Dict, List, Mapping, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from config import CHART, LABELS
from risk_model import direction, rank_contributions, risk_band


def _scale_to_pct(value: float, lo: float, hi: float) -> float:
    margin = CHART["heatmap_margin_pct"]
    clamped = min(max(value, lo), hi)
    return margin + ((clamped - lo) / (hi - lo)) * (100 - 2 * margin)


def bar_layout(contributions: Mapping[str, float]) -> List[Dict]:
    """
    Rows for the diverging bar chart, biggest impact first.
    width_pct is relative to the largest |contribution|, so the top bar is always 100.
    """
    ranked = rank_contributions(contributions)
    max_abs = max((abs(v) for _, v in ranked), default=0.0) or CHART["min_scale"]
    return [
        {
            "factor": f,
            "label": LABELS.get(f, f),
            "value": v,
            "width_pct": abs(v) / max_abs * 100,
            "side": "left" if v < 0 else "right",
        }
        for f, v in ranked
    ]


def heatmap_position(contributions: Mapping[str, float]) -> Tuple[float, float]:
    """
    (x%, y%) of the patient marker.
    x: glucose contribution; y: sum of every other contribution.
    """
    glu = contributions.get("fastGlu", 0.0)
    other = sum(v for f, v in contributions.items() if f != "fastGlu")
    x = _scale_to_pct(glu, *CHART["heatmap_glu_range"])
    y = _scale_to_pct(other, *CHART["heatmap_other_range"])
    return x, y


def contribution_frame(contributions: Mapping[str, float]) -> pd.DataFrame:
    rows = [
        {"Factor": LABELS.get(f, f), "Contribution": round(v, 3), "Direction": direction(v).title()}
        for f, v in rank_contributions(contributions)
    ]
    return pd.DataFrame(rows, columns=["Factor", "Contribution", "Direction"])


def gauge_figure(percent: float):
    band = risk_band(percent)
    fig, ax = plt.subplots(figsize=(3, 3))
    filled = min(max(percent, 0.0), 100.0)
    ax.pie(
        [filled, 100 - filled],
        colors=[band["color"], "#e5e7eb"],
        startangle=90,
        counterclock=False,
        wedgeprops={"width": 0.25},
    )
    ax.text(0, 0.08, f"{percent:.1f}%", ha="center", va="center", fontsize=18, fontweight="bold")
    ax.text(0, -0.22, band["label"], ha="center", va="center", fontsize=9, color=band["color"])
    ax.set_aspect("equal")
    return fig


def tornado_figure(contributions: Mapping[str, float]):
    rows = bar_layout(contributions)
    fig, ax = plt.subplots(figsize=(6, 0.45 * max(len(rows), 1) + 1))
    if not rows:
        ax.axis("off")
        return fig

    # Top of the chart = biggest impact
    labels = [r["label"] for r in reversed(rows)]
    widths = [r["width_pct"] * (-1 if r["side"] == "left" else 1) for r in reversed(rows)]
    colors = [CHART["protective_color"] if w < 0 else CHART["risk_color"] for w in widths]

    ax.barh(labels, widths, color=colors)
    ax.axvline(0, color="#cbd5e1", linewidth=1)
    ax.set_xlim(-105, 105)
    ax.set_xticks([-100, 0, 100])
    ax.set_xticklabels(["PROTECTIVE", "", "RISK"], fontsize=8, color="#94a3b8")
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)
    fig.tight_layout()
    return fig


def heatmap_figure(contributions: Mapping[str, float], percent: float):
    x, y = heatmap_position(contributions)
    grid = np.add.outer(np.linspace(0, 1, 50), np.linspace(0, 1, 50))
    fig, ax = plt.subplots(figsize=(4, 3))
    ax.imshow(grid, origin="lower", extent=(0, 100, 0, 100), cmap="RdYlGn_r", alpha=0.6, aspect="auto")
    ax.scatter([x], [y], s=120, color="#111827", edgecolors="white", linewidths=2, zorder=3)
    ax.annotate(f"{percent:.1f}%", (x, y), textcoords="offset points", xytext=(8, 8), fontsize=8)
    ax.set_xlabel("Glucose contribution")
    ax.set_ylabel("Other factors")
    ax.set_xticks([])
    ax.set_yticks([])
    return fig
