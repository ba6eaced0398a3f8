# wxcalc/figures.py

"""
Plotly figures for the calculator results.
"""

import plotly.graph_objects as go

from .constants import (
    CLOUD_BASE_METHOD_LABELS,
    COLORS,
    TURBULENCE_CATEGORY_BANDS,
    TURBULENCE_MAX_SCORE,
    TURBULENCE_TOP_CATEGORY,
)


def cloud_base_figure(result):
    """Horizontal bars comparing the AGL cloud base of each method."""
    unit = result.unit.value
    keys = [key for key, _ in result.estimates()]
    agl = [est.agl for _, est in result.estimates()]
    msl = [est.msl for _, est in result.estimates()]

    fig = go.Figure(go.Bar(
        x=agl,
        y=[CLOUD_BASE_METHOD_LABELS[key] for key in keys],
        orientation="h",
        marker_color=[COLORS[key] for key in keys],
        customdata=msl,
        hovertemplate="%{x:.2f} " + unit + " AGL<br>%{customdata:.2f} " + unit + " MSL<extra></extra>",
    ))
    fig.update_layout(
        title="Estimated Cloud Base (AGL)",
        xaxis_title=f"Height AGL ({unit})",
        yaxis=dict(autorange="reversed"),
        margin=dict(l=10, r=10, t=40, b=10),
        height=260,
        template="plotly_white",
    )
    return fig


def turbulence_gauge(result):
    """Score gauge with the Low / Moderate / High bands shaded."""
    steps = []
    lower = 0
    for upper, category in TURBULENCE_CATEGORY_BANDS:
        steps.append({"range": [lower, upper], "color": COLORS[category]})
        lower = upper
    steps.append({"range": [lower, TURBULENCE_MAX_SCORE], "color": COLORS[TURBULENCE_TOP_CATEGORY]})

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=result.score,
        number={"suffix": f"/{TURBULENCE_MAX_SCORE}"},
        title={"text": f"Turbulence Potential: {result.category}"},
        gauge={
            "axis": {"range": [0, TURBULENCE_MAX_SCORE]},
            "bar": {"color": COLORS["gauge_bar"]},
            "steps": steps,
        },
    ))
    fig.update_layout(margin=dict(l=20, r=20, t=60, b=10), height=240)
    return fig
