"""Plotly 2D shadow figure renderer.

Side view: the person stands at the origin, the shadow runs along the ground
to the right, and the sun sits on a quarter arc at its computed altitude.
"""

import math

import numpy as np
import plotly.graph_objects as go

from shadowsoul.compute import height_in_feet
from shadowsoul.models import ShadowReading

_BG = "#0d1b35"
_GROUND_COLOR = "#334466"
_PERSON_COLOR = "#e8e8e8"
_SHADOW_COLOR = "#7ec8e3"
_SUN_COLOR = "#f5c451"

# Shadows longer than this are drawn clipped (displayed length only)
MAX_DISPLAY_SHADOW_FT = 12.0
_SUN_ARC_RADIUS = 14.0


def shadow_geometry(reading: ShadowReading) -> dict[str, float]:
    """Display coordinates shared by the Plotly and matplotlib renderers.

    Returns:
        Dict with person height, clipped shadow length, and sun x/y.
        Sun altitude is clamped to [0, 90] so a set sun rests on the horizon.
    """
    person_ft = height_in_feet(reading.input.height, reading.input.height_unit)
    shadow_ft = min(reading.result.length_feet, MAX_DISPLAY_SHADOW_FT)
    alt = math.radians(min(max(reading.result.sun_altitude_deg, 0.0), 90.0))
    return {
        "person_ft": person_ft,
        "shadow_ft": shadow_ft,
        "sun_x": -_SUN_ARC_RADIUS * math.cos(alt),
        "sun_y": _SUN_ARC_RADIUS * math.sin(alt),
    }


def render_plotly_chart(reading: ShadowReading) -> go.Figure:
    """Render a ShadowReading as a Plotly side-view figure.

    Args:
        reading: Fully computed shadow reading.

    Returns:
        Plotly Figure object.
    """
    geo = shadow_geometry(reading)
    person_ft = geo["person_ft"]
    shadow_ft = geo["shadow_ft"]

    theta = np.linspace(0, math.pi / 2, 50)
    arc_trace = go.Scatter(
        x=-_SUN_ARC_RADIUS * np.cos(theta),
        y=_SUN_ARC_RADIUS * np.sin(theta),
        mode="lines",
        line=dict(color=_GROUND_COLOR, width=1, dash="dot"),
        hoverinfo="skip",
        name="sun path",
    )
    ground_trace = go.Scatter(
        x=[-_SUN_ARC_RADIUS - 1, MAX_DISPLAY_SHADOW_FT + 1],
        y=[0, 0],
        mode="lines",
        line=dict(color=_GROUND_COLOR, width=1),
        hoverinfo="skip",
        name="ground",
    )
    person_trace = go.Scatter(
        x=[0, 0],
        y=[0, person_ft],
        mode="lines+markers",
        line=dict(color=_PERSON_COLOR, width=4),
        marker=dict(size=[0, 12], color=_PERSON_COLOR),
        hoverinfo="skip",
        name="person",
    )
    sun_trace = go.Scatter(
        x=[geo["sun_x"]],
        y=[geo["sun_y"]],
        mode="markers",
        marker=dict(size=22, color=_SUN_COLOR),
        hovertemplate=f"{reading.result.sun_altitude_deg:.1f}°<extra></extra>",
        name="sun",
    )
    traces = [arc_trace, ground_trace, person_trace, sun_trace]

    if reading.result.shadow_exists:
        traces.append(
            go.Scatter(
                x=[0, shadow_ft],
                y=[0, 0],
                mode="lines",
                line=dict(color=_SHADOW_COLOR, width=8),
                hovertemplate=f"{reading.result.length_feet:.1f} ft<extra></extra>",
                name="shadow",
            )
        )
        # Sun ray grazing the top of the head down to the shadow tip
        traces.append(
            go.Scatter(
                x=[geo["sun_x"], 0, shadow_ft],
                y=[geo["sun_y"], person_ft, 0],
                mode="lines",
                line=dict(color=_SUN_COLOR, width=1, dash="dash"),
                opacity=0.6,
                hoverinfo="skip",
                name="ray",
            )
        )

    fig = go.Figure(data=traces)
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        height=360,
        xaxis=dict(visible=False, range=[-_SUN_ARC_RADIUS - 1, MAX_DISPLAY_SHADOW_FT + 1]),
        yaxis=dict(
            visible=False,
            range=[-1, max(_SUN_ARC_RADIUS, person_ft) + 1],
            scaleanchor="x",
        ),
    )
    fig.add_annotation(
        x=shadow_ft / 2 if reading.result.shadow_exists else 0,
        y=-0.6,
        text=f"{reading.result.length_feet:.1f} feet",
        showarrow=False,
        font=dict(color=_SHADOW_COLOR, size=13),
    )
    return fig
