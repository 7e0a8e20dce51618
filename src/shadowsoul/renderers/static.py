"""Matplotlib static PNG renderer."""

import math
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from shadowsoul.models import ShadowReading
from shadowsoul.renderers.plotly_2d import MAX_DISPLAY_SHADOW_FT, shadow_geometry

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_chart(reading: ShadowReading, chart_size: int = 8) -> Figure:
    """Render a ShadowReading as a static side-view image.

    Args:
        reading: Fully computed shadow reading.
        chart_size: Output image width in inches.

    Returns:
        matplotlib Figure object.
    """
    geo = shadow_geometry(reading)
    radius = math.hypot(geo["sun_x"], geo["sun_y"])

    fig, ax = plt.subplots(figsize=(chart_size, chart_size / 2))
    fig.patch.set_facecolor("#0d1b35")
    ax.set_facecolor("#0d1b35")

    theta = np.linspace(0, np.pi / 2, 50)
    ax.plot(
        -radius * np.cos(theta),
        radius * np.sin(theta),
        color="#334466",
        linestyle=":",
        linewidth=1,
    )
    ax.axhline(0, color="#334466", linewidth=1)
    ax.plot([0, 0], [0, geo["person_ft"]], color="#e8e8e8", linewidth=4, zorder=3)
    ax.scatter([0], [geo["person_ft"]], s=80, color="#e8e8e8", zorder=3)
    ax.scatter([geo["sun_x"]], [geo["sun_y"]], s=300, color="#f5c451", zorder=2)

    if reading.result.shadow_exists:
        ax.plot(
            [0, geo["shadow_ft"]], [0, 0], color="#7ec8e3", linewidth=8, zorder=2
        )
        ax.plot(
            [geo["sun_x"], 0, geo["shadow_ft"]],
            [geo["sun_y"], geo["person_ft"], 0],
            color="#f5c451",
            linestyle="--",
            linewidth=1,
            alpha=0.6,
        )

    ax.text(
        geo["shadow_ft"] / 2,
        -0.8,
        f"{reading.result.length_feet:.1f} feet",
        color="#7ec8e3",
        ha="center",
        va="top",
    )
    ax.set_xlim(-radius - 1, MAX_DISPLAY_SHADOW_FT + 1)
    ax.set_ylim(-2, max(radius, geo["person_ft"]) + 1)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def save_static_chart(reading: ShadowReading, output_path: Path | None = None) -> Path:
    """Save a ShadowReading as a PNG file.

    Args:
        reading: Fully computed shadow reading.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        inp = reading.input
        when_str = f"{inp.date:%Y_%m_%d}_{inp.time:%H_%M}"
        filename = f"{inp.latitude:.4f}_{inp.longitude:.4f}__{when_str}.png"
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(reading)
    fig.savefig(output_path, facecolor=fig.get_facecolor())
    plt.close(fig)
    return output_path
