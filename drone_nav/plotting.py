# drone_nav/plotting.py
# Minimal matplotlib visualization: draw the tour through the 3-D waypoints.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import matplotlib.pyplot as plt

from .config import OPTIMIZE_UNITS
from .run import RunResult


@dataclass(frozen=True)
class PlotStyle:
    show_labels: bool = True
    show_grid: bool = True
    show_arrows: bool = True
    font_size: int = 8
    point_size: int = 30
    line_width: float = 1.5
    route_color: str = "tab:blue"
    origin_color: str = "tab:red"


def _title(run: RunResult) -> str:
    unit = OPTIMIZE_UNITS[run.optimize]
    bits = [
        f"{len(run.params.coords)} waypoints",
        f"optimize {run.optimize}",
        f"cost {run.result.cost:,.3f} {unit}",
        f"energy {run.energy_cost:,.3f} kJ",
        f"time {run.time_cost:,.1f} s",
    ]
    return " | ".join(bits)


def plot_tour(
    run: RunResult,
    style: Optional[PlotStyle] = None,
    figsize: Optional[Tuple[float, float]] = None,
) -> plt.Figure:
    """
    Draw the tour in one 3-D axis: waypoints, legs in flying order, origin highlighted.
    """
    style = style or PlotStyle()
    fig = plt.figure(figsize=figsize or (8, 6))
    ax = fig.add_subplot(111, projection="3d")

    coords = run.params.coords
    ax.scatter(
        [p.x for p in coords],
        [p.y for p in coords],
        [p.z for p in coords],
        s=style.point_size,
        color=style.route_color,
        depthshade=False,
    )
    origin = coords[run.indices[0]]
    ax.scatter([origin.x], [origin.y], [origin.z], s=style.point_size * 3, marker="^", color=style.origin_color)

    for a, b in zip(run.points, run.points[1:]):
        ax.plot([a.x, b.x], [a.y, b.y], [a.z, b.z], color=style.route_color, linewidth=style.line_width)
        if style.show_arrows:
            ax.quiver(
                a.x, a.y, a.z,
                (b.x - a.x) * 0.5, (b.y - a.y) * 0.5, (b.z - a.z) * 0.5,
                color=style.route_color,
                arrow_length_ratio=0.15,
                linewidth=style.line_width,
            )

    if style.show_labels:
        for idx, p in enumerate(coords):
            ax.text(p.x, p.y, p.z, f" {idx + 1}", fontsize=style.font_size)

    ax.set_xlabel("x (m)")
    ax.set_ylabel("y (m)")
    ax.set_zlabel("z (m)")
    ax.set_title(_title(run), fontsize=9)
    ax.grid(style.show_grid)

    fig.tight_layout()
    return fig


def show_tour(run: RunResult, style: Optional[PlotStyle] = None) -> None:
    """Convenience wrapper: plot and show."""
    plot_tour(run, style=style)
    plt.show()


def save_tour_png(
    run: RunResult,
    path: str,
    style: Optional[PlotStyle] = None,
    dpi: int = 200,
) -> None:
    """Save the tour figure to PNG."""
    fig = plot_tour(run, style=style)
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
