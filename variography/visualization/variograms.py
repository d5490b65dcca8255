"""Variogram plotting utilities.

Functions
---------
plot_empirical
    Experimental variogram with pair-count bars.
plot_model
    Theoretical (single, anisotropic or nested) model curve.
plot_tolerance
    Azimuth and dip angular tolerance diagrams.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from variography.empirical.directions import tolerance_lines
from variography.empirical.estimate import EmpiricalVariogram
from variography.models.parameters import NestedModel, VariogramParameters
from variography.models.theoretical import evaluate, parameters_of


def plot_empirical(
    vario: EmpiricalVariogram,
    ax: Any = None,
    join_points: bool = False,
    show_counts: bool = True,
    color: str = "orange",
    label: str | None = None,
    title: str = "",
    xlim: tuple[float, float] | None = None,
    ylim: tuple[float, float] | None = None,
) -> Any:
    """Plot an experimental variogram.

    Each point is the mean semivariance of one lag bin.  The number of
    pairs in each bin is drawn as a bar on a secondary axis.

    Args:
        vario: Experimental variogram.
        ax: Matplotlib axes (creates new figure if None).
        join_points: Join consecutive points with a line.
        show_counts: Draw the pair-count bars.
        color: Point colour.
        label: Legend label.
        title: Plot title.
        xlim: x-axis limits.
        ylim: y-axis limits.

    Returns:
        Matplotlib axes.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(6, 4))

    data = vario.populated()

    if show_counts and len(data):
        ax_counts = ax.twinx()
        width = 0.8 * float(np.min(np.diff(vario.bin_centers))) if len(vario) > 1 else 1.0
        ax_counts.bar(
            data.bin_centers, data.counts, width=width,
            color="gray", alpha=0.2, zorder=0,
        )
        ax_counts.set_ylim(0, 4.0 * max(int(data.counts.max()), 1))
        ax_counts.set_yticks([])
        ax.set_zorder(ax_counts.get_zorder() + 1)
        ax.patch.set_visible(False)

    ax.plot(
        data.bin_centers, data.gamma,
        linestyle="-" if join_points else "none",
        marker="o", color=color, label=label,
    )
    ax.set_xlabel("h")
    ax.set_ylabel("γ(h)")
    ax.set_title(title)
    if xlim is not None:
        ax.set_xlim(*xlim)
    if ylim is not None:
        ax.set_ylim(*ylim)
    return ax


def _guides(model: Any) -> tuple[float, float, float]:
    """Nugget, sill and range of a model, for guide lines."""
    if isinstance(model, (NestedModel, VariogramParameters)):
        return model.nugget, model.sill, model.range
    params = parameters_of(model)
    return params.nugget, params.sill, params.range


def plot_model(
    model: Any,
    max_h: float,
    ax: Any = None,
    azimuth: float | None = None,
    annotate: bool = False,
    color: str = "black",
    label: str | None = None,
    title: str = "",
    n_points: int = 500,
    ylim: tuple[float, float] | None = None,
) -> Any:
    """Plot a theoretical variogram model from 0 to *max_h*.

    Args:
        model: GSTools model, :class:`VariogramParameters` or
            :class:`NestedModel`.
        max_h: Largest lag distance shown.
        ax: Matplotlib axes (creates new figure if None).
        azimuth: Evaluate an anisotropic model along this direction.
        annotate: Draw nugget, sill and range guide lines.
        color: Curve colour.
        label: Legend label.
        title: Plot title.
        n_points: Number of evaluation points.
        ylim: y-axis limits.

    Returns:
        Matplotlib axes.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(6, 4))

    h = np.linspace(0.0, max_h, n_points)
    gamma = evaluate(model, h, azimuth=azimuth)
    # γ(0) = 0 is drawn as an isolated point below the nugget
    ax.plot(h[1:], gamma[1:], color=color, linewidth=2, label=label)
    ax.plot([0.0], [gamma[0]], marker="o", color=color, markersize=4)

    if annotate:
        nugget, sill, a = _guides(model)
        ax.axhline(nugget, color="red", linestyle="--", label="Nugget")
        ax.axhline(sill, color="green", linestyle="--", label="Sill")
        ax.axvline(a, color="blue", linestyle="--", label="Range")

    ax.set_xlim(0.0, max_h)
    if ylim is not None:
        ax.set_ylim(*ylim)
    ax.set_xlabel("h")
    ax.set_ylabel("γ(h)")
    ax.set_title(title)
    if label is not None or annotate:
        ax.legend(loc="upper left")
    return ax


def plot_tolerance(
    azimuth: float,
    dip: float,
    tolerance: float = 22.5,
) -> Any:
    """Two-panel diagram of the azimuth and dip tolerances.

    Args:
        azimuth: Search azimuth (degrees).
        dip: Search dip (degrees).
        tolerance: Angular tolerance, half the angular increment.

    Returns:
        Matplotlib figure.
    """
    import matplotlib.pyplot as plt

    fig, axes = plt.subplots(1, 2, figsize=(6, 3))
    panels = [
        (axes[0], tolerance_lines(azimuth, tolerance), "Azimuth tolerance"),
        (axes[1], tolerance_lines(dip + 90.0, tolerance), "Dip tolerance"),
    ]
    for ax, lines, title in panels:
        (start, end), *limits = lines
        ax.annotate(
            "", xy=end, xytext=start,
            arrowprops={"arrowstyle": "->", "color": "red", "lw": 3},
        )
        for s, e in limits:
            ax.plot([s[0], e[0]], [s[1], e[1]], color="gray", linestyle="--")
        ax.axhline(0.0, color="black", linewidth=0.8)
        if ax is axes[0]:
            ax.axvline(0.0, color="black", linewidth=0.8)
        ax.set_xlim(-1, 1)
        ax.set_ylim(-1, 1)
        ax.set_aspect("equal")
        ax.set_axis_off()
        ax.set_title(title)

    plt.tight_layout()
    return fig
