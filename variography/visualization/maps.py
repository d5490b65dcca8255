"""Sample and estimate maps.

Functions
---------
plot_samples
    Sample locations coloured by value.
plot_lag_vector
    Sample map with a lag vector and its tolerance.
plot_estimates
    Kriging estimates on the estimation grid.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from variography.kriging.estimation import KrigingResult
from variography.samples.sampleset import SampleSet


def plot_samples(
    samples: SampleSet,
    ax: Any = None,
    cmap: str = "coolwarm",
    clims: tuple[float, float] | None = None,
    marker: str = "s",
    size: float = 12.0,
    colorbar: bool = True,
    title: str | None = None,
) -> Any:
    """Scatter the sample locations coloured by value.

    Args:
        samples: Sample set (only x and y are drawn).
        ax: Matplotlib axes (creates new figure if None).
        cmap: Matplotlib colour map name.
        clims: Colour limits ``(vmin, vmax)``.
        marker: Marker style.
        size: Marker size.
        colorbar: Show colour bar.
        title: Plot title, the attribute name by default.

    Returns:
        Matplotlib axes.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(5, 5))

    vmin, vmax = clims if clims is not None else (None, None)
    sc = ax.scatter(
        samples.coords[:, 0], samples.coords[:, 1],
        c=samples.values, cmap=cmap, vmin=vmin, vmax=vmax,
        marker=marker, s=size, edgecolors="black", linewidths=0.3,
    )
    if colorbar:
        plt.colorbar(sc, ax=ax)
    ax.set_aspect("equal")
    ax.set_title(samples.name if title is None else title)
    ax.set_xlabel("X (m)")
    ax.set_ylabel("Y (m)")
    return ax


def plot_lag_vector(
    samples: SampleSet,
    start: tuple[float, float],
    lag: float,
    ax: Any = None,
    mark_lag: bool = False,
    tolerance: bool = False,
    clims: tuple[float, float] | None = (0.0, 1.0),
) -> Any:
    """Sample map with an E-W lag vector starting at *start*.

    Args:
        samples: Sample set.
        start: Tail of the lag vector.
        lag: Lag size.
        ax: Matplotlib axes (creates new figure if None).
        mark_lag: Draw a vertical line at the head of the vector.
        tolerance: Also draw the ``lag ± lag/2`` tolerance limits.
        clims: Colour limits.

    Returns:
        Matplotlib axes.
    """
    ax = plot_samples(samples, ax=ax, clims=clims, size=60.0)
    x0, y0 = start
    ax.annotate(
        "", xy=(x0 + lag, y0), xytext=(x0, y0),
        arrowprops={"arrowstyle": "->", "color": "red", "lw": 2},
    )

    if mark_lag or tolerance:
        ax.axvline(x0 + lag, color="red")
        ax.text(x0 + lag, 1.02, "lag", color="red", ha="center",
                transform=ax.get_xaxis_transform())
    if tolerance:
        for x, text in ((x0 + 0.5 * lag, "lag − ½ lag"), (x0 + 1.5 * lag, "lag + ½ lag")):
            ax.axvline(x, color="gray", linestyle="--")
            ax.text(x, 1.02, text, color="gray", ha="center", fontsize=7,
                    transform=ax.get_xaxis_transform())
    return ax


def plot_estimates(
    result: KrigingResult,
    samples: SampleSet | None = None,
    ax: Any = None,
    cmap: str = "coolwarm",
    clims: tuple[float, float] | None = None,
    title: str = "",
) -> Any:
    """Plot kriging estimates, optionally overlaying the samples.

    Gridded 2-D results are drawn as an image; scattered targets as
    points.  Unestimated targets are left blank.

    Returns:
        Matplotlib axes.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(5, 5))

    vmin, vmax = clims if clims is not None else (None, None)
    if len(result.shape) == 2:
        x, y = result.points[:, 0], result.points[:, 1]
        im = ax.imshow(
            np.ma.masked_invalid(result.as_grid()).T,
            origin="lower", cmap=cmap, vmin=vmin, vmax=vmax,
            extent=(x.min(), x.max(), y.min(), y.max()),
        )
    else:
        im = ax.scatter(
            result.points[:, 0], result.points[:, 1],
            c=result.estimate, cmap=cmap, vmin=vmin, vmax=vmax, s=4,
        )
    plt.colorbar(im, ax=ax)

    if samples is not None:
        plot_samples(samples, ax=ax, cmap=cmap, clims=clims,
                     colorbar=False, title=title)
    ax.set_title(title)
    ax.set_aspect("equal")
    return ax
