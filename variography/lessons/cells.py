"""Lesson cells: widget values in, figure out.

Each cell takes the shared :class:`LessonContext` followed by the
values of its widgets, builds the corresponding model or variogram
request and renders it.  Nothing is cached between calls: every widget
change recomputes the cell from scratch.

:data:`LESSONS` lists every cell with its controls; :func:`interactive`
binds one to live widgets.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable

import numpy as np

from variography.empirical.directions import DirectionalQuery
from variography.empirical.estimate import (
    directional_variogram,
    empirical_variogram,
)
from variography.kriging.estimation import ordinary_kriging
from variography.kriging.grid import CartesianGrid
from variography.kriging.neighborhood import Ellipsoid
from variography.lessons.context import LessonContext
from variography.lessons.controls import Checkbox, Control, Select, Slider, bind
from variography.models.fitting import fit_model
from variography.models.parameters import (
    ModelKind,
    NestedModel,
    Structure,
    VariogramParameters,
)
from variography.models.theoretical import build_model
from variography.visualization.maps import (
    plot_estimates,
    plot_lag_vector,
    plot_samples,
)
from variography.visualization.variograms import (
    plot_empirical,
    plot_model,
    plot_tolerance,
)

ESTIMATION_GRID = CartesianGrid(dims=(61, 71), origin=(8.0, 8.0), spacing=(4.0, 4.0))

# Anisotropy examples: (direction 1, direction 2) as (nugget, sill, range)
_ANISOTROPY = {
    "Zonal": ((0.1, 1.0, 50.0), (0.1, 1.5, 50.0)),
    "Geometric": ((0.1, 1.0, 50.0), (0.1, 1.0, 30.0)),
    "Mixed": ((0.1, 1.5, 50.0), (0.1, 1.0, 30.0)),
}


def _subplots(figsize: tuple[float, float] = (6, 4)) -> Any:
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    return ax


# ----------------------------------------------------------------------
# Experimental variograms
# ----------------------------------------------------------------------

def experimental_variogram(ctx: LessonContext, join_points: bool = False) -> Any:
    """Omnidirectional variogram of the training image."""
    vario = empirical_variogram(ctx.image, max_lag=60.0, lag_count=6)
    return plot_empirical(
        vario, join_points=join_points, xlim=(0, 60), ylim=(0, 1.0),
        title="Experimental variogram",
    )


def directional(ctx: LessonContext, azimuth: float = 0.0) -> Any:
    """Directional variogram of the deposit; γ(000°) = γ(180°)."""
    query = DirectionalQuery(azimuth=azimuth, max_lag=200.0, lag_count=7)
    vario = directional_variogram(ctx.deposit, query)
    return plot_empirical(
        vario, xlim=(0, 200), ylim=(0, 15), title=f"{azimuth:g}°",
    )


def lag_number(ctx: LessonContext, lag_count: int = 6) -> Any:
    """N-S variogram of the deposit with a varying number of lags."""
    query = DirectionalQuery(azimuth=0.0, max_lag=200.0, lag_count=int(lag_count))
    vario = directional_variogram(ctx.deposit, query)
    return plot_empirical(
        vario, xlim=(0, 200), ylim=(0, 15), title="Experimental variogram",
    )


def regular_lag(
    ctx: LessonContext, ix: int = 1, iy: int = 1, lag: int = 1,
) -> Any:
    """E-W lag vector on the regular 5 × 5 grid."""
    ax = plot_lag_vector(ctx.grid_samples, (ix, iy), lag, ax=_subplots((5, 5)))
    ax.set_xlim(0, 6)
    ax.set_ylim(0, 6)
    return ax


def irregular_lag(
    ctx: LessonContext, ix: float = 0.015, iy: float = 0.172, lag: float = 0.3,
) -> Any:
    """E-W lag vector among irregularly scattered samples."""
    ax = plot_lag_vector(ctx.random_samples, (ix, iy), lag, ax=_subplots((5, 5)))
    ax.set_xlim(-0.2, 1.2)
    ax.set_ylim(-0.2, 1.2)
    return ax


def lag_tolerance(
    ctx: LessonContext, ix: float = 1.0, tolerance: bool = False,
) -> Any:
    """Lag of 1 m along the irregular profile, with or without tolerance."""
    ax = plot_lag_vector(
        ctx.profile, (ix, 1.0), 1.0, ax=_subplots((7, 3)),
        mark_lag=True, tolerance=tolerance,
    )
    ax.set_xlim(0.0, 4.5)
    ax.set_ylim(0.0, 2.0)
    return ax


def angular_tolerance(
    ctx: LessonContext, azimuth: float = 0.0, dip: float = 0.0,
) -> Any:
    """Azimuth and dip tolerances for a 45° angular increment."""
    return plot_tolerance(azimuth, dip, tolerance=22.5)


# ----------------------------------------------------------------------
# Theoretical models
# ----------------------------------------------------------------------

def fitted_model(ctx: LessonContext, fit: bool = False) -> Any:
    """Training image variogram, optionally with a fitted Gaussian model."""
    vario = empirical_variogram(ctx.image, max_lag=60.0, lag_count=6)
    ax = plot_empirical(vario, xlim=(0, 50), ylim=(0, 1.0))
    if fit:
        model = fit_model(ModelKind.GAUSSIAN, vario)
        plot_model(model, 50.0, ax=ax, label="Fitted model", ylim=(0, 1.0))
    return ax


def theoretical_model(
    ctx: LessonContext,
    model: str = "Gaussian",
    nugget: float = 0.0,
    sill: float = 1.0,
    range: float = 25.0,
) -> Any:
    """A single model with its nugget, sill and range marked."""
    params = VariogramParameters(
        kind=ModelKind.from_label(model), nugget=nugget, sill=sill, range=range,
    )
    return plot_model(
        build_model(params), 65.0, annotate=True, label=params.kind.label,
        ylim=(0.0, 1.5),
    )


def anisotropy(ctx: LessonContext, kind: str = "Geometric") -> Any:
    """Two directional spherical models illustrating an anisotropy type."""
    first, second = _ANISOTROPY[kind]
    ax = _subplots()
    for (c0, sill, a), color in ((first, "red"), (second, "blue")):
        params = VariogramParameters(ModelKind.SPHERICAL, c0, sill, a)
        plot_model(params, 80.0, ax=ax, color=color, ylim=(0, 2))
    ax.set_title(f"{kind} anisotropy")
    return ax


def nested(
    ctx: LessonContext,
    nugget: float = 3.0,
    c1: float = 2.6,
    c2: float = 2.7,
    r1: float = 83.0,
    r2: float = 101.0,
    azimuth: float = 0.0,
) -> Any:
    """Nugget plus two spherical structures over a directional variogram."""
    query = DirectionalQuery(azimuth=azimuth, max_lag=200.0, lag_count=7)
    vario = directional_variogram(ctx.deposit, query)
    model = NestedModel(
        nugget=nugget,
        structures=(
            Structure(ModelKind.SPHERICAL, c1, r1),
            Structure(ModelKind.SPHERICAL, c2, r2),
        ),
    )
    ax = plot_empirical(vario, show_counts=False)
    plot_model(model, 220.0, ax=ax, ylim=(0, 15), title="Nested variogram")
    ax.axvline(max(r1, r2), color="gray", linestyle="--")
    return ax


def anisotropic_ranges(
    ctx: LessonContext,
    range_y: float = 100.0,
    range_x: float = 66.0,
    range_z: float = 26.0,
) -> Any:
    """Primary, secondary and tertiary spherical models of a 3-D anisotropy."""
    ax = _subplots()
    for a, color, label in (
        (range_y, "red", "Primary"),
        (range_x, "green", "Secondary"),
        (range_z, "blue", "Tertiary"),
    ):
        params = VariogramParameters(ModelKind.SPHERICAL, 0.1, 5.0, a)
        plot_model(params, 120.0, ax=ax, color=color, label=label, ylim=(0, 8))
    ax.set_title("Anisotropic variogram")
    return ax


# ----------------------------------------------------------------------
# Variography and estimation
# ----------------------------------------------------------------------

def variography(
    ctx: LessonContext,
    azimuth: float = 0.0,
    model: str = "Spherical",
    nugget: float = 3.0,
    range_primary: float = 101.0,
    range_secondary: float = 32.0,
) -> Any:
    """Primary and secondary directional variograms with their models.

    Both models share the nugget and use the sample variance as sill.
    """
    sill = ctx.deposit.variance
    kind = ModelKind.from_label(model)
    ax = _subplots()

    for offset, a, color in ((0.0, range_primary, "red"), (90.0, range_secondary, "blue")):
        query = DirectionalQuery(azimuth=azimuth + offset, max_lag=200.0, lag_count=5)
        vario = directional_variogram(ctx.deposit, query)
        plot_empirical(vario, ax=ax, color=color, show_counts=False)
        params = VariogramParameters(kind, nugget, sill, a)
        plot_model(params, 200.0, ax=ax, color=color, ylim=(0, 15))
        ax.axvline(a, color=color, linestyle="--")

    ax.axhline(sill, color="gray", linestyle="--")
    return ax


def estimates(
    ctx: LessonContext,
    azimuth: float = 0.0,
    model: str = "Spherical",
    nugget: float = 3.0,
    range_primary: float = 101.0,
    range_secondary: float = 32.0,
    high_grades: bool = False,
    show_estimates: bool = False,
    grid: CartesianGrid = ESTIMATION_GRID,
) -> Any:
    """Samples, or ordinary kriging estimates from the anisotropic model.

    Kriging uses an ellipse with the model's ranges as search
    neighbourhood and 8 to 16 neighbours.
    """
    clims = (0.0, float(np.quantile(ctx.deposit.values, 0.99)))
    ax = _subplots((5, 5))

    if show_estimates:
        params = VariogramParameters(
            ModelKind.from_label(model), nugget, ctx.deposit.variance, range_primary,
        )
        ranges = (range_primary, range_secondary)
        cov = build_model(params, ranges=ranges, azimuth=azimuth)
        result = ordinary_kriging(
            ctx.deposit, cov, grid,
            neighborhood=Ellipsoid(ranges, azimuth=azimuth),
            min_neighbors=8, max_neighbors=16,
        )
        return plot_estimates(
            result, ctx.deposit, ax=ax, clims=clims, title=ctx.deposit.name,
        )

    samples = ctx.deposit.above_quantile(0.9) if high_grades else ctx.deposit
    return plot_samples(samples, ax=ax, clims=clims, title=ctx.deposit.name)


# ----------------------------------------------------------------------
# Registry
# ----------------------------------------------------------------------

_MODELS = ("Gaussian", "Spherical", "Pentaspherical", "Exponential")

_FULL_VARIOGRAPHY = {
    "azimuth": Slider(0.0, 90.0, 45.0, 0.0, "Azimuth"),
    "model": Select(("Gaussian", "Spherical", "Exponential"), "Spherical", "Model"),
    "nugget": Slider(0.0, 5.0, 0.1, 3.0, "Nugget"),
    "range_primary": Slider(10.0, 156.0, 1.0, 101.0, "Range (Y)"),
    "range_secondary": Slider(10.0, 156.0, 1.0, 32.0, "Range (X)"),
}

LESSONS: dict[str, tuple[Callable[..., Any], dict[str, Control]]] = {
    "experimental": (experimental_variogram, {
        "join_points": Checkbox(False, "Join points"),
    }),
    "directional": (directional, {
        "azimuth": Slider(0, 180, 45, 0, "Azimuth"),
    }),
    "lag_count": (lag_number, {
        "lag_count": Slider(2, 35, 1, 6, "Lags"),
    }),
    "regular_lag": (regular_lag, {
        "ix": Slider(1, 4, 1, 1, "W-E"),
        "iy": Slider(1, 5, 1, 1, "N-S"),
        "lag": Slider(1, 3, 1, 1, "Lag"),
    }),
    "irregular_lag": (irregular_lag, {
        "ix": Slider(0.0, 1.0, 0.001, 0.015, "W-E"),
        "iy": Slider(0.0, 1.0, 0.001, 0.172, "N-S"),
        "lag": Slider(0.05, 1.0, 0.05, 0.3, "Lag"),
    }),
    "lag_tolerance": (lag_tolerance, {
        "ix": Slider(1.0, 2.8, 0.1, 1.0, "W-E"),
        "tolerance": Checkbox(False, "Lag tolerance"),
    }),
    "angular_tolerance": (angular_tolerance, {
        "azimuth": Slider(0, 180, 45, 0, "Azimuth"),
        "dip": Slider(0, 180, 45, 0, "Dip"),
    }),
    "fitted_model": (fitted_model, {
        "fit": Checkbox(False, "Fit model"),
    }),
    "theoretical_model": (theoretical_model, {
        "model": Select(_MODELS, "Gaussian", "Model"),
        "nugget": Slider(0.0, 0.5, 0.1, 0.0, "Nugget"),
        "sill": Slider(0.5, 1.0, 0.1, 1.0, "Sill"),
        "range": Slider(5.0, 45.0, 10.0, 25.0, "Range"),
    }),
    "anisotropy": (anisotropy, {
        "kind": Select(tuple(_ANISOTROPY), "Geometric", "Anisotropy"),
    }),
    "nested": (nested, {
        "nugget": Slider(0.0, 4.0, 0.1, 3.0, "Nugget"),
        "c1": Slider(0.0, 10.0, 0.1, 2.6, "C₁"),
        "c2": Slider(0.0, 10.0, 0.1, 2.7, "C₂"),
        "r1": Slider(10.0, 156.0, 1.0, 83.0, "Range 1"),
        "r2": Slider(10.0, 156.0, 1.0, 101.0, "Range 2"),
        "azimuth": Slider(0, 180, 45, 0, "Azimuth"),
    }),
    "anisotropic_ranges": (anisotropic_ranges, {
        "range_y": Slider(10.0, 120.0, 2.0, 100.0, "Range Y"),
        "range_x": Slider(10.0, 120.0, 2.0, 66.0, "Range X"),
        "range_z": Slider(10.0, 120.0, 2.0, 26.0, "Range Z"),
    }),
    "variography": (variography, dict(_FULL_VARIOGRAPHY)),
    "estimates": (estimates, {
        **_FULL_VARIOGRAPHY,
        "high_grades": Checkbox(False, "High grades only"),
        "show_estimates": Checkbox(False, "Show estimates"),
    }),
}


def interactive(name: str, ctx: LessonContext) -> Any:
    """Live widgets for lesson cell *name*, bound to *ctx*.

    Raises:
        KeyError: If *name* is not a lesson.
        ImportError: If ipywidgets is not installed.
    """
    if name not in LESSONS:
        raise KeyError(f"Unknown lesson {name!r}.  Available: {list(LESSONS)}")
    render, controls = LESSONS[name]
    return bind(partial(render, ctx), **controls)
