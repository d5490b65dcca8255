"""Theoretical variogram models.

Maps :class:`~variography.models.parameters.VariogramParameters` onto
GSTools covariance models and evaluates them.

Ranges are *practical* ranges: the distance at which a model reaches
(or, for the asymptotic Gaussian and exponential models, comes within
5 % of) its sill.

* **Spherical**: γ(h) = C₀ + C [3h/2a − ½ (h/a)³] for h < a, C₀ + C beyond
* **Pentaspherical**: γ(h) = C₀ + C [15h/8a − 5/4 (h/a)³ + 3/8 (h/a)⁵]
* **Exponential**: γ(h) = C₀ + C [1 − exp(−3h/a)]
* **Gaussian**: γ(h) = C₀ + C [1 − exp(−3 (h/a)²)]

In every case γ(0) = 0: the nugget is only approached as h → 0⁺.
"""

from __future__ import annotations

from typing import Any, Sequence

import gstools as gs
import numpy as np
from numpy.typing import ArrayLike

from variography.empirical.directions import sph2cart
from variography.models.parameters import (
    ModelKind,
    NestedModel,
    VariogramParameters,
)


class Pentaspherical(gs.CovModel):
    """Pentaspherical covariance model.

    The spherical model's analogue in five dimensions; it reaches the
    sill at ``len_scale`` but rises more steeply near the origin.
    """

    def cor(self, h):
        h = np.minimum(np.abs(np.asarray(h, dtype=np.double)), 1.0)
        return 1.0 - h * (15.0 / 8.0 - h ** 2 * (5.0 / 4.0 - 3.0 / 8.0 * h ** 2))


_MODEL_KINDS = {
    gs.Gaussian: ModelKind.GAUSSIAN,
    gs.Spherical: ModelKind.SPHERICAL,
    gs.Exponential: ModelKind.EXPONENTIAL,
    Pentaspherical: ModelKind.PENTASPHERICAL,
}


def build_model(
    params: VariogramParameters,
    dim: int = 2,
    ranges: Sequence[float] | None = None,
    azimuth: float = 0.0,
) -> gs.CovModel:
    """Build the GSTools model described by *params*.

    Args:
        params: Model kind, nugget, sill and range.
        dim: Spatial dimension of the model.
        ranges: Per-axis ranges, major axis first, for a geometrically
            anisotropic model.  ``params.range`` is used when ``None``.
        azimuth: Direction of the major axis in degrees clockwise from
            north.  Only meaningful with *ranges*.

    Returns:
        A :class:`gstools.CovModel` instance.
    """
    kwargs: dict[str, Any] = {
        "dim": dim,
        "var": params.contribution,
        "nugget": params.nugget,
        "len_scale": params.range if ranges is None else list(ranges),
    }
    if ranges is not None:
        theta = np.deg2rad(90.0 - azimuth)
        kwargs["angles"] = theta if dim == 2 else [theta, 0.0, 0.0]

    kind = params.kind
    if kind is ModelKind.GAUSSIAN:
        return gs.Gaussian(rescale=np.sqrt(3.0), **kwargs)
    elif kind is ModelKind.SPHERICAL:
        return gs.Spherical(**kwargs)
    elif kind is ModelKind.EXPONENTIAL:
        return gs.Exponential(rescale=3.0, **kwargs)
    elif kind is ModelKind.PENTASPHERICAL:
        return Pentaspherical(**kwargs)
    else:
        raise ValueError(f"Unknown variogram model: {kind!r}")


def build_nested(nested: NestedModel, dim: int = 2) -> gs.SumModel:
    """Build the GSTools sum of the nested structures.

    Each structure becomes a nugget-free model; the nugget of *nested*
    is carried by the sum model itself.  A model without structures is
    a pure nugget effect.
    """
    components = [build_model(s.as_parameters(), dim=dim) for s in nested.structures]
    if not components:
        return gs.SumModel(dim=dim, nugget=nested.nugget)
    return gs.SumModel(*components, nugget=nested.nugget)


def evaluate(
    model: gs.CovModel | VariogramParameters | NestedModel,
    h: ArrayLike,
    azimuth: float | None = None,
) -> np.ndarray:
    """Evaluate a variogram model at lag distances *h*.

    Args:
        model: A GSTools model, single-structure parameters, or a
            nested model.
        h: Lag distances.
        azimuth: For anisotropic GSTools models, evaluate along this
            direction (degrees clockwise from north) instead of along
            the major axis.

    Returns:
        γ(h), with γ(0) = 0 exactly.
    """
    h = np.abs(np.asarray(h, dtype=float))

    if isinstance(model, NestedModel):
        model = build_nested(model)
    elif isinstance(model, VariogramParameters):
        model = build_model(model)

    if azimuth is None or model.dim == 1:
        gamma = np.asarray(model.variogram(h), dtype=float)
    else:
        direction = np.zeros(model.dim)
        direction[:2] = sph2cart(azimuth)
        pos = np.outer(direction, h.ravel())
        gamma = np.asarray(model.vario_spatial(pos), dtype=float).reshape(h.shape)

    return np.where(h > 0, gamma, 0.0)


def parameters_of(model: gs.CovModel) -> VariogramParameters:
    """Recover nugget, sill and range from a built or fitted model.

    Raises:
        ValueError: If *model* is not one of the supported families.
    """
    kind = _MODEL_KINDS.get(type(model))
    if kind is None:
        raise ValueError(f"Unsupported model type: {type(model).__name__}")
    return VariogramParameters(
        kind=kind,
        nugget=float(model.nugget),
        sill=float(model.var + model.nugget),
        range=float(model.len_scale),
    )
