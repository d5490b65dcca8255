"""Least-squares fitting of variogram models to experimental variograms."""

from __future__ import annotations

import gstools as gs

from variography.empirical.estimate import EmpiricalVariogram
from variography.models.parameters import ModelKind, VariogramParameters
from variography.models.theoretical import build_model


def fit_model(
    kind: ModelKind | str,
    empirical: EmpiricalVariogram,
    nugget: bool = True,
    dim: int = 2,
    weighted: bool = False,
) -> gs.CovModel:
    """Fit a model family to an experimental variogram.

    Only bins holding at least one pair take part in the fit.  The
    fitted nugget, sill and range can be read back with
    :func:`~variography.models.theoretical.parameters_of`.

    Args:
        kind: Model family (or its select-box label).
        empirical: Experimental variogram to fit.
        nugget: Fit a nugget effect; if ``False`` it is fixed at 0.
        dim: Spatial dimension of the fitted model.
        weighted: Weight each bin by its number of pairs.

    Returns:
        The fitted :class:`gstools.CovModel`.

    Raises:
        ValueError: If fewer than two bins contain pairs.
    """
    data = empirical.populated()
    if len(data) < 2:
        raise ValueError(
            f"Cannot fit a model to {len(data)} populated lag bin(s)."
        )

    start = VariogramParameters(
        kind=ModelKind.from_label(kind),
        nugget=0.0,
        sill=max(float(data.gamma.max()), 1e-12),
        range=float(data.bin_centers.max()) / 2.0,
    )
    model = build_model(start, dim=dim)
    model.fit_variogram(
        data.bin_centers,
        data.gamma,
        nugget=nugget,
        weights=data.counts if weighted else None,
    )
    return model
