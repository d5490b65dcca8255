"""Ordinary kriging estimation.

The kriging systems are assembled and solved by
:class:`gstools.krige.Ordinary`.  This module only chooses which
samples enter each system:

* **global**: every sample, one solve for all targets;
* **local**: the samples inside a search :class:`Ellipsoid`, at most
  ``max_neighbors`` of them, one solve per distinct neighbour set.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass

import gstools as gs
import numpy as np
from numpy.typing import ArrayLike

from variography.kriging.grid import CartesianGrid
from variography.kriging.neighborhood import Ellipsoid
from variography.samples.sampleset import SampleSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class KrigingResult:
    """Kriging estimates and variances at a set of target points.

    Targets that could not be estimated hold NaN.

    Args:
        points: Target coordinates, shape ``(n, d)``.
        estimate: Kriging estimates, shape ``(n,)``.
        variance: Kriging variances, shape ``(n,)``.
        shape: Grid shape of the targets, ``(n,)`` for scattered points.
    """

    points: np.ndarray
    estimate: np.ndarray
    variance: np.ndarray
    shape: tuple[int, ...]

    def as_grid(self) -> np.ndarray:
        """Estimates reshaped to the target grid."""
        return self.estimate.reshape(self.shape)

    def variance_grid(self) -> np.ndarray:
        return self.variance.reshape(self.shape)

    @property
    def n_missing(self) -> int:
        return int(np.isnan(self.estimate).sum())


def ordinary_kriging(
    samples: SampleSet,
    model: gs.CovModel,
    targets: CartesianGrid | ArrayLike,
    neighborhood: Ellipsoid | None = None,
    min_neighbors: int = 1,
    max_neighbors: int | None = None,
) -> KrigingResult:
    """Estimate *samples* at *targets* by ordinary kriging.

    Args:
        samples: Conditioning data.
        model: Variogram model, usually from
            :func:`~variography.models.build_model`.
        targets: An estimation grid, or target coordinates of shape
            ``(n, d)``.
        neighborhood: Search ellipsoid.  If ``None``, every sample is
            used for every target.
        min_neighbors: Targets with fewer neighbours are left as NaN.
        max_neighbors: Keep at most this many nearest neighbours.

    Returns:
        A :class:`KrigingResult`.

    Raises:
        ValueError: If the neighbour bounds are inconsistent or the
            dimensions of samples, targets and neighbourhood differ.
    """
    if isinstance(targets, CartesianGrid):
        points = targets.points()
        shape = targets.shape
    else:
        points = np.atleast_2d(np.asarray(targets, dtype=float))
        shape = (len(points),)

    if points.shape[1] != samples.dim:
        raise ValueError(
            f"Targets are {points.shape[1]}-D but samples are {samples.dim}-D."
        )
    if min_neighbors < 1:
        raise ValueError(f"min_neighbors must be at least 1, got {min_neighbors}")
    if max_neighbors is not None and max_neighbors < min_neighbors:
        raise ValueError(
            f"max_neighbors ({max_neighbors}) is below "
            f"min_neighbors ({min_neighbors})"
        )

    if neighborhood is None:
        logger.debug(
            "Global ordinary kriging: %d samples, %d targets",
            samples.n, len(points),
        )
        krig = gs.krige.Ordinary(model, cond_pos=samples.pos, cond_val=samples.values)
        estimate, variance = krig(points.T, mesh_type="unstructured", return_var=True)
        return KrigingResult(
            points,
            np.asarray(estimate, dtype=float),
            np.asarray(variance, dtype=float),
            shape,
        )

    if neighborhood.dim != samples.dim:
        raise ValueError(
            f"Neighbourhood is {neighborhood.dim}-D but samples are "
            f"{samples.dim}-D."
        )
    return _local_kriging(
        samples, model, points, shape, neighborhood, min_neighbors, max_neighbors
    )


def _local_kriging(
    samples: SampleSet,
    model: gs.CovModel,
    points: np.ndarray,
    shape: tuple[int, ...],
    neighborhood: Ellipsoid,
    min_neighbors: int,
    max_neighbors: int | None,
) -> KrigingResult:
    """Kriging with a moving search neighbourhood."""
    neighbors = neighborhood.search(samples.coords, points, max_neighbors)

    # Group targets by neighbour set: one kriging system per group
    groups: dict[tuple[int, ...], list[int]] = {}
    for target, found in enumerate(neighbors):
        if len(found) >= min_neighbors:
            groups.setdefault(tuple(sorted(found.tolist())), []).append(target)

    estimate = np.full(len(points), np.nan)
    variance = np.full(len(points), np.nan)
    logger.debug(
        "Local ordinary kriging: %d targets, %d distinct neighbourhoods",
        len(points), len(groups),
    )

    for key, members in groups.items():
        nb = np.array(key)
        krig = gs.krige.Ordinary(
            model,
            cond_pos=samples.pos[:, nb],
            cond_val=samples.values[nb],
        )
        est, var = krig(points[members].T, mesh_type="unstructured", return_var=True)
        estimate[members] = est
        variance[members] = var

    n_missing = int(np.isnan(estimate).sum())
    if n_missing:
        warnings.warn(
            f"{n_missing} of {len(points)} targets have fewer than "
            f"{min_neighbors} neighbours; left unestimated."
        )
    return KrigingResult(points, estimate, variance, shape)
