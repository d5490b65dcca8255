"""Experimental variogram estimation.

Pairs of samples are binned by separation distance and, for each bin,
the Matheron estimator

    γ(h) = 1 / (2 N(h)) Σ [Z(xᵢ) − Z(xᵢ + h)]²

is computed by :func:`gstools.vario_estimate`.
"""

from __future__ import annotations

from dataclasses import dataclass

import gstools as gs
import numpy as np
from numpy.typing import ArrayLike

from variography.empirical.directions import DirectionalQuery, sph2cart
from variography.samples.sampleset import SampleSet


@dataclass(frozen=True, eq=False)
class EmpiricalVariogram:
    """Binned experimental variogram.

    Args:
        bin_centers: Centre of each lag bin.
        gamma: Semivariance of each bin (0 where the bin is empty).
        counts: Number of sample pairs in each bin.
        azimuth: Direction in degrees, ``None`` if omnidirectional.
    """

    bin_centers: np.ndarray
    gamma: np.ndarray
    counts: np.ndarray
    azimuth: float | None = None

    def __len__(self) -> int:
        return len(self.bin_centers)

    @property
    def n_pairs(self) -> int:
        return int(np.sum(self.counts))

    def populated(self) -> EmpiricalVariogram:
        """The same variogram restricted to bins that contain pairs."""
        mask = self.counts > 0
        return EmpiricalVariogram(
            self.bin_centers[mask],
            self.gamma[mask],
            self.counts[mask],
            self.azimuth,
        )


def empirical_variogram(
    samples: SampleSet,
    max_lag: float | None = None,
    lag_count: int = 10,
    bin_edges: ArrayLike | None = None,
    estimator: str = "matheron",
) -> EmpiricalVariogram:
    """Omnidirectional experimental variogram.

    Args:
        samples: Sample set.
        max_lag: Largest lag distance; the lags are ``max_lag / lag_count``
            wide starting at 0.
        lag_count: Number of lag bins.
        bin_edges: Explicit bin edges, overriding *max_lag* and
            *lag_count* (see :func:`~variography.empirical.lag_bins`).
        estimator: ``"matheron"`` or ``"cressie"``.

    Raises:
        ValueError: If neither *max_lag* nor *bin_edges* is given.
    """
    if bin_edges is None:
        if max_lag is None:
            raise ValueError("Either max_lag or bin_edges must be given.")
        bin_edges = DirectionalQuery(max_lag=max_lag, lag_count=lag_count).bin_edges

    centers, gamma, counts = gs.vario_estimate(
        samples.pos,
        samples.values,
        bin_edges=np.asarray(bin_edges, dtype=float),
        estimator=estimator,
        return_counts=True,
    )
    return EmpiricalVariogram(
        np.asarray(centers, dtype=float),
        np.nan_to_num(np.asarray(gamma, dtype=float)),
        np.asarray(counts, dtype=int),
    )


def directional_variogram(
    samples: SampleSet,
    query: DirectionalQuery,
    estimator: str = "matheron",
) -> EmpiricalVariogram:
    """Experimental variogram along ``query.azimuth`` (and dip).

    Pairs are accepted when their separation vector lies within
    ``query.angle_tolerance`` of the direction, in either sense, and
    within ``query.bandwidth`` of the direction line if one is set.

    Raises:
        ValueError: If a dip is given for 2-D samples.
    """
    if query.dip is not None and samples.dim == 2:
        raise ValueError("A dip requires 3-D samples.")
    dip = query.dip
    if dip is None and samples.dim == 3:
        dip = 0.0
    direction = np.atleast_2d(sph2cart(query.azimuth, dip))

    centers, gamma, counts = gs.vario_estimate(
        samples.pos,
        samples.values,
        bin_edges=query.bin_edges,
        direction=direction,
        angles_tol=np.deg2rad(query.angle_tolerance),
        bandwidth=query.bandwidth,
        estimator=estimator,
        return_counts=True,
    )
    return EmpiricalVariogram(
        np.asarray(centers, dtype=float),
        np.nan_to_num(np.asarray(gamma, dtype=float)[0]),
        np.asarray(counts, dtype=int)[0],
        azimuth=query.azimuth,
    )
