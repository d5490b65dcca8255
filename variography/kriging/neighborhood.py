"""Anisotropic search neighbourhoods."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike
from scipy.spatial import cKDTree

from variography.empirical.directions import sph2cart


@dataclass(frozen=True)
class Ellipsoid:
    """Search ellipse (2-D) or ellipsoid (3-D).

    Args:
        radii: Semi-axes, major first, then minor (then vertical).
        azimuth: Direction of the major axis in degrees clockwise from
            north.
    """

    radii: tuple[float, ...]
    azimuth: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "radii", tuple(float(r) for r in self.radii))
        if len(self.radii) not in (2, 3):
            raise ValueError(f"Expected 2 or 3 radii, got {len(self.radii)}")
        if any(r <= 0 for r in self.radii):
            raise ValueError(f"radii must be positive, got {self.radii}")

    @property
    def dim(self) -> int:
        return len(self.radii)

    def axes(self) -> np.ndarray:
        """Unit vectors of the principal axes, one per row."""
        major = sph2cart(self.azimuth)
        minor = sph2cart(self.azimuth + 90.0)
        if self.dim == 2:
            return np.array([major, minor])
        return np.array([
            [major[0], major[1], 0.0],
            [minor[0], minor[1], 0.0],
            [0.0, 0.0, 1.0],
        ])

    def transform(self, coords: ArrayLike) -> np.ndarray:
        """Map coordinates into the frame where the ellipsoid is a unit ball.

        The map is linear, so it applies equally to positions and to
        offsets between positions.
        """
        coords = np.atleast_2d(np.asarray(coords, dtype=float))
        return (coords @ self.axes().T) / np.asarray(self.radii)

    def contains(self, offsets: ArrayLike) -> np.ndarray:
        """Whether each offset from the centre lies inside the ellipsoid."""
        return np.linalg.norm(self.transform(offsets), axis=1) <= 1.0

    def search(
        self,
        coords: ArrayLike,
        targets: ArrayLike,
        max_neighbors: int | None = None,
    ) -> list[np.ndarray]:
        """Indices of *coords* inside the ellipsoid centred on each target.

        Neighbours are ordered from nearest to farthest in the
        anisotropic metric and truncated to *max_neighbors*.
        """
        targets = self.transform(targets)
        if len(coords) == 0:
            return [np.empty(0, dtype=int) for _ in range(len(targets))]
        coords = self.transform(coords)
        k = len(coords) if max_neighbors is None else min(max_neighbors, len(coords))
        tree = cKDTree(coords)
        dist, idx = tree.query(targets, k=k, distance_upper_bound=1.0 + 1e-12)
        dist = np.reshape(dist, (len(targets), k))
        idx = np.reshape(idx, (len(targets), k))
        return [row_idx[np.isfinite(row_d)] for row_d, row_idx in zip(dist, idx)]
