"""Estimation grids."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class CartesianGrid:
    """Regular grid of estimation points.

    Point ``(i, j[, k])`` sits at ``origin + (i, j[, k]) * spacing``.

    Args:
        dims: Number of points along each axis.
        origin: Coordinates of the first point.
        spacing: Distance between neighbouring points along each axis.
    """

    dims: tuple[int, ...]
    origin: tuple[float, ...] = (0.0, 0.0)
    spacing: tuple[float, ...] = (1.0, 1.0)

    def __post_init__(self) -> None:
        if not len(self.dims) == len(self.origin) == len(self.spacing):
            raise ValueError(
                "dims, origin and spacing must have the same length."
            )
        if any(n < 1 for n in self.dims):
            raise ValueError(f"dims must be positive, got {self.dims}")
        if any(s <= 0 for s in self.spacing):
            raise ValueError(f"spacing must be positive, got {self.spacing}")

    @property
    def dim(self) -> int:
        return len(self.dims)

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(int(n) for n in self.dims)

    @property
    def n_points(self) -> int:
        return int(np.prod(self.shape))

    def axes(self) -> list[np.ndarray]:
        """Point coordinates along each axis."""
        return [
            o + s * np.arange(n)
            for n, o, s in zip(self.shape, self.origin, self.spacing)
        ]

    def points(self) -> np.ndarray:
        """All grid points, shape ``(n_points, dim)``, in C order."""
        mesh = np.meshgrid(*self.axes(), indexing="ij")
        return np.column_stack([m.ravel() for m in mesh])

    def extent(self) -> tuple[float, float, float, float]:
        """``(xmin, xmax, ymin, ymax)`` for image plotting."""
        x, y = self.axes()[:2]
        return float(x[0]), float(x[-1]), float(y[0]), float(y[-1])
