"""Directions and lag definitions for experimental variograms.

Azimuths are measured in degrees clockwise from north (the +y axis);
dips in degrees below the horizontal.  A variogram is sensitive to the
direction of a lag vector but not to its sense, so ``azimuth`` and
``azimuth + 180`` describe the same variogram.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def sph2cart(azimuth: float, dip: float | None = None) -> tuple[float, ...]:
    """Unit vector pointing along *azimuth* (and *dip* in 3-D).

    Examples::

        sph2cart(0)    # (0, 1)  north
        sph2cart(90)   # (1, 0)  east
        sph2cart(0, 90)  # (0, 0, -1)  vertical, downward
    """
    theta = np.deg2rad(azimuth)
    if dip is None:
        return float(np.sin(theta)), float(np.cos(theta))
    phi = np.deg2rad(dip)
    return (
        float(np.sin(theta) * np.cos(phi)),
        float(np.cos(theta) * np.cos(phi)),
        float(-np.sin(phi)),
    )


def lag_bins(lag: float, lag_count: int) -> np.ndarray:
    """Bin edges centred on multiples of *lag* with half-lag tolerance.

    Bin *k* (1-based) collects pairs separated by ``[k·lag − lag/2,
    k·lag + lag/2)``, so bins neither overlap nor leave gaps.
    """
    if lag <= 0:
        raise ValueError(f"lag must be positive, got {lag}")
    if lag_count < 1:
        raise ValueError(f"lag_count must be at least 1, got {lag_count}")
    return lag * (np.arange(lag_count + 1) + 0.5)


def tolerance_lines(
    azimuth: float,
    tolerance: float = 22.5,
) -> list[tuple[tuple[float, float], tuple[float, float]]]:
    """Segments of an angular tolerance diagram on the unit circle.

    Returns the search direction followed by its two tolerance limits,
    each as a ``(start, end)`` pair running from ``azimuth + 180`` to
    ``azimuth``.  The angular tolerance is conventionally half the
    angular increment between the directions being computed.
    """
    return [
        (sph2cart(a + 180.0), sph2cart(a))
        for a in (azimuth, azimuth - tolerance, azimuth + tolerance)
    ]


@dataclass(frozen=True)
class DirectionalQuery:
    """Request for a directional experimental variogram.

    Args:
        azimuth: Direction in degrees clockwise from north.  Normalised
            into ``[0, 360)``.
        dip: Dip in degrees for 3-D data, ``None`` for 2-D.
        max_lag: Largest lag distance considered.
        lag_count: Number of lag bins between 0 and *max_lag*.
        angle_tolerance: Half-angle of the search cone, in degrees.
        bandwidth: Optional maximum distance of a pair from the
            direction line.

    Raises:
        ValueError: For a dip outside ``[-90, 90]`` or a non-positive
            lag definition.
    """

    azimuth: float = 0.0
    dip: float | None = None
    max_lag: float = 1.0
    lag_count: int = 10
    angle_tolerance: float = 22.5
    bandwidth: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "azimuth", float(self.azimuth) % 360.0)
        if self.dip is not None and not -90.0 <= self.dip <= 90.0:
            raise ValueError(f"dip must be in [-90, 90], got {self.dip}")
        if self.max_lag <= 0:
            raise ValueError(f"max_lag must be positive, got {self.max_lag}")
        if int(self.lag_count) != self.lag_count or self.lag_count < 1:
            raise ValueError(
                f"lag_count must be a positive integer, got {self.lag_count}"
            )
        if not 0.0 < self.angle_tolerance <= 90.0:
            raise ValueError(
                f"angle_tolerance must be in (0, 90], got {self.angle_tolerance}"
            )

    @property
    def lag(self) -> float:
        """Lag size (bin width)."""
        return self.max_lag / self.lag_count

    @property
    def bin_edges(self) -> np.ndarray:
        return np.linspace(0.0, self.max_lag, int(self.lag_count) + 1)

    @property
    def direction(self) -> tuple[float, ...]:
        return sph2cart(self.azimuth, self.dip)
