"""Empirical: experimental variograms, directions and lags.

Workflow::

    query = DirectionalQuery(azimuth=45, max_lag=200, lag_count=7)
    gamma = directional_variogram(samples, query)
"""

from variography.empirical.directions import (
    DirectionalQuery,
    lag_bins,
    sph2cart,
    tolerance_lines,
)
from variography.empirical.estimate import (
    EmpiricalVariogram,
    directional_variogram,
    empirical_variogram,
)

__all__ = [
    "sph2cart",
    "lag_bins",
    "tolerance_lines",
    "DirectionalQuery",
    "EmpiricalVariogram",
    "empirical_variogram",
    "directional_variogram",
]
