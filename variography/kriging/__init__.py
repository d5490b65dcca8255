"""Kriging: estimation grids, search neighbourhoods, ordinary kriging.

Workflow::

    model = build_model(params, ranges=(101.0, 32.0), azimuth=0.0)
    result = ordinary_kriging(
        samples, model, CartesianGrid((243, 283), (8.0, 8.0), (1.0, 1.0)),
        neighborhood=Ellipsoid((101.0, 32.0), azimuth=0.0),
        min_neighbors=8, max_neighbors=16,
    )
"""

from variography.kriging.grid import CartesianGrid
from variography.kriging.neighborhood import Ellipsoid
from variography.kriging.estimation import KrigingResult, ordinary_kriging

__all__ = [
    "CartesianGrid",
    "Ellipsoid",
    "KrigingResult",
    "ordinary_kriging",
]
