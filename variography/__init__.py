"""
variography: interactive lessons on geostatistical variography.

Subpackages
-----------
samples
    Located sample sets, CSV loading and synthetic datasets.
empirical
    Directions, lags and experimental variograms.
models
    Theoretical variogram models, nested structures and fitting.
kriging
    Estimation grids, search neighbourhoods and ordinary kriging.
visualization
    Variogram and map plotting utilities.
lessons
    Notebook cells, their widgets and the shared lesson context.
"""

from variography import (
    samples,
    empirical,
    models,
    kriging,
    visualization,
    lessons,
)

__version__ = "0.1.0"

__all__ = [
    "samples",
    "empirical",
    "models",
    "kriging",
    "visualization",
    "lessons",
]
