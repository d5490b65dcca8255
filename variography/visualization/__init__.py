"""Visualization: variogram and map plotting utilities."""

from variography.visualization.variograms import (
    plot_empirical,
    plot_model,
    plot_tolerance,
)
from variography.visualization.maps import (
    plot_estimates,
    plot_lag_vector,
    plot_samples,
)

__all__ = [
    "plot_empirical",
    "plot_model",
    "plot_tolerance",
    "plot_samples",
    "plot_lag_vector",
    "plot_estimates",
]
