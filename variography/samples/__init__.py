"""Samples: located attribute values and synthetic datasets.

Workflow::

    samples = SampleSet.from_csv("walker_lake_proj.csv",
                                 coord_cols=("X", "Y"), value_col="PB")
    high_grades = samples.above_quantile(0.9)
"""

from variography.samples.sampleset import SampleSet
from variography.samples.synthetic import (
    gaussian_image,
    irregular_profile,
    random_points,
    regular_grid,
    synthetic_deposit,
)

__all__ = [
    "SampleSet",
    "regular_grid",
    "random_points",
    "irregular_profile",
    "gaussian_image",
    "synthetic_deposit",
]
