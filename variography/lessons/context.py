"""Read-only datasets shared by the lesson cells."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from variography.samples.sampleset import SampleSet
from variography.samples.synthetic import (
    gaussian_image,
    irregular_profile,
    random_points,
    regular_grid,
    synthetic_deposit,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LessonContext:
    """Datasets loaded once per session and passed to every cell.

    Args:
        deposit: Scattered grades (Walker Lake Pb, or a synthetic
            stand-in).
        image: Exhaustive Gaussian training image.
        grid_samples: 5 × 5 regular grid.
        random_samples: 25 uniformly scattered samples.
        profile: Irregular collinear profile.
    """

    deposit: SampleSet
    image: SampleSet
    grid_samples: SampleSet
    random_samples: SampleSet
    profile: SampleSet

    @classmethod
    def load(
        cls,
        csv_path: str | os.PathLike | None = None,
        value_col: str = "PB",
        seed: int = 42,
    ) -> LessonContext:
        """Build the context.

        Args:
            csv_path: CSV with ``X``, ``Y`` and *value_col* columns
                (e.g. ``walker_lake_proj.csv``).  A synthetic deposit is
                generated when ``None``.
            value_col: Attribute column of the CSV.
            seed: Seed of the small teaching datasets.

        Raises:
            FileNotFoundError, KeyError, ValueError: As
                :meth:`SampleSet.from_csv`; a bad CSV is fatal.
        """
        if csv_path is None:
            logger.debug("No CSV given, using a synthetic deposit")
            deposit = synthetic_deposit(name=value_col)
        else:
            deposit = SampleSet.from_csv(
                csv_path, coord_cols=("X", "Y"), value_col=value_col
            )
        return cls(
            deposit=deposit,
            image=gaussian_image(),
            grid_samples=regular_grid(seed=seed),
            random_samples=random_points(seed=seed),
            profile=irregular_profile(seed=seed),
        )
