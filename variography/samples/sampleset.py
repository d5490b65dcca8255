"""Point sample containers for variography.

Provides :class:`SampleSet`, an immutable collection of located samples
of a single regionalised variable (e.g. Pb grades), and its CSV loader.
"""

from __future__ import annotations

import csv
import logging
import os
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SampleSet:
    """Located samples of one attribute.

    The arrays are copied on construction and flagged read-only, so a
    sample set can be shared by every cell of a notebook session.

    Args:
        coords: Sample coordinates, shape ``(n, d)`` with ``d`` 2 or 3.
        values: Attribute values, shape ``(n,)``.
        name: Attribute label (e.g. ``"PB"``).
    """

    coords: np.ndarray
    values: np.ndarray
    name: str = "Z"

    def __post_init__(self) -> None:
        coords = np.array(self.coords, dtype=float, ndmin=2)
        values = np.array(self.values, dtype=float).ravel()
        if coords.shape[1] not in (2, 3):
            raise ValueError(
                f"coords must have 2 or 3 columns, got shape {coords.shape}"
            )
        if len(coords) != len(values):
            raise ValueError(
                f"{len(coords)} locations but {len(values)} values."
            )
        coords.setflags(write=False)
        values.setflags(write=False)
        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "values", values)

    # ------------------------------------------------------------------
    # I/O
    # ------------------------------------------------------------------

    @classmethod
    def from_csv(
        cls,
        filename: str | os.PathLike,
        coord_cols: tuple[str, ...] = ("X", "Y"),
        value_col: str = "PB",
    ) -> SampleSet:
        """Load samples from a CSV file.

        Only the coordinate columns and the attribute column are read;
        any other column is ignored.

        Args:
            filename: Path to the CSV file.
            coord_cols: Coordinate column names, ``("X", "Y")`` or
                ``("X", "Y", "Z")``.
            value_col: Attribute column name.

        Raises:
            FileNotFoundError: If *filename* does not exist.
            KeyError: If a requested column is missing.
            ValueError: If the file has no rows or a cell is not numeric.
        """
        wanted = list(coord_cols) + [value_col]
        rows: list[list[float]] = []

        with open(filename, newline="") as fh:
            reader = csv.DictReader(fh)
            header = [c.strip() for c in (reader.fieldnames or [])]
            reader.fieldnames = header
            missing = [c for c in wanted if c not in header]
            if missing:
                raise KeyError(
                    f"Columns {missing} not found in {os.fspath(filename)!r}.  "
                    f"Available: {header}"
                )
            for lineno, row in enumerate(reader, start=2):
                try:
                    rows.append([float(row[c]) for c in wanted])
                except (TypeError, ValueError) as exc:
                    raise ValueError(
                        f"Non-numeric value on line {lineno} of "
                        f"{os.fspath(filename)!r}"
                    ) from exc

        if not rows:
            raise ValueError(f"No samples in {os.fspath(filename)!r}")

        data = np.array(rows)
        logger.debug(
            "Loaded %d samples of %s from %s", len(data), value_col, filename
        )
        return cls(data[:, :-1], data[:, -1], name=value_col)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.values)

    @property
    def n(self) -> int:
        return len(self.values)

    @property
    def dim(self) -> int:
        """Spatial dimension (2 or 3)."""
        return self.coords.shape[1]

    @property
    def pos(self) -> np.ndarray:
        """Coordinates in the ``(d, n)`` layout used by GSTools."""
        return self.coords.T

    @property
    def variance(self) -> float:
        """Population variance of the attribute."""
        return float(np.var(self.values))

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Coordinate extents ``(mins, maxs)``."""
        return self.coords.min(axis=0), self.coords.max(axis=0)

    def above_quantile(self, q: float = 0.9) -> SampleSet:
        """Samples whose value is strictly above the *q* quantile.

        Used to display only the high grades of a deposit.
        """
        if not 0.0 <= q <= 1.0:
            raise ValueError(f"Quantile must be in [0, 1], got {q}")
        mask = self.values > np.quantile(self.values, q)
        return SampleSet(self.coords[mask], self.values[mask], name=self.name)

    def subset(self, index: ArrayLike) -> SampleSet:
        """Samples selected by an index or boolean mask."""
        index = np.asarray(index)
        return SampleSet(self.coords[index], self.values[index], name=self.name)

    def __repr__(self) -> str:
        return f"SampleSet(name={self.name!r}, n={self.n}, dim={self.dim})"
