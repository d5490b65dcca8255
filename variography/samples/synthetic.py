"""Seeded synthetic sample sets used by the lessons.

Functions
---------
regular_grid
    Uniform random values on a regular ``nx × ny`` grid.
random_points
    Uniform random values at uniform random locations.
irregular_profile
    Seven collinear, irregularly spaced samples.
gaussian_image
    A realisation of a Gaussian random field on a regular grid.
synthetic_deposit
    Scattered anisotropic grades over a rectangular area.
"""

from __future__ import annotations

import gstools as gs
import numpy as np

from variography.samples.sampleset import SampleSet

_PROFILE_X = (1.0, 1.6, 1.9, 2.2, 2.8, 3.6, 3.8)


def regular_grid(
    nx: int = 5,
    ny: int = 5,
    seed: int | None = 42,
    name: str = "Au",
) -> SampleSet:
    """Samples at integer nodes ``(i, j)``, ``1 ≤ i ≤ nx``, ``1 ≤ j ≤ ny``.

    Values are uniform on ``[0, 1)``.  The same *seed* always yields the
    same sample set.
    """
    rng = np.random.default_rng(seed)
    coords = np.array(
        [(i, j) for i in range(1, nx + 1) for j in range(1, ny + 1)],
        dtype=float,
    )
    return SampleSet(coords, rng.random(len(coords)), name=name)


def random_points(
    n: int = 25,
    seed: int | None = 42,
    name: str = "Au",
) -> SampleSet:
    """*n* samples at uniform locations in the unit square."""
    rng = np.random.default_rng(seed)
    coords = rng.random((n, 2))
    return SampleSet(coords, rng.random(n), name=name)


def irregular_profile(seed: int | None = 42, name: str = "Au") -> SampleSet:
    """Irregularly spaced samples along the line ``y = 1``.

    Most samples have no partner exactly one unit away (only 2.8 and
    3.8 do), so a lag of 1 finds few pairs unless a lag tolerance is
    used.
    """
    rng = np.random.default_rng(seed)
    coords = np.column_stack([_PROFILE_X, np.ones(len(_PROFILE_X))])
    return SampleSet(coords, rng.random(len(coords)), name=name)


def gaussian_image(
    shape: tuple[int, int] = (100, 100),
    ranges: tuple[float, float] = (30.0, 10.0),
    seed: int | None = 2021,
    name: str = "Z",
) -> SampleSet:
    """Unit-variance Gaussian random field sampled on every pixel.

    The field has a Gaussian covariance whose practical ranges along
    the x and y axes are *ranges*.  Generated with :class:`gstools.SRF`.

    Args:
        shape: Number of pixels along x and y.
        ranges: Practical ranges along x and y.
        seed: Random seed.
        name: Attribute label.
    """
    model = gs.Gaussian(
        dim=2,
        var=1.0,
        len_scale=list(ranges),
        rescale=np.sqrt(3.0),
    )
    srf = gs.SRF(model, seed=seed)
    x = np.arange(shape[0], dtype=float)
    y = np.arange(shape[1], dtype=float)
    field = srf.structured([x, y])

    xx, yy = np.meshgrid(x, y, indexing="ij")
    coords = np.column_stack([xx.ravel(), yy.ravel()])
    return SampleSet(coords, np.asarray(field).ravel(), name=name)


def synthetic_deposit(
    n: int = 470,
    extent: tuple[float, float] = (260.0, 300.0),
    ranges: tuple[float, float] = (100.0, 35.0),
    mean: float = 4.0,
    var: float = 9.0,
    seed: int | None = 1234,
    name: str = "PB",
) -> SampleSet:
    """Scattered, anisotropic grades standing in for a drilling campaign.

    Samples are drawn at uniform locations in ``[0, extent]`` from a
    spherical Gaussian random field whose major range runs N-S.
    Negative grades are clipped to zero.

    Args:
        n: Number of samples.
        extent: Size of the area along x and y.
        ranges: Practical ranges along y (major) and x (minor).
        mean: Field mean.
        var: Field variance.
        seed: Random seed.
        name: Attribute label.
    """
    rng = np.random.default_rng(seed)
    coords = rng.random((n, 2)) * np.asarray(extent)
    model = gs.Spherical(
        dim=2,
        var=var,
        len_scale=list(ranges),
        angles=np.pi / 2.0,
    )
    srf = gs.SRF(model, mean=mean, seed=seed)
    field = np.asarray(srf((coords[:, 0], coords[:, 1])))
    return SampleSet(coords, np.clip(field, 0.0, None), name=name)
