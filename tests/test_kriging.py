"""Tests for the kriging subpackage.

Covers estimation grids, the anisotropic search ellipsoid, and global
and local ordinary kriging.
"""

from __future__ import annotations

import numpy as np
import pytest

from variography.kriging import CartesianGrid, Ellipsoid, KrigingResult, ordinary_kriging
from variography.models import (
    ModelKind,
    NestedModel,
    Structure,
    VariogramParameters,
    build_model,
    build_nested,
)
from variography.samples import SampleSet, random_points, synthetic_deposit


def _model(kind=ModelKind.SPHERICAL, nugget=0.0, range=0.8):
    return build_model(VariogramParameters(kind, nugget=nugget, sill=1.0, range=range))


# ======================================================================
# Grid
# ======================================================================

class TestCartesianGrid:
    def test_points(self):
        grid = CartesianGrid((3, 2), origin=(8.0, 8.0), spacing=(1.0, 2.0))
        pts = grid.points()
        assert pts.shape == (6, 2)
        np.testing.assert_allclose(pts[0], [8.0, 8.0])
        np.testing.assert_allclose(pts[1], [8.0, 10.0])
        np.testing.assert_allclose(pts[-1], [10.0, 10.0])

    def test_shape_and_count(self):
        grid = CartesianGrid((243, 283), (8.0, 8.0), (1.0, 1.0))
        assert grid.shape == (243, 283)
        assert grid.n_points == 243 * 283
        assert grid.extent() == (8.0, 250.0, 8.0, 290.0)

    def test_three_dimensional(self):
        grid = CartesianGrid((2, 2, 2), (0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
        assert grid.dim == 3
        assert grid.points().shape == (8, 3)

    @pytest.mark.parametrize("kwargs", [
        {"dims": (2, 2), "origin": (0.0,), "spacing": (1.0, 1.0)},
        {"dims": (0, 2)},
        {"dims": (2, 2), "spacing": (1.0, -1.0)},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            CartesianGrid(**kwargs)


# ======================================================================
# Search ellipsoid
# ======================================================================

class TestEllipsoid:
    def test_major_axis_north(self):
        ell = Ellipsoid((10.0, 2.0), azimuth=0.0)
        assert ell.contains([[0.0, 9.9]])[0]
        assert not ell.contains([[0.0, 10.1]])[0]
        assert ell.contains([[1.9, 0.0]])[0]
        assert not ell.contains([[2.1, 0.0]])[0]

    def test_rotated(self):
        ell = Ellipsoid((10.0, 2.0), azimuth=90.0)
        assert ell.contains([[9.9, 0.0]])[0]
        assert not ell.contains([[0.0, 2.1]])[0]

    def test_transform_is_linear(self):
        ell = Ellipsoid((5.0, 1.0), azimuth=30.0)
        a = np.array([[1.0, 2.0]])
        b = np.array([[-3.0, 0.5]])
        np.testing.assert_allclose(ell.transform(a - b), ell.transform(a) - ell.transform(b))

    def test_search_order_and_limit(self):
        coords = np.array([[0.0, 1.0], [0.0, 3.0], [0.0, 20.0], [5.0, 0.0]])
        ell = Ellipsoid((10.0, 2.0))
        found = ell.search(coords, [[0.0, 0.0]])
        np.testing.assert_array_equal(found[0], [0, 1])
        limited = ell.search(coords, [[0.0, 0.0]], max_neighbors=1)
        np.testing.assert_array_equal(limited[0], [0])

    def test_search_empty(self):
        ell = Ellipsoid((1.0, 1.0))
        found = ell.search([[10.0, 10.0]], [[0.0, 0.0]])
        assert len(found[0]) == 0

    def test_search_without_samples(self):
        ell = Ellipsoid((1.0, 1.0))
        found = ell.search(np.empty((0, 2)), [[0.0, 0.0], [1.0, 1.0]], max_neighbors=16)
        assert len(found) == 2
        assert all(len(f) == 0 for f in found)

    def test_invalid(self):
        with pytest.raises(ValueError):
            Ellipsoid((1.0,))
        with pytest.raises(ValueError):
            Ellipsoid((1.0, 0.0))


# ======================================================================
# Ordinary kriging
# ======================================================================

class TestOrdinaryKriging:
    def test_exact_at_samples(self):
        samples = random_points(n=20, seed=1)
        result = ordinary_kriging(samples, _model(), samples.coords)
        assert isinstance(result, KrigingResult)
        np.testing.assert_allclose(result.estimate, samples.values, atol=1e-5)
        np.testing.assert_allclose(result.variance, 0.0, atol=1e-5)

    def test_grid_shape(self):
        samples = random_points(n=20, seed=2)
        grid = CartesianGrid((5, 4), (0.0, 0.0), (0.25, 0.25))
        result = ordinary_kriging(samples, _model(ModelKind.EXPONENTIAL), grid)
        assert result.as_grid().shape == (5, 4)
        assert result.variance_grid().shape == (5, 4)
        assert result.n_missing == 0

    def test_estimates_within_data_range(self):
        samples = random_points(n=30, seed=4)
        grid = CartesianGrid((6, 6), (0.0, 0.0), (0.2, 0.2))
        result = ordinary_kriging(samples, _model(ModelKind.EXPONENTIAL, nugget=0.2), grid)
        assert np.all(result.variance >= -1e-9)
        assert result.estimate.min() >= samples.values.min() - 0.5
        assert result.estimate.max() <= samples.values.max() + 0.5

    def test_large_neighbourhood_matches_global(self):
        samples = random_points(n=15, seed=5)
        targets = np.array([[0.2, 0.3], [0.5, 0.5], [0.9, 0.1]])
        model = _model(ModelKind.EXPONENTIAL)
        glob = ordinary_kriging(samples, model, targets)
        local = ordinary_kriging(
            samples, model, targets, neighborhood=Ellipsoid((100.0, 100.0))
        )
        np.testing.assert_allclose(local.estimate, glob.estimate, atol=1e-8)
        np.testing.assert_allclose(local.variance, glob.variance, atol=1e-8)

    def test_far_targets_left_missing(self):
        samples = random_points(n=15, seed=6)
        targets = np.array([[0.5, 0.5], [50.0, 50.0]])
        with pytest.warns(UserWarning, match="neighbours"):
            result = ordinary_kriging(
                samples, _model(), targets,
                neighborhood=Ellipsoid((1.0, 1.0)), min_neighbors=3,
            )
        assert np.isfinite(result.estimate[0])
        assert np.isnan(result.estimate[1])
        assert result.n_missing == 1

    def test_deposit_neighbourhood(self):
        samples = synthetic_deposit(n=120, seed=8)
        model = build_model(
            VariogramParameters(ModelKind.SPHERICAL, 1.0, samples.variance, 100.0),
            ranges=(100.0, 35.0),
        )
        grid = CartesianGrid((6, 6), (20.0, 20.0), (40.0, 40.0))
        result = ordinary_kriging(
            samples, model, grid,
            neighborhood=Ellipsoid((100.0, 35.0)),
            min_neighbors=1, max_neighbors=16,
        )
        assert result.as_grid().shape == (6, 6)
        assert result.n_missing < grid.n_points

    def test_nested_model(self):
        samples = random_points(n=20, seed=10)
        nested = NestedModel(
            nugget=0.0,
            structures=(
                Structure(ModelKind.SPHERICAL, 0.4, 0.3),
                Structure(ModelKind.EXPONENTIAL, 0.6, 0.9),
            ),
        )
        result = ordinary_kriging(samples, build_nested(nested), samples.coords)
        np.testing.assert_allclose(result.estimate, samples.values, atol=1e-5)

    def test_nested_model_with_nugget_and_neighbourhood(self):
        samples = random_points(n=20, seed=10)
        nested = NestedModel(0.2, (Structure(ModelKind.SPHERICAL, 0.8, 0.6),))
        grid = CartesianGrid((4, 4), (0.1, 0.1), (0.25, 0.25))
        result = ordinary_kriging(
            samples, build_nested(nested), grid,
            neighborhood=Ellipsoid((2.0, 2.0)), min_neighbors=4, max_neighbors=8,
        )
        assert result.n_missing == 0
        assert np.all(result.variance > 0)

    def test_dimension_mismatch(self):
        samples = random_points(n=10)
        with pytest.raises(ValueError, match="3-D"):
            ordinary_kriging(samples, _model(), np.zeros((2, 3)))
        with pytest.raises(ValueError, match="Neighbourhood"):
            ordinary_kriging(
                samples, _model(), np.zeros((2, 2)),
                neighborhood=Ellipsoid((1.0, 1.0, 1.0)),
            )

    def test_neighbour_bounds(self):
        samples = random_points(n=10)
        with pytest.raises(ValueError, match="min_neighbors"):
            ordinary_kriging(samples, _model(), samples.coords, min_neighbors=0)
        with pytest.raises(ValueError, match="max_neighbors"):
            ordinary_kriging(
                samples, _model(), samples.coords, min_neighbors=8, max_neighbors=4
            )

    def test_three_dimensional(self):
        rng = np.random.default_rng(9)
        samples = SampleSet(rng.random((20, 3)), rng.random(20))
        model = build_model(
            VariogramParameters(ModelKind.SPHERICAL, 0.0, 1.0, 1.0), dim=3
        )
        result = ordinary_kriging(
            samples, model, samples.coords[:3],
            neighborhood=Ellipsoid((2.0, 2.0, 2.0)),
        )
        np.testing.assert_allclose(result.estimate, samples.values[:3], atol=1e-5)
