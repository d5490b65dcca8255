"""Smoke tests for the plotting utilities (Agg backend)."""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import pytest

from variography.empirical import EmpiricalVariogram, empirical_variogram
from variography.kriging import CartesianGrid, ordinary_kriging
from variography.models import (
    ModelKind,
    NestedModel,
    Structure,
    VariogramParameters,
    build_model,
)
from variography.samples import random_points, regular_grid
from variography.visualization import (
    plot_empirical,
    plot_estimates,
    plot_lag_vector,
    plot_model,
    plot_samples,
    plot_tolerance,
)


@pytest.fixture
def samples():
    return random_points(n=20, seed=1)


class TestVariogramPlots:
    def test_empirical(self, samples):
        vario = empirical_variogram(samples, max_lag=1.0, lag_count=5)
        ax = plot_empirical(vario, join_points=True, title="Test")
        assert ax.get_title() == "Test"
        line = ax.get_lines()[0]
        assert line.get_linestyle() == "-"
        np.testing.assert_allclose(line.get_xdata(), vario.populated().bin_centers)

    def test_empirical_skips_empty_bins(self):
        vario = EmpiricalVariogram(
            np.array([1.0, 2.0, 3.0]), np.array([0.2, 0.0, 0.4]), np.array([5, 0, 3])
        )
        ax = plot_empirical(vario, show_counts=False)
        assert len(ax.get_lines()[0].get_xdata()) == 2

    def test_model_on_given_axes(self):
        fig, ax = plt.subplots()
        params = VariogramParameters(ModelKind.SPHERICAL, 0.2, 1.0, 10.0)
        out = plot_model(build_model(params), 20.0, ax=ax)
        assert out is ax
        curve, origin = ax.get_lines()[:2]
        assert curve.get_ydata()[-1] == pytest.approx(1.0)
        assert origin.get_ydata()[0] == 0.0

    def test_model_annotations(self):
        params = VariogramParameters(ModelKind.EXPONENTIAL, 0.1, 1.0, 10.0)
        ax = plot_model(params, 30.0, annotate=True, label="Exponential")
        labels = [t.get_text() for t in ax.get_legend().get_texts()]
        assert labels == ["Exponential", "Nugget", "Sill", "Range"]

    def test_nested_model(self):
        nested = NestedModel(1.0, (Structure(ModelKind.SPHERICAL, 2.0, 50.0),))
        ax = plot_model(nested, 100.0, annotate=True)
        assert ax.get_lines()[0].get_ydata().max() == pytest.approx(3.0)

    def test_tolerance(self):
        fig = plot_tolerance(45.0, 0.0)
        assert len(fig.axes) == 2
        assert [ax.get_title() for ax in fig.axes] == ["Azimuth tolerance", "Dip tolerance"]


class TestMapPlots:
    def test_samples(self, samples):
        ax = plot_samples(samples, clims=(0, 1))
        assert ax.get_title() == samples.name
        assert len(ax.collections) == 1

    def test_lag_vector(self):
        ax = plot_lag_vector(regular_grid(), (1, 1), 2, tolerance=True)
        assert len(ax.get_lines()) == 3

    def test_estimates_grid(self, samples):
        model = build_model(VariogramParameters(ModelKind.EXPONENTIAL, 0.0, 1.0, 0.5))
        result = ordinary_kriging(samples, model, CartesianGrid((4, 3), (0.0, 0.0), (0.3, 0.4)))
        ax = plot_estimates(result, samples, title="Estimates")
        assert ax.get_title() == "Estimates"
        assert len(ax.images) == 1

    def test_estimates_points(self, samples):
        model = build_model(VariogramParameters(ModelKind.EXPONENTIAL, 0.0, 1.0, 0.5))
        result = ordinary_kriging(samples, model, [[0.1, 0.1], [0.5, 0.5]])
        ax = plot_estimates(result)
        assert len(ax.images) == 0
        assert len(ax.collections) == 1
