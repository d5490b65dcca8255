"""Tests for the models subpackage.

Covers model kinds, parameter validation, construction of every model
family, evaluation at and around the origin, plateaus, nested models
and geometric anisotropy.
"""

from __future__ import annotations

import gstools as gs
import numpy as np
import pytest

from variography.models import (
    ModelKind,
    NestedModel,
    Pentaspherical,
    Structure,
    VariogramParameters,
    build_model,
    build_nested,
    evaluate,
    parameters_of,
)

ALL_KINDS = list(ModelKind)


# ======================================================================
# ModelKind
# ======================================================================

class TestModelKind:
    def test_english_labels(self):
        assert ModelKind.from_label("Gaussian") is ModelKind.GAUSSIAN
        assert ModelKind.from_label("SPHERICAL") is ModelKind.SPHERICAL
        assert ModelKind.from_label(" exponential ") is ModelKind.EXPONENTIAL
        assert ModelKind.from_label("Pentaspherical") is ModelKind.PENTASPHERICAL

    def test_portuguese_labels(self):
        assert ModelKind.from_label("Gaussiano") is ModelKind.GAUSSIAN
        assert ModelKind.from_label("Esférico") is ModelKind.SPHERICAL
        assert ModelKind.from_label("Exponencial") is ModelKind.EXPONENTIAL
        assert ModelKind.from_label("Pentaesférico") is ModelKind.PENTASPHERICAL

    def test_kind_passthrough(self):
        assert ModelKind.from_label(ModelKind.GAUSSIAN) is ModelKind.GAUSSIAN

    def test_unknown_label(self):
        with pytest.raises(ValueError, match="Unknown variogram model"):
            ModelKind.from_label("Matern")

    def test_label(self):
        assert ModelKind.SPHERICAL.label == "Spherical"


# ======================================================================
# Parameters
# ======================================================================

class TestVariogramParameters:
    def test_contribution(self):
        params = VariogramParameters(ModelKind.SPHERICAL, nugget=0.2, sill=1.0, range=5.0)
        assert params.contribution == pytest.approx(0.8)

    def test_kind_from_string(self):
        params = VariogramParameters("Esférico", 0.0, 1.0, 5.0)
        assert params.kind is ModelKind.SPHERICAL

    def test_sill_below_nugget(self):
        with pytest.raises(ValueError, match="sill"):
            VariogramParameters(ModelKind.SPHERICAL, nugget=0.5, sill=0.4, range=5.0)

    def test_negative_nugget(self):
        with pytest.raises(ValueError, match="nugget"):
            VariogramParameters(ModelKind.SPHERICAL, nugget=-0.1, sill=1.0, range=5.0)

    def test_non_positive_range(self):
        with pytest.raises(ValueError, match="range"):
            VariogramParameters(ModelKind.SPHERICAL, nugget=0.0, sill=1.0, range=0.0)

    def test_pure_nugget_allowed(self):
        params = VariogramParameters(ModelKind.SPHERICAL, nugget=1.0, sill=1.0, range=5.0)
        assert params.contribution == pytest.approx(0.0)


class TestNestedModel:
    def test_sill_and_range(self):
        model = NestedModel(
            nugget=3.0,
            structures=(
                Structure(ModelKind.SPHERICAL, 2.6, 83.0),
                Structure(ModelKind.SPHERICAL, 2.7, 101.0),
            ),
        )
        assert model.sill == pytest.approx(8.3)
        assert model.range == pytest.approx(101.0)

    def test_structures_as_tuple(self):
        model = NestedModel(0.0, [Structure(ModelKind.GAUSSIAN, 1.0, 10.0)])
        assert isinstance(model.structures, tuple)

    def test_invalid_structure(self):
        with pytest.raises(ValueError):
            Structure(ModelKind.SPHERICAL, -1.0, 10.0)
        with pytest.raises(ValueError):
            Structure(ModelKind.SPHERICAL, 1.0, 0.0)


# ======================================================================
# Construction
# ======================================================================

class TestBuildModel:
    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_every_kind_builds(self, kind):
        params = VariogramParameters(kind, nugget=0.1, sill=1.0, range=25.0)
        model = build_model(params)
        assert isinstance(model, gs.CovModel)
        assert model.nugget == pytest.approx(0.1)
        assert model.var == pytest.approx(0.9)
        assert model.len_scale == pytest.approx(25.0)

    def test_model_types(self):
        expected = {
            ModelKind.GAUSSIAN: gs.Gaussian,
            ModelKind.SPHERICAL: gs.Spherical,
            ModelKind.EXPONENTIAL: gs.Exponential,
            ModelKind.PENTASPHERICAL: Pentaspherical,
        }
        for kind, cls in expected.items():
            model = build_model(VariogramParameters(kind, 0.0, 1.0, 10.0))
            assert type(model) is cls

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_parameters_round_trip(self, kind):
        params = VariogramParameters(kind, nugget=0.3, sill=2.0, range=40.0)
        recovered = parameters_of(build_model(params))
        assert recovered.kind is kind
        assert recovered.nugget == pytest.approx(0.3)
        assert recovered.sill == pytest.approx(2.0)
        assert recovered.range == pytest.approx(40.0)

    def test_parameters_of_unsupported(self):
        with pytest.raises(ValueError, match="Unsupported"):
            parameters_of(gs.Matern(dim=2))

    def test_three_dimensional(self):
        params = VariogramParameters(ModelKind.SPHERICAL, 0.0, 1.0, 10.0)
        assert build_model(params, dim=3).dim == 3


# ======================================================================
# Evaluation
# ======================================================================

class TestEvaluate:
    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_zero_at_origin(self, kind):
        """γ(0) = 0 even with a nugget."""
        params = VariogramParameters(kind, nugget=0.3, sill=1.0, range=10.0)
        gamma = evaluate(build_model(params), [0.0])
        assert gamma[0] == 0.0

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_nugget_near_origin(self, kind):
        params = VariogramParameters(kind, nugget=0.3, sill=1.0, range=10.0)
        gamma = evaluate(build_model(params), [1e-9])
        assert gamma[0] == pytest.approx(0.3, abs=1e-6)

    @pytest.mark.parametrize("kind", [ModelKind.SPHERICAL, ModelKind.PENTASPHERICAL])
    def test_plateau(self, kind):
        """Bounded models equal the sill at and beyond the range."""
        params = VariogramParameters(kind, nugget=0.1, sill=1.0, range=10.0)
        gamma = evaluate(build_model(params), [10.0, 15.0, 20.0, 1000.0])
        np.testing.assert_allclose(gamma, 0.1 + 0.9, rtol=1e-12)

    def test_spherical_formula(self):
        params = VariogramParameters(ModelKind.SPHERICAL, nugget=0.0, sill=1.0, range=10.0)
        gamma = evaluate(build_model(params), [5.0])
        assert gamma[0] == pytest.approx(1.5 * 0.5 - 0.5 * 0.5 ** 3)

    def test_pentaspherical_formula(self):
        params = VariogramParameters(ModelKind.PENTASPHERICAL, 0.0, 1.0, 10.0)
        gamma = evaluate(build_model(params), [5.0])
        assert gamma[0] == pytest.approx(15 / 16 - 5 / 32 + 3 / 256)

    @pytest.mark.parametrize("kind", [ModelKind.EXPONENTIAL, ModelKind.GAUSSIAN])
    def test_practical_range(self, kind):
        """Asymptotic models reach 95 % of the contribution at the range."""
        params = VariogramParameters(kind, nugget=0.0, sill=2.0, range=30.0)
        gamma = evaluate(build_model(params), [30.0])
        assert gamma[0] == pytest.approx(2.0 * (1.0 - np.exp(-3.0)))

    def test_monotonic(self):
        params = VariogramParameters(ModelKind.GAUSSIAN, 0.2, 1.0, 10.0)
        gamma = evaluate(build_model(params), np.linspace(0.0, 30.0, 100))
        assert np.all(np.diff(gamma) >= -1e-12)

    def test_accepts_parameters(self):
        params = VariogramParameters(ModelKind.SPHERICAL, 0.1, 1.0, 10.0)
        np.testing.assert_allclose(
            evaluate(params, [0.0, 5.0, 20.0]),
            evaluate(build_model(params), [0.0, 5.0, 20.0]),
        )

    def test_negative_lags_are_symmetric(self):
        params = VariogramParameters(ModelKind.EXPONENTIAL, 0.0, 1.0, 10.0)
        model = build_model(params)
        np.testing.assert_allclose(evaluate(model, [-4.0]), evaluate(model, [4.0]))


class TestNestedEvaluation:
    def _nested(self):
        return NestedModel(
            nugget=0.5,
            structures=(
                Structure(ModelKind.SPHERICAL, 1.0, 20.0),
                Structure(ModelKind.EXPONENTIAL, 2.0, 60.0),
            ),
        )

    @pytest.mark.parametrize("h", [0.0, 30.0, 60.0, 120.0])
    def test_sum_of_components(self, h):
        nested = self._nested()
        expected = (0.5 if h > 0 else 0.0) + sum(
            evaluate(build_model(s.as_parameters()), [h])[0]
            for s in nested.structures
        )
        assert evaluate(nested, [h])[0] == pytest.approx(expected, abs=1e-9)

    def test_built_as_single_model(self):
        model = build_nested(self._nested())
        assert isinstance(model, gs.SumModel)
        assert isinstance(model, gs.CovModel)
        assert model.nugget == pytest.approx(0.5)

    def test_direction_along_isotropic_nested(self):
        nested = self._nested()
        h = np.array([0.0, 10.0, 40.0, 90.0])
        np.testing.assert_allclose(
            evaluate(build_nested(nested), h, azimuth=45.0),
            evaluate(nested, h),
            atol=1e-9,
        )

    def test_zero_at_origin(self):
        assert evaluate(self._nested(), [0.0])[0] == 0.0

    def test_pure_nugget(self):
        nested = NestedModel(nugget=2.0)
        np.testing.assert_allclose(evaluate(nested, [0.0, 1.0, 100.0]), [0.0, 2.0, 2.0])

    def test_spherical_structures_reach_sill(self):
        nested = NestedModel(
            nugget=3.0,
            structures=(
                Structure(ModelKind.SPHERICAL, 2.6, 83.0),
                Structure(ModelKind.SPHERICAL, 2.7, 101.0),
            ),
        )
        assert evaluate(nested, [101.0])[0] == pytest.approx(nested.sill)


# ======================================================================
# Geometric anisotropy
# ======================================================================

class TestAnisotropy:
    def _model(self, azimuth):
        params = VariogramParameters(ModelKind.SPHERICAL, 0.0, 1.0, 100.0)
        return build_model(params, ranges=(100.0, 30.0), azimuth=azimuth)

    def test_major_axis_north(self):
        model = self._model(0.0)
        assert evaluate(model, [100.0], azimuth=0.0)[0] == pytest.approx(1.0)
        assert evaluate(model, [50.0], azimuth=0.0)[0] < 0.9

    def test_minor_axis_east(self):
        model = self._model(0.0)
        assert evaluate(model, [30.0], azimuth=90.0)[0] == pytest.approx(1.0)
        assert evaluate(model, [15.0], azimuth=90.0)[0] < 0.9

    def test_rotated_major_axis(self):
        model = self._model(90.0)
        assert evaluate(model, [30.0], azimuth=0.0)[0] == pytest.approx(1.0)
        assert evaluate(model, [50.0], azimuth=90.0)[0] < 0.9

    def test_direction_sense_irrelevant(self):
        model = self._model(30.0)
        h = np.linspace(0.0, 120.0, 13)
        np.testing.assert_allclose(
            evaluate(model, h, azimuth=45.0),
            evaluate(model, h, azimuth=225.0),
            atol=1e-12,
        )
