"""Models: theoretical variogram models, nesting and fitting.

Workflow::

    params = VariogramParameters(ModelKind.SPHERICAL,
                                 nugget=0.1, sill=1.0, range=25.0)
    model = build_model(params)
    gamma = evaluate(model, h)

    fitted = fit_model("gaussian", experimental_variogram)
"""

from variography.models.parameters import (
    ModelKind,
    NestedModel,
    Structure,
    VariogramParameters,
)
from variography.models.theoretical import (
    Pentaspherical,
    build_model,
    build_nested,
    evaluate,
    parameters_of,
)
from variography.models.fitting import fit_model

__all__ = [
    "ModelKind",
    "VariogramParameters",
    "Structure",
    "NestedModel",
    "Pentaspherical",
    "build_model",
    "build_nested",
    "evaluate",
    "parameters_of",
    "fit_model",
]
