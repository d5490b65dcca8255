# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#   kernelspec:
#     display_name: Python 3
#     language: python
#     name: python3
# ---

# %% [markdown]
# # 02 — Theoretical Variogram Models
#
# Kriging needs $\gamma(\mathbf{h})$ for every separation, not only at
# the lag centres, so the experimental variogram is summarised by a
# theoretical model described by three parameters:
#
# - **nugget** $C_0$: discontinuity at the origin, $\gamma(0^+)$;
# - **sill** $C_0 + C$: plateau reached by the model;
# - **range** $a$: distance at which the sill is reached (95 % of it
#   for the asymptotic Gaussian and exponential models).
#
# $\gamma(0) = 0$ always holds.
#
# **Models**: `variography.models` (GSTools covariance models)

# %%
import matplotlib.pyplot as plt
import numpy as np

from variography import empirical, models, visualization
from variography.lessons import LessonContext, cells, interactive

ctx = LessonContext.load()

# %% [markdown]
# ## 1. Fitting a Model
#
# A Gaussian model is fitted by least squares to the variogram of the
# training image.

# %%
vario = empirical.empirical_variogram(ctx.image, max_lag=60.0, lag_count=6)
fitted = models.fit_model("Gaussian", vario)
print(models.parameters_of(fitted))

cells.fitted_model(ctx, fit=True)
plt.show()

# %% [markdown]
# ## 2. Model Families
#
# | Model | $\gamma(h)$ for $h < a$ |
# |---|---|
# | Gaussian | $C_0 + C\left[1 - e^{-3(h/a)^2}\right]$ |
# | Spherical | $C_0 + C\left[\frac{3}{2}\frac{h}{a} - \frac{1}{2}\left(\frac{h}{a}\right)^3\right]$ |
# | Pentaspherical | $C_0 + C\left[\frac{15}{8}\frac{h}{a} - \frac{5}{4}\left(\frac{h}{a}\right)^3 + \frac{3}{8}\left(\frac{h}{a}\right)^5\right]$ |
# | Exponential | $C_0 + C\left[1 - e^{-3h/a}\right]$ |

# %%
h = np.linspace(0.0, 60.0, 7)
fig, ax = plt.subplots(figsize=(6, 4))
for kind, color in zip(models.ModelKind, ("red", "green", "blue", "orange")):
    params = models.VariogramParameters(kind, nugget=0.1, sill=1.0, range=25.0)
    print(f"{kind.label:15s}", np.round(models.evaluate(params, h), 3))
    visualization.plot_model(params, 60.0, ax=ax, color=color, label=kind.label)
plt.show()

# %%
interactive("theoretical_model", ctx)
