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
# # 05 — From Variogram Model to Estimates
#
# The variogram model drives ordinary kriging. Its ranges also size the
# search ellipse: only the 8 to 16 nearest samples inside it enter each
# kriging system. A model that ignores the anisotropy of the deposit
# smears high grades across the wrong direction.
#
# **Kriging**: `variography.kriging.ordinary_kriging` (wraps
# `gstools.krige.Ordinary`)

# %%
import matplotlib.pyplot as plt

from variography import kriging, models, visualization
from variography.lessons import LessonContext, interactive

ctx = LessonContext.load()

# %% [markdown]
# ## 1. High Grades
#
# Samples above the 90th percentile trace the main direction of
# continuity.

# %%
high = ctx.deposit.above_quantile(0.9)
visualization.plot_samples(high, clims=(0.0, ctx.deposit.values.max()))
plt.show()

# %% [markdown]
# ## 2. Kriging with the Anisotropic Model

# %%
params = models.VariogramParameters(
    models.ModelKind.SPHERICAL, nugget=3.0, sill=ctx.deposit.variance, range=101.0,
)
model = models.build_model(params, ranges=(101.0, 32.0), azimuth=0.0)
grid = kriging.CartesianGrid((243, 283), origin=(8.0, 8.0), spacing=(1.0, 1.0))
result = kriging.ordinary_kriging(
    ctx.deposit, model, grid,
    neighborhood=kriging.Ellipsoid((101.0, 32.0), azimuth=0.0),
    min_neighbors=8, max_neighbors=16,
)
print(f"{result.n_missing} of {grid.n_points} nodes left unestimated")

visualization.plot_estimates(result, ctx.deposit, title="PB estimates")
plt.show()

# %% [markdown]
# ## 3. Explore
#
# Rotate the model or change its ranges and compare the estimates with
# the high grades.

# %%
interactive("estimates", ctx)
