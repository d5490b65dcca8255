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
# # 03 — Anisotropy and Nested Structures
#
# When the variogram changes with direction the phenomenon is
# anisotropic:
#
# - **zonal**: same range, different sills;
# - **geometric**: same sill, different ranges;
# - **mixed**: both differ.
#
# A single model rarely captures every scale of variability; nested
# models add several structures on top of a nugget:
#
# $$\gamma(h) = C_0 + \sum_k C_k\,\gamma_k(h / a_k)$$

# %%
import matplotlib.pyplot as plt
import numpy as np

from variography import models, visualization
from variography.lessons import LessonContext, cells, interactive

ctx = LessonContext.load()

# %% [markdown]
# ## 1. Anisotropy Types

# %%
for kind in ("Zonal", "Geometric", "Mixed"):
    cells.anisotropy(ctx, kind=kind)
plt.show()

# %% [markdown]
# ## 2. Geometric Anisotropy in One Model
#
# A single spherical model with a 100 m range N-S and a 30 m range E-W,
# evaluated along both axes.

# %%
params = models.VariogramParameters(models.ModelKind.SPHERICAL, 0.0, 1.0, 100.0)
model = models.build_model(params, ranges=(100.0, 30.0), azimuth=0.0)
h = np.array([15.0, 30.0, 50.0, 100.0])
print("N-S", models.evaluate(model, h, azimuth=0.0))
print("E-W", models.evaluate(model, h, azimuth=90.0))

ax = visualization.plot_model(model, 120.0, azimuth=0.0, color="red", label="000°")
visualization.plot_model(model, 120.0, ax=ax, azimuth=90.0, color="blue", label="090°")
plt.show()

# %% [markdown]
# ## 3. Nested Structures
#
# Nugget of 3 plus two spherical structures, fitted by eye to the N-S
# variogram of the deposit.

# %%
nested = models.NestedModel(
    nugget=3.0,
    structures=(
        models.Structure(models.ModelKind.SPHERICAL, 2.6, 83.0),
        models.Structure(models.ModelKind.SPHERICAL, 2.7, 101.0),
    ),
)
print(f"sill = {nested.sill}, range = {nested.range}")

interactive("nested", ctx)

# %% [markdown]
# ## 4. Three Principal Ranges
#
# In 3-D, an anisotropic variogram is described by its primary,
# secondary and tertiary ranges.

# %%
interactive("anisotropic_ranges", ctx)
