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
# # 04 — Full Variography
#
# Variography is the search for the directions of greatest and least
# continuity and the fit of one model to both:
#
# 1. compute directional variograms every 45°;
# 2. pick the primary direction (longest range) and the secondary one,
#    perpendicular to it;
# 3. fit a model to each, with a shared nugget and the sample variance
#    as sill.

# %%
import matplotlib.pyplot as plt

from variography import empirical, visualization
from variography.lessons import LessonContext, interactive

ctx = LessonContext.load()
print(f"variance = {ctx.deposit.variance:.2f}")

# %% [markdown]
# ## 1. Directional Variograms

# %%
fig, ax = plt.subplots(figsize=(6, 4))
for azimuth, color in ((0, "red"), (45, "orange"), (90, "blue"), (135, "green")):
    query = empirical.DirectionalQuery(azimuth=azimuth, max_lag=200.0, lag_count=5)
    vario = empirical.directional_variogram(ctx.deposit, query)
    visualization.plot_empirical(
        vario, ax=ax, color=color, label=f"{azimuth:03d}°",
        join_points=True, show_counts=False,
    )
ax.axhline(ctx.deposit.variance, color="gray", linestyle="--")
ax.legend()
plt.show()

# %% [markdown]
# ## 2. Primary and Secondary Models

# %%
interactive("variography", ctx)
