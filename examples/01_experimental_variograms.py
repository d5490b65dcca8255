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
# # 01 — Experimental Variograms
#
# The variogram measures how dissimilar two samples are as a function
# of the vector $\mathbf{h}$ separating them:
#
# $$\gamma(\mathbf{h}) = \frac{1}{2N(\mathbf{h})} \sum_{i=1}^{N(\mathbf{h})}
#   \left[Z(\mathbf{x}_i) - Z(\mathbf{x}_i + \mathbf{h})\right]^2$$
#
# where $N(\mathbf{h})$ is the number of sample pairs separated by
# $\mathbf{h}$. Each point of an experimental variogram is the mean
# semivariance of one lag bin.
#
# **Estimation**: `variography.empirical` (wraps `gstools.vario_estimate`)
# **Plotting**: `variography.visualization.plot_empirical`

# %%
import matplotlib.pyplot as plt

from variography import empirical, samples, visualization
from variography.lessons import LessonContext, cells, interactive

ctx = LessonContext.load()  # pass "walker_lake_proj.csv" to use real data
print(ctx.deposit)

# %% [markdown]
# ## 1. Omnidirectional Variogram of a Training Image
#
# A realisation of a Gaussian random field sampled on every pixel of a
# 100 × 100 image. Six lags up to 60 px.

# %%
vario = empirical.empirical_variogram(ctx.image, max_lag=60.0, lag_count=6)
for h, g, n in zip(vario.bin_centers, vario.gamma, vario.counts):
    print(f"h = {h:5.1f}  γ = {g:.3f}  pairs = {n}")

cells.experimental_variogram(ctx, join_points=True)
plt.show()

# %% [markdown]
# ## 2. Directional Variograms
#
# The variogram depends on the direction of $\mathbf{h}$ but not its
# sense: the 000° and 180° variograms are identical.

# %%
for azimuth in (0, 45, 90, 135):
    query = empirical.DirectionalQuery(azimuth=azimuth, max_lag=200.0, lag_count=7)
    vario = empirical.directional_variogram(ctx.deposit, query)
    print(f"{azimuth:3d}°  pairs per lag: {vario.counts}")

interactive("directional", ctx)

# %% [markdown]
# ## 3. Number of Lags
#
# Too few lags hide the structure; too many leave each bin with few
# pairs and a noisy estimate.

# %%
interactive("lag_count", ctx)

# %% [markdown]
# ## 4. Lag Vectors on Regular and Irregular Samples
#
# On a regular grid a lag of one unit finds every neighbouring pair.

# %%
interactive("regular_lag", ctx)

# %% [markdown]
# On irregularly scattered samples it rarely hits a sample exactly.

# %%
interactive("irregular_lag", ctx)

# %% [markdown]
# ## 5. Lag Tolerance
#
# Along the irregular profile, a lag of 1 m finds almost no pair. With a
# half-lag tolerance every pair in $[h - h/2, h + h/2)$ is accepted and
# consecutive bins neither overlap nor leave gaps.

# %%
print(empirical.lag_bins(1.0, 3))
grid = samples.regular_grid()
vario = empirical.empirical_variogram(grid, bin_edges=empirical.lag_bins(1.0, 3))
print(f"pairs in the first lag of the 5 × 5 grid: {vario.counts[0]}")

interactive("lag_tolerance", ctx)

# %% [markdown]
# ## 6. Angular Tolerance
#
# For directions computed every 45°, the angular tolerance is half the
# increment, 22.5°.

# %%
visualization.plot_tolerance(azimuth=45.0, dip=30.0, tolerance=22.5)
plt.show()
