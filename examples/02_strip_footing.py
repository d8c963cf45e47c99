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
# # 02 — Strip Footing Bearing Capacity
#
# Terzaghi ultimate and allowable capacity of a 2 m strip footing founded
# at 1.5 m in a c-φ soil, and the sensitivity to the Nγ fit.

# %%
import numpy as np
import matplotlib.pyplot as plt

from pygeocalc import bearing

c, phi, gamma, B, Df = 10.0, 30.0, 18.0, 2.0, 1.5

# %% [markdown]
# ## 1. Capacity

# %%
q = bearing.overburden_pressure(gamma, Df)
f = bearing.terzaghi_factors(phi)
qu = bearing.terzaghi_bearing_capacity(c, q, gamma, B, phi)
qa = bearing.bearing_capacity_design(qu, Fs=3.0)
print(f"Nc = {f.Nc:.2f}, Nq = {f.Nq:.2f}, Nγ = {f.Ngamma:.2f}")
print(f"qu = {qu:.0f} kPa, qa = {qa:.0f} kPa")

# %% [markdown]
# ## 2. Nγ fits

# %%
phis = np.linspace(0, 45, 91)
fig, ax = plt.subplots()
for method in sorted(bearing.NGAMMA_METHODS):
    ax.semilogy(phis[1:], [bearing.terzaghi_ngamma(p, method) for p in phis[1:]], label=method)
ax.set_xlabel("φ (°)")
ax.set_ylabel("Nγ")
ax.legend()
plt.show()
