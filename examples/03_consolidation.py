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
# # 03 — Consolidation of a Clay Layer
#
# A 10 m clay layer drained top and bottom (H = 5 m) is loaded by
# Δσ = 80 kPa.  Computes the final settlement, the settlement–time curve
# and the excess pore pressure isochrones.

# %%
import logging

import numpy as np
import matplotlib.pyplot as plt

from pygeocalc import settlement
from pygeocalc.logging_config import setup_logging

setup_logging(logging.INFO)

cv = 1.0e-8       # m²/s
H = 5.0           # drainage path (m)
mv = 0.25         # MPa⁻¹
delta_sigma = 80.0

# %% [markdown]
# ## 1. Final settlement and time to 90 %

# %%
s_final = settlement.consolidation_settlement_final(mv, delta_sigma, 2 * H)
t90 = settlement.consolidation_time(settlement.time_factor_for_degree(0.9), cv, H)
print(f"s_final = {s_final * 1000:.0f} mm, t90 = {t90 / 3.15e7:.1f} years")

# %% [markdown]
# ## 2. Settlement–time curve

# %%
years = np.linspace(0, 60, 241)
s = [
    settlement.settlement_at_time(
        s_final, settlement.consolidation_degree(settlement.time_factor(cv, y * 3.15e7, H))
    )
    for y in years
]
fig, ax = plt.subplots()
ax.plot(years, np.array(s) * 1000)
ax.invert_yaxis()
ax.set_xlabel("Time (years)")
ax.set_ylabel("Settlement (mm)")
plt.show()

# %% [markdown]
# ## 3. Isochrones

# %%
z = np.linspace(0, 2 * H, 101)
fig, ax = plt.subplots(figsize=(5, 6))
for Tv in [0.05, 0.1, 0.2, 0.5, 1.0]:
    ax.plot(settlement.excess_pore_pressure(z, Tv, H, delta_sigma), z, label=f"Tv = {Tv}")
ax.invert_yaxis()
ax.set_xlabel("Excess pore pressure (kPa)")
ax.set_ylabel("Depth (m)")
ax.legend()
plt.show()
