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
# # 01 — Lateral Thrust on a Retaining Wall
#
# Compares the active thrust on a 5 m cantilever wall for Rankine,
# Coulomb (rough wall, sloping backfill) and at-rest conditions.
#
# | Property           | Value     |
# |--------------------|-----------|
# | Friction angle φ   | 32°       |
# | Unit weight γ      | 18 kN/m³  |
# | Wall friction δ    | 2φ/3      |
# | Backfill slope β   | 10°       |

# %%
import numpy as np
import matplotlib.pyplot as plt

from pygeocalc import earth_pressure as ep

phi, gamma, H = 32.0, 18.0, 5.0

# %% [markdown]
# ## 1. Coefficients

# %%
Ka = ep.rankine_active_coefficient(phi)
Kp = ep.rankine_passive_coefficient(phi)
Ka_c = ep.coulomb_active_coefficient(phi, delta=2 * phi / 3, beta=10.0)
K0 = ep.at_rest_coefficient(phi)
print(f"Rankine Ka = {Ka:.3f}, Kp = {Kp:.3f}")
print(f"Coulomb Ka = {Ka_c:.3f}")
print(f"At rest K0 = {K0:.3f}")

# %% [markdown]
# ## 2. Resultant thrusts

# %%
for label, K in [("Rankine", Ka), ("Coulomb", Ka_c), ("At rest", K0)]:
    print(f"{label:8s}: P = {ep.lateral_force(K, gamma, H):6.1f} kN/m")

# %% [markdown]
# ## 3. Pressure diagrams

# %%
z = np.linspace(0, H, 51)
fig, ax = plt.subplots(figsize=(5, 6))
for label, K in [("Rankine active", Ka), ("Coulomb active", Ka_c), ("At rest", K0)]:
    ax.plot([ep.lateral_pressure(K, gamma, zi) for zi in z], z, label=label)
ax.invert_yaxis()
ax.set_xlabel("Lateral pressure (kPa)")
ax.set_ylabel("Depth (m)")
ax.legend()
plt.tight_layout()
plt.show()
