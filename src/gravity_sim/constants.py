# MIT License (see LICENSE)
"""
Default parameters of the gravity simulation.

The units are stylized screen units, not SI: G = 1 makes orbits of a few
hundred mass units visible over a 500x500 region at dt = 0.01.
"""
from __future__ import annotations

# Gravitational constant. The physical value (6.67408e-11 m³/kg/s²) would
# make nothing move at these scales.
G_DEFAULT: float = 1.0

# Density assigned to newly created bodies. Radius follows from
# r = (m / density)^(1/3).
DEFAULT_DENSITY: float = 25.0

# Simulation region (width, height), origin at (0, 0).
DEFAULT_BOUNDS: tuple[float, float] = (500.0, 500.0)

# Step size used by the seed scenario (10 ms ticks).
DEFAULT_DT: float = 0.01
