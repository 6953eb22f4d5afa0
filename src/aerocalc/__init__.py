"""
aerocalc: aerospace engineering calculators.

Compressible flow of a calorically perfect gas (isentropic flow,
normal and oblique shocks) together with a few closed-form models
for orbits, propulsion and radar.
"""

__version__ = "0.1.0"
