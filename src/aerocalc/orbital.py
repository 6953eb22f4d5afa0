# orbital.py
"""
Hohmann transfer between two circular, coplanar orbits about the Earth.

The burns are taken as impulsive.
"""

import logging
from collections import namedtuple
from math import sqrt, pi

from aerocalc.errors import DomainError

logger = logging.getLogger(__name__)

G = 6.6743e-11        # gravitational constant, m^3/(kg.s^2)
M_EARTH = 5.972e24    # kg
R_EARTH_KM = 6371.0   # mean radius, km
MU_EARTH = G * M_EARTH

HohmannTransfer = namedtuple("HohmannTransfer", [
    "initial_altitude_km", "final_altitude_km", "initial_radius_m", "final_radius_m",
    "transfer_semi_major_axis_m", "delta_v1_ms", "delta_v2_ms", "total_delta_v_ms",
    "transfer_time_s"])


def circular_speed(r, mu=MU_EARTH):
    """Speed (m/s) on a circular orbit of radius r (m)."""
    return sqrt(mu / r)

def vis_viva(r, a, mu=MU_EARTH):
    """Orbital speed (m/s) at radius r on an orbit of semi-major axis a."""
    return sqrt(mu * (2.0 / r - 1.0 / a))

def hohmann_transfer(initial_altitude_km, final_altitude_km):
    """
    Delta-v and transfer time for a Hohmann transfer.

    initial_altitude_km: altitude of the initial circular orbit (km)
    final_altitude_km: altitude of the final circular orbit (km)
    Returns: HohmannTransfer, speeds in m/s and time in seconds

    Slightly negative altitudes are treated as the surface.
    """
    if initial_altitude_km < -R_EARTH_KM or final_altitude_km < -R_EARTH_KM:
        raise DomainError("Altitude cannot be below the centre of the Earth")
    if initial_altitude_km < -1.0e-6:
        logger.warning("Initial altitude %g km is negative, using surface level", initial_altitude_km)
        initial_altitude_km = 0.0
    if final_altitude_km < -1.0e-6:
        logger.warning("Final altitude %g km is negative, using surface level", final_altitude_km)
        final_altitude_km = 0.0
    r1 = (R_EARTH_KM + initial_altitude_km) * 1000.0
    r2 = (R_EARTH_KM + final_altitude_km) * 1000.0
    if abs(r1 - r2) < 1.0e-6:
        raise DomainError("Initial and final altitudes cannot be the same for a Hohmann transfer")
    a = 0.5 * (r1 + r2)
    dv1 = abs(vis_viva(r1, a) - circular_speed(r1))
    dv2 = abs(circular_speed(r2) - vis_viva(r2, a))
    return HohmannTransfer(initial_altitude_km=initial_altitude_km,
                           final_altitude_km=final_altitude_km,
                           initial_radius_m=r1, final_radius_m=r2,
                           transfer_semi_major_axis_m=a,
                           delta_v1_ms=dv1, delta_v2_ms=dv2,
                           total_delta_v_ms=dv1 + dv2,
                           transfer_time_s=pi * sqrt(a**3 / MU_EARTH))
