# normal_shock.py
"""
Normal shock relations for a calorically perfect gas.

State 1 is before the shock and state 2 after the shock.
Velocities are in a shock-stationary frame.

Contents:
   * closed-form jump relations as functions of the upstream Mach number
   * Rayleigh-Pitot formula and its inversion by Newton's method
   * search for the Mach number at which most of the stagnation
     pressure is lost across the shock
"""

import logging
from collections import namedtuple
from math import sqrt, log

import numpy

from aerocalc.errors import DomainError, check_gamma
from aerocalc.numeric.zero_solvers import newton, bisection, STEP

logger = logging.getLogger(__name__)

PITOT_TOLERANCE = 1.0e-5
MAX_ITERATIONS = 100
CRITICAL_MACH_TOLERANCE = 1.0e-4
CRITICAL_MACH_LIMIT = 100.0

# entropy_change is the nondimensional entropy rise ds/R = -ln(p02/p01).
NormalShock = namedtuple("NormalShock", [
    "mach1", "mach2", "pressure_ratio", "temperature_ratio", "density_ratio",
    "total_pressure_ratio", "pitot_pressure_ratio", "entropy_change", "gamma"])


def m2_shock(M1, g=1.4):
    """
    Mach number M2 after a normal shock.

    M1: Mach number of incoming flow
    g: ratio of specific heats
    Returns: M2
    """
    numer = 1.0 + (g - 1.0) * 0.5 * M1**2
    denom = g * M1**2 - (g - 1.0) * 0.5
    return sqrt(numer / denom)

def rho2_rho1(M1, g=1.4):
    """
    Density ratio rho2/rho1 across a normal shock.

    M1: Mach number of incoming flow
    g: ratio of specific heats
    Returns: rho2/rho1
    """
    numer = (g + 1.0) * M1**2
    denom = 2.0 + (g - 1.0) * M1**2
    return numer / denom

def p2_p1(M1, g=1.4):
    """
    Static pressure ratio p2/p1 across a normal shock.

    M1: Mach number of incoming flow
    g: ratio of specific heats
    Returns: p2/p1
    """
    return 1.0 + 2.0 * g / (g + 1.0) * (M1**2 - 1.0)

def T2_T1(M1, g=1.4):
    """Static temperature ratio T2/T1 across a normal shock."""
    return p2_p1(M1, g) / rho2_rho1(M1, g)

def p02_p01(M1, g=1.4):
    """
    Stagnation pressure ratio p02/p01 across a normal shock.

    M1: Mach number of incoming flow
    g: ratio of specific heats
    Returns: p02/p01
    """
    t1 = (g + 1.0) / (2.0 * g * M1**2 - (g - 1.0))
    t2 = (g + 1.0) * M1**2 / (2.0 + (g - 1.0) * M1**2)
    return t1**(1.0/(g-1.0)) * t2**(g/(g-1.0))

def entropy_change(M1, g=1.4):
    """
    Entropy rise ds/R across a normal shock; positive for M1 > 1.
    """
    return -log(p02_p01(M1, g))

def rayleigh_pitot(M1, g=1.4):
    """
    Rayleigh-Pitot formula: pitot pressure over free-stream static pressure.

    M1: supersonic free-stream Mach number
    g: ratio of specific heats
    Returns: p02/p1
    """
    t1 = ((g + 1.0) * 0.5 * M1**2)**(g / (g - 1.0))
    t2 = ((g + 1.0) / (2.0 * g * M1**2 - (g - 1.0)))**(1.0 / (g - 1.0))
    return t1 * t2

def drayleigh_pitot_dM(M1, g=1.4):
    """Derivative of the Rayleigh-Pitot ratio with respect to M1."""
    dlog = 2.0 * g / ((g - 1.0) * M1) \
        - 4.0 * g * M1 / ((g - 1.0) * (2.0 * g * M1**2 - (g - 1.0)))
    return rayleigh_pitot(M1, g) * dlog

# -----------------------------------------------------------------

def calculate_normal_shock(mach1, gamma=1.4):
    """
    Properties across a normal shock.

    mach1: upstream Mach number, must be supersonic
    gamma: ratio of specific heats
    Returns: NormalShock
    """
    if not mach1 > 1.0:
        raise DomainError("Upstream Mach number must be greater than 1 (supersonic), got %g" % mach1)
    check_gamma(gamma)
    p02p01 = p02_p01(mach1, gamma)
    return NormalShock(mach1=mach1,
                       mach2=m2_shock(mach1, gamma),
                       pressure_ratio=p2_p1(mach1, gamma),
                       temperature_ratio=T2_T1(mach1, gamma),
                       density_ratio=rho2_rho1(mach1, gamma),
                       total_pressure_ratio=p02p01,
                       pitot_pressure_ratio=rayleigh_pitot(mach1, gamma),
                       entropy_change=-log(p02p01),
                       gamma=gamma)

def calculate_from_pitot_ratio(pitot_ratio, gamma=1.4):
    """
    Normal shock properties from a pitot measurement in supersonic flow.

    pitot_ratio: pitot pressure over free-stream static pressure, p02/p1
    gamma: ratio of specific heats
    Returns: NormalShock for the free-stream Mach number that
      reproduces the measured ratio.

    Newton's method on the Rayleigh-Pitot formula, starting from M1=2.
    """
    if not pitot_ratio > 1.0:
        raise DomainError("Pitot pressure ratio must be greater than 1, got %g" % pitot_ratio)
    check_gamma(gamma)
    sonic_ratio = ((gamma + 1.0) * 0.5)**(gamma / (gamma - 1.0))
    if pitot_ratio <= sonic_ratio:
        raise DomainError("Pitot pressure ratio %g does not exceed the sonic value %g;"
                              " the free stream is not supersonic" % (pitot_ratio, sonic_ratio))
    def f_to_solve(m): return rayleigh_pitot(m, gamma) - pitot_ratio
    def f_dash(m): return drayleigh_pitot_dM(m, gamma)
    def keep_supersonic(m): return m if m > 1.0 else 1.01
    mach1 = newton(f_to_solve, f_dash, 2.0, tol=PITOT_TOLERANCE,
                   max_iterations=MAX_ITERATIONS, criterion=STEP,
                   clamp=keep_supersonic)
    logger.debug("pitot ratio %g --> M1=%g", pitot_ratio, mach1)
    return calculate_normal_shock(mach1, gamma)

def find_critical_mach(gamma=1.4, target=0.01):
    """
    Upstream Mach number at which p02/p01 falls to the target value.

    The default target of 0.01 corresponds to a 99% loss of
    stagnation pressure. The stagnation pressure ratio decreases
    monotonically with M1, so a bisection over [1, 100] suffices;
    a target not reached by M1=100 is rejected.
    """
    check_gamma(gamma)
    if not 0.0 < target < 1.0:
        raise DomainError("Target stagnation pressure ratio must lie in (0, 1), got %g" % target)
    if p02_p01(CRITICAL_MACH_LIMIT, gamma) > target:
        raise DomainError("Stagnation pressure ratio stays above %g up to M1=%g for gamma=%g"
                          % (target, CRITICAL_MACH_LIMIT, gamma))
    def f_to_solve(m): return p02_p01(m, gamma) - target
    return bisection(f_to_solve, 1.0, CRITICAL_MACH_LIMIT, tol=CRITICAL_MACH_TOLERANCE)

def normal_shock_table(min_mach=1.05, max_mach=10.0, steps=20, gamma=1.4):
    """
    Normal shock properties over an evenly spaced range of Mach numbers.

    A min_mach that is not supersonic is raised to 1.05.
    Returns: list of NormalShock
    """
    if min_mach <= 1.0:
        min_mach = 1.05
    return [calculate_normal_shock(float(m), gamma)
            for m in numpy.linspace(min_mach, max_mach, steps)]
