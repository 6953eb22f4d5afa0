# isentropic_flow.py
"""
Isentropic flow of a calorically perfect gas.

State zero (0) refers to the stagnation condition.
State star is the sonic (throat) condition.

Contents:
   * forward relations: static-to-stagnation ratios, area ratio,
     Mach angle, Prandtl-Meyer function and pitot pressure
   * derivatives of the pressure and area relations
   * inverse relations: Mach number from a pressure, area, temperature
     ratio or from a Prandtl-Meyer angle

The low-level relations work in radians; calculate_isentropic_flow()
and find_mach_from_prandtl_meyer_angle() speak degrees.
"""

from collections import namedtuple
from math import sqrt, asin, atan, degrees, radians, pi, inf, nan

import numpy

from aerocalc.errors import DomainError, check_gamma
from aerocalc.normal_shock import m2_shock, p2_p1
from aerocalc.numeric.zero_solvers import newton, secant

TOLERANCE = 1.0e-8
MAX_ITERATIONS = 100

IsentropicFlow = namedtuple("IsentropicFlow", [
    "mach", "pressure_ratio", "temperature_ratio", "density_ratio", "area_ratio",
    "mach_angle", "prandtl_meyer_angle", "pitot_pressure_ratio", "gamma"])

# ---------------------------------------------------------------
# Forward relations

def T_T0(M, g=1.4):
    """
    Static to total temperature ratio for an adiabatic flow.

    M: Mach number
    g: ratio of specific heats
    Returns: T/T0
    """
    return 1.0 / (1.0 + (g - 1.0) * 0.5 * M**2)

def p_p0(M, g=1.4):
    """
    Static to total pressure ratio for an isentropic flow.

    M: Mach number
    g: ratio of specific heats
    Returns: p/p0
    """
    return T_T0(M, g)**(g / (g - 1.0))

def rho_rho0(M, g=1.4):
    """
    Static to stagnation density ratio for an isentropic flow.

    M: Mach number
    g: ratio of specific heats
    Returns: rho/rho0
    """
    return T_T0(M, g)**(1.0 / (g - 1.0))

def A_Astar(M, g=1.4):
    """
    Area ratio A/Astar for an isentropic, quasi-one-dimensional flow.

    M: Mach number at area A
    g: ratio of specific heats
    Returns: A/Astar, infinite for a fluid at rest
    """
    if M == 0.0:
        return inf
    t1 = 2.0 / (g + 1.0) * (1.0 + (g - 1.0) * 0.5 * M**2)
    return t1**((g + 1.0) / (2.0 * (g - 1.0))) / M

def mach_angle(M):
    """
    Mach angle (radians); NaN for subsonic flow.
    """
    return asin(1.0 / M) if M >= 1.0 else nan

def prandtl_meyer(M, g=1.4):
    """
    Prandtl-Meyer function.

    M: Mach number
    g: ratio of specific heats
    Returns: Prandtl-Meyer function value (in radians), NaN for subsonic flow
    """
    if M < 1.0:
        return nan
    t1 = M**2 - 1.0
    t2 = sqrt((g - 1.0) / (g + 1.0) * t1)
    t3 = sqrt(t1)
    t4 = sqrt((g + 1.0) / (g - 1.0))
    return t4 * atan(t2) - atan(t3)

def pitot_p(M, g=1.4):
    """
    Pitot to free-stream static pressure ratio.

    Will shock the gas if required.

    M: Mach number of the free stream
    g: ratio of specific heats
    Returns: p_pitot/p
    """
    if M > 1.0:
        return p2_p1(M, g) / p_p0(m2_shock(M, g), g)
    return 1.0 / p_p0(M, g)

def dp_p0_dM(M, g=1.4):
    """Derivative of p/p0 with respect to Mach number."""
    return -g * M * T_T0(M, g)**(g / (g - 1.0) + 1.0)

def dA_Astar_dM(M, g=1.4):
    """Derivative of A/Astar with respect to Mach number."""
    return A_Astar(M, g) * (M**2 - 1.0) / (M * (1.0 + (g - 1.0) * 0.5 * M**2))

# ---------------------------------------------------------------

def calculate_isentropic_flow(mach, gamma=1.4):
    """
    Isentropic flow properties for a given Mach number.

    mach: Mach number, non-negative
    gamma: ratio of specific heats
    Returns: IsentropicFlow, with angles in degrees
    """
    if mach < 0.0:
        raise DomainError("Mach number must be non-negative, got %g" % mach)
    check_gamma(gamma)
    return IsentropicFlow(mach=mach,
                          pressure_ratio=p_p0(mach, gamma),
                          temperature_ratio=T_T0(mach, gamma),
                          density_ratio=rho_rho0(mach, gamma),
                          area_ratio=A_Astar(mach, gamma),
                          mach_angle=degrees(mach_angle(mach)),
                          prandtl_meyer_angle=degrees(prandtl_meyer(mach, gamma)),
                          pitot_pressure_ratio=pitot_p(mach, gamma),
                          gamma=gamma)

def find_mach_from_pressure_ratio(pressure_ratio, gamma=1.4):
    """
    Mach number for a given static to total pressure ratio.

    pressure_ratio: p/p0, in (0, 1]
    gamma: ratio of specific heats
    Returns: Mach number

    The closed-form estimate is polished with Newton's method.
    """
    if not 0.0 < pressure_ratio <= 1.0:
        raise DomainError("Pressure ratio must be in (0, 1], got %g" % pressure_ratio)
    check_gamma(gamma)
    if pressure_ratio == 1.0:
        return 0.0
    e = (gamma - 1.0) / gamma
    m0 = sqrt(2.0 * (pressure_ratio**(-e) - 1.0) / (gamma - 1.0))
    def f_to_solve(m): return p_p0(m, gamma) - pressure_ratio
    def f_dash(m): return dp_p0_dM(m, gamma)
    def keep_positive(m): return m if m > 0.0 else 0.01
    return newton(f_to_solve, f_dash, m0, tol=TOLERANCE,
                  max_iterations=MAX_ITERATIONS, clamp=keep_positive)

def find_mach_from_area_ratio(area_ratio, gamma=1.4, supersonic=False):
    """
    Mach number for a given area ratio.

    area_ratio: A/Astar, at least 1
    gamma: ratio of specific heats
    supersonic: select the supersonic (True) or subsonic (False) root
    Returns: Mach number

    The area relation has a minimum at M=1, so each ratio above 1
    has one subsonic and one supersonic solution. The subsonic search
    starts from the low-Mach asymptote A/Astar ~ (2/(g+1))^((g+1)/(2(g-1))) / M,
    which lies on the near side of the root for every ratio.
    """
    if not area_ratio >= 1.0:
        raise DomainError("Area ratio must be at least 1, got %g" % area_ratio)
    check_gamma(gamma)
    if area_ratio == 1.0:
        return 1.0
    def f_to_solve(m): return A_Astar(m, gamma) - area_ratio
    def f_dash(m): return dA_Astar_dM(m, gamma)
    def keep_regime(m):
        if supersonic and m <= 1.0: return 1.01
        if not supersonic and m >= 1.0: return 0.99
        if m <= 0.0: return 0.01
        return m
    if supersonic:
        m0 = 2.0
    else:
        m0 = min(0.5, (2.0 / (gamma + 1.0))**((gamma + 1.0) / (2.0 * (gamma - 1.0))) / area_ratio)
    return newton(f_to_solve, f_dash, m0, tol=TOLERANCE,
                  max_iterations=MAX_ITERATIONS, clamp=keep_regime)

def find_mach_from_temperature_ratio(temperature_ratio, gamma=1.4):
    """
    Mach number for a given static to total temperature ratio, in (0, 1].
    """
    if not 0.0 < temperature_ratio <= 1.0:
        raise DomainError("Temperature ratio must be in (0, 1], got %g" % temperature_ratio)
    check_gamma(gamma)
    return sqrt(2.0 * (1.0 - temperature_ratio) / ((gamma - 1.0) * temperature_ratio))

def find_mach_from_prandtl_meyer_angle(nu, gamma=1.4):
    """
    Inverse Prandtl-Meyer function.

    nu: Prandtl-Meyer function value (in degrees)
    gamma: ratio of specific heats
    Returns: Mach number

    Solves prandtl_meyer(m, g) - nu = 0, assuming supersonic flow.
    """
    check_gamma(gamma)
    nu_max = 0.5 * pi * (sqrt((gamma + 1.0) / (gamma - 1.0)) - 1.0)
    nu_rad = radians(nu)
    if not 0.0 <= nu_rad < nu_max:
        raise DomainError("Prandtl-Meyer angle must lie in [0, %g) degrees, got %g"
                              % (degrees(nu_max), nu))
    if nu_rad == 0.0:
        return 1.0
    def f_to_solve(m): return prandtl_meyer(max(m, 1.0), gamma) - nu_rad
    return secant(f_to_solve, 2.0, 2.1, limits=(1.0, 1.0e6))

def isentropic_table(min_mach=0.1, max_mach=5.0, steps=20, gamma=1.4):
    """
    Isentropic flow properties over an evenly spaced range of Mach numbers.

    A negative min_mach is raised to zero.
    Returns: list of IsentropicFlow
    """
    if min_mach < 0.0:
        min_mach = 0.0
    return [calculate_isentropic_flow(float(m), gamma)
            for m in numpy.linspace(min_mach, max_mach, steps)]
