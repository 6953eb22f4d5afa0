# oblique_shock.py
"""
Oblique shock relations for a calorically perfect gas.

beta is the shock angle with respect to the on-coming stream direction.
theta is the flow deflection with respect to the on-coming stream.
The low-level functions work in radians; the calculator functions
take and return degrees.

For a deflection below the maximum there are two attached solutions:
the weak shock (smaller beta, usually supersonic downstream) and the
strong shock (larger beta, subsonic downstream). They merge at the
maximum deflection and beyond it the shock detaches.
"""

import logging
from collections import namedtuple
from math import sin, cos, tan, asin, pi, degrees, radians, isfinite, inf, nan

import numpy
from scipy.optimize import minimize_scalar

from aerocalc.errors import DomainError, ShockSolverError, check_gamma
from aerocalc.normal_shock import m2_shock, p2_p1, rho2_rho1, T2_T1, p02_p01
from aerocalc.numeric.zero_solvers import newton_iterate

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 100
TOLERANCE = 1.0e-8
SCAN_STEPS = 1000
MAX_DERIVATIVE = 1.0e6
MAX_STEP = radians(15.0)
DAMPING = 0.85
# Slack when deciding on which side of beta_max a root lies.
BRANCH_TOLERANCE = radians(0.1)

MaxDeflection = namedtuple("MaxDeflection", ["max_theta", "beta_at_max_theta"])

ObliqueShock = namedtuple("ObliqueShock", [
    "upstream_mach", "downstream_mach", "wave_angle", "deflection_angle",
    "pressure_ratio", "temperature_ratio", "density_ratio",
    "stagnation_pressure_ratio", "mach_angle", "max_deflection_angle", "gamma"])


def theta_beta_mach(M1, beta, g=1.4):
    """
    Deflection angle from the theta-beta-M relation.

    M1: upstream Mach number
    beta: shock angle (radians), a float or a numpy array
    g: ratio of specific heats
    Returns: theta, flow deflection angle (radians)
    """
    m1sb2 = (M1 * numpy.sin(beta))**2
    t1 = 2.0 / numpy.tan(beta) * (m1sb2 - 1.0)
    t2 = M1**2 * (g + numpy.cos(2.0 * beta)) + 2.0
    return numpy.arctan(t1 / t2)

def dtheta_dbeta(M1, beta, g=1.4):
    """
    Derivative of the theta-beta-M relation with respect to beta.

    Returns NaN where the relation is singular; large values are
    limited to +/-MAX_DERIVATIVE.
    """
    sb = sin(beta)
    if sb == 0.0:
        return nan
    numer = 2.0 / tan(beta) * ((M1 * sb)**2 - 1.0)
    denom = M1**2 * (g + cos(2.0 * beta)) + 2.0
    dnumer = 2.0 * (M1**2 * cos(2.0 * beta) + 1.0 / sb**2)
    ddenom = -2.0 * M1**2 * sin(2.0 * beta)
    bottom = denom**2 + numer**2
    if bottom == 0.0:
        return nan
    derivative = (dnumer * denom - numer * ddenom) / bottom
    return max(-MAX_DERIVATIVE, min(MAX_DERIVATIVE, derivative))

def calculate_max_deflection_angle(M1, gamma=1.4):
    """
    Maximum deflection angle for an attached oblique shock.

    M1: upstream Mach number
    gamma: ratio of specific heats
    Returns: MaxDeflection(max_theta, beta_at_max_theta) in degrees

    The derivative of theta is badly conditioned near the maximum, so
    the maximum is located by scanning beta between the Mach angle and
    90 degrees and then refined within the neighbouring grid cells.
    """
    if not isfinite(M1):
        raise DomainError("Upstream Mach number must be finite, got %g" % M1)
    check_gamma(gamma)
    if M1 <= 1.000001:
        return MaxDeflection(0.0, degrees(asin(1.0 / max(1.000001, M1))))
    mu = asin(1.0 / M1)
    start, end = mu + TOLERANCE, pi / 2.0 - TOLERANCE
    if start >= end:
        return MaxDeflection(0.0, degrees(mu))
    betas = numpy.linspace(start, end, SCAN_STEPS + 1)
    thetas = theta_beta_mach(M1, betas, gamma)
    i = int(numpy.nanargmax(thetas))
    theta_max, beta_max = float(thetas[i]), float(betas[i])
    lo, hi = betas[max(i - 1, 0)], betas[min(i + 1, SCAN_STEPS)]
    res = minimize_scalar(lambda b: -theta_beta_mach(M1, b, gamma),
                          bounds=(lo, hi), method='bounded',
                          options={'xatol': 1.0e-10})
    if res.success and -res.fun > theta_max:
        theta_max, beta_max = float(-res.fun), float(res.x)
    if theta_max < TOLERANCE * 10:
        return MaxDeflection(0.0, degrees(mu))
    return MaxDeflection(degrees(theta_max), degrees(beta_max))

def _start_points(mu, beta_max, weak):
    """Ordered starting guesses for beta on the requested branch."""
    if weak:
        return [max(mu + TOLERANCE * 100, (mu + beta_max) / 2.1),
                0.5 * (mu + beta_max),
                beta_max - 0.1 * (beta_max - mu)]
    return [min(pi / 2.0 - TOLERANCE * 100, (beta_max + pi / 2.0) / 1.9),
            0.5 * (beta_max + pi / 2.0),
            beta_max + 0.1 * (pi / 2.0 - beta_max)]

def solve_beta(M1, theta, g, beta_max, weak=True):
    """
    Shock angle for a given deflection by damped Newton iteration.

    M1: upstream Mach number
    theta: flow deflection angle (radians)
    g: ratio of specific heats
    beta_max: shock angle at maximum deflection (radians)
    weak: select the weak (True) or strong (False) root
    Returns: beta (radians), or None if no starting point converges
      to a root on the requested branch.
    """
    mu = asin(1.0 / M1)
    lower, upper = mu + TOLERANCE * 10, pi / 2.0 - TOLERANCE * 10
    def f_to_solve(beta): return float(theta_beta_mach(M1, beta, g)) - theta
    def f_dash(beta): return dtheta_dbeta(M1, beta, g)
    def keep_attached(beta): return min(max(beta, lower), upper)
    for guess in _start_points(mu, beta_max, weak):
        result = newton_iterate(f_to_solve, f_dash, keep_attached(guess),
                                tol=TOLERANCE, max_iterations=MAX_ITERATIONS,
                                max_step=MAX_STEP, damping=DAMPING, clamp=keep_attached,
                                flat_slope=TOLERANCE / 100, flat_tol=TOLERANCE * 100)
        beta = result.x
        logger.debug("solve_beta: guess=%g beta=%g converged=%s iterations=%d",
                     degrees(guess), degrees(beta), result.converged, result.iterations)
        if not result.converged:
            continue
        if not (mu - TOLERANCE < beta < pi / 2.0 + TOLERANCE):
            continue
        if weak and beta > beta_max + BRANCH_TOLERANCE:
            continue
        if not weak and beta < beta_max - BRANCH_TOLERANCE:
            continue
        return beta
    return None

def calculate_oblique_shock(M1, theta_degrees, gamma=1.4, weak_solution=True):
    """
    Properties across an attached oblique shock.

    M1: upstream Mach number, must be supersonic
    theta_degrees: flow deflection angle (degrees)
    gamma: ratio of specific heats
    weak_solution: True for the weak shock, False for the strong shock
    Returns: ObliqueShock, with angles in degrees

    Raises DomainError for invalid inputs or a detached shock and
    ShockSolverError when no valid shock angle can be found.
    """
    if not M1 > 1.0:
        raise DomainError("Upstream Mach number must be supersonic (M1 > 1), got %g" % M1)
    if theta_degrees < -TOLERANCE:
        raise DomainError("Deflection angle cannot be negative, got %g degrees" % theta_degrees)
    if theta_degrees < 0.0:
        theta_degrees = 0.0
    check_gamma(gamma)
    branch = "weak" if weak_solution else "strong"
    theta = radians(theta_degrees)
    mu = asin(1.0 / M1)
    max_theta, beta_at_max_theta = calculate_max_deflection_angle(M1, gamma)
    if theta_degrees > max_theta + TOLERANCE * 10:
        raise DomainError("Deflection angle %.2f degrees exceeds the maximum %.2f degrees"
                              " for M1=%g; the shock is detached" % (theta_degrees, max_theta, M1))
    if abs(theta) < TOLERANCE:
        # Zero deflection is a Mach wave, no change in the flow.
        return ObliqueShock(upstream_mach=M1, downstream_mach=M1,
                            wave_angle=degrees(mu), deflection_angle=0.0,
                            pressure_ratio=1.0, temperature_ratio=1.0, density_ratio=1.0,
                            stagnation_pressure_ratio=1.0, mach_angle=degrees(mu),
                            max_deflection_angle=max_theta, gamma=gamma)
    beta = solve_beta(M1, theta, gamma, radians(beta_at_max_theta), weak=weak_solution)
    if beta is None:
        if abs(theta_degrees - max_theta) < 0.01:
            raise ShockSolverError("Solver failed for %s solution at theta ~ theta_max"
                                   " (%.2f ~ %.2f degrees); adjust theta slightly or check M1"
                                   % (branch, theta_degrees, max_theta),
                                   iterations=MAX_ITERATIONS, near_max_deflection=True)
        raise ShockSolverError("Could not find a %s shock solution for M1=%.2f, theta=%.2f degrees"
                               " (max theta ~ %.2f degrees)" % (branch, M1, theta_degrees, max_theta),
                               iterations=MAX_ITERATIONS)
    #
    m1n = M1 * sin(beta)
    if m1n < 1.0:
        if 1.0 - m1n**2 < TOLERANCE * 100:
            # Essentially a Mach wave.
            m1n = 1.0
        else:
            raise ShockSolverError("Normal Mach number M1n=%.3f is subsonic; cannot form a shock"
                                   " (beta=%.2f, theta=%.2f degrees)"
                                   % (m1n, degrees(beta), theta_degrees), x=beta)
    m2n = m2_shock(m1n, gamma)
    sin_bt = sin(beta - theta)
    if abs(sin_bt) < TOLERANCE and abs(m2n) < TOLERANCE:
        M2 = M1
    else:
        M2 = m2n / sin_bt if sin_bt != 0.0 else inf
    if not isfinite(M2) or M2 < 0.0 or M2 > 50.0 * M1:
        raise ShockSolverError("Invalid downstream Mach number M2=%g (M1=%.2f, theta=%.2f,"
                               " beta=%.2f degrees)" % (M2, M1, theta_degrees, degrees(beta)), x=beta)
    return ObliqueShock(upstream_mach=M1, downstream_mach=M2,
                        wave_angle=degrees(beta), deflection_angle=theta_degrees,
                        pressure_ratio=p2_p1(m1n, gamma),
                        temperature_ratio=T2_T1(m1n, gamma),
                        density_ratio=rho2_rho1(m1n, gamma),
                        stagnation_pressure_ratio=p02_p01(m1n, gamma),
                        mach_angle=degrees(mu),
                        max_deflection_angle=max_theta, gamma=gamma)
