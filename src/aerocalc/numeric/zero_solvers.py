# zero_solvers.py
"""
Solve nonlinear functions of a single variable.

Contents:
   * secant: secant method with optional limits on the iterates
   * bisection: bracket halving for monotone problems
   * newton_iterate: bounded Newton-Raphson iteration that reports
     its outcome as a NewtonResult rather than raising
   * newton: the same iteration, raising ConvergenceError on failure

Intermediate states are written to the module logger at DEBUG level.
"""

import logging
from collections import namedtuple
from math import isfinite, copysign

from aerocalc.errors import ConvergenceError

logger = logging.getLogger(__name__)

# Outcome of a Newton iteration.
#   x          : last iterate
#   converged  : True if the stopping criterion was met
#   iterations : number of Newton steps taken
#   residual   : last evaluated value of f
NewtonResult = namedtuple("NewtonResult", ["x", "converged", "iterations", "residual"])

RESIDUAL = 'residual'
STEP = 'step'


def secant(f, x0, x1, tol=1.0e-11, limits=None, max_iterations=1000):
    """
    The iterative secant method for zero-finding in one-dimension.

    f: user-defined function f(x)
    x0: first guess
    x1: second guess, presumably close to x0
    tol: stopping tolerance for f(x)=0
    limits: optional (lower, upper) bounds applied to each new iterate
    max_iterations: to stop the iterations running forever, just in case...

    Returns: x such that f(x)=0
    """
    # x0 is kept as the oldest (furthest) point and x1 as the
    # closer-to-the-solution point; x2 is the newest sample.
    f0 = f(x0); f1 = f(x1)
    if abs(f0) < abs(f1):
        x0, f0, x1, f1 = x1, f1, x0, f0
    for i in range(max_iterations):
        try:
            x2 = x1 - f1 * (x0 - x1) / (f0 - f1)
        except ZeroDivisionError:
            raise ConvergenceError('Cannot proceed with zero slope.', x=x1, iterations=i)
        if limits:
            x2 = max(limits[0], x2)
            x2 = min(limits[1], x2)
        f2 = f(x2)
        logger.debug('secant %d: x0=%g x1=%g x2=%g f(x2)=%e', i+1, x0, x1, x2, f2)
        x0, f0, x1, f1 = x1, f1, x2, f2
        if abs(f2) < tol: return x2
    raise ConvergenceError('Did not converge after %d iterations' % max_iterations,
                           x=x1, iterations=max_iterations)
    # end secant()

def bisection(f, bx, ux, tol=1.0e-6):
    """
    The iterative bisection method for zero-finding in one-dimension.

    f: user-defined function f(x)
    bx: bottom-limit of bracket
    ux: upper-limit of bracket
    tol: stopping tolerance on bracket size

    Returns: x such that f(x)=0
    """
    while abs(ux-bx) > tol:
        midpoint = 0.5*(bx+ux)
        if f(bx) * f(midpoint) > 0:
            bx = midpoint
        else:
            ux = midpoint
    return 0.5*(bx+ux)
    # end bisection()

def newton_iterate(fun, fun_dash, x0, tol=1.0e-11, max_iterations=100,
                   criterion=RESIDUAL, max_step=None, damping=1.0, clamp=None,
                   flat_slope=None, flat_tol=None):
    """
    Bounded Newton-Raphson iteration for zero-finding in one-dimension.

    fun: user-defined function f(x)
    fun_dash: derivative d/dx(f(x))
    x0: first guess
    tol: stopping tolerance, applied to |f(x)| for criterion RESIDUAL
         or to the size of the Newton step for criterion STEP
    max_iterations: bound on the number of Newton steps
    max_step: if given, the magnitude of each raw step is limited to this
    damping: factor applied to each (limited) step
    clamp: optional function mapping a new iterate back into the feasible set
    flat_slope: if given, stop once |f'(x)| falls below this value,
         reporting convergence only if |f(x)| < flat_tol

    Returns: NewtonResult(x, converged, iterations, residual)

    Non-finite values of f or f', a zero slope, or an overflow end
    the iteration unconverged; the caller decides what that means.
    """
    x = x0
    fx = None
    for i in range(max_iterations):
        try:
            fx = fun(x)
            if not isfinite(fx):
                return NewtonResult(x, False, i, fx)
            if criterion == RESIDUAL and abs(fx) < tol:
                return NewtonResult(x, True, i, fx)
            slope = fun_dash(x)
            if not isfinite(slope):
                return NewtonResult(x, False, i, fx)
            if flat_slope is not None and abs(slope) < flat_slope:
                converged = flat_tol is not None and abs(fx) < flat_tol
                return NewtonResult(x, converged, i, fx)
            dx = fx / slope
        except (ZeroDivisionError, OverflowError):
            logger.debug('newton %d: x=%g, cannot proceed with zero slope or overflow', i+1, x)
            return NewtonResult(x, False, i, fx)
        if max_step is not None and abs(dx) > max_step:
            dx = copysign(max_step, dx)
        dx *= damping
        x = x - dx
        logger.debug('newton %d: x=%g f=%e dx=%e', i+1, x, fx, dx)
        if criterion == STEP and abs(dx) < tol:
            return NewtonResult(x, True, i+1, fx)
        if clamp is not None:
            x = clamp(x)
    if criterion == RESIDUAL:
        fx = fun(x)
        if isfinite(fx) and abs(fx) < tol:
            return NewtonResult(x, True, max_iterations, fx)
    return NewtonResult(x, False, max_iterations, fx)
    # end newton_iterate()

def newton(fun, fun_dash, x0, tol=1.0e-11, max_iterations=100, **kwargs):
    """
    The iterative Newton method for zero-finding in one-dimension.

    Accepts the same arguments as newton_iterate().

    Returns: x such that f(x)=0
    Raises: ConvergenceError if the iteration fails to meet the tolerance.
    """
    result = newton_iterate(fun, fun_dash, x0, tol=tol,
                            max_iterations=max_iterations, **kwargs)
    if not result.converged:
        raise ConvergenceError('Newton iteration did not converge after %d iterations'
                               ' (x=%g, residual=%s)' % (result.iterations, result.x, result.residual),
                               x=result.x, iterations=result.iterations)
    return result.x
    # end newton()
