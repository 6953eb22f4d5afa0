# errors.py
"""
Exceptions raised by the aerocalc calculators.

Domain errors derive from ValueError and convergence failures from
RuntimeError so that callers catching the built-in types keep working.
"""


class AerocalcError(Exception):
    """Base class for all aerocalc errors."""
    pass


class DomainError(AerocalcError, ValueError):
    """An input lies outside the domain of the physical relation."""
    pass


class ConvergenceError(AerocalcError, RuntimeError):
    """
    A bounded iteration stopped before meeting its tolerance.

    x: last iterate reached
    iterations: number of iterations performed
    """
    def __init__(self, message, x=None, iterations=0):
        super().__init__(message)
        self.x = x
        self.iterations = iterations


class ShockSolverError(ConvergenceError):
    """
    No attached oblique-shock solution could be found.

    near_max_deflection is set when the requested deflection sits
    at the maximum deflection angle, where the two roots merge.
    """
    def __init__(self, message, x=None, iterations=0, near_max_deflection=False):
        super().__init__(message, x=x, iterations=iterations)
        self.near_max_deflection = near_max_deflection


class ConfigError(AerocalcError):
    """Bad configuration or case file."""
    pass


def check_gamma(g):
    """Reject a ratio of specific heats that would break the ideal-gas exponents."""
    if not g > 1.0:
        raise DomainError("Specific heat ratio must be greater than 1, got %g" % g)
