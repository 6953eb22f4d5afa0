# test_zero_solvers.py
#
# $ pytest tests/test_zero_solvers.py
#
# Examples from Gerald and Wheatley, p. 45.

import math
import pytest

from aerocalc.errors import ConvergenceError
from aerocalc.numeric.zero_solvers import (
    secant, bisection, newton, newton_iterate, STEP,
)


def fun_1(x):
    return x**3 + x**2 - 3*x - 3

def fun_1_dash(x):
    return 3*x**2 + 2*x - 3

def fun_2(x):
    return 3*x + math.sin(x) - math.exp(x)


def test_0_secant():
    assert math.isclose(secant(fun_1, 1, 2), 1.732051, rel_tol=1.0e-6)
    assert math.isclose(secant(fun_2, 0, 1), 0.3604217, rel_tol=1.0e-6)

def test_1_secant_zero_slope():
    with pytest.raises(ConvergenceError):
        secant(lambda x: 1.0, 0, 1)

def test_2_secant_limits():
    x = secant(lambda x: x**2 - 4.0, 3.0, 2.9, limits=(0.0, 10.0))
    assert x == pytest.approx(2.0)

def test_3_bisection():
    x = bisection(fun_1, 1.0, 2.0, tol=1.0e-11)
    assert x == pytest.approx(math.sqrt(3.0), abs=1.0e-10)

def test_4_newton():
    x = newton(fun_1, fun_1_dash, 2.0)
    assert x == pytest.approx(math.sqrt(3.0), rel=1.0e-10)

def test_5_newton_reports_failure():
    # x^2 + 1 has no real root.
    result = newton_iterate(lambda x: x**2 + 1.0, lambda x: 2.0*x, 0.5, max_iterations=20)
    assert not result.converged
    assert result.iterations <= 20
    with pytest.raises(ConvergenceError) as excinfo:
        newton(lambda x: x**2 + 1.0, lambda x: 2.0*x, 0.5, max_iterations=20)
    assert excinfo.value.iterations <= 20
    assert isinstance(excinfo.value, RuntimeError)

def test_6_newton_step_limit_and_damping():
    result = newton_iterate(lambda x: x - 10.0, lambda x: 1.0, 0.0, max_step=1.0)
    assert result.converged
    assert result.iterations == 10
    assert result.x == pytest.approx(10.0)
    damped = newton_iterate(lambda x: x - 10.0, lambda x: 1.0, 0.0, damping=0.5, tol=1.0e-6)
    assert damped.converged
    assert damped.iterations > 1

def test_7_newton_step_criterion_and_clamp():
    result = newton_iterate(lambda x: x**2 - 4.0, lambda x: 2.0*x, -3.0,
                            tol=1.0e-10, criterion=STEP,
                            clamp=lambda x: x if x > 0.0 else 0.5)
    assert result.converged
    assert result.x == pytest.approx(2.0)

def test_8_newton_flat_slope():
    result = newton_iterate(lambda x: x**3, lambda x: 3.0*x**2, 1.0e-6, tol=1.0e-30,
                            flat_slope=1.0e-10, flat_tol=1.0e-6)
    assert result.converged
    assert result.iterations == 0
    result = newton_iterate(lambda x: x**3 + 1.0, lambda x: 3.0*x**2, 1.0e-6,
                            flat_slope=1.0e-10, flat_tol=1.0e-6)
    assert not result.converged

def test_9_newton_non_finite():
    result = newton_iterate(lambda x: float('nan'), lambda x: 1.0, 1.0)
    assert not result.converged
    assert result.iterations == 0
