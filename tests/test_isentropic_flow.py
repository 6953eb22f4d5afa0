# test_isentropic_flow.py
#
# $ pytest tests/test_isentropic_flow.py
#
# Reference values from the isentropic flow tables of NACA 1135.

import math
import numpy
import pytest

import aerocalc.isentropic_flow as isf
from aerocalc.errors import DomainError, ConvergenceError


def test_0_isentropic_flow():
    print("Begin test of isentropic flow ratios...")
    flow = isf.calculate_isentropic_flow(2.0)
    print("Computed: M=2: %s" % (flow,))
    print("Expected: M=2, p/p0=0.1278, T/T0=0.5556, r/r0=0.2300, A/Astar=1.6875")
    assert math.isclose(flow.pressure_ratio, 0.12780, rel_tol=1.0e-3), "pressure ratio"
    assert math.isclose(flow.temperature_ratio, 0.55556, rel_tol=1.0e-4), "temperature ratio"
    assert math.isclose(flow.density_ratio, 0.23005, rel_tol=1.0e-3), "density ratio"
    assert math.isclose(flow.area_ratio, 1.6875, rel_tol=1.0e-4), "area ratio"
    assert math.isclose(flow.mach_angle, 30.0, rel_tol=1.0e-9), "Mach angle"
    assert math.isclose(flow.prandtl_meyer_angle, 26.3798, rel_tol=1.0e-4), "Prandtl-Meyer angle"
    assert math.isclose(flow.pitot_pressure_ratio, 5.6404, rel_tol=1.0e-4), "Rayleigh pitot ratio"
    assert flow.gamma == 1.4

def test_1_subsonic_flow():
    flow = isf.calculate_isentropic_flow(0.5)
    assert math.isclose(flow.pressure_ratio, 0.84302, rel_tol=1.0e-4)
    assert math.isclose(flow.area_ratio, 1.33984, rel_tol=1.0e-4)
    assert math.isnan(flow.mach_angle)
    assert math.isnan(flow.prandtl_meyer_angle)
    assert math.isclose(flow.pitot_pressure_ratio, 1.0 / flow.pressure_ratio)

def test_2_limits():
    rest = isf.calculate_isentropic_flow(0.0)
    assert rest.pressure_ratio == 1.0
    assert rest.temperature_ratio == 1.0
    assert math.isinf(rest.area_ratio)
    sonic = isf.calculate_isentropic_flow(1.0)
    assert sonic.area_ratio == pytest.approx(1.0)
    assert sonic.mach_angle == pytest.approx(90.0)
    assert sonic.prandtl_meyer_angle == pytest.approx(0.0)
    # The pitot ratio is continuous through M=1.
    assert isf.pitot_p(1.0 + 1.0e-9) == pytest.approx(isf.pitot_p(1.0), rel=1.0e-6)

def test_3_area_ratio_minimum_at_sonic():
    machs = numpy.linspace(0.05, 5.0, 200)
    areas = [isf.A_Astar(m) for m in machs]
    assert min(areas) >= 1.0
    assert machs[int(numpy.argmin(areas))] == pytest.approx(1.0, abs=0.03)

def test_4_derivatives():
    h = 1.0e-6
    for m in (0.3, 0.8, 1.5, 3.0):
        fd = (isf.p_p0(m + h) - isf.p_p0(m - h)) / (2*h)
        assert isf.dp_p0_dM(m) == pytest.approx(fd, rel=1.0e-5)
        fd = (isf.A_Astar(m + h) - isf.A_Astar(m - h)) / (2*h)
        assert isf.dA_Astar_dM(m) == pytest.approx(fd, rel=1.0e-5)

@pytest.mark.parametrize("mach", [0.2, 0.9, 1.0, 2.5, 6.0])
def test_5_mach_from_pressure_ratio(mach):
    p = isf.calculate_isentropic_flow(mach).pressure_ratio
    assert isf.find_mach_from_pressure_ratio(p) == pytest.approx(mach, abs=1.0e-3)

@pytest.mark.parametrize("mach", [0.1, 0.5, 1.7, 3.0])
def test_6_mach_from_temperature_ratio(mach):
    t = isf.calculate_isentropic_flow(mach, 1.3).temperature_ratio
    assert isf.find_mach_from_temperature_ratio(t, 1.3) == pytest.approx(mach, abs=1.0e-3)

@pytest.mark.parametrize("mach", [0.2, 0.5, 0.95, 1.1, 2.0, 4.0])
def test_7_mach_from_area_ratio(mach):
    a = isf.A_Astar(mach)
    found = isf.find_mach_from_area_ratio(a, supersonic=(mach > 1.0))
    assert found == pytest.approx(mach, abs=1.0e-3)

def test_8_area_ratio_branches():
    print("Both roots of A/Astar=1.6875 for g=1.4")
    sub = isf.find_mach_from_area_ratio(1.6875)
    sup = isf.find_mach_from_area_ratio(1.6875, supersonic=True)
    print("subsonic M=%g, supersonic M=%g" % (sub, sup))
    assert sub == pytest.approx(0.3722, abs=1.0e-3)
    assert sup == pytest.approx(2.0, abs=1.0e-6)
    assert isf.find_mach_from_area_ratio(1.0) == 1.0
    assert isf.find_mach_from_pressure_ratio(1.0) == 0.0

def test_9_prandtl_meyer_inverse():
    print("Expected: M=2 --> nu=26.38 degrees; Inverse: M=4 <-- nu=65.78 degrees")
    assert isf.find_mach_from_prandtl_meyer_angle(26.3798) == pytest.approx(2.0, abs=1.0e-4)
    assert isf.find_mach_from_prandtl_meyer_angle(math.degrees(1.1481)) == pytest.approx(4.0, rel=1.0e-3)
    assert isf.find_mach_from_prandtl_meyer_angle(0.0) == 1.0
    with pytest.raises(DomainError):
        isf.find_mach_from_prandtl_meyer_angle(131.0)

def test_10_domain_errors():
    with pytest.raises(DomainError):
        isf.calculate_isentropic_flow(-0.1)
    with pytest.raises(DomainError):
        isf.calculate_isentropic_flow(2.0, 1.0)
    with pytest.raises(ValueError):
        isf.find_mach_from_pressure_ratio(0.0)
    with pytest.raises(DomainError):
        isf.find_mach_from_pressure_ratio(1.2)
    with pytest.raises(DomainError):
        isf.find_mach_from_area_ratio(0.9)
    with pytest.raises(DomainError):
        isf.find_mach_from_temperature_ratio(1.5)
    with pytest.raises(DomainError):
        isf.find_mach_from_temperature_ratio(0.5, 0.9)

def test_11_non_convergence_is_reported(monkeypatch):
    # A derivative with the wrong sign drives the iteration away from the root.
    monkeypatch.setattr(isf, "dA_Astar_dM", lambda m, g: -1.0)
    with pytest.raises(ConvergenceError):
        isf.find_mach_from_area_ratio(3.0, supersonic=True)

def test_12_table():
    rows = isf.isentropic_table(-1.0, 3.0, 7)
    assert len(rows) == 7
    assert rows[0].mach == 0.0
    assert rows[-1].mach == pytest.approx(3.0)
    ratios = [r.pressure_ratio for r in rows]
    assert ratios == sorted(ratios, reverse=True)

def test_13_large_subsonic_area_ratios():
    print("Round trip of the subsonic area ratio at low Mach numbers")
    for m in (0.002, 0.01, 0.05):
        ratio = isf.A_Astar(m)
        found = isf.find_mach_from_area_ratio(ratio)
        print("M=%g A/Astar=%g --> M=%g" % (m, ratio, found))
        assert found == pytest.approx(m, rel=1.0e-6)
    assert isf.A_Astar(0.002) == pytest.approx(289.4, rel=1.0e-3)
    for ratio in (200.0, 500.0, 5000.0):
        m = isf.find_mach_from_area_ratio(ratio)
        assert 0.0 < m < 0.01
        assert isf.A_Astar(m) == pytest.approx(ratio, rel=1.0e-6)
    m = isf.find_mach_from_area_ratio(500.0, 5.0/3.0)
    assert isf.A_Astar(m, 5.0/3.0) == pytest.approx(500.0, rel=1.0e-6)


if __name__ == '__main__':
    test_0_isentropic_flow()
    test_8_area_ratio_branches()
    test_9_prandtl_meyer_inverse()
