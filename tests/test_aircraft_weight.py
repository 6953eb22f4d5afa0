# test_aircraft_weight.py
#
# $ pytest tests/test_aircraft_weight.py

import logging
import math
import pytest

import aerocalc.aircraft_weight as aw
from aerocalc.errors import DomainError


def test_0_breguet():
    print("Cruise fraction and range are inverse to each other")
    f = aw.breguet_cruise_fraction(3000.0, 250.0, 0.6, 17.0)
    assert f == pytest.approx(math.exp(-0.6 * 3000.0 / (900.0 * 17.0)))
    assert aw.breguet_range(f, 250.0, 0.6, 17.0) == pytest.approx(3000.0)
    assert aw.loiter_fraction(60.0, 0.6, 12.0) == pytest.approx(math.exp(-0.05))
    assert aw.loiter_fraction(-5.0, 0.6, 12.0) == 1.0

def test_1_airliner_breakdown():
    w = aw.calculate_aircraft_weight('commercial-airliner', takeoff_weight=70000.0)
    print("Airliner at 70 t: %s" % (w,))
    assert w.takeoff_weight == pytest.approx(70000.0)
    assert w.empty_weight == pytest.approx(32900.0)
    assert w.fuel_weight == pytest.approx(17500.0)
    assert w.payload_weight == pytest.approx(16100.0)
    assert w.crew_weight == pytest.approx(3500.0)
    assert w.fuel_fraction == pytest.approx(0.25)
    assert math.isclose(w.range_km, 5889.4, rel_tol=1.0e-3), "Breguet range"
    assert w.endurance_hours == pytest.approx(w.range_km / 900.0 + 0.75)
    assert w.fuel_consumption == pytest.approx(17500.0 / w.endurance_hours)
    assert w.warnings == []

def test_2_range_payload():
    w = aw.calculate_aircraft_weight('commercial-airliner', takeoff_weight=70000.0)
    points = w.range_payload
    print("Range-payload: %s" % points)
    assert len(points) == 3
    assert points[0] == aw.RangePayload(0.0, pytest.approx(16100.0))
    assert points[1].range_km == pytest.approx(w.range_km)
    assert points[2].payload_kg == 0.0
    ranges = [p.range_km for p in points]
    payloads = [p.payload_kg for p in points]
    assert ranges == sorted(ranges)
    assert payloads == sorted(payloads, reverse=True)

def test_3_units_and_range_input():
    kg = aw.calculate_aircraft_weight('business-jet', takeoff_weight=20000.0)
    lb = aw.calculate_aircraft_weight('business-jet', takeoff_weight=20000.0 / aw.KG_PER_LB,
                                      weight_unit='lb')
    assert lb.fuel_weight == pytest.approx(kg.fuel_weight)
    w = aw.calculate_aircraft_weight('commercial-airliner', takeoff_weight=70000.0,
                                     range_distance=1000.0, distance_unit='nm')
    assert w.range_km == pytest.approx(1852.0)
    assert 0.0 < w.fuel_weight < 17500.0
    # The fuel sized for a range gives that range back at the same weight.
    f_segments = 0.98 * 0.99 * aw.loiter_fraction(45.0, 0.6, 17.0)
    fraction = (1.0 - w.fuel_weight / 70000.0) / f_segments
    assert aw.breguet_range(fraction, 250.0, 0.6, 17.0) == pytest.approx(1852.0)

def test_4_given_weights():
    # Zero is a given weight, not a missing one.
    w = aw.calculate_aircraft_weight('general-aviation', takeoff_weight=1200.0, payload_weight=0.0)
    assert w.payload_weight == 0.0
    assert w.takeoff_weight == pytest.approx(1200.0 * (0.64 + 0.05 + 0.2))
    # With only the empty weight, the take-off weight is scaled from it.
    w = aw.calculate_aircraft_weight('uav', empty_weight=700.0)
    assert w.fuel_weight == pytest.approx(200.0)
    w = aw.calculate_aircraft_weight('uav')
    assert w.empty_weight == pytest.approx(aw.DEFAULT_TAKEOFF_WEIGHT * 0.7)

def test_5_limits(caplog):
    with caplog.at_level(logging.WARNING, logger="aerocalc.aircraft_weight"):
        w = aw.calculate_aircraft_weight('commercial-airliner', takeoff_weight=70000.0, mtow=65000.0)
    assert w.takeoff_weight == pytest.approx(65000.0)
    assert w.fuel_weight == pytest.approx(12500.0)
    assert w.payload_weight == pytest.approx(16100.0)
    assert "Fuel reduced to meet MTOW" in w.warnings
    assert "Fuel reduced to meet MTOW" in caplog.text
    w = aw.calculate_aircraft_weight('commercial-airliner', takeoff_weight=70000.0, mzfw=45000.0)
    assert w.payload_weight == pytest.approx(12100.0)
    assert w.takeoff_weight == pytest.approx(66000.0)
    assert any("MZFW" in warning for warning in w.warnings)
    w = aw.calculate_aircraft_weight('commercial-airliner', takeoff_weight=70000.0,
                                     max_fuel_capacity=10000.0)
    assert w.fuel_weight == 10000.0
    assert "Fuel capped by maximum fuel capacity" in w.warnings

def test_6_domain_errors():
    with pytest.raises(DomainError):
        aw.calculate_aircraft_weight('airship')
    with pytest.raises(DomainError):
        aw.calculate_aircraft_weight('uav', mission_type='orbital')
    with pytest.raises(DomainError):
        aw.calculate_aircraft_weight('uav', weight_unit='stone')
    with pytest.raises(DomainError):
        aw.calculate_aircraft_weight('uav', distance_unit='league')
    with pytest.raises(DomainError):
        aw.calculate_aircraft_weight('uav', fuel_weight=-1.0)
    with pytest.raises(DomainError):
        aw.calculate_aircraft_weight('uav', range_distance=-100.0)
    with pytest.raises(DomainError):
        aw.calculate_aircraft_weight('uav', cruise_speed=0.0)


if __name__ == '__main__':
    test_0_breguet()
    test_1_airliner_breakdown()
    test_2_range_payload()
