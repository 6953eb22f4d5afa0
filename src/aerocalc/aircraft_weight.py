# aircraft_weight.py
"""
Aircraft weight breakdown and range-payload by the Breguet range equation.

Weights are handled in kg and distances in km internally; inputs may
be given in lb and in nautical or statute miles.

The mission is taxi/take-off/climb, cruise, descent/landing and a
reserve loiter, each taking a fraction of the aircraft weight:

   W_end/W_start = f_pre * f_cruise * f_post * f_reserve

with the cruise and loiter fractions from the Breguet equations

   f_cruise = exp(-c R / (V L/D)),   f_loiter = exp(-c t / (L/D))

where c is the specific fuel consumption (1/hr) and V in km/hr.
Missing weights are partitioned from typical fractions of the
aircraft type.
"""

import logging
from collections import namedtuple
from math import exp, log

from aerocalc.errors import DomainError

logger = logging.getLogger(__name__)

KG_PER_LB = 0.453592
KM_PER_NM = 1.852
KM_PER_MI = 1.60934
DEFAULT_TAKEOFF_WEIGHT = 10000.0  # kg, when neither take-off nor empty weight is given
TINY = 1.0e-6

AircraftType = namedtuple("AircraftType", [
    "empty_fraction", "fuel_fraction", "payload_fraction", "crew_fraction",
    "cruise_speed", "cruise_altitude", "wing_loading", "thrust_to_weight",
    "lift_to_drag", "sfc"])

# cruise_speed m/s, cruise_altitude m, wing_loading N/m^2, sfc 1/hr
AIRCRAFT_TYPES = {
    'commercial-airliner': AircraftType(0.47, 0.25, 0.23, 0.05, 250.0, 11000.0, 6000.0, 0.3, 17.0, 0.6),
    'business-jet': AircraftType(0.52, 0.28, 0.15, 0.05, 220.0, 13000.0, 4000.0, 0.4, 15.0, 0.65),
    'military-transport': AircraftType(0.42, 0.34, 0.19, 0.05, 200.0, 9000.0, 5000.0, 0.35, 14.0, 0.65),
    'military-fighter': AircraftType(0.6, 0.25, 0.1, 0.05, 300.0, 15000.0, 8000.0, 0.8, 9.0, 0.9),
    'helicopter': AircraftType(0.55, 0.22, 0.18, 0.05, 60.0, 3000.0, 0.0, 1.2, 5.0, 0.8),
    'general-aviation': AircraftType(0.64, 0.2, 0.11, 0.05, 80.0, 3000.0, 2000.0, 0.2, 11.0, 0.45),
    'uav': AircraftType(0.7, 0.2, 0.05, 0.05, 50.0, 5000.0, 1500.0, 0.3, 12.0, 0.5),
}

Mission = namedtuple("Mission", [
    "fuel_multiplier", "payload_multiplier", "pre_cruise_fraction",
    "post_cruise_fraction", "reserve_minutes"])

MISSIONS = {
    'short-range': Mission(1.0, 1.1, 0.985, 0.99, 30.0),
    'medium-range': Mission(1.0, 1.0, 0.98, 0.99, 45.0),
    'long-range': Mission(1.2, 0.8, 0.975, 0.99, 45.0),
    'endurance': Mission(1.1, 0.6, 0.985, 0.995, 15.0),
    'ferry': Mission(1.3, 0.1, 0.98, 0.99, 30.0),
    'training': Mission(0.7, 0.8, 0.99, 0.995, 30.0),
}

WEIGHT_UNITS = {'kg': 1.0, 'lb': KG_PER_LB}
DISTANCE_UNITS = {'km': 1.0, 'nm': KM_PER_NM, 'mi': KM_PER_MI}

RangePayload = namedtuple("RangePayload", ["range_km", "payload_kg"])

AircraftWeight = namedtuple("AircraftWeight", [
    "takeoff_weight", "empty_weight", "fuel_weight", "payload_weight", "crew_weight",
    "empty_fraction", "fuel_fraction", "payload_fraction", "crew_fraction",
    "range_km", "endurance_hours", "cruise_speed", "cruise_altitude",
    "wing_loading", "thrust_to_weight", "fuel_consumption",
    "range_payload", "warnings"])


def breguet_cruise_fraction(range_km, speed, sfc, lift_to_drag):
    """
    Cruise weight fraction W_end/W_start for a cruise range.

    range_km: km
    speed: m/s
    sfc: specific fuel consumption, 1/hr
    lift_to_drag: cruise L/D
    """
    speed_kmh = max(TINY, speed * 3.6)
    return exp(-sfc * range_km / (speed_kmh * max(TINY, lift_to_drag)))

def breguet_range(fraction, speed, sfc, lift_to_drag):
    """Cruise range (km) for a cruise weight fraction W_end/W_start."""
    speed_kmh = max(TINY, speed * 3.6)
    fraction = min(max(fraction, TINY), 1.0 - TINY)
    return speed_kmh / sfc * lift_to_drag * log(1.0 / fraction)

def loiter_fraction(minutes, sfc, lift_to_drag):
    """Weight fraction for a loiter of the given duration."""
    hours = max(0.0, minutes) / 60.0
    return exp(-sfc * hours / max(TINY, lift_to_drag))

def _to_kg(value, unit, name):
    if value is None:
        return None
    if value < 0.0:
        raise DomainError("%s cannot be negative, got %g" % (name, value))
    return value * WEIGHT_UNITS[unit]

def calculate_aircraft_weight(aircraft_type, mission_type='medium-range',
                              takeoff_weight=None, empty_weight=None, fuel_weight=None,
                              payload_weight=None, crew_weight=None,
                              range_distance=None, endurance=None,
                              cruise_speed=None, cruise_altitude=None,
                              weight_unit='kg', distance_unit='km',
                              mtow=None, mzfw=None, max_fuel_capacity=None):
    """
    Weight breakdown, mission range and range-payload diagram.

    aircraft_type: key of AIRCRAFT_TYPES
    mission_type: key of MISSIONS
    takeoff_weight, empty_weight, fuel_weight, payload_weight, crew_weight:
      optional, in weight_unit; missing values are partitioned from the
      typical fractions of the aircraft type
    range_distance: optional, in distance_unit; when given, the fuel
      is sized for it, otherwise the range follows from the fuel
    endurance: optional, hours
    cruise_speed: m/s; cruise_altitude: m (reported only)
    mtow, mzfw, max_fuel_capacity: optional limits, in weight_unit;
      fuel is cut before payload to meet the take-off limit
    Returns: AircraftWeight, weights in kg and range in km

    Applied limits are listed in the warnings of the result.
    """
    if aircraft_type not in AIRCRAFT_TYPES:
        raise DomainError("Unknown aircraft type '%s'; expected one of %s"
                          % (aircraft_type, ", ".join(AIRCRAFT_TYPES)))
    if mission_type not in MISSIONS:
        raise DomainError("Unknown mission type '%s'; expected one of %s"
                          % (mission_type, ", ".join(MISSIONS)))
    if weight_unit not in WEIGHT_UNITS:
        raise DomainError("Invalid weight unit: %s" % weight_unit)
    if distance_unit not in DISTANCE_UNITS:
        raise DomainError("Invalid distance unit: %s" % distance_unit)
    aircraft = AIRCRAFT_TYPES[aircraft_type]
    mission = MISSIONS[mission_type]
    tow_in = _to_kg(takeoff_weight, weight_unit, "Take-off weight")
    empty_in = _to_kg(empty_weight, weight_unit, "Empty weight")
    fuel_in = _to_kg(fuel_weight, weight_unit, "Fuel weight")
    payload_in = _to_kg(payload_weight, weight_unit, "Payload weight")
    crew_in = _to_kg(crew_weight, weight_unit, "Crew weight")
    mtow_kg = _to_kg(mtow, weight_unit, "MTOW")
    mzfw_kg = _to_kg(mzfw, weight_unit, "MZFW")
    max_fuel_kg = _to_kg(max_fuel_capacity, weight_unit, "Maximum fuel capacity")
    if range_distance is not None and range_distance < 0.0:
        raise DomainError("Range cannot be negative, got %g" % range_distance)
    if cruise_speed is not None and not cruise_speed > 0.0:
        raise DomainError("Cruise speed must be positive, got %g" % cruise_speed)
    range_in = None if range_distance is None else range_distance * DISTANCE_UNITS[distance_unit]
    warnings = []
    #
    # Partition the take-off weight.
    if tow_in:
        tow = tow_in
    elif empty_in:
        tow = empty_in / aircraft.empty_fraction
    else:
        tow = DEFAULT_TAKEOFF_WEIGHT
    empty = empty_in if empty_in is not None else tow * aircraft.empty_fraction
    crew = crew_in if crew_in is not None else tow * aircraft.crew_fraction
    if payload_in is not None:
        payload = payload_in
    else:
        payload = tow * aircraft.payload_fraction * mission.payload_multiplier
    fuel = fuel_in if fuel_in is not None else tow * aircraft.fuel_fraction
    if mzfw_kg is not None:
        if mzfw_kg < empty:
            warnings.append("MZFW is below empty weight; payload forced to 0")
        if empty + payload > mzfw_kg:
            payload = max(0.0, mzfw_kg - empty)
            warnings.append("Payload capped by MZFW (empty + payload exceeds MZFW)")
    #
    speed = cruise_speed or aircraft.cruise_speed
    altitude = cruise_altitude or aircraft.cruise_altitude
    lift_to_drag = aircraft.lift_to_drag
    sfc = aircraft.sfc * mission.fuel_multiplier
    f_segments = mission.pre_cruise_fraction * mission.post_cruise_fraction \
        * loiter_fraction(mission.reserve_minutes, sfc, lift_to_drag)
    def fuel_for_range(weight, range_km):
        f_overall = f_segments * breguet_cruise_fraction(range_km, speed, sfc, lift_to_drag)
        return max(0.0, weight * (1.0 - f_overall))
    def range_for_fuel(weight, fuel_kg):
        f_overall = max(TINY, 1.0 - fuel_kg / max(TINY, weight))
        return breguet_range(f_overall / max(TINY, f_segments), speed, sfc, lift_to_drag)
    if range_in:
        fuel = fuel_for_range(tow, range_in)
    if max_fuel_kg is not None and fuel > max_fuel_kg:
        fuel = max_fuel_kg
        warnings.append("Fuel capped by maximum fuel capacity")
    tow = empty + crew + payload + fuel
    if mtow_kg is not None and tow > mtow_kg:
        warnings.append("Takeoff weight exceeds MTOW; reducing fuel then payload")
        excess = tow - mtow_kg
        cut = min(fuel, excess)
        fuel -= cut
        excess -= cut
        if cut > 0.0:
            warnings.append("Fuel reduced to meet MTOW")
        cut = min(payload, excess)
        payload -= cut
        if cut > 0.0:
            warnings.append("Payload reduced to meet MTOW")
        tow = empty + crew + payload + fuel
    #
    range_km = range_in if range_in else range_for_fuel(tow, fuel)
    cruise_hours = max(0.0, range_km) / max(TINY, speed * 3.6)
    endurance_hours = endurance if endurance else cruise_hours + mission.reserve_minutes / 60.0
    fuel_consumption = fuel / endurance_hours if endurance_hours > 0.0 else 0.0
    #
    # Corners of the range-payload diagram: maximum payload at MTOW,
    # full tanks at MTOW, and the ferry range with no payload.
    oew = empty + crew
    mtow_ref = tow if mtow_kg is None else mtow_kg
    fuel_limit = fuel if max_fuel_kg is None else max_fuel_kg
    payload_max = payload if mzfw_kg is None else min(payload, mzfw_kg - empty)
    payload_max = max(0.0, payload_max)
    fuel_b = max(0.0, min(mtow_ref - oew - payload_max, fuel_limit))
    fuel_full = max(0.0, min(fuel_limit, mtow_ref - oew))
    payload_c = max(0.0, mtow_ref - oew - fuel_full)
    if mzfw_kg is not None:
        payload_c = max(0.0, min(payload_c, mzfw_kg - empty))
    corners = [RangePayload(0.0, payload_max),
               RangePayload(range_for_fuel(oew + payload_max + fuel_b, fuel_b), payload_max),
               RangePayload(range_for_fuel(oew + payload_c + fuel_full, fuel_full), payload_c),
               RangePayload(range_for_fuel(oew + fuel_full, fuel_full), 0.0)]
    range_payload = []
    for point in sorted(corners):
        if not any(abs(point.range_km - p.range_km) < TINY and abs(point.payload_kg - p.payload_kg) < TINY
                   for p in range_payload):
            range_payload.append(point)
    for warning in warnings:
        logger.warning(warning)
    w = max(TINY, tow)
    return AircraftWeight(takeoff_weight=tow, empty_weight=empty, fuel_weight=fuel,
                          payload_weight=payload, crew_weight=crew,
                          empty_fraction=empty / w, fuel_fraction=fuel / w,
                          payload_fraction=payload / w, crew_fraction=crew / w,
                          range_km=range_km, endurance_hours=endurance_hours,
                          cruise_speed=speed, cruise_altitude=altitude,
                          wing_loading=aircraft.wing_loading,
                          thrust_to_weight=aircraft.thrust_to_weight,
                          fuel_consumption=fuel_consumption,
                          range_payload=range_payload, warnings=warnings)
