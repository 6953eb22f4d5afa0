# lift_drag.py
"""
Lift and drag of a finite wing.

Lift follows thin-airfoil theory, CL = CL0 + 2 pi alpha, limited to
CL_max and falling off by 0.1 per degree beyond the stall angle.
Drag follows the parabolic drag polar

   CD = CD0 + CL^2 / (pi AR e)

Air density comes from the standard atmosphere at the flight altitude.
"""

import logging
from collections import namedtuple
from math import pi, sqrt, radians, degrees

import numpy

from aerocalc.atmosphere import isa_from_altitude
from aerocalc.errors import DomainError

logger = logging.getLogger(__name__)

CL_ALPHA = 2.0 * pi      # per radian
POST_STALL_DROP = 0.1    # per degree beyond stall
POST_STALL_MIN_CL = 0.3
HIGH_ANGLE_OF_ATTACK = 25.0  # degrees

Airfoil = namedtuple("Airfoil", ["name", "cl_max", "cl0", "cd0", "oswald_efficiency", "stall_angle"])

AIRFOILS = {
    'naca-2412': Airfoil("NACA 2412", 1.4, 0.25, 0.006, 0.85, 16.0),
    'naca-4412': Airfoil("NACA 4412", 1.5, 0.35, 0.007, 0.87, 18.0),
    'naca-23012': Airfoil("NACA 23012", 1.6, 0.3, 0.005, 0.9, 17.0),
    'clark-y': Airfoil("Clark Y", 1.45, 0.4, 0.0065, 0.88, 16.5),
    'custom': Airfoil("Custom Airfoil", 1.2, 0.2, 0.008, 0.8, 15.0),
}

LiftDrag = namedtuple("LiftDrag", [
    "velocity", "altitude", "density", "dynamic_pressure",
    "wing_area", "wing_span", "aspect_ratio",
    "cl", "cd", "lift_to_drag", "lift", "drag",
    "stall_speed", "max_lift_to_drag", "optimal_angle_of_attack",
    "airfoil", "cl_max", "cd0", "oswald_efficiency", "stall_angle",
    "is_stalled", "warnings"])

LiftDragPoint = namedtuple("LiftDragPoint", [
    "angle_of_attack", "cl", "cd", "lift_to_drag", "lift", "drag"])


def lift_coefficient(alpha, cl0, cl_max, stall_angle):
    """
    alpha: angle of attack (degrees)
    Returns: CL
    """
    if alpha <= stall_angle:
        return min(cl0 + CL_ALPHA * radians(alpha), cl_max)
    cl_stall = min(cl0 + CL_ALPHA * radians(stall_angle), cl_max)
    return max(cl_stall - POST_STALL_DROP * (alpha - stall_angle), POST_STALL_MIN_CL)

def drag_coefficient(cl, cd0, aspect_ratio, e):
    """Parabolic drag polar."""
    return cd0 + cl**2 / (pi * aspect_ratio * e)

def max_lift_to_drag(cd0, aspect_ratio, e):
    """(L/D)max = sqrt(pi AR e) / (2 sqrt(CD0)), reached where the induced drag equals CD0."""
    return sqrt(pi * aspect_ratio * e) / (2.0 * sqrt(cd0))

def optimal_angle_of_attack(cl0, cd0, aspect_ratio, e):
    """Angle of attack (degrees) for maximum L/D on the linear lift curve."""
    cl_opt = sqrt(cd0 * pi * aspect_ratio * e)
    return degrees((cl_opt - cl0) / CL_ALPHA)

def stall_speed(weight, density, wing_area, cl_max):
    """Level-flight stall speed (m/s) for a weight in N."""
    return sqrt(2.0 * weight / (density * wing_area * cl_max))

def _airfoil(airfoil, cl_max, cl0, cd0, oswald_efficiency):
    if airfoil not in AIRFOILS:
        raise DomainError("Unknown airfoil '%s'; expected one of %s"
                          % (airfoil, ", ".join(AIRFOILS)))
    base = AIRFOILS[airfoil]
    data = base._replace(
        cl_max=base.cl_max if cl_max is None else cl_max,
        cl0=base.cl0 if cl0 is None else cl0,
        cd0=base.cd0 if cd0 is None else cd0,
        oswald_efficiency=base.oswald_efficiency if oswald_efficiency is None else oswald_efficiency)
    if not (data.cl_max > 0.0 and data.cd0 > 0.0 and 0.0 < data.oswald_efficiency <= 1.0):
        raise DomainError("Airfoil data needs CL_max > 0, CD0 > 0 and 0 < e <= 1")
    return data

def calculate_lift_and_drag(velocity, altitude, angle_of_attack, wing_area, wing_span,
                            airfoil='naca-2412', cl_max=None, cl0=None, cd0=None,
                            oswald_efficiency=None, weight=None):
    """
    Aerodynamic coefficients and forces on a wing.

    velocity: m/s
    altitude: m, for the standard-atmosphere density
    angle_of_attack: degrees
    wing_area: m^2
    wing_span: m
    airfoil: key of AIRFOILS; cl_max, cl0, cd0 and oswald_efficiency
      override its values
    weight: N, for the stall speed; the lift at this condition when None
    Returns: LiftDrag
    """
    if not velocity > 0.0:
        raise DomainError("Velocity must be positive, got %g" % velocity)
    if not wing_area > 0.0:
        raise DomainError("Wing area must be positive, got %g" % wing_area)
    if not wing_span > 0.0:
        raise DomainError("Wing span must be positive, got %g" % wing_span)
    if weight is not None and not weight > 0.0:
        raise DomainError("Weight must be positive, got %g" % weight)
    data = _airfoil(airfoil, cl_max, cl0, cd0, oswald_efficiency)
    density = isa_from_altitude(altitude).density
    q = 0.5 * density * velocity**2
    ar = wing_span**2 / wing_area
    cl = lift_coefficient(angle_of_attack, data.cl0, data.cl_max, data.stall_angle)
    cd = drag_coefficient(cl, data.cd0, ar, data.oswald_efficiency)
    lift = cl * q * wing_area
    if weight is None:
        weight = abs(lift)
    v_stall = stall_speed(weight, density, wing_area, data.cl_max)
    is_stalled = angle_of_attack > data.stall_angle
    warnings = []
    if is_stalled:
        warnings.append("Wing is stalled; lift coefficient may be unreliable")
    if velocity < 1.1 * v_stall:
        warnings.append("Velocity is within 10% of the stall speed")
    if angle_of_attack > HIGH_ANGLE_OF_ATTACK:
        warnings.append("Angle of attack is very high; results may be inaccurate")
    for warning in warnings:
        logger.warning(warning)
    return LiftDrag(velocity=velocity, altitude=altitude, density=density, dynamic_pressure=q,
                    wing_area=wing_area, wing_span=wing_span, aspect_ratio=ar,
                    cl=cl, cd=cd, lift_to_drag=cl / cd, lift=lift, drag=cd * q * wing_area,
                    stall_speed=v_stall,
                    max_lift_to_drag=max_lift_to_drag(data.cd0, ar, data.oswald_efficiency),
                    optimal_angle_of_attack=optimal_angle_of_attack(data.cl0, data.cd0, ar,
                                                                    data.oswald_efficiency),
                    airfoil=data.name, cl_max=data.cl_max, cd0=data.cd0,
                    oswald_efficiency=data.oswald_efficiency, stall_angle=data.stall_angle,
                    is_stalled=is_stalled, warnings=warnings)

def lift_drag_curve(velocity, altitude, wing_area, wing_span, airfoil='naca-2412',
                    min_angle=-5.0, max_angle=20.0, steps=26, **airfoil_data):
    """
    Lift and drag over an evenly spaced range of angles of attack.

    Returns: list of LiftDragPoint
    """
    if steps < 2:
        raise DomainError("A lift-drag curve needs at least 2 steps, got %d" % steps)
    points = []
    for alpha in numpy.linspace(min_angle, max_angle, steps):
        r = calculate_lift_and_drag(velocity, altitude, float(alpha), wing_area, wing_span,
                                    airfoil, **airfoil_data)
        points.append(LiftDragPoint(float(alpha), r.cl, r.cd, r.lift_to_drag, r.lift, r.drag))
    return points
