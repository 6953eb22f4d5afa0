# sphere_flow.py
"""
Flow past a sphere: empirical drag correlations against Reynolds number.

Contents:
   * drag_coefficient: piecewise Cd(Re) from Stokes flow through the drag crisis
   * separation_angle, wake_length, boundary_layer_thickness: regime estimates
   * pressure_coefficients: surface Cp from the stagnation point to the rear
   * regime_info: regime lookup, with the critical Reynolds number
     of the drag crisis
   * calculate_sphere_flow: everything above for a sphere in air,
     water or a fluid with given properties
"""

from collections import namedtuple
from math import pi, log10

import numpy

from aerocalc.atmosphere import P0, R, sutherland_viscosity
from aerocalc.errors import DomainError

CRITICAL_REYNOLDS = 2.0e5

# Water at 20 degrees C.
WATER_DENSITY = 998.2            # kg/m^3
WATER_DYNAMIC_VISCOSITY = 1.002e-3  # Pa.s

FLUIDS = ('air', 'water', 'custom')

FlowRegime = namedtuple("FlowRegime", ["name", "min_reynolds", "max_reynolds", "description"])

REGIMES = [
    FlowRegime("Stokes Flow", 0.0, 1.0, "Creeping flow, no separation"),
    FlowRegime("Low Re", 1.0, 10.0, "Gradual separation begins"),
    FlowRegime("Transitional", 10.0, 100.0, "Separation point moves forward"),
    FlowRegime("Subcritical", 100.0, 1000.0, "Laminar separation"),
    FlowRegime("Critical", 1000.0, CRITICAL_REYNOLDS, "Drag crisis region"),
    FlowRegime("Supercritical", CRITICAL_REYNOLDS, float('inf'), "Turbulent separation"),
]

DragPoint = namedtuple("DragPoint", ["reynolds_number", "drag_coefficient"])

SphereFlow = namedtuple("SphereFlow", [
    "reynolds_number", "drag_coefficient", "drag_force", "separation_angle",
    "fluid_density", "dynamic_viscosity", "kinematic_viscosity", "flow_regime",
    "wake_length", "boundary_layer_thickness"])


def drag_coefficient(re):
    """
    Drag coefficient of a sphere.

    re: Reynolds number based on diameter, positive
    Returns: Cd
    """
    if re < 0.1:
        # Stokes
        return 24.0 / re
    if re < 1.0:
        # Oseen
        return 24.0 / re * (1.0 + 3.0 * re / 16.0)
    if re < 10.0:
        return 24.0 / re * (1.0 + 0.15 * re**0.687)
    if re < 1000.0:
        return 24.0 / re * (1.0 + 0.15 * re**0.687) + 0.42 / (1.0 + 42500.0 / re**1.16)
    if re < CRITICAL_REYNOLDS:
        log_re = log10(re)
        if log_re < 4.5:
            return 0.4
        if log_re < 5.0:
            return 0.4 - 0.2 * (log_re - 4.5) / 0.5
    return 0.2

def separation_angle(re):
    """Angle (degrees from the front stagnation point) at which the flow separates."""
    if re < 1.0:
        return 180.0
    if re < 10.0:
        return 180.0 - 10.0 * log10(re)
    if re < 1000.0:
        return 120.0 - 20.0 * log10(re / 10.0)
    if re < CRITICAL_REYNOLDS:
        return 100.0 - 20.0 * log10(re / 1000.0)
    return 80.0

def wake_length(re, diameter):
    if re < 1.0:
        return 10.0 * diameter
    if re < 1000.0:
        return diameter * (5.0 + 2.0 * log10(re))
    return diameter * (2.0 + 1.0 / log10(re))

def boundary_layer_thickness(re, diameter):
    if re < 1.0:
        return 0.5 * diameter
    return diameter / re**0.5

def pressure_coefficients(re):
    """
    Surface pressure coefficient around the sphere.

    Potential flow, Cp = 1 - 9/4 sin^2(angle), modified by separation:
    smeared about the separation angle below Re=1000, and a constant
    wake pressure behind it above.

    Returns: (angles, cp), numpy arrays over 0..180 degrees
    """
    angles = numpy.arange(181.0)
    cp = 1.0 - 2.25 * numpy.sin(numpy.radians(angles))**2
    if re < 1.0:
        return angles, cp
    sep = separation_angle(re)
    if re < 1000.0:
        return angles, cp * numpy.exp(-(angles - sep)**2 / 100.0)
    return angles, numpy.where(angles < sep, cp, -0.5)

def regime_info(re):
    """The FlowRegime containing the Reynolds number."""
    for regime in REGIMES:
        if regime.min_reynolds <= re < regime.max_reynolds:
            return regime
    return REGIMES[-1]

def flow_regime(re):
    """Regime name as reported with a sphere-flow result."""
    if re < 1.0:
        return "Stokes Flow (Creeping Flow)"
    if re < 10.0:
        return "Low Reynolds Number"
    if re < 100.0:
        return "Transitional Flow"
    if re < 1000.0:
        return "Subcritical Flow"
    if re < CRITICAL_REYNOLDS:
        return "Critical Flow"
    return "Supercritical Flow"

def critical_reynolds_number():
    """Reynolds number of the drag crisis."""
    return CRITICAL_REYNOLDS

def drag_coefficient_table():
    """
    The Cd(Re) correlation from Re=0.1 to 1e6: linear steps below Re=1000,
    then geometric steps of 10%.
    Returns: list of DragPoint
    """
    res = numpy.concatenate([
        numpy.arange(1, 101) * 0.1,
        numpy.arange(2, 101) * 10.0,
        1000.0 * 1.1**numpy.arange(1, int(log10(1000.0) / log10(1.1)) + 1)])
    return [DragPoint(float(re), drag_coefficient(float(re))) for re in res]

def fluid_properties(fluid, temperature):
    """
    Density (kg/m^3) and dynamic viscosity (Pa.s) of a named fluid.

    Air is an ideal gas at sea-level pressure with Sutherland viscosity.
    """
    if fluid == 'air':
        return P0 / (R * temperature), sutherland_viscosity(temperature)
    if fluid == 'water':
        return WATER_DENSITY, WATER_DYNAMIC_VISCOSITY
    raise DomainError("Unknown fluid '%s'; expected one of %s" % (fluid, ", ".join(FLUIDS)))

def calculate_sphere_flow(diameter, velocity, temperature=288.15, fluid='air',
                          density=None, dynamic_viscosity=None):
    """
    Drag and flow features of a sphere.

    diameter: m
    velocity: m/s
    temperature: K, sets the properties of air
    fluid: 'air', 'water' or 'custom'
    density, dynamic_viscosity: fluid properties, required for 'custom'
      and overriding the named fluid otherwise
    Returns: SphereFlow
    """
    if not diameter > 0.0:
        raise DomainError("Sphere diameter must be positive, got %g" % diameter)
    if not velocity > 0.0:
        raise DomainError("Flow velocity must be positive, got %g" % velocity)
    if not temperature > 0.0:
        raise DomainError("Temperature must be positive, got %g K" % temperature)
    if fluid == 'custom':
        if density is None or dynamic_viscosity is None:
            raise DomainError("A custom fluid needs its density and dynamic viscosity")
        rho, mu = density, dynamic_viscosity
    else:
        rho, mu = fluid_properties(fluid, temperature)
        rho = rho if density is None else density
        mu = mu if dynamic_viscosity is None else dynamic_viscosity
    if not (rho > 0.0 and mu > 0.0):
        raise DomainError("Fluid density and viscosity must be positive")
    re = rho * velocity * diameter / mu
    cd = drag_coefficient(re)
    area = pi * (0.5 * diameter)**2
    return SphereFlow(reynolds_number=re, drag_coefficient=cd,
                      drag_force=0.5 * rho * velocity**2 * area * cd,
                      separation_angle=separation_angle(re),
                      fluid_density=rho, dynamic_viscosity=mu, kinematic_viscosity=mu / rho,
                      flow_regime=flow_regime(re),
                      wake_length=wake_length(re, diameter),
                      boundary_layer_thickness=boundary_layer_thickness(re, diameter))
