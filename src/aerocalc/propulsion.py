# propulsion.py
"""
Specific impulse in its various units.
"""

from collections import namedtuple
from math import isnan

from aerocalc.errors import DomainError

G0 = 9.80665          # standard gravity, m/s^2
FT_PER_M = 3.28084

# Speed equivalent, in m/s, of one unit of each supported specific impulse unit.
UNIT_SPEEDS = {'seconds': G0, 'm/s': 1.0, 'ft/s': 1.0 / FT_PER_M, 'km/s': 1000.0}

# Upper limits (s) of the performance categories, with typical applications.
PERFORMANCE_CATEGORIES = [
    (200.0, "Low Performance", ["Cold gas thrusters", "Some monopropellants"]),
    (300.0, "Moderate Performance", ["Hydrazine monopropellant", "Some bipropellants"]),
    (400.0, "Good Performance", ["LOX/RP-1", "LOX/LH2", "Most bipropellants"]),
    (500.0, "High Performance", ["LOX/LH2 (optimized)", "Advanced bipropellants"]),
    (1000.0, "Very High Performance", ["Electric propulsion", "Ion engines", "Hall thrusters"]),
    (float('inf'), "Exceptional Performance",
     ["Advanced electric propulsion", "Nuclear thermal", "Fusion concepts"]),
]

SpecificImpulse = namedtuple("SpecificImpulse", [
    "seconds", "meters_per_second", "feet_per_second", "kilometers_per_second",
    "effective_exhaust_velocity", "thrust_per_mass_flow",
    "performance_category", "typical_applications"])


def performance_category(seconds):
    """Category name and typical applications for a specific impulse in seconds."""
    for limit, name, applications in PERFORMANCE_CATEGORIES:
        if seconds < limit:
            return name, applications

def convert_specific_impulse(value, unit='seconds'):
    """
    Express a specific impulse in all supported units.

    value: specific impulse, positive
    unit: one of 'seconds', 'm/s', 'ft/s', 'km/s'
    Returns: SpecificImpulse
    """
    if isnan(value):
        raise DomainError("Specific impulse must be a number")
    if value <= 0.0:
        raise DomainError("Specific impulse must be positive, got %g" % value)
    if unit not in UNIT_SPEEDS:
        raise DomainError("Invalid specific impulse unit: %s" % unit)
    c = value * UNIT_SPEEDS[unit]
    seconds = c / G0
    name, applications = performance_category(seconds)
    # Thrust per unit mass flow, N/(kg/s), is numerically the exhaust velocity.
    return SpecificImpulse(seconds=seconds, meters_per_second=c,
                           feet_per_second=c * FT_PER_M, kilometers_per_second=c / 1000.0,
                           effective_exhaust_velocity=c, thrust_per_mass_flow=c,
                           performance_category=name, typical_applications=list(applications))
