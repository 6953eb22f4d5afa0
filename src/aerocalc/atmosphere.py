# atmosphere.py
"""
International Standard Atmosphere, 0 to 86 km.

The atmosphere is built from layers with a linear temperature profile.
Base temperatures and pressures of the layers are accumulated from
sea level when the module is imported, so that the profile is
continuous across layer boundaries.

Contents:
   * isa_from_altitude: temperature, pressure and density at an altitude
   * isa_from_pressure: the altitude with a given pressure
   * isa_from_temperature: the lowest altitude with a given temperature,
     searching only layers in which the temperature varies
   * sutherland_viscosity: dynamic viscosity of air
"""

from collections import namedtuple
from math import exp, log, sqrt

from aerocalc.errors import DomainError

T0 = 288.15       # sea-level temperature, K
P0 = 101325.0     # sea-level pressure, Pa
R = 287.05        # gas constant for dry air, J/(kg.K)
G0 = 9.80665      # standard gravity, m/s^2
GAMMA = 1.4
MAX_ALTITUDE = 86000.0  # m

# Sutherland's law for air.
MU_REF = 1.789e-5  # Pa.s at T0
SUTHERLAND_S = 110.4  # K

# Lapse rates are positive where the temperature falls with height.
LAYER_DEFINITIONS = [
    ("Troposphere", 0.0, 0.0065),
    ("Tropopause", 11000.0, 0.0),
    ("Stratosphere I", 20000.0, -0.001),
    ("Stratosphere II", 32000.0, -0.0028),
    ("Stratopause", 47000.0, 0.0),
    ("Mesosphere I", 51000.0, 0.0028),
    ("Mesosphere II", 71000.0, 0.002),
    ("Mesopause", 84852.0, 0.0),
]

Layer = namedtuple("Layer", ["name", "base_altitude", "lapse_rate",
                             "base_temperature", "base_pressure"])

Atmosphere = namedtuple("Atmosphere", [
    "altitude", "temperature", "pressure", "density", "speed_of_sound", "layer"])


def _temperature_in(layer, altitude):
    return layer.base_temperature - layer.lapse_rate * (altitude - layer.base_altitude)

def _pressure_in(layer, altitude):
    if layer.lapse_rate == 0.0:
        return layer.base_pressure * exp(-G0 * (altitude - layer.base_altitude)
                                         / (R * layer.base_temperature))
    t = _temperature_in(layer, altitude)
    return layer.base_pressure * (t / layer.base_temperature)**(G0 / (R * layer.lapse_rate))

def _build_layers():
    layers = []
    t, p = T0, P0
    for name, base, lapse in LAYER_DEFINITIONS:
        if layers:
            below = layers[-1]
            t, p = _temperature_in(below, base), _pressure_in(below, base)
        layers.append(Layer(name, base, lapse, t, p))
    return layers

LAYERS = _build_layers()


def find_layer(altitude):
    """The layer containing the altitude (m)."""
    for layer in reversed(LAYERS):
        if altitude >= layer.base_altitude:
            return layer
    return LAYERS[0]

def _state(altitude, temperature, pressure, layer):
    return Atmosphere(altitude=altitude, temperature=temperature, pressure=pressure,
                      density=pressure / (R * temperature),
                      speed_of_sound=sqrt(GAMMA * R * temperature),
                      layer=layer.name)

def isa_from_altitude(altitude):
    """
    Standard atmosphere at a geometric altitude.

    altitude: m, in [0, 86000]
    Returns: Atmosphere
    """
    if altitude < 0.0:
        raise DomainError("Altitude cannot be negative, got %g m" % altitude)
    if altitude > MAX_ALTITUDE:
        raise DomainError("The standard atmosphere is tabulated up to %g m, got %g m"
                          % (MAX_ALTITUDE, altitude))
    layer = find_layer(altitude)
    return _state(altitude, _temperature_in(layer, altitude),
                  _pressure_in(layer, altitude), layer)

def isa_from_pressure(pressure):
    """
    Pressure altitude.

    pressure: Pa, in (0, P0]
    Returns: Atmosphere at the altitude where the standard pressure
      equals the given value.
    """
    if not pressure > 0.0:
        raise DomainError("Pressure must be positive, got %g Pa" % pressure)
    if pressure > P0:
        raise DomainError("Pressure cannot exceed the sea-level value %g Pa, got %g Pa"
                          % (P0, pressure))
    layer = LAYERS[-1]
    for below, above in zip(LAYERS, LAYERS[1:]):
        if pressure > above.base_pressure:
            layer = below
            break
    if layer.lapse_rate == 0.0:
        temperature = layer.base_temperature
        altitude = layer.base_altitude \
            - R * temperature / G0 * log(pressure / layer.base_pressure)
    else:
        temperature = layer.base_temperature \
            * (pressure / layer.base_pressure)**(R * layer.lapse_rate / G0)
        altitude = layer.base_altitude + (layer.base_temperature - temperature) / layer.lapse_rate
    if altitude > MAX_ALTITUDE:
        raise DomainError("Pressure %g Pa lies above the tabulated atmosphere" % pressure)
    return _state(altitude, temperature, pressure, layer)

def isa_from_temperature(temperature):
    """
    Lowest altitude with the given standard temperature.

    Isothermal layers are skipped, since the temperature does not
    fix an altitude within them.
    """
    if not temperature > 0.0:
        raise DomainError("Temperature must be positive (K), got %g" % temperature)
    for layer, above in zip(LAYERS, LAYERS[1:]):
        if layer.lapse_rate == 0.0:
            continue
        top = _temperature_in(layer, above.base_altitude)
        if min(top, layer.base_temperature) <= temperature <= max(top, layer.base_temperature):
            altitude = layer.base_altitude + (layer.base_temperature - temperature) / layer.lapse_rate
            return _state(altitude, temperature, _pressure_in(layer, altitude), layer)
    raise DomainError("Temperature %.2f K is not found in a layer with varying temperature"
                      % temperature)

def sutherland_viscosity(temperature):
    """Dynamic viscosity of air (Pa.s) at a temperature (K)."""
    if not temperature > 0.0:
        raise DomainError("Temperature must be positive (K), got %g" % temperature)
    return MU_REF * (temperature / T0)**1.5 * (T0 + SUTHERLAND_S) / (temperature + SUTHERLAND_S)
