# radar.py
"""
Maximum detection range from the monostatic radar range equation,

   R_max = [ P_t G^2 lambda^2 sigma / ((4 pi)^3 S_min) ]^(1/4)

with the same antenna gain on transmit and receive.
"""

from collections import namedtuple
from math import pi

from aerocalc.errors import DomainError

C = 299792458.0  # speed of light, m/s

RadarRange = namedtuple("RadarRange", [
    "max_range_m", "wavelength_m", "power_w", "gain_linear", "frequency_hz",
    "rcs_m2", "min_signal_w"])

POWER_UNITS = {'W': 1.0, 'kW': 1.0e3, 'MW': 1.0e6}
FREQUENCY_UNITS = {'MHz': 1.0e6, 'GHz': 1.0e9}
SIGNAL_UNITS = {'W': 1.0, 'mW': 1.0e-3}


def _lookup(table, unit, quantity):
    try:
        return table[unit]
    except KeyError:
        raise DomainError("Invalid %s unit: %s" % (quantity, unit))

def power_to_w(value, unit='W'):
    return value * _lookup(POWER_UNITS, unit, 'power')

def frequency_to_hz(value, unit='GHz'):
    return value * _lookup(FREQUENCY_UNITS, unit, 'frequency')

def gain_to_linear(value, unit='dBi'):
    """Antenna gain as a linear factor from dBi or linear input."""
    if unit == 'dBi':
        return 10.0**(value / 10.0)
    if unit == 'linear':
        return value
    raise DomainError("Invalid gain unit: %s" % unit)

def rcs_to_m2(value, unit='m2'):
    """Radar cross section in m^2 from m^2 or dBsm input."""
    if unit == 'dBsm':
        return 10.0**(value / 10.0)
    if unit == 'm2':
        return value
    raise DomainError("Invalid RCS unit: %s" % unit)

def signal_to_w(value, unit='W'):
    """Minimum detectable signal in watts from W, mW or dBm input."""
    if unit == 'dBm':
        return 10.0**((value - 30.0) / 10.0)
    return value * _lookup(SIGNAL_UNITS, unit, 'signal')

def radar_range(power_w, gain_linear, frequency_hz, rcs_m2, min_signal_w):
    """
    Maximum theoretical radar range.

    power_w: transmitted power (W)
    gain_linear: antenna gain (linear)
    frequency_hz: carrier frequency (Hz)
    rcs_m2: target radar cross section (m^2)
    min_signal_w: minimum detectable signal (W)
    Returns: RadarRange
    """
    for name, value in (("Transmit power", power_w), ("Antenna gain", gain_linear),
                        ("Frequency", frequency_hz), ("Target RCS", rcs_m2),
                        ("Minimum detectable signal", min_signal_w)):
        if not value > 0.0:
            raise DomainError("%s must be positive, got %g" % (name, value))
    wavelength = C / frequency_hz
    numer = power_w * gain_linear**2 * wavelength**2 * rcs_m2
    denom = (4.0 * pi)**3 * min_signal_w
    return RadarRange(max_range_m=(numer / denom)**0.25, wavelength_m=wavelength,
                      power_w=power_w, gain_linear=gain_linear, frequency_hz=frequency_hz,
                      rcs_m2=rcs_m2, min_signal_w=min_signal_w)
