# redshift.py
"""
Redshift z = (lambda_observed - lambda_rest) / lambda_rest.
"""

from collections import namedtuple

from aerocalc.errors import DomainError

C = 299792458.0  # speed of light, m/s

# Both lines are described by wavelength (m) and frequency (Hz).
Redshift = namedtuple("Redshift", [
    "z", "observed_wavelength_m", "rest_wavelength_m",
    "observed_frequency_hz", "rest_frequency_hz"])


def frequency_to_wavelength(frequency_hz):
    return C / frequency_hz

def wavelength_to_frequency(wavelength_m):
    return C / wavelength_m

def redshift_from_wavelength(observed, rest):
    """
    observed, rest: wavelengths in the same units, positive
    Returns: z, negative for a blueshift
    """
    if not (observed > 0.0 and rest > 0.0):
        raise DomainError("Wavelengths must be positive")
    return (observed - rest) / rest

def redshift_from_frequency(observed_hz, rest_hz):
    if not (observed_hz > 0.0 and rest_hz > 0.0):
        raise DomainError("Frequencies must be positive")
    return redshift_from_wavelength(frequency_to_wavelength(observed_hz),
                                    frequency_to_wavelength(rest_hz))

def calculate_redshift(observed, rest, frequency=False):
    """
    Redshift of a spectral line, with the line in both descriptions.

    observed, rest: wavelengths in metres, or frequencies in Hz
      when frequency is True
    Returns: Redshift
    """
    if frequency:
        z = redshift_from_frequency(observed, rest)
        observed_hz, rest_hz = observed, rest
    else:
        z = redshift_from_wavelength(observed, rest)
        observed_hz, rest_hz = wavelength_to_frequency(observed), wavelength_to_frequency(rest)
    return Redshift(z=z,
                    observed_wavelength_m=frequency_to_wavelength(observed_hz),
                    rest_wavelength_m=frequency_to_wavelength(rest_hz),
                    observed_frequency_hz=observed_hz, rest_frequency_hz=rest_hz)
