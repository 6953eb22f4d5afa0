# reynolds.py
"""
Reynolds number from dynamic or kinematic viscosity, with the flow regime.

The regime boundaries differ between internal flow (pipes and ducts,
length is the diameter) and external flow (bodies and airfoils,
length is the chord or body length).
"""

from collections import namedtuple

from aerocalc.errors import DomainError

# (upper limit of laminar, upper limit of transitional)
INTERNAL_LIMITS = (2300.0, 4000.0)
EXTERNAL_LIMITS = (3.0e5, 5.0e5)

ReynoldsNumber = namedtuple("ReynoldsNumber", [
    "reynolds_number", "flow_regime", "velocity", "length",
    "density", "dynamic_viscosity", "kinematic_viscosity"])


def _check_positive(**values):
    for name, value in values.items():
        if not value > 0.0:
            raise DomainError("%s must be positive, got %g"
                              % (name.replace('_', ' ').capitalize(), value))

def flow_regime(re, internal=False):
    """'Laminar', 'Transitional' or 'Turbulent'."""
    laminar, transitional = INTERNAL_LIMITS if internal else EXTERNAL_LIMITS
    if re < laminar:
        return "Laminar"
    if re < transitional:
        return "Transitional"
    return "Turbulent"

def kinematic_viscosity(density, dynamic_viscosity):
    _check_positive(density=density, dynamic_viscosity=dynamic_viscosity)
    return dynamic_viscosity / density

def dynamic_viscosity(density, kinematic_viscosity):
    _check_positive(density=density, kinematic_viscosity=kinematic_viscosity)
    return kinematic_viscosity * density

def reynolds_number(velocity, length, density, dynamic_viscosity, internal=False):
    """
    Re = rho V L / mu

    velocity: m/s
    length: characteristic length, m
    density: kg/m^3
    dynamic_viscosity: Pa.s
    internal: True for pipe or duct flow
    Returns: ReynoldsNumber
    """
    _check_positive(velocity=velocity, length=length, density=density,
                    dynamic_viscosity=dynamic_viscosity)
    re = density * velocity * length / dynamic_viscosity
    return ReynoldsNumber(reynolds_number=re, flow_regime=flow_regime(re, internal),
                          velocity=velocity, length=length, density=density,
                          dynamic_viscosity=dynamic_viscosity,
                          kinematic_viscosity=dynamic_viscosity / density)

def reynolds_number_kinematic(velocity, length, kinematic_viscosity, internal=False):
    """
    Re = V L / nu

    The density and dynamic viscosity are not known and reported as None.
    """
    _check_positive(velocity=velocity, length=length, kinematic_viscosity=kinematic_viscosity)
    re = velocity * length / kinematic_viscosity
    return ReynoldsNumber(reynolds_number=re, flow_regime=flow_regime(re, internal),
                          velocity=velocity, length=length, density=None,
                          dynamic_viscosity=None, kinematic_viscosity=kinematic_viscosity)
