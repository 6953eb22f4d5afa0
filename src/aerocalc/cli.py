# cli.py
"""
The aerocalc program: command-line access to the calculators.

Examples:
   > aerocalc isentropic --mach 2.0
   > aerocalc isentropic --area-ratio 1.6875 --supersonic
   > aerocalc normal-shock --pitot-ratio 5.64
   > aerocalc oblique-shock --mach 2.0 --theta 10 --strong
   > aerocalc table normal-shock --min-mach 1.5 --max-mach 4 --steps 6
   > aerocalc atmosphere --altitude 11000
   > aerocalc aircraft-weight commercial-airliner --takeoff-weight 70000 --range 3000
   > aerocalc --config my-gas.yml batch --case-file cases.yml
"""

import logging
import sys

import click

from aerocalc.config import load_config, load_cases
from aerocalc.errors import AerocalcError
from aerocalc.isentropic_flow import (
    calculate_isentropic_flow,
    find_mach_from_pressure_ratio,
    find_mach_from_area_ratio,
    find_mach_from_temperature_ratio,
    find_mach_from_prandtl_meyer_angle,
    isentropic_table,
)
from aerocalc.normal_shock import (
    calculate_normal_shock,
    calculate_from_pitot_ratio,
    find_critical_mach,
    normal_shock_table,
)
from aerocalc.oblique_shock import calculate_oblique_shock, calculate_max_deflection_angle
from aerocalc.orbital import hohmann_transfer
from aerocalc.propulsion import convert_specific_impulse, UNIT_SPEEDS
from aerocalc.radar import (
    radar_range, power_to_w, gain_to_linear, frequency_to_hz, rcs_to_m2, signal_to_w,
)
from aerocalc.redshift import calculate_redshift
from aerocalc.atmosphere import isa_from_altitude, isa_from_pressure, isa_from_temperature
from aerocalc.reynolds import reynolds_number, reynolds_number_kinematic
from aerocalc.sphere_flow import calculate_sphere_flow, FLUIDS
from aerocalc.aircraft_weight import (
    calculate_aircraft_weight, AIRCRAFT_TYPES, MISSIONS, WEIGHT_UNITS, DISTANCE_UNITS,
)
from aerocalc.lift_drag import calculate_lift_and_drag, lift_drag_curve, AIRFOILS

logger = logging.getLogger(__name__)

# Calculators available to batch runs, with a flag saying whether
# the configured gamma is supplied when a case does not give one.
CALCULATORS = {
    'isentropic_flow': (calculate_isentropic_flow, True),
    'mach_from_pressure_ratio': (find_mach_from_pressure_ratio, True),
    'mach_from_area_ratio': (find_mach_from_area_ratio, True),
    'mach_from_temperature_ratio': (find_mach_from_temperature_ratio, True),
    'mach_from_prandtl_meyer_angle': (find_mach_from_prandtl_meyer_angle, True),
    'normal_shock': (calculate_normal_shock, True),
    'pitot_ratio': (calculate_from_pitot_ratio, True),
    'critical_mach': (find_critical_mach, True),
    'oblique_shock': (calculate_oblique_shock, True),
    'max_deflection': (calculate_max_deflection_angle, True),
    'hohmann_transfer': (hohmann_transfer, False),
    'specific_impulse': (convert_specific_impulse, False),
    'radar_range': (radar_range, False),
    'redshift': (calculate_redshift, False),
    'atmosphere': (isa_from_altitude, False),
    'pressure_altitude': (isa_from_pressure, False),
    'temperature_altitude': (isa_from_temperature, False),
    'reynolds_number': (reynolds_number, False),
    'reynolds_number_kinematic': (reynolds_number_kinematic, False),
    'sphere_flow': (calculate_sphere_flow, False),
    'aircraft_weight': (calculate_aircraft_weight, False),
    'lift_drag': (calculate_lift_and_drag, False),
    'lift_drag_curve': (lift_drag_curve, False),
}


def format_value(value, precision):
    if isinstance(value, float):
        return "%.*g" % (precision, value)
    return str(value)

def echo_result(result, precision):
    """Print a scalar, a record or a table of records."""
    if isinstance(result, list):
        names = result[0]._fields
        click.echo(" ".join("%14s" % name[:14] for name in names))
        for row in result:
            click.echo(" ".join("%14s" % format_value(v, precision) for v in row))
    elif hasattr(result, '_fields'):
        for name, value in zip(result._fields, result):
            click.echo("  %s = %s" % (name, format_value(value, precision)))
    else:
        click.echo(format_value(result, precision))

def run(ctx, fn, *args, **kwargs):
    """Evaluate a calculator and print its result, reporting errors cleanly."""
    config = ctx.obj
    try:
        result = fn(*args, **kwargs)
    except AerocalcError as e:
        raise click.ClickException(str(e))
    echo_result(result, config['precision'])
    return result

def config_gamma(ctx, gamma):
    """The gamma given on the command line, else the configured value."""
    return ctx.obj['gamma'] if gamma is None else gamma

def gamma_option(f):
    return click.option("-g", "--gamma", type=float, default=None,
                        help="Ratio of specific heats [default: from config, 1.4]")(f)


@click.group()
@click.option("-c", "--config", "configFile", default=None,
              help="YAML configuration file (overrides AEROCALC_CONFIG).")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log solver iterations.")
@click.pass_context
def cli(ctx, configFile, verbose):
    """Aerospace engineering calculators."""
    try:
        config = load_config(configFile)
    except AerocalcError as e:
        raise click.ClickException(str(e))
    if verbose:
        config['log_level'] = 'DEBUG'
    logging.basicConfig(format="%(levelname)s:%(name)s: %(message)s",
                        level=getattr(logging, config['log_level']))
    ctx.obj = config


@cli.command()
@click.option("-m", "--mach", type=float, help="Mach number.")
@click.option("-pr", "--pressure-ratio", type=float, help="Static to total pressure ratio p/p0.")
@click.option("-tr", "--temperature-ratio", type=float, help="Static to total temperature ratio T/T0.")
@click.option("-ar", "--area-ratio", type=float, help="Area ratio A/Astar.")
@click.option("-nu", "--prandtl-meyer", type=float, help="Prandtl-Meyer angle in degrees.")
@click.option("--supersonic", is_flag=True, default=False,
              help="Take the supersonic root of the area ratio.")
@gamma_option
@click.pass_context
def isentropic(ctx, mach, pressure_ratio, temperature_ratio, area_ratio, prandtl_meyer,
               supersonic, gamma):
    """
    Isentropic flow properties.

    \b
    Give exactly one of the inputs; the Mach number is found first
    and the full set of isentropic ratios is printed.
    """
    gamma = config_gamma(ctx, gamma)
    given = [v is not None for v in (mach, pressure_ratio, temperature_ratio,
                                     area_ratio, prandtl_meyer)]
    if sum(given) != 1:
        raise click.UsageError("Give exactly one of --mach, --pressure-ratio,"
                               " --temperature-ratio, --area-ratio, --prandtl-meyer.")
    try:
        if pressure_ratio is not None:
            mach = find_mach_from_pressure_ratio(pressure_ratio, gamma)
        elif temperature_ratio is not None:
            mach = find_mach_from_temperature_ratio(temperature_ratio, gamma)
        elif area_ratio is not None:
            mach = find_mach_from_area_ratio(area_ratio, gamma, supersonic)
        elif prandtl_meyer is not None:
            mach = find_mach_from_prandtl_meyer_angle(prandtl_meyer, gamma)
    except AerocalcError as e:
        raise click.ClickException(str(e))
    run(ctx, calculate_isentropic_flow, mach, gamma)


@cli.command("normal-shock")
@click.option("-m", "--mach", type=float, help="Upstream Mach number.")
@click.option("-pp", "--pitot-ratio", type=float, help="Pitot to free-stream static pressure ratio.")
@gamma_option
@click.pass_context
def normal_shock(ctx, mach, pitot_ratio, gamma):
    """Properties across a normal shock."""
    gamma = config_gamma(ctx, gamma)
    if (mach is None) == (pitot_ratio is None):
        raise click.UsageError("Give exactly one of --mach, --pitot-ratio.")
    if mach is not None:
        run(ctx, calculate_normal_shock, mach, gamma)
    else:
        run(ctx, calculate_from_pitot_ratio, pitot_ratio, gamma)


@cli.command("critical-mach")
@click.option("-t", "--target", type=float, default=0.01, show_default=True,
              help="Stagnation pressure ratio p02/p01 to reach.")
@gamma_option
@click.pass_context
def critical_mach(ctx, target, gamma):
    """Mach number at which a normal shock keeps only TARGET of the stagnation pressure."""
    run(ctx, find_critical_mach, config_gamma(ctx, gamma), target)


@cli.command("oblique-shock")
@click.option("-m", "--mach", type=float, required=True, help="Upstream Mach number.")
@click.option("-t", "--theta", type=float, required=True, help="Deflection angle in degrees.")
@click.option("--strong", is_flag=True, default=False, help="Take the strong-shock solution.")
@gamma_option
@click.pass_context
def oblique_shock(ctx, mach, theta, strong, gamma):
    """Properties across an attached oblique shock."""
    run(ctx, calculate_oblique_shock, mach, theta, config_gamma(ctx, gamma), not strong)


@cli.command("max-deflection")
@click.option("-m", "--mach", type=float, required=True, help="Upstream Mach number.")
@gamma_option
@click.pass_context
def max_deflection(ctx, mach, gamma):
    """Maximum deflection for an attached oblique shock."""
    run(ctx, calculate_max_deflection_angle, mach, config_gamma(ctx, gamma))


@cli.command()
@click.argument("kind", type=click.Choice(["isentropic", "normal-shock"]))
@click.option("--min-mach", type=float, default=None, help="First Mach number.")
@click.option("--max-mach", type=float, default=None, help="Last Mach number.")
@click.option("--steps", type=int, default=20, show_default=True, help="Number of rows.")
@gamma_option
@click.pass_context
def table(ctx, kind, min_mach, max_mach, steps, gamma):
    """Table of isentropic or normal-shock properties."""
    gamma = config_gamma(ctx, gamma)
    if kind == "isentropic":
        run(ctx, isentropic_table, 0.1 if min_mach is None else min_mach,
            5.0 if max_mach is None else max_mach, steps, gamma)
    else:
        run(ctx, normal_shock_table, 1.05 if min_mach is None else min_mach,
            10.0 if max_mach is None else max_mach, steps, gamma)


@cli.command()
@click.option("-i", "--initial-altitude", type=float, required=True, help="Initial orbit altitude, km.")
@click.option("-f", "--final-altitude", type=float, required=True, help="Final orbit altitude, km.")
@click.pass_context
def hohmann(ctx, initial_altitude, final_altitude):
    """Hohmann transfer between circular Earth orbits."""
    run(ctx, hohmann_transfer, initial_altitude, final_altitude)


@cli.command()
@click.argument("value", type=float)
@click.option("-u", "--unit", type=click.Choice(sorted(UNIT_SPEEDS)), default="seconds",
              show_default=True, help="Unit of VALUE.")
@click.pass_context
def isp(ctx, value, unit):
    """Specific impulse in all units."""
    run(ctx, convert_specific_impulse, value, unit)


@cli.command()
@click.option("--power", type=float, required=True, help="Transmitted power.")
@click.option("--power-unit", type=click.Choice(["W", "kW", "MW"]), default="kW", show_default=True)
@click.option("--gain", type=float, required=True, help="Antenna gain.")
@click.option("--gain-unit", type=click.Choice(["dBi", "linear"]), default="dBi", show_default=True)
@click.option("--frequency", type=float, required=True, help="Carrier frequency.")
@click.option("--frequency-unit", type=click.Choice(["MHz", "GHz"]), default="GHz", show_default=True)
@click.option("--rcs", type=float, required=True, help="Target radar cross section.")
@click.option("--rcs-unit", type=click.Choice(["m2", "dBsm"]), default="m2", show_default=True)
@click.option("--min-signal", type=float, required=True, help="Minimum detectable signal.")
@click.option("--signal-unit", type=click.Choice(["W", "mW", "dBm"]), default="dBm", show_default=True)
@click.pass_context
def radar(ctx, power, power_unit, gain, gain_unit, frequency, frequency_unit,
          rcs, rcs_unit, min_signal, signal_unit):
    """Maximum range from the radar range equation."""
    run(ctx, radar_range, power_to_w(power, power_unit), gain_to_linear(gain, gain_unit),
        frequency_to_hz(frequency, frequency_unit), rcs_to_m2(rcs, rcs_unit),
        signal_to_w(min_signal, signal_unit))


@cli.command()
@click.option("-o", "--observed", type=float, required=True, help="Observed wavelength or frequency.")
@click.option("-r", "--rest", type=float, required=True, help="Rest wavelength or frequency.")
@click.option("--frequency", is_flag=True, default=False,
              help="Inputs are frequencies (Hz) rather than wavelengths.")
@click.pass_context
def redshift(ctx, observed, rest, frequency):
    """Redshift z of a spectral line."""
    run(ctx, calculate_redshift, observed, rest, frequency)


@cli.command()
@click.option("-a", "--altitude", type=float, help="Geometric altitude, m.")
@click.option("-p", "--pressure", type=float, help="Static pressure, Pa.")
@click.option("-t", "--temperature", type=float, help="Static temperature, K.")
@click.pass_context
def atmosphere(ctx, altitude, pressure, temperature):
    """Standard atmosphere from an altitude, pressure or temperature."""
    given = [v is not None for v in (altitude, pressure, temperature)]
    if sum(given) != 1:
        raise click.UsageError("Give exactly one of --altitude, --pressure, --temperature.")
    if altitude is not None:
        run(ctx, isa_from_altitude, altitude)
    elif pressure is not None:
        run(ctx, isa_from_pressure, pressure)
    else:
        run(ctx, isa_from_temperature, temperature)


@cli.command()
@click.option("-V", "--velocity", type=float, required=True, help="Flow velocity, m/s.")
@click.option("-L", "--length", type=float, required=True, help="Characteristic length, m.")
@click.option("--density", type=float, help="Density, kg/m^3.")
@click.option("--viscosity", type=float, help="Dynamic viscosity, Pa.s.")
@click.option("--kinematic-viscosity", type=float, help="Kinematic viscosity, m^2/s.")
@click.option("--internal", is_flag=True, default=False, help="Pipe or duct flow.")
@click.pass_context
def reynolds(ctx, velocity, length, density, viscosity, kinematic_viscosity, internal):
    """Reynolds number and flow regime."""
    if kinematic_viscosity is not None:
        if density is not None or viscosity is not None:
            raise click.UsageError("Give either --kinematic-viscosity or --density with --viscosity.")
        run(ctx, reynolds_number_kinematic, velocity, length, kinematic_viscosity, internal)
    elif density is None or viscosity is None:
        raise click.UsageError("Give --density with --viscosity, or --kinematic-viscosity.")
    else:
        run(ctx, reynolds_number, velocity, length, density, viscosity, internal)


@cli.command("sphere-flow")
@click.option("-d", "--diameter", type=float, required=True, help="Sphere diameter, m.")
@click.option("-V", "--velocity", type=float, required=True, help="Flow velocity, m/s.")
@click.option("-T", "--temperature", type=float, default=288.15, show_default=True,
              help="Air temperature, K.")
@click.option("--fluid", type=click.Choice(FLUIDS), default="air", show_default=True)
@click.option("--density", type=float, help="Fluid density, kg/m^3.")
@click.option("--viscosity", type=float, help="Dynamic viscosity, Pa.s.")
@click.pass_context
def sphere_flow(ctx, diameter, velocity, temperature, fluid, density, viscosity):
    """Drag and flow regime of a sphere."""
    run(ctx, calculate_sphere_flow, diameter, velocity, temperature, fluid, density, viscosity)


@cli.command("aircraft-weight")
@click.argument("aircraft_type", type=click.Choice(sorted(AIRCRAFT_TYPES)))
@click.option("--mission", type=click.Choice(sorted(MISSIONS)), default="medium-range",
              show_default=True)
@click.option("--takeoff-weight", type=float)
@click.option("--empty-weight", type=float)
@click.option("--fuel-weight", type=float)
@click.option("--payload-weight", type=float)
@click.option("--crew-weight", type=float)
@click.option("--range", "range_distance", type=float, help="Mission range; sizes the fuel.")
@click.option("--endurance", type=float, help="Mission endurance, hours.")
@click.option("--cruise-speed", type=float, help="Cruise speed, m/s.")
@click.option("--cruise-altitude", type=float, help="Cruise altitude, m.")
@click.option("--weight-unit", type=click.Choice(sorted(WEIGHT_UNITS)), default="kg", show_default=True)
@click.option("--distance-unit", type=click.Choice(sorted(DISTANCE_UNITS)), default="km",
              show_default=True)
@click.option("--mtow", type=float, help="Maximum take-off weight.")
@click.option("--mzfw", type=float, help="Maximum zero-fuel weight.")
@click.option("--max-fuel", type=float, help="Maximum fuel capacity.")
@click.pass_context
def aircraft_weight(ctx, aircraft_type, mission, takeoff_weight, empty_weight, fuel_weight,
                    payload_weight, crew_weight, range_distance, endurance, cruise_speed,
                    cruise_altitude, weight_unit, distance_unit, mtow, mzfw, max_fuel):
    """Weight breakdown and range-payload of an aircraft."""
    run(ctx, calculate_aircraft_weight, aircraft_type, mission,
        takeoff_weight=takeoff_weight, empty_weight=empty_weight, fuel_weight=fuel_weight,
        payload_weight=payload_weight, crew_weight=crew_weight,
        range_distance=range_distance, endurance=endurance,
        cruise_speed=cruise_speed, cruise_altitude=cruise_altitude,
        weight_unit=weight_unit, distance_unit=distance_unit,
        mtow=mtow, mzfw=mzfw, max_fuel_capacity=max_fuel)


@cli.command("lift-drag")
@click.option("-V", "--velocity", type=float, required=True, help="Airspeed, m/s.")
@click.option("-a", "--altitude", type=float, default=0.0, show_default=True, help="Altitude, m.")
@click.option("--alpha", type=float, default=0.0, show_default=True,
              help="Angle of attack, degrees.")
@click.option("-S", "--wing-area", type=float, required=True, help="Wing area, m^2.")
@click.option("-b", "--wing-span", type=float, required=True, help="Wing span, m.")
@click.option("--airfoil", type=click.Choice(sorted(AIRFOILS)), default="naca-2412", show_default=True)
@click.option("--weight", type=float, help="Aircraft weight for the stall speed, N.")
@click.option("--curve", is_flag=True, default=False,
              help="Tabulate against angle of attack instead.")
@click.option("--min-alpha", type=float, default=-5.0, show_default=True)
@click.option("--max-alpha", type=float, default=20.0, show_default=True)
@click.option("--steps", type=int, default=26, show_default=True)
@click.pass_context
def lift_drag(ctx, velocity, altitude, alpha, wing_area, wing_span, airfoil, weight,
              curve, min_alpha, max_alpha, steps):
    """Lift and drag of a wing."""
    if curve:
        run(ctx, lift_drag_curve, velocity, altitude, wing_area, wing_span, airfoil,
            min_alpha, max_alpha, steps)
    else:
        run(ctx, calculate_lift_and_drag, velocity, altitude, alpha, wing_area, wing_span,
            airfoil, weight=weight)


@cli.command()
@click.option("-cf", "--case-file", "caseFile", default="cases.yml", show_default=True,
              help="YAML file with a list of cases.")
@click.pass_context
def batch(ctx, caseFile):
    """
    Evaluate a list of cases from a YAML file.

    \b
    Each case names a calculator and gives its arguments, for example
       - calculator: oblique_shock
         M1: 2.0
         theta_degrees: 10.0
    Cases without gamma use the configured value.
    """
    try:
        cases = load_cases(caseFile)
    except AerocalcError as e:
        raise click.ClickException(str(e))
    n_failed = 0
    for i, case in enumerate(cases):
        args = dict(case)
        name = args.pop('calculator')
        click.echo("case %d: %s" % (i, name))
        if name not in CALCULATORS:
            click.echo("  error: unknown calculator '%s'" % name)
            n_failed += 1
            continue
        fn, takes_gamma = CALCULATORS[name]
        if takes_gamma:
            args.setdefault('gamma', ctx.obj['gamma'])
        try:
            result = fn(**args)
        except (AerocalcError, TypeError) as e:
            logger.info("case %d (%s) failed: %s", i, name, e)
            click.echo("  error: %s" % e)
            n_failed += 1
            continue
        echo_result(result, ctx.obj['precision'])
    if n_failed:
        click.echo("%d of %d cases failed." % (n_failed, len(cases)))
        sys.exit(1)


def main():
    cli()

if __name__ == '__main__':
    main()
