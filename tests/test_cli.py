# test_cli.py
#
# $ pytest tests/test_cli.py

from click.testing import CliRunner

from aerocalc.cli import cli


def invoke(*args):
    return CliRunner().invoke(cli, list(args))

def test_0_isentropic():
    result = invoke("isentropic", "--mach", "2.0")
    print(result.output)
    assert result.exit_code == 0
    assert "area_ratio = 1.6875" in result.output
    assert "gamma = 1.4" in result.output

def test_1_isentropic_inverse():
    result = invoke("isentropic", "--area-ratio", "1.6875", "--supersonic")
    assert result.exit_code == 0
    assert "mach = 2" in result.output

def test_2_usage_error():
    result = invoke("isentropic")
    assert result.exit_code == 2
    result = invoke("isentropic", "--mach", "2.0", "--pressure-ratio", "0.5")
    assert result.exit_code == 2

def test_3_detached_oblique_shock():
    result = invoke("oblique-shock", "--mach", "2.0", "--theta", "50")
    assert result.exit_code == 1
    assert "detached" in result.output
    result = invoke("oblique-shock", "--mach", "2.0", "--theta", "10", "--strong")
    assert result.exit_code == 0
    assert "wave_angle = 83." in result.output

def test_4_config_gamma(tmp_path):
    config_file = tmp_path / "gas.yml"
    config_file.write_text("gamma: 1.3\nprecision: 4\n")
    result = invoke("--config", str(config_file), "normal-shock", "--mach", "2.0")
    assert result.exit_code == 0
    assert "gamma = 1.3" in result.output
    # The command-line gamma overrides the configured value.
    result = invoke("--config", str(config_file), "normal-shock", "--mach", "2.0", "-g", "1.4")
    assert "pressure_ratio = 4.5" in result.output

def test_5_bad_config(tmp_path):
    config_file = tmp_path / "gas.yml"
    config_file.write_text("gamma: 0.9\n")
    result = invoke("--config", str(config_file), "isentropic", "--mach", "2.0")
    assert result.exit_code == 1
    assert "gamma" in result.output

def test_6_table():
    result = invoke("table", "normal-shock", "--min-mach", "1.5", "--max-mach", "4", "--steps", "6")
    assert result.exit_code == 0
    assert len(result.output.strip().splitlines()) == 7

def test_7_forward_models():
    result = invoke("isp", "350")
    assert result.exit_code == 0
    assert "performance_category = Good Performance" in result.output
    result = invoke("hohmann", "-i", "200", "-f", "200")
    assert result.exit_code == 1
    result = invoke("radar", "--power", "1", "--power-unit", "MW", "--gain", "30",
                    "--frequency", "3", "--rcs", "1", "--min-signal", "-100")
    assert result.exit_code == 0
    assert "max_range_m = 84" in result.output
    result = invoke("redshift", "-o", "721.93", "-r", "656.3")
    assert result.exit_code == 0
    assert "  z = 0.1\n" in result.output

def test_8_batch(tmp_path):
    case_file = tmp_path / "cases.yml"
    case_file.write_text("- calculator: normal_shock\n"
                         "  mach1: 2.0\n"
                         "- calculator: oblique_shock\n"
                         "  M1: 2.0\n"
                         "  theta_degrees: 50.0\n"
                         "- calculator: redshift\n"
                         "  observed: 721.93\n"
                         "  rest: 656.3\n")
    result = invoke("batch", "--case-file", str(case_file))
    print(result.output)
    assert result.exit_code == 1
    assert "case 0: normal_shock" in result.output
    assert "mach2 = 0.57735" in result.output
    assert "detached" in result.output
    assert "1 of 3 cases failed." in result.output

def test_9_batch_all_good(tmp_path):
    case_file = tmp_path / "cases.yml"
    case_file.write_text("- calculator: critical_mach\n"
                         "- calculator: specific_impulse\n"
                         "  value: 3.0\n"
                         "  unit: km/s\n")
    result = invoke("batch", "-cf", str(case_file))
    assert result.exit_code == 0
    assert "case 1: specific_impulse" in result.output

def test_10_zero_gamma_is_not_ignored(tmp_path):
    # -g 0 is an explicit value and must be rejected, not replaced by the config.
    for args in (("isentropic", "--mach", "2.0"),
                 ("normal-shock", "--mach", "2.0"),
                 ("max-deflection", "--mach", "2.0"),
                 ("critical-mach",)):
        result = invoke(*(args + ("-g", "0")))
        print(result.output)
        assert result.exit_code == 1
        assert "Specific heat ratio must be greater than 1, got 0" in result.output
    config_file = tmp_path / "gas.yml"
    config_file.write_text("gamma: 1.3\n")
    result = invoke("--config", str(config_file), "oblique-shock", "-m", "2", "-t", "10", "-g", "0")
    assert result.exit_code == 1

def test_11_atmosphere():
    result = invoke("atmosphere", "--altitude", "11000")
    assert result.exit_code == 0
    assert "temperature = 216.65" in result.output
    assert "layer = Tropopause" in result.output
    result = invoke("atmosphere", "--pressure", "101325")
    assert "altitude = 0" in result.output
    assert invoke("atmosphere").exit_code == 2
    assert invoke("atmosphere", "--altitude", "-10").exit_code == 1

def test_12_reynolds():
    result = invoke("reynolds", "-V", "2", "-L", "0.05", "--kinematic-viscosity", "1e-6", "--internal")
    assert result.exit_code == 0
    assert "reynolds_number = 100000" in result.output
    assert "flow_regime = Turbulent" in result.output
    result = invoke("reynolds", "-V", "2", "-L", "0.05", "--density", "1000")
    assert result.exit_code == 2

def test_13_sphere_flow_and_lift_drag():
    result = invoke("sphere-flow", "-d", "0.1", "-V", "10")
    assert result.exit_code == 0
    assert "flow_regime = Critical Flow" in result.output
    result = invoke("sphere-flow", "-d", "0.1", "-V", "10", "--fluid", "custom")
    assert result.exit_code == 1
    result = invoke("lift-drag", "-V", "50", "--alpha", "4", "-S", "16", "-b", "10")
    assert result.exit_code == 0
    assert "cl = 0.688649" in result.output
    result = invoke("lift-drag", "-V", "50", "-S", "16", "-b", "10", "--curve",
                    "--min-alpha", "-5", "--max-alpha", "5", "--steps", "6")
    assert result.exit_code == 0
    assert len(result.output.strip().splitlines()) == 7

def test_14_aircraft_weight():
    result = invoke("aircraft-weight", "commercial-airliner", "--takeoff-weight", "70000")
    print(result.output)
    assert result.exit_code == 0
    assert "fuel_weight = 17500" in result.output
    assert "range_km = 5889" in result.output
    result = invoke("aircraft-weight", "airship")
    assert result.exit_code == 2

def test_15_batch_new_calculators(tmp_path):
    case_file = tmp_path / "cases.yml"
    case_file.write_text("- calculator: atmosphere\n"
                         "  altitude: 5000.0\n"
                         "- calculator: sphere_flow\n"
                         "  diameter: 0.01\n"
                         "  velocity: 1.0\n"
                         "  fluid: water\n"
                         "- calculator: aircraft_weight\n"
                         "  aircraft_type: business-jet\n"
                         "  takeoff_weight: 20000.0\n"
                         "- calculator: lift_drag\n"
                         "  velocity: 60.0\n"
                         "  altitude: 1000.0\n"
                         "  angle_of_attack: 5.0\n"
                         "  wing_area: 16.0\n"
                         "  wing_span: 11.0\n"
                         "- calculator: reynolds_number\n"
                         "  velocity: 10.0\n"
                         "  length: 1.0\n"
                         "  density: 1.225\n"
                         "  dynamic_viscosity: 1.789e-5\n")
    result = invoke("batch", "-cf", str(case_file))
    print(result.output)
    assert result.exit_code == 0
    assert "case 4: reynolds_number" in result.output
    assert "flow_regime = Turbulent" in result.output
