# config.py
"""
Configuration for the aerocalc program.

Built-in defaults are overlaid by a user YAML file, named on the
command line or in the AEROCALC_CONFIG environment variable.
Items given as None (or the string 'None') keep their default.

Example config file:

   gamma: 1.3
   precision: 8
   log_level: DEBUG

A case file for batch runs is a YAML list of mappings, each naming
a calculator and its arguments:

   - calculator: oblique_shock
     M1: 2.0
     theta_degrees: 10.0
   - calculator: normal_shock
     mach1: 3.0
"""

import os
import yaml

from aerocalc.errors import ConfigError

DEFAULT_CONFIG = {
    'gamma': 1.4,
    'precision': 6,
    'log_level': 'WARNING',
}
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
CONFIG_ENV_VAR = 'AEROCALC_CONFIG'


def _read_yaml(filename):
    try:
        with open(filename) as f:
            return yaml.safe_load(f)
    except OSError as e:
        raise ConfigError("Cannot read %s: %s" % (filename, e))
    except yaml.YAMLError as e:
        raise ConfigError("Bad YAML in %s: %s" % (filename, e))

def load_config(config_filename=None):
    """
    Assemble the configuration dictionary.

    config_filename: user YAML file; when None, the file named by
      AEROCALC_CONFIG is used if that variable is set.
    Returns: dict with the keys of DEFAULT_CONFIG
    """
    config = dict(DEFAULT_CONFIG)
    config_filename = config_filename or os.environ.get(CONFIG_ENV_VAR)
    if not config_filename:
        return config
    user_config = _read_yaml(config_filename) or {}
    if not isinstance(user_config, dict):
        raise ConfigError("Config file %s must hold a mapping" % config_filename)
    for key, value in user_config.items():
        if key not in DEFAULT_CONFIG:
            raise ConfigError("Unknown config item '%s' in %s" % (key, config_filename))
        config[key] = DEFAULT_CONFIG[key] if value in (None, 'None') else value
    if not isinstance(config['gamma'], (int, float)) or config['gamma'] <= 1.0:
        raise ConfigError("gamma must be a number greater than 1, got %r" % config['gamma'])
    if not isinstance(config['precision'], int) or config['precision'] < 1:
        raise ConfigError("precision must be a positive integer, got %r" % config['precision'])
    config['log_level'] = str(config['log_level']).upper()
    if config['log_level'] not in LOG_LEVELS:
        raise ConfigError("log_level must be one of %s" % ", ".join(LOG_LEVELS))
    return config

def load_cases(case_filename):
    """
    Read the list of cases for a batch run.

    Returns: list of dicts, each with a 'calculator' entry
    """
    cases = _read_yaml(case_filename)
    if not isinstance(cases, list):
        raise ConfigError("Case file %s must hold a list of cases" % case_filename)
    for i, case in enumerate(cases):
        if not isinstance(case, dict) or 'calculator' not in case:
            raise ConfigError("Case %d in %s does not name a calculator" % (i, case_filename))
    return cases
