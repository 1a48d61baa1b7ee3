"""Configuration loading of the conversion engine.

Main Entry Points
-----------------
load_config : Load a YAML configuration file
load_config_string : Load a YAML configuration string

Both accept a list of `key.path=value` overrides, applied once the document
is parsed.
"""

from .errors import ConfigError, ConfigPathError, ConfigTypeError
from .load import load_config, load_config_string, parse_value, set_nested_value

__all__ = [
    "load_config",
    "load_config_string",
    "parse_value",
    "set_nested_value",
    "ConfigError",
    "ConfigPathError",
    "ConfigTypeError",
]
