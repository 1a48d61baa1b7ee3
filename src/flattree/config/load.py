"""Main configuration loading functions.

- load_config(): Load from a file path
- load_config_string(): Load from a YAML string
"""

import os
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError, ConfigPathError, ConfigTypeError

__all__ = ["load_config", "load_config_string", "parse_value", "set_nested_value"]


def parse_value(value_str: Any) -> Any:
    """Parse a string value into appropriate Python type.

    Parameters
    ----------
    value_str : Any
        Value to parse (if string, attempts YAML parsing)

    Returns
    -------
    Any
        Parsed value
    """
    if not isinstance(value_str, str):
        return value_str

    if value_str.strip() == "":
        return value_str

    try:
        return yaml.safe_load(value_str)
    except yaml.YAMLError:
        return value_str


def set_nested_value(config: Dict[str, Any], key_path: str, value: Any) -> None:
    """Set a nested value using dot notation.

    Missing intermediate blocks are created.

    Parameters
    ----------
    config : Dict[str, Any]
        Configuration dictionary, modified in place
    key_path : str
        Dot-separated path (e.g., "tree_writer.sort_in_place")
    value : Any
        Value to set

    Raises
    ------
    ConfigTypeError
        If path traverses non-dict value
    """
    keys = key_path.split(".")
    current = config
    for key in keys[:-1]:
        if key not in current:
            current[key] = {}
        elif not isinstance(current[key], dict):
            raise ConfigTypeError(
                f"Cannot set '{key_path}': '{key}' is not a dictionary"
            )
        current = current[key]

    current[keys[-1]] = value


def _apply_overrides(
    config: Dict[str, Any], overrides: Optional[List[str]]
) -> Dict[str, Any]:
    """Applies a list of `key.path=value` overrides to a configuration."""
    for override in overrides or []:
        if "=" not in override:
            raise ConfigError(
                f"Invalid override '{override}', expected 'key.path=value'"
            )
        key_path, value = override.split("=", 1)
        set_nested_value(config, key_path.strip(), parse_value(value.strip()))

    return config


def load_config_string(
    config_string: str, overrides: Optional[List[str]] = None
) -> Dict[str, Any]:
    """Load a configuration from a YAML string.

    Parameters
    ----------
    config_string : str
        YAML configuration string
    overrides : Optional[List[str]]
        List of `key.path=value` overrides applied after parsing

    Returns
    -------
    Dict[str, Any]
        Configuration dictionary

    Raises
    ------
    ConfigError
        If the string is not valid YAML or does not describe a mapping
    """
    try:
        config = yaml.safe_load(config_string)
    except yaml.YAMLError as err:
        raise ConfigError(f"Invalid YAML configuration: {err}") from err

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigError(
            "The configuration must be a mapping, got a "
            f"{type(config).__name__} instead"
        )

    return _apply_overrides(config, overrides)


def load_config(cfg_path: str, overrides: Optional[List[str]] = None) -> Dict[str, Any]:
    """Load a configuration file.

    Parameters
    ----------
    cfg_path : str
        Path to the YAML configuration file
    overrides : Optional[List[str]]
        List of `key.path=value` overrides applied after parsing

    Returns
    -------
    Dict[str, Any]
        Configuration dictionary

    Raises
    ------
    ConfigPathError
        If the file does not exist
    ConfigError
        If the file is not valid YAML or does not describe a mapping
    """
    if not os.path.isfile(cfg_path):
        raise ConfigPathError(f"Configuration file not found: {cfg_path}")

    with open(cfg_path, "r", encoding="utf-8") as cfg_file:
        return load_config_string(cfg_file.read(), overrides)
