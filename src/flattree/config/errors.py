"""Typed exceptions for flattree configuration loading."""


class ConfigError(Exception):
    """Base exception for all configuration errors."""


class ConfigPathError(ConfigError):
    """Raised when a configuration path cannot be resolved or does not exist."""


class ConfigTypeError(ConfigError):
    """Raised when a configuration operation is applied to the wrong type."""
