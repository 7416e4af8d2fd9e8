"""Configuration errors."""

from ..core.error import BaseError


class ConfigError(BaseError):
    """A base exception for all configuration errors."""


class SettingsError(ConfigError):
    """A setting is present but cannot be read as the expected type."""


class InjectionError(ConfigError):
    """No usable instance is bound for a requested class."""
