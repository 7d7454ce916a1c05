"""Exceptions for new-component."""


class NewComponentError(Exception):
    """Base exception for new-component."""


class ConfigError(NewComponentError):
    """Base exception for configuration errors."""


class ConfigFileError(ConfigError):
    """Error reading a configuration override file."""


class ConfigValidationError(ConfigError):
    """Configuration values are not usable."""


class FormatterError(NewComponentError):
    """The formatter could not run or rejected its input."""
