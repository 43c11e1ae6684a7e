"""Configuration error exception."""


class ConfigError(ValueError):
    """Raised when the postmore configuration cannot be loaded."""
