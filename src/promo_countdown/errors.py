"""Exceptions shared across the countdown service."""


class RenderFailure(Exception):
    """Raised when a countdown image could not be computed or encoded."""
    pass


class ConfigError(ValueError):
    """Raised when configuration values are missing or malformed."""
    pass
