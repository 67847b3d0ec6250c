"""Exceptions raised by Canary."""


class CanaryError(Exception):
    """Base class for all Canary errors."""
    pass


class InvalidConfigurationError(CanaryError, ValueError):
    """Raised when authorization options or handler references are misconfigured.

    Never recovered inside the library; the integrator has to fix the
    configuration.
    """
    pass
