"""
Error types raised by the overlay core.
"""


class ConfigurationError(ValueError):
    """Raised when a buffer, sampler, surface or overlay is constructed with
    invalid (non-positive or unknown) settings."""
