"""
passcraft.errors

Exceptions raised by the generators. Both concrete errors are ValueErrors so
callers that only guard against bad input keep working.
"""


class PasscraftError(Exception):
    """Base class for passcraft errors."""


class ConfigurationError(PasscraftError, ValueError):
    """Requested constraints can never be satisfied (bad length, no classes, ...)."""


class ExhaustionError(PasscraftError, ValueError):
    """More distinct tokens were requested than the vocabulary holds."""
