"""Domain errors raised by the generation and hashing engine."""


class PrimePassError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(PrimePassError, ValueError):
    """Raised when caller-supplied options cannot produce a result.

    Examples: every character class disabled, a non-positive length,
    a work factor outside the supported range. Always recoverable by
    adjusting the input.
    """


class HashError(PrimePassError):
    """Raised when a hash cannot be computed (unknown algorithm, digest failure)."""


class InvalidCostError(ConfigurationError, HashError):
    """Raised when the bcrypt cost is outside the supported range."""
