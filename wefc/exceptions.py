class WefcError(Exception):
    """Base exception class."""


class ConfigurationError(WefcError):
    """Raise for configuration errors."""


class InvalidOperation(WefcError):
    """Raised when two algebraic elements have no defined product, sum or
    difference."""


class DimensionMismatch(WefcError):
    """Raised when a vector or matrix does not have the shape an operation needs."""


class Unsupported(WefcError):
    """Raised for requests outside what the protocol supports, such as a disjunction
    witness selector other than 0 or 1."""


class RandomnessError(WefcError):
    """Raised when the randomness source fails to deliver."""
