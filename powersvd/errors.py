"""Exception types raised by the power-iteration SVD routines."""


class PowerSVDError(Exception):
    """Base class for all errors raised by this package."""


class InvalidDimensionError(PowerSVDError, ValueError):
    """A vector or matrix dimension is non-positive or inconsistent."""


class InvalidParameterError(PowerSVDError, ValueError):
    """An algorithm parameter is outside its valid range."""

    def __init__(self, parameter, message):
        super().__init__(message)
        self.parameter = parameter


class InvalidRankError(PowerSVDError, ValueError):
    """Requested rank is out of bounds for the supplied triplets."""

    def __init__(self, rank, message):
        super().__init__(message)
        self.rank = rank


class DegenerateVectorError(PowerSVDError, RuntimeError):
    """Normalization by a zero (or non-finite) norm was attempted."""
