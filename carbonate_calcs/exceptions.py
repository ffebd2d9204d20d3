class Error(Exception):
    """Base class for custom exceptions in carbonate_calcs."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidInputError(Error, ValueError):
    """Exception raised when an input is non-finite, or non-positive where a
    positive concentration or pressure is required."""


class NumericalDivergenceError(Error, ArithmeticError):
    """Exception raised when the [H+] polynomial has no usable root: no real
    root at all, a non-positive maximum real root, or a root whose pH lies
    outside the plausible bounds."""


class RangeWarning(UserWarning):
    """Temperature or salinity outside the validity range of the empirical
    constants. The computation still proceeds by extrapolation."""
