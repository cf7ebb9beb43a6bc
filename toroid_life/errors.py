"""
Errors raised by the field when it is given input it cannot work with.
"""


class LifeError(ValueError):
    pass


class InvalidDimension(LifeError):
    """Width or height of a field is not a positive integer."""


class InvalidProbability(LifeError):
    """Alive probability lies outside the [0, 1] range."""
