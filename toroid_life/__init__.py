from .errors import InvalidDimension, InvalidProbability, LifeError
from .field import Field
from .patterns import GLIDER, GOSPER_GLIDER_GUN, PULSAR, PATTERNS

__all__ = [
    "Field", "LifeError", "InvalidDimension", "InvalidProbability",
    "GLIDER", "PULSAR", "GOSPER_GLIDER_GUN", "PATTERNS",
]
