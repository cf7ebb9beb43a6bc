import matplotlib

matplotlib.use("Agg")

import pytest

from toroid_life.field import Field


def place(field: Field, *coords):
    for x, y in coords:
        field.set(x, y, True)
    return field


@pytest.fixture
def blinker():
    """Horizontal blinker in the middle of a 5x5 field."""
    return place(Field(5, 5), (1, 2), (2, 2), (3, 2))


@pytest.fixture
def block():
    return place(Field(6, 6), (2, 2), (3, 2), (2, 3), (3, 3))
