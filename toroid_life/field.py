"""
Field: a fixed-size toroidal grid of alive/dead cells evolving under
Conway's B3/S23 rule.

Cells are stored in a flat row-major array (index = y*width + x). The left and
right edges wrap onto each other, and so do the top and bottom edges.
"""
import logging
import time
from collections import deque
from typing import Any, Dict, Optional, Sequence

import numpy as np

from .errors import InvalidDimension, InvalidProbability

log = logging.getLogger(__name__)

ALIVE = "X"
DEAD = "."

# Neighbours' displacements
# XXX
# X0X
# XXX
NEIGHBOUR_DX = (-1, 0, 1, -1, 1, -1, 0, 1)
NEIGHBOUR_DY = (-1, -1, -1, 0, 0, 1, 1, 1)


def _dimension(value, name: str) -> int:
    # 2.0 is accepted, 2.5 is not
    try:
        size = int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidDimension(f"{name} should be a positive integer!") from None
    if size != value:
        raise InvalidDimension(f"{name} should be a positive integer!")
    if size <= 0:
        raise InvalidDimension(f"{name} should be positive!")
    return size


class Field:
    def __init__(self, width: int, height: int):
        self.width = _dimension(width, "Width")
        self.height = _dimension(height, "Height")
        self.epoch = 0

        self.cells = np.zeros(self.width * self.height, dtype=bool)
        # scratch buffer, only meaningful inside update()
        self.neighbours = np.zeros(self.width * self.height, dtype=np.int16)

        # rolling event log (randomize, clear, pattern)
        self.events = deque(maxlen=200)
        log.debug("Created %dx%d field", self.width, self.height)

    # ---------- event logging ----------
    def log_event(self, kind: str, info: Dict[str, Any]) -> None:
        self.events.append({"epoch": self.epoch, "kind": kind, **info})

    # ---------- indexing ----------
    def get_index(self, x: int, y: int) -> int:
        """Converts coordinates on the cyclic 2d grid to a flat array index."""
        # Python's % is non-negative for a positive modulus: -6 % 5 == 4
        x = x % self.width
        y = y % self.height
        return y * self.width + x

    def get(self, x: int, y: int) -> bool:
        return bool(self.cells[self.get_index(x, y)])

    def set(self, x: int, y: int, state: bool) -> None:
        self.cells[self.get_index(x, y)] = bool(state)

    # ---------- bulk state ----------
    def randomize(self, alive_probability: float = 0.5, seed: Optional[int] = None) -> int:
        """Give every cell an independent chance to be alive.

        A non-negative seed reproduces the same state; None or a negative
        seed is derived from the clock. Returns the seed that was used.
        """
        if not 0 <= alive_probability <= 1:
            raise InvalidProbability("alive_probability should be within [0, 1] range!")
        if seed is None or seed < 0:
            seed = time.time_ns()
        rng = np.random.default_rng(seed)
        # one draw per cell, row-major, x fastest
        draws = rng.random(self.width * self.height)
        self.cells[:] = draws < alive_probability
        self.epoch = 0
        self.log_event("randomize", {"p": float(alive_probability), "seed": int(seed)})
        log.debug("Randomized field with p=%.3f seed=%d", alive_probability, seed)
        return seed

    def clear(self) -> None:
        self.cells[:] = False
        self.epoch = 0
        self.log_event("clear", {})

    def set_pattern(self, pattern: Sequence[Sequence[str]], dx: int = 0, dy: int = 0) -> None:
        """Overlay a mask of rows onto the field, shifted by (dx, dy).

        'X' marks an alive cell, any other marker a dead one. Patterns that
        reach past an edge wrap around.
        """
        for y, row in enumerate(pattern):
            for x, marker in enumerate(row):
                self.set(x + dx, y + dy, marker == ALIVE)
        self.log_event("pattern", {
            "dx": int(dx), "dy": int(dy),
            "rows": len(pattern), "cols": max((len(r) for r in pattern), default=0),
        })

    # ---------- dynamics ----------
    def update(self) -> None:
        """Calculates the cell field for the next epoch."""
        self.neighbours[:] = 0

        # count alive neighbours, spreading each alive cell to its 8 neighbours
        for ind in np.flatnonzero(self.cells):
            y, x = divmod(int(ind), self.width)
            for ddx, ddy in zip(NEIGHBOUR_DX, NEIGHBOUR_DY):
                self.neighbours[self.get_index(x + ddx, y + ddy)] += 1

        # counts come from the buffer only, never from cells written above
        n = self.neighbours
        dies = (n < 2) | (n >= 4)
        born = n == 3
        self.cells[dies] = False
        self.cells[born] = True
        # n == 2 leaves the cell as it was
        self.epoch += 1

    # ---------- observers ----------
    def alive_count(self) -> int:
        return int(self.cells.sum())

    def snapshot(self) -> np.ndarray:
        """2D copy of the cells, shape (height, width)."""
        return self.cells.reshape(self.height, self.width).copy()

    def copy(self) -> "Field":
        other = Field(self.width, self.height)
        other.cells[:] = self.cells
        other.epoch = self.epoch
        return other

    def to_text(self) -> str:
        rows = []
        for y in range(self.height):
            row = self.cells[y * self.width:(y + 1) * self.width]
            rows.append("".join(ALIVE if c else DEAD for c in row) + "\n")
        return "".join(rows)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Field(width={self.width}, height={self.height}, epoch={self.epoch}, alive={self.alive_count()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        if self.width != other.width or self.height != other.height:
            return False
        return bool(np.array_equal(self.cells, other.cells))

    def __ne__(self, other: object) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq
