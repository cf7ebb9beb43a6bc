"""
Runner: headless simulation helpers.
Build a seeded field from a config, advance it, or measure how long it takes
to come back to its starting state.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from tqdm import trange

from .field import Field
from .patterns import get_pattern

log = logging.getLogger(__name__)

RANDOM = "random"


@dataclass
class SimConfig:
    width: int = 70
    height: int = 30
    pattern: str = "gosper_glider_gun"
    dx: int = 0
    dy: int = 0
    alive_probability: float = 0.2
    seed: int = -1
    epochs: int = 0
    delay: float = 0.1
    fps: int = 10


def build_field(cfg: SimConfig) -> Field:
    """Create a field and seed it with a named pattern or random cells."""
    field = Field(cfg.width, cfg.height)
    if cfg.pattern == RANDOM:
        seed = field.randomize(cfg.alive_probability, cfg.seed)
        log.info("Random %dx%d field, p=%.2f, seed=%d",
                 cfg.width, cfg.height, cfg.alive_probability, seed)
    else:
        field.set_pattern(get_pattern(cfg.pattern), cfg.dx, cfg.dy)
        log.info("Pattern %s on %dx%d field at (%d, %d)",
                 cfg.pattern, cfg.width, cfg.height, cfg.dx, cfg.dy)
    return field


def advance(field: Field, epochs: int, progress: bool = False) -> Field:
    for _ in trange(epochs, desc="epochs", disable=not progress):
        field.update()
    return field


def find_period(field: Field, max_epochs: int = 1000) -> Optional[int]:
    """Number of epochs until the field repeats its current state.

    Works on a copy, so the given field is left untouched. Returns None when
    the state does not come back within max_epochs.
    """
    if max_epochs < 1:
        raise ValueError("max_epochs should be at least 1")
    start = field.copy()
    probe = field.copy()
    for epoch in range(1, max_epochs + 1):
        probe.update()
        if probe == start:
            log.info("Field repeats in %d epochs", epoch)
            return epoch
    log.info("No repeat within %d epochs", max_epochs)
    return None
