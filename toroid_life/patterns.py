"""
Well-known starting patterns, as rows of 'X' (alive) and '.' (dead).
"""
from typing import Dict, List

GLIDER = [
    ".X.",
    "..X",
    "XXX",
]

# period-3 oscillator, padded by two dead cells on every side
PULSAR = [
    ".................",
    ".................",
    "....XXX...XXX....",
    ".................",
    "..X....X.X....X..",
    "..X....X.X....X..",
    "..X....X.X....X..",
    "....XXX...XXX....",
    ".................",
    "....XXX...XXX....",
    "..X....X.X....X..",
    "..X....X.X....X..",
    "..X....X.X....X..",
    ".................",
    "....XXX...XXX....",
    ".................",
    ".................",
]

GOSPER_GLIDER_GUN = [
    "......................................",
    ".........................X............",
    ".......................X.X............",
    ".............XX......XX............XX.",
    "............X...X....XX............XX.",
    ".XX........X.....X...XX...............",
    ".XX........X...X.XX....X.X............",
    "...........X.....X.......X............",
    "............X...X.....................",
    ".............XX.......................",
]

PATTERNS: Dict[str, List[str]] = {
    "glider": GLIDER,
    "pulsar": PULSAR,
    "gosper_glider_gun": GOSPER_GLIDER_GUN,
}


def get_pattern(name: str) -> List[str]:
    try:
        return PATTERNS[name]
    except KeyError:
        known = ", ".join(sorted(PATTERNS))
        raise KeyError(f"Unknown pattern {name!r}, expected one of: {known}") from None
