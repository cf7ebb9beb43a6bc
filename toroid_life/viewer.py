"""
Viewers: drive a field epoch by epoch and show it.

- run_text: print the field as text, update, wait; repeat
- run_live: matplotlib window
    SPACE = pause/resume  |  N = single step while paused
    R = randomize  |  C = clear  |  left click = toggle cell
"""
import sys
import time
from typing import Optional, TextIO

import matplotlib.pyplot as plt
from matplotlib import colors
from matplotlib.ticker import NullLocator

from .field import Field

DEAD_COLOR = "#2b2b2b"
ALIVE_COLOR = "#ffab00"
HUD_PERIOD = 2


def run_text(field: Field, epochs: int = 0, delay: float = 0.1,
             out: Optional[TextIO] = None) -> int:
    """Print, update, sleep. epochs=0 runs until interrupted.

    Returns the number of epochs played.
    """
    out = out or sys.stdout
    played = 0
    while epochs <= 0 or played < epochs:
        out.write(field.to_text() + "\n")
        out.flush()
        field.update()
        played += 1
        if delay > 0:
            time.sleep(delay)
    return played


def run_live(field: Field, fps: int = 10, steps: Optional[int] = None,
             alive_probability: float = 0.2) -> int:
    """Animate the field until the window closes (or `steps` epochs pass)."""
    cmap = colors.ListedColormap([DEAD_COLOR, ALIVE_COLOR])
    norm = colors.BoundaryNorm([0, 1, 2], cmap.N)

    fig, ax = plt.subplots(figsize=(max(2.0, field.width / 8), max(2.0, field.height / 8)))
    try: fig.canvas.manager.set_window_title("Toroid Life")
    except AttributeError: pass

    ax.set_facecolor(DEAD_COLOR)
    ax.xaxis.set_major_locator(NullLocator()); ax.yaxis.set_major_locator(NullLocator())
    img = ax.imshow(field.snapshot() * 1, cmap=cmap, norm=norm,
                    interpolation="nearest", origin="upper")
    hud = ax.text(0.5, 0.5, "", color="white", fontsize=8, va="top")

    paused = False
    single_step = False

    def on_key(ev):
        nonlocal paused, single_step
        if ev.key == " ": paused = not paused
        elif ev.key in ("n", "N"): single_step = True
        elif ev.key in ("r", "R"): field.randomize(alive_probability)
        elif ev.key in ("c", "C"): field.clear()

    def on_click(ev):
        if ev.inaxes is not ax or ev.xdata is None or ev.ydata is None: return
        x, y = int(round(ev.xdata)), int(round(ev.ydata))
        field.set(x, y, not field.get(x, y))
        img.set_data(field.snapshot() * 1)

    fig.canvas.mpl_connect("key_press_event", on_key)
    fig.canvas.mpl_connect("button_press_event", on_click)

    delay = 1.0 / max(1, fps)
    played = 0
    frame = 0
    plt.tight_layout(); plt.pause(0.001)

    while plt.fignum_exists(fig.number):
        if steps is not None and played >= steps:
            break
        if not paused or single_step:
            field.update()
            played += 1
            single_step = False
        img.set_data(field.snapshot() * 1)
        # throttle on frames; a paused view never advances played
        if paused or frame % HUD_PERIOD == 0:
            state = "paused" if paused else "running"
            hud.set_text(f"epoch {field.epoch} | alive {field.alive_count()} | {state}")
        frame += 1
        plt.pause(0.001); time.sleep(delay)

    plt.close(fig)
    return played
