"""
CLI entry: seed a field and play it as text, or report its period.
"""
import argparse
import logging
from typing import List, Optional

from .errors import LifeError
from .logutil import init_life_log
from .patterns import PATTERNS
from .runner import RANDOM, SimConfig, build_field, find_period
from .viewer import run_text


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(prog="toroid-life", description="Conway's Game of Life on a torus.")
    p.add_argument("--width", type=int, default=SimConfig.width)
    p.add_argument("--height", type=int, default=SimConfig.height)
    p.add_argument("--pattern", choices=sorted(PATTERNS) + [RANDOM], default=SimConfig.pattern)
    p.add_argument("--dx", type=int, default=SimConfig.dx)
    p.add_argument("--dy", type=int, default=SimConfig.dy)
    p.add_argument("--probability", type=float, default=SimConfig.alive_probability)
    p.add_argument("--seed", type=int, default=SimConfig.seed)
    p.add_argument("--epochs", type=int, default=SimConfig.epochs, help="0 = run forever")
    p.add_argument("--delay", type=float, default=SimConfig.delay)
    p.add_argument("--period", action="store_true", help="print the period instead of animating")
    p.add_argument("--max-epochs", type=int, default=1000)
    p.add_argument("--log-level", default="WARNING")
    return p, p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    parser, args = parse_args(argv)
    init_life_log("toroid-life", getattr(logging, args.log_level.upper(), logging.WARNING))
    cfg = SimConfig(width=args.width, height=args.height, pattern=args.pattern,
                    dx=args.dx, dy=args.dy, alive_probability=args.probability,
                    seed=args.seed, epochs=args.epochs, delay=args.delay)
    try:
        field = build_field(cfg)
    except LifeError as e:
        parser.error(str(e))

    if args.period:
        try:
            period = find_period(field, args.max_epochs)
        except ValueError as e:
            parser.error(str(e))
        if period is None:
            print(f"No repeat within {args.max_epochs} epochs.")
        else:
            print(f"Field repeats in {period} epochs.")
        return 0

    try:
        run_text(field, cfg.epochs, cfg.delay)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
