# Simple logging util.

import logging
from typing import Optional


def init_life_log(title: str, lvl: int = logging.INFO, filename: Optional[str] = None) -> None:
    # filename=None logs to stderr
    logging.basicConfig(
        filename=filename,
        level=lvl,
        format='%(asctime)s | %(levelname)s | %(message)s')
    logging.info('Game of life [' + title + '] started logging.')
