"""Logger wiring.

Modules take a child logger with ``logging.getLogger(__name__)``; the process
entry point calls ``setup_logger`` once to attach the stdout handler and level to
the ``httpmediator`` root logger.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "httpmediator"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str = ROOT_LOGGER, level: int | str = logging.INFO) -> logging.Logger:
    """Configure and return ``name`` with a single stdout handler.

    Safe to call repeatedly (uvicorn --reload imports modules again): the
    level is updated, the handler is only added once.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    # Avoid propagating to root and double-printing under uvicorn
    logger.propagate = False
    return logger
