"""DEFENV FILE PURPOSE
Purpose: logging setup with strict debug gating.
Hot path: yes (fallback logging sits in accessor calls; default is quiet).
Feature flags: DEFENV_DEBUG.
Failure mode: never crash due to logging; raw env values are never logged.
"""

from __future__ import annotations

import logging

from defenv.config import is_debug


def _configure() -> logging.Logger:
    logger = logging.getLogger("defenv")
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    # Records stop here; the root logger never sees them.
    logger.propagate = False
    logger.setLevel(logging.INFO if is_debug() else logging.WARNING)
    return logger


logger = _configure()
