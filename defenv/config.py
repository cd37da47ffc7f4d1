"""DEFENV FILE PURPOSE
Purpose: raw environment lookups and the package debug flag.
Hot path: yes (every accessor call; read-only env lookups).
Feature flags: DEFENV_DEBUG.
Failure mode: absent variables are reported as None, never raised.
"""

from __future__ import annotations

import os


def lookup_env(name: str) -> str | None:
    # None means absent; "" is a present value.
    return os.getenv(name)


def env_flag(name: str, default: str = "0") -> bool:
    v = (os.getenv(name) or default).strip().lower()
    return v in ("1", "true", "yes", "on")


def is_debug() -> bool:
    return env_flag("DEFENV_DEBUG", "0")
