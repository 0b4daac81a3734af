"""Environment-driven defaults."""
from __future__ import annotations

import os
from typing import Optional


def env_int(name: str, default: Optional[int]) -> Optional[int]:
    """
    Read a positive integer from environment variable *name*.

    Returns *default* when the variable is unset or blank.
    Raises ValueError if the value is not a positive integer.
    """
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


# Round-0 label shared by every node. Dictionaries issue codes from 1.
INITIAL_LABEL = 0

DEFAULT_ITERATIONS = env_int("WLKERNEL_ITERATIONS", 2)
MAX_ROUNDS = env_int("WLKERNEL_MAX_ROUNDS", None)
