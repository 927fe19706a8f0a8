"""Configuration utilities for ITEMFLOW.

This module centralizes the composition constants and the environment
variables read by the application.
"""

from __future__ import annotations

import os
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

FRIENDS_RETRY_COUNT = 2  # pragma: no mutate
TRANSFERS_RETRY_COUNT = 1  # pragma: no mutate

PREMIUM_ENV_VAR = "ITEMFLOW_PREMIUM"  # pragma: no mutate
DATA_PATH_ENV_VAR = "ITEMFLOW_DATA_PATH"  # pragma: no mutate
SAMPLE_DATA_RESOURCE = "sample_data.json"  # pragma: no mutate

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def is_premium_from_env() -> bool:
    """Return whether `ITEMFLOW_PREMIUM` marks the user as premium.

    Accepts ``1``, ``true``, ``yes`` and ``on`` (case-insensitive); anything
    else, including an unset variable, means non-premium.
    """
    return os.environ.get(PREMIUM_ENV_VAR, "").strip().lower() in _TRUTHY


def sample_data() -> Traversable:
    """Return the packaged sample fixture."""
    return files("itemflow.adapters").joinpath(SAMPLE_DATA_RESOURCE)


def get_data_path() -> Path | None:
    """Get the fixture path from the environment.

    Returns:
        The value of `ITEMFLOW_DATA_PATH` as a path, or None when it is unset,
        in which case callers fall back to `sample_data()`.
    """
    if not (path := os.environ.get(DATA_PATH_ENV_VAR)):
        return None
    return Path(path)
