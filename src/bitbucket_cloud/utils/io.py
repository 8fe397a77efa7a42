"""I/O utility functions for the Bitbucket Cloud action."""

from __future__ import annotations

import os
from typing import Final

TRUTHY_VALUES: Final[set[str]] = {"true", "1", "yes", "y", "on"}
FALSY_VALUES: Final[set[str]] = {"false", "0", "no", "n", "off"}


def parse_extended_bool(value: str | bool | None) -> bool | None:
    """Convert a string or boolean flag into a canonical bool value.

    Returns:
        True/False when the value is recognized, otherwise None.
    """
    if isinstance(value, bool):
        return value

    if value is None:
        return None

    normalized = value.strip().lower()
    if not normalized:
        return None

    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    return None


def get_env_read_only_flag() -> bool | None:
    """Return the READ_ONLY_MODE environment flag, if provided."""
    return parse_extended_bool(os.getenv("READ_ONLY_MODE"))


def is_read_only_mode() -> bool:
    """Check if write actions are disabled for this process."""
    return bool(get_env_read_only_flag())
