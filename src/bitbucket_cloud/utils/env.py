"""Environment variable helpers."""

import os

from .io import parse_extended_bool


def get_env_str(*names: str) -> str | None:
    """Return the first non-empty value among the given environment variables."""
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def split_list(value: str | list[str] | tuple[str, ...] | None) -> list[str] | None:
    """Turn a comma separated string (or a sequence) into a list of names.

    Blank entries are dropped and order is preserved. Returns None when the
    input is None.
    """
    if value is None:
        return None
    items = value.split(",") if isinstance(value, str) else value
    return [str(item).strip() for item in items if str(item).strip()]


def is_env_ssl_verify(env_var_name: str, default: bool = True) -> bool:
    """Return whether SSL verification is enabled according to an env var.

    Unrecognized values fall back to ``default``.
    """
    parsed = parse_extended_bool(os.getenv(env_var_name))
    return default if parsed is None else parsed
