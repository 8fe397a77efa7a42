"""Logging helpers for the Bitbucket Cloud action."""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "bitbucket-cloud"

SENSITIVE_HEADERS = {"authorization", "cookie", "proxy-authorization"}


def setup_logging(
    level: int = logging.WARNING, stream: TextIO | None = None
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: The logging level to use.
        stream: Output stream, stderr by default so stdout stays free for results.

    Returns:
        The configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret, keeping a few characters at each end.

    Args:
        value: The secret to mask.
        keep_chars: Number of characters to keep visible at start and end.

    Returns:
        The masked string, or "Not Provided" when there is nothing to mask.
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    start = value[:keep_chars]
    end = value[-keep_chars:]
    return f"{start}{'*' * (len(value) - keep_chars * 2)}{end}"


def get_masked_headers(headers: dict[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` safe to log."""
    masked: dict[str, str] = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            scheme, _, credential = value.partition(" ")
            if credential:
                masked[key] = f"{scheme} {mask_sensitive(credential)}"
            else:
                masked[key] = mask_sensitive(value)
        else:
            masked[key] = value
    return masked
