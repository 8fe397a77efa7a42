"""
Utility functions for the Bitbucket Cloud action.
"""

from .env import get_env_str, is_env_ssl_verify, split_list
from .io import is_read_only_mode, parse_extended_bool
from .logging import mask_sensitive, setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification

__all__ = [
    "SSLIgnoreAdapter",
    "configure_ssl_verification",
    "get_env_str",
    "is_env_ssl_verify",
    "is_read_only_mode",
    "mask_sensitive",
    "parse_extended_bool",
    "setup_logging",
    "split_list",
]
