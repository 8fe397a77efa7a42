"""Bitbucket models module."""

from .common import PullRequestResult, parse_json_body

__all__ = [
    "PullRequestResult",
    "parse_json_body",
]
