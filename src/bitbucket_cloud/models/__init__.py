"""Pydantic models for Bitbucket Cloud API responses."""

from .base import ApiModel
from .bitbucket import PullRequestResult

__all__ = [
    "ApiModel",
    "PullRequestResult",
]
