"""Bitbucket Cloud module of the create pull request action."""

from atlassian.bitbucket import Bitbucket

from .client import BasicTokenAuth, BitbucketClient, basic_auth_token
from .config import PullRequestConfig
from .options import AVAILABLE_OPTIONS, ConfigItem
from .pullrequests import (
    PullRequestsMixin,
    build_pull_request_payload,
    build_pull_request_url,
)


class BitbucketFetcher(PullRequestsMixin):
    """
    The main Bitbucket Cloud client class.

    It follows the mixin layout of the client: BitbucketClient owns the
    session and credentials, PullRequestsMixin adds pull request creation.
    """

    pass


__all__ = [
    "AVAILABLE_OPTIONS",
    "BasicTokenAuth",
    "Bitbucket",
    "BitbucketClient",
    "BitbucketFetcher",
    "ConfigItem",
    "PullRequestConfig",
    "PullRequestsMixin",
    "basic_auth_token",
    "build_pull_request_payload",
    "build_pull_request_url",
]
