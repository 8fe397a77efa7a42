"""Create Bitbucket Cloud pull requests from CI workflows."""

from .bitbucket import BitbucketFetcher, PullRequestConfig
from .context import SharedValues, WorkflowContext
from .exceptions import (
    BitbucketCloudError,
    BitbucketConfigurationError,
    BitbucketRequestError,
)
from .models import PullRequestResult

__version__ = "0.1.0"


def create_pull_request(
    config: PullRequestConfig, context: WorkflowContext | None = None
) -> PullRequestResult:
    """Create one pull request described by ``config``.

    The status summary is written to ``context`` before any BitbucketRequestError
    is raised.
    """
    return BitbucketFetcher(config).create_pull_request(context)


__all__ = [
    "BitbucketCloudError",
    "BitbucketConfigurationError",
    "BitbucketFetcher",
    "BitbucketRequestError",
    "PullRequestConfig",
    "PullRequestResult",
    "SharedValues",
    "WorkflowContext",
    "create_pull_request",
]
