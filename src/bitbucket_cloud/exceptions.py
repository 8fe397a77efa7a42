"""Exceptions raised by the Bitbucket Cloud pull request action."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.bitbucket.common import PullRequestResult


class BitbucketCloudError(Exception):
    """Base class for errors raised by this package."""


class BitbucketConfigurationError(BitbucketCloudError, ValueError):
    """Raised when required options are missing or invalid."""

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing = missing or []


class BitbucketRequestError(BitbucketCloudError):
    """Raised when Bitbucket answers with anything other than 201 Created."""

    def __init__(self, message: str, result: "PullRequestResult") -> None:
        super().__init__(message)
        self.result = result

    @property
    def status(self) -> int:
        return self.result.status

    @property
    def reason_phrase(self) -> str:
        return self.result.reason_phrase
