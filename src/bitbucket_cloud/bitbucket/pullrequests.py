"""Module for Bitbucket Cloud pull request operations."""

import logging
from typing import Any

from ..context import SharedValues, WorkflowContext
from ..exceptions import BitbucketRequestError
from ..models.bitbucket.common import PullRequestResult
from .client import BitbucketClient
from .config import PullRequestConfig
from .constants import PULL_REQUESTS_URL_TEMPLATE

logger = logging.getLogger("bitbucket-cloud.pullrequests")


def build_pull_request_url(config: PullRequestConfig) -> str:
    """Return the pull requests endpoint of the configured repository.

    Path segments are inserted verbatim; callers supply URL-safe values.
    """
    return PULL_REQUESTS_URL_TEMPLATE.format(
        workspace=config.company_host_name,
        repository=config.repository_name,
    )


def build_pull_request_payload(config: PullRequestConfig) -> dict[str, Any]:
    """Build the JSON body of a create pull request call.

    Optional keys are left out entirely when their value is empty.
    """
    payload: dict[str, Any] = {
        "title": config.title,
        "source": {"branch": {"name": config.source_branch}},
    }
    if config.destination_branch:
        payload["destination"] = {"branch": {"name": config.destination_branch}}
    if config.description:
        payload["description"] = config.description
    if config.reviewers:
        payload["reviewers"] = [{"username": name} for name in config.reviewers]
    return payload


def describe_pull_request(config: PullRequestConfig) -> str:
    """Human readable summary of the pull request about to be created."""
    message = f"Plugin Bitbucket will create a new pull request from '{config.source_branch}'"
    if config.destination_branch:
        message += f" to '{config.destination_branch}'"
    message += f" with title '{config.title}'"
    if config.description:
        message += f" and description '{config.description}'"
    return message


class PullRequestsMixin(BitbucketClient):
    """Mixin for Bitbucket Cloud pull request operations."""

    def create_pull_request(
        self, context: WorkflowContext | None = None
    ) -> PullRequestResult:
        """
        Create a new pull request from the configured options.

        Args:
            context: Workflow context receiving a status summary under
                SharedValues.BITBUCKET_CREATE_PULL_REQUEST_RESULT

        Returns:
            The normalized result of the API call

        Raises:
            BitbucketRequestError: If Bitbucket answers with any status other than 201.
                The context has already been updated when this is raised.
            requests.exceptions.RequestException: If the request could not be completed
        """
        url = build_pull_request_url(self.config)
        payload = build_pull_request_payload(self.config)

        logger.info(describe_pull_request(self.config))

        response = self.post_json(url, payload)
        result = PullRequestResult.from_response(response)

        logger.info("Plugin Bitbucket finished with result")
        logger.info(str(result.to_simplified_dict()))

        if context is not None:
            context.set(
                SharedValues.BITBUCKET_CREATE_PULL_REQUEST_RESULT,
                result.context_summary(),
            )

        if not result.is_created:
            error_msg = (
                f"Plugin Bitbucket finished with error code "
                f"{result.status} {result.reason_phrase}"
            )
            logger.error(error_msg)
            raise BitbucketRequestError(error_msg, result)

        logger.info("Successfully created a new Bitbucket pull request!")
        return result
