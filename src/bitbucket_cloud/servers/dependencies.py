"""Helpers resolving per-call dependencies of the server tools."""

import logging
from typing import Any

from fastmcp import Context

from bitbucket_cloud.bitbucket import BitbucketFetcher, PullRequestConfig
from bitbucket_cloud.context import WorkflowContext

from .context import MainAppContext

logger = logging.getLogger("bitbucket-cloud.servers.dependencies")


def get_app_context(ctx: Context) -> MainAppContext | None:
    req_context = getattr(ctx, "request_context", None)
    lifespan_ctx_dict = getattr(req_context, "lifespan_context", None)
    if isinstance(lifespan_ctx_dict, dict):
        return lifespan_ctx_dict.get("app_lifespan_context")
    return None


def get_workflow_context(ctx: Context) -> WorkflowContext | None:
    """Return the workflow context held by the server lifespan, if any."""
    app_context = get_app_context(ctx)
    return app_context.workflow_context if app_context else None


async def get_bitbucket_fetcher(ctx: Context, **options: Any) -> BitbucketFetcher:
    """Build a fetcher from tool arguments merged over the environment.

    Raises:
        BitbucketConfigurationError: If required options are still missing.
    """
    config = PullRequestConfig.from_env(**options)
    logger.debug(
        f"Creating Bitbucket fetcher for "
        f"{config.company_host_name}/{config.repository_name}"
    )
    return BitbucketFetcher(config=config)
