"""Bitbucket Cloud FastMCP server instance and tool definitions."""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastmcp import Context, FastMCP
from pydantic import Field
from requests.exceptions import RequestException

from bitbucket_cloud.exceptions import (
    BitbucketConfigurationError,
    BitbucketRequestError,
)
from bitbucket_cloud.utils.decorators import check_write_access
from bitbucket_cloud.utils.io import is_read_only_mode

from .context import MainAppContext
from .dependencies import get_bitbucket_fetcher, get_workflow_context

logger = logging.getLogger("bitbucket-cloud.server.bitbucket")


@asynccontextmanager
async def bitbucket_lifespan(app: FastMCP) -> AsyncIterator[dict]:
    logger.info("Bitbucket Cloud MCP server lifespan starting...")
    app_context = MainAppContext(read_only=is_read_only_mode())
    logger.info(f"Read-only mode: {'ENABLED' if app_context.read_only else 'DISABLED'}")
    try:
        yield {"app_lifespan_context": app_context}
    finally:
        logger.info("Bitbucket Cloud MCP server lifespan shutdown complete.")


bitbucket_mcp = FastMCP(
    name="Bitbucket Cloud MCP Service",
    lifespan=bitbucket_lifespan,
)


@bitbucket_mcp.tool(tags={"bitbucket", "write"})
@check_write_access
async def create_pull_request(
    ctx: Context,
    title: Annotated[str, Field(description="Title of the pull request")],
    source_branch: Annotated[str, Field(description="Name of the source branch")],
    destination_branch: Annotated[
        str | None,
        Field(
            description="Name of the destination branch. Omit to use the repository's main branch"
        ),
    ] = None,
    description: Annotated[
        str | None, Field(description="Description of the pull request")
    ] = None,
    reviewers: Annotated[
        str | None,
        Field(
            description="Comma-separated list of reviewer usernames (e.g., 'alice,bob')"
        ),
    ] = None,
    company_host_name: Annotated[
        str | None,
        Field(
            description="Workspace slug. Defaults to BITBUCKET_COMPANY_HOST_NAME"
        ),
    ] = None,
    repository_name: Annotated[
        str | None,
        Field(description="Repository slug. Defaults to BITBUCKET_REPOSITORY_NAME"),
    ] = None,
) -> str:
    """
    Create a new pull request in a Bitbucket Cloud repository.

    Credentials always come from the environment.

    Args:
        ctx: The FastMCP context.
        title: Title of the pull request.
        source_branch: Branch to merge from.
        destination_branch: Branch to merge into.
        description: Pull request description.
        reviewers: Comma-separated reviewer usernames.
        company_host_name: Workspace slug.
        repository_name: Repository slug.

    Returns:
        JSON string with the result of the API call.

    Raises:
        ValueError: If the server is in read-only mode.
    """
    try:
        bitbucket = await get_bitbucket_fetcher(
            ctx,
            title=title,
            source_branch=source_branch,
            destination_branch=destination_branch,
            description=description,
            reviewers=reviewers,
            company_host_name=company_host_name,
            repository_name=repository_name,
        )
        result = bitbucket.create_pull_request(get_workflow_context(ctx))
        response = {
            "success": True,
            "pull_request": result.parsed_json,
            "result": result.to_simplified_dict(),
        }
    except BitbucketConfigurationError as e:
        logger.error(f"Configuration error creating pull request: {e}")
        response = {"success": False, "error": f"Configuration Error: {e}"}
    except BitbucketRequestError as e:
        response = {
            "success": False,
            "error": str(e),
            "result": e.result.to_simplified_dict(),
        }
    except (RequestException, OSError) as e:
        logger.error(f"Network error creating pull request: {e}")
        response = {"success": False, "error": f"Network or API Error: {e}"}
    except Exception as e:  # noqa: BLE001 - Intentional fallback with logging
        logger.error(f"Unexpected error creating pull request: {e}", exc_info=True)
        response = {"success": False, "error": f"An unexpected error occurred: {e}"}

    return json.dumps(response, indent=2, ensure_ascii=False)
