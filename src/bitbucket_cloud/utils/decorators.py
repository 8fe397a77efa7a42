import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from fastmcp import Context

from bitbucket_cloud.utils.io import get_env_read_only_flag

logger = logging.getLogger(__name__)


F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def check_write_access(func: F) -> F:
    """
    Decorator for FastMCP tools to refuse writes when the server is read-only.

    The lifespan context value wins over the READ_ONLY_MODE environment flag.
    Assumes the decorated function is async and has `ctx: Context` as its first argument.
    """

    @wraps(func)
    async def wrapper(ctx: Context, *args: Any, **kwargs: Any) -> Any:
        req_context = getattr(ctx, "request_context", None)
        lifespan_ctx_dict = (
            req_context.lifespan_context if req_context else {}  # type: ignore[attr-defined]
        )
        app_lifespan_ctx = (
            lifespan_ctx_dict.get("app_lifespan_context")
            if isinstance(lifespan_ctx_dict, dict)
            else None
        )

        read_only = getattr(app_lifespan_ctx, "read_only", None)
        if read_only is None:
            read_only = bool(get_env_read_only_flag())

        if read_only:
            tool_name = func.__name__
            action_description = tool_name.replace("_", " ")
            logger.warning(f"Attempted to call tool '{tool_name}' in read-only mode.")
            msg = f"Cannot {action_description} in read-only mode."
            raise ValueError(msg)

        return await func(ctx, *args, **kwargs)

    return wrapper  # type: ignore
