"""FastMCP server exposing the Bitbucket Cloud action as a tool."""

from .bitbucket import bitbucket_mcp

__all__ = ["bitbucket_mcp"]
