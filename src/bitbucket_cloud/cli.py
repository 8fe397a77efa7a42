"""Command line entry point used from CI pipelines."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from . import __version__, create_pull_request
from .bitbucket.config import PullRequestConfig
from .bitbucket.options import AVAILABLE_OPTIONS
from .context import SharedValues, WorkflowContext
from .exceptions import BitbucketConfigurationError, BitbucketRequestError
from .utils.logging import setup_logging

logger = logging.getLogger("bitbucket-cloud.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitbucket-create-pull-request",
        description="Create a new pull request inside your Bitbucket project",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be used multiple times)",
    )
    parser.add_argument(
        "--env-file", help="Path to a .env file loaded before resolving options"
    )
    parser.add_argument(
        "--no-ssl-verify",
        dest="ssl_verify",
        action="store_false",
        default=None,
        help="Disable SSL certificate verification",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the MCP server over stdio instead of creating a pull request",
    )
    for item in AVAILABLE_OPTIONS:
        flag = "--" + item.key.replace("_", "-")
        help_text = f"{item.description} (env: {item.env_name})"
        if item.type is list:
            parser.add_argument(flag, dest=item.key, nargs="+", help=help_text)
        else:
            parser.add_argument(flag, dest=item.key, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the action and print its result as JSON on stdout.

    Returns:
        0 when the pull request was created, 1 otherwise.
    """
    args = build_parser().parse_args(argv)

    if args.verbose >= 2:
        level = logging.DEBUG
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    setup_logging(level)

    if args.env_file:
        load_dotenv(args.env_file, override=False)
    else:
        load_dotenv(override=False)

    if args.serve:
        from .servers import bitbucket_mcp

        bitbucket_mcp.run()
        return 0

    overrides = {item.key: getattr(args, item.key) for item in AVAILABLE_OPTIONS}
    overrides["ssl_verify"] = args.ssl_verify

    try:
        config = PullRequestConfig.from_env(**overrides)
    except BitbucketConfigurationError as e:
        logger.error(str(e))
        print(json.dumps({"success": False, "error": str(e)}), file=sys.stderr)
        return 1

    context = WorkflowContext()
    try:
        result = create_pull_request(config, context)
    except BitbucketRequestError as e:
        print(json.dumps(e.result.to_simplified_dict(), indent=2))
        print(str(e), file=sys.stderr)
        return 1

    print(json.dumps(result.to_simplified_dict(), indent=2))
    logger.info(context.get(SharedValues.BITBUCKET_CREATE_PULL_REQUEST_RESULT))
    return 0


if __name__ == "__main__":
    sys.exit(main())
