"""Base client module for Bitbucket Cloud API interactions."""

import base64
import logging
import os
from typing import Any

from atlassian import Bitbucket
from requests import PreparedRequest, Response
from requests.auth import AuthBase

from ..utils.logging import get_masked_headers, mask_sensitive
from ..utils.ssl import configure_ssl_verification
from .config import PullRequestConfig
from .constants import CLOUD_API_ROOT

# Configure logging
logger = logging.getLogger("bitbucket-cloud")


def basic_auth_token(username: str, password: str) -> str:
    """Return the base64 token of a ``username:password`` pair."""
    credentials = f"{username}:{password}".encode()
    return base64.b64encode(credentials).decode("ascii")


class BasicTokenAuth(AuthBase):
    """Attach ``Authorization: Basic <token>`` when a request is prepared.

    The header is added by the session rather than passed with the request
    headers, so the atlassian client never writes it to its curl debug log.
    """

    def __init__(self, token: str) -> None:
        self.token = token

    def __call__(self, request: PreparedRequest) -> PreparedRequest:
        request.headers["Authorization"] = f"Basic {self.token}"
        return request


class BitbucketClient:
    """Base client for Bitbucket Cloud API interactions."""

    config: PullRequestConfig

    def __init__(self, config: PullRequestConfig | None = None) -> None:
        """Initialize the Bitbucket client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            BitbucketConfigurationError: If required options are missing
        """
        self.config = config or PullRequestConfig.from_env()

        logger.debug(
            f"Initializing Bitbucket Cloud client. "
            f"Workspace: {self.config.company_host_name}, "
            f"Repository: {self.config.repository_name}, "
            f"Username: {self.config.username}, "
            f"Password (masked): {mask_sensitive(self.config.password)}"
        )
        # Exactly one request per call: no Retry-After or backoff retries
        self.bitbucket = Bitbucket(
            url=CLOUD_API_ROOT,
            cloud=True,
            verify_ssl=self.config.ssl_verify,
            backoff_and_retry=False,
            retry_with_header=False,
        )
        self.bitbucket._session.auth = BasicTokenAuth(self.auth_token)

        configure_ssl_verification(
            service_name="Bitbucket",
            url=CLOUD_API_ROOT,
            session=self.bitbucket._session,
            ssl_verify=self.config.ssl_verify,
        )

        proxies = {}
        http_proxy = os.getenv("BITBUCKET_HTTP_PROXY", os.getenv("HTTP_PROXY"))
        https_proxy = os.getenv("BITBUCKET_HTTPS_PROXY", os.getenv("HTTPS_PROXY"))
        if http_proxy:
            proxies["http"] = http_proxy
        if https_proxy:
            proxies["https"] = https_proxy

        if proxies:
            self.bitbucket._session.proxies.update(proxies)
            logger.debug(f"Configured proxies: {proxies}")

    @property
    def auth_token(self) -> str:
        return basic_auth_token(self.config.username, self.config.password)

    def build_headers(self) -> dict[str, str]:
        """Headers passed with every request of this client.

        ``Authorization`` is not among them; the session's auth handler adds it.
        """
        return {"Content-Type": "application/json"}

    def post_json(self, url: str, payload: dict[str, Any]) -> Response:
        """Issue a single POST of ``payload`` and return the raw response.

        The response is returned whatever its status; transport errors raised by
        requests propagate unchanged.
        """
        headers = self.build_headers()
        logger.debug(f"POST {url} headers={get_masked_headers(headers)}")
        return self.bitbucket.post(
            url,
            data=payload,
            headers=headers,
            absolute=True,
            advanced_mode=True,
        )
