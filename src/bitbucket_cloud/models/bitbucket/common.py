"""
Bitbucket Cloud result models.

This module provides the Pydantic model describing the normalized outcome of a
pull request creation request.
"""

import json
import logging
from typing import Any

from pydantic import Field
from requests import Response

from ..base import ApiModel

logger = logging.getLogger("bitbucket-cloud.models")


def parse_json_body(body: str | None) -> dict[str, Any]:
    """Parse ``body`` as a JSON object, returning {} when that is not possible."""
    if not body:
        return {}
    try:
        parsed = json.loads(body)
    except ValueError:
        logger.debug("Response body is not valid JSON")
        return {}
    return parsed if isinstance(parsed, dict) else {}


class PullRequestResult(ApiModel):
    """Model representing the normalized outcome of a create pull request call."""

    status: int
    reason_phrase: str = ""
    body: str = ""
    parsed_json: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_response(cls, response: Response) -> "PullRequestResult":
        """Create a PullRequestResult from any HTTP response, whatever its status."""
        body = response.text or ""
        return cls(
            status=response.status_code,
            reason_phrase=response.reason or "",
            body=body,
            parsed_json=parse_json_body(body),
        )

    @property
    def is_created(self) -> bool:
        # 201 is the only status treated as success
        return self.status == 201

    def context_summary(self) -> str:
        """One-line summary published to the workflow context."""
        return f"Status code: {self.status}, reason: {self.reason_phrase}"
