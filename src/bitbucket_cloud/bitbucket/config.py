"""Configuration module for the create pull request action."""

from dataclasses import dataclass, fields
from typing import Any

from ..exceptions import BitbucketConfigurationError
from ..utils.env import is_env_ssl_verify, split_list
from .options import AVAILABLE_OPTIONS, resolve_option


@dataclass(frozen=True)
class PullRequestConfig:
    """Options of a single create pull request invocation.

    Reviewers are sent exactly as given; no default reviewers are looked up.
    """

    username: str  # Bitbucket username (Basic auth)
    password: str  # Bitbucket password or app password
    company_host_name: str  # Workspace slug
    repository_name: str  # Repository slug
    title: str
    source_branch: str
    description: str | None = None
    reviewers: tuple[str, ...] = ()
    destination_branch: str | None = None
    ssl_verify: bool = True  # Whether to verify SSL certificates

    def __post_init__(self) -> None:
        # Lists and comma separated strings are accepted, stored as a tuple
        if not isinstance(self.reviewers, tuple):
            reviewers = split_list(self.reviewers) or ()
            object.__setattr__(self, "reviewers", tuple(reviewers))

    def missing_fields(self) -> list[str]:
        """Return the keys of required options that have no value."""
        return [
            item.key
            for item in AVAILABLE_OPTIONS
            if not item.optional and not getattr(self, item.key)
        ]

    def is_auth_configured(self) -> bool:
        """Check if both halves of the credential pair are present."""
        return bool(self.username and self.password)

    @classmethod
    def from_env(cls, **overrides: Any) -> "PullRequestConfig":
        """Create configuration from explicit values and environment variables.

        Explicit values that are not None take precedence over the environment.

        Returns:
            PullRequestConfig with all required options set

        Raises:
            BitbucketConfigurationError: If required options are missing or
                unknown option names are passed
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            error_msg = f"Unknown option(s): {', '.join(unknown)}"
            raise BitbucketConfigurationError(error_msg)

        values: dict[str, Any] = {
            item.key: resolve_option(item, overrides) for item in AVAILABLE_OPTIONS
        }

        missing = [
            item.key
            for item in AVAILABLE_OPTIONS
            if not item.optional and not values[item.key]
        ]
        if missing:
            env_names = ", ".join(
                item.env_name for item in AVAILABLE_OPTIONS if item.key in missing
            )
            error_msg = (
                f"Missing required option(s): {', '.join(missing)}. "
                f"Pass them explicitly or set {env_names}"
            )
            raise BitbucketConfigurationError(error_msg, missing=missing)

        ssl_verify = overrides.get("ssl_verify")
        values["ssl_verify"] = (
            is_env_ssl_verify("BITBUCKET_SSL_VERIFY")
            if ssl_verify is None
            else bool(ssl_verify)
        )
        values["reviewers"] = tuple(values["reviewers"] or ())

        return cls(**values)
