"""Declarative option schema of the create pull request action.

Each option can be passed explicitly, or resolved from its own environment
variable, or (for the connection options) from a shared ``BITBUCKET_*``
variable used as a default.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..utils.env import get_env_str, split_list
from .constants import ENV_PREFIX


@dataclass(frozen=True)
class ConfigItem:
    """A single option of the action."""

    key: str
    env_name: str
    description: str
    optional: bool = False
    sensitive: bool = False
    default_env_name: str | None = None
    type: type = str

    def read_env(self) -> Any:
        """Resolve the option from the environment only."""
        names = [self.env_name]
        if self.default_env_name:
            names.append(self.default_env_name)
        raw = get_env_str(*names)
        if not raw:
            return None
        if self.type is list:
            return split_list(raw) or None
        return raw


AVAILABLE_OPTIONS: tuple[ConfigItem, ...] = (
    ConfigItem(
        key="username",
        env_name=f"{ENV_PREFIX}USERNAME",
        description="Bitbucket username",
        sensitive=True,
        default_env_name="BITBUCKET_USERNAME",
    ),
    ConfigItem(
        key="password",
        env_name=f"{ENV_PREFIX}PASSWORD",
        description="Bitbucket password",
        sensitive=True,
        default_env_name="BITBUCKET_PASSWORD",
    ),
    ConfigItem(
        key="company_host_name",
        env_name=f"{ENV_PREFIX}COMPANY_HOST_NAME",
        description="Bitbucket company host name",
        sensitive=True,
        default_env_name="BITBUCKET_COMPANY_HOST_NAME",
    ),
    ConfigItem(
        key="repository_name",
        env_name=f"{ENV_PREFIX}REPOSITORY_NAME",
        description="Bitbucket repository name",
        sensitive=True,
        default_env_name="BITBUCKET_REPOSITORY_NAME",
    ),
    ConfigItem(
        key="title",
        env_name=f"{ENV_PREFIX}TITLE",
        description="Title of the pull request",
    ),
    ConfigItem(
        key="description",
        env_name=f"{ENV_PREFIX}DESCRIPTION",
        description="Description of the pull request",
        optional=True,
    ),
    ConfigItem(
        key="reviewers",
        env_name=f"{ENV_PREFIX}REVIEWERS",
        description=(
            "List of reviewer's usernames for the pull request. "
            "If no reviewers are passed, fails back to default ones"
        ),
        optional=True,
        type=list,
    ),
    ConfigItem(
        key="source_branch",
        env_name=f"{ENV_PREFIX}SOURCE_BRANCH",
        description="Name of the source branch",
    ),
    ConfigItem(
        key="destination_branch",
        env_name=f"{ENV_PREFIX}DESTINATION_BRANCH",
        description="Name of the destination branch",
        optional=True,
    ),
)


def option_for(key: str) -> ConfigItem:
    """Return the option declared under ``key``.

    Raises:
        KeyError: If no such option exists.
    """
    for item in AVAILABLE_OPTIONS:
        if item.key == key:
            return item
    raise KeyError(key)


def resolve_option(item: ConfigItem, overrides: Mapping[str, Any]) -> Any:
    """Resolve one option: explicit value first, then the environment."""
    value = overrides.get(item.key)
    if value is not None:
        if item.type is list:
            return split_list(value)
        return value
    return item.read_env()
