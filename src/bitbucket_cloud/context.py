"""Workflow context shared between the steps of a single CI run."""

from dataclasses import dataclass, field
from typing import Any


class SharedValues:
    """Keys under which actions publish their output."""

    BITBUCKET_CREATE_PULL_REQUEST_RESULT = "BITBUCKET_CREATE_PULL_REQUEST_RESULT"


@dataclass
class WorkflowContext:
    """Key-value store written by one workflow step and read by later ones.

    Writes replace any previous value for the key; no history is kept.
    """

    values: dict[str, Any] = field(default_factory=dict)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.values
