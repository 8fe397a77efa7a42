"""
Base models shared by the Bitbucket Cloud models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Base model for values built from Bitbucket API responses."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert the model to a plain dictionary for serialization."""
        return self.model_dump(by_alias=True, exclude_none=True)
