"""Shared base for blog entities and read views."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for posts, taxonomy and comment models.

    Instances are frozen; services build new ones with model_copy rather
    than mutating what a repository returned.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
