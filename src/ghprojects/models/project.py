"""Models for projects as returned by the GitHub Projects API.

A project is addressed by ``(owner, number)``; its global node ID is resolved
once per invocation and echoed back in every mutation input.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ghprojects.models.field import ProjectField
from ghprojects.models.item import ProjectItem

# ------------------------------------------------------------------
# Listing
# ------------------------------------------------------------------


class ProjectSummary(BaseModel):
    """A project row as returned by an owner's ``projectsV2`` connection."""

    id: str = ""
    number: int = 0
    title: str = ""
    url: str = ""
    short_description: str = ""
    public: bool = False
    closed: bool = False

    model_config = {"frozen": True}


# ------------------------------------------------------------------
# Full project
# ------------------------------------------------------------------


class Project(ProjectSummary):
    """A single project with its counts and any fetched fields/items.

    ``fields`` and ``items`` only hold what the resolving query asked for;
    ``field_count`` and ``item_count`` are always the server-side totals.
    """

    readme: str = ""
    item_count: int = 0
    field_count: int = 0
    fields: list[ProjectField] = Field(default_factory=list)
    items: list[ProjectItem] = Field(default_factory=list)
    owner_type: str = ""
    """GraphQL type name of the owner: ``User`` or ``Organization``."""
    owner_login: str = ""
