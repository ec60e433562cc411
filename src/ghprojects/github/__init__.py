"""GitHub Projects v2 GraphQL access."""

from ghprojects.github.client import GraphQLClient
from ghprojects.github.owners import resolve_owner
from ghprojects.github.progress import NullRequestProgress, RequestProgress
from ghprojects.github.projects import (
    list_projects,
    project_fields,
    project_items,
    resolve_project,
    resource_id,
)

__all__ = [
    "GraphQLClient",
    "NullRequestProgress",
    "RequestProgress",
    "list_projects",
    "project_fields",
    "project_items",
    "resolve_owner",
    "resolve_project",
    "resource_id",
]
