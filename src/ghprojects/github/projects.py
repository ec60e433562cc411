"""Project, field, item and resource resolution queries."""

from __future__ import annotations

import logging
from typing import Any

from ghprojects.exceptions import NotFoundError
from ghprojects.github.client import GraphQLClient
from ghprojects.github.mapper import decode_project, decode_project_summary
from ghprojects.github.queries import PROJECT_QUERIES, PROJECTS_QUERIES, RESOURCE_ID, operation_name, root_key
from ghprojects.models.field import ProjectField
from ghprojects.models.item import ProjectItem
from ghprojects.models.owner import Owner, OwnerType
from ghprojects.models.project import Project, ProjectSummary

_LOG = logging.getLogger(__name__)

PAGE_SIZE = 100
"""Largest page the GitHub API serves for a connection."""

DEFAULT_LIMIT = 100


def _page_info(node: dict[str, Any], connection: str) -> tuple[bool, str | None]:
    conn = node.get(connection)
    info = conn.get("pageInfo") if isinstance(conn, dict) else None
    if not isinstance(info, dict):
        return False, None
    cursor = info.get("endCursor")
    return info.get("hasNextPage") is True, cursor if isinstance(cursor, str) else None


def _owner_variables(owner: Owner) -> dict[str, Any]:
    if owner.type is OwnerType.VIEWER:
        return {}
    return {"login": owner.login}


def _next_page_size(limit: int, collected: int) -> int:
    return max(0, min(PAGE_SIZE, limit - collected))


async def resolve_project(
    client: GraphQLClient,
    owner: Owner,
    number: int,
    *,
    item_limit: int = 0,
    field_limit: int = 0,
) -> Project:
    """Fetch project *number* of *owner*.

    With both limits at zero only the project itself and its totals are
    requested. Otherwise items and fields are fetched page by page until each
    limit is reached or its connection is exhausted.

    Raises:
        NotFoundError: If the owner has no project with that number.
    """
    items: list[ProjectItem] = []
    fields: list[ProjectField] = []
    after_items: str | None = None
    after_fields: str | None = None
    first_items = _next_page_size(item_limit, 0)
    first_fields = _next_page_size(field_limit, 0)
    project: Project | None = None

    while True:
        variables = {
            **_owner_variables(owner),
            "number": number,
            "firstItems": first_items,
            "afterItems": after_items,
            "firstFields": first_fields,
            "afterFields": after_fields,
        }
        data = await client.execute(
            PROJECT_QUERIES[owner.type],
            variables,
            operation=operation_name(owner.type, "Project"),
        )
        root = data.get(root_key(owner.type))
        node = root.get("projectV2") if isinstance(root, dict) else None
        if not isinstance(node, dict):
            raise NotFoundError(f"project {number} not found for {owner.login}")

        page = decode_project(node)
        if project is None:
            project = page
        items.extend(page.items[:first_items])
        fields.extend(page.fields[:first_fields])

        more_items, after_items = _page_info(node, "items")
        more_fields, after_fields = _page_info(node, "fields")
        first_items = _next_page_size(item_limit, len(items)) if first_items and more_items else 0
        first_fields = _next_page_size(field_limit, len(fields)) if first_fields and more_fields else 0
        if not first_items and not first_fields:
            break
        _LOG.debug("Fetching next page of project %s (items=%s, fields=%s)", number, first_items, first_fields)

    return project.model_copy(update={"items": items, "fields": fields})


async def project_fields(client: GraphQLClient, owner: Owner, number: int, limit: int = DEFAULT_LIMIT) -> Project:
    """Project *number* with up to *limit* fields."""
    return await resolve_project(client, owner, number, field_limit=limit)


async def project_items(client: GraphQLClient, owner: Owner, number: int, limit: int = DEFAULT_LIMIT) -> Project:
    """Project *number* with up to *limit* items and the fields they refer to."""
    return await resolve_project(client, owner, number, item_limit=limit, field_limit=DEFAULT_LIMIT)


async def list_projects(
    client: GraphQLClient,
    owner: Owner,
    limit: int = DEFAULT_LIMIT,
) -> tuple[list[ProjectSummary], int]:
    """Return up to *limit* projects of *owner* and the owner's total count."""
    projects: list[ProjectSummary] = []
    after: str | None = None
    total = 0

    while True:
        first = _next_page_size(limit, len(projects))
        if first == 0:
            break
        data = await client.execute(
            PROJECTS_QUERIES[owner.type],
            {**_owner_variables(owner), "first": first, "after": after},
            operation=operation_name(owner.type, "Projects"),
        )
        root = data.get(root_key(owner.type))
        if not isinstance(root, dict):
            raise NotFoundError(f"could not find owner {owner.login}")
        connection = root.get("projectsV2")
        connection = connection if isinstance(connection, dict) else {}
        nodes = connection.get("nodes")
        projects.extend(decode_project_summary(n) for n in (nodes if isinstance(nodes, list) else []) if n)
        total = connection.get("totalCount") if isinstance(connection.get("totalCount"), int) else len(projects)

        has_next, after = _page_info(root, "projectsV2")
        if not has_next:
            break

    return projects[:limit], total


async def resource_id(client: GraphQLClient, url: str) -> str:
    """Resolve an issue or pull request URL to its node ID.

    Raises:
        NotFoundError: If *url* does not point at an issue or pull request.
    """
    data = await client.execute(RESOURCE_ID, {"url": url}, operation="IssueOrPullRequest")
    resource = data.get("resource")
    if not isinstance(resource, dict) or resource.get("__typename") not in {"Issue", "PullRequest"}:
        raise NotFoundError(f"{url} is not an issue or pull request")
    node_id = resource.get("id")
    if not isinstance(node_id, str) or not node_id:
        raise NotFoundError(f"{url} is not an issue or pull request")
    return node_id
