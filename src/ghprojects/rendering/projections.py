"""JSON projections for ``--format json``.

Projections are built by hand rather than dumped from the models so the
output shape stays stable when the GraphQL selection changes. Collections
are emitted as a single JSON array on one line.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from ghprojects.models.field import Iteration, IterationField, ProjectField, SelectOption
from ghprojects.models.item import DraftIssueContent, ProjectItem, RepositoryContent
from ghprojects.models.project import Project, ProjectSummary


def dumps(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def field_key(name: str) -> str:
    """Output key for a field name: the name with its first letter lowercased."""
    return name[:1].lower() + name[1:]


# ------------------------------------------------------------------
# Projects
# ------------------------------------------------------------------


def project_data(project: ProjectSummary) -> dict[str, Any]:
    data: dict[str, Any] = {
        "number": project.number,
        "url": project.url,
        "shortDescription": project.short_description,
        "public": project.public,
        "closed": project.closed,
        "title": project.title,
        "id": project.id,
    }
    if isinstance(project, Project):
        data.update(
            {
                "readme": project.readme,
                "items": {"totalCount": project.item_count},
                "fields": {"totalCount": project.field_count},
                "owner": {"type": project.owner_type, "login": project.owner_login},
            }
        )
    return data


def projects_data(projects: Iterable[ProjectSummary]) -> list[dict[str, Any]]:
    return [project_data(p) for p in projects]


# ------------------------------------------------------------------
# Fields
# ------------------------------------------------------------------


def field_data(field: ProjectField) -> dict[str, Any]:
    return {"id": field.id, "name": field.name, "type": field.type}


def fields_data(fields: Iterable[ProjectField]) -> list[dict[str, Any]]:
    return [field_data(f) for f in fields]


def ordered_iterations(field: IterationField) -> list[tuple[Iteration, bool]]:
    """Iterations paired with their completed flag, in display order.

    Completed iterations come first, most recent first, followed by the
    current and upcoming ones in chronological order.
    """
    completed = [(i, True) for i in reversed(field.completed_iterations)]
    return completed + [(i, False) for i in field.iterations]


def iteration_options_data(field: IterationField) -> list[dict[str, Any]]:
    return [
        {
            "id": iteration.id,
            "title": iteration.title,
            "duration": iteration.duration,
            "startDate": iteration.start_date,
            "completed": completed,
        }
        for iteration, completed in ordered_iterations(field)
    ]


def select_options_data(options: Iterable[SelectOption]) -> list[dict[str, Any]]:
    return [{"id": o.id, "name": o.name} for o in options]


# ------------------------------------------------------------------
# Items
# ------------------------------------------------------------------


def draft_issue_data(draft: DraftIssueContent) -> dict[str, Any]:
    return {"id": draft.id, "title": draft.title, "body": draft.body, "type": draft.type}


def item_data(item: ProjectItem) -> dict[str, Any]:
    return {"id": item.id, "title": item.title, "body": item.body, "type": item.type}


def item_content_data(item: ProjectItem) -> dict[str, Any] | None:
    content = item.content
    if isinstance(content, DraftIssueContent):
        return {"type": content.type, "body": content.body, "title": content.title}
    if isinstance(content, RepositoryContent):
        return {
            "type": content.type,
            "body": content.body,
            "title": content.title,
            "number": content.number,
            "repository": content.repository,
        }
    return None


def items_data(project: Project) -> list[dict[str, Any]]:
    """Items with their content and one key per set field value.

    Values are keyed by field name, looked up from the project's fields by
    ID. A value whose field was not fetched falls back to the field name
    embedded in the value, then to the field ID.
    """
    names = {f.id: f.name for f in project.fields}
    result: list[dict[str, Any]] = []
    for item in project.items:
        entry: dict[str, Any] = {"id": item.id, "content": item_content_data(item)}
        for value in item.field_values:
            name = names.get(value.field_id) or value.field_name or value.field_id
            entry[field_key(name)] = value.data()
        result.append(entry)
    return result
