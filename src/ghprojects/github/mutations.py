"""Mutation builders.

Each ``build_*`` function is pure: it validates its options and returns the
document, operation name and variables to send, without touching the network.
Invalid options raise before anything is built. The validating helpers
(``require_title``, ``project_changes_input``, ``new_field_input``) are public
so commands can reject bad input before resolving any IDs.

Optional inputs are tri-state. A ``*Changes`` model only serializes the
attributes that were explicitly passed to it, so ``title=""`` clears a title
while an omitted title is left untouched.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ghprojects.exceptions import ConfigError, ValidationError
from ghprojects.github import queries

DRAFT_ISSUE_PREFIX = "DI_"
FIELD_DATA_TYPES = ("TEXT", "SINGLE_SELECT", "DATE", "NUMBER")
VISIBILITIES = {"PUBLIC": True, "PRIVATE": False}
DEFAULT_OPTION_COLOR = "GRAY"


class Mutation(BaseModel):
    """A ready-to-send GraphQL mutation."""

    operation: str
    document: str
    variables: dict[str, Any]

    model_config = {"frozen": True}


class _Changes(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def dump(self) -> dict[str, Any]:
        """The explicitly set attributes, keyed by their GraphQL input names."""
        return self.model_dump(by_alias=True, exclude_unset=True)

    def require_any(self) -> None:
        if not self.model_fields_set:
            raise ConfigError("no fields to edit")


class ProjectChanges(_Changes):
    title: str | None = None
    short_description: str | None = None
    readme: str | None = None
    visibility: str | None = None


class FieldChanges(_Changes):
    name: str | None = None
    single_select_options: list[str] | None = None


class DraftIssueChanges(_Changes):
    title: str | None = None
    body: str | None = None


def _select_options(names: list[str]) -> list[dict[str, str]]:
    return [{"name": name, "color": DEFAULT_OPTION_COLOR, "description": ""} for name in names]


def require_title(title: str) -> None:
    if not title.strip():
        raise ConfigError("--title is required")


def _mutation(operation: str, document: str, payload: dict[str, Any]) -> Mutation:
    return Mutation(operation=operation, document=document, variables={"input": payload})


# ------------------------------------------------------------------
# Projects
# ------------------------------------------------------------------


def build_create_project(owner_id: str, title: str) -> Mutation:
    require_title(title)
    return _mutation("CreateProjectV2", queries.CREATE_PROJECT, {"ownerId": owner_id, "title": title})


def project_changes_input(changes: ProjectChanges) -> dict[str, Any]:
    """Validated sparse input for a project update, without the project ID.

    Raises:
        ConfigError: If no attribute is set.
        ValidationError: If visibility is not ``PUBLIC`` or ``PRIVATE``.
    """
    changes.require_any()
    payload = changes.dump()
    visibility = payload.pop("visibility", None)
    if "visibility" in changes.model_fields_set:
        if visibility not in VISIBILITIES:
            raise ValidationError(f"visibility must match either PUBLIC or PRIVATE, got {visibility!r}")
        payload["public"] = VISIBILITIES[visibility]
    return payload


def build_update_project(project_id: str, changes: ProjectChanges) -> Mutation:
    """Sparse project update; only explicitly set attributes are sent."""
    payload = project_changes_input(changes)
    return _mutation("UpdateProjectV2", queries.UPDATE_PROJECT, {"projectId": project_id, **payload})


def build_close_project(project_id: str, *, reopen: bool = False) -> Mutation:
    return _mutation("UpdateProjectV2", queries.UPDATE_PROJECT, {"projectId": project_id, "closed": not reopen})


def build_copy_project(project_id: str, target_owner_id: str, title: str, *, include_drafts: bool = False) -> Mutation:
    require_title(title)
    return _mutation(
        "CopyProjectV2",
        queries.COPY_PROJECT,
        {
            "projectId": project_id,
            "ownerId": target_owner_id,
            "title": title,
            "includeDraftIssues": include_drafts,
        },
    )


def build_delete_project(project_id: str) -> Mutation:
    return _mutation("DeleteProjectV2", queries.DELETE_PROJECT, {"projectId": project_id})


# ------------------------------------------------------------------
# Fields
# ------------------------------------------------------------------


def new_field_input(name: str, data_type: str, single_select_options: list[str] | None = None) -> dict[str, Any]:
    """Validated input for a new field, without the project ID.

    Raises:
        ConfigError: If the name is empty.
        ValidationError: On an unsupported data type, or a ``SINGLE_SELECT``
            field without options.
    """
    if not name.strip():
        raise ConfigError("--name is required")
    if data_type not in FIELD_DATA_TYPES:
        raise ValidationError(f"data type must be one of: {', '.join(FIELD_DATA_TYPES)}")

    options = [o for o in (single_select_options or []) if o]
    payload: dict[str, Any] = {"name": name, "dataType": data_type}
    if data_type == "SINGLE_SELECT":
        if not options:
            raise ValidationError("at least one single select options is required with data type is SINGLE_SELECT")
        payload["singleSelectOptions"] = _select_options(options)
    elif options:
        raise ValidationError("--single-select-options is only valid with data type SINGLE_SELECT")
    return payload


def build_create_field(
    project_id: str,
    name: str,
    data_type: str,
    single_select_options: list[str] | None = None,
) -> Mutation:
    payload = new_field_input(name, data_type, single_select_options)
    return _mutation("CreateField", queries.CREATE_FIELD, {"projectId": project_id, **payload})


def build_update_field(field_id: str, changes: FieldChanges) -> Mutation:
    changes.require_any()
    payload = changes.dump()
    if "singleSelectOptions" in payload:
        payload["singleSelectOptions"] = _select_options(payload["singleSelectOptions"] or [])
    return _mutation("UpdateField", queries.UPDATE_FIELD, {"fieldId": field_id, **payload})


def build_delete_field(field_id: str) -> Mutation:
    return _mutation("DeleteField", queries.DELETE_FIELD, {"fieldId": field_id})


# ------------------------------------------------------------------
# Items
# ------------------------------------------------------------------


def build_add_item(project_id: str, content_id: str) -> Mutation:
    return _mutation("AddItem", queries.ADD_ITEM, {"projectId": project_id, "contentId": content_id})


def build_create_draft_item(project_id: str, title: str, body: str | None = None) -> Mutation:
    require_title(title)
    payload: dict[str, Any] = {"projectId": project_id, "title": title}
    if body is not None:
        payload["body"] = body
    return _mutation("CreateDraftItem", queries.CREATE_DRAFT_ITEM, payload)


def build_update_draft_item(item_id: str, changes: DraftIssueChanges) -> Mutation:
    """Edit a draft issue; *item_id* is the draft issue content ID.

    Raises:
        ConfigError: If neither title nor body is set.
        ValidationError: If *item_id* is not a draft issue ID.
    """
    changes.require_any()
    if not item_id.startswith(DRAFT_ISSUE_PREFIX):
        raise ValidationError(
            f"ID must be the ID of the draft issue content which is prefixed with `{DRAFT_ISSUE_PREFIX}`"
        )
    return _mutation(
        "EditDraftIssueItem",
        queries.UPDATE_DRAFT_ITEM,
        {"draftIssueId": item_id, **changes.dump()},
    )


def build_archive_item(project_id: str, item_id: str, *, undo: bool = False) -> Mutation:
    if undo:
        return _mutation("UnarchiveProjectItem", queries.UNARCHIVE_ITEM, {"projectId": project_id, "itemId": item_id})
    return _mutation("ArchiveProjectItem", queries.ARCHIVE_ITEM, {"projectId": project_id, "itemId": item_id})


def build_delete_item(project_id: str, item_id: str) -> Mutation:
    return _mutation("DeleteProjectItem", queries.DELETE_ITEM, {"projectId": project_id, "itemId": item_id})
