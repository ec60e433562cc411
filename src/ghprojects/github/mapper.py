"""Decoders from raw GraphQL nodes to domain models.

Every ``decode_*`` function here is total: it never raises on unexpected or
missing data. The variant is chosen from the node's ``__typename`` and only
that variant's own keys are read; anything absent keeps the model default.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ghprojects.models.field import (
    COMMON_FIELD,
    COMMON_FIELD_VARIANTS,
    ITERATION_FIELD,
    SINGLE_SELECT_FIELD,
    CommonField,
    Iteration,
    IterationField,
    ProjectField,
    SelectOption,
    SingleSelectField,
    UnknownField,
)
from ghprojects.models.item import (
    DateValue,
    DraftIssueContent,
    EmptyContent,
    FieldValue,
    IssueContent,
    ItemContent,
    IterationValue,
    LabelValue,
    MilestoneValue,
    NumberValue,
    ProjectItem,
    PullRequestContent,
    PullRequestValue,
    RepositoryValue,
    ReviewerValue,
    SingleSelectValue,
    TextValue,
    UnknownValue,
    UserValue,
)
from ghprojects.models.project import Project, ProjectSummary


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool):
        return 0
    return value if isinstance(value, int) else 0


def _float(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    return float(value)


def _bool(data: dict[str, Any], key: str) -> bool:
    return data.get(key) is True


def _nodes(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    """Return the dict entries of ``data[key].nodes``, skipping nulls."""
    nodes = _as_dict(data.get(key)).get("nodes")
    if not isinstance(nodes, list):
        return []
    return [node for node in nodes if isinstance(node, dict)]


def _list(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, dict)]


# ------------------------------------------------------------------
# Fields
# ------------------------------------------------------------------


def _decode_iteration(raw: dict[str, Any]) -> Iteration:
    return Iteration(
        id=_str(raw, "id"),
        title=_str(raw, "title"),
        start_date=_str(raw, "startDate"),
        duration=_int(raw, "duration"),
    )


def decode_field(raw: Any) -> ProjectField:
    """Decode a ``ProjectV2FieldConfiguration`` node."""
    node = _as_dict(raw)
    typename = _str(node, "__typename")
    common: dict[str, Any] = {
        "id": _str(node, "id"),
        "name": _str(node, "name"),
        "data_type": _str(node, "dataType"),
    }

    if typename == SINGLE_SELECT_FIELD:
        options = [SelectOption(id=_str(o, "id"), name=_str(o, "name")) for o in _list(node, "options")]
        return SingleSelectField(options=options, **common)
    if typename == ITERATION_FIELD:
        configuration = _as_dict(node.get("configuration"))
        return IterationField(
            iterations=[_decode_iteration(i) for i in _list(configuration, "iterations")],
            completed_iterations=[_decode_iteration(i) for i in _list(configuration, "completedIterations")],
            **common,
        )
    if typename == COMMON_FIELD:
        variant = COMMON_FIELD_VARIANTS.get(common["data_type"], CommonField)
        return variant(**common)
    return UnknownField(raw_type=typename, **common)


# ------------------------------------------------------------------
# Item content
# ------------------------------------------------------------------


def _repository_content(node: dict[str, Any]) -> dict[str, Any]:
    return {
        "title": _str(node, "title"),
        "body": _str(node, "body"),
        "issue_number": _int(node, "number"),
        "repository_name": _str(_as_dict(node.get("repository")), "nameWithOwner"),
    }


def decode_content(raw: Any) -> ItemContent:
    node = _as_dict(raw)
    typename = _str(node, "__typename")
    if typename == DraftIssueContent.typename:
        return DraftIssueContent(id=_str(node, "id"), title=_str(node, "title"), body=_str(node, "body"))
    if typename == IssueContent.typename:
        return IssueContent(**_repository_content(node))
    if typename == PullRequestContent.typename:
        return PullRequestContent(**_repository_content(node))
    return EmptyContent(raw_type=typename)


# ------------------------------------------------------------------
# Field values
# ------------------------------------------------------------------


def _reviewer_name(node: dict[str, Any]) -> str:
    if _str(node, "__typename") == "Team":
        return _str(node, "name")
    return _str(node, "login")


_VALUE_DECODERS: dict[str, Callable[[dict[str, Any], dict[str, Any]], FieldValue]] = {
    DateValue.typename: lambda node, ref: DateValue(date=_str(node, "date"), **ref),
    IterationValue.typename: lambda node, ref: IterationValue(
        title=_str(node, "title"),
        start_date=_str(node, "startDate"),
        duration=_int(node, "duration"),
        **ref,
    ),
    NumberValue.typename: lambda node, ref: NumberValue(number=_float(node, "number"), **ref),
    SingleSelectValue.typename: lambda node, ref: SingleSelectValue(name=_str(node, "name"), **ref),
    TextValue.typename: lambda node, ref: TextValue(text=_str(node, "text"), **ref),
    MilestoneValue.typename: lambda node, ref: MilestoneValue(
        description=_str(_as_dict(node.get("milestone")), "description"),
        due_on=_str(_as_dict(node.get("milestone")), "dueOn"),
        **ref,
    ),
    LabelValue.typename: lambda node, ref: LabelValue(
        labels=[_str(n, "name") for n in _nodes(node, "labels")], **ref
    ),
    PullRequestValue.typename: lambda node, ref: PullRequestValue(
        urls=[_str(n, "url") for n in _nodes(node, "pullRequests")], **ref
    ),
    RepositoryValue.typename: lambda node, ref: RepositoryValue(
        url=_str(_as_dict(node.get("repository")), "url"), **ref
    ),
    UserValue.typename: lambda node, ref: UserValue(logins=[_str(n, "login") for n in _nodes(node, "users")], **ref),
    ReviewerValue.typename: lambda node, ref: ReviewerValue(
        reviewers=[_reviewer_name(n) for n in _nodes(node, "reviewers")], **ref
    ),
}


def decode_field_value(raw: Any) -> FieldValue:
    """Decode a ``ProjectV2ItemFieldValue`` node.

    The originating field is kept by reference (``field_id``/``field_name``),
    not embedded.
    """
    node = _as_dict(raw)
    typename = _str(node, "__typename")
    field = _as_dict(node.get("field"))
    ref = {"field_id": _str(field, "id"), "field_name": _str(field, "name")}
    decoder = _VALUE_DECODERS.get(typename)
    if decoder is None:
        return UnknownValue(raw_type=typename, **ref)
    return decoder(node, ref)


# ------------------------------------------------------------------
# Items and projects
# ------------------------------------------------------------------


def decode_item(raw: Any) -> ProjectItem:
    """Decode a ``ProjectV2Item`` node with its content and field values."""
    node = _as_dict(raw)
    return ProjectItem(
        id=_str(node, "id"),
        content=decode_content(node.get("content")),
        field_values=[decode_field_value(v) for v in _nodes(node, "fieldValues")],
    )


def decode_project_summary(raw: Any) -> ProjectSummary:
    node = _as_dict(raw)
    return ProjectSummary(
        id=_str(node, "id"),
        number=_int(node, "number"),
        title=_str(node, "title"),
        url=_str(node, "url"),
        short_description=_str(node, "shortDescription"),
        public=_bool(node, "public"),
        closed=_bool(node, "closed"),
    )


def decode_project(raw: Any) -> Project:
    """Decode a ``ProjectV2`` node, including whatever fields/items it carries."""
    node = _as_dict(raw)
    summary = decode_project_summary(node)
    items = _as_dict(node.get("items"))
    fields = _as_dict(node.get("fields"))
    owner = _as_dict(node.get("owner"))
    return Project(
        **summary.model_dump(),
        readme=_str(node, "readme"),
        item_count=_int(items, "totalCount"),
        field_count=_int(fields, "totalCount"),
        fields=[decode_field(f) for f in _nodes(node, "fields")],
        items=[decode_item(i) for i in _nodes(node, "items")],
        owner_type=_str(owner, "__typename"),
        owner_login=_str(owner, "login"),
    )
