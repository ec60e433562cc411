"""Tests for GraphQL node decoders."""

from __future__ import annotations

from typing import Any

import pytest

from ghprojects.github.mapper import (
    decode_content,
    decode_field,
    decode_field_value,
    decode_item,
    decode_project,
    decode_project_summary,
)
from ghprojects.models.field import (
    CommonField,
    DateField,
    IterationField,
    MilestoneField,
    NumberField,
    SingleSelectField,
    TextField,
    UnknownField,
)
from ghprojects.models.item import (
    DateValue,
    DraftIssueContent,
    EmptyContent,
    IssueContent,
    IterationValue,
    LabelValue,
    MilestoneValue,
    NumberValue,
    PullRequestContent,
    PullRequestValue,
    RepositoryValue,
    ReviewerValue,
    SingleSelectValue,
    TextValue,
    UnknownValue,
    UserValue,
)
from tests.fakes.github import connection, project_node

FIELD_REF = {"id": "PVTF_1", "name": "Status"}


class TestDecodeField:
    @pytest.mark.parametrize(
        ("data_type", "expected"),
        [
            ("TEXT", TextField),
            ("NUMBER", NumberField),
            ("DATE", DateField),
            ("MILESTONE", MilestoneField),
            ("ASSIGNEES", CommonField),
        ],
    )
    def test_common_field_variants(self, data_type: str, expected: type) -> None:
        field = decode_field({"__typename": "ProjectV2Field", "id": "F1", "name": "Title", "dataType": data_type})

        assert type(field) is expected
        assert field.type == "ProjectV2Field"
        assert field.data_type == data_type

    def test_single_select_options(self) -> None:
        field = decode_field(
            {
                "__typename": "ProjectV2SingleSelectField",
                "id": "F2",
                "name": "Status",
                "dataType": "SINGLE_SELECT",
                "options": [{"id": "o1", "name": "Todo"}, None, {"id": "o2", "name": "Done"}],
            }
        )

        assert isinstance(field, SingleSelectField)
        assert [(o.id, o.name) for o in field.options] == [("o1", "Todo"), ("o2", "Done")]

    def test_iteration_configuration(self) -> None:
        field = decode_field(
            {
                "__typename": "ProjectV2IterationField",
                "id": "F3",
                "name": "Sprint",
                "configuration": {
                    "iterations": [{"id": "a", "title": "Sprint 3", "startDate": "2022-01-01", "duration": 14}],
                    "completedIterations": [{"id": "x", "startDate": "2021-01-01"}],
                },
            }
        )

        assert isinstance(field, IterationField)
        assert [i.id for i in field.iterations] == ["a"]
        assert field.iterations[0].duration == 14
        assert [i.id for i in field.completed_iterations] == ["x"]

    def test_iteration_without_configuration(self) -> None:
        field = decode_field({"__typename": "ProjectV2IterationField", "id": "F3"})

        assert isinstance(field, IterationField)
        assert field.iterations == []
        assert field.completed_iterations == []

    def test_unknown_typename(self) -> None:
        field = decode_field({"__typename": "ProjectV2FancyField", "id": "F4", "name": "Fancy"})

        assert isinstance(field, UnknownField)
        assert field.type == "ProjectV2FancyField"
        assert field.name == "Fancy"

    @pytest.mark.parametrize("raw", [None, [], "field", {"id": 1, "name": None}])
    def test_garbage_never_raises(self, raw: Any) -> None:
        field = decode_field(raw)

        assert isinstance(field, UnknownField)
        assert field.id == ""


class TestDecodeContent:
    def test_draft_issue(self) -> None:
        content = decode_content({"__typename": "DraftIssue", "id": "DI_1", "title": "Plan", "body": None})

        assert content == DraftIssueContent(id="DI_1", title="Plan", body="")

    @pytest.mark.parametrize(("typename", "expected"), [("Issue", IssueContent), ("PullRequest", PullRequestContent)])
    def test_repository_content(self, typename: str, expected: type) -> None:
        content = decode_content(
            {
                "__typename": typename,
                "title": "Fix it",
                "body": "details",
                "number": 12,
                "repository": {"nameWithOwner": "cli/cli"},
            }
        )

        assert type(content) is expected
        assert content.number == 12
        assert content.repository == "cli/cli"

    def test_missing_content(self) -> None:
        assert decode_content(None) == EmptyContent()


class TestDecodeFieldValue:
    @pytest.mark.parametrize(
        ("node", "expected_type", "expected_data"),
        [
            ({"__typename": "ProjectV2ItemFieldDateValue", "date": "2022-01-01"}, DateValue, "2022-01-01"),
            (
                {
                    "__typename": "ProjectV2ItemFieldIterationValue",
                    "title": "Sprint 1",
                    "startDate": "2022-01-01",
                    "duration": 14,
                },
                IterationValue,
                {"startDate": "2022-01-01", "duration": 14},
            ),
            ({"__typename": "ProjectV2ItemFieldNumberValue", "number": 3}, NumberValue, 3.0),
            ({"__typename": "ProjectV2ItemFieldSingleSelectValue", "name": "Done"}, SingleSelectValue, "Done"),
            ({"__typename": "ProjectV2ItemFieldTextValue", "text": "hello"}, TextValue, "hello"),
            (
                {
                    "__typename": "ProjectV2ItemFieldMilestoneValue",
                    "milestone": {"description": "v1", "dueOn": "2022-03-01"},
                },
                MilestoneValue,
                {"description": "v1", "dueOn": "2022-03-01"},
            ),
            (
                {"__typename": "ProjectV2ItemFieldLabelValue", "labels": {"nodes": [{"name": "bug"}, {"name": "p1"}]}},
                LabelValue,
                ["bug", "p1"],
            ),
            (
                {
                    "__typename": "ProjectV2ItemFieldPullRequestValue",
                    "pullRequests": {"nodes": [{"url": "https://github.com/cli/cli/pull/1"}]},
                },
                PullRequestValue,
                ["https://github.com/cli/cli/pull/1"],
            ),
            (
                {
                    "__typename": "ProjectV2ItemFieldRepositoryValue",
                    "repository": {"url": "https://github.com/cli/cli"},
                },
                RepositoryValue,
                "https://github.com/cli/cli",
            ),
            (
                {"__typename": "ProjectV2ItemFieldUserValue", "users": {"nodes": [{"login": "monalisa"}]}},
                UserValue,
                ["monalisa"],
            ),
            (
                {
                    "__typename": "ProjectV2ItemFieldReviewerValue",
                    "reviewers": {
                        "nodes": [
                            {"__typename": "Team", "name": "core"},
                            {"__typename": "User", "login": "hubot"},
                        ]
                    },
                },
                ReviewerValue,
                ["core", "hubot"],
            ),
        ],
    )
    def test_variants(self, node: dict[str, Any], expected_type: type, expected_data: Any) -> None:
        value = decode_field_value({**node, "field": FIELD_REF})

        assert type(value) is expected_type
        assert value.field_id == "PVTF_1"
        assert value.field_name == "Status"
        assert value.data() == expected_data

    def test_unknown_variant_keeps_field_reference(self) -> None:
        value = decode_field_value({"__typename": "ProjectV2ItemFieldFutureValue", "field": FIELD_REF})

        assert isinstance(value, UnknownValue)
        assert value.raw_type == "ProjectV2ItemFieldFutureValue"
        assert value.field_id == "PVTF_1"

    def test_empty_value_node_from_unselected_type(self) -> None:
        """Value types outside the selection come back as empty objects."""
        value = decode_field_value({})

        assert isinstance(value, UnknownValue)
        assert value.data() is None

    def test_number_ignores_non_numbers(self) -> None:
        value = decode_field_value({"__typename": "ProjectV2ItemFieldNumberValue", "number": "7"})

        assert isinstance(value, NumberValue)
        assert value.number == 0.0


class TestDecodeItemAndProject:
    def test_item_with_values(self) -> None:
        node = {
            "id": "PVTI_1",
            "content": {"__typename": "Issue", "title": "Bug", "number": 3, "repository": {"nameWithOwner": "a/b"}},
            "fieldValues": {
                "nodes": [
                    {
                        "__typename": "ProjectV2ItemFieldTextValue",
                        "text": "Bug",
                        "field": {"id": "F1", "name": "Title"},
                    },
                    None,
                ]
            },
        }

        item = decode_item(node)

        assert item.id == "PVTI_1"
        assert item.type == "Issue"
        assert [v.field_name for v in item.field_values] == ["Title"]

    def test_decoding_is_repeatable(self) -> None:
        node = {
            "id": "PVTI_1",
            "content": {"__typename": "DraftIssue", "id": "DI_1", "title": "Plan"},
            "fieldValues": {"nodes": [{"__typename": "ProjectV2ItemFieldDateValue", "date": "2022-01-01"}]},
        }

        assert decode_item(node) == decode_item(node)

    def test_project_summary(self) -> None:
        summary = decode_project_summary(
            {"id": "PVT_1", "number": 4, "title": "Roadmap", "shortDescription": "Q1", "public": True, "closed": "yes"}
        )

        assert summary.number == 4
        assert summary.short_description == "Q1"
        assert summary.public is True
        assert summary.closed is False

    def test_project_counts_owner_and_connections(self) -> None:
        node = project_node(
            readme="# Readme",
            items=connection([{"id": "PVTI_1"}], total=30),
            fields=connection([{"__typename": "ProjectV2Field", "id": "F1", "name": "Title", "dataType": "TEXT"}]),
        )

        project = decode_project(node)

        assert project.readme == "# Readme"
        assert project.item_count == 30
        assert project.field_count == 1
        assert [i.id for i in project.items] == ["PVTI_1"]
        assert isinstance(project.fields[0], TextField)
        assert project.owner_type == "Organization"
        assert project.owner_login == "github"

    def test_project_without_connections(self) -> None:
        project = decode_project({"id": "PVT_1", "number": 1})

        assert project.items == []
        assert project.fields == []
        assert project.item_count == 0
