"""Tests for the field commands."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any

import pytest

from ghprojects.exceptions import ConfigError, NotFoundError, ValidationError
from tests.fakes.github import FakeGitHub, connection, owner_response, project_node, project_response

RunCommand = Callable[..., Awaitable[str]]

STATUS = {
    "__typename": "ProjectV2SingleSelectField",
    "id": "F2",
    "name": "Status",
    "dataType": "SINGLE_SELECT",
    "options": [{"id": "o1", "name": "Todo"}, {"id": "o2", "name": "Done"}],
}
SPRINT = {
    "__typename": "ProjectV2IterationField",
    "id": "F3",
    "name": "Sprint",
    "dataType": "ITERATION",
    "configuration": {
        "iterations": [{"id": "a", "title": "Sprint 3", "startDate": "2022-01-01", "duration": 14}],
        "completedIterations": [
            {"id": "x", "title": "Sprint 1", "startDate": "2021-01-01", "duration": 14},
            {"id": "y", "title": "Sprint 2", "startDate": "2021-06-01", "duration": 14},
        ],
    },
}
TITLE = {"__typename": "ProjectV2Field", "id": "F1", "name": "Title", "dataType": "TEXT"}


def _project_with_fields(github: FakeGitHub, fields: list[dict[str, Any]]) -> None:
    github.reply("UserOwner", owner_response("user", "monalisa"))
    github.reply("UserProject", project_response("user", project_node(fields=connection(fields))))


class TestCreate:
    @pytest.mark.asyncio
    async def test_single_select(self, github: FakeGitHub, run_command: RunCommand) -> None:
        _project_with_fields(github, [])
        github.reply("CreateField", {"createProjectV2Field": {"projectV2Field": STATUS}})

        output = await run_command(
            "field",
            "create",
            "1",
            "--user",
            "monalisa",
            "--name",
            "Status",
            "--data-type",
            "SINGLE_SELECT",
            "--single-select-options",
            "Todo, Done",
        )

        assert output == "Created field\n"
        payload = github.variables("CreateField")["input"]
        assert payload["projectId"] == "PVT_1"
        assert [o["name"] for o in payload["singleSelectOptions"]] == ["Todo", "Done"]

    @pytest.mark.asyncio
    async def test_single_select_without_options(self, github: FakeGitHub, run_command: RunCommand) -> None:
        with pytest.raises(ValidationError, match="at least one single select options is required"):
            await run_command(
                "field", "create", "1", "--user", "monalisa", "--name", "S", "--data-type", "SINGLE_SELECT"
            )

        assert github.requests == []

    @pytest.mark.asyncio
    async def test_json_output(self, github: FakeGitHub, run_command: RunCommand) -> None:
        _project_with_fields(github, [])
        github.reply("CreateField", {"createProjectV2Field": {"projectV2Field": TITLE}})

        output = await run_command(
            "field", "create", "1", "--user", "monalisa", "--name", "Title", "--data-type", "TEXT", "--format", "json"
        )

        assert json.loads(output) == {"id": "F1", "name": "Title", "type": "ProjectV2Field"}


class TestEditAndDelete:
    @pytest.mark.asyncio
    async def test_edit_name(self, github: FakeGitHub, run_command: RunCommand) -> None:
        github.reply("UpdateField", {"updateProjectV2Field": {"projectV2Field": TITLE}})

        output = await run_command("field", "edit", "--id", "F1", "--name", "Title")

        assert output == "Edited field\n"
        assert github.operations == ["UpdateField"]
        assert github.variables("UpdateField") == {"input": {"fieldId": "F1", "name": "Title"}}

    @pytest.mark.asyncio
    async def test_edit_without_changes(self, github: FakeGitHub, run_command: RunCommand) -> None:
        with pytest.raises(ConfigError, match="no fields to edit"):
            await run_command("field", "edit", "--id", "F1")

        assert github.requests == []

    @pytest.mark.asyncio
    async def test_delete(self, github: FakeGitHub, run_command: RunCommand) -> None:
        github.reply("DeleteField", {"deleteProjectV2Field": {"projectV2Field": TITLE}})

        assert await run_command("field", "delete", "--id", "F1") == "Deleted field\n"
        assert github.variables("DeleteField") == {"input": {"fieldId": "F1"}}


class TestList:
    @pytest.mark.asyncio
    async def test_table(self, github: FakeGitHub, run_command: RunCommand) -> None:
        _project_with_fields(github, [TITLE, STATUS])

        output = await run_command("field", "list", "1", "--user", "monalisa")

        assert output.splitlines() == [
            "Name\tDataType\tID",
            "Title\tProjectV2Field\tF1",
            "Status\tProjectV2SingleSelectField\tF2",
        ]

    @pytest.mark.asyncio
    async def test_limit_is_sent_as_page_size(self, github: FakeGitHub, run_command: RunCommand) -> None:
        _project_with_fields(github, [TITLE])

        await run_command("field", "list", "1", "--user", "monalisa", "--limit", "5")

        assert github.variables("UserProject")["firstFields"] == 5

    @pytest.mark.asyncio
    async def test_no_fields(self, github: FakeGitHub, run_command: RunCommand) -> None:
        _project_with_fields(github, [])

        output = await run_command("field", "list", "1", "--user", "monalisa")

        assert output == "Project 1 for login monalisa has no fields\n"

    @pytest.mark.asyncio
    async def test_json(self, github: FakeGitHub, run_command: RunCommand) -> None:
        _project_with_fields(github, [TITLE])

        output = await run_command("field", "list", "1", "--user", "monalisa", "--format", "json")

        assert json.loads(output) == [{"id": "F1", "name": "Title", "type": "ProjectV2Field"}]


class TestListOptions:
    @pytest.mark.asyncio
    async def test_iteration_order(self, github: FakeGitHub, run_command: RunCommand) -> None:
        _project_with_fields(github, [SPRINT])

        output = await run_command("field", "list-options", "1", "--user", "monalisa", "--id", "F3")

        assert output.splitlines() == [
            "ID\tTitle\tStart Date\tDuration\tCompleted",
            "y\tSprint 2\t2021-06-01\t14\ttrue",
            "x\tSprint 1\t2021-01-01\t14\ttrue",
            "a\tSprint 3\t2022-01-01\t14\tfalse",
        ]

    @pytest.mark.asyncio
    async def test_iteration_json_uses_same_order(self, github: FakeGitHub, run_command: RunCommand) -> None:
        _project_with_fields(github, [SPRINT])

        output = await run_command("field", "list-options", "1", "--user", "monalisa", "--id", "F3", "--format", "json")

        assert [(o["id"], o["completed"]) for o in json.loads(output)] == [("y", True), ("x", True), ("a", False)]

    @pytest.mark.asyncio
    async def test_single_select(self, github: FakeGitHub, run_command: RunCommand) -> None:
        _project_with_fields(github, [TITLE, STATUS])

        output = await run_command("field", "list-options", "1", "--user", "monalisa", "--id", "F2")

        assert output == "ID\tName\no1\tTodo\no2\tDone\n"

    @pytest.mark.asyncio
    async def test_field_without_options(self, github: FakeGitHub, run_command: RunCommand) -> None:
        _project_with_fields(github, [TITLE])

        output = await run_command("field", "list-options", "1", "--user", "monalisa", "--id", "F1")

        assert output == 'Field "Title" does not have options.\n'

    @pytest.mark.asyncio
    async def test_unknown_field(self, github: FakeGitHub, run_command: RunCommand) -> None:
        _project_with_fields(github, [TITLE])

        with pytest.raises(NotFoundError, match="has no field with ID F9"):
            await run_command("field", "list-options", "1", "--user", "monalisa", "--id", "F9")
