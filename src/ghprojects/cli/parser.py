"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from ghprojects.github.projects import DEFAULT_LIMIT


def _package_version() -> str:
    try:
        return version("ghprojects")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common(parser: argparse.ArgumentParser, *, json_output: bool = True) -> None:
    if json_output:
        parser.add_argument("--format", default=None, help="Output format: json")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def _add_owner(parser: argparse.ArgumentParser, prefix: str = "", role: str = "") -> None:
    """Add ``--[prefix]user``, ``--[prefix]org`` and ``--[prefix]me``.

    Exclusivity is checked when the owner is resolved so that all commands
    report it the same way.
    """
    label = f"{role} " if role else ""
    parser.add_argument(f"--{prefix}user", default=None, help=f'Login of the {label}user owner; "@me" for yourself')
    parser.add_argument(f"--{prefix}org", default=None, help=f"Login of the {label}organization owner")
    parser.add_argument(f"--{prefix}me", action="store_true", help=f"Use the authenticated user as {label}owner")


def _add_number(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("number", nargs="?", type=int, default=None, help="Project number")
    parser.add_argument("--number", "-n", dest="number_flag", type=int, default=None, help="Project number")


def _add_limit(parser: argparse.ArgumentParser, noun: str) -> None:
    parser.add_argument(
        "--limit",
        "-L",
        type=int,
        default=DEFAULT_LIMIT,
        help=f"Maximum number of {noun} to fetch (default: {DEFAULT_LIMIT})",
    )


def _add_project_commands(subparsers: argparse._SubParsersAction) -> None:
    create = subparsers.add_parser("create", help="Create a project")
    _add_owner(create)
    create.add_argument("--title", required=True, help="Title of the project")
    _add_common(create)

    edit = subparsers.add_parser("edit", aliases=["update"], help="Edit a project")
    _add_owner(edit)
    _add_number(edit)
    edit.add_argument("--title", default=None, help="New title")
    edit.add_argument("--description", "-d", default=None, help="New short description")
    edit.add_argument("--readme", default=None, help="New readme")
    edit.add_argument("--visibility", default=None, help="New visibility: PUBLIC or PRIVATE")
    _add_common(edit)

    close = subparsers.add_parser("close", help="Close a project")
    _add_owner(close)
    _add_number(close)
    close.add_argument("--undo", "--reopen", dest="undo", action="store_true", help="Reopen a closed project")
    _add_common(close)

    copy = subparsers.add_parser("copy", help="Copy a project")
    _add_owner(copy, "source-", "source")
    _add_owner(copy, "target-", "target")
    _add_number(copy)
    copy.add_argument("--title", required=True, help="Title of the new project")
    copy.add_argument("--drafts", action="store_true", help="Include draft issues in the copy")
    _add_common(copy)

    delete = subparsers.add_parser("delete", help="Delete a project")
    _add_owner(delete)
    _add_number(delete)
    _add_common(delete)

    view = subparsers.add_parser("view", help="View a project")
    _add_owner(view)
    _add_number(view)
    view.add_argument("--web", "-w", action="store_true", help="Open the project in the browser")
    _add_common(view)

    list_parser = subparsers.add_parser("list", help="List the projects of an owner")
    _add_owner(list_parser)
    list_parser.add_argument("--closed", action="store_true", help="Include closed projects")
    list_parser.add_argument("--web", "-w", action="store_true", help="Open the projects page in the browser")
    _add_limit(list_parser, "projects")
    _add_common(list_parser)


def _add_field_commands(subparsers: argparse._SubParsersAction) -> None:
    field_parser = subparsers.add_parser("field", help="Manage project fields")
    field_sub = field_parser.add_subparsers(dest="field_command", required=True)

    create = field_sub.add_parser("create", help="Create a field")
    _add_owner(create)
    _add_number(create)
    create.add_argument("--name", required=True, help="Name of the field")
    create.add_argument("--data-type", required=True, help="TEXT, SINGLE_SELECT, DATE or NUMBER")
    create.add_argument("--single-select-options", default=None, help="Comma-separated options for SINGLE_SELECT")
    _add_common(create)

    edit = field_sub.add_parser("edit", help="Edit a field")
    edit.add_argument("--id", required=True, help="ID of the field")
    edit.add_argument("--name", default=None, help="New name")
    edit.add_argument("--single-select-options", default=None, help="New comma-separated options")
    _add_common(edit)

    delete = field_sub.add_parser("delete", help="Delete a field")
    delete.add_argument("--id", required=True, help="ID of the field")
    _add_common(delete)

    list_parser = field_sub.add_parser("list", help="List the fields of a project")
    _add_owner(list_parser)
    _add_number(list_parser)
    _add_limit(list_parser, "fields")
    _add_common(list_parser)

    options = field_sub.add_parser("list-options", help="List the options of a single select or iteration field")
    _add_owner(options)
    _add_number(options)
    options.add_argument("--id", required=True, help="ID of the field")
    _add_common(options)


def _add_item_commands(subparsers: argparse._SubParsersAction) -> None:
    item_parser = subparsers.add_parser("item", help="Manage project items")
    item_sub = item_parser.add_subparsers(dest="item_command", required=True)

    add = item_sub.add_parser("add", help="Add an issue or pull request to a project")
    _add_owner(add)
    _add_number(add)
    add.add_argument("--url", required=True, help="URL of the issue or pull request")
    _add_common(add)

    create = item_sub.add_parser("create", help="Create a draft issue item")
    _add_owner(create)
    _add_number(create)
    create.add_argument("--title", required=True, help="Title of the draft issue")
    create.add_argument("--body", default=None, help="Body of the draft issue")
    _add_common(create)

    edit = item_sub.add_parser("edit", help="Edit a draft issue item")
    edit.add_argument("--id", required=True, help="ID of the draft issue content (DI_...)")
    edit.add_argument("--title", default=None, help="New title")
    edit.add_argument("--body", default=None, help="New body")
    _add_common(edit)

    archive = item_sub.add_parser("archive", help="Archive an item")
    _add_owner(archive)
    _add_number(archive)
    archive.add_argument("--id", required=True, help="ID of the item")
    archive.add_argument("--undo", action="store_true", help="Unarchive the item")
    _add_common(archive)

    delete = item_sub.add_parser("delete", help="Delete an item")
    _add_owner(delete)
    _add_number(delete)
    delete.add_argument("--id", required=True, help="ID of the item")
    _add_common(delete)

    list_parser = item_sub.add_parser("list", help="List the items of a project")
    _add_owner(list_parser)
    _add_number(list_parser)
    _add_limit(list_parser, "items")
    _add_common(list_parser)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ghprojects", description="Work with GitHub Projects from the command line")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_project_commands(subparsers)
    _add_field_commands(subparsers)
    _add_item_commands(subparsers)
    return parser


__all__ = ["build_parser"]
