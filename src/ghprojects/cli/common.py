"""Shared CLI plumbing: command context, flag helpers and prompts."""

from __future__ import annotations

import argparse
import sys
import webbrowser
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TextIO

import questionary

from ghprojects.config import DEFAULT_HOSTNAME
from ghprojects.exceptions import ConfigError, UpstreamError, ValidationError
from ghprojects.github.client import GraphQLClient
from ghprojects.github.mutations import Mutation
from ghprojects.github.owners import resolve_owner
from ghprojects.github.projects import list_projects
from ghprojects.models.owner import Owner, OwnerSelector
from ghprojects.rendering.projections import dumps
from ghprojects.rendering.table import TablePrinter

JSON_FORMAT = "json"


@dataclass
class CommandContext:
    """Everything a command handler needs besides its parsed arguments."""

    client: GraphQLClient
    out: TextIO = field(default_factory=lambda: sys.stdout)
    is_terminal: bool = False
    interactive: bool = False
    hostname: str = DEFAULT_HOSTNAME
    open_url: Callable[[str], object] = webbrowser.open

    def printer(self) -> TablePrinter:
        return TablePrinter(self.out, is_terminal=self.is_terminal)

    def print_line(self, text: str) -> None:
        self.out.write(text + "\n")

    def print_json(self, payload: object) -> None:
        self.print_line(dumps(payload))

    async def run(self, mutation: Mutation) -> dict[str, Any]:
        return await self.client.execute(mutation.document, mutation.variables, operation=mutation.operation)


def require_object(data: dict[str, Any], *keys: str) -> dict[str, Any]:
    """Walk *keys* into a response payload, requiring an object at each step.

    Raises:
        UpstreamError: If any step is missing or not an object.
    """
    current = data
    for key in keys:
        value = current.get(key)
        if not isinstance(value, dict):
            raise UpstreamError(f"Missing/invalid object at key '{key}'")
        current = value
    return current


def owner_selector(args: argparse.Namespace, prefix: str = "") -> OwnerSelector:
    """Owner selector from the ``--[prefix]user/org/me`` flags."""
    attr = prefix.replace("-", "_")
    return OwnerSelector(
        user=getattr(args, f"{attr}user", None),
        org=getattr(args, f"{attr}org", None),
        me=bool(getattr(args, f"{attr}me", False)),
        flag_prefix=prefix,
    )


def wants_json(args: argparse.Namespace) -> bool:
    """Whether JSON output was requested.

    Raises:
        ValidationError: For any format other than ``json``.
    """
    fmt = getattr(args, "format", None)
    if fmt is None:
        return False
    if fmt != JSON_FORMAT:
        raise ValidationError(f"unsupported format {fmt!r}: only 'json' is supported")
    return True


def check_limit(args: argparse.Namespace) -> int:
    limit = args.limit
    if limit <= 0:
        raise ValidationError(f"invalid limit {limit}: must be a positive number")
    return limit


def explicit_number(args: argparse.Namespace) -> int | None:
    """The project number given positionally or with ``--number``.

    Raises:
        ConfigError: If both forms are given with different values.
    """
    positional = getattr(args, "number", None)
    flag = getattr(args, "number_flag", None)
    if positional is not None and flag is not None and positional != flag:
        raise ConfigError(f"conflicting project numbers: {positional} and --number {flag}")
    number = positional if positional is not None else flag
    if number is not None and number <= 0:
        raise ValidationError(f"invalid project number {number}")
    return number


async def project_number(ctx: CommandContext, owner: Owner, number: int | None) -> int:
    """*number*, or a project the user picks interactively when it is missing.

    Raises:
        ConfigError: If the number is missing and stdin is not a terminal,
            or there is nothing to pick from.
    """
    if number is not None:
        return number
    if not ctx.interactive:
        raise ConfigError("project number is required when not running interactively")

    projects, _ = await list_projects(ctx.client, owner)
    if not projects:
        raise ConfigError(f"no projects found for {owner.login}")
    choices = [questionary.Choice(f"{p.title} (#{p.number})", value=p.number) for p in projects]
    answer = await questionary.select("Which project would you like to use?", choices=choices).ask_async()
    if answer is None:
        raise ConfigError("no project selected")
    return int(answer)


async def resolve_owner_and_number(ctx: CommandContext, args: argparse.Namespace) -> tuple[Owner, int]:
    """Resolve the owner flags and the project number of a project command."""
    selector = owner_selector(args)
    selector.target()
    number = explicit_number(args)
    if number is None and not ctx.interactive:
        raise ConfigError("project number is required when not running interactively")
    owner = await resolve_owner(ctx.client, selector)
    return owner, await project_number(ctx, owner, number)
