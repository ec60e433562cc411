"""Project commands: create, edit, close, copy, delete, view and list."""

from __future__ import annotations

import argparse
from typing import Any

from ghprojects.cli.common import (
    CommandContext,
    check_limit,
    explicit_number,
    owner_selector,
    require_object,
    resolve_owner_and_number,
    wants_json,
)
from ghprojects.exceptions import ConfigError
from ghprojects.github.mapper import decode_project
from ghprojects.github.mutations import (
    ProjectChanges,
    build_close_project,
    build_copy_project,
    build_create_project,
    build_delete_project,
    build_update_project,
    project_changes_input,
    require_title,
)
from ghprojects.github.owners import resolve_owner
from ghprojects.github.projects import list_projects, project_fields, resolve_project
from ghprojects.github.urls import project_url, projects_url
from ghprojects.models.project import Project
from ghprojects.rendering.markdown import print_markdown, render_project
from ghprojects.rendering.projections import project_data, projects_data
from ghprojects.rendering.table import or_placeholder


def _project_payload(data: dict[str, Any], mutation_field: str) -> Project:
    return decode_project(require_object(data, mutation_field, "projectV2"))


def project_changes(args: argparse.Namespace) -> ProjectChanges:
    """Changes for ``edit`` holding only the flags that were passed."""
    given = {
        "title": args.title,
        "short_description": args.description,
        "readme": args.readme,
        "visibility": args.visibility,
    }
    return ProjectChanges(**{k: v for k, v in given.items() if v is not None})


async def run_create(args: argparse.Namespace, ctx: CommandContext) -> None:
    require_title(args.title)
    as_json = wants_json(args)
    owner = await resolve_owner(ctx.client, owner_selector(args))

    data = await ctx.run(build_create_project(owner.id, args.title))
    project = _project_payload(data, "createProjectV2")
    if as_json:
        ctx.print_json(project_data(project))
        return
    ctx.print_line(f"Created project '{project.title}'")
    ctx.print_line(project.url)


async def run_edit(args: argparse.Namespace, ctx: CommandContext) -> None:
    changes = project_changes(args)
    project_changes_input(changes)
    as_json = wants_json(args)
    owner, number = await resolve_owner_and_number(ctx, args)
    project = await resolve_project(ctx.client, owner, number)

    data = await ctx.run(build_update_project(project.id, changes))
    updated = _project_payload(data, "updateProjectV2")
    if as_json:
        ctx.print_json(project_data(updated))
        return
    ctx.print_line(f"Updated project {updated.url}")


async def run_close(args: argparse.Namespace, ctx: CommandContext) -> None:
    as_json = wants_json(args)
    owner, number = await resolve_owner_and_number(ctx, args)
    project = await resolve_project(ctx.client, owner, number)

    data = await ctx.run(build_close_project(project.id, reopen=args.undo))
    updated = _project_payload(data, "updateProjectV2")
    if as_json:
        ctx.print_json(project_data(updated))
        return
    action = "Reopened" if args.undo else "Closed"
    ctx.print_line(f"{action} project {updated.url}")


async def run_copy(args: argparse.Namespace, ctx: CommandContext) -> None:
    require_title(args.title)
    as_json = wants_json(args)
    source = owner_selector(args, "source-")
    target = owner_selector(args, "target-")
    source.target()
    target.target()
    number = explicit_number(args)
    if number is None:
        raise ConfigError("project number is required")

    source_owner = await resolve_owner(ctx.client, source)
    target_owner = await resolve_owner(ctx.client, target)
    project = await resolve_project(ctx.client, source_owner, number)

    data = await ctx.run(build_copy_project(project.id, target_owner.id, args.title, include_drafts=args.drafts))
    copied = _project_payload(data, "copyProjectV2")
    if as_json:
        ctx.print_json(project_data(copied))
        return
    ctx.print_line(f"Created project copy '{copied.title}'")
    ctx.print_line(copied.url)


async def run_delete(args: argparse.Namespace, ctx: CommandContext) -> None:
    as_json = wants_json(args)
    owner, number = await resolve_owner_and_number(ctx, args)
    project = await resolve_project(ctx.client, owner, number)

    await ctx.run(build_delete_project(project.id))
    if as_json:
        ctx.print_json(project_data(project))
        return
    ctx.print_line("Deleted project")


async def run_view(args: argparse.Namespace, ctx: CommandContext) -> None:
    as_json = wants_json(args)
    owner, number = await resolve_owner_and_number(ctx, args)

    if args.web:
        ctx.open_url(project_url(owner.type, owner.login, number, hostname=ctx.hostname))
        return

    project = await project_fields(ctx.client, owner, number)
    if as_json:
        ctx.print_json(project_data(project))
        return
    print_markdown(render_project(project), ctx.out, is_terminal=ctx.is_terminal)


async def run_list(args: argparse.Namespace, ctx: CommandContext) -> None:
    as_json = wants_json(args)
    limit = check_limit(args)
    selector = owner_selector(args)
    selector.target()
    owner = await resolve_owner(ctx.client, selector)

    if args.web:
        ctx.open_url(projects_url(owner.type, owner.login, closed=args.closed, hostname=ctx.hostname))
        return

    projects, _ = await list_projects(ctx.client, owner, limit)
    if not args.closed:
        projects = [p for p in projects if not p.closed]

    if as_json:
        ctx.print_json(projects_data(projects))
        return
    if not projects:
        ctx.print_line(f"No projects found for {owner.login}")
        return

    printer = ctx.printer()
    header = ["Title", "Description", "URL"]
    if args.closed:
        header.append("State")
    printer.add_row(*header)
    for p in projects:
        row = [p.title, or_placeholder(p.short_description), p.url]
        if args.closed:
            row.append("closed" if p.closed else "open")
        printer.add_row(*row)
    printer.render()
