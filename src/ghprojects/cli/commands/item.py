"""Item commands: add, create, edit, archive, delete and list."""

from __future__ import annotations

import argparse

from ghprojects.cli.common import CommandContext, check_limit, require_object, resolve_owner_and_number, wants_json
from ghprojects.github.mapper import decode_content, decode_item
from ghprojects.github.mutations import (
    DraftIssueChanges,
    build_add_item,
    build_archive_item,
    build_create_draft_item,
    build_delete_item,
    build_update_draft_item,
    require_title,
)
from ghprojects.github.projects import project_items, resolve_project, resource_id
from ghprojects.models.item import DraftIssueContent
from ghprojects.rendering.projections import draft_issue_data, item_data, items_data
from ghprojects.rendering.table import or_placeholder


async def run_add(args: argparse.Namespace, ctx: CommandContext) -> None:
    as_json = wants_json(args)
    owner, number = await resolve_owner_and_number(ctx, args)
    project = await resolve_project(ctx.client, owner, number)
    content_id = await resource_id(ctx.client, args.url)

    data = await ctx.run(build_add_item(project.id, content_id))
    item = decode_item(require_object(data, "addProjectV2ItemById", "item"))
    if as_json:
        ctx.print_json(item_data(item))
        return
    ctx.print_line("Added item")


async def run_create(args: argparse.Namespace, ctx: CommandContext) -> None:
    require_title(args.title)
    as_json = wants_json(args)
    owner, number = await resolve_owner_and_number(ctx, args)
    project = await resolve_project(ctx.client, owner, number)

    data = await ctx.run(build_create_draft_item(project.id, args.title, args.body))
    item = decode_item(require_object(data, "addProjectV2DraftIssue", "projectItem"))
    if as_json:
        content = item.content
        ctx.print_json(draft_issue_data(content) if isinstance(content, DraftIssueContent) else item_data(item))
        return
    ctx.print_line("Created item")


async def run_edit(args: argparse.Namespace, ctx: CommandContext) -> None:
    given = {"title": args.title, "body": args.body}
    changes = DraftIssueChanges(**{k: v for k, v in given.items() if v is not None})
    mutation = build_update_draft_item(args.id, changes)
    as_json = wants_json(args)

    data = await ctx.run(mutation)
    draft_node = require_object(data, "updateProjectV2DraftIssue", "draftIssue")
    draft = decode_content({"__typename": DraftIssueContent.typename, **draft_node})
    if as_json and isinstance(draft, DraftIssueContent):
        ctx.print_json(draft_issue_data(draft))
        return
    printer = ctx.printer()
    printer.add_row("Title", "Body")
    printer.add_row(draft.title, draft.body)
    printer.render()


async def run_archive(args: argparse.Namespace, ctx: CommandContext) -> None:
    as_json = wants_json(args)
    owner, number = await resolve_owner_and_number(ctx, args)
    project = await resolve_project(ctx.client, owner, number)

    data = await ctx.run(build_archive_item(project.id, args.id, undo=args.undo))
    mutation_field = "unarchiveProjectV2Item" if args.undo else "archiveProjectV2Item"
    item = decode_item(require_object(data, mutation_field, "item"))
    if as_json:
        ctx.print_json(item_data(item))
        return
    ctx.print_line("Unarchived item" if args.undo else "Archived item")


async def run_delete(args: argparse.Namespace, ctx: CommandContext) -> None:
    as_json = wants_json(args)
    owner, number = await resolve_owner_and_number(ctx, args)
    project = await resolve_project(ctx.client, owner, number)

    data = await ctx.run(build_delete_item(project.id, args.id))
    if as_json:
        deleted = require_object(data, "deleteProjectV2Item").get("deletedItemId")
        ctx.print_json({"id": deleted or args.id})
        return
    ctx.print_line("Deleted item")


async def run_list(args: argparse.Namespace, ctx: CommandContext) -> None:
    as_json = wants_json(args)
    limit = check_limit(args)
    owner, number = await resolve_owner_and_number(ctx, args)
    project = await project_items(ctx.client, owner, number, limit)

    if as_json:
        ctx.print_json(items_data(project))
        return
    if not project.items:
        ctx.print_line(f"Project {number} for login {owner.login} has no items")
        return

    printer = ctx.printer()
    printer.add_row("Type", "Title", "Number", "Repository", "ID")
    for item in project.items:
        printer.add_row(item.type, item.title, or_placeholder(item.number), or_placeholder(item.repository), item.id)
    printer.render()
