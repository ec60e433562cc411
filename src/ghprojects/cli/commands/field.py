"""Field commands: create, edit, delete, list and list-options."""

from __future__ import annotations

import argparse

from ghprojects.cli.common import CommandContext, check_limit, require_object, resolve_owner_and_number, wants_json
from ghprojects.exceptions import NotFoundError
from ghprojects.github.mapper import decode_field
from ghprojects.github.mutations import (
    FieldChanges,
    build_create_field,
    build_delete_field,
    build_update_field,
    new_field_input,
)
from ghprojects.github.projects import project_fields, resolve_project
from ghprojects.models.field import IterationField, SingleSelectField
from ghprojects.rendering.projections import (
    field_data,
    fields_data,
    iteration_options_data,
    ordered_iterations,
    select_options_data,
)


def _options(raw: str | None) -> list[str] | None:
    if raw is None:
        return None
    return [o.strip() for o in raw.split(",") if o.strip()]


async def run_create(args: argparse.Namespace, ctx: CommandContext) -> None:
    options = _options(args.single_select_options)
    new_field_input(args.name, args.data_type, options)
    as_json = wants_json(args)
    owner, number = await resolve_owner_and_number(ctx, args)
    project = await resolve_project(ctx.client, owner, number)

    data = await ctx.run(build_create_field(project.id, args.name, args.data_type, options))
    field = decode_field(require_object(data, "createProjectV2Field", "projectV2Field"))
    if as_json:
        ctx.print_json(field_data(field))
        return
    ctx.print_line("Created field")


async def run_edit(args: argparse.Namespace, ctx: CommandContext) -> None:
    given = {"name": args.name, "single_select_options": _options(args.single_select_options)}
    changes = FieldChanges(**{k: v for k, v in given.items() if v is not None})
    mutation = build_update_field(args.id, changes)
    as_json = wants_json(args)

    data = await ctx.run(mutation)
    field = decode_field(require_object(data, "updateProjectV2Field", "projectV2Field"))
    if as_json:
        ctx.print_json(field_data(field))
        return
    ctx.print_line("Edited field")


async def run_delete(args: argparse.Namespace, ctx: CommandContext) -> None:
    as_json = wants_json(args)
    data = await ctx.run(build_delete_field(args.id))
    field = decode_field(require_object(data, "deleteProjectV2Field", "projectV2Field"))
    if as_json:
        ctx.print_json(field_data(field))
        return
    ctx.print_line("Deleted field")


async def run_list(args: argparse.Namespace, ctx: CommandContext) -> None:
    as_json = wants_json(args)
    limit = check_limit(args)
    owner, number = await resolve_owner_and_number(ctx, args)
    project = await project_fields(ctx.client, owner, number, limit)

    if as_json:
        ctx.print_json(fields_data(project.fields))
        return
    if not project.fields:
        ctx.print_line(f"Project {number} for login {owner.login} has no fields")
        return

    printer = ctx.printer()
    printer.add_row("Name", "DataType", "ID")
    for field in project.fields:
        printer.add_row(field.name, field.type, field.id)
    printer.render()


async def run_list_options(args: argparse.Namespace, ctx: CommandContext) -> None:
    as_json = wants_json(args)
    owner, number = await resolve_owner_and_number(ctx, args)
    project = await project_fields(ctx.client, owner, number)

    field = next((f for f in project.fields if f.id == args.id), None)
    if field is None:
        raise NotFoundError(f"project {number} for login {owner.login} has no field with ID {args.id}")

    if isinstance(field, IterationField):
        if as_json:
            ctx.print_json(iteration_options_data(field))
            return
        printer = ctx.printer()
        printer.add_row("ID", "Title", "Start Date", "Duration", "Completed")
        for iteration, completed in ordered_iterations(field):
            printer.add_row(
                iteration.id,
                iteration.title,
                iteration.start_date,
                iteration.duration,
                "true" if completed else "false",
            )
        printer.render()
        return

    if isinstance(field, SingleSelectField):
        if as_json:
            ctx.print_json(select_options_data(field.options))
            return
        printer = ctx.printer()
        printer.add_row("ID", "Name")
        for option in field.options:
            printer.add_row(option.id, option.name)
        printer.render()
        return

    if as_json:
        ctx.print_json([])
        return
    ctx.print_line(f'Field "{field.name}" does not have options.')
