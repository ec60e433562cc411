"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import AsyncExitStack, asynccontextmanager

from ghprojects.auth.factory import create_token_resolver
from ghprojects.cli.commands import field as field_commands
from ghprojects.cli.commands import item as item_commands
from ghprojects.cli.commands import project as project_commands
from ghprojects.cli.common import CommandContext
from ghprojects.cli.parser import build_parser
from ghprojects.cli.progress.rich import RichRequestProgress
from ghprojects.config import ClientConfig, load_config
from ghprojects.exceptions import (
    AuthenticationError,
    ConfigError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from ghprojects.github.client import GraphQLClient

Handler = Callable[[argparse.Namespace, CommandContext], Awaitable[None]]

HANDLERS: dict[tuple[str, str | None], Handler] = {
    ("create", None): project_commands.run_create,
    ("edit", None): project_commands.run_edit,
    ("update", None): project_commands.run_edit,
    ("close", None): project_commands.run_close,
    ("copy", None): project_commands.run_copy,
    ("delete", None): project_commands.run_delete,
    ("view", None): project_commands.run_view,
    ("list", None): project_commands.run_list,
    ("field", "create"): field_commands.run_create,
    ("field", "edit"): field_commands.run_edit,
    ("field", "delete"): field_commands.run_delete,
    ("field", "list"): field_commands.run_list,
    ("field", "list-options"): field_commands.run_list_options,
    ("item", "add"): item_commands.run_add,
    ("item", "create"): item_commands.run_create,
    ("item", "edit"): item_commands.run_edit,
    ("item", "archive"): item_commands.run_archive,
    ("item", "delete"): item_commands.run_delete,
    ("item", "list"): item_commands.run_list,
}


def handler_for(args: argparse.Namespace) -> Handler:
    sub = getattr(args, "field_command", None) or getattr(args, "item_command", None)
    return HANDLERS[(args.command, sub)]


@asynccontextmanager
async def open_context(config: ClientConfig, *, verbose: bool) -> AsyncIterator[CommandContext]:
    """Open a client for one command invocation."""
    async with AsyncExitStack() as stack:
        progress: RichRequestProgress | None = None
        if not verbose and sys.stderr.isatty():
            progress = stack.enter_context(RichRequestProgress())
        client = await stack.enter_async_context(
            GraphQLClient(
                config.graphql_url,
                token_resolver=create_token_resolver(config),
                timeout=config.timeout,
                progress=progress,
            )
        )
        yield CommandContext(
            client=client,
            out=sys.stdout,
            is_terminal=sys.stdout.isatty(),
            interactive=sys.stdin.isatty(),
            hostname=config.hostname,
        )


async def _run(args: argparse.Namespace) -> None:
    handler = handler_for(args)
    config = load_config()
    async with open_context(config, verbose=args.verbose) as ctx:
        await handler(args, ctx)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        asyncio.run(_run(args))
        return 0
    except (ConfigError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, NotFoundError, UpstreamError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
