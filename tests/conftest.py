"""Shared test fixtures for ghprojects tests."""

from __future__ import annotations

import io
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

import pytest

from ghprojects.cli.app import handler_for
from ghprojects.cli.common import CommandContext
from ghprojects.cli.parser import build_parser
from ghprojects.github.client import GraphQLClient
from tests.fakes.github import GRAPHQL_URL, FakeGitHub


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def opened_urls() -> list[str]:
    """URLs a command asked to open in the browser."""
    return []


@pytest.fixture
def command_context(
    github: FakeGitHub,
    opened_urls: list[str],
) -> Callable[..., AbstractAsyncContextManager[CommandContext]]:
    """Factory for a command context wired to the fake endpoint.

    Output goes to an in-memory buffer; read it back with
    ``ctx.out.getvalue()``.
    """

    @asynccontextmanager
    async def _open(*, interactive: bool = False) -> AsyncIterator[CommandContext]:
        async with GraphQLClient(GRAPHQL_URL, token="tok_123", transport=github.transport()) as client:
            yield CommandContext(
                client=client,
                out=io.StringIO(),
                interactive=interactive,
                open_url=opened_urls.append,
            )

    return _open


@pytest.fixture
def run_command(
    command_context: Callable[..., AbstractAsyncContextManager[CommandContext]],
) -> Callable[..., Awaitable[str]]:
    """Parse a command line, run its handler and return what it printed."""

    async def _run(*argv: str, interactive: bool = False) -> str:
        args = build_parser().parse_args(list(argv))
        async with command_context(interactive=interactive) as ctx:
            await handler_for(args)(args, ctx)
            return ctx.out.getvalue()

    return _run
