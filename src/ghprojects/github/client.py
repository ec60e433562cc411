"""Async GraphQL client for the GitHub API."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from ghprojects.auth.base import TokenResolver
from ghprojects.config import DEFAULT_TIMEOUT
from ghprojects.exceptions import AuthenticationError, GhProjectsError, NotFoundError, UpstreamError
from ghprojects.github.progress import NullRequestProgress, RequestProgress

_LOG = logging.getLogger(__name__)

SCOPES_ERROR_PREFIX = "Your token has not been granted the required scopes"
SCOPES_HINT = "run `gh auth refresh -s project` to grant the project scope"


class GraphQLClient:
    """Sends GraphQL documents to GitHub, one request at a time.

    Use as an async context manager so the underlying connection pool is
    closed::

        async with GraphQLClient(url, token_resolver=resolver) as client:
            data = await client.execute(query, {"login": "octocat"}, operation="UserOwner")

    The token is resolved on the first request, so commands that fail
    validation never touch credentials. There is no retry logic: any
    transport failure, non-2xx status or GraphQL error fails the call.
    """

    def __init__(
        self,
        url: str,
        *,
        token: str | None = None,
        token_resolver: TokenResolver | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
        progress: RequestProgress | None = None,
    ) -> None:
        self._url = url
        if token is None and token_resolver is None:
            raise ValueError("either token or token_resolver is required")
        self._token = token
        self._token_resolver = token_resolver
        self._timeout = timeout
        self._transport = transport
        self._progress = progress or NullRequestProgress()
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GraphQLClient:
        self._client = httpx.AsyncClient(
            headers={
                "Accept": "application/vnd.github+json",
                "User-Agent": "ghprojects",
            },
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )
        return self

    async def _authorization(self) -> str:
        if self._token is None and self._token_resolver is not None:
            self._token = await self._token_resolver.resolve()
        return f"Bearer {self._token}"

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def execute(self, document: str, variables: dict[str, Any] | None = None, *, operation: str) -> dict[str, Any]:
        """Run one query or mutation and return its ``data`` payload.

        Args:
            document: GraphQL document; may carry fragment definitions.
            variables: Variable values, sent as-is.
            operation: Operation name to select within *document*.

        Raises:
            NotFoundError: If every GraphQL error is of type ``NOT_FOUND``.
            AuthenticationError: On HTTP 401 or a missing-scope error.
            UpstreamError: On any other transport, HTTP or GraphQL failure.
        """
        if self._client is None:
            raise UpstreamError("GraphQL client is not initialized. Use 'async with'.")

        headers = {"Authorization": await self._authorization()}
        payload = {"query": document, "variables": variables or {}, "operationName": operation}
        _LOG.debug("Running GraphQL operation %s", operation)
        self._progress.request_start(operation)
        try:
            response = await self._client.post(self._url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"{operation} request failed: {exc}") from exc
        finally:
            self._progress.request_done(operation)

        _LOG.debug("%s responded with HTTP %s", operation, response.status_code)
        return self._parse_response(response, operation)

    @staticmethod
    def _parse_response(response: httpx.Response, operation: str) -> dict[str, Any]:
        if response.status_code == 401:
            raise AuthenticationError(
                "GitHub rejected the token (HTTP 401). Run `gh auth login` and retry.",
                status_code=401,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise UpstreamError(
                f"{operation} returned HTTP {response.status_code} with a non-JSON body",
                status_code=response.status_code,
            ) from exc

        if not isinstance(body, dict):
            raise UpstreamError(f"{operation} returned an unexpected payload", status_code=response.status_code)

        errors = [e for e in body.get("errors") or [] if isinstance(e, dict)]
        if errors:
            raise _graphql_error(errors, response.status_code)

        if response.is_error:
            raise UpstreamError(
                f"{operation} failed with HTTP {response.status_code}: {body.get('message', '')}".rstrip(": "),
                status_code=response.status_code,
            )

        data = body.get("data")
        if not isinstance(data, dict):
            raise UpstreamError("GraphQL response missing data payload", status_code=response.status_code)
        return data


def _graphql_error(errors: list[dict[str, Any]], status_code: int) -> GhProjectsError:
    message = "; ".join(str(e.get("message", "unknown error")) for e in errors)
    if any(str(e.get("message", "")).startswith(SCOPES_ERROR_PREFIX) for e in errors):
        return AuthenticationError(f"{message}\nhint: {SCOPES_HINT}", errors=errors, status_code=status_code)
    if all(e.get("type") == "NOT_FOUND" for e in errors):
        return NotFoundError(message)
    return UpstreamError(message, errors=errors, status_code=status_code)
