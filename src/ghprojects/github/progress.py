"""Progress reporting protocol for GraphQL requests.

The client emits request lifecycle events; consumers (e.g. the CLI's Rich
spinner) implement ``RequestProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class RequestProgress(ABC):
    """Observer interface for in-flight GraphQL requests."""

    @abstractmethod
    def request_start(self, operation: str) -> None:
        """A request for *operation* has been sent."""
        ...  # pragma: no cover

    @abstractmethod
    def request_done(self, operation: str) -> None:
        """The request for *operation* finished, successfully or not."""
        ...  # pragma: no cover


class NullRequestProgress(RequestProgress):
    """No-op implementation used when no progress display is requested."""

    def request_start(self, operation: str) -> None:
        pass

    def request_done(self, operation: str) -> None:
        pass
