"""Exception hierarchy for ghprojects.

All ghprojects exceptions inherit from :class:`GhProjectsError`, making it easy
to catch any library error with a single ``except`` clause while still allowing
callers to handle specific failure modes.
"""

from __future__ import annotations


class GhProjectsError(Exception):
    """Base exception for all ghprojects errors."""


class ConfigError(GhProjectsError):
    """Missing, conflicting, or unusable options or configuration."""


class ValidationError(GhProjectsError):
    """Input accepted by the parser but rejected by business rules."""


class NotFoundError(GhProjectsError):
    """An addressed owner, project, or field does not exist."""


class UpstreamError(GhProjectsError):
    """Transport-level or GraphQL-level failure reported by GitHub.

    Attributes:
        errors: Raw GraphQL error entries, empty for transport failures.
        status_code: HTTP status code when the failure came from a response.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, object]] | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or []
        self.status_code = status_code


class AuthenticationError(UpstreamError):
    """Authentication/authorization failure."""
