"""Public API surface for ghprojects."""

__version__ = "0.1.0"

from ghprojects.auth import create_token_resolver
from ghprojects.config import ClientConfig, load_config
from ghprojects.exceptions import (
    AuthenticationError,
    ConfigError,
    GhProjectsError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from ghprojects.github.client import GraphQLClient
from ghprojects.models import Owner, OwnerSelector, OwnerType, Project, ProjectItem, ProjectSummary

__all__ = [
    "AuthenticationError",
    "ClientConfig",
    "ConfigError",
    "GhProjectsError",
    "GraphQLClient",
    "NotFoundError",
    "Owner",
    "OwnerSelector",
    "OwnerType",
    "Project",
    "ProjectItem",
    "ProjectSummary",
    "UpstreamError",
    "ValidationError",
    "__version__",
    "create_token_resolver",
    "load_config",
]
