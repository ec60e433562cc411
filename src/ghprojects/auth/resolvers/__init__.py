"""Concrete token resolvers."""

from ghprojects.auth.resolvers.env import EnvTokenResolver
from ghprojects.auth.resolvers.gh_cli import GhCliTokenResolver
from ghprojects.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "GhCliTokenResolver", "StaticTokenResolver"]
