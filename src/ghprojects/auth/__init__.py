"""Authentication token resolvers."""

from ghprojects.auth.base import TokenResolver
from ghprojects.auth.factory import create_token_resolver
from ghprojects.auth.resolvers import EnvTokenResolver, GhCliTokenResolver, StaticTokenResolver

__all__ = [
    "EnvTokenResolver",
    "GhCliTokenResolver",
    "StaticTokenResolver",
    "TokenResolver",
    "create_token_resolver",
]
