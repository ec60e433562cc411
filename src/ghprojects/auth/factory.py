"""Token resolver factory."""

from __future__ import annotations

from ghprojects.auth.base import TokenResolver
from ghprojects.auth.resolvers.env import EnvTokenResolver
from ghprojects.auth.resolvers.gh_cli import GhCliTokenResolver
from ghprojects.auth.resolvers.static import StaticTokenResolver
from ghprojects.config import ClientConfig
from ghprojects.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "gh-cli": GhCliTokenResolver,
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: ClientConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "gh-cli":
        return GhCliTokenResolver(hostname=config.hostname)
    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")
